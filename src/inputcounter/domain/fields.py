"""Field descriptors — the host's view of one form field instance.

The host creates a descriptor when a field is defined or rendered. The
core reads it and never mutates it; ``value`` is observed, not owned.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class FieldVariant(StrEnum):
    """Field types that carry a character limit.

    Values are the host's declared field type names.
    """

    TEXT = "text"
    TEXTAREA = "textarea"
    WYSIWYG = "wysiwyg"


LIMITED_VARIANTS: frozenset[str] = frozenset(v.value for v in FieldVariant)


def is_limited_type(field_type: str) -> bool:
    """Return True when *field_type* is one of the limited field variants."""
    return field_type in LIMITED_VARIANTS


class FieldWrapper(BaseModel):
    """Wrapper attributes the host renders around a field's input."""

    model_config = {"frozen": True, "populate_by_name": True}

    css_class: str = Field(default="", alias="class")
    id: str = ""

    @field_validator("css_class", "id", mode="before")
    @classmethod
    def _none_is_blank(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def class_tokens(self) -> list[str]:
        return self.css_class.split()

    @property
    def id_tokens(self) -> list[str]:
        return self.id.split()


class FieldDescriptor(BaseModel):
    """One form field instance as supplied by the host.

    Attributes:
        key: Stable unique field key.
        variant: Declared field type.
        maxlength: Configured maximum; ``None`` or 0 means unlimited.
            A blank setting from the settings panel is read as ``None``.
        value: Current raw value, possibly containing markup.
        wrapper: Wrapper ``class``/``id`` used by the allow-list filter.
    """

    model_config = {"frozen": True}

    key: str
    variant: FieldVariant
    maxlength: int | None = Field(default=None, ge=0)
    value: str = ""
    wrapper: FieldWrapper = Field(default_factory=FieldWrapper)

    @field_validator("maxlength", mode="before")
    @classmethod
    def _blank_is_unlimited(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("value", mode="before")
    @classmethod
    def _none_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def limit(self) -> int:
        """Configured maximum as an int, 0 when unlimited."""
        return self.maxlength or 0

    @property
    def is_limited(self) -> bool:
        return self.limit > 0

    @classmethod
    def from_host(cls, field: dict[str, Any]) -> FieldDescriptor:
        """Build a descriptor from the host's field dictionary.

        Accepts the host's ``type`` key for the variant and tolerates
        missing ``maxlength``/``value``/``wrapper`` entries.
        """
        wrapper = field.get("wrapper") or {}
        return cls(
            key=field["key"],
            variant=field.get("variant") or field["type"],
            maxlength=field.get("maxlength"),
            value=field.get("value"),
            wrapper=FieldWrapper.model_validate(wrapper),
        )
