"""Authoritative length validation.

Client-side gating can be bypassed (scripting disabled, programmatic
submission, a buggy client), so this check is the sole source of truth
for accepting a submitted value. It uses the same normalizer as the live
counter, so the two always agree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from inputcounter.domain.fields import FieldDescriptor
from inputcounter.domain.normalize import content_length

logger = logging.getLogger(__name__)

INVALID_MESSAGE = "Field is {length} characters but must be no more than {maximum}"


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one submitted value.

    ``message`` is set only when the value is invalid.
    """

    valid: bool
    length: int = 0
    maximum: int = 0
    message: str | None = None

    @classmethod
    def ok(cls, length: int = 0, maximum: int = 0) -> ValidationOutcome:
        return cls(valid=True, length=length, maximum=maximum)

    @classmethod
    def invalid(cls, length: int, maximum: int) -> ValidationOutcome:
        message = INVALID_MESSAGE.format(length=length, maximum=maximum)
        return cls(valid=False, length=length, maximum=maximum, message=message)


def validate(value: str | None, maximum: int | None) -> ValidationOutcome:
    """Check *value* against *maximum* visible characters.

    A missing or non-positive *maximum* means unlimited: always valid.

    Examples:
        >>> validate("<p>Hello  world</p>\\n", 5).message
        'Field is 11 characters but must be no more than 5'
        >>> validate("&amp;", 1).valid
        True
    """
    if not maximum or maximum <= 0:
        return ValidationOutcome.ok()
    length = content_length(value)
    if length > maximum:
        logger.debug("Rejected value of %d characters (maximum %d)", length, maximum)
        return ValidationOutcome.invalid(length, maximum)
    return ValidationOutcome.ok(length, maximum)


def validate_field(descriptor: FieldDescriptor, value: str | None = None) -> ValidationOutcome:
    """Validate *value* (default: the descriptor's own value) for a field."""
    return validate(descriptor.value if value is None else value, descriptor.limit)


def validate_value(
    valid: bool | str,
    value: str | None,
    descriptor: FieldDescriptor,
) -> bool | str:
    """Host validation-filter adapter.

    The host passes its current verdict in *valid* and reads a string
    return as a field-level error message. Within limits, the incoming
    verdict passes through untouched.
    """
    outcome = validate_field(descriptor, value if value is not None else "")
    if outcome.valid:
        return valid
    assert outcome.message is not None
    return outcome.message
