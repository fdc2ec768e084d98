"""Options shared by commands that describe a single field."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from inputcounter.domain.fields import FieldDescriptor, FieldVariant, FieldWrapper


def field_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach --key/--type/--max/--value/--class/--id options."""
    options = [
        click.option("--key", default="field_1", show_default=True, help="Field key."),
        click.option(
            "--type",
            "variant",
            type=click.Choice([v.value for v in FieldVariant]),
            default=FieldVariant.TEXT.value,
            show_default=True,
            help="Field type.",
        ),
        click.option(
            "--max",
            "maximum",
            type=click.IntRange(min=0),
            default=0,
            help="Configured maximum length (0 = unlimited).",
        ),
        click.option("--value", default="", help="Current raw value."),
        click.option("--class", "css_class", default="", help="Wrapper class attribute."),
        click.option("--id", "wrapper_id", default="", help="Wrapper id attribute."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_descriptor(
    *,
    key: str,
    variant: str,
    maximum: int,
    value: str,
    css_class: str,
    wrapper_id: str,
) -> FieldDescriptor:
    return FieldDescriptor(
        key=key,
        variant=FieldVariant(variant),
        maxlength=maximum or None,
        value=value,
        wrapper=FieldWrapper(css_class=css_class, id=wrapper_id),
    )
