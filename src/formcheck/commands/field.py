"""Command: validate one ad-hoc field from flags."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from formcheck.commands._base import FormcheckCommand
from formcheck.domain.fields import FieldDescriptor
from formcheck.domain.types import InputType

if TYPE_CHECKING:
    from formcheck.commands._context import AppContext


@click.command(
    cls=FormcheckCommand,
    examples="""\
  formcheck field --type email --value a@b.com
  formcheck field --type number --value 7 --min 0 --step 5
  formcheck field --type week --value 2016-W53
  formcheck field --type text --value "" --required
  formcheck field --type checkbox --required --checked""",
)
@click.option(
    "--type",
    "input_type",
    type=click.Choice([t.value for t in InputType], case_sensitive=False),
    default=InputType.TEXT.value,
    show_default=True,
    help="Declared input type.",
)
@click.option("--value", default="", help="Current value.")
@click.option("--name", default="", help="Field name (shown in output).")
@click.option("--required", is_flag=True, help="Field is required.")
@click.option("--readonly", is_flag=True, help="Field is readonly.")
@click.option("--min", "minimum", default=None, help="min attribute.")
@click.option("--max", "maximum", default=None, help="max attribute.")
@click.option("--step", default=None, help="step attribute (a number or 'any').")
@click.option("--pattern", default=None, help="pattern attribute (regex, implicitly anchored).")
@click.option("--maxlength", "max_length", default=None, help="maxlength attribute.")
@click.option("--checked", is_flag=True, help="Checkbox/radio is checked.")
@click.option("--message", "custom_message", default=None, help="Custom error message.")
@click.pass_obj
def field(
    app: AppContext,
    input_type: str,
    value: str,
    name: str,
    required: bool,
    readonly: bool,
    minimum: str | None,
    maximum: str | None,
    step: str | None,
    pattern: str | None,
    max_length: str | None,
    checked: bool,
    custom_message: str | None,
) -> None:
    """Validate a single field described by the options."""
    try:
        descriptor = FieldDescriptor(
            name=name,
            type=input_type,
            value=value,
            required=required,
            readonly=readonly,
            min=minimum,
            max=maximum,
            step=step,
            pattern=pattern,
            max_length=max_length,
            checked=checked,
            custom_message=custom_message,
        )
    except ValidationError as exc:
        raise click.BadParameter(str(exc)) from exc
    app.emit(app.service().check_field(descriptor))
