"""Command: validate every field in a descriptor file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from formcheck.commands._base import FormcheckCommand

if TYPE_CHECKING:
    from formcheck.commands._context import AppContext


@click.command(
    cls=FormcheckCommand,
    examples="""\
  formcheck check signup.yaml
  formcheck check signup.json --all-errors
  formcheck --json check signup.yaml --all-errors
  formcheck --spec-only check legacy-form.yaml""",
)
@click.argument("file", type=click.Path(path_type=Path))
@click.option(
    "--all-errors",
    is_flag=True,
    help="List every invalid field instead of stopping at the first.",
)
@click.pass_obj
def check(app: AppContext, file: Path, all_errors: bool) -> None:
    """Validate the fields described in FILE (JSON or YAML).

    Exits with status 1 when any field is invalid or FILE cannot be read.
    """
    app.emit(app.service().check_file(file, all_errors=all_errors))
