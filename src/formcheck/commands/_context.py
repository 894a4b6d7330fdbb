"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Owns the settings for the invocation and the
stdout/stderr routing and exit codes for results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formcheck.config.logging import configure_logging
from formcheck.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from formcheck.config.models import ValidationConfig
    from formcheck.config.settings import FormcheckSettings
    from formcheck.services.result import ServiceResult
    from formcheck.services.validation import ValidationService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: FormcheckSettings) -> None:
        self.settings = settings
        configure_logging(
            verbose=settings.verbose, quiet=settings.quiet, log_json=settings.log_json
        )

    @property
    def validation(self) -> ValidationConfig:
        """The ValidationConfig captured for this invocation."""
        return self.settings.validation

    def service(self) -> ValidationService:
        from formcheck.services.validation import ValidationService

        return ValidationService(self.validation)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, normal return.  Warnings go to stderr so they
          don't pollute piped output.
        * Failure (including invalid input): stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            max_value_width=self.settings.output.max_value_width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
