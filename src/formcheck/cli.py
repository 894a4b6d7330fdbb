"""Root CLI group for formcheck with global flags and command registration."""

from __future__ import annotations

import click

from formcheck import __version__
from formcheck.commands import register_commands
from formcheck.commands._base import FormcheckGroup
from formcheck.commands._context import AppContext
from formcheck.config.settings import FormcheckSettings


@click.group(
    cls=FormcheckGroup,
    invoke_without_command=True,
    examples="""\
  formcheck check form.yaml
  formcheck --json check form.json --all-errors
  formcheck --no-sanitize field --type email --value " a@b.com"
  formcheck -c ./formcheck.toml field --type color --value aliceblue""",
)
@click.version_option(version=__version__, prog_name="formcheck")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--no-sanitize", is_flag=True, help="Validate values exactly as given.")
@click.option(
    "--spec-only",
    is_flag=True,
    help="Apply only the HTML standard rules (no stricter email/url/color checks).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    no_sanitize: bool,
    spec_only: bool,
) -> None:
    """formcheck: HTML5 constraint validation for form field descriptors."""
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    settings = FormcheckSettings.from_cli(
        config_path=config_path,
        no_sanitize=no_sanitize,
        spec_only=spec_only,
        # Unset flags leave room for FORMCHECK_* env vars and the TOML file.
        **{k: v for k, v in flags.items() if v},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
