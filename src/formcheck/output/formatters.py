"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich tables and styles) or
machines (``--json``).  This module picks the mode; the Rich work lives
in :mod:`formcheck.output.renderers`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from formcheck.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from formcheck.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output-mode switches resolved from CLI flags and the [output] section."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    max_value_width: int = 40


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON mode wins over quiet mode; JSON always carries the full payload.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result, verbose=settings.verbose, max_value_width=settings.max_value_width
    )
