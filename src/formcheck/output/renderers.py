"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Validation failures carry their verdicts in ``result.data`` and go to
the op renderer too; other failures use the generic error line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from formcheck.output.console import clip, create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from formcheck.services.result import ServiceResult

INVALID = "INVALID"


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult, *, verbose: bool = False, max_value_width: int = 40
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    is_verdict = result.ok or (result.error is not None and result.error.code == INVALID)
    renderer = _OP_RENDERERS.get(result.op) if is_verdict else None
    if renderer is None:
        if result.ok:
            _render_generic(result, console, verbose=verbose)
        else:
            _render_error(result, console, verbose=verbose)
    else:
        renderer(result, console, verbose=verbose, max_value_width=max_value_width)

    if verbose:
        _render_meta(console, result)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: one line per invalid field."""
    if result.ok:
        return f"OK: {result.op}"

    errors = result.data.get("errors")
    if errors:
        return "\n".join(f"{e.get('name') or '-'}: {e.get('error')}" for e in errors)
    if result.data.get("error"):
        return f"{result.data.get('name') or '-'}: {result.data['error']}"

    msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} - {msg}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/INVALID status line."""
    if result.ok:
        console.print(Text("OK", style="fc.ok"), Text(f"  {result.op}", style="fc.op"), sep="")
        return
    msg = result.error.message if result.error else ""
    console.print(
        Text("INVALID", style="fc.invalid"),
        Text(f"  {result.op}", style="fc.op"),
        Text(f" - {msg}"),
        sep="",
    )


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="fc.key")
    if key == "name":
        v = Text(str(value), style="fc.name")
    elif key == "error":
        v = Text(str(value), style=style_for_kind(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    console.print(
        Text("ERROR", style="fc.error"),
        Text(f"  {result.op}", style="fc.op"),
        Text(f" - {msg}{code}"),
        sep="",
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Validation renderers ──────────────────────────────────────────────


def _render_check_file(
    result: ServiceResult, console: Console, *, verbose: bool = False, max_value_width: int = 40
) -> None:
    """Render a whole-form check: summary fields, then invalid fields as a table."""
    _status_line(console, result)
    data = result.data
    for key in ("source", "fields"):
        if data.get(key) is not None:
            _field(console, key, data[key])
    if data.get("skipped"):
        _field(console, "skipped", "novalidate")
        return

    errors = data.get("errors")
    if errors is None:
        # Single-verdict mode
        if data.get("error"):
            _field(console, "error", data["error"])
            _field(console, "message", data.get("message", ""))
        return
    if not errors:
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Name", style="fc.name")
    table.add_column("Type")
    table.add_column("Error")
    table.add_column("Value", style="fc.value")
    table.add_column("Message")
    for err in errors:
        kind = str(err.get("error", ""))
        table.add_row(
            Text(str(err.get("name") or "-")),
            Text(str(err.get("type", ""))),
            Text(kind, style=style_for_kind(kind)),
            Text(clip(str(err.get("value", "")), max_value_width)),
            Text(str(err.get("message", ""))),
        )
    console.print()
    console.print(table)


def _render_check_field(
    result: ServiceResult, console: Console, *, verbose: bool = False, max_value_width: int = 40
) -> None:
    """Render an ad-hoc single field check."""
    _status_line(console, result)
    data = result.data
    if data.get("name"):
        _field(console, "name", data["name"])
    _field(console, "type", data.get("type", ""))
    _field(console, "value", clip(str(data.get("value", "")), max_value_width))
    if data.get("error"):
        _field(console, "error", data["error"])
        _field(console, "message", data.get("message", ""))


_OP_RENDERERS: dict[str, Any] = {
    "check_file": _render_check_file,
    "check_submission": _render_check_file,
    "check_field": _render_check_field,
}
