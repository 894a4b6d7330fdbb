"""Rich Console factory and theme for formcheck output.

Consoles render into a StringIO buffer so every renderer keeps the
``render(...) -> str`` shape.  Rich drops color codes on its own when
the output is not a terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FC_THEME = Theme(
    {
        "fc.ok": "bold green",
        "fc.invalid": "bold red",
        "fc.error": "bold red",
        "fc.warning": "bold yellow",
        "fc.op": "bold cyan",
        "fc.key": "dim",
        "fc.name": "bold",
        "fc.value": "italic",
        "fc.kind.missing": "yellow",
        "fc.kind.format": "magenta",
        "fc.kind.bounds": "red",
    }
)

_KIND_STYLES: dict[str, str] = {
    "valueMissing": "fc.kind.missing",
    "patternMismatch": "fc.kind.format",
    "typeMismatch": "fc.kind.format",
    "tooLong": "fc.kind.bounds",
    "rangeOverflow": "fc.kind.bounds",
    "rangeUnderflow": "fc.kind.bounds",
    "stepMismatch": "fc.kind.bounds",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps tables stable in tests).
    """
    return Console(
        file=StringIO(),
        theme=FC_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str | None) -> str:
    """Return the Rich style name for an error kind."""
    return _KIND_STYLES.get(kind or "", "")


def clip(value: str, width: int) -> str:
    """Shorten *value* to *width* characters, marking the cut with an ellipsis."""
    if len(value) <= width:
        return value
    return value[: width - 1] + "…"
