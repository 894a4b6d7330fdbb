"""Value sanitization shared by the validators."""

from __future__ import annotations

import re

from formcheck.config.models import ValidationConfig

_LINE_BREAKS = re.compile(r"\r\n|\n|\r")


def sanitize(value: str, config: ValidationConfig, *, linebreaks_only: bool = False) -> str:
    """Strip line breaks, then surrounding whitespace unless *linebreaks_only*.

    Returns *value* untouched when sanitization is disabled.

    Examples:
        >>> sanitize("  a\\nb  ", ValidationConfig())
        'ab'
        >>> sanitize("  a\\nb  ", ValidationConfig(), linebreaks_only=True)
        '  ab  '
    """
    if not config.sanitize_input:
        return value
    value = _LINE_BREAKS.sub("", value)
    if linebreaks_only:
        return value
    return value.strip()


def sanitize_attribute(raw: str | None, config: ValidationConfig) -> str | None:
    """Sanitize an optional attribute string, keeping ``None`` as ``None``."""
    if raw is None:
        return None
    return sanitize(raw, config)
