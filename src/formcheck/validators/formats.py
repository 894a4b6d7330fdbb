"""Format checks for color, email and url inputs.

Each check fails with ``typeMismatch``.  With ``use_better_validation``
the stricter grammars browsers ship in practice replace the minimal
ones the HTML standard requires.
"""

from __future__ import annotations

import re

from formcheck.config.models import ValidationConfig
from formcheck.domain.fields import FieldDescriptor
from formcheck.domain.types import ErrorKind
from formcheck.domain.verdict import Verdict
from formcheck.validators._sanitize import sanitize
from formcheck.validators.colors import SVG_COLOR_KEYWORDS

# --- color ---

HEX_COLOR = re.compile(r"#[0-9a-f]{6}", re.IGNORECASE)
SHORT_HEX_COLOR = re.compile(r"#[0-9a-f]{3}", re.IGNORECASE)

MSG_HEX_COLOR = 'This is not a valid hex color. e.g. "#FF0000"'
MSG_SIMPLE_COLOR = 'This is not a valid hex color. e.g. "#F00"'


def check_color(field: FieldDescriptor, config: ValidationConfig) -> Verdict:
    """Accept ``#rrggbb``; with better validation also keywords and ``#rgb``.

    ``transparent`` is a legal CSS color but never a valid color input.
    """
    value = field.value
    if HEX_COLOR.fullmatch(value):
        return Verdict.valid()
    if not config.use_better_validation or len(value) == 0:
        return Verdict.invalid(ErrorKind.TYPE_MISMATCH, MSG_HEX_COLOR)

    value = sanitize(value, config)
    if value.lower() == "transparent":
        return Verdict.invalid(ErrorKind.TYPE_MISMATCH, MSG_HEX_COLOR)
    if value in SVG_COLOR_KEYWORDS:
        return Verdict.valid()
    if SHORT_HEX_COLOR.fullmatch(value):
        return Verdict.valid()
    return Verdict.invalid(ErrorKind.TYPE_MISMATCH, MSG_SIMPLE_COLOR)


# --- email ---

EMAIL = re.compile(r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)*")

_ATOM = r"[-a-z0-9~!$%^&*_=+}{'?]+"
_TLD = (
    r"aero|arpa|biz|com|coop|edu|gov|info|int|mil|museum"
    r"|name|net|org|pro|travel|mobi|xxx|[a-z][a-z]"
)
_IPV4 = r"[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}"
EMAIL_STRICT = re.compile(
    rf"{_ATOM}(?:\.{_ATOM})*"
    rf"@(?:[a-z0-9_][-a-z0-9_]*(?:\.[-a-z0-9_]+)*\.(?:{_TLD})|{_IPV4})"
    r"(?::[0-9]{1,5})?",
    re.IGNORECASE,
)

MSG_EMAIL = "This is not a valid email address."


def check_email(field: FieldDescriptor, config: ValidationConfig) -> Verdict:
    regex = EMAIL_STRICT if config.use_better_validation else EMAIL
    if regex.fullmatch(sanitize(field.value, config)) is None:
        return Verdict.invalid(ErrorKind.TYPE_MISMATCH, MSG_EMAIL)
    return Verdict.valid()


# --- url ---

URL_SCHEME = re.compile(r"[a-z][a-z0-9+\-.]*:", re.IGNORECASE)
WEB_SCHEME = re.compile(r"(?:ftp|https?):", re.IGNORECASE)

# Characters browsers reject anywhere after a web scheme.
_BANNED = r"@~=;\[\]%^"
WEB_ADDRESS = re.compile(
    r"(?:ftp|https?):(?:"
    rf"//[^/:#\\{_BANNED}][^{_BANNED}]*"
    rf"|/[^/:#\\{_BANNED}][^{_BANNED}]*"
    rf"|[^/:#\\{_BANNED}][^/{_BANNED}]*[^{_BANNED}]*"
    r")",
    re.IGNORECASE,
)

MSG_URL = "This is not a valid URL."
MSG_WEB_ADDRESS = "This is not a valid web address."


def check_url(field: FieldDescriptor, config: ValidationConfig) -> Verdict:
    """Require a URI scheme; ftp/http/https also need a non-empty authority or path."""
    value = sanitize(field.value, config)
    if URL_SCHEME.match(value) is None:
        return Verdict.invalid(ErrorKind.TYPE_MISMATCH, MSG_URL)
    if config.use_better_validation and WEB_SCHEME.match(value):
        if WEB_ADDRESS.fullmatch(value) is None:
            return Verdict.invalid(ErrorKind.TYPE_MISMATCH, MSG_WEB_ADDRESS)
    return Verdict.valid()
