"""Presence and shape checks: required, pattern, maxlength, select, textarea.

Every check assumes the dispatcher already decided it applies (for
example that the field is required) and only observes the constraint
it is named after.
"""

from __future__ import annotations

import logging
import re

from formcheck.config.models import ValidationConfig
from formcheck.domain.fields import FieldDescriptor, RadioGroups
from formcheck.domain.types import ErrorKind, InputType
from formcheck.domain.verdict import Verdict
from formcheck.validators._sanitize import sanitize

logger = logging.getLogger(__name__)

MSG_UNCHECKED = "Checkbox was left unchecked."
MSG_RADIO_UNCHECKED = "A radio option was not checked."
MSG_NO_VALUE = "There was no value for this field."
MSG_TOO_LONG = "The value exceeds the maxlength attribute."
MSG_NO_OPTION = "An option was not selected."
MSG_PLACEHOLDER = "No value was specified."
MSG_TEXTAREA_EMPTY = "Textarea was left empty."


def check_required(
    field: FieldDescriptor,
    config: ValidationConfig,
    radio_groups: RadioGroups | None = None,
) -> Verdict:
    """Fail ``valueMissing`` when a required field carries no value.

    Checkboxes must be checked; a radio passes when any member of its
    ``(form, name)`` group is checked.  Every other type fails when the
    value is empty once line breaks are removed.
    """
    if field.type is InputType.CHECKBOX:
        if not field.checked:
            return Verdict.invalid(ErrorKind.VALUE_MISSING, MSG_UNCHECKED)
        return Verdict.valid()

    if field.type is InputType.RADIO:
        groups = radio_groups if radio_groups is not None else RadioGroups()
        if not groups.any_checked(field):
            return Verdict.invalid(ErrorKind.VALUE_MISSING, MSG_RADIO_UNCHECKED)
        return Verdict.valid()

    if len(sanitize(field.value, config, linebreaks_only=True)) == 0:
        return Verdict.invalid(ErrorKind.VALUE_MISSING, MSG_NO_VALUE)
    return Verdict.valid()


def compile_pattern(pattern: str) -> re.Pattern[str] | None:
    """Compile ``^(?:pattern)$`` semantics; ``None`` when the source is not a valid regex."""
    try:
        return re.compile(f"(?:{pattern})")
    except re.error as exc:
        logger.debug("Ignoring invalid pattern %r: %s", pattern, exc)
        return None


def check_pattern(field: FieldDescriptor, config: ValidationConfig) -> Verdict:
    """Fail ``patternMismatch`` unless the whole value matches the pattern.

    The pattern is case-sensitive and single-line.  A field without a
    pattern, or with one that does not compile, always passes.
    """
    if not field.pattern:
        return Verdict.valid()
    compiled = compile_pattern(field.pattern)
    if compiled is None:
        return Verdict.valid()
    value = sanitize(field.value, config, linebreaks_only=True)
    if compiled.fullmatch(value) is None:
        return Verdict.invalid(
            ErrorKind.PATTERN_MISMATCH,
            f'The value does not match the pattern: "/^(?:{field.pattern})$/".',
        )
    return Verdict.valid()


def _utf16_length(value: str) -> int:
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def check_max_length(field: FieldDescriptor) -> Verdict:
    """Fail ``tooLong`` when the raw value is longer than ``max_length``.

    Length is counted in UTF-16 code units like a browser does, so an
    emoji counts as two.  A missing or negative ``max_length`` disables
    the check.
    """
    if field.max_length is None or field.max_length < 0:
        return Verdict.valid()
    if _utf16_length(field.value) > field.max_length:
        return Verdict.invalid(ErrorKind.TOO_LONG, MSG_TOO_LONG)
    return Verdict.valid()


def check_select(field: FieldDescriptor) -> Verdict:
    """Fail ``valueMissing`` when a required select has no real selection.

    The placeholder case covers an option whose value attribute is empty,
    and an option with no value attribute whose label is blank.
    """
    index = field.effective_selected_index
    if index < 0 or index >= len(field.options):
        return Verdict.invalid(ErrorKind.VALUE_MISSING, MSG_NO_OPTION)

    # An option without a value attribute reports its trimmed label.
    if field.options[index].effective_value == "":
        return Verdict.invalid(ErrorKind.VALUE_MISSING, MSG_PLACEHOLDER)
    return Verdict.valid()


def check_textarea(field: FieldDescriptor) -> Verdict:
    if field.required and len(field.value) == 0:
        return Verdict.invalid(ErrorKind.VALUE_MISSING, MSG_TEXTAREA_EMPTY)
    return Verdict.valid()
