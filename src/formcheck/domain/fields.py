"""Field descriptors: the plain record the engine validates.

A binding layer (DOM walker, form library, request parser) produces one
FieldDescriptor per control.  Attribute values stay raw strings exactly
as declared; each validator decides how to interpret them.

All models use Pydantic with frozen config for immutability.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

from formcheck.domain.types import InputType

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int_attribute(raw: Any) -> int | None:
    """Read an integer attribute the way a browser does (leading digits only).

    Examples:
        >>> parse_int_attribute("12.7"), parse_int_attribute("abc")
        (12, None)
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw)
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else None


class SelectOption(BaseModel):
    """One ``<option>`` of a select element.

    ``value`` is None when the option has no explicit value attribute; the
    label text then stands in as the submitted value.
    """

    model_config = {"frozen": True}

    value: str | None = None
    label: str = ""
    selected: bool = False

    @property
    def effective_value(self) -> str:
        return self.value if self.value is not None else self.label.strip()


class FieldDescriptor(BaseModel):
    """Declared attributes and current value of one form control.

    Attributes:
        name: Control name; also the radio-group key together with ``form``.
        type: Declared input type (``select`` and ``textarea`` for those elements).
        value: Current raw value.
        min, max, step: Raw attribute strings; may be ``"any"``.
        max_length: ``maxlength`` attribute; negative values disable the check.
        checked: Checkedness for checkbox and radio.
        form: Owning form name (radio groups never cross forms).
        options: Options of a select element, in document order.
        selected_index: Explicit ``selectedIndex``; derived from options when omitted.
        custom_message: Caller-supplied message reported instead of the generated one.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    name: str = ""
    type: InputType = InputType.TEXT
    value: str = ""
    required: bool = False
    disabled: bool = False
    readonly: bool = False
    pattern: str | None = None
    min: str | None = None
    max: str | None = None
    step: str | None = None
    max_length: int | None = Field(
        default=None,
        validation_alias=AliasChoices("max_length", "maxlength", "maxLength"),
    )
    checked: bool = False
    form: str | None = None
    options: tuple[SelectOption, ...] = ()
    selected_index: int | None = Field(
        default=None,
        validation_alias=AliasChoices("selected_index", "selectedIndex"),
    )
    custom_message: str | None = Field(
        default=None,
        validation_alias=AliasChoices("custom_message", "message"),
    )

    @field_validator("type", mode="before")
    @classmethod
    def _lower_type(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("value", mode="before")
    @classmethod
    def _value_to_str(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("min", "max", "step", mode="before")
    @classmethod
    def _attribute_to_str(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("max_length", mode="before")
    @classmethod
    def _parse_max_length(cls, value: Any) -> int | None:
        return parse_int_attribute(value)

    # --- Derived views ---

    @property
    def group_key(self) -> tuple[str | None, str]:
        return (self.form, self.name)

    @property
    def effective_selected_index(self) -> int:
        """Index of the first selected option, or -1 when nothing is selected."""
        if self.selected_index is not None:
            return self.selected_index
        for index, option in enumerate(self.options):
            if option.selected:
                return index
        return -1

    @property
    def selected_value(self) -> str:
        """The value a select element reports for its current selection."""
        index = self.effective_selected_index
        if 0 <= index < len(self.options):
            return self.options[index].effective_value
        return ""


class RadioGroups:
    """Lookup of which radio groups have a checked member.

    Keys are ``(form, name)`` pairs; descriptors never own their siblings.
    """

    __slots__ = ("_checked",)

    def __init__(self, checked_groups: Iterable[tuple[str | None, str]] = ()) -> None:
        self._checked = frozenset(checked_groups)

    @classmethod
    def from_fields(cls, fields: Iterable[FieldDescriptor]) -> RadioGroups:
        return cls(f.group_key for f in fields if f.type is InputType.RADIO and f.checked)

    def any_checked(self, field: FieldDescriptor) -> bool:
        return field.checked or field.group_key in self._checked

    def __len__(self) -> int:
        return len(self._checked)
