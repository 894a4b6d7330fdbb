"""Tests for field descriptors and radio-group lookup."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from formcheck.domain.fields import (
    FieldDescriptor,
    RadioGroups,
    SelectOption,
    parse_int_attribute,
)
from formcheck.domain.types import InputType
from tests.conftest import make_field


class TestParseIntAttribute:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("12", 12),
            ("12.7", 12),
            (" 5", 5),
            ("-3", -3),
            ("+4", 4),
            ("10px", 10),
            ("abc", None),
            ("", None),
            (None, None),
            (True, None),
            (7, 7),
            (3.9, 3),
        ],
    )
    def test_leading_digits(self, raw: object, expected: int | None) -> None:
        assert parse_int_attribute(raw) == expected


class TestFieldDescriptor:
    def test_defaults(self) -> None:
        field = FieldDescriptor()
        assert field.type is InputType.TEXT
        assert field.value == ""
        assert field.max_length is None
        assert field.options == ()

    def test_type_is_case_insensitive(self) -> None:
        assert make_field(type=" Email ").type is InputType.EMAIL

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_field(type="datetime-local")

    def test_value_coercion(self) -> None:
        assert make_field(value=None).value == ""
        assert make_field(value=5).value == "5"
        assert make_field(value=2.5).value == "2.5"

    def test_numeric_attributes_become_strings(self) -> None:
        field = make_field(type="number", min=0, max=10.5, step=2)
        assert (field.min, field.max, field.step) == ("0", "10.5", "2")

    @pytest.mark.parametrize("key", ["max_length", "maxlength", "maxLength"])
    def test_maxlength_aliases(self, key: str) -> None:
        assert make_field(**{key: "8"}).max_length == 8

    def test_message_alias(self) -> None:
        assert make_field(message="Pick one").custom_message == "Pick one"

    def test_frozen(self) -> None:
        field = make_field(value="a")
        with pytest.raises(ValidationError):
            field.value = "b"  # type: ignore[misc]

    def test_group_key(self) -> None:
        assert make_field(name="color", form="f1").group_key == ("f1", "color")


class TestSelect:
    def test_selected_index_from_options(self) -> None:
        field = make_field(
            type="select",
            options=[{"value": "", "label": "Choose"}, {"value": "a", "selected": True}],
        )
        assert field.effective_selected_index == 1
        assert field.selected_value == "a"

    def test_explicit_selected_index_wins(self) -> None:
        field = make_field(
            type="select",
            selectedIndex=0,
            options=[{"value": "x"}, {"value": "a", "selected": True}],
        )
        assert field.selected_value == "x"

    def test_nothing_selected(self) -> None:
        field = make_field(type="select", options=[{"value": "a"}])
        assert field.effective_selected_index == -1
        assert field.selected_value == ""

    def test_label_stands_in_for_missing_value(self) -> None:
        assert SelectOption(label="  Red ").effective_value == "Red"
        assert SelectOption(value="", label="Red").effective_value == ""


class TestRadioGroups:
    def test_from_fields(self) -> None:
        fields = [
            make_field(type="radio", name="size", value="s"),
            make_field(type="radio", name="size", value="m", checked=True),
            make_field(type="radio", name="color", value="red"),
        ]
        groups = RadioGroups.from_fields(fields)
        assert len(groups) == 1
        assert groups.any_checked(fields[0])
        assert not groups.any_checked(fields[2])

    def test_groups_do_not_cross_forms(self) -> None:
        checked = make_field(type="radio", name="size", form="a", checked=True)
        other = make_field(type="radio", name="size", form="b")
        assert not RadioGroups.from_fields([checked, other]).any_checked(other)

    def test_checked_field_needs_no_group(self) -> None:
        field = make_field(type="radio", name="x", checked=True)
        assert RadioGroups().any_checked(field)

    def test_checked_checkbox_not_a_group(self) -> None:
        field = make_field(type="checkbox", name="x", checked=True)
        assert len(RadioGroups.from_fields([field])) == 0
