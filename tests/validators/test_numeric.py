"""Tests for number and range checks."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from formcheck.config.models import ValidationConfig
from formcheck.domain.types import ErrorKind
from formcheck.validators.numeric import MSG_NUMBER, check_number, check_range, parse_number
from tests.conftest import make_field


def _number(config: ValidationConfig, value: str, **attrs: str):
    return check_number(make_field(type="number", value=value, **attrs), config)


class TestParseNumber:
    def test_valid(self) -> None:
        assert str(parse_number("1.50")) == "1.5"

    @pytest.mark.parametrize("text", [None, "", "abc", "1,5", "+1", "Infinity", "NaN"])
    def test_invalid(self, text: str | None) -> None:
        assert parse_number(text) is None

    def test_outside_double_range(self) -> None:
        assert parse_number("1e308") is not None
        assert parse_number("1e309") is None
        assert parse_number("1e-325") is None
        assert parse_number("0") is not None


class TestCheckNumber:
    @pytest.mark.parametrize("value", ["abc", "1,5", "--1", "1.", "0x1A"])
    def test_type_mismatch(self, value: str, config: ValidationConfig) -> None:
        verdict = _number(config, value)
        assert verdict.kind is ErrorKind.TYPE_MISMATCH
        assert verdict.message == MSG_NUMBER

    def test_surrounding_space_sanitized(self, config: ValidationConfig) -> None:
        assert _number(config, " 5 ")

    def test_surrounding_space_without_sanitizing(self, raw_input: ValidationConfig) -> None:
        assert _number(raw_input, " 5 ").kind is ErrorKind.TYPE_MISMATCH

    def test_step_from_min(self, config: ValidationConfig) -> None:
        assert _number(config, "10", min="0", step="5")
        verdict = _number(config, "7", min="0", step="5")
        assert verdict.kind is ErrorKind.STEP_MISMATCH
        assert verdict.message == "This number is not a valid step (5)."

    def test_decimal_step_is_exact(self, config: ValidationConfig) -> None:
        assert _number(config, "0.3", step="0.1")
        assert _number(config, "1.1", min="0.2", step="0.3")
        assert not _number(config, "1.0", min="0.2", step="0.3")

    def test_default_step_is_one(self, config: ValidationConfig) -> None:
        assert _number(config, "42")
        assert _number(config, "2.5").kind is ErrorKind.STEP_MISMATCH

    def test_special_step_follows_fractional_min(self, config: ValidationConfig) -> None:
        assert _number(config, "1.5", min="0.5")
        verdict = _number(config, "1", min="0.5")
        assert verdict.kind is ErrorKind.STEP_MISMATCH
        assert verdict.message == "This number is not a valid step (1)."

    @pytest.mark.parametrize("step", ["0", "-2", "abc", ""])
    def test_unusable_step_falls_back_to_one(self, step: str, config: ValidationConfig) -> None:
        assert _number(config, "3", step=step)
        assert not _number(config, "3.5", step=step)

    def test_step_any(self, config: ValidationConfig) -> None:
        assert _number(config, "1.2345", step="any")
        assert _number(config, "1.2345", step="ANY")

    @pytest.mark.parametrize("minimum", ["any", ""])
    def test_unbounded_min_anchors_on_value(self, minimum: str, config: ValidationConfig) -> None:
        assert _number(config, "2.5", min=minimum)
        assert _number(config, "-1000000.75", min=minimum)

    @pytest.mark.parametrize("minimum", ["any", ""])
    @pytest.mark.parametrize("value", ["-4", "0", "2", "4", "100"])
    def test_unbounded_min_counts_declared_step_from_zero(
        self, minimum: str, value: str, config: ValidationConfig
    ) -> None:
        assert _number(config, value, min=minimum, step="2")

    @pytest.mark.parametrize("value", ["3", "2.5"])
    def test_unbounded_min_still_honours_step(self, value: str, config: ValidationConfig) -> None:
        verdict = _number(config, value, min="any", step="2")
        assert verdict.kind is ErrorKind.STEP_MISMATCH

    def test_unbounded_min_decimal_step(self, config: ValidationConfig) -> None:
        assert _number(config, "0.9", min="any", step="0.3")
        assert not _number(config, "1", min="any", step="0.3")

    def test_malformed_min_is_ignored(self, config: ValidationConfig) -> None:
        assert _number(config, "-5", min="abc")
        assert _number(config, "2.5", min="abc").kind is ErrorKind.STEP_MISMATCH

    def test_overflow(self, config: ValidationConfig) -> None:
        verdict = _number(config, "11", max="10")
        assert verdict.kind is ErrorKind.RANGE_OVERFLOW
        assert verdict.message == "This number is larger than the maximum (10)."

    def test_underflow(self, config: ValidationConfig) -> None:
        verdict = _number(config, "-1", min="0")
        assert verdict.kind is ErrorKind.RANGE_UNDERFLOW
        assert verdict.message == "This number is smaller than the minimum (0)."

    def test_bounds_are_inclusive(self, config: ValidationConfig) -> None:
        assert _number(config, "0", min="0", max="10")
        assert _number(config, "10", min="0", max="10")
        assert _number(config, "1e3", max="1000")

    def test_bound_rendered_normalized(self, config: ValidationConfig) -> None:
        verdict = _number(config, "2", max="1.50", step="any")
        assert verdict.message == "This number is larger than the maximum (1.5)."

    def test_step_checked_before_bounds(self, config: ValidationConfig) -> None:
        assert _number(config, "11", max="10", step="2").kind is ErrorKind.STEP_MISMATCH

    def test_overflow_checked_before_underflow(self, config: ValidationConfig) -> None:
        assert _number(config, "5", min="10", max="0").kind is ErrorKind.RANGE_OVERFLOW

    @settings(max_examples=100, deadline=None)
    @given(
        start=st.integers(min_value=-1000, max_value=1000),
        step=st.integers(min_value=1, max_value=50),
        n=st.integers(min_value=0, max_value=100),
    )
    def test_values_on_grid_pass(self, start: int, step: int, n: int) -> None:
        value = start + n * step
        verdict = _number(ValidationConfig(), str(value), min=str(start), step=str(step))
        assert verdict.ok


class TestCheckRange:
    def test_type_mismatch(self, config: ValidationConfig) -> None:
        verdict = check_range(make_field(type="range", value="high"), config)
        assert verdict.kind is ErrorKind.TYPE_MISMATCH
        assert verdict.message == MSG_NUMBER

    def test_behaves_like_number_with_better_validation(self, config: ValidationConfig) -> None:
        field = make_field(type="range", value="500", min="0", max="100")
        assert check_range(field, config).kind is ErrorKind.RANGE_OVERFLOW

    def test_any_number_without_better_validation(self, spec_only: ValidationConfig) -> None:
        field = make_field(type="range", value="500.5", min="0", max="100")
        assert check_range(field, spec_only)
