"""Tests for color, email and url format checks."""

from __future__ import annotations

import pytest

from formcheck.config.models import ValidationConfig
from formcheck.domain.types import ErrorKind
from formcheck.validators.colors import SVG_COLOR_KEYWORDS
from formcheck.validators.formats import (
    MSG_EMAIL,
    MSG_HEX_COLOR,
    MSG_SIMPLE_COLOR,
    MSG_URL,
    MSG_WEB_ADDRESS,
    check_color,
    check_email,
    check_url,
)
from tests.conftest import make_field


def _color(value: str, config: ValidationConfig):
    return check_color(make_field(type="color", value=value), config)


def _email(value: str, config: ValidationConfig):
    return check_email(make_field(type="email", value=value), config)


def _url(value: str, config: ValidationConfig):
    return check_url(make_field(type="url", value=value), config)


class TestColor:
    def test_keyword_table(self) -> None:
        assert len(SVG_COLOR_KEYWORDS) == 147
        assert "rebeccapurple" not in SVG_COLOR_KEYWORDS
        assert "transparent" not in SVG_COLOR_KEYWORDS

    @pytest.mark.parametrize("value", ["#FF0000", "#00ff00", "#AbCdEf"])
    def test_six_digit_hex(self, value: str, config: ValidationConfig) -> None:
        assert _color(value, config)

    @pytest.mark.parametrize("value", ["red", "cornflowerblue", "#f00", " red "])
    def test_better_validation_extras(self, value: str, config: ValidationConfig) -> None:
        assert _color(value, config)

    def test_extras_rejected_without_better_validation(
        self, spec_only: ValidationConfig
    ) -> None:
        verdict = _color("red", spec_only)
        assert verdict.kind is ErrorKind.TYPE_MISMATCH
        assert verdict.message == MSG_HEX_COLOR

    def test_transparent(self, config: ValidationConfig) -> None:
        verdict = _color("transparent", config)
        assert verdict.kind is ErrorKind.TYPE_MISMATCH
        assert verdict.message == MSG_HEX_COLOR

    def test_empty(self, config: ValidationConfig) -> None:
        assert _color("", config).message == MSG_HEX_COLOR

    @pytest.mark.parametrize("value", ["#ff00zz", "#ff00", "blurple", "FF0000"])
    def test_garbage(self, value: str, config: ValidationConfig) -> None:
        verdict = _color(value, config)
        assert verdict.kind is ErrorKind.TYPE_MISMATCH
        assert verdict.message == MSG_SIMPLE_COLOR


class TestEmail:
    @pytest.mark.parametrize(
        "value",
        [
            "user@example.com",
            "first.last@sub.example.org",
            "o'brien+tag@example.co",
            "root@192.168.0.1",
            " user@example.com ",
        ],
    )
    def test_valid_strict(self, value: str, config: ValidationConfig) -> None:
        assert _email(value, config)

    @pytest.mark.parametrize(
        "value",
        ["user@localhost", "user@", "@example.com", "user example@example.com", "a@b..com"],
    )
    def test_invalid_strict(self, value: str, config: ValidationConfig) -> None:
        verdict = _email(value, config)
        assert verdict.kind is ErrorKind.TYPE_MISMATCH
        assert verdict.message == MSG_EMAIL

    def test_minimal_grammar_without_better_validation(
        self, spec_only: ValidationConfig
    ) -> None:
        assert _email("user@localhost", spec_only)
        assert not _email("user@", spec_only)

    def test_surrounding_space_without_sanitizing(self, raw_input: ValidationConfig) -> None:
        assert not _email(" user@example.com", raw_input)


class TestUrl:
    @pytest.mark.parametrize(
        "value",
        [
            "http://example.com",
            "https://example.com/path/to/page",
            "ftp://files.example.com/pub",
            "mailto:someone@example.com",
            "urn:isbn:0451450523",
            "HTTP://EXAMPLE.COM",
        ],
    )
    def test_valid(self, value: str, config: ValidationConfig) -> None:
        assert _url(value, config)

    @pytest.mark.parametrize("value", ["example.com", "//example.com", "1http://x", ""])
    def test_missing_scheme(self, value: str, config: ValidationConfig) -> None:
        verdict = _url(value, config)
        assert verdict.kind is ErrorKind.TYPE_MISMATCH
        assert verdict.message == MSG_URL

    @pytest.mark.parametrize("value", ["http://", "https:", "http://user@example.com"])
    def test_bad_web_address(self, value: str, config: ValidationConfig) -> None:
        verdict = _url(value, config)
        assert verdict.kind is ErrorKind.TYPE_MISMATCH
        assert verdict.message == MSG_WEB_ADDRESS

    def test_web_address_rules_need_better_validation(
        self, spec_only: ValidationConfig
    ) -> None:
        assert _url("http://", spec_only)
