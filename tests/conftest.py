"""Shared pytest fixtures and test helpers for formcheck tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from formcheck.config.discovery import CONFIG_ENV_VAR
from formcheck.config.logging import LOGGER_NAME
from formcheck.config.models import ValidationConfig
from formcheck.domain.fields import FieldDescriptor


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def config() -> ValidationConfig:
    """Default configuration: sanitize input, better validation on."""
    return ValidationConfig()


@pytest.fixture
def spec_only() -> ValidationConfig:
    """Configuration with better validation switched off."""
    return ValidationConfig(use_better_validation=False)


@pytest.fixture
def raw_input() -> ValidationConfig:
    """Configuration with sanitization switched off."""
    return ValidationConfig(sanitize_input=False)


@pytest.fixture(autouse=True)
def _isolated_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None]:
    """Keep a developer's formcheck.toml and FORMCHECK_* env out of tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    for name in list(os.environ):
        if name.startswith("FORMCHECK_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    fc = logging.getLogger(LOGGER_NAME)
    fc_level = fc.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    fc.setLevel(fc_level)


def make_field(**kwargs: Any) -> FieldDescriptor:
    """Build a FieldDescriptor, accepting the same aliases as descriptor files."""
    return FieldDescriptor.model_validate(kwargs)
