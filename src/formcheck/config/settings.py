"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs   (CLI flags passed by Click)
  2. Env vars      (``FORMCHECK_*``, nested sections via ``__``)
  3. TOML file     (``formcheck.toml`` discovered via walk-up)
  4. Code defaults (baked into the section models)

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` fed
by the walk-up discovery in :mod:`formcheck.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from formcheck.config.discovery import find_config
from formcheck.config.models import OutputConfig, ValidationConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``formcheck.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed from from_cli() to settings_customise_sources().
_tls = threading.local()


class FormcheckSettings(BaseSettings):
    """Settings for one formcheck invocation.

    Built once at the CLI root and stored on the click context.  The
    ``validation`` section becomes the ValidationConfig every engine
    call in the invocation receives.

    Attributes:
        config_path: The TOML file that was read, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FORMCHECK_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        no_sanitize: bool = False,
        spec_only: bool = False,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> FormcheckSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when given, otherwise walks up from *start*
        (default: cwd).  ``--no-sanitize`` and ``--spec-only`` switch
        off their validation options over every other source.
        """
        toml_path: Path | None
        if config_path:
            p = Path(config_path)
            toml_path = p if p.is_file() else None
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            settings = cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

        overrides: dict[str, bool] = {}
        if no_sanitize:
            overrides["sanitize_input"] = False
        if spec_only:
            overrides["use_better_validation"] = False
        if overrides:
            validation = settings.validation.model_copy(update=overrides)
            settings = settings.model_copy(update={"validation": validation})
        return settings
