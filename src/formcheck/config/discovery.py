"""Config file discovery and loading.

Walk-up finder locates formcheck.toml, the way git finds .git/.
``FORMCHECK_CONFIG`` and the ``--config`` flag override discovery.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from formcheck.config.models import FormcheckConfig

CONFIG_FILENAME = "formcheck.toml"
CONFIG_ENV_VAR = "FORMCHECK_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for formcheck.toml.

    ``FORMCHECK_CONFIG`` wins when set; it names the file directly and
    yields None if that file does not exist.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> FormcheckConfig:
    """Load and validate a formcheck.toml.

    Discovers the file from *cwd* when *path* is None and returns the
    defaults when nothing is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return FormcheckConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return FormcheckConfig.model_validate(data)
