"""Descriptor file loading (JSON or YAML).

A file holds either a bare list of field objects or a mapping::

    novalidate: false
    formnovalidate: false
    fields:
      - {name: age, type: number, value: 7, min: 0, step: 0.5}

Field keys follow :class:`FieldDescriptor`; ``maxlength``/``maxLength``
and ``selectedIndex`` are accepted as aliases.  YAML is parsed with
ruamel.yaml in safe mode; ``.json`` files go through the json module.

Unquoted numbers and YAML timestamps keep their source text, so
``value: 1.10`` reaches the validators as ``"1.10"`` and never passes
through a binary float.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.constructor import SafeConstructor
from ruamel.yaml.error import YAMLError

from formcheck.domain.errors import FormcheckError
from formcheck.domain.fields import FieldDescriptor
from formcheck.engine.report import FormSubmission

# Error codes surfaced in ServiceError.code
FILE_NOT_FOUND = "FILE_NOT_FOUND"
PARSE_ERROR = "PARSE_ERROR"
INVALID_DESCRIPTOR = "INVALID_DESCRIPTOR"

_SOURCE_TEXT_TAGS = (
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
)


class _DescriptorConstructor(SafeConstructor):
    """Safe constructor that leaves numbers and timestamps as written."""


def _construct_source_text(constructor: SafeConstructor, node: Any) -> str:
    return str(constructor.construct_scalar(node))


for _tag in _SOURCE_TEXT_TAGS:
    _DescriptorConstructor.add_constructor(_tag, _construct_source_text)


def _new_yaml() -> YAML:
    yaml = YAML(typ="safe")
    yaml.Constructor = _DescriptorConstructor
    return yaml


class DescriptorLoadError(FormcheckError):
    """A descriptor file could not be read or does not describe fields."""

    def __init__(self, code: str, message: str, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.detail = detail or {}


def read_document(path: Path) -> Any:
    """Parse *path* as JSON (``.json``) or YAML (anything else)."""
    if not path.is_file():
        raise DescriptorLoadError(FILE_NOT_FOUND, f"No such file: {path}", {"path": str(path)})
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise DescriptorLoadError(
            PARSE_ERROR, f"Cannot read {path}: {exc}", {"path": str(path)}
        ) from exc

    try:
        if path.suffix.lower() == ".json":
            return json.loads(raw, parse_float=str, parse_int=str)
        return _new_yaml().load(raw)
    except (json.JSONDecodeError, YAMLError) as exc:
        raise DescriptorLoadError(
            PARSE_ERROR, f"Invalid descriptor file {path}: {exc}", {"path": str(path)}
        ) from exc


def _validation_errors(exc: ValidationError) -> list[dict[str, str]]:
    return [
        {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]} for err in exc.errors()
    ]


def parse_submission(data: Any, *, source: str = "<data>") -> FormSubmission:
    """Build a FormSubmission from already-decoded JSON/YAML data."""
    flags: dict[str, Any] = {}
    if isinstance(data, list):
        items = data
    elif isinstance(data, dict) and isinstance(data.get("fields"), list):
        items = data["fields"]
        flags = {k: data[k] for k in ("novalidate", "formnovalidate") if k in data}
    else:
        raise DescriptorLoadError(
            INVALID_DESCRIPTOR,
            f"{source}: expected a list of fields or a mapping with a 'fields' list",
            {"source": source},
        )

    fields: list[FieldDescriptor] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise DescriptorLoadError(
                INVALID_DESCRIPTOR,
                f"{source}: field #{index} is not a mapping",
                {"source": source, "index": index},
            )
        try:
            fields.append(FieldDescriptor.model_validate(item))
        except ValidationError as exc:
            raise DescriptorLoadError(
                INVALID_DESCRIPTOR,
                f"{source}: field #{index} is invalid",
                {"source": source, "index": index, "errors": _validation_errors(exc)},
            ) from exc

    try:
        return FormSubmission(fields=tuple(fields), **flags)
    except ValidationError as exc:
        raise DescriptorLoadError(
            INVALID_DESCRIPTOR,
            f"{source}: invalid form flags",
            {"source": source, "errors": _validation_errors(exc)},
        ) from exc


def load_submission(path: Path) -> FormSubmission:
    return parse_submission(read_document(path), source=str(path))
