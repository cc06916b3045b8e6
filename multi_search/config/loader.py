"""Settings file loading for multi-search."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from ..errors import ConfigurationError
from .models import SearchSettings

CONFIG_EXTENSIONS = (".yaml", ".yml", ".json")
CONFIG_ENV_VAR = "MULTI_SEARCH_CONFIG"


def _read_file(path: Path) -> dict:
    text = path.read_text(encoding="utf-8")
    if path.suffix in (".yaml", ".yml"):
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")
    return data


def resolve_settings_path(path: Path | None = None) -> Path | None:
    """Explicit path wins; otherwise fall back to ``$MULTI_SEARCH_CONFIG``."""

    if path is not None:
        return path
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return None


def load_settings(
    path: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> SearchSettings:
    """Build :class:`SearchSettings` from defaults, an optional file and overrides.

    Values in ``overrides`` that are ``None`` are ignored so callers can pass
    unset command-line options straight through.
    """

    payload: dict[str, Any] = {}
    settings_path = resolve_settings_path(path)
    if settings_path is not None:
        if settings_path.suffix not in CONFIG_EXTENSIONS:
            raise ConfigurationError(f"unsupported settings file type: {settings_path}")
        if not settings_path.exists():
            raise ConfigurationError(f"settings file not found: {settings_path}")
        try:
            payload.update(_read_file(settings_path))
        except (OSError, ValueError, yaml.YAMLError) as exc:
            raise ConfigurationError(f"cannot read settings file {settings_path}: {exc}") from exc
    if overrides:
        payload.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return SearchSettings.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(_first_error(exc)) from exc


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    message = str(first.get("msg", "invalid configuration"))
    # pydantic prefixes messages raised from validators
    message = message.removeprefix("Value error, ")
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {message}" if location else message


__all__ = ["CONFIG_ENV_VAR", "CONFIG_EXTENSIONS", "load_settings", "resolve_settings_path"]
