"""Configuration package exports."""

from .loader import CONFIG_ENV_VAR, load_settings, resolve_settings_path
from .models import OSHint, QueryRequest, SearchSettings

__all__ = [
    "CONFIG_ENV_VAR",
    "OSHint",
    "QueryRequest",
    "SearchSettings",
    "load_settings",
    "resolve_settings_path",
]
