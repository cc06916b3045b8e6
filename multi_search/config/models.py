"""Pydantic models used across the multi-search configuration flow."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class OSHint(str, Enum):
    """Operating system used to pick browser header profiles."""

    LINUX = "l"
    MAC = "m"
    WINDOWS = "w"


class QueryRequest(BaseModel):
    """One logical query fanned out to every engine of the active set."""

    model_config = ConfigDict(frozen=True)

    base_term: str
    terms: tuple[str, ...] = ()
    exact: bool = False
    search_exact: bool = False
    multi_exact: bool = False
    privacy: bool = True

    @field_validator("base_term", mode="before")
    @classmethod
    def _normalise_base(cls, value: Any) -> str:
        if value is None or not str(value).strip():
            raise ValueError("must provide search term(s)")
        return str(value).strip().replace(" ", "+")

    @field_validator("terms", mode="before")
    @classmethod
    def _coerce_terms(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        return tuple(str(term) for term in value if str(term))


class SearchSettings(BaseModel):
    """Run-level controls for requests and output."""

    concurrency: int = 10
    timeout_ms: int = 5000
    max_length: int = 500
    include_urls: bool = True
    debug: bool = False
    os_hint: OSHint = OSHint.WINDOWS
    privacy: bool = True
    log_file: Path | None = None

    @field_validator("os_hint", mode="before")
    @classmethod
    def _coerce_os(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().lower()
            if value not in {hint.value for hint in OSHint}:
                raise ValueError("os must be l, m, or w")
        return value

    @field_validator("log_file", mode="before")
    @classmethod
    def _coerce_path(cls, value: Any) -> Path | None:
        if value in (None, ""):
            return None
        return Path(value).expanduser()

    @model_validator(mode="after")
    def _validate_limits(self) -> "SearchSettings":
        if self.concurrency < 1:
            raise ValueError("concurrency must be >= 1")
        if self.timeout_ms < 1:
            raise ValueError("timeout must be >= 1 ms")
        if self.max_length < 0:
            raise ValueError("length must be >= 0")
        return self

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


__all__ = ["OSHint", "QueryRequest", "SearchSettings"]
