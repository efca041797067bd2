"""Application configuration models and loader utilities."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from pydantic import BaseModel, Field


class LlmSettings(BaseModel):
    """Settings for the local LLM provider."""

    enabled: bool = Field(
        default=True, description="Prefer the LLM over keyword rules when reachable"
    )
    base_url: str = Field(
        default="http://localhost:11434", description="Ollama server URL"
    )
    model: str = Field(default="llama3", description="Model identifier")
    timeout_seconds: float = Field(
        default=30,
        gt=0,
        description="Request timeout for LLM calls",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Sampling temperature for LLM completions",
    )
    max_output_tokens: int | None = Field(
        default=512,
        ge=32,
        description="Maximum tokens to request from the provider",
    )
    max_attempts: int = Field(
        default=2,
        ge=1,
        le=5,
        description="Transport attempts per LLM request before giving up",
    )


class LoggingSettings(BaseModel):
    """Logging preferences."""

    level: str = Field(default="INFO", description="Root logging level")
    structured: bool = Field(
        default=False, description="Toggle key=value structured logging"
    )


class AppSettings(BaseModel):
    """Aggregated application configuration."""

    llm: LlmSettings = Field(default_factory=LlmSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


ENV_PREFIX = "INBOX_TRIAGE_"


def _collect_env_values(
    env_file: Path | str | None, *, include_environment: bool
) -> dict[str, dict[str, Any]]:
    """Group ``INBOX_TRIAGE_<SECTION>__<FIELD>`` values by settings section.

    Process environment variables win over values read from ``env_file``;
    blank values are ignored so the model defaults apply.
    """
    raw: dict[str, str | None] = {}
    if env_file and Path(env_file).is_file():
        raw.update(dotenv_values(env_file))
    if include_environment:
        raw.update(os.environ)

    sections: dict[str, dict[str, Any]] = {}
    for key, value in raw.items():
        if not key.startswith(ENV_PREFIX) or not value:
            continue
        section, _, field = key.removeprefix(ENV_PREFIX).lower().partition("__")
        if section and field:
            sections.setdefault(section, {})[field] = value
    return sections


@lru_cache(maxsize=1)
def load_app_settings(
    env_file: Path | str | None = None,
    *,
    include_environment: bool = True,
    **overrides: Any,
) -> AppSettings:
    """Load application settings, applying env files and overrides."""
    collected: dict[str, Any] = dict(
        _collect_env_values(env_file, include_environment=include_environment)
    )
    if overrides:
        collected.update(overrides)
    return AppSettings.model_validate(collected)


__all__ = [
    "AppSettings",
    "LlmSettings",
    "LoggingSettings",
    "ENV_PREFIX",
    "load_app_settings",
]
