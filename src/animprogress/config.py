from __future__ import annotations

"""Configuration utilities for animprogress.

This module defines a hierarchical configuration schema using Pydantic models.
The :class:`Settings` container groups the default effect timing, sampling
parameters for the command line tools, logging and visualisation options.
Instances can be populated from environment variables or from YAML/JSON files
with matching nested keys.
"""

import json
import math
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import ProgressMode
from .utils.timeparse import parse_time

try:  # pragma: no cover - optional dependency
    import yaml  # type: ignore
except Exception:  # pragma: no cover
    yaml = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _coerce_time(value: Any) -> Any:
    if isinstance(value, str):
        return parse_time(value)
    return value


class SectionModel(BaseModel):
    """Base model for configuration subsections that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Settings schema
# ---------------------------------------------------------------------------


class TimingSettings(SectionModel):
    """Default effect timing used by the command line tools."""

    duration: float = Field(default=1000.0, ge=0)
    iterations: float = Field(default=1.0, ge=0)
    delay: float = 0.0
    end_delay: float = 0.0

    @field_validator("duration", "delay", "end_delay", mode="before")
    @classmethod
    def _coerce_times(cls, value: Any) -> Any:
        return _coerce_time(value)

    @field_validator("iterations", mode="before")
    @classmethod
    def _coerce_iterations(cls, value: Any) -> Any:
        if isinstance(value, str) and value.strip().lower() in {"inf", "infinite", "infinity"}:
            return math.inf
        return value


class SampleSettings(SectionModel):
    """Sampling grid for progress curves."""

    start: float = 0.0
    stop: float = 1000.0
    num: int = Field(default=11, ge=1)
    mode: ProgressMode = ProgressMode.OVERALL

    @field_validator("start", "stop", mode="before")
    @classmethod
    def _coerce_times(cls, value: Any) -> Any:
        return _coerce_time(value)


class LoggingSettings(SectionModel):
    """Logging verbosity and format."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(levelname)s:%(name)s:%(message)s"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class VizSettings(SectionModel):
    """Configuration for simple visualisation helpers."""

    title: str = "Animation progress"
    save: str | None = None


class Settings(BaseSettings):
    """Container for all runtime configuration sections."""

    timing: TimingSettings = Field(default_factory=TimingSettings)
    sample: SampleSettings = Field(default_factory=SampleSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    viz: VizSettings = Field(default_factory=VizSettings)

    model_config = SettingsConfigDict(
        env_prefix="ANIMPROGRESS_",
        env_nested_delimiter="__",
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# Loading utilities
# ---------------------------------------------------------------------------


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON or YAML file."""

    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in {".yaml", ".yml"}:
        if yaml is None:
            raise RuntimeError("PyYAML is required to load YAML files")
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError("Configuration file must define a mapping")
    return Settings.model_validate(data)
