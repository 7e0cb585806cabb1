# src/eventrank/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/eventrank/config/defaults.yaml`, then optionally overridden by:
- environment variables (e.g., `EVENTRANK_LOG_LEVEL`)
- an external YAML file via `EVENTRANK_CONFIG_PATH`

Design rule:
- Scoring weights live in YAML, not hard-coded in the recommender.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from eventrank.core.env import load_dotenv_if_present


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `eventrank.config`."""
    text = resources.files("eventrank.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "EventRank"
    log_level: str = "INFO"


class GeoSettings(BaseModel):
    earth_radius_km: float = Field(6371.0, gt=0)


class ScoringWeights(BaseModel):
    """Blend weights for the four event signals (not re-normalized)."""

    model_config = ConfigDict(extra="forbid")

    similarity: float = Field(0.4, ge=0)
    category: float = Field(0.3, ge=0)
    distance: float = Field(0.2, ge=0)
    popularity: float = Field(0.1, ge=0)


class ScoringSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    top_n_default: int = Field(5, ge=0)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    geo: GeoSettings = Field(default_factory=GeoSettings)
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    data = dict(data)
    log_level = os.getenv("EVENTRANK_LOG_LEVEL")
    if log_level:
        data["app"] = {**(data.get("app") or {}), "log_level": log_level}
    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("EVENTRANK_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
