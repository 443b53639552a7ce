"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "CHAPTERIZE_"


class Settings(BaseModel):
    db_url:               str = "sqlite:///chapterize.db"
    storage_dir:          str = Field(default=".", description="Root for relative stored manuscript references")
    min_manuscript_chars: int = Field(default=100, ge=1, description="Min trimmed length of extracted text")
    min_chapter_chars:    int = Field(default=50,  ge=0, description="Chapter bodies must be longer than this")
    anchor_slug_length:   int = Field(default=30,  ge=1, description="Max length of the slug part of an anchor id")
    log_level:            str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def _read_yaml(path: Path) -> dict[str, Any]:
    """Return the mapping stored in a YAML settings file; empty if the file is absent."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def _from_env() -> dict[str, str]:
    """Collect CHAPTERIZE_<FIELD> values for known settings fields."""
    found = {name: os.getenv(f"{ENV_PREFIX}{name.upper()}") for name in Settings.model_fields}
    return {name: val for name, val in found.items() if val}


def load_config(overrides: dict[str, Any] | None = None, config_file: str | Path | None = None) -> Settings:
    """Build Settings from layered sources, later layers winning.

    Layers: the YAML file (config_file, else CHAPTERIZE_CONFIG, else
    ./config.yaml), then CHAPTERIZE_<FIELD> env vars, then non-None overrides.
    """
    path = Path(config_file or os.getenv(f"{ENV_PREFIX}CONFIG") or CONFIG_FILE)
    data = _read_yaml(path)
    data.update(_from_env())
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
