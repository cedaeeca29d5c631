from __future__ import annotations

from pathlib import Path
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .zones import is_utc


class Config(BaseModel):
    """Top-level configuration for a colorlizer run, optionally loaded from YAML."""
    description: str | None = Field(default=None, description="Optional description of this config file")
    timezone: str | None = Field(
        default=None,
        description="IANA zone id used for the timestamp label instead of the host zone",
    )
    on_error: Literal["fail", "skip"] = Field(
        default="fail",
        description="Abort on the first bad line ('fail') or log it and continue ('skip')",
    )

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, v: str | None) -> str | None:
        if v is None or is_utc(v):
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            raise ValueError(f"unknown timezone {v!r}")
        return v


def load_config(path: str | Path | None = None, **overrides: object) -> Config:
    """Load YAML config from 'path' (if any) and validate into a Config model.

    Keyword overrides whose value is not None replace keys from the file.
    """
    data: dict = {}
    if path is not None:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be a mapping")
    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Config.model_validate(data)
    except ValidationError as e:
        # Re-raise with a cleaner message for CLI users
        raise ValueError(str(e))
