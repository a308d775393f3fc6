"""
Encoder settings using Pydantic for validation.

Values come from defaults, then ``GEOCELL_*`` environment variables, then
explicit overrides.
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from .geohash import MAX_PRECISION
from .logging_config import configure_logging

ENV_PREFIX = "GEOCELL_"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EncoderSettings(BaseModel):
    """Settings for :class:`geocell.encoder.CellEncoder`."""
    precision: int = Field(25, ge=1, le=MAX_PRECISION, description="Bits per axis")
    log_level: str = Field("INFO", description="Stdlib logging level name")
    json_logs: bool = Field(False, description="Render logs as JSON")
    log_file: Optional[Path] = Field(None, description="Also write logs to this file")

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        v = v.upper()
        if v not in _LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LEVELS)}")
        return v

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(overrides: Optional[Dict[str, Any]] = None) -> EncoderSettings:
    """
    Build settings from the environment and optional overrides.

    Args:
        overrides: Field values that take precedence over the environment

    Returns:
        Validated EncoderSettings

    Raises:
        pydantic.ValidationError: If any value is invalid

    Example:
        >>> # GEOCELL_PRECISION=20 in the environment
        >>> load_settings().precision
        20
        >>> load_settings({"precision": 10}).precision
        10
    """
    values: Dict[str, Any] = {}
    for name in EncoderSettings.model_fields:
        env_value = os.environ.get(ENV_PREFIX + name.upper())
        if env_value is not None:
            values[name] = env_value
    values.update(overrides or {})
    return EncoderSettings(**values)


def apply_logging(settings: EncoderSettings) -> None:
    """Configure structlog from the logging fields of *settings*."""
    configure_logging(
        level=settings.log_level_number,
        log_file=settings.log_file,
        json_output=settings.json_logs,
    )
