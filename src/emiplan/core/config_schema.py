"""Pydantic models for config validation.

``Config`` validates its merged data against ``EmiPlanConfig`` on load, and
``Config.validated()`` returns the typed model. Dict-based ``get()`` access
keeps working on the raw values.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class DisplayConfig(BaseModel):
    """How amounts are rendered."""

    currency_symbol: str = "₹"
    grouping: Literal["indian", "western"] = "indian"


class LoggingConfig(BaseModel):
    """Log sinks for the CLI."""

    level: LogLevel = "WARNING"
    file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("file", mode="before")
    @classmethod
    def _blank_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class DefaultsConfig(BaseModel):
    """Fallbacks for command-line options."""

    start_date: date | None = None


class EmiPlanConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so consumers can keep their own sections in the
    same file.
    """

    model_config = ConfigDict(extra="allow")

    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()
    defaults: DefaultsConfig = DefaultsConfig()
