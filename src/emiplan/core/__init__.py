"""Shared infrastructure — exceptions, configuration, logging, CLI."""

from .exceptions import ConfigurationError, EmiPlanError, InvalidTermError, ValidationError

__all__ = [
    "ConfigurationError",
    "EmiPlanError",
    "InvalidTermError",
    "ValidationError",
]
