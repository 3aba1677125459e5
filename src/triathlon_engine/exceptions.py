"""Custom exception hierarchy for the triathlon plan engine."""

from __future__ import annotations


class PlanEngineError(Exception):
    """Base exception for all triathlon_engine errors."""


class PlanValidationError(PlanEngineError):
    """Caller-supplied data is outside the documented domain."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ProfileError(PlanValidationError):
    """A user profile is malformed (unknown weekday token, bad FTP, etc.)."""


class ConfigError(PlanEngineError):
    """Runner configuration could not be interpreted."""
