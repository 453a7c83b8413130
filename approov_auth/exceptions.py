"""Exceptions."""

from .domain import RejectReason


class InvalidToken(ValueError):
    """The Approov token could not be verified."""

    def __init__(self, reason: RejectReason, message: str = '') -> None:
        super().__init__(message or reason.value)
        self.reason = reason


class ConfigurationError(RuntimeError):
    """The Approov secret is not configured correctly."""
