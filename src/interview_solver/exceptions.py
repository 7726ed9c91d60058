"""Exceptions raised by the interview solver."""

from __future__ import annotations


class SolverError(Exception):
    """Base class for all interview solver errors."""


class InvalidConfiguration(SolverError):
    """Raised when a configuration update carries an empty credential."""

    def __init__(self, message: str = "Gemini API key is required") -> None:
        super().__init__(message)


class NotConfigured(SolverError):
    """Raised when screenshots are processed before any valid configuration exists."""

    def __init__(self) -> None:
        super().__init__(
            "Gemini client not initialized. Please configure an API key first "
            "(set GEMINI_API_KEY or call update_config)."
        )


class InvalidRequest(SolverError):
    """Raised when a processing request cannot be sent as given."""


class ImageReadFailure(SolverError):
    """Raised when a screenshot file cannot be read.

    The whole batch fails; no request is sent with a subset of the images.
    """

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        message = f"Failed to read screenshot: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UpstreamFailure(SolverError):
    """Raised for network, authentication, quota or response errors from Gemini."""


class SchemaViolation(SolverError):
    """Raised when the model output does not satisfy the solution schema."""

    def __init__(self, message: str, raw_output: str | None = None) -> None:
        self.raw_output = raw_output
        super().__init__(message)
