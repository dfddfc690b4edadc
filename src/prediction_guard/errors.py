"""Exceptions raised by the Prediction Guard client."""

from __future__ import annotations


class PredictionGuardError(Exception):
    """Base exception for everything raised by this package."""


class ConfigurationError(PredictionGuardError):
    """Missing or invalid credentials or host at client construction."""


class APIError(PredictionGuardError):
    """The service answered with a non-200 status and an error envelope."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class DecodeError(PredictionGuardError):
    """A response body was present but was not the expected JSON."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class StreamDecodeError(DecodeError):
    """A server-sent event carried a payload that is not valid JSON."""
