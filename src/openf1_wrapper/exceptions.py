"""Exceptions raised by the OpenF1 wrapper."""

from __future__ import annotations


class OpenF1Error(Exception):
    """Base exception for every error raised by this package."""


class OpenF1ConnectionError(OpenF1Error):
    """Raised when the API host cannot be reached."""


class OpenF1TimeoutError(OpenF1Error):
    """Raised when a request to the API times out."""


class OpenF1APIError(OpenF1Error):
    """Raised when the API answers with a 4xx/5xx status."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class OpenF1DecodeError(OpenF1Error):
    """Raised when the response body is not valid JSON."""


class OpenF1ValidationError(OpenF1Error):
    """Raised when the JSON payload does not fit the expected record type."""
