from __future__ import annotations


class ChatBackendError(Exception):
    """Base class for failures surfaced to the chat endpoint as an error message."""


class ConfigurationError(ChatBackendError):
    """A setting required by the selected backend is missing."""


class TransportError(ChatBackendError):
    """The provider could not be reached (DNS, connect, timeout)."""


class UpstreamRejectedError(ChatBackendError):
    """The provider answered with a non-success HTTP status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeFailureError(ChatBackendError):
    """The provider's response body was not valid JSON."""
