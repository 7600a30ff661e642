"""
Chat backend abstraction layer.

Provider-specific wire formats live in the provider implementations.
The chat service depends only on the ChatBackend interface.
"""

from chat_assistant.providers.base import NO_RESPONSE_TEXT, ChatBackend
from chat_assistant.providers.errors import (
    ChatBackendError,
    ConfigurationError,
    DecodeFailureError,
    TransportError,
    UpstreamRejectedError,
)
from chat_assistant.providers.factory import select_backend

__all__ = [
    "NO_RESPONSE_TEXT",
    "ChatBackend",
    "ChatBackendError",
    "ConfigurationError",
    "DecodeFailureError",
    "TransportError",
    "UpstreamRejectedError",
    "select_backend",
]
