from __future__ import annotations

import logging
from typing import Callable, Optional

import httpx
from pydantic import ValidationError

from chat_assistant.core.config import Settings, load_settings
from chat_assistant.providers.errors import ChatBackendError, ConfigurationError
from chat_assistant.providers.factory import select_backend


logger = logging.getLogger(__name__)


def _invalid_settings(exc: ValidationError) -> ConfigurationError:
    """Name the environment variables that failed to parse."""
    names = sorted({str(error["loc"][0]).upper() for error in exc.errors() if error["loc"]})
    return ConfigurationError(
        f"Configuration Error: invalid value for {', '.join(names) or 'settings'} in .env"
    )


class ChatService:
    """
    Orchestrates a single chat exchange: read configuration, construct the
    selected backend, forward the message.

    Configuration is read through ``settings_provider`` on every call, so
    environment changes take effect on the next request and tests can supply
    fixed settings.
    """

    def __init__(
        self,
        settings_provider: Callable[[], Settings] = load_settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings_provider = settings_provider
        self._transport = transport

    async def reply(self, message: str) -> str:
        """
        Return the backend's reply to ``message``.

        Raises ChatBackendError (ConfigurationError before any network call,
        or the provider's transport/upstream/decode error).
        """
        try:
            settings = self._settings_provider()
            backend = select_backend(settings, transport=self._transport)
        except ValidationError as exc:
            config_error = _invalid_settings(exc)
            logger.warning("Chat backend not configured: %s", config_error)
            raise config_error from exc
        except ConfigurationError as exc:
            logger.warning("Chat backend not configured: %s", exc)
            raise

        try:
            return await backend.chat(message)
        except ChatBackendError as exc:
            logger.warning(
                "Chat backend call failed",
                extra={"provider": backend.name, "error_type": type(exc).__name__, "error": str(exc)},
            )
            raise
