from __future__ import annotations

import logging
from typing import Optional

import httpx

from chat_assistant.core.config import LOCAL_PROVIDER, Settings
from chat_assistant.providers.base import ChatBackend
from chat_assistant.providers.errors import ConfigurationError
from chat_assistant.providers.gemini_provider import GeminiProvider
from chat_assistant.providers.local_provider import LocalProvider

logger = logging.getLogger(__name__)


def _missing_setting(env_var: str) -> ConfigurationError:
    return ConfigurationError(f"Configuration Error: {env_var} must be set in .env")


def select_backend(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ChatBackend:
    """
    Construct the chat backend chosen by ``settings.current_model``.

    "local" selects the local inference server and requires LOCAL_LLM_URL.
    Any other value selects Gemini and requires GEMINI_API_KEY. A new
    instance is returned on every call.
    """
    if settings.current_model == LOCAL_PROVIDER:
        if settings.local_llm_url is None:
            raise _missing_setting("LOCAL_LLM_URL")
        logger.info("Using local model at %s", settings.local_llm_url)
        return LocalProvider(
            url=settings.local_llm_url,
            model=settings.local_model,
            timeout_seconds=settings.local_timeout_seconds,
            transport=transport,
        )

    if settings.gemini_api_key is None:
        raise _missing_setting("GEMINI_API_KEY")
    logger.info("Using Gemini model %s", settings.gemini_model)
    return GeminiProvider(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        api_base=settings.gemini_api_base,
        timeout_seconds=settings.gemini_timeout_seconds,
        transport=transport,
    )
