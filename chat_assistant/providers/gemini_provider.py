from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from chat_assistant.providers.base import NO_RESPONSE_TEXT, ChatBackend
from chat_assistant.providers.errors import (
    DecodeFailureError,
    TransportError,
    UpstreamRejectedError,
)

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_MODEL = "gemini-1.5-flash-latest"
DEFAULT_GEMINI_API_BASE = "https://generativelanguage.googleapis.com"


def extract_gemini_text(data: Any) -> str:
    """Return candidates[0].content.parts[0].text, or the placeholder reply."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return NO_RESPONSE_TEXT
    return text if isinstance(text, str) else NO_RESPONSE_TEXT


class GeminiProvider(ChatBackend):
    """Chat backend that calls the Gemini generateContent REST API."""

    name = "gemini"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_GEMINI_MODEL,
        api_base: str = DEFAULT_GEMINI_API_BASE,
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._api_base = api_base.rstrip("/")
        self._timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport

    @property
    def model(self) -> str:
        return self._model

    @property
    def url(self) -> str:
        return f"{self._api_base}/v1beta/models/{self._model}:generateContent"

    async def chat(self, prompt: str) -> str:
        payload: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
        logger.info("Gemini request: model=%s", self._model)

        async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
            try:
                response = await client.post(
                    self.url,
                    params={"key": self._api_key},
                    json=payload,
                )
            except (httpx.RequestError, httpx.InvalidURL) as exc:
                raise TransportError(f"Request failed: {str(exc) or type(exc).__name__}") from exc

        if not response.is_success:
            raise UpstreamRejectedError(
                f"API Error: {response.text}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise DecodeFailureError(f"Failed to parse JSON: {exc}") from exc

        return extract_gemini_text(data)
