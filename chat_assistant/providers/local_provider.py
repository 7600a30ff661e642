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

DEFAULT_LOCAL_MODEL = "llama3"


class LocalProvider(ChatBackend):
    """
    Chat backend that calls a locally hosted inference server.

    Speaks the Ollama /api/generate shape in non-streaming mode. The request
    is POSTed to the configured URL as-is, so it must include the path.
    """

    name = "local"

    def __init__(
        self,
        url: str,
        model: str = DEFAULT_LOCAL_MODEL,
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._url = url
        self._model = model
        self._timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport

    @property
    def model(self) -> str:
        return self._model

    @property
    def url(self) -> str:
        return self._url

    async def chat(self, prompt: str) -> str:
        payload: Dict[str, Any] = {
            "model": self._model,
            "prompt": prompt,
            "stream": False,
        }
        logger.info("Local server request: model=%s url=%s", self._model, self._url)

        async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
            try:
                response = await client.post(self._url, json=payload)
            except (httpx.RequestError, httpx.InvalidURL) as exc:
                raise TransportError(f"Request failed: {str(exc) or type(exc).__name__}") from exc

        # Error bodies from local servers are not reliably text; report the status only.
        if not response.is_success:
            raise UpstreamRejectedError(
                f"Local Server Error: {response.status_code} {response.reason_phrase}".rstrip(),
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise DecodeFailureError(f"Failed to parse JSON: {exc}") from exc

        raw_output = data.get("response") if isinstance(data, dict) else None
        if isinstance(raw_output, str):
            return raw_output
        return NO_RESPONSE_TEXT
