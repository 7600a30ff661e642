from typing import Callable, List

import httpx

from chat_assistant.core.config import Settings


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every outbound request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def call_count(self) -> int:
        return len(self.requests)


def make_settings(**overrides) -> Settings:
    """Settings built from explicit values only, ignoring the environment and .env."""
    return Settings.model_construct(**overrides)


def gemini_reply(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}
