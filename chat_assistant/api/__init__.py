from fastapi import APIRouter, FastAPI

from chat_assistant.core.config import get_settings

from . import chat, health


def get_api_router() -> APIRouter:
    """
    Root router for the assistant API: the chat endpoint and its health probe.
    """
    root_router = APIRouter()
    root_router.include_router(health.router, tags=["health"])
    root_router.include_router(chat.router, tags=["chat"])
    return root_router


def register_routes(app: FastAPI) -> None:
    """
    Mount the assistant API under the configured prefix (``/assistant/api`` by default).
    """
    app.include_router(get_api_router(), prefix=get_settings().api_prefix)
