"""
Application entrypoint for the chat assistant backend.

Run: uvicorn chat_assistant.main:app  (or python -m chat_assistant)
"""
from fastapi import FastAPI

from chat_assistant.api import register_routes
from chat_assistant.core.logging_config import configure_logging


def create_app() -> FastAPI:
    """
    Application factory for the FastAPI app.
    """
    configure_logging()

    app = FastAPI(
        title="Chat Assistant",
        description=(
            "Forwards chat messages to a configurable LLM backend "
            "(Gemini or a local inference server) and returns the reply."
        ),
        version="0.1.0",
    )

    register_routes(app)

    return app


app = create_app()
