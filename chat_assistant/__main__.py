"""
Allow running as: python -m chat_assistant
"""
import logging

import uvicorn

from .core.config import get_settings
from .main import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app()
    logger.info("Server running on http://%s:%s", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        reload=False,
        workers=1,
    )


if __name__ == "__main__":
    main()
