"""
Chat Assistant: HTTP chat endpoint in front of interchangeable LLM backends.
Layout: api/, core/, providers/, schemas/, services/.
"""
from .main import app, create_app

__all__ = ["__version__", "app", "create_app"]
__version__ = "0.1.0"
