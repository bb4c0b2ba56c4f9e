# bfhl/__init__.py
"""
Package entrypoint for the FastAPI application.

Re-exports the app factory; `app.py` builds the served instance with it.
"""

from .main import create_app

__all__ = ["create_app"]
