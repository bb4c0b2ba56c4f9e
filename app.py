# app.py
"""
Thin entrypoint for the API.

Usage example:
    uvicorn app:app --reload
    python app.py            # binds HOST/PORT from the environment
"""

import logging

import uvicorn

from bfhl.config import get_settings
from bfhl.main import create_app

settings = get_settings()
app = create_app(settings)

logger = logging.getLogger("bfhl")


if __name__ == "__main__":
    logger.info("Server running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
