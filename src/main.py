"""
FastAPI service for the Design Patterns showcase.

This service provides a REST API for:
- Listing the 15 patterns and their categories
- Running each pattern's before/after demo and returning its console output
- Side-by-side comparisons and a run-all endpoint

Usage:
    uvicorn src.main:app --reload --host 127.0.0.1 --port 5000
"""

import logging

from dotenv import load_dotenv

# Load environment variables before importing anything else
load_dotenv()

from src.config import get_settings
from src.utils import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

# Import and create the FastAPI app
from src.api import create_app

app = create_app()

logger.info("Design Patterns API initialized")
logger.info("API documentation available at /docs and /redoc")


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info(f"Starting server on {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "src.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
