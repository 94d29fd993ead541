"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from src.config import get_settings
from src.constants import PROJECT_URL, SERVICE_NAME, SERVICE_VERSION
from src.core.registry import get_registry

from .middleware import add_middleware, register_exception_handlers
from .routers import health_router, patterns_router

logger = logging.getLogger(__name__)

# =============================================================================
# OpenAPI Configuration
# =============================================================================

OPENAPI_TAGS = [
    {
        "name": "Health",
        "description": "Service health checks and status endpoints",
    },
    {
        "name": "Patterns",
        "description": "List design patterns and run their before/after demonstrations",
    },
]

API_DESCRIPTION = """
Interactive API for exploring software design patterns through before/after
code demonstrations.

## Patterns
15 classic patterns grouped into three categories:
- **Creational**: Singleton, Factory, Builder
- **Structural**: Decorator, Adapter, Proxy, Facade
- **Behavioral**: Strategy, Observer, Template Method, Command, Iterator,
  State, Chain of Responsibility, Visitor

Each pattern has a *before* demo (the problem, solved without the pattern)
and an *after* demo (the same task, solved with the pattern). The console
output of each demo is captured and returned as text.

---

## Response Format
All endpoints return JSON:
- `success`: Boolean indicating operation success
- `error`: Error message (only present on failure)
- `output`: Captured console output of a demo
- `processing_time_ms`: Execution time in milliseconds
"""


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    logger.info(f"Starting {SERVICE_NAME}...")

    # Build the registry at startup (fail-fast on duplicate pattern ids)
    registry = get_registry()
    settings = get_settings()
    logger.info(f"Loaded {len(registry)} patterns")
    logger.info(f"Pattern endpoints available under {settings.api_prefix}/patterns")

    yield

    logger.info(f"Shutting down {SERVICE_NAME}...")


def custom_openapi(app: FastAPI) -> Dict[str, Any]:
    """Generate custom OpenAPI schema with server and contact information."""
    if app.openapi_schema:
        return app.openapi_schema

    settings = get_settings()
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        tags=OPENAPI_TAGS,
    )

    openapi_schema["servers"] = [
        {
            "url": f"http://{settings.api_host}:{settings.api_port}",
            "description": "Local development server",
        },
    ]

    openapi_schema["info"]["contact"] = {
        "name": "Design Patterns Demo",
        "url": PROJECT_URL,
    }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=SERVICE_NAME,
        description=API_DESCRIPTION,
        version=SERVICE_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # Set custom OpenAPI schema generator
    app.openapi = lambda: custom_openapi(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom middleware (logging, error handling)
    add_middleware(app)

    # Register custom exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(
        health_router,
        tags=["Health"],
    )

    app.include_router(
        patterns_router,
        prefix=f"{settings.api_prefix}/patterns",
        tags=["Patterns"],
    )

    return app
