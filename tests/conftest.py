"""Shared test fixtures and configuration."""

import pytest
from fastapi.testclient import TestClient

from src.core.dispatcher import PatternDispatcher
from src.core.registry import PatternCategory, PatternEntry, PatternRegistry


# =============================================================================
# Environment Variable Fixtures
# =============================================================================

SETTINGS_ENV_VARS = ["API_HOST", "API_PORT", "API_PREFIX", "CORS_ORIGINS", "LOG_LEVEL", "DEBUG"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear settings environment variables so defaults apply."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# Singleton Reset
# =============================================================================

def _reset_singletons():
    from src.api.dependencies import reset_dispatcher
    from src.config import reset_settings
    from src.core.registry import reset_registry
    from src.demos.singleton import SettingsSingleton

    reset_registry()
    reset_settings()
    reset_dispatcher()
    SettingsSingleton.reset_instance()


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset registry, settings and dispatcher singletons before and after each test."""
    _reset_singletons()
    yield
    _reset_singletons()


# =============================================================================
# Registry Fixtures
# =============================================================================

def make_entry(pattern_id, name=None, category=PatternCategory.BEHAVIORAL, before=None, after=None):
    """Build a PatternEntry with printing operations."""
    name = name or pattern_id.title()

    def default_before():
        print(f"{name}Before: ran")

    def default_after():
        print(f"{name}After: ran")

    return PatternEntry(
        id=pattern_id,
        name=name,
        category=category,
        description=f"{name} description",
        before=before or default_before,
        after=after or default_after,
    )


@pytest.fixture
def make_pattern():
    """Factory for PatternEntry objects with printing operations."""
    return make_entry


@pytest.fixture
def registry():
    """Registry populated from the built-in catalog."""
    from src.core.registry import get_registry
    return get_registry()


@pytest.fixture
def dispatcher(registry):
    """Dispatcher over the built-in catalog."""
    return PatternDispatcher(registry)


@pytest.fixture
def broken_registry():
    """Registry whose 'broken' pattern prints then raises."""
    def explode():
        print("partial line")
        raise RuntimeError("boom")

    return PatternRegistry([
        make_entry("first", name="First"),
        make_entry("broken", name="Broken", before=explode, after=explode),
        make_entry("last", name="Last"),
    ])


# =============================================================================
# API Fixtures
# =============================================================================

@pytest.fixture
def app():
    """Create a fresh FastAPI application."""
    from src.api.app import create_app
    return create_app()


@pytest.fixture
def client(app):
    """Create a test client."""
    return TestClient(app)
