"""Application-wide constants and configuration defaults.

This module centralizes display strings, default configurations, and
constants that are used across the codebase to improve maintainability.
"""

# =============================================================================
# Service Metadata
# =============================================================================
SERVICE_NAME = "Design Patterns API"
SERVICE_VERSION = "1.0.0"
PROJECT_URL = "https://github.com/hanyarafaosman/DesignPatterns"

# =============================================================================
# API Defaults
# =============================================================================
DEFAULT_API_HOST = "127.0.0.1"
DEFAULT_API_PORT = 5000
DEFAULT_API_PREFIX = "/api"

# =============================================================================
# Phase Descriptions
# =============================================================================
PHASE_DESCRIPTIONS = {
    "before": "Problem demonstration (without pattern)",
    "after": "Solution demonstration (with pattern)",
}

COMPARE_PHASE_DESCRIPTIONS = {
    "before": "Problem (without pattern)",
    "after": "Solution (with pattern)",
}

# =============================================================================
# Demo Output
# =============================================================================
RUN_ALL_HEADER = "--- Design Patterns Demo ---\n"
RUN_ALL_MESSAGE = "All patterns executed"

# =============================================================================
# Console Menu
# =============================================================================
MENU_RUN_ALL_KEY = "A"
MENU_QUIT_KEY = "Q"
MENU_TITLE = "DESIGN PATTERNS INTERACTIVE DEMO"
MENU_FAREWELL = "Thank you for exploring design patterns!"

# =============================================================================
# Logging
# =============================================================================
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
