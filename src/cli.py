"""
Command line entry point.

Without flags the interactive menu starts; ``--api`` starts the HTTP server
and the remaining flags run demos non-interactively.

Usage:
    python -m src.cli                       # Interactive menu
    python -m src.cli --api --port 5000     # HTTP API
    python -m src.cli --pattern strategy    # Before/after of one pattern
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from src.config import get_settings
from src.core.dispatcher import DispatchResult, PatternDispatcher
from src.core.exceptions import DuplicatePatternError
from src.core.registry import get_registry
from src.utils import configure_logging

logger = logging.getLogger(__name__)

PHASE_CHOICES = ["before", "after", "compare"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="design-patterns",
        description="Explore 15 design patterns through before/after demos",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  design-patterns                            # Interactive menu
  design-patterns --api                      # Start the HTTP API
  design-patterns --list                     # List available patterns
  design-patterns --pattern observer         # Compare before and after
  design-patterns --pattern proxy --phase after
  design-patterns --all                      # Run every pattern
        """
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--api",
        action="store_true",
        help="Start the HTTP API server"
    )
    mode.add_argument(
        "--list", "-l",
        action="store_true",
        help="List available patterns"
    )
    mode.add_argument(
        "--pattern", "-p",
        metavar="ID",
        help="Run one pattern by id (case-insensitive)"
    )
    mode.add_argument(
        "--all", "-a",
        action="store_true",
        help="Run every pattern's before and after demo"
    )

    parser.add_argument(
        "--phase",
        choices=PHASE_CHOICES,
        default="compare",
        help="Which demo to run with --pattern (default: compare)"
    )
    parser.add_argument(
        "--host",
        help="API host (default: API_HOST setting)"
    )
    parser.add_argument(
        "--port",
        type=int,
        help="API port (default: API_PORT setting)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser


def _print_failure(result: DispatchResult) -> None:
    if result.partial_output:
        print(result.partial_output, end="")
    print(f"Error: {result.error}", file=sys.stderr)


def list_patterns(dispatcher: PatternDispatcher) -> int:
    for entry in dispatcher.list_patterns().value:
        print(f"{entry.id:<12} {entry.name:<26} {entry.category.value}")
    return 0


def run_pattern(dispatcher: PatternDispatcher, pattern_id: str, phase: str) -> int:
    result = dispatcher.dispatch(phase, pattern_id)
    if not result.ok:
        _print_failure(result)
        return 1

    if phase == "compare":
        comparison = result.value
        print(f"═══ {comparison.pattern.name} Pattern ═══\n")
        print("BEFORE (Problem):")
        print(comparison.before.output, end="")
        print("\nAFTER (Solution):")
        print(comparison.after.output, end="")
    else:
        print(result.value.output, end="")
    return 0


def run_all(dispatcher: PatternDispatcher) -> int:
    result = dispatcher.run_all()
    if not result.ok:
        _print_failure(result)
        return 1

    print(result.value.output, end="")
    return 0


def startup_banner(host: str, port: int, api_prefix: str) -> str:
    """Console banner with the documentation and base URLs and sample requests."""
    base_url = f"http://{host}:{port}"
    patterns_url = f"{base_url}{api_prefix}/patterns"
    return "\n".join([
        "╔" + "═" * 59 + "╗",
        "║" + "Design Patterns API is running!".center(59) + "║",
        "╚" + "═" * 59 + "╝",
        "",
        f"Swagger UI:    {base_url}/docs",
        f"API Base URL:  {patterns_url}",
        "",
        "Quick Test:",
        f"  curl {patterns_url}",
        f"  curl {patterns_url}/singleton/compare",
        "",
        "Press Ctrl+C to stop",
    ])


def serve(host: Optional[str] = None, port: Optional[int] = None) -> int:
    """Start the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    logger.info(f"Starting server on {host}:{port}")
    print(startup_banner(host, port, settings.api_prefix))

    uvicorn.run(
        "src.main:app",
        host=host,
        port=port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv()
    configure_logging("DEBUG" if args.verbose else None)

    if args.api:
        return serve(args.host, args.port)

    try:
        registry = get_registry()
    except DuplicatePatternError as e:
        logger.error(f"Invalid pattern catalog: {e}")
        return 2

    dispatcher = PatternDispatcher(registry)

    if args.list:
        return list_patterns(dispatcher)
    if args.pattern:
        return run_pattern(dispatcher, args.pattern, args.phase)
    if args.all:
        return run_all(dispatcher)

    from src.console import InteractiveMenu

    InteractiveMenu(dispatcher).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
