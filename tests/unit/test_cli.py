"""Unit tests for the command line entry point."""

from unittest.mock import patch

import pytest

from src.cli import build_parser, main


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Test no flags selects the interactive menu."""
        args = build_parser().parse_args([])
        assert not any([args.api, args.list, args.all, args.pattern])
        assert args.phase == "compare"

    def test_modes_are_exclusive(self):
        """Test two modes cannot be combined."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--list", "--all"])

    def test_invalid_phase(self):
        """Test unknown phases are rejected."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--pattern", "strategy", "--phase", "during"])


class TestMain:
    """Tests for each command line mode."""

    def test_list(self, capsys):
        """Test --list prints every pattern."""
        assert main(["--list"]) == 0
        out = capsys.readouterr().out
        assert len(out.strip().splitlines()) == 15
        assert "Chain of Responsibility" in out

    def test_pattern_compare(self, capsys):
        """Test --pattern prints before and after by default."""
        assert main(["--pattern", "Strategy"]) == 0
        out = capsys.readouterr().out
        assert "═══ Strategy Pattern ═══" in out
        assert out.index("StrategyBefore A: HELLO") < out.index("StrategyAfter A: HELLO")

    def test_pattern_single_phase(self, capsys):
        """Test --phase after prints only the after demo."""
        assert main(["--pattern", "proxy", "--phase", "after"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("ProxyAfter:")
        assert "ProxyBefore" not in out

    def test_unknown_pattern(self, capsys):
        """Test an unknown pattern exits with status 1."""
        assert main(["--pattern", "bogus"]) == 1
        assert "Pattern 'bogus' not found" in capsys.readouterr().err

    def test_all(self, capsys):
        """Test --all runs every pattern."""
        assert main(["--all"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("--- Design Patterns Demo ---")
        assert "SingletonBefore:" in out
        assert "VisitorAfter:" in out

    def test_api_starts_uvicorn(self):
        """Test --api hands host and port to uvicorn."""
        with patch("uvicorn.run") as mock_run:
            assert main(["--api", "--host", "0.0.0.0", "--port", "8123"]) == 0

        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args[0] == "src.main:app"
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8123

    def test_api_uses_settings(self, monkeypatch):
        """Test --api falls back to API_HOST and API_PORT."""
        monkeypatch.setenv("API_PORT", "5050")
        with patch("uvicorn.run") as mock_run:
            main(["--api"])

        kwargs = mock_run.call_args.kwargs
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 5050

    def test_interactive_by_default(self):
        """Test no flags starts the interactive menu."""
        with patch("src.console.menu.InteractiveMenu.run") as mock_run:
            assert main([]) == 0
        mock_run.assert_called_once()

    def test_api_prints_banner(self, capsys):
        """Test --api prints the documentation URL and sample requests."""
        with patch("uvicorn.run"):
            main(["--api", "--port", "5001"])

        out = capsys.readouterr().out
        assert "Swagger UI:    http://127.0.0.1:5001/docs" in out
        assert "API Base URL:  http://127.0.0.1:5001/api/patterns" in out
        assert "curl http://127.0.0.1:5001/api/patterns/singleton/compare" in out


class TestStartupFailure:
    """Tests for a misconfigured pattern catalog."""

    def test_duplicate_catalog_exits_2(self, monkeypatch):
        """Test a duplicated pattern id stops the command line with status 2."""
        from src.core.registry import reset_registry
        from src.demos import catalog

        monkeypatch.setattr(catalog, "PATTERN_CATALOG", catalog.PATTERN_CATALOG + [catalog.PATTERN_CATALOG[0]])
        reset_registry()

        assert main(["--list"]) == 2
