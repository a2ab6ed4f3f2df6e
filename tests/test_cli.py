"""Tests for the command-line interface."""

import os

from click.testing import CliRunner
from fastapi import FastAPI

from pcos_companion import __version__
from pcos_companion.cli import main
from pcos_companion.commands.base import format_table
from pcos_companion.store.seed import SAMPLE_CONTENT, SAMPLE_QUOTES


class TestContentCommands:
    """Tests for the content command group."""

    def test_list(self):
        """Test listing all content shows every title."""
        result = CliRunner().invoke(main, ["content", "list"])
        assert result.exit_code == 0
        assert f"Total: {len(SAMPLE_CONTENT)} item(s)" in result.output

    def test_list_by_category(self):
        """Test category filtering ignores case."""
        result = CliRunner().invoke(main, ["content", "list", "--category", "nutrition"])
        assert result.exit_code == 0
        assert "Eating for Insulin Resistance" in result.output
        assert "Strength Training with PCOS" not in result.output

    def test_list_unknown_category(self):
        """Test an empty category prints a notice."""
        result = CliRunner().invoke(main, ["content", "list", "-c", "astrology"])
        assert result.exit_code == 0
        assert "No content found" in result.output

    def test_show(self):
        """Test showing a single item."""
        result = CliRunner().invoke(main, ["content", "show", "4"])
        assert result.exit_code == 0
        assert SAMPLE_CONTENT[3]["title"] in result.output
        assert "Video:" in result.output

    def test_show_missing(self):
        """Test a missing id exits with an error."""
        result = CliRunner().invoke(main, ["content", "show", "99"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestQuoteCommands:
    """Tests for the quotes command group."""

    def test_list(self):
        """Test every quote is printed."""
        result = CliRunner().invoke(main, ["quotes", "list"])
        assert result.exit_code == 0
        for quote in SAMPLE_QUOTES:
            assert quote["quote"] in result.output

    def test_random(self):
        """Test a random quote is one of the bundled ones."""
        result = CliRunner().invoke(main, ["quotes", "random"])
        assert result.exit_code == 0
        assert any(q["quote"] in result.output for q in SAMPLE_QUOTES)


class TestServeCommand:
    """Tests for the serve command."""

    def _capture_run(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "uvicorn.run", lambda app, **kwargs: calls.append((app, kwargs))
        )
        for name in ("HOST", "PORT", "LOG_LEVEL"):
            monkeypatch.delenv(f"PCOS_COMPANION_{name}", raising=False)
        return calls

    def test_reload_exports_settings(self, monkeypatch):
        """Test --reload passes CLI overrides to the reloaded app via env."""
        calls = self._capture_run(monkeypatch)
        # Pre-set so monkeypatch restores the originals after the test
        monkeypatch.setenv("PCOS_COMPANION_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("PCOS_COMPANION_PORT", "8000")
        monkeypatch.setenv("PCOS_COMPANION_HOST", "127.0.0.1")

        result = CliRunner().invoke(
            main, ["--log-level", "debug", "serve", "--reload", "--port", "9100"]
        )

        assert result.exit_code == 0, result.output
        assert os.environ["PCOS_COMPANION_LOG_LEVEL"] == "DEBUG"
        assert os.environ["PCOS_COMPANION_PORT"] == "9100"
        assert os.environ["PCOS_COMPANION_HOST"] == "127.0.0.1"
        app, kwargs = calls[0]
        assert app == "pcos_companion.web:create_app"
        assert kwargs["factory"] is True
        assert kwargs["reload"] is True
        assert kwargs["port"] == 9100
        assert kwargs["log_level"] == "debug"

    def test_without_reload_passes_app(self, monkeypatch):
        """Test a plain run hands uvicorn the built app and leaves env alone."""
        calls = self._capture_run(monkeypatch)

        result = CliRunner().invoke(main, ["--log-level", "warning", "serve", "-p", "9200"])

        assert result.exit_code == 0, result.output
        app, kwargs = calls[0]
        assert isinstance(app, FastAPI)
        assert kwargs["port"] == 9200
        assert kwargs["factory"] is False
        assert kwargs["log_level"] == "warning"
        assert "PCOS_COMPANION_LOG_LEVEL" not in os.environ
        assert "PCOS_COMPANION_PORT" not in os.environ


def test_version():
    """Test --version prints the package version."""
    result = CliRunner().invoke(main, ["--version"])
    assert __version__ in result.output


def test_format_table():
    """Test table formatting pads columns."""
    table = format_table(["ID", "Name"], [["1", "Nutrition"], ["10", "Sleep"]])
    lines = table.splitlines()
    assert lines[0] == "ID  Name"
    assert lines[1].startswith("--  ----")
    assert lines[3] == "10  Sleep"
    assert format_table(["ID"], []) == ""
