"""Tests for CLI support utilities."""
import io
from unittest.mock import patch

import pytest
import typer
from rich.console import Console

from ejectd.cli_support import (
    Choice,
    MenuAction,
    console_reader,
    handle_cli_error,
    parse_choice,
    print_error,
    print_warning,
)


class TestParseChoice:
    """Test menu input interpretation."""

    @pytest.mark.parametrize("raw", ["q", "Q", " q ", "Q\n", "\tq"])
    def test_quit(self, raw):
        assert parse_choice(raw, 3) == Choice(MenuAction.QUIT)

    @pytest.mark.parametrize("raw", ["r", "R", "r\n"])
    def test_refresh(self, raw):
        assert parse_choice(raw, 3) == Choice(MenuAction.REFRESH)

    def test_select_is_zero_based(self):
        assert parse_choice("1", 3) == Choice(MenuAction.SELECT, index=0)
        assert parse_choice("3\n", 3) == Choice(MenuAction.SELECT, index=2)

    @pytest.mark.parametrize("raw", ["0", "-1", "4", "", "   ", "abc", "+1", "1.0", "1 2", "qq", "²"])
    def test_invalid(self, raw):
        """Anything outside q, r and 1..count is invalid."""
        assert parse_choice(raw, 3) == Choice(MenuAction.INVALID)

    def test_single_drive(self):
        assert parse_choice("1", 1).action is MenuAction.SELECT
        assert parse_choice("2", 1).action is MenuAction.INVALID


class TestConsoleReader:
    """Test prompt reading through the Rich console."""

    def test_reads_line(self):
        console = Console(file=io.StringIO())
        with patch("builtins.input", return_value="2"):
            assert console_reader(console)("Your choice: ") == "2"

    def test_eof_becomes_none(self):
        console = Console(file=io.StringIO())
        with patch("builtins.input", side_effect=EOFError):
            assert console_reader(console)("Your choice: ") is None


class TestHandleCliError:
    """Test error exit helper."""

    def test_exits_with_code(self):
        console = Console(file=io.StringIO())
        with pytest.raises(typer.Exit) as exc_info:
            handle_cli_error(ValueError("bad value"), console)

        assert exc_info.value.exit_code == 1
        assert "bad value" in console.file.getvalue()


class TestPrintHelpers:
    """Test message formatting helpers."""

    def test_print_error(self):
        console = Console(file=io.StringIO())
        print_error(console, "Invalid selection.")
        assert "Invalid selection." in console.file.getvalue()

    def test_print_warning(self):
        console = Console(file=io.StringIO())
        print_warning(console, "Aborted.")
        assert "Aborted." in console.file.getvalue()
