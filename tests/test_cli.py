"""
Tests for the command line entry point.
"""

import io
import logging
from unittest.mock import MagicMock, patch

import pytest

from cdl.cli import build_parser, main, run
from cdl.exceptions import (
    ConfigurationError,
    DirectoryChangeError,
    ExitCode,
    ListingError,
)


@pytest.fixture
def deps():
    container = MagicMock()
    container.get_settings.return_value.log_level = logging.WARNING
    container.get_resolve_target_use_case.return_value.execute.return_value = "/target"
    container.get_change_directory_use_case.return_value.execute.return_value = "/target"
    container.get_print_listing_use_case.return_value.execute.return_value = (
        "    4.0K  2024-01-01 10:00  \x1b[01;34mdocs\x1b[0m\n"
    )
    return container


class TestParser:
    """Test cases for the argument parser."""

    def test_directory_is_optional(self):
        assert build_parser().parse_args([]).directory is None
        assert build_parser().parse_args(["/tmp"]).directory == "/tmp"

    def test_help_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--help"])

        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "cdl" in out
        assert "Return codes" in out


class TestRun:
    """Test cases for run."""

    def test_resolves_changes_and_lists(self, deps):
        stdin = io.StringIO("")
        stdout = io.StringIO()

        code = run("/target", deps, stdin=stdin, stdout=stdout)

        assert code == ExitCode.SUCCESS
        deps.get_resolve_target_use_case.return_value.execute.assert_called_once_with(
            "/target", stdin
        )
        deps.get_change_directory_use_case.return_value.execute.assert_called_once_with(
            "/target"
        )
        deps.get_print_listing_use_case.return_value.execute.assert_called_once_with(".")
        # Color codes reach stdout untouched
        assert stdout.getvalue() == "    4.0K  2024-01-01 10:00  \x1b[01;34mdocs\x1b[0m\n"

    def test_undecodable_name_bytes_are_written_back(self, deps):
        deps.get_print_listing_use_case.return_value.execute.return_value = "caf\udce9\n"
        buffer = io.BytesIO()
        stdout = io.TextIOWrapper(buffer, encoding="utf-8")

        run("/target", deps, stdout=stdout)

        assert buffer.getvalue() == b"caf\xe9\n"

    def test_listing_skipped_when_directory_change_fails(self, deps):
        deps.get_change_directory_use_case.return_value.execute.side_effect = (
            DirectoryChangeError("Directory does not exist or cannot be accessed: '/x'")
        )

        with pytest.raises(DirectoryChangeError):
            run("/x", deps, stdout=io.StringIO())
        deps.get_print_listing_use_case.return_value.execute.assert_not_called()


class TestMain:
    """Test cases for main."""

    def test_success(self, deps, capsys):
        with patch("cdl.cli.container", deps):
            assert main(["/target"]) == 0

        assert "docs" in capsys.readouterr().out

    def test_chdir_error_returns_2(self, deps, capsys):
        deps.get_change_directory_use_case.return_value.execute.side_effect = (
            DirectoryChangeError("Directory does not exist or cannot be accessed: '/x'")
        )

        with patch("cdl.cli.container", deps):
            assert main(["/x"]) == 2

        err = capsys.readouterr().err
        assert "ERROR:" in err
        assert "'/x'" in err

    def test_listing_error_returns_1(self, deps, capsys):
        deps.get_print_listing_use_case.return_value.execute.side_effect = ListingError(
            "Listing command not found: ls"
        )

        with patch("cdl.cli.container", deps):
            assert main(["/target"]) == ExitCode.GENERAL

        assert "Listing command not found: ls" in capsys.readouterr().err

    def test_configuration_error_returns_1(self, deps, capsys):
        deps.get_settings.side_effect = ConfigurationError("Invalid CDL_LOG_LEVEL: 'x'")

        with patch("cdl.cli.container", deps):
            assert main([]) == 1

        assert "Invalid CDL_LOG_LEVEL" in capsys.readouterr().err
        deps.get_resolve_target_use_case.assert_not_called()

    def test_bracketed_path_is_not_markup(self, deps, capsys):
        deps.get_change_directory_use_case.return_value.execute.side_effect = (
            DirectoryChangeError("Directory does not exist or cannot be accessed: '[red]x'")
        )

        with patch("cdl.cli.container", deps):
            main(["[red]x"])

        assert "[red]x" in capsys.readouterr().err
