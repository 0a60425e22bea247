"""Tests for CLI interface implementation."""

import json
import logging
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
import structlog
import typer
from typer.testing import CliRunner

from math_utils.core import ConfigurationError
from math_utils.interfaces.base import BaseInterface
from math_utils.interfaces.cli import CLIInterface
from math_utils.utils.logging import configure_logging
from math_utils.utils.settings import LoggingSettings

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging() -> Iterator[None]:
    """Route structured logs to stderr so stdout only carries results."""
    configure_logging(LoggingSettings(log_level="CRITICAL"))
    yield
    structlog.reset_defaults()
    logging.basicConfig(force=True, level=logging.WARNING, handlers=[])


class TestCLIInterface:
    """Test CLI interface functionality."""

    def test_cli_interface_inherits_base(self) -> None:
        """Test that CLIInterface inherits from BaseInterface."""
        assert issubclass(CLIInterface, BaseInterface)

    def test_cli_interface_has_name(self) -> None:
        """Test that CLIInterface has correct name."""
        cli = CLIInterface()
        assert cli.name == "CLI"

    def test_cli_interface_has_typer_app(self) -> None:
        """Test that CLIInterface has Typer app."""
        cli = CLIInterface()
        assert isinstance(cli.app, typer.Typer)

    def test_cli_welcome_command(self) -> None:
        """Test CLI welcome command functionality."""
        cli = CLIInterface()

        with patch("math_utils.interfaces.cli.console") as mock_console:
            cli.welcome()

            assert mock_console.print.call_count == 2
            first_call = mock_console.print.call_args_list[0][0]
            assert "Welcome to Math Utils!" in str(first_call)
            second_call = mock_console.print.call_args_list[1][0]
            assert "Type --help for more information" in str(second_call)

    def test_cli_run_method(self) -> None:
        """Test CLI run method executes typer app."""
        cli = CLIInterface()
        cli.app = MagicMock()

        cli.run()

        cli.app.assert_called_once()

    def test_cli_multiply_prints_product(self) -> None:
        """The multiply command prints the product."""
        cli = CLIInterface()

        with patch("math_utils.interfaces.cli.console") as mock_console:
            cli.multiply(3, 4)

            mock_console.print.assert_called_once_with("12", highlight=False)
            mock_console.file.flush.assert_called_once()

    def test_cli_divide_by_zero_prints_zero(self) -> None:
        """Without --strict a zero divisor prints 0."""
        cli = CLIInterface()

        with patch("math_utils.interfaces.cli.console") as mock_console:
            cli.divide(5, 0)

            mock_console.print.assert_called_once_with("0", highlight=False)

    def test_cli_divide_strict_exits(self) -> None:
        """With --strict a zero divisor exits with an error."""
        cli = CLIInterface()

        with patch("math_utils.interfaces.cli.console") as mock_console:
            with pytest.raises(typer.Exit) as exc_info:
                cli.divide(5, 0, strict=True)

            assert exc_info.value.exit_code == 1
            mock_console.print.assert_called_once()
            assert "Cannot divide 5 by zero." in str(mock_console.print.call_args)

    def test_cli_reports_configuration_error(self) -> None:
        """Invalid settings are reported and exit with code 1."""
        cli = CLIInterface()

        with (
            patch("math_utils.interfaces.cli.console") as mock_console,
            patch("math_utils.interfaces.cli.run_operation") as mock_run,
        ):
            mock_run.side_effect = ConfigurationError("bad width")

            with pytest.raises(typer.Exit):
                cli.multiply(1, 2)

            assert "bad width" in str(mock_console.print.call_args)

    def test_cli_divide_passes_strict_flag(self) -> None:
        """Only an explicit --strict overrides the configured policy."""
        cli = CLIInterface()

        with (
            patch("math_utils.interfaces.cli.console"),
            patch("math_utils.interfaces.cli.run_operation") as mock_run,
        ):
            cli.divide(9, 3)
            cli.divide(9, 3, strict=True)

        assert mock_run.call_args_list[0].kwargs == {"strict": None}
        assert mock_run.call_args_list[1].kwargs == {"strict": True}


class TestCLICommands:
    """Invoke the Typer application end to end."""

    def test_multiply_command(self) -> None:
        """The multiply command prints the product."""
        result = runner.invoke(CLIInterface().app, ["multiply", "3", "4"])

        assert result.exit_code == 0
        assert result.output.strip() == "12"

    def test_negative_operands(self) -> None:
        """Negative operands are parsed as arguments."""
        result = runner.invoke(CLIInterface().app, ["multiply", "-2", "5"])

        assert result.exit_code == 0
        assert result.output.strip() == "-10"

    def test_divide_truncates(self) -> None:
        """The divide command truncates toward zero."""
        result = runner.invoke(CLIInterface().app, ["divide", "--", "-7", "2"])

        assert result.exit_code == 0
        assert result.output.strip() == "-3"

    def test_divide_json_output(self) -> None:
        """--json renders the structured result."""
        result = runner.invoke(CLIInterface().app, ["divide", "9", "3", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "operation": "divide",
            "a": 9,
            "b": 3,
            "result": 3,
        }

    def test_divide_by_zero_strict(self) -> None:
        """--strict turns a zero divisor into a failing exit code."""
        result = runner.invoke(CLIInterface().app, ["divide", "5", "0", "--strict"])

        assert result.exit_code == 1
        assert "by zero" in result.output

    def test_environment_policy(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The configured raise policy applies to the CLI as well."""
        monkeypatch.setenv("MATH_ZERO_DIVISION_POLICY", "raise")

        result = runner.invoke(CLIInterface().app, ["divide", "5", "0"])

        assert result.exit_code == 1

    def test_invalid_operand(self) -> None:
        """Non-integer operands are rejected by the parser."""
        result = runner.invoke(CLIInterface().app, ["multiply", "1.5", "2"])

        assert result.exit_code == 2
