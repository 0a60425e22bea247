"""CLI interface implementation using Typer."""

from typing import Annotated

import typer
from rich.console import Console

from math_utils.core import (
    ConfigurationError,
    DivisionByZeroError,
    run_operation,
)
from math_utils.models.io import OperationResult, WelcomeMessage

from .base import BaseInterface

# Configure console for better test compatibility
# Force terminal mode even in non-TTY environments
console = Console(force_terminal=True, force_interactive=False)

_JSON_FLAG_DEFAULT = False

# Lets operands such as "-2" through as arguments instead of unknown options
_OPERAND_CONTEXT = {"ignore_unknown_options": True}


class CLIInterface(BaseInterface):
    """Command Line Interface implementation."""

    def __init__(self) -> None:
        """Initialize the CLI interface."""
        super().__init__()
        self.app = typer.Typer(
            name="math-utils",
            help="Integer multiply and divide helpers.",
            add_completion=False,
        )
        self._setup_commands()

    @property
    def name(self) -> str:
        """Get the interface name.

        Returns:
            str: The interface name

        """
        return "CLI"

    def _setup_commands(self) -> None:
        """Set up CLI commands."""
        self.app.command(name="welcome")(self.welcome)
        self.app.command(name="multiply", context_settings=_OPERAND_CONTEXT)(
            self.multiply,
        )
        self.app.command(name="divide", context_settings=_OPERAND_CONTEXT)(
            self.divide,
        )

        # Add a callback that shows welcome when no command is specified
        self.app.callback(invoke_without_command=True)(self._main_callback)

    def _main_callback(self, ctx: typer.Context) -> None:  # pragma: no cover
        """Run when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            self.welcome()
            raise typer.Exit(0)

    def welcome(self) -> None:
        """Display welcome message."""
        msg = WelcomeMessage()
        console.print(msg.message)
        console.print(msg.hint)
        console.file.flush()

    def _render_result(self, result: OperationResult, *, json_output: bool) -> None:
        """Print an operation result as plain text or JSON."""
        if json_output:
            console.print_json(data=result.model_dump(), highlight=False)
        else:
            console.print(str(result.result), highlight=False)
        console.file.flush()

    def _handle_configuration_error(self, exc: ConfigurationError) -> None:
        """Report invalid settings and exit."""
        console.print(f"[red]Invalid configuration: {exc}[/red]")
        console.file.flush()
        self.logger.error("Configuration error", error=str(exc))
        raise typer.Exit(1) from exc

    def multiply(
        self,
        a: Annotated[int, typer.Argument(help="First factor.")],
        b: Annotated[int, typer.Argument(help="Second factor.")],
        json_output: Annotated[
            bool,
            typer.Option(
                "--json",
                help="Render the result as JSON.",
                is_flag=True,
            ),
        ] = _JSON_FLAG_DEFAULT,
    ) -> None:
        """Multiply two integers."""
        self.logger.info("Running multiply", a=a, b=b)

        try:
            result = run_operation("multiply", a, b)
        except ConfigurationError as exc:
            self._handle_configuration_error(exc)
            return

        self._render_result(result, json_output=json_output)

    def divide(
        self,
        a: Annotated[int, typer.Argument(help="Dividend.")],
        b: Annotated[int, typer.Argument(help="Divisor.")],
        strict: Annotated[
            bool,
            typer.Option(
                "--strict",
                help="Fail on a zero divisor instead of printing 0.",
                is_flag=True,
            ),
        ] = False,
        json_output: Annotated[
            bool,
            typer.Option(
                "--json",
                help="Render the result as JSON.",
                is_flag=True,
            ),
        ] = _JSON_FLAG_DEFAULT,
    ) -> None:
        """Divide two integers, truncating toward zero."""
        self.logger.info("Running divide", a=a, b=b, strict=strict)

        try:
            result = run_operation("divide", a, b, strict=True if strict else None)
        except DivisionByZeroError as exc:
            console.print(f"[red]{exc}[/red]")
            console.file.flush()
            self.logger.error("Division failed", error=str(exc))
            raise typer.Exit(1) from exc
        except ConfigurationError as exc:
            self._handle_configuration_error(exc)
            return

        self._render_result(result, json_output=json_output)

    def run(self) -> None:
        """Run the CLI interface."""
        self.app()
