"""Console entry point for Math Utils."""

from pydantic import ValidationError

from math_utils.core import ConfigurationError
from math_utils.interfaces.cli import CLIInterface, console
from math_utils.utils.logging import configure_logging


def main() -> None:
    """Configure logging and run the CLI.

    Invalid logging settings are reported like any other configuration
    error: a red message and exit code 1.
    """
    try:
        configure_logging()
    except ValidationError as exc:
        error = ConfigurationError(str(exc))
        console.print(f"[red]Invalid configuration: {error}[/red]")
        console.file.flush()
        raise SystemExit(1) from exc

    CLIInterface().run()


if __name__ == "__main__":  # pragma: no cover
    main()
