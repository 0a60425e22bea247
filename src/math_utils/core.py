"""Core orchestration logic for the Math Utils application."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

from math_utils.arithmetic import ArithmeticUtility, DivisionByZeroError
from math_utils.models.io import OperationResult
from math_utils.utils.settings import get_arithmetic_settings

if TYPE_CHECKING:
    from math_utils.utils.settings import ArithmeticSettings

SUPPORTED_OPERATIONS = ("multiply", "divide")


class MathUtilsError(RuntimeError):
    """Base class for application errors."""


class ConfigurationError(MathUtilsError):
    """Raised when the arithmetic settings cannot be loaded."""

    def __init__(self, message: str | None = None) -> None:
        """Initialise the configuration error with an optional message."""
        default_message = "Arithmetic settings are invalid."
        super().__init__(message or default_message)


class UnknownOperationError(MathUtilsError):
    """Raised when an unsupported operation name is requested."""

    def __init__(self, name: str) -> None:
        """Initialise the error with the rejected operation name."""
        supported = ", ".join(SUPPORTED_OPERATIONS)
        super().__init__(f"Unknown operation '{name}'. Expected one of: {supported}")
        self.name = name


def create_utility(
    settings: ArithmeticSettings | None = None,
    *,
    strict: bool | None = None,
) -> ArithmeticUtility:
    """Build an arithmetic utility from settings.

    ``strict`` overrides the configured division-by-zero policy when given.
    """
    if settings is None:
        try:
            settings = get_arithmetic_settings()
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc

    if strict is None:
        strict = settings.strict
    policy = "raise" if strict else "zero"

    return ArithmeticUtility(
        integer_bits=settings.integer_bits,
        zero_division_policy=policy,
    )


def run_operation(
    name: str,
    a: int,
    b: int,
    *,
    strict: bool | None = None,
) -> OperationResult:
    """Run a named operation and return its structured result.

    Raises:
        UnknownOperationError: If ``name`` is not a supported operation.
        DivisionByZeroError: If dividing by zero under the raise policy.
        ConfigurationError: If the settings fail validation.

    """
    operation = name.strip().lower()
    if operation not in SUPPORTED_OPERATIONS:
        raise UnknownOperationError(name)

    utility = create_utility(strict=strict)
    if operation == "multiply":
        result = utility.multiply(a, b)
    else:
        result = utility.divide(a, b)

    return OperationResult(operation=operation, a=a, b=b, result=result)


__all__ = [
    "SUPPORTED_OPERATIONS",
    "ConfigurationError",
    "DivisionByZeroError",
    "MathUtilsError",
    "UnknownOperationError",
    "create_utility",
    "run_operation",
]
