"""Integer arithmetic helpers with a documented division-by-zero policy."""

from math_utils.arithmetic import (
    ArithmeticUtility,
    DivisionByZeroError,
    DivisionOutcome,
    divide,
    multiply,
)

__all__ = [
    "ArithmeticUtility",
    "DivisionByZeroError",
    "DivisionOutcome",
    "divide",
    "multiply",
]

__version__ = "0.1.0"
