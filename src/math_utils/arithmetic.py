"""Integer arithmetic helpers with a non-raising division policy.

``divide`` returns ``0`` for a zero divisor instead of raising. Callers that
need to tell a masked division by zero apart from a genuine zero quotient can
use :meth:`ArithmeticUtility.try_divide` or the ``"raise"`` policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from math_utils.base import BaseComponent

ZeroDivisionPolicy = Literal["zero", "raise"]

DIVISION_BY_ZERO_MESSAGE = "division by zero"


class DivisionByZeroError(ZeroDivisionError):
    """Raised by ``divide`` under the ``"raise"`` policy."""

    def __init__(self, dividend: int) -> None:
        """Initialise the error with the dividend that was divided by zero."""
        super().__init__(f"Cannot divide {dividend} by zero.")
        self.dividend = dividend


@dataclass(frozen=True, slots=True)
class DivisionOutcome:
    """Tagged result of a division that may fail."""

    ok: bool
    value: int | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: int) -> DivisionOutcome:
        """Build a successful outcome."""
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> DivisionOutcome:
        """Build a failed outcome."""
        return cls(ok=False, error=error)


def wrap_integer(value: int, bits: int) -> int:
    """Wrap ``value`` into the signed two's-complement range of ``bits``."""
    half = 1 << (bits - 1)
    mask = (1 << bits) - 1
    return ((value + half) & mask) - half


def truncating_quotient(a: int, b: int) -> int:
    """Return ``a / b`` with the fractional part discarded toward zero."""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


class ArithmeticUtility(BaseComponent):
    """Stateless integer operations.

    Args:
        integer_bits: Emulated host integer width. ``None`` keeps Python's
            unbounded integers.
        zero_division_policy: ``"zero"`` returns 0 for a zero divisor,
            ``"raise"`` raises :class:`DivisionByZeroError`.

    """

    def __init__(
        self,
        *,
        integer_bits: int | None = None,
        zero_division_policy: ZeroDivisionPolicy = "zero",
    ) -> None:
        """Store the immutable configuration of the utility."""
        super().__init__()
        if integer_bits is not None and integer_bits < 2:
            msg = f"integer_bits must be at least 2, got {integer_bits}"
            raise ValueError(msg)
        if zero_division_policy not in ("zero", "raise"):
            msg = f"Unknown zero division policy: {zero_division_policy}"
            raise ValueError(msg)
        self._integer_bits = integer_bits
        self._zero_division_policy: ZeroDivisionPolicy = zero_division_policy

    @property
    def integer_bits(self) -> int | None:
        """Return the emulated integer width, if any."""
        return self._integer_bits

    @property
    def zero_division_policy(self) -> ZeroDivisionPolicy:
        """Return the configured division-by-zero policy."""
        return self._zero_division_policy

    def _wrap(self, value: int) -> int:
        if self._integer_bits is None:
            return value
        return wrap_integer(value, self._integer_bits)

    def multiply(self, a: int, b: int) -> int:
        """Return the product of two integers.

        Overflow is not reported: with a fixed ``integer_bits`` the product
        silently wraps around.
        """
        result = self._wrap(self._wrap(a) * self._wrap(b))
        self.logger.debug("multiply", a=a, b=b, result=result)
        return result

    def divide(self, a: int, b: int) -> int:
        """Return the truncating quotient of two integers.

        A zero divisor yields ``0`` under the default policy, which is
        indistinguishable from a genuine zero quotient.

        Raises:
            DivisionByZeroError: If ``b`` is zero and the policy is ``"raise"``.

        """
        a, b = self._wrap(a), self._wrap(b)
        if b == 0:
            if self._zero_division_policy == "raise":
                self.logger.error("Division by zero rejected", dividend=a)
                raise DivisionByZeroError(a)
            self.logger.warning("Division by zero, returning 0", dividend=a)
            return 0

        result = self._wrap(truncating_quotient(a, b))
        self.logger.debug("divide", a=a, b=b, result=result)
        return result

    def try_divide(self, a: int, b: int) -> DivisionOutcome:
        """Divide without raising, reporting a zero divisor explicitly."""
        if self._wrap(b) == 0:
            return DivisionOutcome.failure(DIVISION_BY_ZERO_MESSAGE)
        a, b = self._wrap(a), self._wrap(b)
        return DivisionOutcome.success(self._wrap(truncating_quotient(a, b)))


def multiply(a: int, b: int) -> int:
    """Return ``a * b`` using the default utility."""
    return ArithmeticUtility().multiply(a, b)


def divide(a: int, b: int) -> int:
    """Return the truncating quotient of ``a`` and ``b``, or 0 if ``b`` is 0."""
    return ArithmeticUtility().divide(a, b)


__all__ = [
    "ArithmeticUtility",
    "DivisionByZeroError",
    "DivisionOutcome",
    "divide",
    "multiply",
    "truncating_quotient",
    "wrap_integer",
]
