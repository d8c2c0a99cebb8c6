"""
Scalar arithmetic capabilities.

Hypercomplex, vector and matrix algorithms are written once against the
Arithmetic interface and instantiated per scalar representation:

- DecimalArithmetic: arbitrary precision, every step rounded under a
  PrecisionConfig
- FloatArithmetic: native IEEE-754 doubles, no configuration

The real n-th root and the arctangent, sine and cosine used by magnitude
and root extraction live here too.
"""

from __future__ import annotations

import decimal
import math
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Generic, TypeVar

from ..core.errors import InvalidOperationError, InvalidShapeError
from .context import PrecisionConfig

S = TypeVar("S")

# Extra working digits for iterative root finding and series
GUARD_DIGITS = 10


def to_decimal(value: Any) -> Decimal:
    """
    Convert a coefficient to Decimal.

    None is zero. Floats go through their shortest repr, so 0.1 becomes
    Decimal('0.1') rather than the binary expansion.

    Raises:
        InvalidShapeError: If the value cannot be parsed or is not finite
    """
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    else:
        text = value.strip() if isinstance(value, str) else str(value)
        try:
            result = Decimal(text)
        except decimal.InvalidOperation as e:
            raise InvalidShapeError(f"Cannot convert {value!r} to a decimal coefficient") from e
    if not result.is_finite():
        raise InvalidShapeError(f"Coefficient must be finite, got {value!r}")
    return result


def to_float(value: Any) -> float:
    """Convert a coefficient to float; None is zero."""
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidShapeError(f"Cannot convert {value!r} to a float coefficient") from e


def _check_root_degree(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"Root degree must be an int, got {type(n).__name__}")
    if n < 1:
        raise InvalidOperationError("real root", f"degree must be 1 or greater, got {n}")


class Arithmetic(ABC, Generic[S]):
    """Operations a scalar representation must provide."""

    zero: S

    @abstractmethod
    def round(self, x: S) -> S:
        """Apply the rounding policy to a single value."""

    @abstractmethod
    def add(self, a: S, b: S) -> S:
        pass

    @abstractmethod
    def subtract(self, a: S, b: S) -> S:
        pass

    @abstractmethod
    def multiply(self, a: S, b: S) -> S:
        pass

    @abstractmethod
    def negate(self, a: S) -> S:
        pass

    @abstractmethod
    def divide(self, a: S, b: S | int) -> S:
        pass

    @abstractmethod
    def real_root(self, x: S, n: int) -> S:
        """Real n-th root; odd roots of negative values are negative."""

    @abstractmethod
    def arctan(self, x: S) -> S:
        """Arctangent in radians, in (-pi/2, pi/2)."""

    @abstractmethod
    def half_pi(self) -> S:
        pass

    @abstractmethod
    def cos(self, x: S) -> S:
        pass

    @abstractmethod
    def sin(self, x: S) -> S:
        pass

    @abstractmethod
    def is_integral(self, x: S) -> bool:
        pass

    @abstractmethod
    def to_float(self, x: S) -> float:
        pass

    @abstractmethod
    def from_float(self, f: float) -> S:
        pass

    def square(self, a: S) -> S:
        return self.multiply(a, a)

    def compare(self, a: S, b: S) -> int:
        return (a > b) - (a < b)

    def is_zero(self, x: S) -> bool:
        return x == self.zero


class DecimalArithmetic(Arithmetic[Decimal]):
    """
    Decimal arithmetic under an explicit PrecisionConfig.

    Every method rounds its own result, so a chain of calls rounds each
    intermediate value rather than only the final one.
    """

    zero = Decimal(0)

    def __init__(self, config: PrecisionConfig):
        if not isinstance(config, PrecisionConfig):
            raise TypeError(
                f"Decimal arithmetic requires a PrecisionConfig, got {type(config).__name__}"
            )
        self.config = config
        self._context = config.to_decimal_context()

    def round(self, x: Decimal) -> Decimal:
        return self._context.plus(x)

    def add(self, a: Decimal, b: Decimal) -> Decimal:
        return self._context.add(a, b)

    def subtract(self, a: Decimal, b: Decimal) -> Decimal:
        return self._context.subtract(a, b)

    def multiply(self, a: Decimal, b: Decimal) -> Decimal:
        return self._context.multiply(a, b)

    def negate(self, a: Decimal) -> Decimal:
        return self._context.minus(a)

    def divide(self, a: Decimal, b: Decimal | int) -> Decimal:
        return self._context.divide(a, b)

    def _work_context(self) -> decimal.Context:
        return self.config.with_guard_digits(GUARD_DIGITS).to_decimal_context()

    def real_root(self, x: Decimal, n: int) -> Decimal:
        """
        Real n-th root rounded under the config.

        Square roots use Decimal.sqrt; higher degrees run Newton's method with
        GUARD_DIGITS extra digits, starting from a power of ten above the
        root so the iterates decrease monotonically.
        """
        _check_root_degree(n)
        if self.is_zero(x):
            return self.round(Decimal(0))
        if x < 0:
            if n % 2 == 0:
                raise InvalidOperationError("real root", f"even root of negative value {x}")
            return self.negate(self.real_root(-x, n))
        if n == 1:
            return self.round(x)

        work = self._work_context()
        if n == 2:
            return self.round(work.sqrt(x))

        degree = Decimal(n)
        below = degree - 1

        def step(y: Decimal) -> Decimal:
            quotient = work.divide(x, work.power(y, n - 1))
            return work.divide(work.add(work.multiply(below, y), quotient), degree)

        y = step(Decimal(1).scaleb(x.adjusted() // n + 1))
        while True:
            following = step(y)
            if following >= y:
                break
            y = following
        return self.round(y)

    def arctan(self, x: Decimal) -> Decimal:
        with decimal.localcontext(self._work_context()):
            return self.round(_arctan(x))

    def half_pi(self) -> Decimal:
        with decimal.localcontext(self._work_context()):
            return self.round(2 * _arctan(Decimal(1)))

    def cos(self, x: Decimal) -> Decimal:
        """Cosine by its Taylor series; converges quickly for |x| <= pi."""
        with decimal.localcontext(self._work_context()):
            total = term = Decimal(1)
            i = 0
            while True:
                i += 2
                term = -term * x * x / (i * (i - 1))
                following = total + term
                if following == total:
                    break
                total = following
        return self.round(total)

    def sin(self, x: Decimal) -> Decimal:
        """Sine by its Taylor series; converges quickly for |x| <= pi."""
        with decimal.localcontext(self._work_context()):
            total = term = +x
            i = 1
            while True:
                term = -term * x * x / ((i + 1) * (i + 2))
                i += 2
                following = total + term
                if following == total:
                    break
                total = following
        return self.round(total)

    def is_integral(self, x: Decimal) -> bool:
        return x == x.to_integral_value()

    def to_float(self, x: Decimal) -> float:
        return float(x)

    def from_float(self, f: float) -> Decimal:
        return Decimal(repr(f))


def _arctan(x: Decimal) -> Decimal:
    """
    Arctangent under the current decimal context.

    Uses Euler's series, whose term ratio is at most 1/2 for 0 < x <= 1;
    larger arguments go through atan(x) = pi/2 - atan(1/x).
    """
    if x.is_zero():
        return Decimal(0)
    if x < 0:
        return -_arctan(-x)
    if x > 1:
        return 2 * _arctan(Decimal(1)) - _arctan(1 / x)
    ratio = x * x / (1 + x * x)
    total = term = x / (1 + x * x)
    n = 1
    while True:
        term = term * ratio * (2 * n) / (2 * n + 1)
        n += 1
        following = total + term
        if following == total:
            break
        total = following
    return total


class FloatArithmetic(Arithmetic[float]):
    """Native double arithmetic; rounding is whatever the hardware does."""

    zero = 0.0

    def round(self, x: float) -> float:
        return x

    def add(self, a: float, b: float) -> float:
        return a + b

    def subtract(self, a: float, b: float) -> float:
        return a - b

    def multiply(self, a: float, b: float) -> float:
        return a * b

    def negate(self, a: float) -> float:
        return -a

    def divide(self, a: float, b: float | int) -> float:
        return a / b

    def arctan(self, x: float) -> float:
        return math.atan(x)

    def half_pi(self) -> float:
        return math.pi / 2

    def cos(self, x: float) -> float:
        return math.cos(x)

    def sin(self, x: float) -> float:
        return math.sin(x)

    def real_root(self, x: float, n: int) -> float:
        _check_root_degree(n)
        if self.is_zero(x):
            return 0.0
        if x < 0:
            if n % 2 == 0:
                raise InvalidOperationError("real root", f"even root of negative value {x}")
            return -self.real_root(-x, n)
        if n == 1:
            return x
        if n == 2:
            return math.sqrt(x)
        y = x ** (1.0 / n)
        # one Newton step tightens the pow() estimate
        return y - (y ** n - x) / (n * y ** (n - 1))

    def is_integral(self, x: float) -> bool:
        return math.isfinite(x) and float(x).is_integer()

    def to_float(self, x: float) -> float:
        return x

    def from_float(self, f: float) -> float:
        return f


FLOAT_ARITHMETIC = FloatArithmetic()
