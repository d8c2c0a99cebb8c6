"""
Precision configuration for arbitrary-precision arithmetic.

A PrecisionConfig is an immutable (digits, rounding mode) pair. It is passed
explicitly to every Decimal operation, so results never depend on the
caller's thread-local decimal context.

Usage:
    >>> mc = PrecisionConfig(precision=10, rounding=RoundingMode.HALF_UP)
    >>> a.add(b, mc)
"""

from __future__ import annotations

import decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..core.config import get_settings


class RoundingMode(str, Enum):
    """Standard decimal rounding policies."""

    HALF_UP = "HALF_UP"
    HALF_EVEN = "HALF_EVEN"
    HALF_DOWN = "HALF_DOWN"
    UP = "UP"  # away from zero
    DOWN = "DOWN"  # truncate
    CEILING = "CEILING"
    FLOOR = "FLOOR"
    ZERO_FIVE_UP = "ZERO_FIVE_UP"

    @property
    def decimal_rounding(self) -> str:
        """The matching constant of the decimal module."""
        return _DECIMAL_ROUNDING[self]


_DECIMAL_ROUNDING = {
    RoundingMode.HALF_UP: decimal.ROUND_HALF_UP,
    RoundingMode.HALF_EVEN: decimal.ROUND_HALF_EVEN,
    RoundingMode.HALF_DOWN: decimal.ROUND_HALF_DOWN,
    RoundingMode.UP: decimal.ROUND_UP,
    RoundingMode.DOWN: decimal.ROUND_DOWN,
    RoundingMode.CEILING: decimal.ROUND_CEILING,
    RoundingMode.FLOOR: decimal.ROUND_FLOOR,
    RoundingMode.ZERO_FIVE_UP: decimal.ROUND_05UP,
}


class PrecisionConfig(BaseModel):
    """
    Decimal precision and rounding policy.

    Attributes:
        precision: Number of significant digits kept after every step
        rounding: Rounding policy applied when digits are dropped
    """

    model_config = ConfigDict(frozen=True)

    precision: int = Field(gt=0, description="Significant digits")
    rounding: RoundingMode = Field(default=RoundingMode.HALF_UP, description="Rounding policy")

    @classmethod
    def of(cls, precision: int, rounding: RoundingMode | str = RoundingMode.HALF_UP) -> PrecisionConfig:
        """Build a config, accepting the rounding mode by name."""
        if isinstance(rounding, str) and not isinstance(rounding, RoundingMode):
            rounding = rounding.upper()
        return cls(precision=precision, rounding=rounding)

    def to_decimal_context(self) -> decimal.Context:
        """Return a fresh decimal.Context configured with these settings."""
        return decimal.Context(prec=self.precision, rounding=self.rounding.decimal_rounding)

    def with_guard_digits(self, digits: int) -> PrecisionConfig:
        """Same rounding with extra working digits."""
        return PrecisionConfig(precision=self.precision + digits, rounding=self.rounding)

    def __str__(self) -> str:
        return f"precision={self.precision} rounding={self.rounding.value}"


# IEEE 754-2008 decimal interchange formats
DECIMAL32 = PrecisionConfig(precision=7, rounding=RoundingMode.HALF_EVEN)
DECIMAL64 = PrecisionConfig(precision=16, rounding=RoundingMode.HALF_EVEN)
DECIMAL128 = PrecisionConfig(precision=34, rounding=RoundingMode.HALF_EVEN)


def default_precision_config() -> PrecisionConfig:
    """Config built from Settings.DEFAULT_PRECISION and Settings.DEFAULT_ROUNDING."""
    settings = get_settings()
    return PrecisionConfig.of(settings.DEFAULT_PRECISION, settings.DEFAULT_ROUNDING)
