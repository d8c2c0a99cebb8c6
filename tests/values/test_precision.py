"""Tests for PrecisionConfig and RoundingMode."""

import decimal
from decimal import Decimal

import pytest
from pydantic import ValidationError

from hypermath.math.arithmetic import DecimalArithmetic
from hypermath.math.context import (
    DECIMAL32,
    DECIMAL64,
    DECIMAL128,
    PrecisionConfig,
    RoundingMode,
    default_precision_config,
)


class TestPrecisionConfigConstruction:
    """Test construction and validation."""

    def test_create_with_precision_and_rounding(self):
        """Test the two recognized options are stored."""
        config = PrecisionConfig(precision=12, rounding=RoundingMode.FLOOR)
        assert config.precision == 12
        assert config.rounding is RoundingMode.FLOOR

    def test_default_rounding_is_half_up(self):
        """Test rounding defaults to HALF_UP."""
        assert PrecisionConfig(precision=5).rounding is RoundingMode.HALF_UP

    def test_rounding_accepted_by_value(self):
        """Test the rounding mode can be given as its string value."""
        config = PrecisionConfig(precision=5, rounding="HALF_EVEN")
        assert config.rounding is RoundingMode.HALF_EVEN

    def test_of_accepts_lowercase_names(self):
        """Test the of() factory normalizes rounding names."""
        config = PrecisionConfig.of(8, "half_down")
        assert config == PrecisionConfig(precision=8, rounding=RoundingMode.HALF_DOWN)

    @pytest.mark.parametrize("precision", [0, -3])
    def test_non_positive_precision_rejected(self, precision, assert_validation_error):
        """Test that precision must be a positive integer."""
        assert_validation_error(PrecisionConfig, {"precision": precision}, expected_field="precision")

    def test_unknown_rounding_rejected(self, assert_validation_error):
        """Test that rounding must be a known policy."""
        assert_validation_error(
            PrecisionConfig, {"precision": 5, "rounding": "SIDEWAYS"}, expected_field="rounding"
        )

    def test_config_is_immutable(self):
        """Test that a config cannot be modified after construction."""
        config = PrecisionConfig(precision=5)
        with pytest.raises(ValidationError):
            config.precision = 6

    def test_configs_are_hashable_values(self):
        """Test equal configs compare and hash equal."""
        a = PrecisionConfig(precision=5, rounding=RoundingMode.UP)
        b = PrecisionConfig.of(5, "UP")
        assert a == b
        assert hash(a) == hash(b)


class TestPrecisionConfigDecimalContext:
    """Test conversion to decimal.Context."""

    def test_context_carries_settings(self):
        """Test precision and rounding reach the decimal context."""
        context = PrecisionConfig(precision=9, rounding=RoundingMode.DOWN).to_decimal_context()
        assert context.prec == 9
        assert context.rounding == decimal.ROUND_DOWN

    def test_each_call_returns_fresh_context(self):
        """Test contexts are not shared between callers."""
        config = PrecisionConfig(precision=9)
        assert config.to_decimal_context() is not config.to_decimal_context()

    def test_with_guard_digits(self):
        """Test extra working digits keep the rounding mode."""
        config = PrecisionConfig(precision=9, rounding=RoundingMode.CEILING).with_guard_digits(4)
        assert config.precision == 13
        assert config.rounding is RoundingMode.CEILING

    def test_every_mode_maps_to_decimal_constant(self):
        """Test every rounding mode has a decimal module counterpart."""
        for mode in RoundingMode:
            assert mode.decimal_rounding in {
                decimal.ROUND_HALF_UP,
                decimal.ROUND_HALF_EVEN,
                decimal.ROUND_HALF_DOWN,
                decimal.ROUND_UP,
                decimal.ROUND_DOWN,
                decimal.ROUND_CEILING,
                decimal.ROUND_FLOOR,
                decimal.ROUND_05UP,
            }


class TestRoundingPolicies:
    """Test that each policy rounds as named."""

    @pytest.mark.parametrize(
        "mode, value, expected",
        [
            (RoundingMode.HALF_UP, "2.5", "3"),
            (RoundingMode.HALF_EVEN, "2.5", "2"),
            (RoundingMode.HALF_DOWN, "2.5", "2"),
            (RoundingMode.DOWN, "2.9", "2"),
            (RoundingMode.UP, "2.1", "3"),
            (RoundingMode.CEILING, "-2.9", "-2"),
            (RoundingMode.FLOOR, "-2.1", "-3"),
        ],
    )
    def test_single_digit_rounding(self, mode, value, expected):
        """Test rounding to one significant digit."""
        ops = DecimalArithmetic(PrecisionConfig(precision=1, rounding=mode))
        assert ops.round(Decimal(value)) == Decimal(expected)


class TestPresets:
    """Test the named configurations."""

    def test_decimal_interchange_presets(self):
        """Test the IEEE decimal presets."""
        assert DECIMAL32.precision == 7
        assert DECIMAL64.precision == 16
        assert DECIMAL128.precision == 34
        for preset in (DECIMAL32, DECIMAL64, DECIMAL128):
            assert preset.rounding is RoundingMode.HALF_EVEN

    def test_default_config_reads_settings(self, monkeypatch):
        """Test the default config follows the environment."""
        monkeypatch.setenv("HYPERMATH_DEFAULT_PRECISION", "50")
        monkeypatch.setenv("HYPERMATH_DEFAULT_ROUNDING", "floor")
        config = default_precision_config()
        assert config.precision == 50
        assert config.rounding is RoundingMode.FLOOR

    def test_default_config_without_environment(self, monkeypatch):
        """Test the built-in defaults."""
        monkeypatch.delenv("HYPERMATH_DEFAULT_PRECISION", raising=False)
        monkeypatch.delenv("HYPERMATH_DEFAULT_ROUNDING", raising=False)
        assert default_precision_config() == DECIMAL128
