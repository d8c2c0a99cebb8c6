"""
Shared pytest fixtures and utilities for testing hypermath value types.

This module provides:
- Precision configurations used across the test modules
- Utilities for testing Pydantic validation
- Helpers for comparing coefficients of Decimal values
"""

from decimal import Decimal
from typing import Any, Type

import pytest
from pydantic import BaseModel, ValidationError

from hypermath.core.config import get_settings
from hypermath.math.context import PrecisionConfig, RoundingMode


@pytest.fixture
def mc() -> PrecisionConfig:
    """Generous precision so integer test values stay exact."""
    return PrecisionConfig(precision=30, rounding=RoundingMode.HALF_UP)


@pytest.fixture
def mc3() -> PrecisionConfig:
    """Three significant digits, for observing per-step rounding."""
    return PrecisionConfig(precision=3, rounding=RoundingMode.HALF_UP)


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised with expected details."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
    ) -> ValidationError:
        """
        Assert that creating a model raises ValidationError.

        Args:
            model_class: The Pydantic model class
            data: Invalid data to pass to model
            expected_field: Expected field name in error (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        return error

    return _assert_validation


@pytest.fixture
def assert_decimals():
    """Helper to compare a sequence of Decimals against expected literals."""
    def _assert_decimals(actual: Any, expected: list[Any]) -> None:
        actual = list(actual)
        assert len(actual) == len(expected), f"{actual} != {expected}"
        for got, want in zip(actual, expected):
            assert isinstance(got, Decimal)
            assert got == Decimal(str(want)), f"{actual} != {expected}"

    return _assert_decimals


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached; tests that patch the environment need a fresh read."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
