"""Core utilities package"""

from .config import Settings, get_settings
from .errors import (
    DimensionMismatchError,
    HypermathError,
    IndexOutOfRangeError,
    InvalidOperationError,
    InvalidShapeError,
    NotImplementedFeatureError,
)
from .logging import get_context_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "get_context_logger",
    "HypermathError",
    "DimensionMismatchError",
    "InvalidShapeError",
    "InvalidOperationError",
    "NotImplementedFeatureError",
    "IndexOutOfRangeError",
]
