"""
hypermath - hypercomplex numbers, vectors and matrices in arbitrary and
machine precision.
"""

from .core.errors import (
    DimensionMismatchError,
    HypermathError,
    IndexOutOfRangeError,
    InvalidOperationError,
    InvalidShapeError,
    NotImplementedFeatureError,
)
from .math import (
    DECIMAL32,
    DECIMAL64,
    DECIMAL128,
    FamilyThresholds,
    FloatHypercomplex,
    FloatMatrix,
    FloatVector,
    Hypercomplex,
    Matrix,
    PrecisionConfig,
    RoundingMode,
    Vector,
    default_precision_config,
)

__version__ = "0.1.0"

__all__ = [
    "PrecisionConfig",
    "RoundingMode",
    "DECIMAL32",
    "DECIMAL64",
    "DECIMAL128",
    "default_precision_config",
    "FamilyThresholds",
    "Hypercomplex",
    "FloatHypercomplex",
    "Vector",
    "FloatVector",
    "Matrix",
    "FloatMatrix",
    "HypermathError",
    "DimensionMismatchError",
    "InvalidShapeError",
    "InvalidOperationError",
    "NotImplementedFeatureError",
    "IndexOutOfRangeError",
]
