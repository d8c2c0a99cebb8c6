"""
hypermath.math - multi-precision value types

Hypercomplex numbers, coordinate vectors and matrices with:
- Arbitrary-precision Decimal variants driven by an explicit PrecisionConfig
- Machine-precision float variants
- Plain-text and LaTeX output
"""

from .arithmetic import Arithmetic, DecimalArithmetic, FloatArithmetic
from .context import (
    DECIMAL32,
    DECIMAL64,
    DECIMAL128,
    PrecisionConfig,
    RoundingMode,
    default_precision_config,
)
from .geometric import FloatMatrix, FloatVector, Matrix, Vector
from .numeric import (
    DEFAULT_FAMILY_THRESHOLDS,
    FLOAT_ONE,
    FLOAT_ZERO,
    ONE,
    ZERO,
    FamilyThresholds,
    FloatHypercomplex,
    Hypercomplex,
)
from .value import MathValue

__all__ = [
    "MathValue",
    "PrecisionConfig",
    "RoundingMode",
    "DECIMAL32",
    "DECIMAL64",
    "DECIMAL128",
    "default_precision_config",
    "Arithmetic",
    "DecimalArithmetic",
    "FloatArithmetic",
    "FamilyThresholds",
    "DEFAULT_FAMILY_THRESHOLDS",
    "Hypercomplex",
    "FloatHypercomplex",
    "ZERO",
    "ONE",
    "FLOAT_ZERO",
    "FLOAT_ONE",
    "Vector",
    "FloatVector",
    "Matrix",
    "FloatMatrix",
]
