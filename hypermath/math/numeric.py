"""
Hypercomplex number types.

A hypercomplex number is one real coefficient plus an ordered sequence of
imaginary coefficients a0 + a1*i1 + a2*i2 + ... . Any index beyond the stored
sequence is implicitly zero, so numbers of different imaginary dimension
interoperate by zero-padding.

Two variants share one algorithm set (HypercomplexBase):
- Hypercomplex: Decimal coefficients, operations take a PrecisionConfig
- FloatHypercomplex: float coefficients, native double semantics
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import IndexOutOfRangeError, InvalidOperationError
from ..core.logging import get_context_logger
from .arithmetic import FLOAT_ARITHMETIC, Arithmetic, DecimalArithmetic, to_decimal, to_float
from .context import PrecisionConfig
from .value import MathValue

if TYPE_CHECKING:
    from .geometric import FloatVector, Vector

logger = get_context_logger(__name__, component="hypercomplex")


class FamilyThresholds(BaseModel):
    """
    Index from which every imaginary coefficient must be zero for a number
    to belong to each family.

    The octonion and sedenion boundaries (8 and 15) are kept as they are
    rather than derived from the unit counts of those algebras (7 and 15).
    Pass a different instance to the classification methods, or set
    ``family_thresholds`` on a subclass, to use other boundaries.
    """

    model_config = ConfigDict(frozen=True)

    real: int = Field(default=0, ge=0)
    complex: int = Field(default=1, ge=0)
    quaternion: int = Field(default=3, ge=0)
    octonion: int = Field(default=8, ge=0)
    sedenion: int = Field(default=15, ge=0)


DEFAULT_FAMILY_THRESHOLDS = FamilyThresholds()

# Letters for the first imaginary units; later units get e5, e6, ...
IMAGINARY_UNITS = ("i", "j", "k", "l")


def imaginary_unit_label(index: int, tex: bool = False) -> str:
    """Label of the imaginary unit at coefficient index ``index``."""
    if index < len(IMAGINARY_UNITS):
        letter = IMAGINARY_UNITS[index]
        return f"\\mathbf{{{letter}}}" if tex else letter
    return f"\\mathbf{{e}}_{{{index + 1}}}" if tex else f"e{index + 1}"


class HypercomplexBase(BaseModel, MathValue):
    """
    Algorithms shared by both hypercomplex variants.

    Subclasses declare the ``real`` and ``imag`` fields, the scalar type, and
    public operations that pick an Arithmetic and call the ``_``-prefixed
    algorithms below.
    """

    model_config = ConfigDict(frozen=True)

    family_thresholds: ClassVar[FamilyThresholds] = DEFAULT_FAMILY_THRESHOLDS
    scalar_type: ClassVar[type]

    def __init__(self, real: Any = 0, *imag: Any, **kwargs: Any) -> None:
        """
        Initialize from a real part and any number of imaginary parts.

        ``Hypercomplex(1, 2, 3)`` is 1 + 2i + 3j. Keyword form
        ``Hypercomplex(real=1, imag=(2, 3))`` is accepted too. None
        coefficients are zero.
        """
        if "imag" in kwargs:
            if imag:
                raise ValueError("Pass imaginary parts positionally or as imag=, not both")
            imag = tuple(kwargs.pop("imag"))
        coerce = self.coerce_scalar
        super().__init__(real=coerce(real), imag=tuple(coerce(c) for c in imag), **kwargs)

    @classmethod
    def coerce_scalar(cls, value: Any) -> Any:
        raise NotImplementedError

    # Accessors

    def get_real_part(self) -> Any:
        return self.real

    def get_imaginary_part(self, n: int) -> Any:
        """
        Imaginary coefficient at index n (0 is the first imaginary unit).

        Indices beyond the stored coefficients are zero.

        Raises:
            IndexOutOfRangeError: If n is negative
        """
        if n < 0:
            raise IndexOutOfRangeError(n)
        if n >= len(self.imag):
            return self.scalar_type(0)
        return self.imag[n]

    @property
    def imaginary_parts_count(self) -> int:
        """Number of stored imaginary coefficients, trailing zeros included."""
        return len(self.imag)

    # Classification

    def _no_imaginary_part_from(self, start: int) -> bool:
        return all(c == 0 for c in self.imag[start:])

    def _thresholds(self, thresholds: Optional[FamilyThresholds]) -> FamilyThresholds:
        return thresholds if thresholds is not None else self.family_thresholds

    def is_real_number(self, thresholds: Optional[FamilyThresholds] = None) -> bool:
        return self._no_imaginary_part_from(self._thresholds(thresholds).real)

    def is_complex_number(self, thresholds: Optional[FamilyThresholds] = None) -> bool:
        return self._no_imaginary_part_from(self._thresholds(thresholds).complex)

    def is_quaternion(self, thresholds: Optional[FamilyThresholds] = None) -> bool:
        return self._no_imaginary_part_from(self._thresholds(thresholds).quaternion)

    def is_octonion(self, thresholds: Optional[FamilyThresholds] = None) -> bool:
        return self._no_imaginary_part_from(self._thresholds(thresholds).octonion)

    def is_sedenion(self, thresholds: Optional[FamilyThresholds] = None) -> bool:
        return self._no_imaginary_part_from(self._thresholds(thresholds).sedenion)

    # Comparison

    def _require_same_variant(self, other: Any) -> None:
        if not isinstance(other, HypercomplexBase) or other.scalar_type is not self.scalar_type:
            raise TypeError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    def compare_to(self, other: HypercomplexBase) -> int:
        """
        Lexicographic comparison: real parts first, then imaginary
        coefficients by ascending index with zero-padding.

        Returns:
            -1, 0 or 1
        """
        self._require_same_variant(other)
        pairs = [(self.real, other.real)]
        count = max(len(self.imag), len(other.imag))
        pairs.extend(
            (self.get_imaginary_part(i), other.get_imaginary_part(i)) for i in range(count)
        )
        for a, b in pairs:
            if a != b:
                return -1 if a < b else 1
        return 0

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, HypercomplexBase) or other.scalar_type is not self.scalar_type:
            return NotImplemented
        return self.compare_to(other) == 0

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self) -> int:
        imag = list(self.imag)
        while imag and imag[-1] == 0:
            imag.pop()
        return hash((self.real, tuple(imag)))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, HypercomplexBase):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, HypercomplexBase):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, HypercomplexBase):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, HypercomplexBase):
            return NotImplemented
        return self.compare_to(other) >= 0

    # Shared algorithms

    def _combine(self, other: HypercomplexBase, operation: Callable[[Any, Any], Any]) -> Any:
        self._require_same_variant(other)
        count = max(len(self.imag), len(other.imag))
        real = operation(self.real, other.real)
        imag = [
            operation(self.get_imaginary_part(i), other.get_imaginary_part(i))
            for i in range(count)
        ]
        return type(self)(real, *imag)

    def _conjugate(self, ops: Arithmetic) -> Any:
        return type(self)(ops.round(self.real), *(ops.negate(c) for c in self.imag))

    def _magnitude(self, ops: Arithmetic) -> Any:
        total = ops.square(ops.round(self.real))
        for coefficient in self.imag:
            total = ops.add(total, ops.square(ops.round(coefficient)))
        return ops.real_root(total, 2)

    def _root(self, n: int, ops: Arithmetic) -> Any:
        """
        n-th root by polar decomposition.

        The angle is arctan(imag/real) divided by n; a zero real part gives
        +pi/2 or -pi/2 by the sign of imag, and 0 for zero itself. Only
        numbers of the complex family have a single rotation angle, so
        anything with a nonzero coefficient past index 0 is rejected.
        """
        if not self.is_complex_number():
            raise InvalidOperationError("root", "number is not a complex number")
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError(f"Root degree must be an int, got {type(n).__name__}")
        if n < 1:
            raise InvalidOperationError("root", f"degree must be 1 or greater, got {n}")

        real, imag = self.real, self.get_imaginary_part(0)
        if not ops.is_zero(real):
            angle = ops.arctan(ops.divide(imag, real))
        elif ops.compare(imag, ops.zero) > 0:
            angle = ops.half_pi()
        elif ops.compare(imag, ops.zero) < 0:
            angle = ops.negate(ops.half_pi())
        else:
            angle = ops.zero
        angle = ops.divide(angle, n)
        magnitude = ops.real_root(self._magnitude(ops), n)
        logger.debug(
            "Computing root by polar decomposition",
            extra_data={"degree": n, "angle": str(angle), "magnitude": str(magnitude)},
        )

        real = ops.multiply(ops.cos(angle), magnitude)
        imag = ops.multiply(ops.sin(angle), magnitude)
        return type(self)(real, imag)

    def _is_integer(self, ops: Arithmetic) -> bool:
        return ops.is_integral(ops.round(self.real)) and self.is_real_number()

    def _is_natural_number(self, ops: Arithmetic) -> bool:
        return self._is_integer(ops) and ops.compare(self.real, ops.zero) > 0

    # Rendering

    def _render(self, tex: bool) -> str:
        if self.is_real_number():
            return str(self.real)

        terms: list[str] = []
        if self.real != 0:
            terms.append(str(self.real))
        for index, coefficient in enumerate(self.imag):
            if coefficient == 0:
                continue
            text = str(coefficient)
            if terms and not text.startswith("-"):
                text = "+" + text
            terms.append(text + imaginary_unit_label(index, tex))
        return "".join(terms)

    def to_string(self) -> str:
        """Plain text, e.g. ``1+2i-3j``; zero coefficients are omitted."""
        return self._render(tex=False)

    def to_tex(self) -> str:
        """LaTeX, e.g. ``1+2\\mathbf{i}-3\\mathbf{j}``."""
        return self._render(tex=True)

    def to_python(self) -> list[Any]:
        """Coefficients as a list, real part first."""
        return [self.real, *self.imag]

    def __str__(self) -> str:
        """String representation (for str() builtin)."""
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()})"


class Hypercomplex(HypercomplexBase):
    """
    Arbitrary-precision hypercomplex number.

    Every arithmetic operation takes a PrecisionConfig and rounds each
    coefficient it produces.

    Example:
        >>> mc = PrecisionConfig(precision=10)
        >>> Hypercomplex(1, 2).add(Hypercomplex(3, 4, 5), mc)
        Hypercomplex(4+6i+5j)
    """

    real: Decimal = Field(default=Decimal(0), description="The real part")
    imag: tuple[Decimal, ...] = Field(default=(), description="Imaginary coefficients")

    scalar_type: ClassVar[type] = Decimal

    @classmethod
    def coerce_scalar(cls, value: Any) -> Decimal:
        return to_decimal(value)

    def add(self, augend: Hypercomplex, mc: PrecisionConfig) -> Hypercomplex:
        """Coefficient-wise sum; the result has the larger imaginary dimension."""
        return self._combine(augend, DecimalArithmetic(mc).add)

    def subtract(self, subtrahend: Hypercomplex, mc: PrecisionConfig) -> Hypercomplex:
        """Coefficient-wise difference; the result has the larger imaginary dimension."""
        return self._combine(subtrahend, DecimalArithmetic(mc).subtract)

    def conjugate(self, mc: PrecisionConfig) -> Hypercomplex:
        return self._conjugate(DecimalArithmetic(mc))

    def magnitude(self, mc: PrecisionConfig) -> Decimal:
        """Euclidean norm of all coefficients, never negative."""
        return self._magnitude(DecimalArithmetic(mc))

    def root(self, n: int, mc: PrecisionConfig) -> Hypercomplex:
        """
        n-th root of a complex-family number.

        The angle used is arctan(imag/real) / n, so roots of negative reals
        comes out real: cbrt(-8) is 2 and sqrt(-4) is 2.

        Raises:
            InvalidOperationError: If the number has a nonzero imaginary
                coefficient past index 0, or n < 1
        """
        return self._root(n, DecimalArithmetic(mc))

    def sqrt(self, mc: PrecisionConfig) -> Hypercomplex:
        return self.root(2, mc)

    def cbrt(self, mc: PrecisionConfig) -> Hypercomplex:
        return self.root(3, mc)

    def is_integer(self, mc: PrecisionConfig) -> bool:
        """Real, and the real part rounded under mc is integral."""
        return self._is_integer(DecimalArithmetic(mc))

    def is_natural_number(self, mc: PrecisionConfig) -> bool:
        return self._is_natural_number(DecimalArithmetic(mc))

    def to_vector(self) -> Vector:
        from .geometric import Vector

        return Vector(self.real, *self.imag)

    @classmethod
    def from_vector(cls, vector: Vector) -> Hypercomplex:
        """Coordinate 0 becomes the real part, the rest imaginary parts."""
        return vector.to_hypercomplex()


class FloatHypercomplex(HypercomplexBase):
    """
    Machine-precision hypercomplex number.

    Same operations as Hypercomplex without a PrecisionConfig; rounding
    follows IEEE-754 doubles. Supports +, - and abs() directly.
    """

    real: float = Field(default=0.0, description="The real part")
    imag: tuple[float, ...] = Field(default=(), description="Imaginary coefficients")

    scalar_type: ClassVar[type] = float

    @classmethod
    def coerce_scalar(cls, value: Any) -> float:
        return to_float(value)

    def add(self, augend: FloatHypercomplex) -> FloatHypercomplex:
        return self._combine(augend, FLOAT_ARITHMETIC.add)

    def subtract(self, subtrahend: FloatHypercomplex) -> FloatHypercomplex:
        return self._combine(subtrahend, FLOAT_ARITHMETIC.subtract)

    def conjugate(self) -> FloatHypercomplex:
        return self._conjugate(FLOAT_ARITHMETIC)

    def magnitude(self) -> float:
        return self._magnitude(FLOAT_ARITHMETIC)

    def root(self, n: int) -> FloatHypercomplex:
        return self._root(n, FLOAT_ARITHMETIC)

    def sqrt(self) -> FloatHypercomplex:
        return self.root(2)

    def cbrt(self) -> FloatHypercomplex:
        return self.root(3)

    def is_integer(self) -> bool:
        return self._is_integer(FLOAT_ARITHMETIC)

    def is_natural_number(self) -> bool:
        return self._is_natural_number(FLOAT_ARITHMETIC)

    def to_vector(self) -> FloatVector:
        from .geometric import FloatVector

        return FloatVector(self.real, *self.imag)

    @classmethod
    def from_vector(cls, vector: FloatVector) -> FloatHypercomplex:
        return vector.to_hypercomplex()

    def to_complex(self) -> complex:
        """Python complex for complex-family numbers."""
        if not self.is_complex_number():
            raise InvalidOperationError("complex conversion", "number is not a complex number")
        return complex(self.real, self.get_imaginary_part(0))

    # Arithmetic operators

    def __add__(self, other: Any) -> FloatHypercomplex:
        if isinstance(other, FloatHypercomplex):
            return self.add(other)
        if isinstance(other, (int, float)):
            return self.add(FloatHypercomplex(other))
        return NotImplemented

    def __radd__(self, other: Any) -> FloatHypercomplex:
        return self.__add__(other)

    def __sub__(self, other: Any) -> FloatHypercomplex:
        if isinstance(other, FloatHypercomplex):
            return self.subtract(other)
        if isinstance(other, (int, float)):
            return self.subtract(FloatHypercomplex(other))
        return NotImplemented

    def __rsub__(self, other: Any) -> FloatHypercomplex:
        if isinstance(other, (int, float)):
            return FloatHypercomplex(other).subtract(self)
        return NotImplemented

    def __neg__(self) -> FloatHypercomplex:
        return FloatHypercomplex(-self.real, *(-c for c in self.imag))

    def __pos__(self) -> FloatHypercomplex:
        return self

    def __abs__(self) -> float:
        return self.magnitude()


# Named constants
ZERO = Hypercomplex(0)
ONE = Hypercomplex(1)
FLOAT_ZERO = FloatHypercomplex(0.0)
FLOAT_ONE = FloatHypercomplex(1.0)
