"""
Coordinate vector and matrix types.

Vectors are fixed-length coordinate tuples; matrices are rectangular 2-D
arrays. Both come in a Decimal variant (operations take a PrecisionConfig)
and a float variant, sharing their algorithms through VectorBase and
MatrixBase.

Conversions:
- Vector <-> Hypercomplex: coordinate 0 is the real part
- Vector -> single-column Matrix, Matrix column -> Vector
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from decimal import Decimal
from typing import Any, Callable, ClassVar

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidOperationError,
    InvalidShapeError,
    NotImplementedFeatureError,
)
from ..core.logging import get_context_logger
from .arithmetic import FLOAT_ARITHMETIC, Arithmetic, DecimalArithmetic, to_decimal, to_float
from .context import PrecisionConfig
from .numeric import FloatHypercomplex, Hypercomplex, HypercomplexBase
from .value import MathValue

logger = get_context_logger(__name__, component="geometric")


def _check_index(index: Any, size: int) -> int:
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(f"Index must be an int, got {type(index).__name__}")
    if index < 0:
        raise IndexOutOfRangeError(index)
    if index >= size:
        raise IndexOutOfRangeError(index, size)
    return index


class VectorBase(BaseModel, MathValue):
    """
    Algorithms shared by both vector variants.

    The length is fixed at construction and must be at least 1.
    """

    model_config = ConfigDict(frozen=True)

    scalar_type: ClassVar[type]
    numpy_dtype: ClassVar[Any]

    def __init__(self, *args: Any, coordinates: Iterable[Any] | None = None, **kwargs: Any) -> None:
        """Initialize from positional coordinates or a single sequence."""
        if coordinates is not None and args:
            raise ValueError("Vector accepts either coordinates or positional arguments, not both")

        if coordinates is None:
            coordinates = self._parse_arguments(args)
        processed = tuple(self.coerce_scalar(c) for c in coordinates)
        if not processed:
            raise InvalidShapeError("Vector must have at least one coordinate")
        super().__init__(coordinates=processed, **kwargs)

    @staticmethod
    def _parse_arguments(args: tuple[Any, ...]) -> list[Any]:
        if len(args) == 1:
            single = args[0]
            if isinstance(single, np.ndarray):
                return single.tolist()
            if isinstance(single, (list, tuple)):
                return list(single)
        return list(args)

    @classmethod
    def coerce_scalar(cls, value: Any) -> Any:
        raise NotImplementedError

    def get(self, i: int) -> Any:
        """
        Coordinate at index i (0-based).

        Raises:
            IndexOutOfRangeError: If i is negative or past the last coordinate
        """
        return self.coordinates[_check_index(i, len(self.coordinates))]

    def size(self) -> int:
        return len(self.coordinates)

    def __len__(self) -> int:
        """Dimension of the vector."""
        return len(self.coordinates)

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.coordinates)

    def _require_same_variant(self, other: Any) -> None:
        if not isinstance(other, VectorBase) or other.scalar_type is not self.scalar_type:
            raise TypeError(f"Cannot combine {type(self).__name__} with {type(other).__name__}")

    def _require_same_size(self, other: VectorBase) -> None:
        self._require_same_variant(other)
        if len(self) != len(other):
            logger.debug(
                "Rejected vectors of different size",
                extra_data={"left": len(self), "right": len(other)},
            )
            raise DimensionMismatchError(
                "Vectors do not have the same number of coordinates",
                left=len(self),
                right=len(other),
            )

    # Shared algorithms

    def _combine(self, other: VectorBase, operation: Callable[[Any, Any], Any]) -> Any:
        self._require_same_size(other)
        return type(self)([operation(a, b) for a, b in zip(self.coordinates, other.coordinates)])

    def _dot_product(self, other: VectorBase, ops: Arithmetic) -> Any:
        self._require_same_size(other)
        result = ops.zero
        for a, b in zip(self.coordinates, other.coordinates):
            result = ops.add(result, ops.multiply(a, b))
        return result

    def _cross_product(self, other: VectorBase) -> Any:
        raise NotImplementedFeatureError("Vector cross product")

    # Comparison

    def compare_to(self, other: VectorBase) -> int:
        """
        Lexicographic comparison of coordinates.

        Raises:
            DimensionMismatchError: If the vectors differ in length
        """
        self._require_same_size(other)
        for a, b in zip(self.coordinates, other.coordinates):
            if a != b:
                return -1 if a < b else 1
        return 0

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, VectorBase) or other.scalar_type is not self.scalar_type:
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self.coordinates, other.coordinates))

    def __hash__(self) -> int:
        return hash(self.coordinates)

    # Output

    def to_string(self) -> str:
        """Convert to string, e.g. ``[1, 2, 3]``."""
        return "[" + ", ".join(str(c) for c in self.coordinates) + "]"

    def to_tex(self) -> str:
        """Convert to LaTeX."""
        comps_str = ", ".join(str(c) for c in self.coordinates)
        return f"\\left\\langle {comps_str} \\right\\rangle"

    def to_python(self) -> list[Any]:
        """Convert to Python list."""
        return list(self.coordinates)

    def to_numpy(self) -> np.ndarray:
        """Convert to NumPy array (object dtype for Decimal coordinates)."""
        return np.array(self.coordinates, dtype=self.numpy_dtype)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()})"


class MatrixBase(BaseModel, MathValue):
    """
    Algorithms shared by both matrix variants.

    Rows and columns are numbered from zero. A matrix has at least one row
    and one column, every row has the same length, and 1x1 data is rejected
    as degenerate.
    """

    model_config = ConfigDict(frozen=True)

    scalar_type: ClassVar[type]
    numpy_dtype: ClassVar[Any]
    vector_type: ClassVar[type[VectorBase]]

    def __init__(self, rows: Iterable[Iterable[Any]] | np.ndarray, **kwargs: Any) -> None:
        """Initialize a Matrix ensuring rectangular structure."""
        super().__init__(data=self._coerce_rows(rows), **kwargs)

    @classmethod
    def coerce_scalar(cls, value: Any) -> Any:
        raise NotImplementedError

    @classmethod
    def _coerce_cell(cls, value: Any, row: int, column: int) -> Any:
        if value is None:
            raise InvalidShapeError(f"Null at row {row} column {column}", row=row, column=column)
        if isinstance(value, HypercomplexBase):
            if not value.is_real_number():
                raise InvalidShapeError(
                    f"Non-real number at row {row} column {column}", row=row, column=column
                )
            value = value.real
        return cls.coerce_scalar(value)

    @classmethod
    def _coerce_rows(cls, raw_rows: Any) -> tuple[tuple[Any, ...], ...]:
        """Convert raw row iterables into validated rows of scalars."""
        if isinstance(raw_rows, MatrixBase):
            raw_rows = raw_rows.data
        if isinstance(raw_rows, np.ndarray):
            raw_rows = raw_rows.tolist()
        if raw_rows is None or isinstance(raw_rows, str) or not isinstance(raw_rows, Iterable):
            raise InvalidShapeError("Matrix rows must be iterable sequences")

        normalized: list[list[Any]] = []
        for row in raw_rows:
            if isinstance(row, np.ndarray):
                row = row.tolist()
            if row is None or isinstance(row, str) or not isinstance(row, Iterable):
                raise InvalidShapeError("Matrix rows must be iterable sequences", row=len(normalized))
            normalized.append(list(row))

        if not normalized:
            raise InvalidShapeError("Matrix data is empty")
        width = len(normalized[0])
        if width == 0:
            raise InvalidShapeError("Matrix rows are empty")
        if width == 1 and len(normalized) == 1:
            raise InvalidShapeError("Matrix data is a single cell")
        for r, row in enumerate(normalized):
            if len(row) != width:
                logger.debug(
                    "Rejected ragged matrix data",
                    extra_data={"row": r, "expected": width, "actual": len(row)},
                )
                raise InvalidShapeError(
                    f"Row {r} has {len(row)} cells, expected {width}", row=r
                )

        return tuple(
            tuple(cls._coerce_cell(cell, r, c) for c, cell in enumerate(row))
            for r, row in enumerate(normalized)
        )

    @classmethod
    def from_vectors(cls, *vectors: Any) -> Any:
        """
        Assemble a matrix whose column i is vector i.

        Accepts the vectors positionally or as a single list.

        Raises:
            InvalidShapeError: If no vectors are given or their lengths differ
        """
        if len(vectors) == 1 and isinstance(vectors[0], (list, tuple)):
            vectors = tuple(vectors[0])
        if not vectors:
            raise InvalidShapeError("Matrix needs at least one column vector")
        for vector in vectors:
            if not isinstance(vector, cls.vector_type):
                raise TypeError(
                    f"{cls.__name__} columns must be {cls.vector_type.__name__}, "
                    f"got {type(vector).__name__}"
                )
        height = len(vectors[0])
        for column, vector in enumerate(vectors):
            if len(vector) != height:
                raise InvalidShapeError(
                    f"Column {column} has {len(vector)} coordinates, expected {height}",
                    column=column,
                )
        return cls([[vector.coordinates[row] for vector in vectors] for row in range(height)])

    # Dimensions and access

    @property
    def rows(self) -> int:
        return len(self.data)

    @property
    def columns(self) -> int:
        return len(self.data[0])

    @property
    def shape(self) -> tuple[int, int]:
        """Get matrix dimensions (rows, cols)."""
        return (self.rows, self.columns)

    def get(self, row: int, column: int) -> Any:
        """
        Cell at (row, column).

        Raises:
            IndexOutOfRangeError: If either index is negative or too large
        """
        _check_index(row, self.rows)
        _check_index(column, self.columns)
        return self.data[row][column]

    def __getitem__(self, index: tuple[int, int] | int) -> Any:
        """Get element by (row, col) or a whole row as a tuple."""
        if isinstance(index, tuple):
            row, col = index
            return self.get(row, col)
        return self.data[_check_index(index, self.rows)]

    def column_as_vector(self, column: int) -> Any:
        """Extract one column as a vector, preserving row order."""
        _check_index(column, self.columns)
        return self.vector_type([row[column] for row in self.data])

    def is_square_matrix(self) -> bool:
        return self.rows == self.columns

    # Shared algorithms

    def _require_same_variant(self, other: Any) -> None:
        if not isinstance(other, MatrixBase) or other.scalar_type is not self.scalar_type:
            raise TypeError(f"Cannot combine {type(self).__name__} with {type(other).__name__}")

    def _combine(self, other: MatrixBase, operation: Callable[[Any, Any], Any]) -> Any:
        self._require_same_variant(other)
        if self.shape != other.shape:
            raise DimensionMismatchError(
                "Different matrix sizes", left=self.shape, right=other.shape
            )
        return type(self)([
            [operation(a, b) for a, b in zip(row1, row2)]
            for row1, row2 in zip(self.data, other.data)
        ])

    def _multiply(self, other: MatrixBase, ops: Arithmetic) -> Any:
        self._require_same_variant(other)
        if self.columns != other.rows:
            raise DimensionMismatchError(
                f"Cannot multiply {self.shape} by {other.shape} matrices",
                left=self.shape,
                right=other.shape,
            )

        result = []
        for row in range(self.rows):
            cells = []
            for col in range(other.columns):
                total = ops.zero
                for k in range(self.columns):
                    total = ops.add(total, ops.multiply(self.data[row][k], other.data[k][col]))
                cells.append(total)
            result.append(cells)
        return type(self)(result)

    def _pow(self, power: int, ops: Arithmetic) -> Any:
        if not isinstance(power, int) or isinstance(power, bool):
            raise TypeError(f"Matrix power must be an int, got {type(power).__name__}")
        if not self.is_square_matrix():
            raise InvalidOperationError("matrix power", "matrix is not a square matrix")
        if power < 1:
            raise InvalidOperationError("matrix power", f"power must be 1 or greater, got {power}")

        logger.debug("Raising matrix to power", extra_data={"power": power, "shape": self.shape})
        result = self
        for _ in range(1, power):
            result = self._multiply(result, ops)
        return result

    def _determinant(self) -> Any:
        raise NotImplementedFeatureError("Matrix determinant")

    # Comparison

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MatrixBase) or other.scalar_type is not self.scalar_type:
            return NotImplemented
        return self.shape == other.shape and all(
            a == b for row1, row2 in zip(self.data, other.data) for a, b in zip(row1, row2)
        )

    def __hash__(self) -> int:
        return hash(self.data)

    # Output

    def to_string(self) -> str:
        """Convert to string, e.g. ``[[1, 2], [3, 4]]``."""
        rows_str = ", ".join(
            "[" + ", ".join(str(el) for el in row) + "]" for row in self.data
        )
        return f"[{rows_str}]"

    def to_tex(self) -> str:
        """Convert to LaTeX (pmatrix)."""
        rows_tex = " \\\\ ".join(
            " & ".join(str(el) for el in row) for row in self.data
        )
        return f"\\begin{{pmatrix}} {rows_tex} \\end{{pmatrix}}"

    def to_python(self) -> list[list[Any]]:
        """Convert to Python nested list."""
        return [list(row) for row in self.data]

    def to_numpy(self) -> np.ndarray:
        """Convert to NumPy array (object dtype for Decimal cells)."""
        return np.array(self.data, dtype=self.numpy_dtype)

    def __str__(self) -> str:
        """String representation (for str() builtin)."""
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()})"


class Vector(VectorBase):
    """
    Arbitrary-precision coordinate vector.

    Example:
        >>> mc = PrecisionConfig(precision=10)
        >>> Vector(1, 2, 3).add(Vector(4, 5, 6), mc)
        Vector([5, 7, 9])
    """

    coordinates: tuple[Decimal, ...] = Field(description="Vector coordinates")

    scalar_type: ClassVar[type] = Decimal
    numpy_dtype: ClassVar[Any] = object

    @classmethod
    def coerce_scalar(cls, value: Any) -> Decimal:
        return to_decimal(value)

    def add(self, w: Vector, mc: PrecisionConfig) -> Vector:
        """
        Component-wise sum, each coordinate rounded under mc.

        Raises:
            DimensionMismatchError: If the vectors differ in length
        """
        return self._combine(w, DecimalArithmetic(mc).add)

    def subtract(self, w: Vector, mc: PrecisionConfig) -> Vector:
        return self._combine(w, DecimalArithmetic(mc).subtract)

    def dot_product(self, w: Vector, mc: PrecisionConfig) -> Decimal:
        """Sum of pairwise products; every product and partial sum is rounded."""
        return self._dot_product(w, DecimalArithmetic(mc))

    def cross_product(self, w: Vector, mc: PrecisionConfig) -> Vector:
        """Not implemented; always raises NotImplementedFeatureError."""
        return self._cross_product(w)

    def to_hypercomplex(self) -> Hypercomplex:
        return Hypercomplex(self.coordinates[0], *self.coordinates[1:])

    @classmethod
    def from_hypercomplex(cls, number: Hypercomplex) -> Vector:
        return number.to_vector()

    def to_matrix(self) -> Matrix:
        """
        Single-column matrix holding the coordinates in row order.

        A one-coordinate vector would make a 1x1 matrix, which is rejected:
        ``Vector(5).to_matrix()`` raises InvalidShapeError.
        """
        return Matrix.from_vectors(self)


class FloatVector(VectorBase):
    """Machine-precision coordinate vector supporting + and -."""

    coordinates: tuple[float, ...] = Field(description="Vector coordinates")

    scalar_type: ClassVar[type] = float
    numpy_dtype: ClassVar[Any] = float

    @classmethod
    def coerce_scalar(cls, value: Any) -> float:
        return to_float(value)

    def add(self, w: FloatVector) -> FloatVector:
        return self._combine(w, FLOAT_ARITHMETIC.add)

    def subtract(self, w: FloatVector) -> FloatVector:
        return self._combine(w, FLOAT_ARITHMETIC.subtract)

    def dot_product(self, w: FloatVector) -> float:
        return self._dot_product(w, FLOAT_ARITHMETIC)

    def cross_product(self, w: FloatVector) -> FloatVector:
        return self._cross_product(w)

    def to_hypercomplex(self) -> FloatHypercomplex:
        return FloatHypercomplex(self.coordinates[0], *self.coordinates[1:])

    @classmethod
    def from_hypercomplex(cls, number: FloatHypercomplex) -> FloatVector:
        return number.to_vector()

    def to_matrix(self) -> FloatMatrix:
        """Single-column matrix; one-coordinate vectors raise InvalidShapeError."""
        return FloatMatrix.from_vectors(self)

    # Arithmetic operators

    def __add__(self, other: Any) -> FloatVector:
        if isinstance(other, FloatVector):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> FloatVector:
        if isinstance(other, FloatVector):
            return self.subtract(other)
        return NotImplemented

    def __neg__(self) -> FloatVector:
        return FloatVector([-c for c in self.coordinates])


class Matrix(MatrixBase):
    """
    Arbitrary-precision matrix.

    Example:
        >>> mc = PrecisionConfig(precision=10)
        >>> Matrix([[1, 1], [0, 1]]).pow(2, mc)
        Matrix([[1, 2], [0, 1]])
    """

    data: tuple[tuple[Decimal, ...], ...] = Field(description="Cells, row by row")

    scalar_type: ClassVar[type] = Decimal
    numpy_dtype: ClassVar[Any] = object
    vector_type: ClassVar[type[VectorBase]] = Vector

    @classmethod
    def coerce_scalar(cls, value: Any) -> Decimal:
        return to_decimal(value)

    def add(self, other: Matrix, mc: PrecisionConfig) -> Matrix:
        """
        Element-wise sum rounded under mc.

        Raises:
            DimensionMismatchError: If the shapes differ
        """
        return self._combine(other, DecimalArithmetic(mc).add)

    def subtract(self, other: Matrix, mc: PrecisionConfig) -> Matrix:
        return self._combine(other, DecimalArithmetic(mc).subtract)

    def multiply(self, other: Matrix, mc: PrecisionConfig) -> Matrix:
        """
        Matrix product; each product and each accumulation step is rounded.

        A product that would be 1x1 cannot be represented, so a row times a
        column such as ``[[1, 2, 3]] x [[4], [5], [6]]`` fails.

        Raises:
            DimensionMismatchError: If self.columns != other.rows
            InvalidShapeError: If the result would be 1x1
        """
        return self._multiply(other, DecimalArithmetic(mc))

    def pow(self, power: int, mc: PrecisionConfig) -> Matrix:
        """
        Repeated self-multiplication; power 1 returns the matrix itself.

        Raises:
            InvalidOperationError: If the matrix is not square or power < 1
        """
        return self._pow(power, DecimalArithmetic(mc))

    def determinant(self, mc: PrecisionConfig) -> Decimal:
        """Not implemented; always raises NotImplementedFeatureError."""
        return self._determinant()


class FloatMatrix(MatrixBase):
    """Machine-precision matrix supporting +, - and @."""

    data: tuple[tuple[float, ...], ...] = Field(description="Cells, row by row")

    scalar_type: ClassVar[type] = float
    numpy_dtype: ClassVar[Any] = float
    vector_type: ClassVar[type[VectorBase]] = FloatVector

    @classmethod
    def coerce_scalar(cls, value: Any) -> float:
        return to_float(value)

    def add(self, other: FloatMatrix) -> FloatMatrix:
        return self._combine(other, FLOAT_ARITHMETIC.add)

    def subtract(self, other: FloatMatrix) -> FloatMatrix:
        return self._combine(other, FLOAT_ARITHMETIC.subtract)

    def multiply(self, other: FloatMatrix) -> FloatMatrix:
        """Matrix product; a result that would be 1x1 raises InvalidShapeError."""
        return self._multiply(other, FLOAT_ARITHMETIC)

    def pow(self, power: int) -> FloatMatrix:
        return self._pow(power, FLOAT_ARITHMETIC)

    def determinant(self) -> float:
        return self._determinant()

    # Arithmetic operators

    def __add__(self, other: Any) -> FloatMatrix:
        if isinstance(other, FloatMatrix):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> FloatMatrix:
        if isinstance(other, FloatMatrix):
            return self.subtract(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> FloatMatrix:
        if isinstance(other, FloatMatrix):
            return self.multiply(other)
        return NotImplemented

    def __pow__(self, power: Any) -> FloatMatrix:
        if isinstance(power, int):
            return self.pow(power)
        return NotImplemented
