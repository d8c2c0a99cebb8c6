"""
Library exceptions.

Every failure raised by hypermath derives from HypermathError and also from
the closest built-in exception, so callers can catch either.
"""

from typing import Any, Dict, Optional


class HypermathError(Exception):
    """Base exception for hypermath errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DimensionMismatchError(HypermathError, ValueError):
    """Raised when operands have incompatible lengths or shapes"""

    def __init__(self, message: str, left: Any = None, right: Any = None):
        super().__init__(
            message=message,
            details={"left": left, "right": right}
        )


class InvalidShapeError(HypermathError, ValueError):
    """Raised for malformed construction input"""

    def __init__(self, message: str, row: Optional[int] = None, column: Optional[int] = None):
        details: Dict[str, Any] = {}
        if row is not None:
            details["row"] = row
        if column is not None:
            details["column"] = column
        super().__init__(message=message, details=details)


class InvalidOperationError(HypermathError, ArithmeticError):
    """Raised when an operation is undefined for its operand"""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            message=f"Cannot compute {operation}: {reason}",
            details={"operation": operation, "reason": reason}
        )


class NotImplementedFeatureError(HypermathError, NotImplementedError):
    """Raised by algorithms that are deliberately left unimplemented"""

    def __init__(self, operation: str):
        super().__init__(
            message=f"{operation} is not implemented",
            details={"operation": operation}
        )


class IndexOutOfRangeError(HypermathError, IndexError):
    """Raised when a coefficient or cell index is out of range"""

    def __init__(self, index: Any, limit: Optional[int] = None):
        if limit is None:
            message = f"Index {index} must be 0 or greater"
        else:
            message = f"Index {index} out of range (size {limit})"
        super().__init__(
            message=message,
            details={"index": index, "limit": limit}
        )
