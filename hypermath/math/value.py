"""
Base MathValue class for the hypermath value types.

This module provides the rendering contract shared by hypercomplex numbers,
vectors and matrices:
- Plain-text form (to_string)
- LaTeX form (to_tex)
- Conversion to native Python values (to_python)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class MathValue(ABC):
    """
    Base class for all mathematical value objects.

    Subclasses must implement the three output methods. Rendering is pure
    formatting and never alters the stored value.

    Note: Concrete subclasses should inherit from both BaseModel and MathValue,
    e.g., `class Hypercomplex(BaseModel, MathValue):`. MathValue itself is
    abstract and does not inherit from BaseModel to avoid MRO conflicts.
    BaseModel precedes MathValue in that MRO, so such subclasses redeclare
    __str__ and __repr__.
    """

    # String representations

    @abstractmethod
    def to_string(self) -> str:
        """Convert to human-readable string."""
        pass

    @abstractmethod
    def to_tex(self) -> str:
        """Convert to LaTeX representation."""
        pass

    @abstractmethod
    def to_python(self) -> Any:
        """Convert to native Python values."""
        pass

    def __str__(self) -> str:
        """String representation (uses to_string)."""
        return self.to_string()

    def __repr__(self) -> str:
        """Debug representation."""
        return f"{self.__class__.__name__}({self.to_string()})"

