from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from numbers import Real
from typing import Optional

import numpy as np

from vecs.config import DEFAULT_TOLERANCE, Tolerance
from vecs.utils.fmt import format_components
from vecs.utils.linalg import components, divide
from vecs.utils.types import ArrayLike, Array2

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Vector2:
    """
    Immutable 2D vector (x, y) of float64 components.

    Components are coerced with ``float()``; NaN and Inf are accepted as-is.
    Every operation returns a new instance.

    Supported operators
    -------------------
    - ``a + b``, ``a - b``, ``-a``
    - ``v * k``, ``k * v`` (scalar), ``a * b`` (component-wise)
    - ``v / k``, ``k / v``, ``a / b`` (component-wise, IEEE-754 on zero divisors)
    - ``a == b`` exact component-wise equality, no epsilon
    - ``abs(v)`` component-wise absolute value (not the length)
    - ``str(v)`` -> ``"(x, y)"``
    """
    x: float
    y: float

    # let numpy scalars defer to our reflected operators
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    def from_array(cls, a: ArrayLike) -> "Vector2":
        """Build a Vector2 from any array-like of shape (2,)."""
        x, y = components(a, 2)
        return cls(x, y)

    def to_array(self) -> Array2:
        return np.array([self.x, self.y], dtype=float)

    ############################
    # PRODUCTS AND NORMS
    ############################

    def dot(self, other: "Vector2") -> float:
        if not isinstance(other, Vector2):
            raise TypeError(f"Vector2.dot expects a Vector2, got {type(other).__name__}")
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def scale(self, k: float) -> "Vector2":
        return Vector2(self.x * k, self.y * k)

    def normal(self) -> "Vector2":
        """Perpendicular vector (-y, x), rotated +90 degrees."""
        return Vector2(-self.y, self.x)

    def normalize(self) -> "Vector2":
        """
        Divide by the length.

        The zero vector has no direction; following IEEE-754 its normalization
        is (nan, nan). Use `unit` to get an error instead.
        """
        n = self.length()
        if n == 0.0:
            logger.debug("Normalizing a zero-length Vector2, result is NaN")
        return self / n

    def unit(self, eps: Optional[float] = None, tol: Optional[Tolerance] = None) -> "Vector2":
        """
        Strict normalization to unit length.

        Raises ValueError if the length is < eps (or NaN). The threshold is
        `tol.eps` (default ``DEFAULT_TOLERANCE``), overridden by `eps` when given.
        A non-positive `eps` is rejected like any invalid `Tolerance`.
        """
        tol = DEFAULT_TOLERANCE if tol is None else tol
        if eps is not None:
            tol = replace(tol, eps=eps)
        eps = tol.eps
        n = self.length()
        if not n >= eps:
            logger.debug("Refusing to normalize %s with length %r < %r", self, n, eps)
            raise ValueError(f"Cannot normalize vector with length < {eps} (got {n}).")
        return self / n

    def abs(self) -> "Vector2":
        return Vector2(abs(self.x), abs(self.y))

    def isclose(self, other: "Vector2", tol: Optional[Tolerance] = None) -> bool:
        """Approximate component-wise comparison, see `numpy.isclose`."""
        if not isinstance(other, Vector2):
            raise TypeError(f"Vector2.isclose expects a Vector2, got {type(other).__name__}")
        tol = DEFAULT_TOLERANCE if tol is None else tol
        return bool(np.all(np.isclose(self.to_array(), other.to_array(), rtol=tol.rtol, atol=tol.atol)))

    ############################
    # OPERATORS
    ############################

    def __add__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __mul__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return self.scale(float(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self.scale(float(other))
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector2):
            return Vector2.from_array(divide(self.to_array(), other.to_array()))
        if isinstance(other, Real):
            return Vector2.from_array(divide(self.to_array(), float(other)))
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, Real):
            return Vector2.from_array(divide(float(other), self.to_array()))
        return NotImplemented

    def __abs__(self) -> "Vector2":
        return self.abs()

    def __eq__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return format_components(self.x, self.y)
