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
from vecs.utils.types import ArrayLike, Array3

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Vector3:
    """
    Immutable 3D vector (x, y, z) of float64 components.

    Same operator set as `Vector2`, plus the cross product. Formats as
    ``"(x, y, z)"``.
    """
    x: float
    y: float
    z: float

    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, a: ArrayLike) -> "Vector3":
        x, y, z = components(a, 3)
        return cls(x, y, z)

    def to_array(self) -> Array3:
        return np.array([self.x, self.y, self.z], dtype=float)

    ############################
    # PRODUCTS AND NORMS
    ############################

    def dot(self, other: "Vector3") -> float:
        if not isinstance(other, Vector3):
            raise TypeError(f"Vector3.dot expects a Vector3, got {type(other).__name__}")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        """
        Right-handed cross product self x other.

        The result is orthogonal to both operands and anti-commutative:
        ``a.cross(b) == -b.cross(a)``.
        """
        if not isinstance(other, Vector3):
            raise TypeError(f"Vector3.cross expects a Vector3, got {type(other).__name__}")
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def scale(self, k: float) -> "Vector3":
        return Vector3(self.x * k, self.y * k, self.z * k)

    def normalize(self) -> "Vector3":
        # zero vector -> (nan, nan, nan)
        n = self.length()
        if n == 0.0:
            logger.debug("Normalizing a zero-length Vector3, result is NaN")
        return self / n

    def unit(self, eps: Optional[float] = None, tol: Optional[Tolerance] = None) -> "Vector3":
        tol = DEFAULT_TOLERANCE if tol is None else tol
        if eps is not None:
            tol = replace(tol, eps=eps)
        eps = tol.eps
        n = self.length()
        if not n >= eps:
            logger.debug("Refusing to normalize %s with length %r < %r", self, n, eps)
            raise ValueError(f"Cannot normalize vector with length < {eps} (got {n}).")
        return self / n

    def abs(self) -> "Vector3":
        return Vector3(abs(self.x), abs(self.y), abs(self.z))

    def isclose(self, other: "Vector3", tol: Optional[Tolerance] = None) -> bool:
        if not isinstance(other, Vector3):
            raise TypeError(f"Vector3.isclose expects a Vector3, got {type(other).__name__}")
        tol = DEFAULT_TOLERANCE if tol is None else tol
        return bool(np.all(np.isclose(self.to_array(), other.to_array(), rtol=tol.rtol, atol=tol.atol)))

    ############################
    # OPERATORS
    ############################

    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return self.scale(float(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self.scale(float(other))
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector3):
            return Vector3.from_array(divide(self.to_array(), other.to_array()))
        if isinstance(other, Real):
            return Vector3.from_array(divide(self.to_array(), float(other)))
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, Real):
            return Vector3.from_array(divide(float(other), self.to_array()))
        return NotImplemented

    def __abs__(self) -> "Vector3":
        return self.abs()

    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __str__(self) -> str:
        return format_components(self.x, self.y, self.z)
