"""
Free-function form of the vector operations.

Each function delegates to the methods/operators of `Vector2` and `Vector3`.
Binary operations require both operands to have the same dimension and raise
TypeError otherwise.
"""
from typing import Union

from vecs.vectors import Vector2, Vector3

Vector = Union[Vector2, Vector3]


def _check_vector(v, name: str) -> None:
    if not isinstance(v, (Vector2, Vector3)):
        raise TypeError(f"{name} expects a Vector2 or Vector3, got {type(v).__name__}")


def _check_same(a, b, name: str) -> None:
    _check_vector(a, name)
    _check_vector(b, name)
    if type(a) is not type(b):
        raise TypeError(
            f"{name} expects two vectors of the same dimension, "
            f"got {type(a).__name__} and {type(b).__name__}"
        )


def add(a: Vector, b: Vector) -> Vector:
    _check_same(a, b, "add")
    return a + b


def sub(a: Vector, b: Vector) -> Vector:
    _check_same(a, b, "sub")
    return a - b


def scale(v: Vector, k: float) -> Vector:
    _check_vector(v, "scale")
    return v.scale(k)


def dot(a: Vector, b: Vector) -> float:
    _check_same(a, b, "dot")
    return a.dot(b)


def length(v: Vector) -> float:
    _check_vector(v, "length")
    return v.length()


def equals(a: Vector, b: Vector) -> bool:
    """Exact component-wise equality, no tolerance."""
    _check_same(a, b, "equals")
    return a == b


def to_string(v: Vector) -> str:
    _check_vector(v, "to_string")
    return str(v)


def cross(a: Vector3, b: Vector3) -> Vector3:
    if not (isinstance(a, Vector3) and isinstance(b, Vector3)):
        raise TypeError(
            f"cross is only defined for Vector3, got {type(a).__name__} and {type(b).__name__}"
        )
    return a.cross(b)
