"""Immutable 2D/3D vector arithmetic."""
from .vectors import Vector2, Vector3
from .config import Tolerance, DEFAULT_TOLERANCE
from .ops import (
    add,
    sub,
    scale,
    dot,
    cross,
    length,
    equals,
    to_string,
)

__version__ = "0.1.0"
