import numpy as np


def format_component(c: float) -> str:
    """
    Format a vector component for display.

    Shortest round-tripping positional notation with a trailing ``.0`` trimmed,
    so ``29.0 -> "29"`` and ``1.5 -> "1.5"``. NaN is spelled ``NaN``; infinities
    are ``inf`` / ``-inf``.
    """
    if np.isnan(c):
        return "NaN"
    return np.format_float_positional(c, trim="-")


def format_components(*components: float) -> str:
    return "(" + ", ".join(format_component(c) for c in components) + ")"
