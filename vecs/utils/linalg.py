import numpy as np

from vecs.utils.types import ArrayLike


def components(v: ArrayLike, size: int) -> np.ndarray:
    """
    Coerce `v` to a flat float64 array holding exactly `size` components.

    Raises ValueError for any other shape, including column/row matrices.
    """
    arr = np.asarray(v, dtype=float)
    if arr.shape != (size,):
        raise ValueError(f"Expected {size} vector components with shape ({size},), got {arr.shape}")
    return arr


def divide(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """
    Component-wise division with IEEE-754 semantics.

    Python floats raise ZeroDivisionError on a zero divisor; numpy float64 does not.
    A zero divisor yields +/-inf (or nan for 0/0) and no RuntimeWarning is emitted.

    Parameters
    ----------
    a, b : array_like
        Dividend and divisor, broadcastable against each other.

    Returns
    -------
    out : np.ndarray
        a / b as float64.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return np.divide(np.asarray(a, dtype=float), np.asarray(b, dtype=float))
