from __future__ import annotations

import numpy as np
from numpy.typing import NDArray, ArrayLike

Array2 = NDArray[np.floating]  # intended shape (2,)
Array3 = NDArray[np.floating]  # intended shape (3,)

__all__ = [
    "ArrayLike",
    "Array2", "Array3",
]
