import warnings

import numpy as np
import pytest

from vecs.utils.linalg import components, divide


@pytest.mark.parametrize("size, values", [(2, [1, 2]), (3, (1, 2, 3))])
def test_components_returns_flat_float_array(size, values):
    arr = components(values, size)
    assert isinstance(arr, np.ndarray)
    assert arr.shape == (size,)
    assert arr.dtype == float


@pytest.mark.parametrize(
    "size, values",
    [
        (2, [1, 2, 3]),
        (2, [[1, 2]]),
        (2, np.zeros((2, 1))),
        (3, [1, 2]),
        (3, np.zeros((1, 3))),
    ],
)
def test_components_rejects_wrong_shape(size, values):
    with pytest.raises(ValueError):
        components(values, size)


def test_divide_regular_values():
    out = divide([3.0, 9.0], 3.0)
    assert np.allclose(out, [1.0, 3.0])


def test_divide_by_zero_follows_ieee_without_warning():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        out = divide([1.0, -1.0, 0.0], 0.0)
    assert out[0] == np.inf
    assert out[1] == -np.inf
    assert np.isnan(out[2])
