import numpy as np
import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a test optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from vecs import Vector2, Vector3

# finite components small enough that products never overflow
coords = st.floats(-1e6, 1e6, allow_nan=False, allow_infinity=False)
# integers well inside 2**53 so sums are exact and association order is irrelevant
exact_coords = st.integers(-(2**40), 2**40).map(float)

vec2s = st.builds(Vector2, coords, coords)
vec3s = st.builds(Vector3, coords, coords, coords)
exact_vec2s = st.builds(Vector2, exact_coords, exact_coords)
exact_vec3s = st.builds(Vector3, exact_coords, exact_coords, exact_coords)


@given(a=vec2s, b=vec2s)
def test_vector2_add_commutes(a, b):
    assert a + b == b + a


@given(a=vec3s, b=vec3s)
def test_vector3_add_commutes(a, b):
    assert a + b == b + a


@given(a=exact_vec2s, b=exact_vec2s, c=exact_vec2s)
def test_vector2_add_associates(a, b, c):
    assert (a + b) + c == a + (b + c)


@given(a=exact_vec3s, b=exact_vec3s, c=exact_vec3s)
def test_vector3_add_associates(a, b, c):
    assert (a + b) + c == a + (b + c)


@given(a=vec2s)
def test_vector2_adding_negated_scale_gives_zero(a):
    assert a + a.scale(-1) == Vector2.zero()
    assert a + (-a) == Vector2.zero()


@given(a=vec3s)
def test_vector3_adding_negated_scale_gives_zero(a):
    assert a + a.scale(-1) == Vector3.zero()
    assert a + (-a) == Vector3.zero()


@given(a=vec2s, b=vec2s)
def test_vector2_dot_is_symmetric(a, b):
    assert a.dot(b) == b.dot(a)


@given(a=vec3s, b=vec3s)
def test_vector3_dot_is_symmetric(a, b):
    assert a.dot(b) == b.dot(a)


@given(a=vec3s, b=vec3s)
def test_cross_is_anticommutative(a, b):
    assert a.cross(b) == b.cross(a).scale(-1)


@given(a=vec3s, b=vec3s)
def test_cross_is_orthogonal_to_operands(a, b):
    c = a.cross(b)
    # rounding error of a.(a x b) stays within a few ulps of max|a|^2 max|b|
    ma, mb = np.abs(a.to_array()).max(), np.abs(b.to_array()).max()
    bound = 1e-12 * (ma * ma * mb + ma * mb * mb) + 1e-300
    assert abs(a.dot(c)) <= bound
    assert abs(b.dot(c)) <= bound


@given(a=vec3s, b=vec3s)
def test_cross_matches_numpy(a, b):
    np.testing.assert_allclose(
        a.cross(b).to_array(),
        np.cross(a.to_array(), b.to_array()),
        rtol=1e-12,
        atol=1e-6,
    )
