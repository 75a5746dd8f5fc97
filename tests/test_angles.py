"""Tests for degree/radian conversion."""

import math

import jax
import jax.numpy as jnp
import numpy as np
from hypothesis import given, settings
from hypothesis import strategies as st

from nao_pos.angles import degrees_to_radians, radians_to_degrees


def test_known_angles():
    """Test conversion of common angles."""
    radians = degrees_to_radians([0.0, 90.0, -90.0, 180.0, 360.0])
    expected = jnp.array([0.0, math.pi / 2, -math.pi / 2, math.pi, 2 * math.pi])
    np.testing.assert_allclose(radians, expected, rtol=1e-12, atol=1e-12)


def test_float64_output():
    assert degrees_to_radians(45.0).dtype == jnp.float64
    assert degrees_to_radians([]).shape == (0,)


def test_conversion_jit():
    """Test that conversions are JIT-compilable."""
    jitted = jax.jit(degrees_to_radians)
    np.testing.assert_allclose(jitted(jnp.array([180.0])), [math.pi], rtol=1e-12)


@given(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False))
@settings(deadline=None)
def test_degrees_roundtrip(degrees):
    """Test degrees -> radians -> degrees roundtrip."""
    roundtrip = radians_to_degrees(degrees_to_radians(degrees))
    np.testing.assert_allclose(roundtrip, degrees, rtol=1e-12, atol=1e-9)


@given(st.integers(min_value=0, max_value=100))
@settings(deadline=None)
def test_batch_roundtrip(seed):
    """Test roundtrip on random batches with explicit key handling."""
    key = jax.random.PRNGKey(seed)
    degrees = jax.random.uniform(key, (25,), minval=-720.0, maxval=720.0, dtype=jnp.float64)

    roundtrip = radians_to_degrees(degrees_to_radians(degrees))
    np.testing.assert_allclose(roundtrip, degrees, rtol=1e-12, atol=1e-9)
