import jax.numpy as jnp
import pytest

from plan13.config import set_dtype

# ISS TLE from the sgp4 reference test suite
ISS_NAME = "ISS (ZARYA)"
ISS_LINE1 = "1 25544U 98067A   08264.51782528 -.00002182  00000-0 -11606-4 0  2927"
ISS_LINE2 = "2 25544  51.6416 247.4627 0006703 130.5360 325.0288 15.72125391563537"


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Tests that need float32 override this with their own autouse fixture
    (see test_config.py).
    """
    set_dtype(jnp.float64)
