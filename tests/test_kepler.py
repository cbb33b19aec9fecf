import jax
import jax.numpy as jnp
import pytest

from plan13.elements import parse_tle
from plan13.errors import NonConvergentAnomalySolution
from plan13.orbits import (
    KEPLER_MAX_ITERATIONS,
    KEPLER_TOLERANCE,
    anomaly_eccentric_to_mean,
    anomaly_mean_to_eccentric,
    kepler_newton,
)
from plan13.orbits.kepler import _kepler_loop
from plan13.propagator import propagate
from plan13.timestamp import Timestamp

from conftest import ISS_LINE1, ISS_LINE2, ISS_NAME


class TestAnomalyMeanToEccentric:
    @pytest.mark.parametrize("M", [0.0, 0.5, 1.0, 3.0, 6.0])
    def test_circular_orbit_is_identity(self, M):
        assert float(anomaly_mean_to_eccentric(M, 0.0)) == M

    @pytest.mark.parametrize("e", [0.001, 0.1, 0.5, 0.9])
    @pytest.mark.parametrize("M", [0.1, 1.0, 2.5, 4.0, 6.0])
    def test_satisfies_kepler_equation(self, M, e):
        E = float(anomaly_mean_to_eccentric(M, e))
        assert float(anomaly_eccentric_to_mean(E, e)) == pytest.approx(M, abs=1e-6)

    def test_known_value(self):
        # Vallado example 2-1
        E = anomaly_mean_to_eccentric(235.4 * jnp.pi / 180.0, 0.4)
        assert float(E) == pytest.approx(220.512074767522 * jnp.pi / 180.0, abs=1e-6)

    def test_zero_anomaly(self):
        assert float(anomaly_mean_to_eccentric(0.0, 0.7)) == 0.0

    def test_non_convergence_raises(self):
        with pytest.raises(NonConvergentAnomalySolution) as excinfo:
            anomaly_mean_to_eccentric(0.3, 0.9, max_iterations=1)
        assert excinfo.value.iterations == 1
        assert excinfo.value.eccentricity == pytest.approx(0.9)
        assert excinfo.value.mean_anomaly == pytest.approx(0.3)

    def test_non_convergence_is_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            anomaly_mean_to_eccentric(0.3, 0.9, max_iterations=1)


class TestKeplerNewton:
    def test_defaults(self):
        assert KEPLER_TOLERANCE == 1.0e-5
        assert KEPLER_MAX_ITERATIONS == 50

    def test_iteration_count_bounded(self):
        _, d, i = kepler_newton(1.0, 0.1)
        assert 1 <= int(i) <= KEPLER_MAX_ITERATIONS
        assert abs(float(d)) <= KEPLER_TOLERANCE

    def test_always_takes_one_step(self):
        _, d, i = kepler_newton(1.0, 0.0)
        assert int(i) == 1
        assert float(d) == 0.0

    def test_jit_compatible(self):
        E, _, _ = jax.jit(kepler_newton)(1.0, 0.1)
        assert float(E) == pytest.approx(float(anomaly_mean_to_eccentric(1.0, 0.1)), abs=1e-12)

    def test_loop_compiled_once(self):
        anomaly_mean_to_eccentric(1.0, 0.1)
        size = _kepler_loop._cache_size()
        for k in range(10):
            anomaly_mean_to_eccentric(1.0 + 0.01 * k, 0.1 + 0.005 * k)
        assert _kepler_loop._cache_size() == size

    def test_repeated_propagation_reuses_compiled_loop(self):
        elements = parse_tle(ISS_NAME, ISS_LINE1, ISS_LINE2)
        epoch = Timestamp(elements.epoch_daynumber, elements.epoch_fraction)
        propagate(elements, epoch)
        size = _kepler_loop._cache_size()
        for k in range(1, 10):
            propagate(elements, epoch.add(0.01 * k))
        assert _kepler_loop._cache_size() == size


class TestBatched:
    def test_array_mean_anomaly(self):
        M = jnp.array([0.1, 1.0, 2.5, 4.0, 6.0])
        E = anomaly_mean_to_eccentric(M, 0.3)
        assert E.shape == (5,)
        for m, ek in zip(M, E):
            expected = float(anomaly_mean_to_eccentric(float(m), 0.3))
            assert float(ek) == pytest.approx(expected, abs=1e-8)

    def test_broadcast_eccentricity(self):
        e = jnp.array([0.0, 0.2, 0.7])
        E = anomaly_mean_to_eccentric(1.2, e)
        assert E.shape == (3,)
        assert float(E[0]) == 1.2
        assert jnp.allclose(anomaly_eccentric_to_mean(E, e), 1.2, atol=1e-6)

    def test_worst_element_reported(self):
        with pytest.raises(NonConvergentAnomalySolution) as excinfo:
            anomaly_mean_to_eccentric(jnp.array([1.0, 0.3]), jnp.array([0.0, 0.9]), max_iterations=1)
        assert excinfo.value.mean_anomaly == pytest.approx(0.3)
        assert excinfo.value.eccentricity == pytest.approx(0.9)
