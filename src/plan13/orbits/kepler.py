"""Kepler equation solver for the Plan13 propagator.

Solves ``M = E - e * sin(E)`` by Newton-Raphson iteration starting from
``E = M``, stopping once the correction falls below a tolerance.  The
iteration runs in a jitted ``jax.lax.while_loop`` compiled once per input
shape and dtype.  The public solver checks convergence eagerly and raises
when the iteration cap is reached, which only happens for pathological
orbits with ``e`` close to 1.
"""

from __future__ import annotations

from functools import partial

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from plan13.config import get_dtype
from plan13.errors import NonConvergentAnomalySolution

KEPLER_TOLERANCE = 1.0e-5
"""Convergence threshold on the Newton correction. Units: *rad*"""

KEPLER_MAX_ITERATIONS = 50
"""Newton steps allowed before giving up."""


def _newton_cond(state, tol, max_iterations):
    _, d, i = state
    return jnp.any(jnp.abs(d) > tol) & (i < max_iterations)


def _newton_body(state, M, e):
    E, _, i = state
    d = (E - e * jnp.sin(E) - M) / (1.0 - e * jnp.cos(E))
    return (E - d, d, i + 1)


@partial(jax.jit, static_argnames=("tol", "max_iterations"))
def _kepler_loop(M: Array, e: Array, tol: float, max_iterations: int) -> tuple[Array, Array, Array]:
    # Force the first step by starting with an infinite correction
    init_state = (M, jnp.full_like(M, jnp.inf), jnp.int32(0))
    return jax.lax.while_loop(
        partial(_newton_cond, tol=tol, max_iterations=max_iterations),
        partial(_newton_body, M=M, e=e),
        init_state,
    )


def kepler_newton(
    anm_mean: ArrayLike,
    e: ArrayLike,
    tol: float = KEPLER_TOLERANCE,
    max_iterations: int = KEPLER_MAX_ITERATIONS,
) -> tuple[Array, Array, Array]:
    """Run the bounded Newton-Raphson iteration for Kepler's equation.

    Traceable under ``jax.jit``; does not check convergence itself.  Mean
    anomaly and eccentricity broadcast against each other; the iteration
    continues until every element has converged.

    Args:
        anm_mean: Mean anomaly. Units: *rad*
        e: Eccentricity. Dimensionless.
        tol: Stop once ``|correction| <= tol``. Units: *rad*
        max_iterations: Iteration cap.

    Returns:
        ``(E, last_correction, iterations)``.
    """
    M, e = jnp.broadcast_arrays(
        jnp.asarray(anm_mean, dtype=get_dtype()),
        jnp.asarray(e, dtype=get_dtype()),
    )
    return _kepler_loop(M, e, float(tol), int(max_iterations))


def anomaly_mean_to_eccentric(
    anm_mean: ArrayLike,
    e: ArrayLike,
    tol: float = KEPLER_TOLERANCE,
    max_iterations: int = KEPLER_MAX_ITERATIONS,
) -> Array:
    """Convert mean anomaly to eccentric anomaly.

    For ``e == 0`` the first Newton correction is exactly zero, so the
    result equals the mean anomaly.  Array inputs are solved element-wise.

    Args:
        anm_mean: Mean anomaly. Units: *rad*
        e: Eccentricity, in ``[0, 1)``.
        tol: Convergence threshold on the Newton correction. Units: *rad*
        max_iterations: Iteration cap.

    Returns:
        Eccentric anomaly. Units: *rad*

    Raises:
        NonConvergentAnomalySolution: If any correction is still above
            ``tol`` after ``max_iterations`` steps.

    Examples:
        ```python
        from plan13.orbits import anomaly_mean_to_eccentric
        E = anomaly_mean_to_eccentric(1.0, 0.1)
        ```
    """
    E, d, i = kepler_newton(anm_mean, e, tol, max_iterations)
    residual = jnp.abs(d)
    if not bool(jnp.all(residual <= tol)):
        k = int(jnp.argmax(residual.ravel()))
        M, e = jnp.broadcast_arrays(jnp.asarray(anm_mean), jnp.asarray(e))
        raise NonConvergentAnomalySolution(float(M.ravel()[k]), float(e.ravel()[k]), int(i))
    return E


def anomaly_eccentric_to_mean(anm_ecc: ArrayLike, e: ArrayLike) -> Array:
    """Convert eccentric anomaly to mean anomaly.

    Args:
        anm_ecc: Eccentric anomaly. Units: *rad*
        e: Eccentricity. Dimensionless.

    Returns:
        Mean anomaly. Units: *rad*
    """
    E = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    return E - e * jnp.sin(E)
