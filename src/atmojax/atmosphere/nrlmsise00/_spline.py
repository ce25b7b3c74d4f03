"""Cubic spline routines used by the temperature profiles.

Numerical-Recipes style natural/clamped cubic splines over a handful of
nodes. The node count is taken from the array shape, so the loops unroll
at trace time.
"""

from __future__ import annotations

import jax.numpy as jnp
import numpy as np
from jax import Array
from jax.typing import ArrayLike

from atmojax.utils.validation import concrete_value

# A boundary slope strictly greater than this (signed, not in magnitude)
# selects the natural end condition.
NATURAL_SLOPE: float = 0.99e30


def _check_nodes(x: ArrayLike) -> None:
    value = concrete_value(x)
    if value is not None and np.unique(value).size < 2:
        raise ValueError(f"spline nodes x need at least two distinct abscissas, got {value!r}")


def fit_spline(x: ArrayLike, y: ArrayLike, yp1: ArrayLike, ypn: ArrayLike) -> Array:
    """Second derivatives of the interpolating cubic spline.

    The natural end condition is selected by a boundary slope strictly
    greater than :data:`NATURAL_SLOPE`. The comparison is signed: a slope of
    ``-1e30`` is used as a clamped derivative, as in the reference model.

    Args:
        x: Node abscissas, increasing, shape ``(n,)``.
        y: Node values, shape ``(n,)``.
        yp1: First derivative at ``x[0]``; ``> 0.99e30`` for a natural end.
        ypn: First derivative at ``x[-1]``; ``> 0.99e30`` for a natural end.

    Returns:
        Second derivatives at the nodes, shape ``(n,)``.

    Raises:
        ValueError: If concrete nodes hold fewer than two distinct abscissas.
    """
    _check_nodes(x)
    x = jnp.asarray(x)
    y = jnp.asarray(y)
    n = x.shape[0]

    u = jnp.zeros(n, dtype=x.dtype)
    y2 = jnp.zeros(n, dtype=x.dtype)

    natural_left = yp1 > NATURAL_SLOPE
    y2 = y2.at[0].set(jnp.where(natural_left, 0.0, -0.5))
    u = u.at[0].set(
        jnp.where(
            natural_left,
            0.0,
            (3.0 / (x[1] - x[0])) * ((y[1] - y[0]) / (x[1] - x[0]) - yp1),
        )
    )

    # Forward elimination, unrolled over the static node count
    for i in range(1, n - 1):
        sig = (x[i] - x[i - 1]) / (x[i + 1] - x[i - 1])
        p = sig * y2[i - 1] + 2.0
        y2 = y2.at[i].set((sig - 1.0) / p)
        slope_diff = (y[i + 1] - y[i]) / (x[i + 1] - x[i]) - (y[i] - y[i - 1]) / (x[i] - x[i - 1])
        u = u.at[i].set((6.0 * slope_diff / (x[i + 1] - x[i - 1]) - sig * u[i - 1]) / p)

    natural_right = ypn > NATURAL_SLOPE
    qn = jnp.where(natural_right, 0.0, 0.5)
    un = jnp.where(
        natural_right,
        0.0,
        (3.0 / (x[n - 1] - x[n - 2])) * (ypn - (y[n - 1] - y[n - 2]) / (x[n - 1] - x[n - 2])),
    )
    y2 = y2.at[n - 1].set((un - qn * u[n - 2]) / (qn * y2[n - 2] + 1.0))

    # Back substitution
    for k in range(n - 2, -1, -1):
        y2 = y2.at[k].set(y2[k] * y2[k + 1] + u[k])

    return y2


def eval_spline(xa: ArrayLike, ya: ArrayLike, y2a: ArrayLike, x: ArrayLike) -> Array:
    """Evaluate the cubic spline at *x*.

    Points outside the node range are extrapolated with the first or last
    interval's cubic.

    Args:
        xa: Node abscissas, increasing, shape ``(n,)``.
        ya: Node values.
        y2a: Second derivatives from :func:`fit_spline`.
        x: Evaluation point.

    Returns:
        Interpolated value.
    """
    xa = jnp.asarray(xa)
    ya = jnp.asarray(ya)
    y2a = jnp.asarray(y2a)
    n = xa.shape[0]

    klo = jnp.clip(jnp.searchsorted(xa, x, side="right") - 1, 0, n - 2)
    khi = klo + 1

    h = xa[khi] - xa[klo]
    a = (xa[khi] - x) / h
    b = (x - xa[klo]) / h
    return a * ya[klo] + b * ya[khi] + ((a**3 - a) * y2a[klo] + (b**3 - b) * y2a[khi]) * h * h / 6.0


def integrate_spline(xa: ArrayLike, ya: ArrayLike, y2a: ArrayLike, x: ArrayLike) -> Array:
    """Integral of the cubic spline from ``xa[0]`` to *x*.

    Accumulates interval by interval. Intervals starting at or beyond *x*
    contribute nothing; the last interval is extrapolated when *x* lies
    beyond ``xa[-1]``.

    Args:
        xa: Node abscissas, increasing, shape ``(n,)``.
        ya: Node values.
        y2a: Second derivatives from :func:`fit_spline`.
        x: Upper limit.

    Returns:
        Integral value (0 when ``x <= xa[0]``).
    """
    xa = jnp.asarray(xa)
    ya = jnp.asarray(ya)
    y2a = jnp.asarray(y2a)
    n = xa.shape[0]

    yi = jnp.zeros_like(jnp.asarray(x, dtype=xa.dtype))
    for klo in range(n - 1):
        khi = klo + 1
        xx = x if khi == n - 1 else jnp.minimum(x, xa[khi])

        h = xa[khi] - xa[klo]
        a = (xa[khi] - xx) / h
        b = (xx - xa[klo]) / h
        a2 = a * a
        b2 = b * b
        segment = (
            (1.0 - a2) * ya[klo] / 2.0
            + b2 * ya[khi] / 2.0
            + ((-(1.0 + a2 * a2) / 4.0 + a2 / 2.0) * y2a[klo] + (b2 * b2 / 4.0 - b2 / 2.0) * y2a[khi])
            * h
            * h
            / 6.0
        ) * h

        yi = jnp.where(x > xa[klo], yi + segment, yi)

    return yi
