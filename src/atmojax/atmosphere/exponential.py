"""Exponential atmospheric density model.

Piecewise exponential fit to the CIRA-72 standard atmosphere: within each
altitude band the density decays as ``rho0 * exp(-(h - h0) / H)`` from the
band's base altitude ``h0``. Heights of 1000 km and above use the last band.

All inputs and outputs use SI base units (metres, kg/m^3).

References:
    1. D. Vallado, *Fundamentals of Astrodynamics and Applications*,
       4th ed., 2013, Table 8-4.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from atmojax.config import get_dtype
from atmojax.utils.validation import check_non_negative

# Base altitude [km]
_EXP_H0 = jnp.array([
    0.0, 25.0, 30.0, 40.0, 50.0, 60.0, 70.0, 80.0, 90.0, 100.0,
    110.0, 120.0, 130.0, 140.0, 150.0, 180.0, 200.0, 250.0, 300.0, 350.0,
    400.0, 450.0, 500.0, 600.0, 700.0, 800.0, 900.0, 1000.0,
])

# Nominal density at the base altitude [kg/m^3]
_EXP_RHO0 = jnp.array([
    1.225, 3.899e-2, 1.774e-2, 3.972e-3, 1.057e-3, 3.206e-4, 8.770e-5,
    1.905e-5, 3.396e-6, 5.297e-7, 9.661e-8, 2.438e-8, 8.484e-9, 3.845e-9,
    2.070e-9, 5.464e-10, 2.789e-10, 7.248e-11, 2.418e-11, 9.518e-12,
    3.725e-12, 1.585e-12, 6.967e-13, 1.454e-13, 3.614e-14, 1.170e-14,
    5.245e-15, 3.019e-15,
])

# Scale height [km]
_EXP_H = jnp.array([
    7.249, 6.349, 6.682, 7.554, 8.382, 7.714, 6.549, 5.799, 5.382, 5.877,
    7.263, 9.473, 12.636, 16.149, 22.523, 29.740, 37.105, 45.546, 53.628,
    53.298, 58.515, 60.828, 63.822, 71.835, 88.667, 124.64, 181.05, 268.00,
])


def density_exponential(h: ArrayLike) -> Array:
    """Atmospheric density from the exponential model.

    Args:
        h: Altitude above the ellipsoid [m]. Must be non-negative.

    Returns:
        Atmospheric density [kg/m^3], same shape as *h*.

    Raises:
        ValueError: If a concrete *h* is negative.

    Examples:
        ```python
        from atmojax.atmosphere import density_exponential
        rho = density_exponential(747211.9)  # ~2.122e-14
        ```
    """
    check_non_negative("altitude h", h)

    _float = get_dtype()
    height = jnp.asarray(h, dtype=_float) / _float(1.0e3)

    # Band whose base altitude is the last one not above the height
    ih = jnp.searchsorted(_EXP_H0, height, side="right") - 1
    ih = jnp.clip(ih, 0, _EXP_H0.shape[0] - 1)

    return _EXP_RHO0[ih] * jnp.exp(-(height - _EXP_H0[ih]) / _EXP_H[ih])
