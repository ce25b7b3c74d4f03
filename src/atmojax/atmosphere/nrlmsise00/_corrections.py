"""Correction primitives of the NRLMSISE-00 model.

Chemistry/dissociation corrections, the turbopause blend between
diffusive and fully mixed densities, and the gravity/geopotential
helpers. All functions are elementwise and JIT-compatible.
"""

from __future__ import annotations

import logging

import jax
import jax.numpy as jnp
import numpy as np
from jax import Array
from jax.typing import ArrayLike

from atmojax.constants import R_GAS_MSIS

logger = logging.getLogger(__name__)

_DGTR: float = 1.74533e-2  # Degrees to radians (model value)


def chem_correction(alt: ArrayLike, r: ArrayLike, h1: ArrayLike, zh: ArrayLike) -> Array:
    """Chemistry/dissociation correction factor.

    Args:
        alt: Altitude [km].
        r: Target ratio (log).
        h1: Transition scale length [km].
        zh: Altitude of half the correction [km].

    Returns:
        ``exp(r / (1 + exp((alt - zh) / h1)))``, saturating to 1 above
        and ``exp(r)`` below the +/-70 exponent limits.
    """
    e = (alt - zh) / h1
    ex = jnp.exp(jnp.clip(e, -70.0, 70.0))
    return jnp.where(
        e > 70.0,
        1.0,
        jnp.where(e < -70.0, jnp.exp(r), jnp.exp(r / (1.0 + ex))),
    )


def chem_correction2(
    alt: ArrayLike, r: ArrayLike, h1: ArrayLike, zh: ArrayLike, h2: ArrayLike
) -> Array:
    """Chemistry/dissociation correction with two scale lengths.

    Args:
        alt: Altitude [km].
        r: Target ratio (log).
        h1: First transition scale length [km].
        zh: Altitude of half the correction [km].
        h2: Second transition scale length [km].

    Returns:
        Correction factor. Saturates to 1 as soon as either exponent
        exceeds 70, and to ``exp(r)`` when both are below -70.
    """
    e1 = (alt - zh) / h1
    e2 = (alt - zh) / h2
    ex1 = jnp.exp(jnp.clip(e1, -70.0, 70.0))
    ex2 = jnp.exp(jnp.clip(e2, -70.0, 70.0))
    return jnp.where(
        (e1 > 70.0) | (e2 > 70.0),
        1.0,
        jnp.where(
            (e1 < -70.0) & (e2 < -70.0),
            jnp.exp(r),
            jnp.exp(r / (1.0 + 0.5 * (ex1 + ex2))),
        ),
    )


def _warn_degenerate(dd: np.ndarray, dm: np.ndarray) -> None:
    dd, dm = np.broadcast_arrays(dd, dm)
    degenerate = ~((dm > 0.0) & (dd > 0.0))
    if np.any(degenerate):
        logger.warning(
            "Turbopause blend received non-positive densities (dd=%s, dm=%s); using fallback",
            dd[degenerate],
            dm[degenerate],
        )


def turbopause_blend(
    dd: ArrayLike, dm: ArrayLike, zhm: ArrayLike, xmm: ArrayLike, xm: ArrayLike
) -> Array:
    """Blend diffusive and fully mixed densities across the turbopause.

    Non-positive inputs take the fallback path (both zero gives 1, a zero
    mixed density gives *dd*, a zero diffusive density gives *dm*) and
    log a warning. The warning is raised through ``jax.debug.callback``
    so it also fires under ``jax.jit`` and ``jax.vmap``.

    Args:
        dd: Diffusive density.
        dm: Fully mixed density.
        zhm: Transition scale length.
        xmm: Fully mixed molecular weight.
        xm: Species molecular weight.

    Returns:
        Combined density.
    """
    dd = jnp.asarray(dd)
    dm = jnp.asarray(dm)
    jax.debug.callback(_warn_degenerate, dd, dm)

    a = zhm / (xmm - xm)
    positive = (dm > 0.0) & (dd > 0.0)
    safe_dm = jnp.where(dm > 0.0, dm, 1.0)
    safe_dd = jnp.where(dd > 0.0, dd, 1.0)
    ylog = a * jnp.log(safe_dm / safe_dd)

    blended = jnp.where(
        ylog < -10.0,
        dd,
        jnp.where(ylog > 10.0, dm, dd * (1.0 + jnp.exp(jnp.clip(ylog, -10.0, 10.0))) ** (1.0 / a)),
    )
    fallback = jnp.where(
        (dd == 0.0) & (dm == 0.0),
        1.0,
        jnp.where(dm == 0.0, dd, jnp.where(dd == 0.0, dm, blended)),
    )
    return jnp.where(positive, blended, fallback)


def gravity_and_radius(lat: ArrayLike) -> tuple[Array, Array]:
    """Latitude-dependent surface gravity and effective Earth radius.

    Args:
        lat: Geodetic latitude [deg].

    Returns:
        Tuple of (surface gravity [cm/s^2], effective radius [km]).
    """
    c2 = jnp.cos(2.0 * _DGTR * lat)
    gv = 980.616 * (1.0 - 0.0026373 * c2)
    reff = 2.0 * gv / (3.085462e-6 + 2.27e-9 * c2) * 1.0e-5
    return gv, reff


def scale_height(
    alt: ArrayLike, xm: ArrayLike, temp: ArrayLike, gsurf: ArrayLike, re: ArrayLike
) -> Array:
    """Pressure scale height [km] of a species of molecular weight *xm*."""
    g = gsurf / (1.0 + alt / re) ** 2
    return R_GAS_MSIS * temp / (g * xm)


def zeta(zz: ArrayLike, zl: ArrayLike, re: ArrayLike) -> Array:
    """Geopotential height difference between *zz* and *zl* [km]."""
    return (zz - zl) * (re + zl) / (re + zz)
