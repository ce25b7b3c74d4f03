"""Temperature and density profiles of the NRLMSISE-00 model.

- :func:`density_upper`: Bates temperature profile above ``za`` with a
  spline-corrected profile between ``za`` and 72.5 km, and the diffusive
  density that follows from it.
- :func:`density_lower`: spline temperature profiles of the
  stratosphere/mesosphere and troposphere/stratosphere, and the
  hydrostatic density through them.

Both return the temperature in the density slot when ``xm == 0``.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from atmojax.atmosphere.nrlmsise00._corrections import zeta
from atmojax.atmosphere.nrlmsise00._spline import eval_spline, fit_spline, integrate_spline
from atmojax.constants import R_GAS_MSIS


def _node_profile(
    z: ArrayLike,
    zn: Array,
    tn: Array,
    tgn: Array,
    re: ArrayLike,
) -> tuple[Array, Array, Array, tuple[Array, Array], Array]:
    """Spline of ``1/T`` against normalized geopotential height.

    Returns:
        Tuple of (temperature at *z*, normalized height, ``zgdif``,
        spline nodes, spline second derivatives).
    """
    z1 = zn[0]
    z2 = zn[-1]
    t1 = tn[0]
    t2 = tn[-1]
    zgdif = zeta(z2, z1, re)

    xs = zeta(zn, z1, re) / zgdif
    ys = 1.0 / tn
    yd1 = -tgn[0] / (t1 * t1) * zgdif
    yd2 = -tgn[1] / (t2 * t2) * zgdif * ((re + z2) / (re + z1)) ** 2

    y2out = fit_spline(xs, ys, yd1, yd2)
    x = zeta(z, z1, re) / zgdif
    tz = 1.0 / eval_spline(xs, ys, y2out, x)
    return tz, x, zgdif, (xs, ys), y2out


def density_upper(
    alt: ArrayLike,
    dlb: ArrayLike,
    tinf: ArrayLike,
    tlb: ArrayLike,
    xm: ArrayLike,
    alpha: ArrayLike,
    zlb: ArrayLike,
    s2: ArrayLike,
    zn1: Array,
    tn1: Array,
    tgn1: Array,
    gsurf: ArrayLike,
    re: ArrayLike,
) -> tuple[Array, Array, Array, Array]:
    """Thermospheric density and temperature.

    Above ``za = zn1[0]`` the temperature follows the Bates profile
    ``tinf - (tinf - tlb) exp(-s2 zeta)``; below it the profile is a spline
    through the nodes *tn1*, whose upper node and gradient are taken from
    the Bates profile at ``za``.

    Args:
        alt: Altitude [km].
        dlb: Density at the lower boundary ``zlb``.
        tinf: Exospheric temperature [K].
        tlb: Temperature at the lower boundary [K].
        xm: Species molecular weight (0 for temperature only).
        alpha: Thermal diffusion coefficient.
        zlb: Lower boundary altitude [km].
        s2: Temperature-gradient shape parameter.
        zn1: Node altitudes, decreasing from ``za`` [km].
        tn1: Node temperatures [K]; ``tn1[0]`` is replaced below ``za``.
        tgn1: End gradients; ``tgn1[0]`` is replaced below ``za``.
        gsurf: Surface gravity [cm/s^2].
        re: Effective Earth radius [km].

    Returns:
        Tuple of (density or temperature, temperature [K], node
        temperatures, end gradients). The node arrays carry the Bates
        values at ``za`` when ``alt < za`` and are returned unchanged
        otherwise.
    """
    za = zn1[0]
    below = alt < za

    zg2 = zeta(jnp.maximum(alt, za), zlb, re)
    tt = tinf - (tinf - tlb) * jnp.exp(-s2 * zg2)

    # Spline profile between za and the lowest node, anchored to Bates at za
    ta = tinf - (tinf - tlb) * jnp.exp(-s2 * zeta(za, zlb, re))
    dta = (tinf - ta) * s2 * ((re + zlb) / (re + za)) ** 2
    tn1_below = tn1.at[0].set(ta)
    tgn1_below = tgn1.at[0].set(dta)

    z = jnp.clip(alt, zn1[-1], za)
    tz_below, x, zgdif, (xs, ys), y2out = _node_profile(z, zn1, tn1_below, tgn1_below, re)
    tz = jnp.where(below, tz_below, tt)

    tn1_out = jnp.where(below, tn1_below, tn1)
    tgn1_out = jnp.where(below, tgn1_below, tgn1)

    # Diffusive density above za
    glb = gsurf / (1.0 + zlb / re) ** 2
    gamma = xm * glb / (s2 * R_GAS_MSIS * tinf)
    expl = jnp.minimum(jnp.exp(-s2 * gamma * zg2), 50.0)
    expl = jnp.where(tt <= 0.0, 50.0, expl)
    safe_tt = jnp.where(tt > 0.0, tt, 1.0)
    densa = dlb * (tlb / safe_tt) ** (1.0 + alpha + gamma) * expl

    # Continued through the spline profile below za
    t1 = ta
    glb1 = gsurf / (1.0 + za / re) ** 2
    gamm = xm * glb1 * zgdif / R_GAS_MSIS
    yi = integrate_spline(xs, ys, y2out, x)
    expl_below = jnp.minimum(gamm * yi, 50.0)
    expl_below = jnp.where(tz_below <= 0.0, 50.0, expl_below)
    safe_tz = jnp.where(tz_below > 0.0, tz_below, 1.0)
    dens_below = densa * (t1 / safe_tz) ** (1.0 + alpha) * jnp.exp(-expl_below)

    density = jnp.where(below, dens_below, densa)
    density = jnp.where(xm == 0.0, tz, density)
    return density, tz, tn1_out, tgn1_out


def density_lower(
    alt: ArrayLike,
    d0: ArrayLike,
    xm: ArrayLike,
    tz0: ArrayLike,
    zn2: Array,
    tn2: Array,
    tgn2: Array,
    zn3: Array,
    tn3: Array,
    tgn3: Array,
    gsurf: ArrayLike,
    re: ArrayLike,
) -> tuple[Array, Array]:
    """Middle and lower atmosphere density and temperature.

    Args:
        alt: Altitude [km].
        d0: Density at ``zn2[0]``.
        xm: Species molecular weight (0 for temperature only).
        tz0: Temperature returned above ``zn2[0]`` [K].
        zn2: Stratosphere/mesosphere node altitudes (72.5 to 32.5 km).
        tn2: Node temperatures [K].
        tgn2: End gradients.
        zn3: Troposphere/stratosphere node altitudes (32.5 to 0 km).
        tn3: Node temperatures [K].
        tgn3: End gradients.
        gsurf: Surface gravity [cm/s^2].
        re: Effective Earth radius [km].

    Returns:
        Tuple of (density or temperature, temperature [K]). Above
        ``zn2[0]`` these are *d0* and *tz0*.
    """
    above_zn2 = alt > zn2[0]
    above_zn3 = alt > zn3[0]

    # Stratosphere/mesosphere
    z = jnp.clip(alt, zn2[-1], zn2[0])
    tz2, x2, zgdif2, (xs2, ys2), y2_2 = _node_profile(z, zn2, tn2, tgn2, re)
    glb2 = gsurf / (1.0 + zn2[0] / re) ** 2
    gamm2 = xm * glb2 * zgdif2 / R_GAS_MSIS
    expl2 = jnp.minimum(gamm2 * integrate_spline(xs2, ys2, y2_2, x2), 50.0)
    dens2 = d0 * (tn2[0] / tz2) * jnp.exp(-expl2)

    # Troposphere/stratosphere
    z = jnp.minimum(alt, zn3[0])
    tz3, x3, zgdif3, (xs3, ys3), y2_3 = _node_profile(z, zn3, tn3, tgn3, re)
    glb3 = gsurf / (1.0 + zn3[0] / re) ** 2
    gamm3 = xm * glb3 * zgdif3 / R_GAS_MSIS
    expl3 = jnp.minimum(gamm3 * integrate_spline(xs3, ys3, y2_3, x3), 50.0)
    dens3 = dens2 * (tn3[0] / tz3) * jnp.exp(-expl3)

    tz = jnp.where(above_zn2, tz0, jnp.where(above_zn3, tz2, tz3))
    density = jnp.where(above_zn2, d0, jnp.where(above_zn3, dens2, dens3))
    density = jnp.where(xm == 0.0, tz, density)
    return density, tz
