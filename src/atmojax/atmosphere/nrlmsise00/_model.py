"""NRLMSISE-00 model drivers.

- :func:`build_config`: assemble an :class:`NRLMSISE00Input` from raw
  inputs (Legendre table, local-time harmonics, gravity).
- :func:`gts7`: thermospheric densities and temperature (above 72.5 km).
- :func:`gtd7`: full model from the ground to the exosphere.
- :func:`gtd7d`: :func:`gtd7` with anomalous oxygen in the total mass
  density, the variant intended for drag computations.

All drivers are pure functions of their input. Altitude regimes are
selected with ``jnp.where`` so the drivers compile once under
``jax.jit`` and batch under ``jax.vmap``; switches are static.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from atmojax.atmosphere.nrlmsise00._corrections import (
    chem_correction,
    chem_correction2,
    gravity_and_radius,
    scale_height,
    turbopause_blend,
)
from atmojax.atmosphere.nrlmsise00._data import PAVGM, PD, PDL, PDM, PMA, PS, PT, PTL, PTM
from atmojax.atmosphere.nrlmsise00._harmonics import (
    latitude_time_harmonics,
    legendre_table,
    lower_harmonics,
)
from atmojax.atmosphere.nrlmsise00._profiles import density_lower, density_upper
from atmojax.atmosphere.nrlmsise00._types import (
    NRLMSISE00Flags,
    NRLMSISE00Input,
    NRLMSISE00Output,
)
from atmojax.config import get_dtype
from atmojax.constants import AMU_GRAMS

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
_HR: float = 0.2618  # Hours to radians
_DGTR: float = 1.74533e-2  # Degrees to radians
_DR: float = 1.72142e-2  # Day-of-year to radians

# Lower-thermosphere nodes below za [km]
_ZN1_LOWER = (110.0, 100.0, 90.0, 72.5)
# Stratosphere/mesosphere and troposphere/stratosphere nodes [km]
_ZN2 = (72.5, 55.0, 45.0, 32.5)
_ZN3 = (32.5, 20.0, 15.0, 10.0, 0.0)
# Start of the linear transition to full mixing [km]
_ZMIX: float = 62.5

# Thermal diffusion coefficients (He, O, N2, O2, Ar, H, N, hot O)
_ALPHA_HE = -0.38
_ALPHA_H = -0.38
_ALPHA_AR = 0.17

# Upper altitude limits of the turbopause/chemistry corrections [km]
_TURBO_ALT_HE = 200.0
_TURBO_ALT_O = 300.0
_TURBO_ALT_N2 = 160.0
_TURBO_ALT_O2 = 250.0
_TURBO_ALT_AR = 240.0
_TURBO_ALT_H = 320.0
_TURBO_ALT_N = 450.0

# Altitude above which node temperatures take their mean values [km]
_TN1_VARIATION_ALT = 300.0


class ThermosphereState(NamedTuple):
    """Intermediate quantities of :func:`gts7` reused by :func:`gtd7`.

    Attributes:
        dm28: Fully mixed N2 density at the evaluation altitude (model
            units, CGS).
        tn1: Lower-thermosphere node temperatures [K], shape ``(5,)``.
        tgn1: Lower-thermosphere end gradients, shape ``(2,)``.
        apdf: Daily-Ap activity of the last full expansion.
        apt: Ap-history activity of the last full expansion.
    """

    dm28: Array
    tn1: Array
    tgn1: Array
    apdf: Array
    apt: Array


# ---------------------------------------------------------------------------
# Input assembly
# ---------------------------------------------------------------------------


def build_config(
    year: ArrayLike,
    doy: ArrayLike,
    sec: ArrayLike,
    alt: ArrayLike,
    g_lat: ArrayLike,
    g_long: ArrayLike,
    lst: ArrayLike,
    f107A: ArrayLike,
    f107: ArrayLike,
    ap: ArrayLike,
    flags: NRLMSISE00Flags | None = None,
) -> NRLMSISE00Input:
    """Build the model input and its derived quantities.

    Args:
        year: Year (unused by the model).
        doy: Day of year.
        sec: Seconds in day (UT).
        alt: Geodetic altitude [km].
        g_lat: Geodetic latitude [deg].
        g_long: Geodetic longitude [deg].
        lst: Local apparent solar time [h].
        f107A: 81-day average of F10.7 [sfu].
        f107: Daily F10.7 of the previous day [sfu].
        ap: Daily Ap (scalar), or the 7-element Ap history. A 7-element
            array switches the model to the Ap-history mode and its first
            element is used as the daily Ap.
        flags: Model switches. Defaults to :class:`NRLMSISE00Flags`.

    Returns:
        The assembled :class:`NRLMSISE00Input`.

    Raises:
        ValueError: If *ap* is neither a scalar nor a 7-element array.
    """
    dtype = get_dtype()
    flags = NRLMSISE00Flags() if flags is None else flags

    ap = jnp.asarray(ap, dtype=dtype)
    if ap.shape == (7,):
        ap_array = ap
        ap = ap[0]
        flags = flags.with_switches(use_ap_array=True)
    elif ap.ndim == 0:
        ap_array = jnp.full((7,), ap, dtype=dtype)
        flags = flags.with_switches(use_ap_array=False)
    else:
        raise ValueError(f"ap must be a scalar or a 7-element array, got shape {ap.shape}")

    doy = jnp.asarray(doy, dtype=dtype)
    sec = jnp.asarray(sec, dtype=dtype)
    alt = jnp.asarray(alt, dtype=dtype)
    g_lat = jnp.asarray(g_lat, dtype=dtype)
    g_long = jnp.asarray(g_long, dtype=dtype)
    lst = jnp.asarray(lst, dtype=dtype)
    f107A = jnp.asarray(f107A, dtype=dtype)
    f107 = jnp.asarray(f107, dtype=dtype)

    tloc = _HR * lst
    if flags.time_independent:
        gsurf, re = gravity_and_radius(g_lat)
    else:
        gsurf, re = gravity_and_radius(jnp.asarray(45.0, dtype=dtype))

    return NRLMSISE00Input(
        year=jnp.asarray(year, dtype=dtype),
        doy=doy,
        sec=sec,
        alt=alt,
        g_lat=g_lat,
        g_long=g_long,
        lst=lst,
        f107A=f107A,
        f107=f107,
        ap=ap,
        ap_array=ap_array,
        df=f107 - f107A,
        dfa=f107A - 150.0,
        plg=legendre_table(g_lat),
        ctloc=jnp.cos(tloc),
        stloc=jnp.sin(tloc),
        c2tloc=jnp.cos(2.0 * tloc),
        s2tloc=jnp.sin(2.0 * tloc),
        c3tloc=jnp.cos(3.0 * tloc),
        s3tloc=jnp.sin(3.0 * tloc),
        gsurf=gsurf,
        re=re,
        flags=flags,
    )


# ---------------------------------------------------------------------------
# Thermosphere
# ---------------------------------------------------------------------------


def gts7(
    inp: NRLMSISE00Input, flags: NRLMSISE00Flags | None = None
) -> tuple[NRLMSISE00Output, ThermosphereState]:
    """Thermospheric species densities and temperatures.

    Valid for ``inp.alt >= 72.5`` km. Each species follows a diffusive
    profile from the lower boundary, blended with the fully mixed profile
    across the turbopause and scaled by chemistry/dissociation corrections
    below a species-specific altitude.

    Args:
        inp: Model input from :func:`build_config`.
        flags: Switches. Defaults to ``inp.flags``.

    Returns:
        Tuple of (model output, intermediate state for :func:`gtd7`).
    """
    flags = inp.flags if flags is None else flags
    sw = flags.sw
    alt = inp.alt
    gsurf = inp.gsurf
    re = inp.re

    za = PDL[1, 15]
    zn1 = jnp.concatenate([za[None], jnp.asarray(_ZN1_LOWER, dtype=za.dtype)])
    zlb = PTM[5]
    apt = jnp.zeros_like(alt)

    # Exospheric temperature
    g_tinf, _, apt_tinf = latitude_time_harmonics(PT, inp, flags, apt)
    above_za = alt > za
    tinf = jnp.where(above_za, PTM[0] * PT[0] * (1.0 + sw(16) * g_tinf), PTM[0] * PT[0])
    apt = jnp.where(above_za, apt_tinf, apt)

    # Temperature gradient at the lower boundary
    g_s, _, apt_s = latitude_time_harmonics(PS, inp, flags, apt)
    # Inclusive: gtd7 evaluates here at exactly zn1[4] for every altitude below it.
    above_zn1 = alt >= zn1[4]
    g0 = jnp.where(above_zn1, PTM[3] * PS[0] * (1.0 + sw(19) * g_s), PTM[3] * PS[0])
    apt = jnp.where(above_zn1, apt_s, apt)

    # Lower-boundary temperature
    g_tlb, apdf, apt = latitude_time_harmonics(PD[3], inp, flags, apt)
    tlb = PTM[1] * (1.0 + sw(17) * g_tlb) * PD[3, 0]
    s = g0 / (tinf - tlb)

    # Lower-thermosphere nodes
    def node_variation(p: Array) -> Array:
        return lower_harmonics(p, inp, flags, apdf, apt)

    vary = alt < _TN1_VARIATION_ALT
    tn1_mean = (PTM[6] * PTL[0, 0], PTM[2] * PTL[1, 0], PTM[7] * PTL[2, 0], PTM[4] * PTL[3, 0])
    tn1_var = (
        tn1_mean[0] / (1.0 - sw(18) * node_variation(PTL[0])),
        tn1_mean[1] / (1.0 - sw(18) * node_variation(PTL[1])),
        tn1_mean[2] / (1.0 - sw(18) * node_variation(PTL[2])),
        tn1_mean[3] / (1.0 - sw(18) * sw(20) * node_variation(PTL[3])),
    )
    tn1_tail = [jnp.where(vary, v, m) for v, m in zip(tn1_var, tn1_mean)]
    tn1 = jnp.stack([jnp.zeros_like(tinf)] + tn1_tail)

    tgn1_mean = PTM[8] * PMA[8, 0] * tn1[4] * tn1[4] / (PTM[4] * PTL[3, 0]) ** 2
    tgn1_var = tgn1_mean * (1.0 + sw(18) * sw(20) * node_variation(PMA[8]))
    tgn1 = jnp.stack([jnp.zeros_like(tinf), jnp.where(vary, tgn1_var, tgn1_mean)])

    def profile(
        z: ArrayLike, dlb: ArrayLike, xm: float, alpha: float, t_inf=tinf, t_lb=tlb
    ) -> Array:
        density, _, _, _ = density_upper(
            z, dlb, t_inf, t_lb, xm, alpha, zlb, s, zn1, tn1, tgn1, gsurf, re
        )
        return density

    def blend(active: Array, dd: Array, dm: Array, zhm: Array, xm: float) -> Array:
        # Inactive lanes get benign inputs so the degenerate-input warning stays quiet
        mixed = turbopause_blend(
            jnp.where(active, dd, 1.0), jnp.where(active, dm, 1.0), zhm, xmm, xm
        )
        return jnp.where(active, mixed, dd)

    def lower_boundary_density(row: int, pdm_row: int, apt: Array) -> tuple[Array, Array]:
        g, _, apt = latitude_time_harmonics(PD[row], inp, flags, apt)
        return PDM[pdm_row, 0] * jnp.exp(sw(21) * g) * PD[row, 0], apt

    def mixed_profile(zh: ArrayLike, db: Array, xm: float, alpha: float) -> tuple[Array, Array]:
        b = profile(zh, db, xm - xmm, alpha - 1.0)
        return b, profile(alt, b, xmm, 0.0)

    # Turbopause height variation
    zhf = PDL[1, 24] * (
        1.0 + sw(5) * PDL[0, 24] * jnp.sin(_DGTR * inp.g_lat) * jnp.cos(_DR * (inp.doy - PT[13]))
    )
    xmm = PDM[2, 4]
    f107_scale = 1.0 + sw(1) * PDL[0, 23] * (inp.f107A - 150.0)

    # N2
    db28, apt = lower_boundary_density(2, 2, apt)
    d_n2 = profile(alt, db28, 28.0, 0.0)
    zh28 = PDM[2, 2] * zhf
    zhm28 = PDM[2, 3] * PDL[1, 5]
    b28 = profile(zh28, db28, 28.0 - xmm, -1.0)
    dm28 = profile(alt, b28, xmm, 0.0)
    if sw(15):
        d_n2 = blend(alt <= _TURBO_ALT_N2, d_n2, dm28, zhm28, 28.0)

    # He
    db04, apt = lower_boundary_density(0, 0, apt)
    d_he = profile(alt, db04, 4.0, _ALPHA_HE)
    if sw(15):
        active = alt < _TURBO_ALT_HE
        b04, dm04 = mixed_profile(PDM[0, 2], db04, 4.0, _ALPHA_HE)
        d_he = blend(active, d_he, dm04, zhm28, 4.0)
        rl = jnp.log(b28 * PDM[0, 1] / b04)
        corr = chem_correction(alt, rl, PDM[0, 5] * PDL[1, 1], PDM[0, 4] * PDL[1, 0])
        d_he = jnp.where(active, d_he * corr, d_he)

    # O
    db16, apt = lower_boundary_density(1, 1, apt)
    d_o = profile(alt, db16, 16.0, 0.0)
    if sw(15):
        active = alt <= _TURBO_ALT_O
        _, dm16 = mixed_profile(PDM[1, 2], db16, 16.0, 0.0)
        d_o = blend(active, d_o, dm16, zhm28, 16.0)
        corr = chem_correction2(
            alt,
            PDM[1, 1] * PDL[1, 16] * f107_scale,
            PDM[1, 5] * PDL[1, 3],
            PDM[1, 4] * PDL[1, 2],
            PDM[1, 5] * PDL[1, 4],
        )
        corr = corr * chem_correction(
            alt, PDM[1, 3] * PDL[1, 14], PDM[1, 7] * PDL[1, 13], PDM[1, 6] * PDL[1, 12]
        )
        d_o = jnp.where(active, d_o * corr, d_o)

    # O2
    db32, apt = lower_boundary_density(4, 3, apt)
    d_o2 = profile(alt, db32, 32.0, 0.0)
    if sw(15):
        active = alt <= _TURBO_ALT_O2
        b32, dm32 = mixed_profile(PDM[3, 2], db32, 32.0, 0.0)
        d_o2 = blend(active, d_o2, dm32, zhm28, 32.0)
        rl = jnp.log(b28 * PDM[3, 1] / b32)
        corr = chem_correction(alt, rl, PDM[3, 5] * PDL[1, 7], PDM[3, 4] * PDL[1, 6])
        d_o2 = jnp.where(active, d_o2 * corr, d_o2)
        # Net loss above the turbopause
        d_o2 = d_o2 * chem_correction2(
            alt,
            PDM[3, 3] * PDL[1, 23] * f107_scale,
            PDM[3, 7] * PDL[1, 22],
            PDM[3, 6] * PDL[1, 21],
            PDM[3, 7] * PDL[0, 22],
        )

    # Ar
    db40, apt = lower_boundary_density(5, 4, apt)
    d_ar = profile(alt, db40, 40.0, _ALPHA_AR)
    if sw(15):
        active = alt <= _TURBO_ALT_AR
        b40, dm40 = mixed_profile(PDM[4, 2], db40, 40.0, _ALPHA_AR)
        d_ar = blend(active, d_ar, dm40, zhm28, 40.0)
        rl = jnp.log(b28 * PDM[4, 1] / b40)
        corr = chem_correction(alt, rl, PDM[4, 5] * PDL[1, 9], PDM[4, 4] * PDL[1, 8])
        d_ar = jnp.where(active, d_ar * corr, d_ar)

    # H
    db01, apt = lower_boundary_density(6, 5, apt)
    d_h = profile(alt, db01, 1.0, _ALPHA_H)
    if sw(15):
        active = alt <= _TURBO_ALT_H
        b01, dm01 = mixed_profile(PDM[5, 2], db01, 1.0, _ALPHA_H)
        d_h = blend(active, d_h, dm01, zhm28, 1.0)
        rl = jnp.log(b28 * PDM[5, 1] * jnp.abs(PDL[1, 17]) / b01)
        corr = chem_correction(alt, rl, PDM[5, 5] * PDL[1, 11], PDM[5, 4] * PDL[1, 10])
        corr = corr * chem_correction(
            alt, PDM[5, 3] * PDL[1, 20], PDM[5, 7] * PDL[1, 19], PDM[5, 6] * PDL[1, 18]
        )
        d_h = jnp.where(active, d_h * corr, d_h)

    # N
    db14, apt = lower_boundary_density(7, 6, apt)
    d_n = profile(alt, db14, 14.0, 0.0)
    if sw(15):
        active = alt <= _TURBO_ALT_N
        b14, dm14 = mixed_profile(PDM[6, 2], db14, 14.0, 0.0)
        d_n = blend(active, d_n, dm14, zhm28, 14.0)
        rl = jnp.log(b28 * PDM[6, 1] * jnp.abs(PDL[0, 2]) / b14)
        corr = chem_correction(alt, rl, PDM[6, 5] * PDL[0, 1], PDM[6, 4] * PDL[0, 0])
        corr = corr * chem_correction(
            alt, PDM[6, 3] * PDL[0, 5], PDM[6, 7] * PDL[0, 4], PDM[6, 6] * PDL[0, 3]
        )
        d_n = jnp.where(active, d_n * corr, d_n)

    # Anomalous (hot) O
    g16h, apdf, apt = latitude_time_harmonics(PD[8], inp, flags, apt)
    db16h = PDM[7, 0] * jnp.exp(sw(21) * g16h) * PD[8, 0]
    tho = PDM[7, 9] * PDL[0, 6]
    zsht = PDM[7, 5]
    zmho = PDM[7, 4]
    zsho = scale_height(zmho, 16.0, tho, gsurf, re)
    d_ao = profile(alt, db16h, 16.0, 0.0, t_inf=tho, t_lb=tho)
    d_ao = d_ao * jnp.exp(-zsht / zsho * (jnp.exp(-(alt - zmho) / zsht) - 1.0))

    total = AMU_GRAMS * (
        4.0 * d_he + 16.0 * d_o + 28.0 * d_n2 + 32.0 * d_o2 + 40.0 * d_ar + d_h + 14.0 * d_n
    )
    t_alt = profile(jnp.abs(alt), 1.0, 0.0, 0.0)

    if flags.output_m_kg:
        d_he, d_o, d_n2, d_o2, d_ar, d_h, d_n, d_ao = (
            d * 1.0e6 for d in (d_he, d_o, d_n2, d_o2, d_ar, d_h, d_n, d_ao)
        )
        total = total * 1.0e6 / 1000.0

    output = NRLMSISE00Output(
        den_N=d_n,
        den_N2=d_n2,
        den_O=d_o,
        den_aO=d_ao,
        den_O2=d_o2,
        den_H=d_h,
        den_He=d_he,
        den_Ar=d_ar,
        den_Total=total,
        T_exo=tinf,
        T_alt=t_alt,
    )
    return output, ThermosphereState(dm28=dm28, tn1=tn1, tgn1=tgn1, apdf=apdf, apt=apt)


# ---------------------------------------------------------------------------
# Full model
# ---------------------------------------------------------------------------


def gtd7(inp: NRLMSISE00Input, flags: NRLMSISE00Flags | None = None) -> NRLMSISE00Output:
    """NRLMSISE-00 densities and temperatures at any altitude.

    At and above 72.5 km this is :func:`gts7`. Below, the temperature
    follows spline profiles through the middle- and lower-atmosphere
    nodes, N2 is hydrostatic from the fully mixed N2 at 72.5 km, He, O2
    and Ar follow from their mixing ratios, and O, H, N and anomalous O
    are zero. Between 62.5 and 72.5 km the species blend linearly into
    the thermospheric values, so N2, He, O2, Ar and the temperature are
    continuous at 72.5 km.

    Args:
        inp: Model input from :func:`build_config`.
        flags: Switches. Defaults to ``inp.flags``.

    Returns:
        Number densities [cm^-3], total mass density [g/cm^3] and
        temperatures [K]; SI units (m^-3, kg/m^3) with ``output_m_kg``.
    """
    flags = inp.flags if flags is None else flags
    sw = flags.sw
    alt = inp.alt
    gsurf = inp.gsurf
    re = inp.re
    dtype = alt.dtype

    zn2 = jnp.asarray(_ZN2, dtype=dtype)
    zn3 = jnp.asarray(_ZN3, dtype=dtype)

    thermo, state = gts7(inp._replace(alt=jnp.maximum(alt, zn2[0])), flags)
    dm28m = state.dm28 * 1.0e6 if flags.output_m_kg else state.dm28

    def node_variation(p: Array) -> Array:
        return lower_harmonics(p, inp, flags, state.apdf, state.apt)

    # Stratosphere/mesosphere nodes
    tn2_2 = PMA[2, 0] * PAVGM[2] / (1.0 - sw(20) * sw(22) * node_variation(PMA[2]))
    tn2 = jnp.stack(
        [
            state.tn1[4],
            PMA[0, 0] * PAVGM[0] / (1.0 - sw(20) * node_variation(PMA[0])),
            PMA[1, 0] * PAVGM[1] / (1.0 - sw(20) * node_variation(PMA[1])),
            tn2_2,
        ]
    )
    tgn2 = jnp.stack(
        [
            state.tgn1[1],
            PAVGM[8]
            * PMA[9, 0]
            * (1.0 + sw(20) * sw(22) * node_variation(PMA[9]))
            * tn2_2
            * tn2_2
            / (PMA[2, 0] * PAVGM[2]) ** 2,
        ]
    )

    # Troposphere/stratosphere nodes
    tn3 = jnp.stack(
        [tn2_2]
        + [PMA[i, 0] * PAVGM[i] / (1.0 - sw(22) * node_variation(PMA[i])) for i in range(3, 7)]
    )
    tgn3 = jnp.stack(
        [
            tgn2[1],
            PMA[7, 0]
            * PAVGM[7]
            * (1.0 + sw(22) * node_variation(PMA[7]))
            * tn3[4]
            * tn3[4]
            / (PMA[6, 0] * PAVGM[6]) ** 2,
        ]
    )

    dmc = jnp.where(alt > _ZMIX, 1.0 - (zn2[0] - alt) / (zn2[0] - _ZMIX), 0.0)
    dz28 = thermo.den_N2
    xmm = PDM[2, 4]

    n2_mixed, tz = density_lower(
        alt, dm28m, xmm, 0.0, zn2, tn2, tgn2, zn3, tn3, tgn3, gsurf, re
    )
    d_n2 = n2_mixed * (1.0 + (dz28 / dm28m - 1.0) * dmc)

    def mixing_ratio_density(d_thermo: Array, pdm_row: int) -> Array:
        ratio = PDM[pdm_row, 1]
        return d_n2 * ratio * (1.0 + (d_thermo / (dz28 * ratio) - 1.0) * dmc)

    d_he = mixing_ratio_density(thermo.den_He, 0)
    d_o2 = mixing_ratio_density(thermo.den_O2, 3)
    d_ar = mixing_ratio_density(thermo.den_Ar, 4)

    total = AMU_GRAMS * (4.0 * d_he + 28.0 * d_n2 + 32.0 * d_o2 + 40.0 * d_ar)
    if flags.output_m_kg:
        total = total / 1000.0

    t_alt, _ = density_lower(alt, 1.0, 0.0, tz, zn2, tn2, tgn2, zn3, tn3, tgn3, gsurf, re)

    above = alt >= zn2[0]
    zero = jnp.zeros_like(alt)
    return NRLMSISE00Output(
        den_N=jnp.where(above, thermo.den_N, zero),
        den_N2=jnp.where(above, thermo.den_N2, d_n2),
        den_O=jnp.where(above, thermo.den_O, zero),
        den_aO=jnp.where(above, thermo.den_aO, zero),
        den_O2=jnp.where(above, thermo.den_O2, d_o2),
        den_H=jnp.where(above, thermo.den_H, zero),
        den_He=jnp.where(above, thermo.den_He, d_he),
        den_Ar=jnp.where(above, thermo.den_Ar, d_ar),
        den_Total=jnp.where(above, thermo.den_Total, total),
        T_exo=thermo.T_exo,
        T_alt=jnp.where(above, thermo.T_alt, t_alt),
    )


def gtd7d(inp: NRLMSISE00Input, flags: NRLMSISE00Flags | None = None) -> NRLMSISE00Output:
    """:func:`gtd7` with anomalous oxygen included in the total density.

    Anomalous oxygen contributes to satellite drag above about 500 km,
    so this is the variant to use for drag computations.
    """
    flags = inp.flags if flags is None else flags
    out = gtd7(inp, flags)
    total = AMU_GRAMS * (
        4.0 * out.den_He
        + 16.0 * out.den_O
        + 28.0 * out.den_N2
        + 32.0 * out.den_O2
        + 40.0 * out.den_Ar
        + out.den_H
        + 14.0 * out.den_N
        + 16.0 * out.den_aO
    )
    if flags.output_m_kg:
        total = total / 1000.0
    return out._replace(den_Total=total)
