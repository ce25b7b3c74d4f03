"""Spherical-harmonic expansions G(L) of the NRLMSISE-00 model.

:func:`latitude_time_harmonics` evaluates the full 150-coefficient
expansion used for the thermospheric parameters; :func:`lower_harmonics`
the reduced 100-coefficient expansion used for the node temperatures of
the lower thermosphere and middle atmosphere.

The geomagnetic activity functions (``apdf`` for daily Ap, ``apt`` for
the Ap history) are returned alongside the expansion value and passed on
explicitly by the caller.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from atmojax.atmosphere.nrlmsise00._types import NRLMSISE00Flags, NRLMSISE00Input
from atmojax.utils.validation import concrete_value

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
_SR: float = 7.2722e-5  # Earth rotation rate [rad/s]
_DGTR: float = 1.74533e-2  # Degrees to radians
_DR: float = 1.72142e-2  # Day-of-year to radians
_HR: float = 0.2618  # Hours to radians

# Coefficient-set selector of the reduced expansion.
_GLOB7S_SET: float = 2.0


# ---------------------------------------------------------------------------
# Legendre functions
# ---------------------------------------------------------------------------


def legendre_table(lat: ArrayLike) -> Array:
    """Associated Legendre functions of ``sin(lat)``.

    Args:
        lat: Geodetic latitude [deg].

    Returns:
        Array of shape ``(4, 9)`` with ``plg[m, n]`` = P(n, m), closed forms
        up to degree 7 and order 3; unused entries are zero.
    """
    c = jnp.sin(lat * _DGTR)
    s = jnp.cos(lat * _DGTR)
    c2 = c * c
    c4 = c2 * c2
    s2 = s * s

    plg = jnp.zeros((4, 9), dtype=jnp.result_type(c))
    plg = plg.at[0, 0].set(1.0)
    plg = plg.at[0, 1].set(c)
    plg = plg.at[0, 2].set(0.5 * (3.0 * c2 - 1.0))
    plg = plg.at[0, 3].set(0.5 * (5.0 * c * c2 - 3.0 * c))
    plg = plg.at[0, 4].set((35.0 * c4 - 30.0 * c2 + 3.0) / 8.0)
    plg = plg.at[0, 5].set((63.0 * c2 * c2 * c - 70.0 * c2 * c + 15.0 * c) / 8.0)
    plg = plg.at[0, 6].set((11.0 * c * plg[0, 5] - 5.0 * plg[0, 4]) / 6.0)

    plg = plg.at[1, 1].set(s)
    plg = plg.at[1, 2].set(3.0 * c * s)
    plg = plg.at[1, 3].set(1.5 * (5.0 * c2 - 1.0) * s)
    plg = plg.at[1, 4].set(2.5 * (7.0 * c2 * c - 3.0 * c) * s)
    plg = plg.at[1, 5].set(1.875 * (21.0 * c4 - 14.0 * c2 + 1.0) * s)
    plg = plg.at[1, 6].set((11.0 * c * plg[1, 5] - 6.0 * plg[1, 4]) / 5.0)

    plg = plg.at[2, 2].set(3.0 * s2)
    plg = plg.at[2, 3].set(15.0 * s2 * c)
    plg = plg.at[2, 4].set(7.5 * (7.0 * c2 - 1.0) * s2)
    plg = plg.at[2, 5].set(3.0 * c * plg[2, 4] - 2.0 * plg[2, 3])
    plg = plg.at[2, 6].set((11.0 * c * plg[2, 5] - 7.0 * plg[2, 4]) / 4.0)
    plg = plg.at[2, 7].set((13.0 * c * plg[2, 6] - 8.0 * plg[2, 5]) / 5.0)

    plg = plg.at[3, 3].set(15.0 * s2 * s)
    plg = plg.at[3, 4].set(105.0 * s2 * s * c)
    plg = plg.at[3, 5].set((9.0 * c * plg[3, 4] - 7.0 * plg[3, 3]) / 2.0)
    plg = plg.at[3, 6].set((11.0 * c * plg[3, 5] - 8.0 * plg[3, 4]) / 3.0)
    return plg


# ---------------------------------------------------------------------------
# Geomagnetic activity (Eq. A24)
# ---------------------------------------------------------------------------


def ap_decay_weight(a: ArrayLike, p: Array) -> Array:
    """Eq. A24a: saturating transform of a single Ap value."""
    k = jnp.abs(p[24])
    return a - 4.0 + (p[25] - 1.0) * (a - 4.0 + (jnp.exp(-k * (a - 4.0)) - 1.0) / k)


def ap_decay_norm(ex: ArrayLike) -> Array:
    """Eq. A24c: normalization of the exponentially weighted Ap sum."""
    return 1.0 + (1.0 - ex**19) / (1.0 - ex) * jnp.sqrt(ex)


def ap_weighted_sum(ex: ArrayLike, p: Array, ap_array: Array) -> Array:
    """Eq. A24a: exponentially weighted mean of the transformed Ap history.

    Args:
        ex: Decay factor per 3-hour interval, ``0 < ex < 1``.
        p: Coefficient row (indices 24 and 25 are used).
        ap_array: 7-element Ap history (index 0 is the daily Ap and is
            not used).

    Returns:
        The weighted activity ``apt``.
    """
    g = [ap_decay_weight(ap_array[i], p) for i in range(7)]
    return (
        g[1]
        + (
            g[2] * ex
            + g[3] * ex**2
            + g[4] * ex**3
            + (g[5] * ex**4 + g[6] * ex**12) * (1.0 - ex**8) / (1.0 - ex)
        )
    ) / ap_decay_norm(ex)


# ---------------------------------------------------------------------------
# Full expansion
# ---------------------------------------------------------------------------


def latitude_time_harmonics(
    p: Array,
    inp: NRLMSISE00Input,
    flags: NRLMSISE00Flags | None = None,
    apt: ArrayLike = 0.0,
) -> tuple[Array, Array, Array]:
    """Full G(L) expansion of one coefficient row.

    Sums the F10.7, time-independent, seasonal, local-time, magnetic and
    longitude/UT terms, each gated by its switch.

    Args:
        p: Coefficient row, shape ``(150,)``.
        inp: Model input with derived quantities.
        flags: Switches. Defaults to ``inp.flags``.
        apt: Ap-history activity from the previous expansion. Returned
            unchanged when this row has no Ap-history decay rate
            (``p[51] == 0``).

    Returns:
        Tuple of (expansion value, daily-Ap activity ``apdf``, Ap-history
        activity ``apt``). ``apdf`` is zero in Ap-history mode.
    """
    flags = inp.flags if flags is None else flags
    sw = flags.sw
    swc = flags.swc
    plg = inp.plg
    doy = inp.doy
    dfa = inp.dfa
    df = inp.df

    cd32 = jnp.cos(_DR * (doy - p[31]))
    cd18 = jnp.cos(2.0 * _DR * (doy - p[17]))
    cd14 = jnp.cos(_DR * (doy - p[13]))
    cd39 = jnp.cos(2.0 * _DR * (doy - p[38]))

    t = [jnp.zeros_like(dfa) for _ in range(14)]

    # F10.7
    t[0] = p[19] * df * (1.0 + p[59] * dfa) + p[20] * df * df + p[21] * dfa + p[29] * dfa * dfa
    f1 = 1.0 + (p[47] * dfa + p[19] * df + p[20] * df * df) * swc(1)
    f2 = 1.0 + (p[49] * dfa + p[19] * df + p[20] * df * df) * swc(1)

    # Time independent
    t[1] = (
        p[1] * plg[0, 2]
        + p[2] * plg[0, 4]
        + p[22] * plg[0, 6]
        + p[14] * plg[0, 2] * dfa * swc(1)
        + p[26] * plg[0, 1]
    )

    # Seasonal
    t[2] = p[18] * cd32
    t[3] = (p[15] + p[16] * plg[0, 2]) * cd18
    t[4] = f1 * (p[9] * plg[0, 1] + p[10] * plg[0, 3]) * cd14
    t[5] = p[37] * plg[0, 1] * cd39

    # Diurnal
    if sw(7):
        t71 = p[11] * plg[1, 2] * cd14 * swc(5)
        t72 = p[12] * plg[1, 2] * cd14 * swc(5)
        t[6] = f2 * (
            (p[3] * plg[1, 1] + p[4] * plg[1, 3] + p[27] * plg[1, 5] + t71) * inp.ctloc
            + (p[6] * plg[1, 1] + p[7] * plg[1, 3] + p[28] * plg[1, 5] + t72) * inp.stloc
        )

    # Semidiurnal
    if sw(8):
        t81 = (p[23] * plg[2, 3] + p[35] * plg[2, 5]) * cd14 * swc(5)
        t82 = (p[33] * plg[2, 3] + p[36] * plg[2, 5]) * cd14 * swc(5)
        t[7] = f2 * (
            (p[5] * plg[2, 2] + p[41] * plg[2, 4] + t81) * inp.c2tloc
            + (p[8] * plg[2, 2] + p[42] * plg[2, 4] + t82) * inp.s2tloc
        )

    # Terdiurnal
    if sw(14):
        t91 = (p[93] * plg[3, 4] + p[46] * plg[3, 6]) * cd14 * swc(5)
        t92 = (p[94] * plg[3, 4] + p[48] * plg[3, 6]) * cd14 * swc(5)
        t[13] = f2 * (
            (p[39] * plg[3, 3] + t91) * inp.s3tloc + (p[40] * plg[3, 3] + t92) * inp.c3tloc
        )

    # Magnetic activity
    has_decay = p[51] != 0.0
    if sw(9) == -1.0:
        k = jnp.where(has_decay, jnp.abs(p[51]), 1.0)
        ex = jnp.exp(-10800.0 * k / (1.0 + p[138] * (45.0 - jnp.abs(inp.g_lat))))
        ex = jnp.minimum(ex, 0.99999)
        p_ap = p.at[24].set(jnp.maximum(p[24], 1.0e-4))
        apt = jnp.where(has_decay, ap_weighted_sum(ex, p_ap, inp.ap_array), apt)
        apdf = jnp.zeros_like(dfa)
        t[8] = jnp.where(
            has_decay,
            apt
            * (
                p[50]
                + p[96] * plg[0, 2]
                + p[54] * plg[0, 4]
                + (p[125] * plg[0, 1] + p[126] * plg[0, 3] + p[127] * plg[0, 5]) * cd14 * swc(5)
                + (p[128] * plg[1, 1] + p[129] * plg[1, 3] + p[130] * plg[1, 5])
                * swc(7)
                * jnp.cos(_HR * (inp.lst - p[131]))
            ),
            0.0,
        )
    else:
        apd = inp.ap - 4.0
        p44 = jnp.where(p[43] < 0.0, 1.0e-5, p[43])
        p45 = p[44]
        apdf = apd + (p45 - 1.0) * (apd + (jnp.exp(-p44 * apd) - 1.0) / p44)
        if sw(9):
            t[8] = apdf * (
                p[32]
                + p[45] * plg[0, 2]
                + p[34] * plg[0, 4]
                + (p[100] * plg[0, 1] + p[101] * plg[0, 3] + p[102] * plg[0, 5]) * cd14 * swc(5)
                + (p[121] * plg[1, 1] + p[122] * plg[1, 3] + p[123] * plg[1, 5])
                * swc(7)
                * jnp.cos(_HR * (inp.lst - p[124]))
            )

    # Longitude and UT
    if sw(10):
        has_lon = inp.g_long > -1000.0
        cos_lon = jnp.cos(_DGTR * inp.g_long)
        sin_lon = jnp.sin(_DGTR * inp.g_long)

        if sw(11):
            t10 = (1.0 + p[80] * dfa * swc(1)) * (
                (
                    p[64] * plg[1, 2]
                    + p[65] * plg[1, 4]
                    + p[66] * plg[1, 6]
                    + p[103] * plg[1, 1]
                    + p[104] * plg[1, 3]
                    + p[105] * plg[1, 5]
                    + swc(5) * (p[109] * plg[1, 1] + p[110] * plg[1, 3] + p[111] * plg[1, 5]) * cd14
                )
                * cos_lon
                + (
                    p[90] * plg[1, 2]
                    + p[91] * plg[1, 4]
                    + p[92] * plg[1, 6]
                    + p[106] * plg[1, 1]
                    + p[107] * plg[1, 3]
                    + p[108] * plg[1, 5]
                    + swc(5) * (p[112] * plg[1, 1] + p[113] * plg[1, 3] + p[114] * plg[1, 5]) * cd14
                )
                * sin_lon
            )
            t[10] = jnp.where(has_lon, t10, 0.0)

        if sw(12):
            t11 = (
                (1.0 + p[95] * plg[0, 1])
                * (1.0 + p[81] * dfa * swc(1))
                * (1.0 + p[119] * plg[0, 1] * swc(5) * cd14)
                * (
                    (p[68] * plg[0, 1] + p[69] * plg[0, 3] + p[70] * plg[0, 5])
                    * jnp.cos(_SR * (inp.sec - p[71]))
                )
            )
            t11 = t11 + swc(11) * (
                (p[76] * plg[2, 3] + p[77] * plg[2, 5] + p[78] * plg[2, 7])
                * jnp.cos(_SR * (inp.sec - p[79]) + 2.0 * _DGTR * inp.g_long)
                * (1.0 + p[137] * dfa * swc(1))
            )
            t[11] = jnp.where(has_lon, t11, 0.0)

        if sw(13):
            if sw(9) == -1.0:
                t12 = (
                    apt
                    * swc(11)
                    * (1.0 + p[132] * plg[0, 1])
                    * (
                        (p[52] * plg[1, 2] + p[98] * plg[1, 4] + p[67] * plg[1, 6])
                        * jnp.cos(_DGTR * (inp.g_long - p[97]))
                    )
                    + apt
                    * swc(11)
                    * swc(5)
                    * (p[133] * plg[1, 1] + p[134] * plg[1, 3] + p[135] * plg[1, 5])
                    * cd14
                    * jnp.cos(_DGTR * (inp.g_long - p[136]))
                    + apt
                    * swc(12)
                    * (p[55] * plg[0, 1] + p[56] * plg[0, 3] + p[57] * plg[0, 5])
                    * jnp.cos(_SR * (inp.sec - p[58]))
                )
                t12 = jnp.where(has_decay, t12, 0.0)
            else:
                t12 = (
                    apdf
                    * swc(11)
                    * (1.0 + p[120] * plg[0, 1])
                    * (
                        (p[60] * plg[1, 2] + p[61] * plg[1, 4] + p[62] * plg[1, 6])
                        * jnp.cos(_DGTR * (inp.g_long - p[63]))
                    )
                    + apdf
                    * swc(11)
                    * swc(5)
                    * (p[115] * plg[1, 1] + p[116] * plg[1, 3] + p[117] * plg[1, 5])
                    * cd14
                    * jnp.cos(_DGTR * (inp.g_long - p[118]))
                    + apdf
                    * swc(12)
                    * (p[83] * plg[0, 1] + p[84] * plg[0, 3] + p[85] * plg[0, 5])
                    * jnp.cos(_SR * (inp.sec - p[75]))
                )
            t[12] = jnp.where(has_lon, t12, 0.0)

    value = p[30] + sum(abs(sw(i + 1)) * t[i] for i in range(14))
    return value, apdf, jnp.asarray(apt)


# ---------------------------------------------------------------------------
# Reduced expansion
# ---------------------------------------------------------------------------


def _check_coefficient_set(p: Array) -> None:
    value = concrete_value(p)
    if value is None:
        return
    selector = float(value[99])
    if selector not in (0.0, _GLOB7S_SET):
        raise ValueError(
            f"coefficient row p has set selector p[99]={selector!r}; expected 0 or {_GLOB7S_SET}"
        )


def lower_harmonics(
    p: Array,
    inp: NRLMSISE00Input,
    flags: NRLMSISE00Flags | None = None,
    apdf: ArrayLike = 0.0,
    apt: ArrayLike = 0.0,
) -> Array:
    """Reduced G(L) expansion for the node temperatures.

    Args:
        p: Coefficient row, shape ``(100,)``; ``p[99]`` must be 0 or 2.
        inp: Model input with derived quantities.
        flags: Switches. Defaults to ``inp.flags``.
        apdf: Daily-Ap activity from the last full expansion.
        apt: Ap-history activity from the last full expansion.

    Returns:
        The expansion value.

    Raises:
        ValueError: If a concrete row carries another coefficient-set
            selector.
    """
    _check_coefficient_set(p)
    flags = inp.flags if flags is None else flags
    sw = flags.sw
    swc = flags.swc
    plg = inp.plg
    doy = inp.doy

    cd32 = jnp.cos(_DR * (doy - p[31]))
    cd18 = jnp.cos(2.0 * _DR * (doy - p[17]))
    cd14 = jnp.cos(_DR * (doy - p[13]))
    cd39 = jnp.cos(2.0 * _DR * (doy - p[38]))

    t = [jnp.zeros_like(inp.dfa) for _ in range(14)]

    t[0] = p[21] * inp.dfa
    t[1] = (
        p[1] * plg[0, 2]
        + p[2] * plg[0, 4]
        + p[22] * plg[0, 6]
        + p[26] * plg[0, 1]
        + p[14] * plg[0, 3]
        + p[59] * plg[0, 5]
    )
    t[2] = (p[18] + p[47] * plg[0, 2] + p[29] * plg[0, 4]) * cd32
    t[3] = (p[15] + p[16] * plg[0, 2] + p[30] * plg[0, 4]) * cd18
    t[4] = (p[9] * plg[0, 1] + p[10] * plg[0, 3] + p[20] * plg[0, 5]) * cd14
    t[5] = p[37] * plg[0, 1] * cd39

    if sw(7):
        t71 = p[11] * plg[1, 2] * cd14 * swc(5)
        t72 = p[12] * plg[1, 2] * cd14 * swc(5)
        t[6] = (p[3] * plg[1, 1] + p[4] * plg[1, 3] + t71) * inp.ctloc + (
            p[6] * plg[1, 1] + p[7] * plg[1, 3] + t72
        ) * inp.stloc

    if sw(8):
        t81 = (p[23] * plg[2, 3] + p[35] * plg[2, 5]) * cd14 * swc(5)
        t82 = (p[33] * plg[2, 3] + p[36] * plg[2, 5]) * cd14 * swc(5)
        t[7] = (p[5] * plg[2, 2] + p[41] * plg[2, 4] + t81) * inp.c2tloc + (
            p[8] * plg[2, 2] + p[42] * plg[2, 4] + t82
        ) * inp.s2tloc

    if sw(14):
        t[13] = p[39] * plg[3, 3] * inp.s3tloc + p[40] * plg[3, 3] * inp.c3tloc

    if sw(9) == 1.0:
        t[8] = apdf * (p[32] + p[45] * plg[0, 2] * swc(2))
    elif sw(9) == -1.0:
        t[8] = p[50] * apt + p[96] * plg[0, 2] * apt * swc(2)

    if sw(10) and sw(11):
        t10 = (
            1.0
            + plg[0, 1]
            * (
                p[80] * swc(5) * jnp.cos(_DR * (doy - p[81]))
                + p[85] * swc(6) * jnp.cos(2.0 * _DR * (doy - p[86]))
            )
            + p[83] * swc(3) * jnp.cos(_DR * (doy - p[84]))
            + p[87] * swc(4) * jnp.cos(2.0 * _DR * (doy - p[88]))
        ) * (
            (p[64] * plg[1, 2] + p[65] * plg[1, 4] + p[66] * plg[1, 6]
             + p[74] * plg[1, 1] + p[75] * plg[1, 3] + p[76] * plg[1, 5])
            * jnp.cos(_DGTR * inp.g_long)
            + (p[90] * plg[1, 2] + p[91] * plg[1, 4] + p[92] * plg[1, 6]
               + p[77] * plg[1, 1] + p[78] * plg[1, 3] + p[79] * plg[1, 5])
            * jnp.sin(_DGTR * inp.g_long)
        )
        t[10] = jnp.where(inp.g_long > -1000.0, t10, 0.0)

    return sum(abs(sw(i + 1)) * t[i] for i in range(14))


__all__ = [
    "ap_decay_norm",
    "ap_decay_weight",
    "ap_weighted_sum",
    "latitude_time_harmonics",
    "legendre_table",
    "lower_harmonics",
]

