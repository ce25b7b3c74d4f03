"""Types for the NRLMSISE-00 model.

- :class:`NRLMSISE00Flags`: the 24 model switches plus the Ap-array
  selector. Registered as a static pytree node, so a flags value is part
  of the trace signature under ``jax.jit``.
- :class:`NRLMSISE00Input`: the model input together with the quantities
  derived from it once per evaluation (Legendre table, local-time
  harmonics, gravity).
- :class:`NRLMSISE00Output`: number densities, total mass density and
  temperatures.
"""

from __future__ import annotations

import dataclasses
from typing import NamedTuple

import jax
from jax import Array

# Switch order of the reference model (index i is switch i).
SWITCH_FIELDS: tuple[str, ...] = (
    "output_m_kg",
    "F107_Mean",
    "time_independent",
    "sym_annual",
    "sym_semiannual",
    "asym_annual",
    "asym_semiannual",
    "diurnal",
    "semidiurnal",
    "daily_ap",
    "all_ut_long_effects",
    "longitudinal",
    "ut_mixed_ut_long",
    "mixed_ap_ut_long",
    "terdiurnal",
    "departures_from_eq",
    "all_tinf_var",
    "all_tlb_var",
    "all_tn1_var",
    "all_s_var",
    "all_tn2_var",
    "all_nlb_var",
    "all_tn3_var",
    "turbo_scale_height",
)

_DAILY_AP_INDEX = 9


@dataclasses.dataclass(frozen=True)
class NRLMSISE00Flags:
    """Model switches.

    Every switch is on by default except ``output_m_kg`` (CGS output) and
    ``use_ap_array`` (daily Ap). Instances are immutable and hashable.

    Attributes:
        output_m_kg: Return densities in SI units (m^-3, kg/m^3).
        F107_Mean: F10.7 effect on the mean.
        time_independent: Time-independent terms; when off, gravity is
            evaluated at 45 degrees latitude.
        sym_annual: Symmetrical annual variation.
        sym_semiannual: Symmetrical semiannual variation.
        asym_annual: Asymmetrical annual variation.
        asym_semiannual: Asymmetrical semiannual variation.
        diurnal: Diurnal variation.
        semidiurnal: Semidiurnal variation.
        daily_ap: Geomagnetic activity term.
        all_ut_long_effects: All UT/longitudinal effects.
        longitudinal: Longitudinal variation.
        ut_mixed_ut_long: UT and mixed UT/longitude terms.
        mixed_ap_ut_long: Mixed Ap/UT/longitude terms.
        terdiurnal: Terdiurnal variation.
        departures_from_eq: Departures from diffusive equilibrium.
        all_tinf_var: Exospheric temperature variations.
        all_tlb_var: Lower-boundary temperature variations.
        all_tn1_var: Lower-thermosphere node temperature variations.
        all_s_var: Temperature-gradient variations.
        all_tn2_var: Middle-atmosphere node temperature variations.
        all_nlb_var: Lower-boundary density variations.
        all_tn3_var: Lower-atmosphere node temperature variations.
        turbo_scale_height: Turbopause scale height variation. Accepted
            for compatibility; the model has no term gated by it.
        use_ap_array: Use the 7-element Ap history instead of daily Ap.
    """

    output_m_kg: bool = False
    F107_Mean: bool = True
    time_independent: bool = True
    sym_annual: bool = True
    sym_semiannual: bool = True
    asym_annual: bool = True
    asym_semiannual: bool = True
    diurnal: bool = True
    semidiurnal: bool = True
    daily_ap: bool = True
    all_ut_long_effects: bool = True
    longitudinal: bool = True
    ut_mixed_ut_long: bool = True
    mixed_ap_ut_long: bool = True
    terdiurnal: bool = True
    departures_from_eq: bool = True
    all_tinf_var: bool = True
    all_tlb_var: bool = True
    all_tn1_var: bool = True
    all_s_var: bool = True
    all_tn2_var: bool = True
    all_nlb_var: bool = True
    all_tn3_var: bool = True
    turbo_scale_height: bool = True
    use_ap_array: bool = False

    def sw(self, i: int) -> float:
        """Main switch value ``sw[i]``.

        ``0.0`` or ``1.0``, except switch 9 which is ``-1.0`` when
        ``daily_ap`` is on and the Ap array is in use.
        """
        on = getattr(self, SWITCH_FIELDS[i])
        if i == _DAILY_AP_INDEX and on and self.use_ap_array:
            return -1.0
        return 1.0 if on else 0.0

    def swc(self, i: int) -> float:
        """Cross-term switch value ``swc[i]`` (equal to :meth:`sw`)."""
        return self.sw(i)

    def with_switches(self, **changes: bool) -> NRLMSISE00Flags:
        """Return a copy with the given switches replaced."""
        return dataclasses.replace(self, **changes)


jax.tree_util.register_static(NRLMSISE00Flags)


class NRLMSISE00Input(NamedTuple):
    """Model input and per-evaluation derived quantities.

    Built by :func:`~atmojax.atmosphere.nrlmsise00.build_config`.

    Attributes:
        year: Year (unused by the model).
        doy: Day of year.
        sec: Seconds in day (UT).
        alt: Geodetic altitude [km].
        g_lat: Geodetic latitude [deg].
        g_long: Geodetic longitude [deg].
        lst: Local apparent solar time [h].
        f107A: 81-day average of F10.7 [sfu].
        f107: Daily F10.7 of the previous day [sfu].
        ap: Daily magnetic index.
        ap_array: 7-element Ap history.
        df: ``f107 - f107A``.
        dfa: ``f107A - 150``.
        plg: Associated Legendre functions, shape ``(4, 9)``.
        ctloc: ``cos(hr * lst)``.
        stloc: ``sin(hr * lst)``.
        c2tloc: ``cos(2 hr * lst)``.
        s2tloc: ``sin(2 hr * lst)``.
        c3tloc: ``cos(3 hr * lst)``.
        s3tloc: ``sin(3 hr * lst)``.
        gsurf: Surface gravity [cm/s^2].
        re: Effective Earth radius [km].
        flags: Model switches (static).
    """

    year: Array
    doy: Array
    sec: Array
    alt: Array
    g_lat: Array
    g_long: Array
    lst: Array
    f107A: Array
    f107: Array
    ap: Array
    ap_array: Array
    df: Array
    dfa: Array
    plg: Array
    ctloc: Array
    stloc: Array
    c2tloc: Array
    s2tloc: Array
    c3tloc: Array
    s3tloc: Array
    gsurf: Array
    re: Array
    flags: NRLMSISE00Flags


class NRLMSISE00Output(NamedTuple):
    """Model output.

    Number densities are in cm^-3 (m^-3 with ``output_m_kg``), the total
    mass density in g/cm^3 (kg/m^3), temperatures in K.
    """

    den_N: Array
    den_N2: Array
    den_O: Array
    den_aO: Array
    den_O2: Array
    den_H: Array
    den_He: Array
    den_Ar: Array
    den_Total: Array
    T_exo: Array
    T_alt: Array
