"""Tests for the building blocks of the NRLMSISE-00 model.

Spline engine, correction primitives, harmonic expansions and switches.
"""

from __future__ import annotations

import logging
import math

import jax
import jax.numpy as jnp
import pytest

from atmojax.atmosphere.nrlmsise00 import SWITCH_FIELDS, NRLMSISE00Flags, build_config
from atmojax.atmosphere.nrlmsise00._corrections import (
    chem_correction,
    chem_correction2,
    gravity_and_radius,
    scale_height,
    turbopause_blend,
    zeta,
)
from atmojax.atmosphere.nrlmsise00._data import PD, PMA, PT, PTL
from atmojax.atmosphere.nrlmsise00._harmonics import (
    ap_decay_norm,
    ap_decay_weight,
    ap_weighted_sum,
    latitude_time_harmonics,
    legendre_table,
    lower_harmonics,
)
from atmojax.atmosphere.nrlmsise00._spline import (
    NATURAL_SLOPE,
    eval_spline,
    fit_spline,
    integrate_spline,
)


def _cubic(x):
    return x**3 - 2.0 * x + 1.0


def _cubic_integral(x):
    return x**4 / 4.0 - x**2 + x


def _default_input(**overrides):
    args = dict(
        year=0,
        doy=172,
        sec=29000.0,
        alt=400.0,
        g_lat=60.0,
        g_long=-70.0,
        lst=16.0,
        f107A=150.0,
        f107=150.0,
        ap=4.0,
    )
    args.update(overrides)
    return build_config(**args)


# ---------------------------------------------------------------------------
# Spline engine
# ---------------------------------------------------------------------------


class TestSpline:
    """Clamped splines reproduce cubics; natural splines reproduce lines."""

    XA = jnp.array([0.0, 0.5, 1.2, 2.0, 3.0])

    @pytest.fixture()
    def cubic_spline(self):
        ya = _cubic(self.XA)
        y2 = fit_spline(self.XA, ya, -2.0, 25.0)
        return ya, y2

    @pytest.mark.parametrize("x", [0.0, 0.3, 0.7, 1.5, 2.5, 3.0])
    def test_clamped_spline_reproduces_cubic(self, cubic_spline, x):
        ya, y2 = cubic_spline
        assert float(eval_spline(self.XA, ya, y2, x)) == pytest.approx(_cubic(x), rel=1e-10, abs=1e-12)

    def test_second_derivatives_of_cubic(self, cubic_spline):
        _, y2 = cubic_spline
        assert jnp.allclose(y2, 6.0 * self.XA, rtol=1e-10, atol=1e-10)

    def test_extrapolation_uses_end_interval(self, cubic_spline):
        ya, y2 = cubic_spline
        assert float(eval_spline(self.XA, ya, y2, 3.5)) == pytest.approx(_cubic(3.5), rel=1e-10)

    @pytest.mark.parametrize("x", [0.4, 1.2, 2.7, 3.0])
    def test_integral_of_cubic(self, cubic_spline, x):
        ya, y2 = cubic_spline
        assert float(integrate_spline(self.XA, ya, y2, x)) == pytest.approx(
            _cubic_integral(x), rel=1e-10
        )

    def test_integral_below_first_node_is_zero(self, cubic_spline):
        ya, y2 = cubic_spline
        assert float(integrate_spline(self.XA, ya, y2, -1.0)) == 0.0

    def test_natural_spline_reproduces_line(self):
        ya = 2.0 * self.XA + 1.0
        y2 = fit_spline(self.XA, ya, 2.0 * NATURAL_SLOPE, 2.0 * NATURAL_SLOPE)
        assert jnp.allclose(y2, 0.0, atol=1e-12)
        assert float(eval_spline(self.XA, ya, y2, 1.7)) == pytest.approx(4.4, rel=1e-12)
        assert float(integrate_spline(self.XA, ya, y2, 2.0)) == pytest.approx(6.0, rel=1e-12)

    def test_natural_end_needs_slope_strictly_above_threshold(self):
        ya = 2.0 * self.XA + 1.0
        natural = fit_spline(self.XA, ya, 1.0e31, 2.0)
        at_threshold = fit_spline(self.XA, ya, NATURAL_SLOPE, 2.0)
        assert float(natural[0]) == 0.0
        assert float(at_threshold[0]) != 0.0

    def test_large_negative_slope_is_clamped(self):
        # Signed comparison: only large positive slopes mean "natural".
        ya = 2.0 * self.XA + 1.0
        y2 = fit_spline(self.XA, ya, -1.0e31, 2.0)
        assert float(y2[0]) > 1.0e30

    def test_degenerate_nodes_raise(self):
        with pytest.raises(ValueError, match="distinct"):
            fit_spline(jnp.array([1.0, 1.0, 1.0]), jnp.array([0.0, 1.0, 2.0]), 0.0, 0.0)

    def test_jit_matches_eager(self, cubic_spline):
        ya, y2 = cubic_spline
        f = jax.jit(lambda x: eval_spline(self.XA, ya, y2, x))
        assert float(f(1.9)) == pytest.approx(float(eval_spline(self.XA, ya, y2, 1.9)), rel=1e-14)


# ---------------------------------------------------------------------------
# Correction primitives
# ---------------------------------------------------------------------------


class TestChemistryCorrections:
    def test_ccor_at_half_height(self):
        assert float(chem_correction(100.0, 0.8, 5.0, 100.0)) == pytest.approx(math.exp(0.4))

    def test_ccor_saturates_above(self):
        assert float(chem_correction(1000.0, 0.8, 5.0, 100.0)) == 1.0

    def test_ccor_saturates_below(self):
        assert float(chem_correction(-1000.0, 0.8, 5.0, 100.0)) == pytest.approx(math.exp(0.8))

    def test_ccor2_at_half_height(self):
        assert float(chem_correction2(100.0, 0.8, 5.0, 100.0, 10.0)) == pytest.approx(math.exp(0.4))

    def test_ccor2_saturates_when_either_exponent_is_large(self):
        assert float(chem_correction2(500.0, 0.8, 5.0, 100.0, 1000.0)) == 1.0

    def test_ccor2_saturates_below(self):
        assert float(chem_correction2(-5000.0, 0.8, 5.0, 100.0, 10.0)) == pytest.approx(
            math.exp(0.8)
        )


class TestTurbopauseBlend:
    ZHM = 28.0
    XMM = 28.95

    def test_mixed_dominates(self):
        assert float(turbopause_blend(1.0, 1e10, self.ZHM, self.XMM, 4.0)) == pytest.approx(1e10)

    def test_diffusive_dominates(self):
        assert float(turbopause_blend(1e10, 1.0, self.ZHM, self.XMM, 4.0)) == pytest.approx(1e10)

    def test_blend_formula(self):
        dd, dm, xm = 2.0, 3.0, 16.0
        a = self.ZHM / (self.XMM - xm)
        expected = dd * (1.0 + (dm / dd) ** a) ** (1.0 / a)
        assert float(turbopause_blend(dd, dm, self.ZHM, self.XMM, xm)) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "dd,dm,expected",
        [(0.0, 0.0, 1.0), (5.0, 0.0, 5.0), (0.0, 7.0, 7.0)],
    )
    def test_degenerate_inputs_fall_back_and_warn(self, caplog, dd, dm, expected):
        with caplog.at_level(logging.WARNING, logger="atmojax.atmosphere.nrlmsise00._corrections"):
            result = turbopause_blend(dd, dm, self.ZHM, self.XMM, 16.0)
            jax.effects_barrier()
        assert float(result) == expected
        assert "non-positive" in caplog.text

    def test_positive_inputs_do_not_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger="atmojax.atmosphere.nrlmsise00._corrections"):
            turbopause_blend(2.0, 3.0, self.ZHM, self.XMM, 16.0)
            jax.effects_barrier()
        assert not [r for r in caplog.records if r.name.endswith("_corrections")]


class TestGravity:
    def test_gravity_formula(self):
        gv, re = gravity_and_radius(30.0)
        c2 = math.cos(2.0 * 1.74533e-2 * 30.0)
        expected_gv = 980.616 * (1.0 - 0.0026373 * c2)
        assert float(gv) == pytest.approx(expected_gv)
        assert float(re) == pytest.approx(2.0 * expected_gv / (3.085462e-6 + 2.27e-9 * c2) * 1e-5)

    def test_effective_radius_is_earth_sized(self):
        _, re = gravity_and_radius(45.0)
        assert 6300.0 < float(re) < 6400.0

    def test_zeta_zero_at_reference(self):
        assert float(zeta(120.0, 120.0, 6356.77)) == 0.0

    def test_scale_height(self):
        h = scale_height(0.0, 28.0, 300.0, 980.0, 6356.77)
        assert float(h) == pytest.approx(831.4 * 300.0 / (980.0 * 28.0))


# ---------------------------------------------------------------------------
# Harmonic expansions
# ---------------------------------------------------------------------------


class TestLegendreTable:
    def test_equator(self):
        plg = legendre_table(0.0)
        assert plg.shape == (4, 9)
        assert float(plg[0, 0]) == 1.0
        assert float(plg[0, 1]) == 0.0
        assert float(plg[0, 2]) == pytest.approx(-0.5)
        assert float(plg[1, 1]) == pytest.approx(1.0)
        assert float(plg[2, 2]) == pytest.approx(3.0)
        assert float(plg[3, 3]) == pytest.approx(15.0)

    def test_pole_zonal_terms_are_one(self):
        plg = legendre_table(1.0 / 1.74533e-2 * (math.pi / 2.0))
        for n in range(7):
            assert float(plg[0, n]) == pytest.approx(1.0, abs=1e-9)
        assert float(plg[1, 1]) == pytest.approx(0.0, abs=1e-9)

    def test_recurrence_matches_closed_form(self):
        lat = 37.0
        c = math.sin(lat * 1.74533e-2)
        p6 = (231.0 * c**6 - 315.0 * c**4 + 105.0 * c**2 - 5.0) / 16.0
        assert float(legendre_table(lat)[0, 6]) == pytest.approx(p6, rel=1e-10)


class TestApFunctions:
    def test_quiet_ap_has_no_effect(self):
        assert float(ap_decay_weight(4.0, PT)) == pytest.approx(0.0, abs=1e-14)
        assert float(ap_weighted_sum(0.5, PT, jnp.full(7, 4.0))) == pytest.approx(0.0, abs=1e-14)

    def test_decay_norm(self):
        ex = 0.5
        expected = 1.0 + (1.0 - ex**19) / (1.0 - ex) * math.sqrt(ex)
        assert float(ap_decay_norm(ex)) == pytest.approx(expected)

    def test_weighted_sum_increases_with_activity(self):
        quiet = ap_weighted_sum(0.5, PT, jnp.full(7, 10.0))
        storm = ap_weighted_sum(0.5, PT, jnp.full(7, 100.0))
        assert float(storm) > float(quiet) > 0.0


class TestLatitudeTimeHarmonics:
    def test_all_switches_off_leaves_constant_term(self):
        flags = NRLMSISE00Flags(**{name: False for name in SWITCH_FIELDS})
        inp = _default_input(flags=flags)
        value, _, _ = latitude_time_harmonics(PT, inp)
        assert float(value) == pytest.approx(float(PT[30]), abs=1e-14)

    def test_daily_ap_mode_returns_activity(self):
        inp = _default_input(ap=40.0)
        _, apdf, _ = latitude_time_harmonics(PT, inp)
        assert float(apdf) > 0.0

    def test_ap_array_mode_carries_apt_without_decay_rate(self):
        inp = _default_input(ap=jnp.full(7, 20.0))
        p = PT.at[51].set(0.0)
        _, apdf, apt = latitude_time_harmonics(p, inp, apt=3.5)
        assert float(apt) == 3.5
        assert float(apdf) == 0.0

    def test_ap_array_mode_computes_apt(self):
        inp = _default_input(ap=jnp.full(7, 20.0))
        _, _, apt = latitude_time_harmonics(PT, inp, apt=3.5)
        assert float(apt) != 3.5

    def test_diurnal_switch_changes_value(self):
        on = _default_input()
        off = _default_input(flags=NRLMSISE00Flags(diurnal=False))
        v_on, _, _ = latitude_time_harmonics(PD[0], on)
        v_off, _, _ = latitude_time_harmonics(PD[0], off)
        assert float(v_on) != float(v_off)

    def test_invalid_longitude_disables_longitude_terms(self):
        inp = _default_input(g_long=-2000.0)
        flags = NRLMSISE00Flags(all_ut_long_effects=False)
        v_sentinel, _, _ = latitude_time_harmonics(PT, inp)
        v_off, _, _ = latitude_time_harmonics(PT, inp, flags)
        assert float(v_sentinel) == pytest.approx(float(v_off), rel=1e-14)


class TestLowerHarmonics:
    def test_accepts_selector_zero(self):
        inp = _default_input()
        p = PTL[0].at[99].set(0.0)
        assert float(lower_harmonics(p, inp)) == pytest.approx(float(lower_harmonics(PTL[0], inp)))

    def test_rejects_other_selector(self):
        inp = _default_input()
        with pytest.raises(ValueError, match="p\\[99\\]"):
            lower_harmonics(PMA[0].at[99].set(1.0), inp)

    def test_magnetic_term_uses_supplied_activity(self):
        inp = _default_input()
        quiet = lower_harmonics(PTL[0], inp, apdf=0.0)
        active = lower_harmonics(PTL[0], inp, apdf=10.0)
        expected = 10.0 * (PTL[0][32] + PTL[0][45] * inp.plg[0, 2])
        assert float(active - quiet) == pytest.approx(float(expected), rel=1e-10, abs=1e-14)


# ---------------------------------------------------------------------------
# Switches
# ---------------------------------------------------------------------------


class TestFlags:
    def test_defaults(self):
        flags = NRLMSISE00Flags()
        assert flags.sw(0) == 0.0
        assert all(flags.sw(i) == 1.0 for i in range(1, 24))

    def test_ap_array_sets_switch_9_negative(self):
        flags = NRLMSISE00Flags(use_ap_array=True)
        assert flags.sw(9) == -1.0
        assert flags.swc(9) == -1.0

    def test_ap_array_ignored_when_daily_ap_off(self):
        flags = NRLMSISE00Flags(daily_ap=False, use_ap_array=True)
        assert flags.sw(9) == 0.0

    def test_frozen_and_hashable(self):
        flags = NRLMSISE00Flags()
        with pytest.raises(AttributeError):
            flags.diurnal = False  # type: ignore[misc]
        assert hash(flags) == hash(NRLMSISE00Flags())

    def test_with_switches(self):
        flags = NRLMSISE00Flags().with_switches(diurnal=False, output_m_kg=True)
        assert flags.sw(7) == 0.0
        assert flags.sw(0) == 1.0

    def test_static_under_jit(self):
        inp = _default_input()

        @jax.jit
        def value(inp):
            return latitude_time_harmonics(PT, inp)[0]

        assert float(value(inp)) == pytest.approx(float(latitude_time_harmonics(PT, inp)[0]))
