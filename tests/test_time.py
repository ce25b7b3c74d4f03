import jax
import jax.numpy as jnp
import pytest

from atmojax.time import (
    caldate_to_jd,
    caldate_to_mjd,
    day_of_year,
    jd_to_caldate,
    jd_to_doy_sec,
    jd_to_mjd,
    mjd_to_caldate,
    mjd_to_jd,
)


def test_caldate_to_mjd():
    assert caldate_to_mjd(2000, 1, 1, 12, 0, 0) == pytest.approx(51544.5, abs=1e-9)


def test_caldate_to_mjd_epochs():
    assert caldate_to_mjd(1858, 11, 17) == pytest.approx(0.0, abs=1e-9)
    assert caldate_to_mjd(1970, 1, 1) == pytest.approx(40587.0, abs=1e-9)
    assert caldate_to_mjd(2023, 1, 1) == pytest.approx(59945.0, abs=1e-9)


def test_caldate_to_jd():
    assert caldate_to_jd(2000, 1, 1, 12, 0, 0) == pytest.approx(2451545.0, abs=1e-9)


def test_jd_to_mjd():
    assert jd_to_mjd(2451545.0) == pytest.approx(51544.5, abs=1e-9)


def test_mjd_to_jd():
    assert mjd_to_jd(51544.5) == pytest.approx(2451545.0, abs=1e-9)


def test_jd_to_caldate_j2000():
    year, month, day, hour, minute, second = jd_to_caldate(2451545.0)
    assert (int(year), int(month), int(day), int(hour), int(minute)) == (2000, 1, 1, 12, 0)
    assert second == pytest.approx(0.0, abs=1e-6)


def test_jd_to_caldate_midnight():
    year, month, day, hour, minute, second = jd_to_caldate(2451544.5)
    assert (int(year), int(month), int(day), int(hour), int(minute)) == (2000, 1, 1, 0, 0)
    assert second == pytest.approx(0.0, abs=1e-6)


def test_mjd_to_caldate_j2000():
    year, month, day, hour, minute, second = mjd_to_caldate(51544.5)
    assert (int(year), int(month), int(day), int(hour), int(minute)) == (2000, 1, 1, 12, 0)
    assert second == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize(
    "date",
    [
        (2024, 7, 4, 12, 0, 0.0),
        (2023, 1, 3, 8, 3, 20.0),
        (2024, 2, 29, 23, 59, 59.5),
        (1999, 12, 31, 0, 0, 0.25),
        (1957, 10, 1, 6, 30, 0.0),
    ],
)
def test_jd_caldate_roundtrip(date):
    """Date and time survive caldate -> JD -> caldate at millisecond resolution."""
    year, month, day, hour, minute, second = jd_to_caldate(caldate_to_jd(*date))
    assert (int(year), int(month), int(day), int(hour), int(minute)) == date[:5]
    assert float(second) == pytest.approx(date[5], abs=1e-3)


def test_rounding_to_midnight_rolls_over():
    """A time within half a millisecond of midnight belongs to the next day."""
    mjd = caldate_to_mjd(2023, 12, 31) + 1.0 - 1e-9
    year, month, day, hour, minute, second = mjd_to_caldate(mjd)
    assert (int(year), int(month), int(day), int(hour), int(minute)) == (2024, 1, 1, 0, 0)
    assert float(second) == 0.0


@pytest.mark.parametrize(
    "year, month, day, expected",
    [
        (2023, 1, 1, 1),
        (2023, 3, 1, 60),
        (2024, 3, 1, 61),
        (2023, 6, 21, 172),
        (2023, 12, 31, 365),
        (2024, 12, 31, 366),
        (1900, 12, 31, 365),
        (2000, 12, 31, 366),
    ],
)
def test_day_of_year(year, month, day, expected):
    assert int(day_of_year(year, month, day)) == expected


def test_jd_to_doy_sec():
    year, doy, sec = jd_to_doy_sec(caldate_to_jd(2023, 6, 21, 8, 3, 20.0))
    assert int(year) == 2023
    assert int(doy) == 172
    assert float(sec) == pytest.approx(29000.0, abs=1e-3)


# --- JAX tracing tests ---


def test_caldate_to_mjd_jit():
    mjd_eager = caldate_to_mjd(2000, 1, 1, 12, 0, 0.0)
    mjd_jit = jax.jit(caldate_to_mjd)(2000, 1, 1, 12, 0, 0.0)
    assert float(mjd_jit) == pytest.approx(float(mjd_eager), abs=1e-9)


def test_jd_to_caldate_jit():
    year, month, day, hour, minute, second = jax.jit(jd_to_caldate)(2451545.0)
    assert (int(year), int(month), int(day), int(hour), int(minute)) == (2000, 1, 1, 12, 0)
    assert float(second) == pytest.approx(0.0, abs=1e-3)


def test_jd_to_doy_sec_jit():
    year, doy, sec = jax.jit(jd_to_doy_sec)(caldate_to_jd(2024, 12, 31, 18))
    assert int(year) == 2024
    assert int(doy) == 366
    assert float(sec) == pytest.approx(64800.0, abs=1e-3)


def test_caldate_to_mjd_vmap():
    years = jnp.array([2000, 2024, 1999], dtype=jnp.int32)
    months = jnp.array([1, 3, 12], dtype=jnp.int32)
    days = jnp.array([1, 15, 31], dtype=jnp.int32)
    hours = jnp.array([12, 6, 0], dtype=jnp.int32)
    minutes = jnp.array([0, 30, 0], dtype=jnp.int32)
    seconds = jnp.array([0.0, 45.0, 0.0])

    vmapped = jax.vmap(caldate_to_mjd)(years, months, days, hours, minutes, seconds)

    for i in range(3):
        expected = caldate_to_mjd(
            int(years[i]), int(months[i]), int(days[i]),
            int(hours[i]), int(minutes[i]), float(seconds[i]),
        )
        assert float(vmapped[i]) == pytest.approx(float(expected), abs=1e-9)


def test_day_of_year_vmap():
    doys = jax.vmap(day_of_year)(
        jnp.array([2023, 2024, 2024]), jnp.array([2, 2, 12]), jnp.array([28, 29, 31])
    )
    assert [int(d) for d in doys] == [59, 60, 366]
