from __future__ import annotations

from pathlib import Path

import pytest

import atmojax  # noqa: F401  (enables float64)
from atmojax.space_weather import SpaceWeatherData, static_space_weather

# Column layout of CSSI data lines (0-indexed start, width)
_KP_START = 18
_AP_START = 46


def cssi_line(
    year: int,
    month: int,
    day: int,
    kp_codes: tuple[int, ...] = (10, 13, 17, 20, 23, 27, 30, 33),
    ap: tuple[float, ...] = (4, 5, 6, 7, 9, 12, 15, 18),
    ap_daily: float = 9,
    f107_obs: float = 120.0,
    f107_adj_ctr81: float = 118.0,
    f107_adj_lst81: float = 117.0,
    f107_obs_ctr81: float = 119.0,
    f107_obs_lst81: float = 116.0,
    monthly: bool = False,
) -> str:
    """Build a fixed-width CSSI data line."""
    chars = [" "] * 130
    def put(start: int, text: str) -> None:
        chars[start : start + len(text)] = list(text)

    put(0, f"{year:4d}{month:3d}{day:3d}")
    if not monthly:
        for i, code in enumerate(kp_codes):
            put(_KP_START + 3 * i, f"{code:3d}")
        for i, value in enumerate(ap):
            put(_AP_START + 4 * i, f"{int(value):4d}")
        put(78, f"{int(ap_daily):4d}")
    put(92, f"{f107_obs:6.1f}")
    put(100, f"{f107_adj_ctr81:6.1f}")
    put(106, f"{f107_adj_lst81:6.1f}")
    put(112, f"{f107_obs_ctr81:6.1f}")
    put(118, f"{f107_obs_lst81:6.1f}")
    return "".join(chars)


def write_cssi_file(path: Path, observed: list[str], monthly: list[str] | None = None) -> Path:
    """Write a minimal CSSI file with observed and monthly-predicted sections."""
    lines = ["DATATYPE CssiSpaceWeather", "BEGIN OBSERVED", *observed, "END OBSERVED"]
    if monthly:
        lines += ["BEGIN MONTHLY_PREDICTED", *monthly, "END MONTHLY_PREDICTED"]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture()
def static_sw() -> SpaceWeatherData:
    """Constant quiet-Sun indices over every date."""
    return static_space_weather(ap=4.0, f107=150.0, f107a=150.0)


@pytest.fixture()
def cssi_file(tmp_path: Path) -> Path:
    """CSSI file covering 2023-01-01 to 2023-01-05 plus one monthly line."""
    observed = [
        cssi_line(2023, 1, d, ap_daily=8 + d, f107_obs=100.0 + d, f107_obs_ctr81=110.0 + d)
        for d in range(1, 6)
    ]
    monthly = [cssi_line(2023, 2, 1, f107_obs=140.0, monthly=True)]
    return write_cssi_file(tmp_path / "sw19571001.txt", observed, monthly)


@pytest.fixture()
def cache_dir(monkeypatch, tmp_path: Path) -> Path:
    """Point the atmojax cache at a temporary directory."""
    root = tmp_path / "cache"
    monkeypatch.setenv("ATMOJAX_CACHE", str(root))
    return root
