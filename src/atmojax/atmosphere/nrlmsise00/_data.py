"""NRLMSISE-00 coefficient tables.

Read-only module constants in the row/column layout of the reference
model. Rows of the harmonic tables are consumed by
:func:`~atmojax.atmosphere.nrlmsise00._harmonics.latitude_time_harmonics`
(150-coefficient rows) and
:func:`~atmojax.atmosphere.nrlmsise00._harmonics.lower_harmonics`
(100-coefficient rows).

Index map:

- ``PT``: exospheric temperature expansion.
- ``PD[0..8]``: density expansions for He, O, N2, lower-boundary
  temperature (TLB), O2, Ar, H, N and anomalous (hot) O.
- ``PS``: temperature-gradient (S) expansion.
- ``PDL[0]``: N chemistry, hot O temperature, O/O2 F10.7 scaling and
  turbopause variation multipliers. ``PDL[1]``: He/O/O2/Ar/H chemistry
  multipliers, ``za`` (index 15) and turbopause height (index 24).
- ``PTM``: lower-boundary temperature [K] (0), TLB (1), TN1 nodes (2, 4,
  6, 7), S (3), ``zlb`` [km] (5), TN1 end gradient (8).
- ``PDM[i]``: per species (He, O, N2, O2, Ar, H, N, hot O) lower-boundary
  density (0), mixing ratio relative to N2 (1), turbopause height (2),
  chemistry ratios, heights and scale lengths (3-7); ``PDM[2][4]`` is the
  mean molecular weight and ``PDM[7][9]`` the hot O temperature.
- ``PTL[0..3]``: lower-thermosphere node temperatures TN1(2..5).
- ``PMA[0..6]``: middle-atmosphere node temperatures TN2(2..4) and
  TN3(2..5); ``PMA[7..9]``: end gradients TGN3(2), TGN1(2), TGN2(2).
- ``PAVGM``: averages scaling the ``PMA`` rows.

Rows of ``PTL`` and ``PMA`` carry the value 2 at index 99, the
coefficient-set selector checked by ``lower_harmonics``.
"""

from __future__ import annotations

import jax.numpy as jnp

from atmojax.config import get_dtype

_float = get_dtype()

# Magnetic activity decay parameters shared by every 150-coefficient row
# (indices 24/25: Ap array; 43/44: daily Ap).
_AP_PARAMS = {24: 8.66784e-02, 25: 1.58727e-01, 43: 8.47001e-02, 44: 1.70147e-01}


def _pad(values: list[float], length: int) -> list[float]:
    return values + [0.0] * (length - len(values))


def _sparse(length: int, entries: dict[int, float]) -> list[float]:
    row = [0.0] * length
    for index, value in entries.items():
        row[index] = value
    return row


# ---------------------------------------------------------------------------
# Temperature
# ---------------------------------------------------------------------------

_PT = _pad([
     9.86573e-01,  1.62228e-02,  1.55270e-02, -1.04323e-01, -3.75801e-03,
    -1.18538e-03, -1.24043e-01,  4.56820e-03,  8.76018e-03, -1.36235e-01,
    -3.52427e-02,  8.84181e-03, -5.92127e-03, -8.61650e+00,  0.00000e+00,
     1.28492e-02,  0.00000e+00,  1.30096e+02,  1.04567e-02,  1.65686e-03,
    -5.53887e-06,  2.97810e-03,  0.00000e+00,  5.13122e-03,  8.66784e-02,
     1.58727e-01,  0.00000e+00,  0.00000e+00,  0.00000e+00, -7.27026e-06,
     0.00000e+00,  6.74494e+00,  4.93933e-03,  2.21656e-03,  2.50802e-03,
     0.00000e+00,  0.00000e+00, -2.08841e-02, -1.79873e+00,  1.45103e-03,
     2.81769e-04, -1.44703e-03, -5.16394e-05,  8.47001e-02,  1.70147e-01,
     5.72562e-03,  5.07493e-05,  4.36148e-03,  1.17863e-04,  4.74364e-03,
     6.61278e-03,  4.34292e-05,  1.44373e-03,  2.41470e-05,  2.84426e-03,
     8.56560e-04,  2.04028e-03,  0.00000e+00, -3.15994e+03, -2.46423e-03,
     1.13843e-03,  4.20512e-04,  0.00000e+00, -9.77214e+01,  6.77794e-03,
     5.27499e-03,  1.14936e-03,  0.00000e+00, -6.61311e-03, -1.84255e-02,
    -1.96259e-02,  2.98618e+04,  0.00000e+00,  0.00000e+00,  0.00000e+00,
     6.44574e+02,  8.84668e-04,  5.05066e-04,  0.00000e+00,  4.02881e+03,
    -1.89503e-03,  0.00000e+00,  0.00000e+00,  8.21407e-04,  2.06780e-03,
     0.00000e+00,  0.00000e+00,  0.00000e+00,  0.00000e+00,  0.00000e+00,
    -1.20410e-02, -3.63963e-03,  9.92070e-05, -1.15284e-04, -6.33059e-05,
    -6.05545e-01,  8.34218e-03, -9.13036e+01,  3.71042e-04,  0.00000e+00,
     4.19000e-04,  2.70928e-03,  3.31507e-03, -4.44508e-03, -4.96334e-03,
    -1.60449e-03,  3.95119e-03,  2.48924e-03,  5.09815e-04,  4.05302e-03,
     2.24076e-03,  0.00000e+00,  6.84256e-03,  4.66354e-04,  0.00000e+00,
    -3.68328e-04,  0.00000e+00,  0.00000e+00, -1.46870e+02,  0.00000e+00,
     0.00000e+00,  1.09501e-03,  4.65156e-04,  5.62583e-04,  3.21596e+00,
     6.43168e-04,  3.14860e-03,  3.40738e-03,  1.78481e-03,  9.62532e-04,
     5.58171e-04,  3.43731e+00, -2.33195e-01,  5.10289e-04,  0.00000e+00,
     0.00000e+00, -9.25347e+04,  0.00000e+00, -1.99639e-03,
], 150)

_PS = _sparse(150, {
    0: 9.56827e-01, 1: 6.20637e-02, 2: 3.18433e-02, 5: 3.94900e-02,
    8: -9.24882e-03, 9: -7.94023e-03, 13: 1.74712e+02, 21: 2.74677e-03,
    23: 1.54951e-02, 39: -6.99007e-04, **_AP_PARAMS,
})

# ---------------------------------------------------------------------------
# Densities
# ---------------------------------------------------------------------------

_PD_HE = _pad([
     1.09979e+00, -4.88060e-02, -1.97501e-01, -9.10280e-02, -6.96558e-03,
     2.42136e-02,  3.91333e-01, -7.20068e-03, -3.22718e-02,  1.41508e+00,
     1.68194e-01,  1.85282e-02,  1.09384e-01, -7.24282e+00,  0.00000e+00,
     2.96377e-01, -4.97210e-02,  1.04114e+02, -8.61108e-02, -7.29177e-04,
     1.48998e-06,  1.08629e-03,  0.00000e+00,  0.00000e+00,  8.31090e-02,
     1.12818e-01, -5.75005e-02, -1.29919e-02, -1.78849e-02, -2.86343e-06,
     0.00000e+00, -1.51187e+02, -6.65902e-03,  0.00000e+00, -2.02069e-03,
     0.00000e+00,  0.00000e+00,  4.32264e-02, -2.80444e+01, -3.26789e-03,
     2.47461e-03,  0.00000e+00,  0.00000e+00,  9.82100e-02,  1.22714e-01,
    -3.96450e-02,  0.00000e+00, -2.76489e-03,  0.00000e+00,  1.87723e-03,
    -8.09813e-03,  4.34428e-05, -7.70932e-03,  0.00000e+00, -2.28894e-03,
    -5.69070e-03, -5.22193e-03,  6.00692e-03, -7.80434e+03, -3.48336e-03,
    -6.38362e-03, -1.82190e-03,  0.00000e+00, -7.58976e+01, -2.17875e-02,
    -1.72524e-02, -9.06287e-03,  0.00000e+00,  2.44725e-02,  8.66040e-02,
     1.05712e-01,  3.02543e+04,  0.00000e+00,  0.00000e+00,  0.00000e+00,
    -6.01364e+03, -5.64668e-03, -2.54157e-03,  0.00000e+00,  3.15611e+02,
    -5.69158e-03,  0.00000e+00,  0.00000e+00, -4.47216e-03, -4.49523e-03,
     4.64428e-03,  0.00000e+00,  0.00000e+00,  0.00000e+00,  0.00000e+00,
     4.51236e-02,  2.46520e-02,  6.17794e-03,  0.00000e+00,  0.00000e+00,
    -3.62944e-01, -4.80022e-02, -7.57230e+01, -1.99656e-03,  0.00000e+00,
    -5.18780e-03, -1.73990e-02, -9.03485e-03,  7.48465e-03,  1.53267e-02,
     1.06296e-02,  1.18655e-02,  2.55569e-03,  1.69020e-03,  3.51936e-02,
    -1.81242e-02,  0.00000e+00, -1.00529e-01, -5.10574e-03,  0.00000e+00,
     2.10228e-03,  0.00000e+00,  0.00000e+00, -1.73255e+02,  5.07833e-01,
    -2.41408e-01,  8.75414e-03,  2.77527e-03, -8.90353e-05, -5.25148e+00,
    -5.83899e-03, -2.09122e-02, -9.62530e-03,  9.81564e-03,  0.00000e+00,
     0.00000e+00, -3.14491e+01,
], 150)

_PD_O = _pad([
     1.02315e+00, -1.59710e-01, -1.06630e-01, -1.77074e-02, -4.42726e-03,
     3.44803e-02,  4.45613e-02, -3.33751e-02, -5.73598e-02,  3.50360e-01,
     6.33053e-02,  2.16221e-02,  5.42577e-02, -5.74193e+00,  0.00000e+00,
     1.90891e-01, -1.39194e-02,  1.01102e+02,  8.16363e-02,  1.33717e-04,
     6.54403e-06,  3.10295e-03,  0.00000e+00,  0.00000e+00,  5.38205e-02,
     1.23910e-01, -1.39831e-02,  0.00000e+00,  0.00000e+00, -3.95915e-06,
     0.00000e+00, -7.14651e-01, -5.01027e-03,  0.00000e+00, -3.24756e-03,
     0.00000e+00,  0.00000e+00,  4.42173e-02, -1.31598e+01, -3.15626e-03,
     1.24574e-03, -1.47626e-03, -1.55461e-03,  6.40682e-02,  1.34898e-01,
    -2.42415e-02,  0.00000e+00,  0.00000e+00,  0.00000e+00,  6.13666e-04,
    -5.40373e-03,  2.61635e-05, -3.33012e-03,  0.00000e+00, -3.08101e-03,
    -2.42679e-03, -3.36086e-03,  0.00000e+00, -1.18979e+03, -5.04738e-02,
    -2.61547e-03, -1.03132e-03,  1.91583e-04, -8.38132e+01, -1.40517e-02,
    -1.14167e-02, -4.08012e-03,  1.73522e-04, -1.39644e-02, -6.64128e-02,
    -6.85152e-02, -1.34414e+04,  0.00000e+00,  0.00000e+00,  0.00000e+00,
     6.07916e+02, -4.12220e-03, -2.20996e-03,  0.00000e+00,  1.70277e+03,
    -4.63015e-03, -2.71415e-03,  0.00000e+00, -2.53031e-03, -2.42823e-03,
     0.00000e+00,  0.00000e+00,  0.00000e+00,  0.00000e+00,  0.00000e+00,
    -7.54891e-03,  1.00522e-02,  2.35001e-03,  0.00000e+00,  0.00000e+00,
    -6.28883e-01,  2.57149e-02, -1.06021e+02, -6.32458e-04,  0.00000e+00,
     3.77700e-03,
], 150)

_PD_N2 = _sparse(150, {
    0: 1.16112e+00, 3: 3.33725e-02, 5: 3.48637e-02, 6: -5.44368e-03,
    8: -6.73940e-02, 9: 1.74754e-01, 13: 1.74712e+02, 15: 1.26733e-01,
    17: 1.03154e+02, 18: 5.52075e-02, 21: 8.13525e-04, 31: -2.50482e+01,
    39: -2.48894e-03, 40: 6.16053e-04, 41: -5.79716e-04, 42: 2.95482e-03,
    **_AP_PARAMS,
})

_PD_TLB = _sparse(150, {
    0: 9.44846e-01, 3: -3.08617e-02, 5: -2.44019e-02, 6: 6.48607e-03,
    8: 3.08181e-02, 9: 4.59392e-02, 13: 1.74712e+02, 15: 2.13260e-02,
    17: -3.56958e+02, 19: 1.82278e-04, 21: 3.07472e-04, 32: 3.83054e-03,
    35: -1.93065e-03, 36: -1.45090e-03, 39: -1.23493e-03, 40: 1.36736e-03,
    45: 3.71469e-03, 47: 5.10250e-03, 48: 2.47425e-05, 49: 3.68756e-03,
    **_AP_PARAMS,
})

_PD_O2 = _sparse(150, {
    0: 1.35580e+00, 1: 1.44816e-01, 3: 6.07767e-02, 5: 2.94777e-02,
    6: 7.46900e-02, 8: -9.23822e-02, 9: 8.57342e-02, 13: 2.38636e+01,
    15: 7.71653e-02, 17: 8.18751e+01, 18: 1.87736e-02, 21: 1.49667e-02,
    31: -3.67874e+02, 32: 5.48158e-03, 45: 1.22631e-02,
    **_AP_PARAMS,
})

_PD_AR = _sparse(150, {
    0: 1.04761e+00, 1: 2.00165e-01, 2: 2.37097e-01,
    **_AP_PARAMS,
})

_PD_H = _pad([
     1.26376e+00, -2.14304e-01, -1.49984e-01,  2.30404e-01,  2.98237e-02,
     2.68673e-02,  2.96228e-01,  2.21900e-02, -2.07655e-02,  4.52506e-01,
     1.20105e-01,  3.24420e-02,  4.24816e-02, -9.14313e+00,  0.00000e+00,
     2.47178e-02, -2.88229e-02,  8.12805e+01,  5.10380e-02, -5.80611e-03,
     2.51236e-05, -1.24083e-02,  0.00000e+00,  0.00000e+00,  8.66784e-02,
     1.58727e-01, -3.48190e-02,  0.00000e+00,  0.00000e+00,  2.89885e-05,
     0.00000e+00,  1.53595e+02, -1.68604e-02,  0.00000e+00,  1.01015e-02,
     0.00000e+00,  0.00000e+00,  0.00000e+00,  0.00000e+00,  2.84552e-04,
    -1.22181e-03,  0.00000e+00,  0.00000e+00,  8.47001e-02,  1.70147e-01,
    -1.04927e-02,  0.00000e+00,  0.00000e+00,  0.00000e+00, -5.91313e-03,
    -2.30501e-02,  3.14758e-05,  0.00000e+00,  0.00000e+00,  1.26956e-02,
     8.35489e-03,  3.10513e-04,  0.00000e+00,  3.42119e+03, -2.45017e-03,
    -4.27154e-04,  5.45152e-04,  1.89896e-03,  2.89121e+01, -6.49973e-03,
    -1.93855e-02, -1.48492e-02,  0.00000e+00, -5.10576e-02,  7.87306e-02,
     9.51981e-02, -1.49422e+04,  0.00000e+00,  0.00000e+00,  0.00000e+00,
     2.65503e+02,  0.00000e+00,  0.00000e+00,  0.00000e+00,  0.00000e+00,
     0.00000e+00,  0.00000e+00,  0.00000e+00,  0.00000e+00,  0.00000e+00,
     6.37110e-03,  3.24789e-04,
], 150)

_PD_N = _sparse(150, {
    0: 7.09557e+01, 1: -3.26740e-01, 3: -5.16829e-01, 4: -1.71664e-03,
    5: 9.09226e-02, 6: -6.71938e-01,
    **_AP_PARAMS,
})

_PD_HOT_O = _sparse(150, {
    0: 6.04050e-02, 1: 1.57034e+00, 2: 2.99387e-02, 9: -1.51018e+00,
    13: -8.61650e+00, 14: 1.26454e-02, 21: 5.50878e-03,
    **_AP_PARAMS,
})

# ---------------------------------------------------------------------------
# Lower thermosphere and middle atmosphere nodes
# ---------------------------------------------------------------------------

_SET_SELECTOR = {99: 2.0}

_PTL = [
    # TN1(2)
    _sparse(100, {
        0: 1.00858e+00, 1: 4.56011e-02, 2: -2.22972e-02, 3: -5.44388e-02,
        4: 5.23136e-04, 5: -1.88849e-02, 6: 5.23707e-02, 7: -9.43646e-03,
        8: 6.31707e-03, 9: -7.80460e-02, 10: -4.88430e-02, 13: -7.60250e+00,
        15: -1.44635e-02, 16: -1.76843e-02, 17: -1.21517e+02, 18: 2.85647e-02,
        21: 6.31792e-04, 23: 5.77197e-03, 31: -8.90272e+03, 32: 3.30611e-03,
        33: 3.02172e-03, 35: -2.13673e-03, 36: -3.20910e-04, 39: 2.76034e-03,
        40: 2.82487e-03, 41: -2.97592e-04, 42: -4.21534e-03, 45: 8.96456e-03,
        47: -1.08596e-02, 50: 5.57917e-03, 51: 9.65405e-03,
        **_AP_PARAMS, **_SET_SELECTOR,
    }),
    # TN1(3)
    _sparse(100, {
        0: 9.39664e-01, 1: 8.56514e-02, 2: -6.79989e-03, 3: 2.65929e-02,
        4: -4.74283e-03, 5: 1.21855e-02, 6: -2.14905e-02, 7: 6.49651e-03,
        8: -2.05477e-02, 9: -4.24952e-02, 13: 1.19148e+01, 15: 1.18777e-02,
        16: -7.28230e-02, 17: -8.15965e+01, 18: 1.73887e-02, 22: -1.44691e-02,
        23: 2.80259e-04, 31: 2.16584e+02, 32: 3.18713e-03, 33: 7.37479e-03,
        35: -2.55018e-03, 36: -3.92806e-03, 39: -2.89757e-03, 40: -1.33549e-03,
        41: 1.02661e-03, 42: 3.53775e-04, 45: -9.17497e-03, 50: 3.56082e-03,
        **_AP_PARAMS, **_SET_SELECTOR,
    }),
    # TN1(4)
    _sparse(100, {
        0: 9.85982e-01, 1: -4.55435e-02, 2: 1.21106e-02, 3: 2.04127e-02,
        4: -2.40836e-03, 5: 1.11383e-02, 6: -4.51926e-02, 7: 1.35074e-02,
        8: -6.54139e-03, 9: 1.15275e-01, 10: 1.28247e-01, 13: -5.30705e+00,
        15: -3.79332e-02, 16: -6.24741e-02, 17: 7.71062e-01, 18: 2.96315e-02,
        22: 6.81051e-03, 23: -4.34767e-03, 31: 1.07003e+01, 32: -2.76907e-03,
        33: 4.32474e-04, 35: 1.31497e-03, 36: -6.47517e-04, 38: -2.20621e+01,
        39: -1.10804e-03, 40: -8.09338e-04, 41: 4.18184e-04, 42: 4.29650e-03,
        50: -4.04337e-03,
        **_AP_PARAMS, **_SET_SELECTOR,
    }),
    # TN1(5) TN2(1)
    _sparse(100, {
        0: 1.00320e+00, 1: 3.83501e-02, 2: -2.38983e-03, 3: 2.83950e-03,
        4: 4.20956e-03, 5: 5.86619e-04, 6: 2.19054e-02, 7: -1.00946e-02,
        8: -3.50259e-03, 9: 4.17392e-02, 10: -8.44404e-03, 13: 4.96949e+00,
        15: -7.06478e-03, 16: -1.46494e-02, 17: 3.13258e+01, 18: -1.86493e-03,
        20: -1.67499e-02, 23: 5.12686e-04, 26: -4.64167e-03, 30: 4.37353e-03,
        31: -1.99069e+02, 33: -5.34884e-03, 35: 1.62458e-03, 36: 2.93016e-03,
        37: 2.67926e-03, 38: 5.90449e+02, 47: -1.17266e-03, 48: -3.58890e-04,
        **_AP_PARAMS, **_SET_SELECTOR,
    }),
]

_PMA = [
    # TN2(2)
    _sparse(100, {
        0: 9.81637e-01, 1: -1.41317e-03, 2: 3.87323e-02, 9: -3.58707e-02,
        10: -8.63658e-03, 13: -2.02226e+00, 15: -8.69424e-03, 16: -1.91397e-02,
        17: 8.76779e+01, 18: 4.52188e-03, 20: 2.23760e-02, 26: -7.07572e-03,
        30: -4.11210e-03, 31: 3.50060e+01, 47: -8.36657e-03, 48: 1.61347e+01,
        **_SET_SELECTOR,
    }),
    # TN2(3), TN2(4), TN3(2..5), TGN3(2), TGN1(2), TGN2(2)
    *[_sparse(100, {0: 1.0, **_SET_SELECTOR}) for _ in range(9)],
]

# ---------------------------------------------------------------------------
# Public tables
# ---------------------------------------------------------------------------

PT = jnp.array(_PT, dtype=_float)
PS = jnp.array(_PS, dtype=_float)
PD = jnp.array(
    [_PD_HE, _PD_O, _PD_N2, _PD_TLB, _PD_O2, _PD_AR, _PD_H, _PD_N, _PD_HOT_O],
    dtype=_float,
)

PDL = jnp.array(
    [
        _pad([1.09930e+00, 3.90631e+00, 3.07165e+00, 9.86161e-01, 1.63536e+01,
              4.63830e+00, 1.00000e+00], 22) + [1.0, 0.0, 0.0],
        [1.0] * 15 + [1.20000e+02] + [1.0] * 9,
    ],
    dtype=_float,
)

PTM = jnp.array(
    [1.04130e+03, 3.86000e+02, 1.95000e+02, 1.66728e+01, 2.13000e+02,
     1.20000e+02, 2.40000e+02, 1.87000e+02, -2.00000e+00, 0.00000e+00],
    dtype=_float,
)

PDM = jnp.array(
    [
        [2.45600e+07, 6.71072e-06, 1.00000e+02, 0.00000e+00, 1.10000e+02,
         1.00000e+01, 0.00000e+00, 0.00000e+00, 0.00000e+00, 0.00000e+00],
        [8.59400e+10, 1.00000e+00, 1.05000e+02, -8.00000e+00, 1.10000e+02,
         1.00000e+01, 9.00000e+01, 2.00000e+00, 0.00000e+00, 0.00000e+00],
        [2.81000e+11, 0.00000e+00, 1.05000e+02, 2.80000e+01, 2.89500e+01,
         0.00000e+00, 0.00000e+00, 0.00000e+00, 0.00000e+00, 0.00000e+00],
        [3.30000e+10, 2.68270e-01, 1.05000e+02, 1.00000e+00, 1.10000e+02,
         1.00000e+01, 1.10000e+02, -1.00000e+01, 0.00000e+00, 0.00000e+00],
        [1.33000e+09, 1.19615e-02, 1.05000e+02, 0.00000e+00, 1.10000e+02,
         1.00000e+01, 0.00000e+00, 0.00000e+00, 0.00000e+00, 0.00000e+00],
        [1.76100e+05, 1.00000e+00, 9.50000e+01, -8.00000e+00, 1.10000e+02,
         1.00000e+01, 9.00000e+01, 2.00000e+00, 0.00000e+00, 0.00000e+00],
        [1.00000e+07, 1.00000e+00, 1.05000e+02, -8.00000e+00, 1.10000e+02,
         1.00000e+01, 9.00000e+01, 2.00000e+00, 0.00000e+00, 0.00000e+00],
        [1.00000e+06, 1.00000e+00, 1.05000e+02, -8.00000e+00, 5.50000e+02,
         7.60000e+01, 9.00000e+01, 2.00000e+00, 0.00000e+00, 4.00000e+03],
    ],
    dtype=_float,
)

PTL = jnp.array(_PTL, dtype=_float)
PMA = jnp.array(_PMA, dtype=_float)

PAVGM = jnp.array(
    [2.61000e+02, 2.64000e+02, 2.29000e+02, 2.17000e+02, 2.17000e+02,
     2.23000e+02, 2.86760e+02, -2.93940e+00, 2.50000e+00, 0.00000e+00],
    dtype=_float,
)
