"""
The `constants` module defines the mathematical and physical constants shared by the atmosphere models.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

# Time Constants

"""
Offset between Julian Date and Modified Julian Date. Units: *days*
"""
JD_MJD_OFFSET = 2400000.5  # Offset between Julian Date and Modified Julian Date

"""
Number of seconds in one day. Units: *s*
"""
SECONDS_PER_DAY = 86400.0

# Physical Constants

"""
Atomic mass unit expressed in grams. Used to convert number densities to
mass densities in CGS units. Units: *g*

References:

1. J. Picone, A. Hedin, D. Drob, and A. Aikin, *NRLMSISE-00 empirical model of
   the atmosphere*, J. Geophys. Res., 107(A12), 2002
"""
AMU_GRAMS = 1.66e-24

"""
Universal gas constant in the mixed units used by the MSIS family of models
(with gravity in cm/s^2 and heights in km). Units: *cm^2 km / (s^2 K)* per amu

References:

1. A. Hedin, *Extension of the MSIS thermosphere model into the middle and lower
   atmosphere*, J. Geophys. Res., 96(A2), 1991
"""
R_GAS_MSIS = 831.4

"""
Altitude below which the space weather indices are not consulted and the
quiet-Sun defaults are used instead. Units: *m*
"""
LOW_ALTITUDE_SW_CUTOFF = 80000.0

"""
Default (quiet) space weather indices used below ``LOW_ALTITUDE_SW_CUTOFF``:
81-day average F10.7, daily F10.7 and daily Ap.
"""
DEFAULT_F107A = 150.0
DEFAULT_F107 = 150.0
DEFAULT_AP = 4.0
