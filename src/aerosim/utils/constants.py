"""Physical constants and unit factors used across the library."""

STANDARD_AIR_DENSITY = 1.225
KMH_PER_MPS = 3.6
NEWTONS_PER_KILONEWTON = 1000.0
SMALL_EPS = 1e-9
