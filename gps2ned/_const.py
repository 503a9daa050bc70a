"""
Constants declarations for gps2ned
"""

# WGS84-style Ellipsoid Constants
WGS84_A = 6378137.0  # Semi-major axis (meters)
WGS84_B = 6356752.3142  # Semi-minor axis (meters)

# Degrees to radians, with pi written out to the precision of the fixture generator
PI_D180 = 3.1415926535897932 / 180.0

# Significant digits used when comparing against fixture expectations
SIGNIFICANT_DIGITS = 6

# Width of the seconds field in a sexagesimal string, e.g. '01.50'
SECONDS_WIDTH = 5
