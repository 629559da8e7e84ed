"""
Constants declarations for geodetics
"""

# Named reference ellipsoids: (semi-major axis (meters), inverse flattening)
WGS84_A = 6378137.0
WGS84_INV_F = 298.257223563

GRS80_A = 6378137.0
GRS80_INV_F = 298.257222101

GRS67_A = 6378160.0
GRS67_INV_F = 298.25

ANS_A = 6378160.0
ANS_INV_F = 298.25

WGS72_A = 6378135.0
WGS72_INV_F = 298.26

CLARKE1858_A = 6378293.645
CLARKE1858_INV_F = 294.26

CLARKE1880_A = 6378249.145
CLARKE1880_INV_F = 293.465

# Mean Earth Radius, flattening 0
SPHERE_A = 6_371_000.0
SPHERE_F = 0.0

# Vincenty iteration limits
DEFAULT_MAX_ITERATIONS = 200
DEFAULT_TOLERANCE = 1e-12  # radians
