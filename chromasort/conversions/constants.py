"""
Color science constants.

Every value here feeds the Lab classification boundaries; changing the matrix
or the gamma threshold moves colors between chromatic groups.
"""
import numpy as np

# sRGB transfer function
SRGB_GAMMA_THRESHOLD = 0.04045
SRGB_LINEAR_SLOPE = 12.92
SRGB_GAMMA_OFFSET = 0.055
SRGB_GAMMA_EXPONENT = 2.4

# Linear sRGB -> XYZ, D65
SRGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)
SRGB_TO_XYZ_NP = np.array(SRGB_TO_XYZ, dtype=np.float64)

# D65 reference white, Y normalized to 1
D65_WHITE = (0.95047, 1.00000, 1.08883)

# CIE Lab
CIE_EPSILON = 0.008856
CIE_KAPPA = 903.3

# Perceived brightness weights (Rec. 601)
LUMA_WEIGHTS = (0.299, 0.587, 0.114)

MAX_CHANNEL = 255
