"""Sample gates and defaults for consolidating sampled chart colors (8-bit RGB)."""

# Samples with alpha below this are treated as transparent
MIN_ALPHA = 200

# Raw samples: inclusive brightness window and minimum HSV-style saturation
SAMPLE_BRIGHTNESS_RANGE = (40, 220)
SAMPLE_MIN_SATURATION = 0.3

# Finished colors: exclusive bounds
VALID_BRIGHTNESS_RANGE = (30, 230)
VALID_MIN_SATURATION = 0.2

# Euclidean RGB distance under which a sample joins an existing color
DEFAULT_TOLERANCE = 15
DEFAULT_MAX_COLORS = 50
