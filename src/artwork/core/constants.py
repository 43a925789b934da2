"""Tuning constants for dominant color extraction.

These were tuned against a large set of album covers; change them with care.
"""

# Quantization parameters handed to MMCQ
PALETTE_SAMPLE_SIZE: int = 10
PALETTE_SAMPLE_QUALITY: int = 5

# Cluster validity thresholds
MIN_BRIGHTNESS: float = 0.075
MIN_COLORFULNESS: float = 0.1
MIN_POPULATION: int = 1000
MIN_COLORED_PIXELS: int = 3000

# Border sampling
EPSILON: float = 0.001
BORDER_SAMPLE_DIVISIONS: int = 10

# Pixels brighter than this on every channel are skipped when sampling
NEAR_WHITE: int = 250
