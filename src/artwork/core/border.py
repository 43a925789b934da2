"""Brightness estimation along the edges of an image."""

import numpy as np
from PIL import Image

from .constants import BORDER_SAMPLE_DIVISIONS, EPSILON

_HSP_WEIGHTS = np.array([0.299, 0.587, 0.114])


def border_brightness(
    img: Image.Image,
    divisions: int = BORDER_SAMPLE_DIVISIONS,
    epsilon: float = EPSILON,
) -> float:
    """Average squared brightness of pixels sampled along the image border.

    Pixels are taken every ``width // divisions`` steps (at least 1) along the
    top and bottom rows and, with the same step, down the left and right
    columns. Each brightness is floored at ``epsilon`` and squared, so bright
    edges weigh more than dark ones.

    Args:
        img: Decoded image; converted to RGB if needed.
        divisions: Samples per row, roughly.
        epsilon: Lower bound for a single sample's brightness.

    Returns:
        A value between 0 and 1.
    """
    pixels = np.asarray(img.convert("RGB"), dtype=np.float64)
    height, width = pixels.shape[:2]
    step = max(1, width // divisions)

    samples = np.concatenate(
        [
            pixels[0, ::step],
            pixels[height - 1, ::step],
            pixels[::step, 0],
            pixels[::step, width - 1],
        ]
    )
    brightness = np.sqrt((samples**2) @ _HSP_WEIGHTS) / 255
    weighted = np.maximum(brightness, epsilon) ** 2
    return float(min(1.0, weighted.mean()))
