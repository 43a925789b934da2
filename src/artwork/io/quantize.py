"""Color quantization backed by ColorThief's modified median cut (MMCQ)."""

from __future__ import annotations

import numpy as np
from colorthief import MMCQ
from PIL import Image

from ..core.clusters import ColorCluster
from ..core.colors import RGB
from ..core.constants import NEAR_WHITE, PALETTE_SAMPLE_QUALITY, PALETTE_SAMPLE_SIZE
from ..core.errors import QuantizationError


def sample_pixels(img: Image.Image, quality: int) -> list[tuple[int, int, int]]:
    """Every ``quality``-th opaque pixel, leaving out near-white ones.

    Mirrors the sampling ColorThief applies before building a palette.
    """
    rgba = np.asarray(img.convert("RGBA")).reshape(-1, 4)[:: max(1, quality)]
    opaque = rgba[:, 3] >= 125
    near_white = (rgba[:, :3] > NEAR_WHITE).all(axis=1)
    # MMCQ shifts channel values, so they must be Python ints, not uint8
    return [tuple(p) for p in rgba[opaque & ~near_white, :3].tolist()]


def quantize(
    img: Image.Image,
    sample_size: int = PALETTE_SAMPLE_SIZE,
    sample_quality: int = PALETTE_SAMPLE_QUALITY,
) -> list[ColorCluster]:
    """Cluster the colors of an image.

    Args:
        img: Decoded image.
        sample_size: Maximum number of clusters MMCQ may produce.
        sample_quality: Sampling stride; 1 looks at every pixel.

    Returns:
        One ColorCluster per MMCQ vbox, population counted in sampled pixels.
        Empty if no pixel qualifies for sampling.

    Raises:
        QuantizationError: If MMCQ rejects the input.
    """
    pixels = sample_pixels(img, sample_quality)
    if not pixels:
        return []
    try:
        cmap = MMCQ.quantize(pixels, sample_size)
    except Exception as e:
        raise QuantizationError(f"MMCQ failed on {len(pixels)} pixels: {e}") from e
    return [
        ColorCluster(RGB.of(*vbox.avg), vbox.count)
        for vbox in cmap.vboxes.map(lambda entry: entry["vbox"])
    ]
