"""End-to-end dominant color extraction for artwork images."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from PIL import Image

from .core.border import border_brightness
from .core.cache import DominantColorCache
from .core.clusters import ColorCluster, filter_clusters, rank_clusters
from .core.colors import DominantColors, normalize_colors
from .core.constants import (
    MIN_BRIGHTNESS,
    MIN_COLORED_PIXELS,
    MIN_COLORFULNESS,
    MIN_POPULATION,
    PALETTE_SAMPLE_QUALITY,
    PALETTE_SAMPLE_SIZE,
)
from .core.selection import select_dominant_pair
from .io.images import fetch_image
from .io.quantize import quantize

logger = logging.getLogger(__name__)

Decoder = Callable[[str], Image.Image]
Quantizer = Callable[[Image.Image, int, int], Iterable[ColorCluster]]


class DominantColorExtractor:
    """Turns an image id into a normalized text/background color pair.

    The decoder and quantizer are swappable so the heuristics can run
    against any image source or clustering step.

    Args:
        decode: Loads the image for an id. Defaults to ``fetch_image``.
        quantize: Clusters image colors. Defaults to ColorThief's MMCQ.
        sample_size: Maximum number of clusters to ask for.
        sample_quality: Pixel sampling stride for the quantizer.
    """

    def __init__(
        self,
        decode: Decoder = fetch_image,
        quantize: Quantizer = quantize,
        sample_size: int = PALETTE_SAMPLE_SIZE,
        sample_quality: int = PALETTE_SAMPLE_QUALITY,
        min_population: int = MIN_POPULATION,
        min_brightness: float = MIN_BRIGHTNESS,
        min_colorfulness: float = MIN_COLORFULNESS,
        min_colored_pixels: int = MIN_COLORED_PIXELS,
    ) -> None:
        self.decode = decode
        self.quantize = quantize
        self.sample_size = sample_size
        self.sample_quality = sample_quality
        self.min_population = min_population
        self.min_brightness = min_brightness
        self.min_colorfulness = min_colorfulness
        self.min_colored_pixels = min_colored_pixels

    def extract(self, image_id: str) -> DominantColors:
        """Run the full pipeline. Errors from the collaborators propagate."""
        img = self.decode(image_id)
        clusters = self.quantize(img, self.sample_size, self.sample_quality)
        ranked = rank_clusters(
            filter_clusters(
                clusters,
                min_population=self.min_population,
                min_brightness=self.min_brightness,
                min_colorfulness=self.min_colorfulness,
                min_colored_pixels=self.min_colored_pixels,
            )
        )
        edge = border_brightness(img)
        colors = select_dominant_pair(ranked, edge, min_brightness=self.min_brightness)
        logger.info(
            "dominant colors for %s: %d valid clusters, primary=%s secondary=%s border=%.3f",
            image_id,
            len(ranked),
            colors.primary.as_tuple(),
            colors.secondary.as_tuple(),
            edge,
        )
        return normalize_colors(colors)


class ColorProvider:
    """Cached access to dominant colors, one computation per image id.

    Args:
        extractor: Pipeline used on cache misses.
        timeout: Seconds a caller waits before falling back.
    """

    def __init__(
        self,
        extractor: DominantColorExtractor | None = None,
        timeout: float | None = None,
    ) -> None:
        self.extractor = extractor or DominantColorExtractor()
        self.cache = DominantColorCache(self.extractor.extract, timeout=timeout)

    def get_dominant_colors(self, image_id: str | None) -> DominantColors:
        """Colors for the image, or ``FALLBACK`` if they cannot be computed."""
        return self.cache.get(image_id)

    def close(self) -> None:
        self.cache.close()
