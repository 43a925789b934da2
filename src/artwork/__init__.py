"""Artwork package public API.
This module re-exports the dominant color pipeline, its building blocks
and the collaborators that load and quantize images.
"""

from .core.border import border_brightness
from .core.cache import DominantColorCache
from .core.clusters import ColorCluster, filter_clusters, rank_clusters
from .core.colors import (
    DEFAULT_RGB,
    FALLBACK,
    RGB,
    DominantColors,
    colorfulness,
    normalize_colors,
    normalize_for_readability,
    perceived_brightness,
)
from .core.errors import ArtworkError, ImageFetchError, QuantizationError
from .core.selection import select_dominant_pair
from .io.images import fetch_image
from .io.quantize import quantize
from .pipeline import ColorProvider, DominantColorExtractor

__all__ = [
    "RGB",
    "DEFAULT_RGB",
    "FALLBACK",
    "DominantColors",
    "ColorCluster",
    "perceived_brightness",
    "colorfulness",
    "normalize_for_readability",
    "normalize_colors",
    "filter_clusters",
    "rank_clusters",
    "border_brightness",
    "select_dominant_pair",
    "DominantColorCache",
    "ArtworkError",
    "ImageFetchError",
    "QuantizationError",
    "fetch_image",
    "quantize",
    "DominantColorExtractor",
    "ColorProvider",
]
