"""Filtering and ranking of color clusters produced by quantization."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .colors import RGB, colorfulness, perceived_brightness
from .constants import (
    MIN_BRIGHTNESS,
    MIN_COLORED_PIXELS,
    MIN_COLORFULNESS,
    MIN_POPULATION,
)


@dataclass(frozen=True)
class ColorCluster:
    """Average color of a group of similar pixels and how many pixels it holds."""

    color: RGB
    population: int

    def __post_init__(self) -> None:
        if self.population < 0:
            raise ValueError(f"Cluster population must be >= 0, got {self.population}")


def _is_colored(
    cluster: ColorCluster, min_brightness: float, min_colorfulness: float
) -> bool:
    return (
        perceived_brightness(cluster.color) > min_brightness
        and colorfulness(cluster.color) > min_colorfulness
    )


def filter_clusters(
    clusters: Iterable[ColorCluster],
    min_population: int = MIN_POPULATION,
    min_brightness: float = MIN_BRIGHTNESS,
    min_colorfulness: float = MIN_COLORFULNESS,
    min_colored_pixels: int = MIN_COLORED_PIXELS,
) -> list[ColorCluster]:
    """Keep the clusters that can stand for a dominant color of the image.

    A cluster survives when it is large, not too dark and not gray. If the
    colored clusters together cover fewer than ``min_colored_pixels``
    pixels, the image counts as colorless and nothing survives, so a few
    colorful specks cannot outvote a monochrome picture.

    Args:
        clusters: Clusters of one image, in any order.
        min_population: Pixel count a cluster has to exceed.
        min_brightness: Perceived brightness a cluster has to exceed.
        min_colorfulness: Saturation a cluster has to exceed.
        min_colored_pixels: Combined population the colored clusters need.

    Returns:
        The surviving clusters, in input order.
    """
    colored = [
        c for c in clusters if _is_colored(c, min_brightness, min_colorfulness)
    ]
    if sum(c.population for c in colored) < min_colored_pixels:
        return []
    return [c for c in colored if c.population > min_population]


def weighted_population(cluster: ColorCluster) -> float:
    """Population weighted by squared brightness, favoring salient regions."""
    return cluster.population * perceived_brightness(cluster.color) ** 2


def rank_clusters(clusters: Iterable[ColorCluster]) -> list[ColorCluster]:
    """Order clusters from most to least dominant.

    Clusters with equal weight keep the order the quantizer produced them in.
    """
    return sorted(clusters, key=weighted_population, reverse=True)
