"""Choice of the text and background colors from ranked clusters."""

from __future__ import annotations

from typing import Sequence

from .clusters import ColorCluster
from .colors import DEFAULT_RGB, DominantColors, perceived_brightness
from .constants import MIN_BRIGHTNESS


def select_dominant_pair(
    ranked: Sequence[ColorCluster],
    border_brightness: float,
    min_brightness: float = MIN_BRIGHTNESS,
) -> DominantColors:
    """Pick the primary (text) and secondary (background) colors.

    Args:
        ranked: Valid clusters, most dominant first.
        border_brightness: Result of ``border_brightness`` for the same image.
        min_brightness: Floor for the background dimming factor of
            colorless images.

    Returns:
        DominantColors where primary is never darker than secondary.
    """
    if not ranked:
        # Grayscale image: default text over a background dimmed like the edges
        primary = DEFAULT_RGB
        secondary = primary.scaled(max(min_brightness, border_brightness))
        return DominantColors(primary, secondary, border_brightness)

    if len(ranked) == 1:
        # Monochrome image
        color = ranked[0].color
        return DominantColors(color, color, border_brightness)

    first, second = ranked[0].color, ranked[1].color
    if perceived_brightness(first) > perceived_brightness(second):
        return DominantColors(first, second, border_brightness)
    return DominantColors(second, first, border_brightness)
