"""Color primitives and metrics used by dominant color extraction."""

from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class RGB:
    """An immutable RGB color with channels in 0-255."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"RGB channel {name}={value} outside 0-255")

    @classmethod
    def of(cls, r: float, g: float, b: float) -> RGB:
        """Build an RGB from arbitrary numbers, clamping and truncating each channel."""
        return cls(*(int(max(0, min(255, c))) for c in (r, g, b)))

    def scaled(self, factor: float) -> RGB:
        """Multiply every channel by ``factor``, truncating toward zero."""
        return RGB.of(self.r * factor, self.g * factor, self.b * factor)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict[str, int]:
        return {"r": self.r, "g": self.g, "b": self.b}


DEFAULT_RGB = RGB(255, 255, 255)


@dataclass(frozen=True)
class DominantColors:
    """Text color, background overlay color and border brightness of an image.

    Args:
        primary: The brighter of the two colors, used for text.
        secondary: The background overlay color.
        border_brightness: Weighted brightness of the image edges, 0-1.
    """

    primary: RGB
    secondary: RGB
    border_brightness: float

    def to_dict(self) -> dict:
        return {
            "primary": self.primary.to_dict(),
            "secondary": self.secondary.to_dict(),
            "averageBrightness": self.border_brightness,
        }


FALLBACK = DominantColors(DEFAULT_RGB, DEFAULT_RGB, 0.0)


def perceived_brightness(rgb: RGB) -> float:
    """Brightness as seen by a human observer, based on the HSP color model.

    Returns:
        A value between 0 (black) and 1 (white).
    """
    return (
        math.sqrt(0.299 * rgb.r**2 + 0.587 * rgb.g**2 + 0.114 * rgb.b**2) / 255
    )


def colorfulness(rgb: RGB) -> float:
    """Distance of a color from gray, measured as its HSV saturation (0-1)."""
    _, saturation, _ = colorsys.rgb_to_hsv(rgb.r / 255, rgb.g / 255, rgb.b / 255)
    return saturation


def normalize_for_readability(rgb: RGB) -> RGB:
    """Raise a color to full brightness while keeping its hue and saturation.

    The strongest channel ends up at 255, so dark artwork colors still read
    as text on the dimmed background. Black has no hue to keep and turns
    into the default text color. Normalizing twice changes nothing.
    """
    strongest = max(rgb.as_tuple())
    if strongest == 255:
        return rgb
    if strongest == 0:
        return DEFAULT_RGB
    factor = 255 / strongest
    return RGB.of(*(round(c * factor) for c in rgb.as_tuple()))


def normalize_colors(colors: DominantColors) -> DominantColors:
    """Apply readability normalization to the text color of a result."""
    return DominantColors(
        primary=normalize_for_readability(colors.primary),
        secondary=colors.secondary,
        border_brightness=colors.border_brightness,
    )
