"""Exceptions raised while turning artwork into dominant colors."""


class ArtworkError(Exception):
    """Base class for failures inside the dominant color pipeline."""


class ImageFetchError(ArtworkError):
    """The image could not be downloaded, opened or decoded."""

    def __init__(self, image_id: str, reason: str) -> None:
        super().__init__(f"Could not load image {image_id!r}: {reason}")
        self.image_id = image_id


class QuantizationError(ArtworkError):
    """The color clustering step failed for a decoded image."""
