"""
Image URL selection.

Fetching, decoding and caching belong to the UI toolkit. The core only
picks a URL and says which phase a tile starts in.
"""

from enum import Enum

from cardshelf.models.card import Card


class ImageVariant(str, Enum):
    SMALL = "small"
    NORMAL = "normal"
    LARGE = "large"
    ART_CROP = "art_crop"
    BORDER_CROP = "border_crop"
    PNG = "png"


class ImagePhase(str, Enum):
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


def image_url(card: Card, variant: ImageVariant) -> str | None:
    if card.image_uris is None:
        return None
    return getattr(card.image_uris, variant.value)


def initial_phase(url: str | None) -> ImagePhase:
    """A missing or empty URL is a guaranteed failure; anything else starts loading."""
    if not url:
        return ImagePhase.FAILURE
    return ImagePhase.LOADING
