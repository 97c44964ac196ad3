"""
cardshelf services.

Search, projection, navigation and view composition over a loaded catalog.
"""

from cardshelf.services.detail import (
    CardDetail,
    CardDetailSession,
    CardTile,
    DetailOptions,
    LegalityRow,
    build_card_detail,
    build_grid,
)
from cardshelf.services.images import ImagePhase, ImageVariant, image_url, initial_phase
from cardshelf.services.navigator import CardNavigator, SwipeDirection, SwipeGesture
from cardshelf.services.pricing import (
    FORMAT_LABELS,
    FORMATS,
    PricingSummary,
    legalities_of,
    legality_badge,
    price_label,
    project_pricing,
)
from cardshelf.services.search import (
    SortDirection,
    SortKey,
    collector_number_key,
    display_sequence,
    filter_cards,
    sort_cards,
)

__all__ = [
    "FORMATS",
    "FORMAT_LABELS",
    "CardDetail",
    "CardDetailSession",
    "CardNavigator",
    "CardTile",
    "DetailOptions",
    "ImagePhase",
    "ImageVariant",
    "LegalityRow",
    "PricingSummary",
    "SortDirection",
    "SortKey",
    "SwipeDirection",
    "SwipeGesture",
    "build_card_detail",
    "build_grid",
    "collector_number_key",
    "display_sequence",
    "filter_cards",
    "image_url",
    "initial_phase",
    "legalities_of",
    "legality_badge",
    "price_label",
    "project_pricing",
    "sort_cards",
]
