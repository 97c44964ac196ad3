from cardshelf.models.card import Card, CardList, ImageURIs, Legalities, Prices
from cardshelf.models.catalog import Catalog
from cardshelf.models.failure import (
    CatalogError,
    DecodeError,
    FailureDetail,
    FailureKind,
    RenderMarkupWarning,
    SourceNotFoundError,
    SourceUnreadableError,
)

__all__ = [
    "Card",
    "CardList",
    "Catalog",
    "CatalogError",
    "DecodeError",
    "FailureDetail",
    "FailureKind",
    "ImageURIs",
    "Legalities",
    "Prices",
    "RenderMarkupWarning",
    "SourceNotFoundError",
    "SourceUnreadableError",
]
