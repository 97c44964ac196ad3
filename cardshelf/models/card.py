"""
Card record models.

Decoded straight from a Scryfall card-search export. Every nested
sub-record is optional as a whole and every leaf inside it is optional on
its own; absence is kept as ``None`` here and only turned into display
text by the projector in ``cardshelf.services.pricing``.
"""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class ImageURIs(_Record):
    """Named image variants, each an optional URL."""

    small: str | None = None
    normal: str | None = None
    large: str | None = None
    art_crop: str | None = None
    border_crop: str | None = None
    png: str | None = None


class Prices(_Record):
    """Price points as decimal strings, exactly as exported."""

    usd: str | None = None
    usd_foil: str | None = None
    usd_etched: str | None = None
    eur: str | None = None
    eur_foil: str | None = None
    tix: str | None = None


class Legalities(_Record):
    """Format name -> legality status ("legal", "not_legal", "banned", ...)."""

    standard: str | None = None
    future: str | None = None
    historic: str | None = None
    gladiator: str | None = None
    pioneer: str | None = None
    explorer: str | None = None
    modern: str | None = None
    legacy: str | None = None
    pauper: str | None = None
    vintage: str | None = None
    penny: str | None = None
    commander: str | None = None
    oathbreaker: str | None = None
    brawl: str | None = None
    historicbrawl: str | None = None
    alchemy: str | None = None
    paupercommander: str | None = None
    duel: str | None = None
    oldschool: str | None = None
    premodern: str | None = None
    predh: str | None = None


class Card(_Record):
    """
    One catalog entry.

    Equality and hashing use ``id`` only, so two decodes of the same
    printing compare equal even if their prices differ.

    Attributes:
        id: Scryfall printing ID
        name: Display name
        type_line: Type classification (e.g., "Creature — Human Wizard")
        oracle_text: Rules text, may be empty
        flavor_text: Flavor text, shown after the rules text
        mana_cost: Token string such as "{1}{W}"
        collector_number: Collector number within the set, may carry a suffix
    """

    id: UUID
    name: str = Field(min_length=1)
    type_line: str
    oracle_text: str
    collector_number: str
    flavor_text: str | None = None
    mana_cost: str | None = None
    image_uris: ImageURIs | None = None
    prices: Prices | None = None
    legalities: Legalities | None = None
    set_name: str | None = None
    rarity: str | None = None
    lang: str | None = None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class CardList(_Record):
    """Envelope of a card-search export."""

    object: str
    total_cards: int = Field(strict=True)
    has_more: bool = Field(strict=True)
    data: list[Card]
