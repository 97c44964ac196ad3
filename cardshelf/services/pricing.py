"""
Pricing and legality projection for the detail screen.

This is where absent source data becomes display text. The card model keeps
``None``; the projector decides what the user sees.
"""

from dataclasses import dataclass

from cardshelf.models.card import Card

# Display order of the legality list. Not the order of the source record.
FORMATS: tuple[str, ...] = (
    "standard",
    "future",
    "historic",
    "gladiator",
    "pioneer",
    "explorer",
    "modern",
    "legacy",
    "pauper",
    "vintage",
    "penny",
    "commander",
    "oathbreaker",
    "brawl",
    "historicbrawl",
    "alchemy",
    "paupercommander",
    "duel",
    "oldschool",
    "premodern",
    "predh",
)

FORMAT_LABELS: dict[str, str] = {
    "standard": "Standard",
    "future": "Future",
    "historic": "Historic",
    "gladiator": "Gladiator",
    "pioneer": "Pioneer",
    "explorer": "Explorer",
    "modern": "Modern",
    "legacy": "Legacy",
    "pauper": "Pauper",
    "vintage": "Vintage",
    "penny": "Penny",
    "commander": "Commander",
    "oathbreaker": "Oathbreaker",
    "brawl": "Brawl",
    "historicbrawl": "Historic Brawl",
    "alchemy": "Alchemy",
    "paupercommander": "Pauper Commander",
    "duel": "Duel",
    "oldschool": "Old School",
    "premodern": "Premodern",
    "predh": "Prismatic",
}

LEGAL = "legal"


@dataclass(frozen=True, slots=True)
class PricingSummary:
    """
    Display-ready pricing for one printing.

    Every field is a string except the foil prices, which stay None when
    there is no foil variant priced.
    """

    name: str
    set: str
    rarity: str
    language: str
    usd: str
    eur: str
    tix: str
    usd_foil: str | None = None
    eur_foil: str | None = None

    @property
    def title(self) -> str:
        return f"{self.set}: {self.name}"

    @property
    def subtitle(self) -> str:
        return f"#1 · {self.rarity} · {self.language} · Nonfoil/Foil"


def project_pricing(card: Card) -> PricingSummary:
    """Build the pricing summary, substituting "" for absent values."""
    prices = card.prices
    return PricingSummary(
        name=card.name,
        set=card.set_name or "",
        rarity=card.rarity or "",
        language=card.lang or "",
        usd=(prices.usd if prices else None) or "",
        eur=(prices.eur if prices else None) or "",
        tix=(prices.tix if prices else None) or "",
        usd_foil=prices.usd_foil if prices else None,
        eur_foil=prices.eur_foil if prices else None,
    )


def price_label(card: Card) -> str:
    """USD price for the large-image overlay, e.g. "$0.25" or "$N/A"."""
    usd = card.prices.usd if card.prices else None
    return f"${usd or 'N/A'}"


def legalities_of(card: Card) -> dict[str, str]:
    """
    Format -> status for the formats present on the card.

    Formats missing from the source are omitted rather than defaulted.
    Keys follow FORMATS order.
    """
    if card.legalities is None:
        return {}

    result: dict[str, str] = {}
    for fmt in FORMATS:
        status = getattr(card.legalities, fmt)
        if status is not None:
            result[fmt] = status
    return result


def legality_badge(status: str) -> str:
    return "LEGAL" if status == LEGAL else "NOT LEGAL"
