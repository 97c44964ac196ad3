"""
Detail and grid view models.

One parameterized detail screen. Swipe paging, mana glyphs and the
two-column legality layout are flags on DetailOptions rather than separate
screens.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from cardshelf.config import Settings, settings
from cardshelf.models.card import Card
from cardshelf.models.failure import RenderMarkupWarning
from cardshelf.parsers.markup import MarkupRenderer, Span
from cardshelf.parsers.symbols import SymbolTable
from cardshelf.services.images import ImagePhase, ImageVariant, image_url, initial_phase
from cardshelf.services.navigator import CardNavigator, SwipeGesture
from cardshelf.services.pricing import (
    FORMAT_LABELS,
    PricingSummary,
    legalities_of,
    legality_badge,
    price_label,
    project_pricing,
)


@dataclass(frozen=True, slots=True)
class DetailOptions:
    swipe_enabled: bool = True
    swipe_threshold: float = 100.0
    mana_glyphs_enabled: bool = True
    legality_columns: int = 2
    include_reminder_parens: bool = True

    def __post_init__(self) -> None:
        if self.legality_columns < 1:
            raise ValueError(f"legality_columns must be at least 1, got {self.legality_columns}")

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> "DetailOptions":
        if config is None:
            config = settings
        return cls(
            swipe_enabled=config.swipe_enabled,
            swipe_threshold=config.swipe_threshold,
            mana_glyphs_enabled=config.mana_glyphs_enabled,
            legality_columns=config.legality_columns,
            include_reminder_parens=config.include_reminder_parens,
        )

    def make_renderer(self, symbols: SymbolTable | None = None) -> MarkupRenderer:
        return MarkupRenderer(symbols, include_parens=self.include_reminder_parens)

    def swipe_gesture(self) -> SwipeGesture | None:
        return SwipeGesture(self.swipe_threshold) if self.swipe_enabled else None


@dataclass(frozen=True, slots=True)
class LegalityRow:
    format: str
    label: str
    status: str

    @property
    def badge(self) -> str:
        return legality_badge(self.status)


@dataclass(frozen=True, slots=True)
class CardDetail:
    """Everything the detail screen shows for one card."""

    name: str
    type_line: str
    rules: list[Span]
    mana_cost: list[Span]
    header_image_url: str | None
    large_image_url: str | None
    price_label: str
    pricing: PricingSummary
    legalities: list[LegalityRow]
    legality_columns: list[list[LegalityRow]]
    warnings: list[RenderMarkupWarning] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class CardTile:
    """One cell of the card grid."""

    name: str
    image_url: str | None
    image_phase: ImagePhase


def split_columns(rows: list[LegalityRow], columns: int) -> list[list[LegalityRow]]:
    """Lay rows out row-major across ``columns`` columns."""
    return [rows[i::columns] for i in range(columns)]


def build_card_detail(
    card: Card,
    renderer: MarkupRenderer,
    options: DetailOptions | None = None,
) -> CardDetail:
    options = options or DetailOptions()
    warnings: list[RenderMarkupWarning] = []

    mana_cost: list[Span] = []
    if options.mana_glyphs_enabled:
        mana_cost = renderer.render_mana_cost(card, warnings)

    rows = [
        LegalityRow(format=fmt, label=FORMAT_LABELS[fmt], status=status)
        for fmt, status in legalities_of(card).items()
    ]

    return CardDetail(
        name=card.name,
        type_line=card.type_line,
        rules=renderer.render_rules(card),
        mana_cost=mana_cost,
        header_image_url=image_url(card, ImageVariant.ART_CROP),
        large_image_url=image_url(card, ImageVariant.LARGE),
        price_label=price_label(card),
        pricing=project_pricing(card),
        legalities=rows,
        legality_columns=split_columns(rows, options.legality_columns),
        warnings=warnings,
    )


def build_grid(cards: Iterable[Card]) -> list[CardTile]:
    tiles = []
    for card in cards:
        url = image_url(card, ImageVariant.SMALL)
        tiles.append(CardTile(name=card.name, image_url=url, image_phase=initial_phase(url)))
    return tiles


class CardDetailSession:
    """
    Detail screen state: a navigator plus the rendered current card.

    Args:
        cards: Displayed sequence the detail screen was opened from
        renderer: Markup renderer
        options: Feature flags
        start: Index of the tapped card
    """

    def __init__(
        self,
        cards: Iterable[Card],
        renderer: MarkupRenderer,
        options: DetailOptions | None = None,
        start: int = 0,
    ):
        self.renderer = renderer
        self.options = options or DetailOptions()
        self.navigator = CardNavigator(list(cards), start)
        self.gesture = self.options.swipe_gesture()

    @property
    def detail(self) -> CardDetail | None:
        card = self.navigator.current
        if card is None:
            return None
        return build_card_detail(card, self.renderer, self.options)

    def swipe(self, dx: float) -> bool:
        """Handle the end of a horizontal drag. Ignored when swiping is disabled."""
        if self.gesture is None:
            return False
        return self.gesture.apply(self.navigator, dx)
