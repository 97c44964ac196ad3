"""
The in-memory catalog.

Built once per session by the loader and never written back. Search and
sort only ever produce new lists of the same Card objects.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from uuid import UUID

from cardshelf.models.card import Card, CardList


@dataclass(frozen=True, slots=True)
class Catalog:
    """
    Ordered, immutable sequence of cards.

    Attributes:
        cards: Cards in export order
        object: Envelope type reported by the export (informational)
        total_cards: Card count reported by the export (informational)
        has_more: Whether the export was truncated (informational)
    """

    cards: tuple[Card, ...] = ()
    object: str = "list"
    total_cards: int = 0
    has_more: bool = False
    _positions: dict[UUID, int] = field(
        default_factory=dict, init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        for index, card in enumerate(self.cards):
            # First occurrence wins if an export repeats an ID
            self._positions.setdefault(card.id, index)

    @classmethod
    def from_card_list(cls, card_list: CardList) -> "Catalog":
        return cls(
            cards=tuple(card_list.data),
            object=card_list.object,
            total_cards=card_list.total_cards,
            has_more=card_list.has_more,
        )

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    def __contains__(self, card: object) -> bool:
        return isinstance(card, Card) and card.id in self._positions

    def position_of(self, card_id: UUID) -> int | None:
        """Original export position of a card, or None if not in the catalog."""
        return self._positions.get(card_id)
