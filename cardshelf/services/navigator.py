"""
Detail-screen cursor.

Tracks the current card within the displayed (filtered and sorted)
sequence. Moving past either end, or jumping to a card that is filtered out
of the view, is a silent no-op.
"""

from collections.abc import Sequence
from enum import Enum
from uuid import UUID

from cardshelf.models.card import Card

DEFAULT_SWIPE_THRESHOLD = 100.0


class CardNavigator:
    """
    Cursor over a displayed card sequence.

    Args:
        cards: The sequence currently on screen
        start: Initial index. Clamped into range.
    """

    def __init__(self, cards: Sequence[Card], start: int = 0):
        self.cards = list(cards)
        self.current_index = min(max(start, 0), max(len(self.cards) - 1, 0))

    @property
    def current(self) -> Card | None:
        if not self.cards:
            return None
        return self.cards[self.current_index]

    @property
    def has_previous(self) -> bool:
        return self.current_index > 0

    @property
    def has_next(self) -> bool:
        return self.current_index < len(self.cards) - 1

    def previous(self) -> bool:
        """Step back one card. Returns whether the cursor moved."""
        if not self.has_previous:
            return False
        self.current_index -= 1
        return True

    def next(self) -> bool:
        """Step forward one card. Returns whether the cursor moved."""
        if not self.has_next:
            return False
        self.current_index += 1
        return True

    def jump_to(self, card_id: UUID) -> bool:
        """Move to the card with this ID if it is in the sequence."""
        for index, card in enumerate(self.cards):
            if card.id == card_id:
                self.current_index = index
                return True
        return False


class SwipeDirection(str, Enum):
    PREVIOUS = "previous"
    NEXT = "next"


class SwipeGesture:
    """
    Maps a horizontal drag to a navigator move.

    Dragging right past the threshold goes to the previous card, dragging
    left past it goes to the next one.
    """

    def __init__(self, threshold: float = DEFAULT_SWIPE_THRESHOLD):
        self.threshold = threshold

    def direction(self, dx: float) -> SwipeDirection | None:
        if dx > self.threshold:
            return SwipeDirection.PREVIOUS
        if dx < -self.threshold:
            return SwipeDirection.NEXT
        return None

    def apply(self, navigator: CardNavigator, dx: float) -> bool:
        direction = self.direction(dx)
        if direction is SwipeDirection.PREVIOUS:
            return navigator.previous()
        if direction is SwipeDirection.NEXT:
            return navigator.next()
        return False
