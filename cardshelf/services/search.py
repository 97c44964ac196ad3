"""
Catalog search and sort.

Views are recomputed from scratch on every keystroke or toggle; nothing is
cached between calls. Every sort key ends with the card's original catalog
position, so keys are total orders: sorting is idempotent, descending is
the exact reverse of ascending, and filtering before or after sorting gives
the same result.
"""

import re
import unicodedata
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

from cardshelf.models.card import Card
from cardshelf.models.catalog import Catalog

_LEADING_DIGITS = re.compile(r"(\d+)(.*)", re.DOTALL)


class SortKey(str, Enum):
    NAME = "name"
    COLLECTOR_NUMBER = "collector_number"


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    def toggled(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


def fold(text: str) -> str:
    """
    Normalize text for case-insensitive comparison.

    NFKC then full Unicode case folding. Both are locale-independent, so
    results match the invariant locale everywhere (e.g. "ß" matches "ss").
    """
    return unicodedata.normalize("NFKC", text).casefold()


def filter_cards(cards: Iterable[Card], query: str) -> list[Card]:
    """
    Cards whose name contains ``query`` case-insensitively, in input order.

    An empty query returns every card.
    """
    if not query:
        return list(cards)
    needle = fold(query)
    return [card for card in cards if needle in fold(card.name)]


def collector_number_key(collector_number: str) -> tuple[Any, ...]:
    """
    Numeric-aware key for collector numbers.

    Leading digits compare as integers and any suffix compares
    case-insensitively, so "2" < "10" < "10a" < "10b" < "123". Numbers with
    no leading digit ("A1", "★") sort after every numeric one, lexically.
    """
    match = _LEADING_DIGITS.match(collector_number)
    if match:
        return (0, int(match.group(1)), fold(match.group(2)), collector_number)
    return (1, 0, fold(collector_number), collector_number)


def _key_for(catalog: Catalog, key: SortKey) -> Callable[[Card], tuple[Any, ...]]:
    def position(card: Card) -> int:
        pos = catalog.position_of(card.id)
        # Cards from outside the catalog go last, in input order (sorted() is stable)
        return len(catalog) if pos is None else pos

    if key is SortKey.COLLECTOR_NUMBER:
        return lambda card: (collector_number_key(card.collector_number), position(card))
    return lambda card: (fold(card.name), position(card))


def sort_cards(
    catalog: Catalog,
    key: SortKey = SortKey.NAME,
    direction: SortDirection = SortDirection.ASCENDING,
    cards: Iterable[Card] | None = None,
) -> list[Card]:
    """
    Sort cards by name or collector number.

    Args:
        catalog: Catalog that defines the tie-break order
        key: Sort key
        direction: Ascending or descending
        cards: Subsequence to sort. Defaults to the whole catalog.

    Returns:
        New list; the catalog is untouched.
    """
    ordered = sorted(catalog if cards is None else cards, key=_key_for(catalog, key))
    if direction is SortDirection.DESCENDING:
        ordered.reverse()
    return ordered


def display_sequence(
    catalog: Catalog,
    query: str = "",
    key: SortKey = SortKey.NAME,
    direction: SortDirection = SortDirection.ASCENDING,
) -> list[Card]:
    """The grid's current contents: filter by name, then sort."""
    return sort_cards(catalog, key, direction, cards=filter_cards(catalog, query))
