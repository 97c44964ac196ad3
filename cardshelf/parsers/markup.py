"""
Rules-text markup renderer.

Turns card text into a flat list of styled spans in one left-to-right
scan. Two mutually exclusive modes:

- Reminder mode: ``( ... )`` groups become ALTERNATE (italic) spans.
- Symbol mode: ``{X}`` tokens become GLYPH spans looked up in a SymbolTable.

Nothing here raises on odd input. Unterminated groups and tokens pass
through as plain text; a token with no glyph becomes a visible
MISSING_GLYPH span and a RenderMarkupWarning.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from cardshelf.models.card import Card
from cardshelf.models.failure import RenderMarkupWarning
from cardshelf.parsers.symbols import SymbolTable

logger = logging.getLogger(__name__)

MISSING_SYMBOL_MARKER = "[missing symbol: {symbol}]"

# Line terminators; a reminder group never spans one
LINE_BREAKS = frozenset("\n\x0b\x0c\r\x85\u2028\u2029")


class SpanKind(str, Enum):
    PLAIN = "plain"
    ALTERNATE = "alternate"
    GLYPH = "glyph"
    MISSING_GLYPH = "missing_glyph"


class RenderMode(str, Enum):
    REMINDER = "reminder"
    SYMBOLS = "symbols"


@dataclass(frozen=True, slots=True)
class Span:
    """
    One run of rendered text.

    Attributes:
        kind: How the run is displayed
        text: Visible text (the raw token for GLYPH spans, the marker for MISSING_GLYPH)
        glyph: Glyph identifier for GLYPH spans
        symbol: Token interior for GLYPH and MISSING_GLYPH spans
    """

    kind: SpanKind
    text: str
    glyph: str | None = None
    symbol: str | None = None

    @classmethod
    def plain(cls, text: str) -> "Span":
        return cls(SpanKind.PLAIN, text)

    @classmethod
    def alternate(cls, text: str) -> "Span":
        return cls(SpanKind.ALTERNATE, text)

    @classmethod
    def glyph_ref(cls, glyph: str, symbol: str) -> "Span":
        return cls(SpanKind.GLYPH, f"{{{symbol}}}", glyph=glyph, symbol=symbol)

    @classmethod
    def missing(cls, symbol: str) -> "Span":
        return cls(
            SpanKind.MISSING_GLYPH,
            MISSING_SYMBOL_MARKER.format(symbol=symbol),
            symbol=symbol,
        )


@dataclass
class _SpanBuilder:
    """Accumulates spans, coalescing neighbouring plain text only."""

    spans: list[Span] = field(default_factory=list)
    _pending: list[str] = field(default_factory=list)

    def text(self, chunk: str) -> None:
        if chunk:
            self._pending.append(chunk)

    def emit(self, span: Span) -> None:
        self._flush()
        self.spans.append(span)

    def build(self) -> list[Span]:
        self._flush()
        return self.spans

    def _flush(self) -> None:
        if self._pending:
            self.spans.append(Span.plain("".join(self._pending)))
            self._pending.clear()


def render_reminder_text(text: str, include_parens: bool = True) -> list[Span]:
    """
    Mark parenthesized reminder text as ALTERNATE.

    A group opens at ``(`` and closes at the first following ``)``; groups
    do not nest and do not cross a line break. An opening paren with no
    close on the same line is plain text.

    Args:
        text: Rules text
        include_parens: Whether the parentheses belong to the ALTERNATE span.
            When False they stay in the surrounding plain text.

    Returns:
        Spans in text order; empty for empty input
    """
    out = _SpanBuilder()
    i = 0
    n = len(text)

    while i < n:
        open_at = text.find("(", i)
        if open_at == -1:
            out.text(text[i:])
            break

        close_at = _find_on_line(text, ")", open_at + 1)
        if close_at == -1:
            # Unterminated on this line: everything up to the break is plain
            line_end = _line_end(text, open_at)
            stop = n if line_end == -1 else line_end + 1
            out.text(text[i:stop])
            i = stop
            continue

        out.text(text[i:open_at])
        if include_parens:
            out.emit(Span.alternate(text[open_at : close_at + 1]))
        else:
            out.text("(")
            inner = text[open_at + 1 : close_at]
            if inner:
                out.emit(Span.alternate(inner))
            out.text(")")
        i = close_at + 1

    return out.build()


def render_symbols(
    text: str,
    symbols: SymbolTable,
    warnings: list[RenderMarkupWarning] | None = None,
) -> list[Span]:
    """
    Replace ``{X}`` tokens with glyph references.

    Args:
        text: Token string such as a mana cost ("{1}{W}")
        symbols: Symbol -> glyph table
        warnings: If given, receives a RenderMarkupWarning per unmapped symbol

    Returns:
        Spans in text order; empty for empty input
    """
    out = _SpanBuilder()
    i = 0
    n = len(text)

    while i < n:
        open_at = text.find("{", i)
        if open_at == -1:
            out.text(text[i:])
            break

        close_at = text.find("}", open_at + 1)
        if close_at == -1:
            out.text(text[i:])
            break

        symbol = text[open_at + 1 : close_at]
        if not symbol:
            out.text(text[i : close_at + 1])
            i = close_at + 1
            continue

        out.text(text[i:open_at])
        glyph = symbols.glyph_for(symbol)
        if glyph is None:
            warning = RenderMarkupWarning(symbol=symbol, offset=open_at)
            logger.warning("No glyph for symbol {%s} at offset %d", symbol, open_at)
            if warnings is not None:
                warnings.append(warning)
            out.emit(Span.missing(symbol))
        else:
            out.emit(Span.glyph_ref(glyph, symbol))
        i = close_at + 1

    return out.build()


def _find_on_line(text: str, char: str, start: int) -> int:
    """Index of ``char`` at or after ``start`` before the next line break, else -1."""
    for j in range(start, len(text)):
        c = text[j]
        if c == char:
            return j
        if c in LINE_BREAKS:
            return -1
    return -1


def _line_end(text: str, start: int) -> int:
    """Index of the first line break at or after ``start``, else -1."""
    for j in range(start, len(text)):
        if text[j] in LINE_BREAKS:
            return j
    return -1


def missing_symbols(spans: list[Span]) -> list[str]:
    """Symbols that rendered as missing-glyph markers, in order."""
    return [s.symbol for s in spans if s.kind is SpanKind.MISSING_GLYPH and s.symbol is not None]


def compose_rules_text(card: Card) -> str:
    """Oracle text, then a blank line and the flavor text when there is any."""
    if card.flavor_text:
        return f"{card.oracle_text}\n\n{card.flavor_text}"
    return card.oracle_text


class MarkupRenderer:
    """
    Renderer bound to a symbol table and a parenthesis policy.

    Args:
        symbols: Symbol -> glyph table. Defaults to the packaged table.
        include_parens: Whether reminder spans include their parentheses
    """

    def __init__(self, symbols: SymbolTable | None = None, include_parens: bool = True):
        self.symbols = symbols if symbols is not None else SymbolTable.load()
        self.include_parens = include_parens

    def render(
        self,
        text: str,
        mode: RenderMode = RenderMode.REMINDER,
        warnings: list[RenderMarkupWarning] | None = None,
    ) -> list[Span]:
        if mode is RenderMode.SYMBOLS:
            return render_symbols(text, self.symbols, warnings)
        return render_reminder_text(text, self.include_parens)

    def render_rules(self, card: Card) -> list[Span]:
        return self.render(compose_rules_text(card), RenderMode.REMINDER)

    def render_mana_cost(
        self,
        card: Card,
        warnings: list[RenderMarkupWarning] | None = None,
    ) -> list[Span]:
        if not card.mana_cost:
            return []
        return self.render(card.mana_cost, RenderMode.SYMBOLS, warnings)
