"""
Symbol -> glyph table for mana-cost rendering.

The table is data, not code: the packaged default lives in
``data/symbols.json`` and any other JSON object of string -> string can be
loaded in its place.
"""

import json
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from cardshelf.config import PACKAGE_DATA_DIR, settings

DEFAULT_SYMBOLS_PATH = PACKAGE_DATA_DIR / "symbols.json"


class SymbolTable(Mapping[str, str]):
    """Immutable mapping of token symbol (e.g. "W") to glyph identifier."""

    def __init__(self, entries: Mapping[str, str] | None = None):
        self._entries = MappingProxyType(dict(entries or {}))

    @classmethod
    def from_json(cls, text: str | bytes) -> "SymbolTable":
        """
        Build a table from a JSON object.

        Raises:
            ValueError: If the document is not an object of string values
        """
        data = json.loads(text)
        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            raise ValueError("Symbol table must be a JSON object mapping strings to strings")
        return cls(data)

    @classmethod
    def load(cls, path: Path | None = None) -> "SymbolTable":
        """Load a table from disk; defaults to the configured or packaged table."""
        if path is None:
            path = settings.symbol_table_path or DEFAULT_SYMBOLS_PATH
        return cls.from_json(path.read_bytes())

    def glyph_for(self, symbol: str) -> str | None:
        return self._entries.get(symbol)

    def __getitem__(self, symbol: str) -> str:
        return self._entries[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SymbolTable({dict(self._entries)!r})"
