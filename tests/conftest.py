import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from cardshelf.models.catalog import Catalog
from cardshelf.parsers.catalog import load_catalog
from cardshelf.parsers.markup import MarkupRenderer
from cardshelf.parsers.symbols import SymbolTable

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_catalog_path() -> Path:
    return FIXTURES / "catalog_sample.json"


@pytest.fixture
def sample_catalog_doc(sample_catalog_path: Path) -> dict[str, Any]:
    """Raw export document, for tests that need to tweak it before decoding."""
    with open(sample_catalog_path, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def sample_catalog(sample_catalog_path: Path) -> Catalog:
    """Five cards: two Serra Angels differing only by case, sparse optional data."""
    return load_catalog(sample_catalog_path)


@pytest.fixture
def minimal_symbols() -> SymbolTable:
    return SymbolTable({"1": "one-glyph", "W": "white-glyph"})


@pytest.fixture
def renderer() -> MarkupRenderer:
    """Renderer with the packaged symbol table and parentheses kept in reminder spans."""
    return MarkupRenderer(SymbolTable.load())


def _card_doc(**overrides: Any) -> dict[str, Any]:
    """A minimal valid card record."""
    doc: dict[str, Any] = {
        "id": "99999999-9999-4999-8999-999999999999",
        "name": "Test Card",
        "type_line": "Artifact",
        "oracle_text": "",
        "collector_number": "1",
    }
    doc.update(overrides)
    return doc


@pytest.fixture
def card_doc() -> Callable[..., dict[str, Any]]:
    """Factory for minimal valid card records; keyword arguments override fields."""
    return _card_doc
