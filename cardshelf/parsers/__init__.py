from cardshelf.parsers.catalog import (
    CatalogLoadResult,
    ResourceBundle,
    decode_catalog,
    load_catalog,
    load_catalog_or_empty,
)
from cardshelf.parsers.markup import (
    MarkupRenderer,
    RenderMode,
    Span,
    SpanKind,
    compose_rules_text,
    missing_symbols,
    render_reminder_text,
    render_symbols,
)
from cardshelf.parsers.symbols import SymbolTable

__all__ = [
    "CatalogLoadResult",
    "MarkupRenderer",
    "RenderMode",
    "ResourceBundle",
    "Span",
    "SpanKind",
    "SymbolTable",
    "compose_rules_text",
    "decode_catalog",
    "load_catalog",
    "load_catalog_or_empty",
    "missing_symbols",
    "render_reminder_text",
    "render_symbols",
]
