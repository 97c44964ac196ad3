"""
Catalog loader.

Decodes a bundled Scryfall card-search export into a Catalog. The snapshot
is a local file read once at startup; there is no network access here.

Export shape: {"object": ..., "total_cards": ..., "has_more": ..., "data": [...]}
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from cardshelf.config import settings
from cardshelf.models.card import CardList
from cardshelf.models.catalog import Catalog
from cardshelf.models.failure import (
    CatalogError,
    DecodeError,
    FailureDetail,
    SourceNotFoundError,
    SourceUnreadableError,
)

logger = logging.getLogger(__name__)


def _read_source(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
        raise SourceNotFoundError(str(path)) from e
    except OSError as e:
        raise SourceUnreadableError(str(path), e) from e


class ResourceBundle:
    """
    Read-only access to bundled resources by logical name.

    Args:
        root: Directory holding the resources. Defaults to the configured data dir.
    """

    def __init__(self, root: Path | None = None):
        self.root = root if root is not None else settings.data_dir

    def path_for(self, name: str, extension: str = "json") -> Path:
        return self.root / f"{name}.{extension}" if extension else self.root / name

    def read(self, name: str, extension: str = "json") -> bytes:
        """
        Read a resource.

        Raises:
            SourceNotFoundError: If the resource does not exist
            SourceUnreadableError: If the resource exists but cannot be read
        """
        return _read_source(self.path_for(name, extension))


def decode_catalog(blob: bytes | str, location: str | None = None) -> Catalog:
    """
    Decode a card-search export.

    Args:
        blob: Raw JSON document
        location: Where the blob came from, for error messages

    Returns:
        Catalog with cards in export order

    Raises:
        DecodeError: On malformed JSON, a missing required field or a type mismatch
    """
    try:
        card_list = CardList.model_validate_json(blob)
    except ValidationError as e:
        raise DecodeError(e, location) from e

    return Catalog.from_card_list(card_list)


def load_catalog(path: Path) -> Catalog:
    """
    Load a catalog from a file.

    Raises:
        SourceNotFoundError: If the file doesn't exist
        SourceUnreadableError: If the file can't be read
        DecodeError: If the file isn't a valid export
    """
    return decode_catalog(_read_source(path), str(path))


@dataclass(frozen=True, slots=True)
class CatalogLoadResult:
    """Catalog plus the failure that emptied it, if any."""

    catalog: Catalog
    failure: FailureDetail | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def load_catalog_or_empty(
    bundle: ResourceBundle | None = None,
    name: str | None = None,
) -> CatalogLoadResult:
    """
    Load the bundled catalog, degrading to an empty one on failure.

    Catalog errors never escape: the grid simply shows zero results and the
    failure is logged and returned for display.

    Args:
        bundle: Resource bundle to read from. Defaults to the configured data dir.
        name: Logical resource name. Defaults to the configured catalog resource.
    """
    bundle = bundle or ResourceBundle()
    name = name or settings.catalog_resource

    try:
        blob = bundle.read(name)
        catalog = decode_catalog(blob, str(bundle.path_for(name)))
    except CatalogError as e:
        logger.error("Failed to load card catalog: %s (%s)", e.message, e.detail or e.kind.value)
        return CatalogLoadResult(catalog=Catalog(), failure=e.to_failure())

    logger.info("Loaded %d cards from %s", len(catalog), name)
    if catalog.has_more:
        logger.warning("Catalog %s is a truncated export (has_more=true)", name)

    return CatalogLoadResult(catalog=catalog)
