import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from cardshelf.models.failure import (
    DecodeError,
    FailureKind,
    SourceNotFoundError,
    SourceUnreadableError,
)
from cardshelf.parsers.catalog import (
    ResourceBundle,
    decode_catalog,
    load_catalog,
    load_catalog_or_empty,
)
from cardshelf.services.pricing import project_pricing

CardDoc = Callable[..., dict[str, Any]]

OPTIONAL_CARD_FIELDS = [
    "flavor_text",
    "mana_cost",
    "image_uris",
    "prices",
    "legalities",
    "set_name",
    "rarity",
    "lang",
]


def _envelope(cards: list[dict[str, Any]]) -> str:
    return json.dumps(
        {"object": "list", "total_cards": len(cards), "has_more": False, "data": cards}
    )


class TestDecodeCatalog:
    def test_decodes_cards_in_order(self, sample_catalog_path: Path) -> None:
        catalog = decode_catalog(sample_catalog_path.read_bytes())

        assert [c.name for c in catalog] == [
            "Serra Angel",
            "Ancestral Recall",
            "serra angel",
            "Lightning Bolt",
            "Counterspell",
        ]

    def test_accepts_text(self, card_doc: CardDoc) -> None:
        catalog = decode_catalog(_envelope([card_doc()]))

        assert len(catalog) == 1

    def test_empty_data(self) -> None:
        catalog = decode_catalog(_envelope([]))

        assert len(catalog) == 0

    def test_malformed_json_raises_decode_error(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_catalog(b'{"object": "list", "data": [')

        assert isinstance(exc_info.value.cause, ValidationError)
        assert exc_info.value.__cause__ is exc_info.value.cause
        assert exc_info.value.kind == FailureKind.DECODE_FAILED

    def test_missing_required_field_raises_decode_error(self, card_doc: CardDoc) -> None:
        doc = card_doc()
        del doc["name"]

        with pytest.raises(DecodeError):
            decode_catalog(_envelope([doc]))

    def test_type_mismatch_raises_decode_error(self, card_doc: CardDoc) -> None:
        with pytest.raises(DecodeError):
            decode_catalog(_envelope([card_doc(prices={"usd": 1.5})]))

    def test_missing_envelope_field_raises_decode_error(self) -> None:
        with pytest.raises(DecodeError):
            decode_catalog(b'{"object": "list", "total_cards": 0, "data": []}')

    def test_error_mentions_location(self) -> None:
        with pytest.raises(DecodeError, match="cards.json"):
            decode_catalog(b"not json", location="cards.json")


class TestOptionalFieldOmission:
    @pytest.mark.parametrize("field", OPTIONAL_CARD_FIELDS)
    def test_decode_and_project_without_field(
        self, sample_catalog_doc: dict[str, Any], field: str
    ) -> None:
        for card in sample_catalog_doc["data"]:
            card.pop(field, None)

        catalog = decode_catalog(json.dumps(sample_catalog_doc))

        for card in catalog:
            summary = project_pricing(card)
            assert isinstance(summary.usd, str)
            assert isinstance(summary.eur, str)
            assert isinstance(summary.tix, str)

    def test_decode_and_project_with_every_leaf_null(self, card_doc: CardDoc) -> None:
        doc = card_doc(
            image_uris={"small": None, "large": None},
            prices={k: None for k in ("usd", "usd_foil", "usd_etched", "eur", "eur_foil", "tix")},
            legalities={"standard": None},
            set_name=None,
            rarity=None,
            lang=None,
        )

        card = decode_catalog(_envelope([doc]))[0]
        summary = project_pricing(card)

        assert summary.usd == ""
        assert summary.usd_foil is None
        assert summary.set == ""


class TestLoadCatalog:
    def test_loads_file(self, sample_catalog_path: Path) -> None:
        catalog = load_catalog(sample_catalog_path)

        assert len(catalog) == 5

    def test_missing_file_raises_source_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(SourceNotFoundError) as exc_info:
            load_catalog(tmp_path / "missing.json")

        assert exc_info.value.kind == FailureKind.NOT_FOUND

    def test_parent_is_a_file_raises_source_not_found(self, tmp_path: Path) -> None:
        parent = tmp_path / "file"
        parent.write_text("", encoding="utf-8")

        with pytest.raises(SourceNotFoundError):
            load_catalog(parent / "cards.json")


class TestResourceBundle:
    def test_reads_named_resource(self, tmp_path: Path) -> None:
        (tmp_path / "cards.json").write_text("{}", encoding="utf-8")

        assert ResourceBundle(tmp_path).read("cards") == b"{}"

    def test_missing_resource(self, tmp_path: Path) -> None:
        with pytest.raises(SourceNotFoundError, match="nope.json"):
            ResourceBundle(tmp_path).read("nope")

    def test_root_is_a_file(self, tmp_path: Path) -> None:
        root = tmp_path / "file"
        root.write_text("not a directory", encoding="utf-8")

        with pytest.raises(SourceNotFoundError):
            ResourceBundle(root).read("WOT-Scryfall")

    def test_unreadable_resource(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "cards.json").write_text("{}", encoding="utf-8")

        def deny(self: Path) -> bytes:
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "read_bytes", deny)

        with pytest.raises(SourceUnreadableError) as exc_info:
            ResourceBundle(tmp_path).read("cards")

        assert exc_info.value.kind == FailureKind.UNREADABLE
        assert isinstance(exc_info.value.cause, PermissionError)


class TestLoadCatalogOrEmpty:
    def test_loads_packaged_snapshot(self) -> None:
        result = load_catalog_or_empty()

        assert result.ok
        assert len(result.catalog) > 0

    def test_missing_resource_gives_empty_catalog(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR):
            result = load_catalog_or_empty(ResourceBundle(tmp_path), "WOT-Scryfall")

        assert not result.ok
        assert len(result.catalog) == 0
        assert result.failure is not None
        assert result.failure.kind == FailureKind.NOT_FOUND
        assert "Failed to load card catalog" in caplog.text

    def test_bundle_root_is_a_file_gives_empty_catalog(self, tmp_path: Path) -> None:
        root = tmp_path / "file"
        root.write_text("not a directory", encoding="utf-8")

        result = load_catalog_or_empty(ResourceBundle(root), "WOT-Scryfall")

        assert not result.ok
        assert len(result.catalog) == 0
        assert result.failure is not None
        assert result.failure.kind == FailureKind.NOT_FOUND

    def test_unreadable_resource_gives_empty_catalog(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "cards.json").write_text("{}", encoding="utf-8")

        def fail(self: Path) -> bytes:
            raise OSError(5, "Input/output error", str(self))

        monkeypatch.setattr(Path, "read_bytes", fail)

        result = load_catalog_or_empty(ResourceBundle(tmp_path), "cards")

        assert len(result.catalog) == 0
        assert result.failure is not None
        assert result.failure.kind == FailureKind.UNREADABLE
        assert result.failure.detail is not None
        assert "OSError" in result.failure.detail

    def test_bad_document_gives_empty_catalog(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text('{"data": "nope"}', encoding="utf-8")

        result = load_catalog_or_empty(ResourceBundle(tmp_path), "broken")

        assert len(result.catalog) == 0
        assert result.failure is not None
        assert result.failure.kind == FailureKind.DECODE_FAILED
        assert result.failure.detail is not None

    def test_success_is_logged(
        self, sample_catalog_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        bundle = ResourceBundle(sample_catalog_path.parent)

        with caplog.at_level(logging.INFO):
            result = load_catalog_or_empty(bundle, "catalog_sample")

        assert result.ok
        assert "Loaded 5 cards" in caplog.text
