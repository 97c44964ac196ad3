from collections.abc import Callable
from typing import Any

from cardshelf.models.card import Card
from cardshelf.models.catalog import Catalog
from cardshelf.services.pricing import (
    FORMAT_LABELS,
    FORMATS,
    PricingSummary,
    legalities_of,
    legality_badge,
    price_label,
    project_pricing,
)

CardDoc = Callable[..., dict[str, Any]]


class TestProjectPricing:
    def test_full_record(self, sample_catalog: Catalog) -> None:
        summary = project_pricing(sample_catalog[0])

        assert summary == PricingSummary(
            name="Serra Angel",
            set="Dominaria United",
            rarity="uncommon",
            language="en",
            usd="0.12",
            eur="0.10",
            tix="0.02",
            usd_foil="0.40",
            eur_foil=None,
        )

    def test_no_prices_at_all(self, sample_catalog: Catalog) -> None:
        summary = project_pricing(sample_catalog[1])

        assert (summary.usd, summary.eur, summary.tix) == ("", "", "")
        assert summary.usd_foil is None
        assert summary.eur_foil is None
        assert summary.set == ""
        assert summary.language == ""
        assert summary.rarity == "rare"

    def test_empty_price_record(self, sample_catalog: Catalog) -> None:
        summary = project_pricing(sample_catalog[2])

        assert summary.usd == ""
        assert summary.usd_foil is None

    def test_null_leaf(self, sample_catalog: Catalog) -> None:
        summary = project_pricing(sample_catalog[3])

        assert summary.usd == ""
        assert summary.eur == "1.50"

    def test_display_lines(self, sample_catalog: Catalog) -> None:
        summary = project_pricing(sample_catalog[0])

        assert summary.title == "Dominaria United: Serra Angel"
        assert summary.subtitle == "#1 · uncommon · en · Nonfoil/Foil"


class TestPriceLabel:
    def test_with_usd(self, sample_catalog: Catalog) -> None:
        assert price_label(sample_catalog[0]) == "$0.12"

    def test_without_usd(self, sample_catalog: Catalog) -> None:
        assert price_label(sample_catalog[1]) == "$N/A"
        assert price_label(sample_catalog[3]) == "$N/A"


class TestLegalitiesOf:
    def test_single_format(self, card_doc: CardDoc) -> None:
        card = Card.model_validate(card_doc(legalities={"standard": "legal"}))

        assert legalities_of(card) == {"standard": "legal"}

    def test_absent_formats_are_omitted(self, sample_catalog: Catalog) -> None:
        legalities = legalities_of(sample_catalog[4])

        assert legalities == {"standard": "not_legal", "legacy": "legal"}
        assert "modern" not in legalities

    def test_fixed_display_order(self, card_doc: CardDoc) -> None:
        card = Card.model_validate(
            card_doc(legalities={"predh": "legal", "commander": "legal", "standard": "banned"})
        )

        assert list(legalities_of(card)) == ["standard", "commander", "predh"]

    def test_no_legality_record(self, sample_catalog: Catalog) -> None:
        assert legalities_of(sample_catalog[1]) == {}

    def test_empty_legality_record(self, sample_catalog: Catalog) -> None:
        assert legalities_of(sample_catalog[2]) == {}


class TestFormats:
    def test_every_format_has_a_label(self) -> None:
        assert set(FORMATS) == set(FORMAT_LABELS)

    def test_formats_match_card_model(self) -> None:
        from cardshelf.models.card import Legalities

        assert set(FORMATS) == set(Legalities.model_fields)

    def test_labels(self) -> None:
        assert FORMAT_LABELS["historicbrawl"] == "Historic Brawl"
        assert FORMAT_LABELS["predh"] == "Prismatic"

    def test_badge(self) -> None:
        assert legality_badge("legal") == "LEGAL"
        assert legality_badge("not_legal") == "NOT LEGAL"
        assert legality_badge("banned") == "NOT LEGAL"
