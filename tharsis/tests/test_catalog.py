"""
Tests for card definitions and catalogs.

Tests:
- Built-in catalogs validate
- Structural card invariants
- Catalog validation errors
- Name lookup
- JSON round trip
"""

import pytest

from ..catalog import (
    BUILTIN_CATALOGS,
    Card,
    CardCatalog,
    CardDefinitionError,
    CardKind,
    CardTag,
    CatalogValidationError,
    PaymentCost,
    UnknownCardError,
    validate_catalog,
)
from ..catalog.card import free_action, gain_resource, place_city
from ..catalog.resource import CardResource, Resource


class TestBuiltinCatalogs:
    """Tests for the shipped catalogs."""

    @pytest.mark.parametrize("name", sorted(BUILTIN_CATALOGS))
    def test_catalog_is_valid(self, name):
        catalog = BUILTIN_CATALOGS[name]()
        result = catalog.validate()
        assert result.valid, result.errors
        assert len(catalog) > 0

    def test_corporate_extends_base(self, base_catalog, catalog):
        assert set(base_catalog.names) <= set(catalog.names)
        assert "Media Group" in catalog
        assert "Media Group" not in base_catalog

    def test_names_are_unique(self, catalog):
        assert len(set(catalog.names)) == len(catalog)

    def test_cost_class_follows_tags(self, catalog):
        assert catalog.by_name("Mine").cost == PaymentCost.building(4)
        assert catalog.by_name("Io Mining Industries").cost == PaymentCost.space(41)
        assert catalog.by_name("Sponsors").cost == PaymentCost.megacredits(6)

    def test_event_cards_carry_event_tag(self, catalog):
        for card in catalog:
            if card.kind == CardKind.EVENT:
                assert CardTag.EVENT in card.tags

    def test_supported_card_resource(self, catalog):
        assert catalog.by_name("Regolith Eaters").supported_card_resource() == CardResource.MICROBE
        assert catalog.by_name("Pets").supported_card_resource() == CardResource.ANIMAL
        assert catalog.by_name("Sponsors").supported_card_resource() is None


class TestLookup:
    """Tests for name lookup."""

    def test_by_name(self, catalog):
        assert catalog.by_name("Sponsors").name == "Sponsors"

    def test_unknown_card(self, catalog):
        assert catalog.get("Moon Base") is None
        with pytest.raises(UnknownCardError):
            catalog.by_name("Moon Base")
        with pytest.raises(UnknownCardError):
            catalog.resolve(["Sponsors", "Moon Base"])


class TestCardDefinition:
    """Tests for invariants enforced when a card is built."""

    def test_actions_need_active_kind(self):
        with pytest.raises(CardDefinitionError):
            Card(
                name="Broken",
                kind=CardKind.AUTOMATIC,
                tags=(),
                cost=PaymentCost.megacredits(1),
                actions=(free_action(gain_resource(Resource.HEAT, 1)),),
            )

    def test_active_kind_needs_actions(self):
        with pytest.raises(CardDefinitionError):
            Card(name="Idle", kind=CardKind.ACTIVE, tags=(), cost=PaymentCost.megacredits(1))

    def test_event_needs_event_tag(self):
        with pytest.raises(CardDefinitionError):
            Card(name="Quiet Event", kind=CardKind.EVENT, tags=(), cost=PaymentCost.megacredits(1))

    def test_city_tag_needs_city_placement(self):
        with pytest.raises(CardDefinitionError):
            Card(name="Ghost Town", kind=CardKind.AUTOMATIC, tags=(CardTag.CITY,), cost=PaymentCost.megacredits(5))

    def test_city_card(self):
        card = Card(
            name="Small Town",
            kind=CardKind.AUTOMATIC,
            tags=(CardTag.CITY,),
            cost=PaymentCost.megacredits(5),
            immediate_impacts=(place_city(),),
        )
        assert card.places_city


class TestCatalogValidation:
    """Tests for catalog-level checks."""

    def test_duplicate_names(self, catalog):
        sponsors = catalog.by_name("Sponsors")
        with pytest.raises(CatalogValidationError) as exc_info:
            CardCatalog("dupes", [sponsors, sponsors])
        assert any("Duplicate" in e for e in exc_info.value.errors)

    def test_cost_class_mismatch(self):
        card = Card(
            name="Cheap Factory",
            kind=CardKind.AUTOMATIC,
            tags=(CardTag.BUILDING,),
            cost=PaymentCost.megacredits(3),
        )
        result = validate_catalog([card])
        assert not result.valid
        assert "cost class" in result.errors[0]

    def test_empty_catalog_warns(self):
        result = validate_catalog([])
        assert result.valid
        assert result.warnings

    def test_extended(self, base_catalog):
        extra = Card(
            name="Small Town",
            kind=CardKind.AUTOMATIC,
            tags=(CardTag.CITY,),
            cost=PaymentCost.megacredits(5),
            immediate_impacts=(place_city(),),
        )
        bigger = base_catalog.extended("custom", [extra])
        assert len(bigger) == len(base_catalog) + 1
        assert "Small Town" not in base_catalog


class TestJson:
    """Tests for catalog serialization."""

    def test_round_trip(self, catalog):
        loaded = CardCatalog.from_json("copy", catalog.to_json())
        assert loaded.cards == catalog.cards

    def test_from_file(self, base_catalog, tmp_path):
        path = tmp_path / "mine.json"
        path.write_text(base_catalog.to_json())
        loaded = CardCatalog.from_file(path)
        assert loaded.name == "mine"
        assert loaded.names == base_catalog.names
