"""Integration tests for the BuildManifest use case.

Uses in-memory fake repositories — no file I/O.
"""

import pytest

from packingslip.application.build_manifest import BuildManifestHandler
from packingslip.domain.exceptions import (
    EntityNotFoundError,
    UnresolvableCatalogReferenceError,
    ValidationError,
)
from packingslip.domain.model.value_objects import Money
from tests.fakes import (
    FakeBusinessInfoRepository,
    FakeCatalogRepository,
    FakeOrderRepository,
)

CATALOG = [
    {"CATALOG-NO": "MSM-00001", "TITLE": "Widget", "UNIT-PRICE": "10.00"},
    {"CATALOG-NO": "MSM-00042", "TITLE": "Gadget", "UNIT-PRICE": "19.5"},
    {"CATALOG-NO": "7", "TITLE": "Legacy", "UNIT-PRICE": "9"},
]


def _handler(entries, order_no=1, catalog=None) -> BuildManifestHandler:
    return BuildManifestHandler(
        catalog_repo=FakeCatalogRepository(CATALOG if catalog is None else catalog),
        business_info_repo=FakeBusinessInfoRepository(),
        order_repo=FakeOrderRepository(entries, order_no=order_no),
    )


class TestBuildManifestHappyPath:

    def test_end_to_end_scenario(self):
        manifest = _handler([(1, 3)], order_no=5).handle()

        assert len(manifest.items) == 1
        item = manifest.items[0]
        assert item.name == "Widget"
        assert item.unit_price == Money.of("10.00")
        assert item.quantity.value == 3
        assert str(manifest.subtotal) == "$30.00"
        assert str(manifest.total(Money.of("2.00"))) == "$32.00"
        assert manifest.order_no == "00000005"
        assert manifest.order_date == "2024-01-01"

    def test_catalog_no_is_formatted(self):
        manifest = _handler([(42, 1)]).handle()
        assert manifest.items[0].catalog_no == "MSM-00042"

    def test_string_quantity_is_parsed(self):
        manifest = _handler([(42, "4")]).handle()
        assert manifest.items[0].quantity.value == 4

    def test_items_keep_order_description_order(self):
        manifest = _handler([(42, 1), (1, 1), (42, 2)]).handle()
        assert [i.name for i in manifest.items] == ["Gadget", "Widget", "Gadget"]

    def test_wide_order_no_unchanged(self):
        manifest = _handler([(1, 1)], order_no=12345678).handle()
        assert manifest.order_no == "12345678"

    def test_addresses_and_business_info_carried(self):
        manifest = _handler([(1, 1)]).handle()
        assert manifest.bill_to.startswith("Jane Doe")
        assert manifest.ship_to.endswith("99 Delivery Rd")
        assert manifest.business_info.name == "Magenta Stripe Media"

    def test_subtotal_is_exact(self):
        manifest = _handler([(1, 3), (42, 2)]).handle()
        # 3 * 10.00 + 2 * 19.50
        assert manifest.subtotal == Money.of("69.00")

    def test_canonical_record_wins_over_earlier_numeric_record(self):
        catalog = [
            {"CATALOG-NO": "42", "TITLE": "Old", "UNIT-PRICE": "1.00"},
            {"CATALOG-NO": "MSM-00042", "TITLE": "New", "UNIT-PRICE": "2.00"},
        ]
        item = _handler([(42, 1)], catalog=catalog).handle().items[0]
        assert item.name == "New"
        assert str(item.unit_price) == "$2.00"


class TestBuildManifestValidation:

    def test_unknown_catalog_no_rejected(self):
        with pytest.raises(UnresolvableCatalogReferenceError, match="MSM-00099"):
            _handler([(1, 1), (99, 1)]).handle()

    def test_unresolvable_reference_is_a_not_found_error(self):
        with pytest.raises(EntityNotFoundError):
            _handler([(99, 1)], catalog=[]).handle()

    def test_unparsable_quantity_rejected(self):
        with pytest.raises(ValidationError, match="Invalid qty"):
            _handler([(1, "lots")]).handle()

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _handler([(1, -1)]).handle()

    def test_unparsable_unit_price_rejected(self):
        catalog = [{"CATALOG-NO": "MSM-00001", "TITLE": "Widget", "UNIT-PRICE": "n/a"}]
        with pytest.raises(ValidationError, match="invalid UNIT-PRICE"):
            _handler([(1, 1)], catalog=catalog).handle()

    def test_numeric_catalog_record_is_not_resolvable(self):
        with pytest.raises(UnresolvableCatalogReferenceError, match="MSM-00007"):
            _handler([(7, 2)]).handle()
