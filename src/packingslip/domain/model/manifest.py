"""Manifest aggregate — one resolved customer order.

A Manifest owns its line items. Everything is frozen: a manifest is built
once per run and only read afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from packingslip.domain.exceptions import ValidationError
from packingslip.domain.model.catalog import CatalogRecord
from packingslip.domain.model.value_objects import Money, Quantity

UNTITLED = "(untitled)"


@dataclass(frozen=True)
class LineItem:
    """A catalog product together with the ordered quantity."""

    name: str
    catalog_no: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def from_record(record: CatalogRecord, catalog_no: str, quantity: Quantity) -> LineItem:
        """Price a matched catalog record.

        Raises ValidationError if the record's UNIT-PRICE cannot be parsed.
        """
        try:
            unit_price = Money.of(record.unit_price)
        except ValidationError as exc:
            raise ValidationError(
                f"Catalog record {catalog_no} has an invalid UNIT-PRICE: "
                f"{record.unit_price!r}"
            ) from exc
        return LineItem(
            name=record.title or UNTITLED,
            catalog_no=catalog_no,
            quantity=quantity,
            unit_price=unit_price,
        )


@dataclass(frozen=True)
class BusinessInfo:
    name: str
    address: str
    signoff: str

    @property
    def address_lines(self) -> list[str]:
        return self.address.splitlines()


@dataclass(frozen=True)
class Manifest:
    """Aggregate root for a packing slip.

    ``items`` keeps the order in which entries appear in the order
    description.
    """

    items: tuple[LineItem, ...]
    bill_to: str
    ship_to: str
    order_no: str
    order_date: str
    business_info: BusinessInfo

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    def total(self, shipping_and_handling: Money) -> Money:
        return self.subtotal + shipping_and_handling
