"""Data Transfer Objects — plain containers that cross layer boundaries.

The renderer only ever sees preformatted strings; money and number
formatting is decided in the application layer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LineItemDTO:
    """Output: one row of the line-item table."""

    catalog_no: str
    name: str
    unit_price: str  # formatted, e.g. "$15.00"
    quantity: str
    amount: str

    def as_row(self) -> list[str]:
        return [self.catalog_no, self.name, self.unit_price, self.quantity, self.amount]


@dataclass(frozen=True)
class PackingSlipDTO:
    """Output: everything printed on a packing slip."""

    business_name: str
    business_address_lines: list[str]
    signoff: str
    order_no: str
    order_date: str
    bill_to: str
    ship_to: str
    items: list[LineItemDTO]
    subtotal: str
    shipping_and_handling: str
    total: str

    @property
    def title(self) -> str:
        return f"PACKING SLIP - ORDER # {self.order_no} - {self.order_date}"
