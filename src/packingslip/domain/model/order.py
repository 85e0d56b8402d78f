"""Order description — the customer's request before catalog resolution."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderEntry:
    """One requested product: catalog number (unformatted) and quantity."""

    catalog_no: int
    qty: str | int


@dataclass(frozen=True)
class OrderDescription:
    entries: tuple[OrderEntry, ...]
    bill_to: str
    ship_to: str
    order_no: int
    order_date: str
