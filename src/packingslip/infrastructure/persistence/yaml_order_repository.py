"""YAML-file-backed implementation of OrderRepository.

Expected document shape::

    manifest:
      - catalog_no: 42
        qty: 3
    bill_to: |
      ...
    ship_to: |
      ...
    order_no: 1234
    order_date: 2024-01-01
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from packingslip.domain.exceptions import ValidationError
from packingslip.domain.model.order import OrderDescription, OrderEntry
from packingslip.domain.model.value_objects import parse_int
from packingslip.domain.repository.order_repository import OrderRepository
from packingslip.infrastructure.persistence.yaml_documents import (
    as_text,
    load_mapping,
    require,
)


class YamlOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> OrderDescription:
        raw = load_mapping(self._file_path)

        entries = require(raw, "manifest", self._file_path)
        if not isinstance(entries, list):
            raise ValidationError(
                f"'manifest' must be a list of order entries in {self._file_path}"
            )

        return OrderDescription(
            entries=tuple(self._to_entry(e) for e in entries),
            bill_to=as_text(require(raw, "bill_to", self._file_path)),
            ship_to=as_text(require(raw, "ship_to", self._file_path)),
            order_no=parse_int(require(raw, "order_no", self._file_path), "order_no"),
            order_date=as_text(require(raw, "order_date", self._file_path)),
        )

    # --- Serialization --------------------------------------------------------

    def _to_entry(self, raw: Any) -> OrderEntry:
        if not isinstance(raw, dict):
            raise ValidationError(f"Invalid order entry {raw!r} in {self._file_path}")
        return OrderEntry(
            catalog_no=parse_int(require(raw, "catalog_no", self._file_path), "catalog_no"),
            qty=require(raw, "qty", self._file_path),
        )
