"""Application service: Build Manifest use case.

Joins the order description against the catalog. This is the only place
that coordinates all three inputs (catalog, business info, order).
"""

from __future__ import annotations

import logging

from packingslip.domain.exceptions import UnresolvableCatalogReferenceError
from packingslip.domain.model.catalog import Catalog
from packingslip.domain.model.manifest import LineItem, Manifest
from packingslip.domain.model.order import OrderEntry
from packingslip.domain.model.value_objects import (
    Quantity,
    format_catalog_no,
    format_order_no,
)
from packingslip.domain.repository.business_info_repository import (
    BusinessInfoRepository,
)
from packingslip.domain.repository.catalog_repository import CatalogRepository
from packingslip.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class BuildManifestHandler:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        business_info_repo: BusinessInfoRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._business_info_repo = business_info_repo
        self._order_repo = order_repo

    def handle(self) -> Manifest:
        """Build a fully resolved Manifest.

        Steps:
        1. Load the catalog, business info and order description.
        2. Resolve each order entry to a catalog record (fail if not found).
        3. Price the line items, keeping the order of the description.

        Any failure aborts the build; no partial Manifest is returned.
        """
        catalog = self._catalog_repo.load()
        business_info = self._business_info_repo.load()
        order = self._order_repo.load()
        logger.debug(
            "Resolving %d order entries against %d catalog records",
            len(order.entries),
            len(catalog),
        )

        items = tuple(self._resolve(catalog, entry) for entry in order.entries)

        return Manifest(
            items=items,
            bill_to=order.bill_to,
            ship_to=order.ship_to,
            order_no=format_order_no(order.order_no),
            order_date=order.order_date,
            business_info=business_info,
        )

    # --- Resolution -----------------------------------------------------------

    @staticmethod
    def _resolve(catalog: Catalog, entry: OrderEntry) -> LineItem:
        catalog_no = format_catalog_no(entry.catalog_no)
        record = catalog.find(catalog_no)
        if record is None:
            raise UnresolvableCatalogReferenceError(
                f"Unresolvable catalog reference: {catalog_no}"
            )
        return LineItem.from_record(record, catalog_no, Quantity.of(entry.qty))
