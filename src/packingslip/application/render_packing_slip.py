"""Application service: Render Packing Slip use case."""

from __future__ import annotations

import logging
from pathlib import Path

from packingslip.application.dto import LineItemDTO, PackingSlipDTO
from packingslip.application.renderer import PackingSlipRenderer
from packingslip.domain.model.manifest import Manifest
from packingslip.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class RenderPackingSlipHandler:

    def __init__(self, renderer: PackingSlipRenderer) -> None:
        self._renderer = renderer

    def handle(
        self,
        manifest: Manifest,
        output_path: Path,
        shipping_and_handling: Money,
    ) -> int:
        """Render *manifest* to *output_path* and return 0.

        Rendering failures propagate as RenderingError; the caller turns
        them into a non-zero exit status.
        """
        slip = self._to_dto(manifest, shipping_and_handling)
        self._renderer.render(slip, output_path)
        logger.info("Packing slip for order %s written to %s", slip.order_no, output_path)
        return 0

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(manifest: Manifest, shipping_and_handling: Money) -> PackingSlipDTO:
        info = manifest.business_info
        return PackingSlipDTO(
            business_name=info.name,
            business_address_lines=info.address_lines,
            signoff=info.signoff,
            order_no=manifest.order_no,
            order_date=manifest.order_date,
            bill_to=manifest.bill_to,
            ship_to=manifest.ship_to,
            items=[
                LineItemDTO(
                    catalog_no=item.catalog_no,
                    name=item.name,
                    unit_price=str(item.unit_price),
                    quantity=str(item.quantity),
                    amount=str(item.line_total),
                )
                for item in manifest.items
            ],
            subtotal=str(manifest.subtotal),
            shipping_and_handling=str(shipping_and_handling),
            total=str(manifest.total(shipping_and_handling)),
        )
