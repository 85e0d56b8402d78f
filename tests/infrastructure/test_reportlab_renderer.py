"""Smoke tests for the ReportLab renderer — real PDFs written to tmp_path."""

import logging

import pytest

from packingslip.application.dto import LineItemDTO, PackingSlipDTO
from packingslip.domain.exceptions import RenderingError
from packingslip.infrastructure.rendering.reportlab_renderer import (
    FRAME_WIDTH,
    PAGE_SIZE,
    ReportLabPackingSlipRenderer,
    items_table,
    shipping_table,
)


def _slip(
    item_count: int = 2,
    name: str = "Item",
    bill_to: str = "Jane Doe\n42 Sample St",
) -> PackingSlipDTO:
    return PackingSlipDTO(
        business_name="Magenta Stripe Media & Co",
        business_address_lines=["1 Main St", "Springfield <HQ>"],
        signoff="Thanks!\nSee you soon.",
        order_no="00000005",
        order_date="2024-01-01",
        bill_to=bill_to,
        ship_to="Jane Doe\n99 Delivery Rd",
        items=[
            LineItemDTO(f"MSM-{n:05d}", f"{name} {n}", "$10.00", "3", "$30.00")
            for n in range(item_count)
        ],
        subtotal="$60.00",
        shipping_and_handling="$1.23",
        total="$61.23",
    )


class TestReportLabRenderer:

    def test_writes_a_pdf(self, tmp_path):
        out = tmp_path / "slip.pdf"
        ReportLabPackingSlipRenderer().render(_slip(), out)
        assert out.read_bytes().startswith(b"%PDF")

    def test_long_order_renders(self, tmp_path):
        out = tmp_path / "long.pdf"
        ReportLabPackingSlipRenderer().render(_slip(item_count=80), out)
        assert out.read_bytes().startswith(b"%PDF")

    def test_empty_order_renders(self, tmp_path):
        out = tmp_path / "empty.pdf"
        ReportLabPackingSlipRenderer().render(_slip(item_count=0), out)
        assert out.exists()

    def test_missing_logo_is_skipped_with_warning(self, tmp_path, caplog):
        out = tmp_path / "slip.pdf"
        renderer = ReportLabPackingSlipRenderer(logo_path=tmp_path / "missing.png")
        with caplog.at_level(logging.WARNING):
            renderer.render(_slip(), out)
        assert out.exists()
        assert "not found" in caplog.text

    def test_unwritable_destination_raises_rendering_error(self, tmp_path):
        out = tmp_path / "no" / "such" / "dir" / "slip.pdf"
        with pytest.raises(RenderingError, match="Could not render"):
            ReportLabPackingSlipRenderer().render(_slip(), out)


class TestTableLayout:

    LONG_NAME = " ".join(["Deluxe"] * 12 + ["Widget", "with", "extra", "long", "description"] * 5)
    LONG_ADDRESS = "Jane Doe, " + "Suite 100 Very Long Avenue Name, " * 9

    def test_long_item_name_wraps_within_frame(self):
        slip = _slip(name=self.LONG_NAME)
        width, _ = items_table(slip, FRAME_WIDTH).wrap(FRAME_WIDTH, PAGE_SIZE[1])
        assert len(self.LONG_NAME) > 180
        assert width <= FRAME_WIDTH

    def test_long_bill_to_wraps_within_frame(self):
        slip = _slip(bill_to=self.LONG_ADDRESS)
        width, _ = shipping_table(slip, FRAME_WIDTH).wrap(FRAME_WIDTH, PAGE_SIZE[1])
        assert len(self.LONG_ADDRESS) > 290
        assert width <= FRAME_WIDTH

    def test_long_text_renders(self, tmp_path):
        out = tmp_path / "wide.pdf"
        slip = _slip(name=self.LONG_NAME, bill_to=self.LONG_ADDRESS)
        ReportLabPackingSlipRenderer().render(slip, out)
        assert out.read_bytes().startswith(b"%PDF")
