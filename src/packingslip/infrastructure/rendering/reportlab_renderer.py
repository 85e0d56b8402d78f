"""ReportLab implementation of PackingSlipRenderer.

Lays the slip out as a flow of platypus flowables on a US Letter page;
pagination is left entirely to ReportLab.
"""

from __future__ import annotations

import logging
from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import inch
from reportlab.lib.utils import ImageReader
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle
from reportlab.platypus.doctemplate import LayoutError

from packingslip.application.dto import PackingSlipDTO
from packingslip.application.renderer import PackingSlipRenderer
from packingslip.domain.exceptions import RenderingError

logger = logging.getLogger(__name__)

PAGE_SIZE = (8.5 * inch, 11 * inch)
MARGIN = 0.5 * inch
LOGO_HEIGHT = 1.25 * inch
CELL_PADDING = 0.15 * inch
FRAME_WIDTH = PAGE_SIZE[0] - 2 * MARGIN

FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"

ITEM_HEADER = ["Catalog no.", "Name", "Unit price", "Qty.", "Amount"]
SHIPPING_HEADER = ["BILL TO:", "SHIP TO:"]

# Column shares of the frame width, in sixteenths so they sum to it exactly.
ITEM_COLUMNS = (3 / 16, 6 / 16, 2 / 16, 2 / 16, 3 / 16)
SHIPPING_COLUMNS = (1 / 2, 1 / 2)

BODY = ParagraphStyle("body", fontName=FONT, fontSize=10, leading=12)
CENTERED = ParagraphStyle("centered", parent=BODY, alignment=TA_CENTER)
HEADING = ParagraphStyle("heading", parent=BODY, fontName=FONT_BOLD, fontSize=12, leading=15)
CENTERED_HEADING = ParagraphStyle("centered_heading", parent=HEADING, alignment=TA_CENTER)
TOTALS = ParagraphStyle("totals", parent=BODY, fontSize=12, leading=15)
CELL_BOLD = ParagraphStyle("cell_bold", parent=BODY, fontName=FONT_BOLD)


class ReportLabPackingSlipRenderer(PackingSlipRenderer):

    def __init__(self, logo_path: Path | None = None) -> None:
        self._logo_path = logo_path

    def render(self, slip: PackingSlipDTO, output_path: Path) -> None:
        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=PAGE_SIZE,
            leftMargin=MARGIN,
            rightMargin=MARGIN,
            topMargin=MARGIN,
            bottomMargin=MARGIN,
            title=slip.title,
            author=slip.business_name,
        )
        try:
            doc.build(self._story(slip, doc.width))
        except (OSError, ValueError, LayoutError) as exc:
            raise RenderingError(f"Could not render {output_path}: {exc}") from exc

    # --- Sections -------------------------------------------------------------

    def _story(self, slip: PackingSlipDTO, width: float) -> list:
        story: list = []
        story += self._header(slip)
        story.append(Paragraph(escape(slip.title), HEADING))
        story.append(Spacer(1, 12))
        story.append(shipping_table(slip, width))
        story.append(Spacer(1, 24))
        story.append(items_table(slip, width))
        story.append(Spacer(1, 12))
        story += self._totals(slip)
        story.append(Spacer(1, 15))
        story.append(Paragraph(_markup(slip.signoff), BODY))
        return story

    def _header(self, slip: PackingSlipDTO) -> list:
        flowables: list = []
        logo = self._logo()
        if logo is not None:
            flowables.append(logo)
            flowables.append(Spacer(1, 12))
        flowables.append(Paragraph(escape(slip.business_name), CENTERED_HEADING))
        for line in slip.business_address_lines:
            flowables.append(Paragraph(escape(line), CENTERED))
        flowables.append(Spacer(1, 12))
        return flowables

    def _logo(self) -> Image | None:
        if self._logo_path is None:
            return None
        if not Path(self._logo_path).is_file():
            logger.warning("Logo %s not found, rendering without it", self._logo_path)
            return None
        width, height = ImageReader(str(self._logo_path)).getSize()
        image = Image(
            str(self._logo_path),
            width=LOGO_HEIGHT * width / height,
            height=LOGO_HEIGHT,
        )
        image.hAlign = "CENTER"
        return image

    @staticmethod
    def _totals(slip: PackingSlipDTO) -> list:
        lines = [
            ("SUBTOTAL:", slip.subtotal),
            ("SHIPPING & HANDLING:", slip.shipping_and_handling),
            ("TOTAL:", slip.total),
        ]
        return [
            Paragraph(f"<b>{escape(label)}</b> {escape(amount)}", TOTALS)
            for label, amount in lines
        ]


def _markup(text: str) -> str:
    """Escape free text for a Paragraph, keeping its line breaks."""
    return "<br/>".join(escape(line) for line in text.splitlines())


def shipping_table(slip: PackingSlipDTO, width: float = FRAME_WIDTH) -> Table:
    """Two-column BILL TO / SHIP TO block, wrapped to *width*."""
    rows = [
        [Paragraph(escape(label), CELL_BOLD) for label in SHIPPING_HEADER],
        [Paragraph(_markup(slip.bill_to), BODY), Paragraph(_markup(slip.ship_to), BODY)],
    ]
    table = Table(rows, colWidths=[width * share for share in SHIPPING_COLUMNS], hAlign="LEFT")
    table.setStyle(TableStyle([
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
    ]))
    return table


def items_table(slip: PackingSlipDTO, width: float = FRAME_WIDTH) -> Table:
    """Line-item table, wrapped to *width*; the header row repeats on each page."""
    rows = [[Paragraph(escape(label), CELL_BOLD) for label in ITEM_HEADER]]
    rows += [
        [Paragraph(escape(cell), BODY) for cell in item.as_row()]
        for item in slip.items
    ]
    table = Table(
        rows,
        colWidths=[width * share for share in ITEM_COLUMNS],
        hAlign="LEFT",
        repeatRows=1,
    )
    table.setStyle(TableStyle([
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("LEFTPADDING", (0, 0), (-1, -1), CELL_PADDING),
        ("RIGHTPADDING", (0, 0), (-1, -1), CELL_PADDING),
        ("TOPPADDING", (0, 0), (-1, -1), CELL_PADDING),
        ("BOTTOMPADDING", (0, 0), (-1, -1), CELL_PADDING),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
    ]))
    return table
