"""Abstract document renderer.

Defined next to the use case that drives it; the ReportLab
implementation lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from packingslip.application.dto import PackingSlipDTO


class PackingSlipRenderer(ABC):

    @abstractmethod
    def render(self, slip: PackingSlipDTO, output_path: Path) -> None:
        """Write the packing slip to *output_path*.

        Raises RenderingError if the document cannot be produced.
        """
