"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from packingslip.application.build_manifest import BuildManifestHandler
from packingslip.application.render_packing_slip import RenderPackingSlipHandler
from packingslip.infrastructure.config import PackingSlipConfig
from packingslip.infrastructure.persistence.tsv_catalog_repository import (
    TsvCatalogRepository,
)
from packingslip.infrastructure.persistence.yaml_business_info_repository import (
    YamlBusinessInfoRepository,
)
from packingslip.infrastructure.persistence.yaml_order_repository import (
    YamlOrderRepository,
)
from packingslip.infrastructure.rendering.reportlab_renderer import (
    ReportLabPackingSlipRenderer,
)


def build_manifest_handler(
    config: PackingSlipConfig, manifest_path: Path
) -> BuildManifestHandler:
    return BuildManifestHandler(
        catalog_repo=TsvCatalogRepository(config.catalog_path),
        business_info_repo=YamlBusinessInfoRepository(config.business_info_path),
        order_repo=YamlOrderRepository(manifest_path),
    )


def render_packing_slip_handler(config: PackingSlipConfig) -> RenderPackingSlipHandler:
    return RenderPackingSlipHandler(ReportLabPackingSlipRenderer(config.logo_path))
