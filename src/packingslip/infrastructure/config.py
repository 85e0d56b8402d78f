"""Run configuration.

Explicit arguments win over environment variables, which win over the
defaults below (paths are relative to the working directory).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

from packingslip.domain.model.value_objects import Money

DEFAULT_CATALOG = "./data/MSM_CATALOG.tsv"
DEFAULT_BUSINESS_INFO = "./data/BUSINESS_INFO.yaml"
DEFAULT_LOGO = "./data/logo-head-transparent.png"
DEFAULT_SHIPPING_AND_HANDLING = "1.23"


@dataclass(frozen=True)
class PackingSlipConfig:
    catalog_path: Path
    business_info_path: Path
    logo_path: Path | None
    shipping_and_handling: Money


def load_config(
    catalog: str | Path | None = None,
    business_info: str | Path | None = None,
    logo: str | Path | None = None,
    shipping_and_handling: str | Decimal | None = None,
) -> PackingSlipConfig:
    return PackingSlipConfig(
        catalog_path=_path(catalog, "PACKINGSLIP_CATALOG", DEFAULT_CATALOG),
        business_info_path=_path(business_info, "PACKINGSLIP_BUSINESS_INFO", DEFAULT_BUSINESS_INFO),
        logo_path=_path(logo, "PACKINGSLIP_LOGO", DEFAULT_LOGO),
        shipping_and_handling=Money.of(
            shipping_and_handling
            if shipping_and_handling is not None
            else os.getenv("PACKINGSLIP_SHIPPING_AND_HANDLING", DEFAULT_SHIPPING_AND_HANDLING)
        ),
    )


def _path(value: str | Path | None, env_var: str, default: str) -> Path:
    return Path(value or os.getenv(env_var, default)).expanduser()
