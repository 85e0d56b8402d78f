"""YAML-file-backed implementation of BusinessInfoRepository."""

from __future__ import annotations

from pathlib import Path

from packingslip.domain.model.manifest import BusinessInfo
from packingslip.domain.repository.business_info_repository import (
    BusinessInfoRepository,
)
from packingslip.infrastructure.persistence.yaml_documents import (
    as_text,
    load_mapping,
    require,
)


class YamlBusinessInfoRepository(BusinessInfoRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> BusinessInfo:
        raw = load_mapping(self._file_path)
        return BusinessInfo(
            name=as_text(require(raw, "name", self._file_path)),
            address=as_text(require(raw, "address", self._file_path)),
            signoff=as_text(require(raw, "signoff", self._file_path)),
        )
