"""Tab-delimited-file-backed implementation of CatalogRepository."""

from __future__ import annotations

from pathlib import Path

from packingslip.domain.model.catalog import Catalog
from packingslip.domain.repository.catalog_repository import CatalogRepository
from packingslip.infrastructure.tabular.tsv_reader import TsvReader


class TsvCatalogRepository(CatalogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> Catalog:
        return Catalog(TsvReader(self._file_path))
