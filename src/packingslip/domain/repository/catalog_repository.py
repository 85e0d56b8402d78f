"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The tab-delimited implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from packingslip.domain.model.catalog import Catalog


class CatalogRepository(ABC):

    @abstractmethod
    def load(self) -> Catalog:
        """Return the whole catalog in file order."""
