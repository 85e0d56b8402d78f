"""Abstract repository for the seller's business metadata."""

from __future__ import annotations

from abc import ABC, abstractmethod

from packingslip.domain.model.manifest import BusinessInfo


class BusinessInfoRepository(ABC):

    @abstractmethod
    def load(self) -> BusinessInfo:
        """Return the business name, address and signoff text."""
