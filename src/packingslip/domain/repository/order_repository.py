"""Abstract repository for the customer's order description."""

from __future__ import annotations

from abc import ABC, abstractmethod

from packingslip.domain.model.order import OrderDescription


class OrderRepository(ABC):

    @abstractmethod
    def load(self) -> OrderDescription:
        """Return the order entries, addresses and order metadata."""
