"""Abstract record store interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly; the Ledger imports this module
from isp_ledger.domain.entities import Client, Tariff


class Store(ABC):
    """Abstract store for tariff and client records.

    Identifier counters for tariffs and clients are independent, start at 1
    and never hand out the same value twice.
    """

    # Identifier allocation
    @abstractmethod
    def next_tariff_id(self) -> int:
        """Reserve and return the next tariff ID."""
        pass

    @abstractmethod
    def next_client_id(self) -> int:
        """Reserve and return the next client ID."""
        pass

    # Tariff operations
    @abstractmethod
    def add_tariff(self, tariff: Tariff) -> None:
        """Store a tariff under its ID."""
        pass

    @abstractmethod
    def get_tariff(self, tariff_id: int) -> Optional[Tariff]:
        """Get tariff by ID."""
        pass

    @abstractmethod
    def list_tariffs(self) -> list[Tariff]:
        """List tariffs in insertion order."""
        pass

    # Client operations
    @abstractmethod
    def add_client(self, client: Client) -> None:
        """Store a client under its ID."""
        pass

    @abstractmethod
    def get_client(self, client_id: int) -> Optional[Client]:
        """Get client by ID."""
        pass

    @abstractmethod
    def list_clients(self) -> list[Client]:
        """List clients in insertion order."""
        pass
