"""Ledger domain service: the aggregate root for tariffs and clients."""

import logging
import threading
from datetime import datetime, UTC
from decimal import Decimal
from typing import Callable, Optional

from isp_ledger.domain.entities import Client, Tariff, TariffCategory, TrafficEvent
from isp_ledger.domain.errors import (
    NotFoundError,
    ValidationError,
    client_not_found,
    negative_price,
    tariff_not_found,
)
from isp_ledger.storage.base import Store
from isp_ledger.storage.factories import create_memory_store
from isp_ledger.utils.amount_parser import to_decimal

logger = logging.getLogger(__name__)

# (name, category, price per GB, monthly fee)
DEFAULT_TARIFFS: tuple[tuple[str, TariffCategory, Decimal, Decimal], ...] = (
    ("Economy", TariffCategory.ECONOMY, Decimal("50"), Decimal("300")),
    ("Standard", TariffCategory.STANDARD, Decimal("40"), Decimal("500")),
    ("Premium", TariffCategory.PREMIUM, Decimal("30"), Decimal("800")),
    ("Unlimited", TariffCategory.UNLIMITED, Decimal("0"), Decimal("1200")),
)


class Ledger:
    """Owns all tariff and client records and derives billing totals.

    A Ledger is built explicitly and handed to whoever needs it. Mutating
    operations are serialized by a lock, so ID assignment and traffic
    appends keep their ordering even if the instance is shared.
    """

    def __init__(
        self,
        store: Optional[Store] = None,
        seed_defaults: bool = True,
        strict_references: bool = True,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the ledger.

        Args:
            store: Record store (defaults to a fresh in-memory store)
            seed_defaults: If True, add the four default tariffs
            strict_references: If True, register_client rejects unknown
                tariff IDs. If False, the reference is stored unchecked and
                aggregates skip clients whose tariff cannot be resolved.
            clock: Callable returning the current time (defaults to UTC now)
        """
        self.store = store if store is not None else create_memory_store()
        self.strict_references = strict_references
        self._clock = clock or (lambda: datetime.now(UTC))
        self._lock = threading.RLock()

        if seed_defaults:
            for name, category, price_per_gb, monthly_fee in DEFAULT_TARIFFS:
                self.add_tariff(name, category, price_per_gb, monthly_fee)

    # Tariff operations
    def add_tariff(
        self,
        name: str,
        category: TariffCategory,
        price_per_gb: Decimal | int | float,
        monthly_fee: Decimal | int | float,
    ) -> Tariff:
        """Create a tariff with the next sequential ID.

        Args:
            name: Tariff name (duplicates are allowed)
            category: Tariff category
            price_per_gb: Price per gigabyte, >= 0
            monthly_fee: Fixed monthly fee, >= 0

        Returns:
            The new tariff

        Raises:
            ValidationError: If a price is negative
        """
        price = to_decimal(price_per_gb)
        fee = to_decimal(monthly_fee)
        if price < 0:
            raise ValidationError(negative_price("price per GB", price))
        if fee < 0:
            raise ValidationError(negative_price("monthly fee", fee))

        with self._lock:
            tariff = Tariff(
                id=self.store.next_tariff_id(),
                name=name,
                category=category,
                price_per_gb=price,
                monthly_fee=fee,
            )
            self.store.add_tariff(tariff)

        logger.info("Added tariff %d '%s' (%s)", tariff.id, tariff.name, category.name)
        return tariff

    def find_tariff(self, tariff_id: int) -> Optional[Tariff]:
        """Get tariff by ID, or None if not found."""
        return self.store.get_tariff(tariff_id)

    def require_tariff(self, tariff_id: int) -> Tariff:
        """Get tariff by ID.

        Raises:
            NotFoundError: If no tariff has this ID
        """
        tariff = self.find_tariff(tariff_id)
        if tariff is None:
            raise NotFoundError(tariff_not_found(tariff_id))
        return tariff

    def list_tariffs(self) -> tuple[Tariff, ...]:
        """All tariffs in creation order."""
        return tuple(self.store.list_tariffs())

    # Client operations
    def register_client(self, name: str, address: str, phone: str, tariff_id: int) -> Client:
        """Register a client on a tariff.

        Args:
            name: Client full name
            address: Postal address
            phone: Phone number
            tariff_id: ID of the client's tariff

        Returns:
            The new client

        Raises:
            NotFoundError: If strict_references is set and the tariff does
                not exist (no client ID is consumed)
        """
        with self._lock:
            if self.strict_references and self.find_tariff(tariff_id) is None:
                logger.warning("Rejected registration of '%s': tariff %d not found", name, tariff_id)
                raise NotFoundError(tariff_not_found(tariff_id))

            client = Client(
                id=self.store.next_client_id(),
                name=name,
                address=address,
                phone=phone,
                tariff_id=tariff_id,
                registered_at=self._clock(),
            )
            self.store.add_client(client)

        logger.info("Registered client %d '%s' on tariff %d", client.id, name, tariff_id)
        return client

    def find_client(self, client_id: int) -> Optional[Client]:
        """Get client by ID, or None if not found."""
        return self.store.get_client(client_id)

    def require_client(self, client_id: int) -> Client:
        """Get client by ID.

        Raises:
            NotFoundError: If no client has this ID
        """
        client = self.find_client(client_id)
        if client is None:
            raise NotFoundError(client_not_found(client_id))
        return client

    def list_clients(self) -> tuple[Client, ...]:
        """All clients in registration order."""
        return tuple(self.store.list_clients())

    def add_traffic_to_client(
        self, client_id: int, amount_gb: Decimal | int | float
    ) -> TrafficEvent:
        """Record consumed traffic for a client.

        Args:
            client_id: Client ID
            amount_gb: Traffic in gigabytes, >= 0

        Returns:
            The recorded traffic event

        Raises:
            NotFoundError: If the client does not exist
            ValidationError: If the amount is negative
        """
        with self._lock:
            client = self.find_client(client_id)
            if client is None:
                logger.warning("Traffic not recorded: client %d not found", client_id)
                raise NotFoundError(client_not_found(client_id))
            event = client.record_traffic(amount_gb, at=self._clock())

        logger.info("Recorded %s GB for client %d", event.amount_gb, client_id)
        return event

    # Billing
    def tariff_of(self, client: Client) -> Optional[Tariff]:
        """Resolve the client's tariff, or None for a dangling reference."""
        return self.find_tariff(client.tariff_id)

    def client_cost(self, client_id: int) -> Optional[Decimal]:
        """Current cost for one client.

        Returns:
            The cost, or None if the client's tariff cannot be resolved

        Raises:
            NotFoundError: If the client does not exist
        """
        client = self.require_client(client_id)
        tariff = self.tariff_of(client)
        if tariff is None:
            return None
        return client.compute_cost(tariff)

    def _billable(self):
        """Yield (client, cost) for clients with a resolvable tariff."""
        for client in self.store.list_clients():
            tariff = self.tariff_of(client)
            if tariff is None:
                logger.debug(
                    "Skipping client %d: tariff %d not found", client.id, client.tariff_id
                )
                continue
            yield client, client.compute_cost(tariff)

    def total_revenue(self) -> Decimal:
        """Sum of all billable client costs (0 with no clients)."""
        return sum((cost for _, cost in self._billable()), Decimal("0"))

    def client_with_max_payment(self) -> Optional[Client]:
        """Client with the largest cost.

        Ties go to the earliest registered client. Clients with a dangling
        tariff reference are not considered.

        Returns:
            The top payer, or None if there is no billable client
        """
        best: Optional[Client] = None
        best_cost = Decimal("0")
        for client, cost in self._billable():
            if best is None or cost > best_cost:
                best, best_cost = client, cost
        return best
