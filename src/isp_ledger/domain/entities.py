"""Domain model entities for isp_ledger.

Tariffs are immutable value objects. Clients are the only records that change
after creation, and only by appending traffic events.
"""

from dataclasses import dataclass, field
from datetime import datetime, UTC
from decimal import Decimal
from enum import Enum
from typing import Optional

from isp_ledger.domain.errors import ValidationError, negative_traffic
from isp_ledger.utils.amount_parser import to_decimal


class TariffCategory(Enum):
    """Pricing plan category."""

    ECONOMY = "economy"
    STANDARD = "standard"
    PREMIUM = "premium"
    UNLIMITED = "unlimited"


CATEGORY_LABELS: dict[TariffCategory, str] = {
    TariffCategory.ECONOMY: "Economy",
    TariffCategory.STANDARD: "Standard",
    TariffCategory.PREMIUM: "Premium",
    TariffCategory.UNLIMITED: "Unlimited",
}

UNKNOWN_CATEGORY_LABEL = "Unknown"


@dataclass(frozen=True)
class Tariff:
    """Tariff plan domain entity."""

    id: int
    name: str
    category: TariffCategory
    price_per_gb: Decimal
    monthly_fee: Decimal

    @property
    def category_label(self) -> str:
        """Display label for the tariff category."""
        return CATEGORY_LABELS.get(self.category, UNKNOWN_CATEGORY_LABEL)


@dataclass(frozen=True)
class TrafficEvent:
    """A single traffic consumption record."""

    timestamp: datetime
    amount_gb: Decimal


@dataclass(frozen=True)
class Client:
    """Subscriber domain entity with its own traffic history.

    Identity fields are frozen. The event list is the only mutable state and
    grows only through record_traffic; traffic_used is derived from it.
    """

    id: int
    name: str
    address: str
    phone: str
    tariff_id: int
    registered_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    _events: list[TrafficEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def record_traffic(
        self, amount_gb: Decimal | int | float, at: Optional[datetime] = None
    ) -> TrafficEvent:
        """Append a traffic event to the client's history.

        Args:
            amount_gb: Consumed traffic in gigabytes
            at: Event timestamp (defaults to now, UTC)

        Returns:
            The recorded event

        Raises:
            ValidationError: If the amount is negative
        """
        amount = to_decimal(amount_gb)
        if amount < 0:
            raise ValidationError(negative_traffic(amount))

        event = TrafficEvent(timestamp=at or datetime.now(UTC), amount_gb=amount)
        self._events.append(event)
        return event

    @property
    def traffic_used(self) -> Decimal:
        """Total recorded traffic in gigabytes."""
        return sum((event.amount_gb for event in self._events), Decimal("0"))

    def compute_cost(self, tariff: Tariff) -> Decimal:
        """Cost of the client's accumulated traffic under the given tariff."""
        return self.traffic_used * tariff.price_per_gb + tariff.monthly_fee

    @property
    def traffic_history(self) -> tuple[TrafficEvent, ...]:
        """Recorded traffic events in the order they were added."""
        return tuple(self._events)
