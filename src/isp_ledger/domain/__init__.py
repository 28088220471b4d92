"""Domain layer for isp_ledger.

The Ledger aggregate lives in ``isp_ledger.domain.ledger``; it is not
re-exported here because the storage layer imports these entities.
"""

from isp_ledger.domain.entities import Client, Tariff, TariffCategory, TrafficEvent
from isp_ledger.domain.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "Client",
    "Tariff",
    "TariffCategory",
    "TrafficEvent",
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
]
