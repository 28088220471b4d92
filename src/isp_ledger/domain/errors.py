"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested tariff or client does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as an identifier stored twice."""


def tariff_not_found(tariff_id: int) -> str:
    """Return message for missing tariff."""
    return f"Tariff {tariff_id} not found"


def client_not_found(client_id: int) -> str:
    """Return message for missing client."""
    return f"Client {client_id} not found"


def negative_traffic(amount_gb: Decimal) -> str:
    """Return message for a rejected traffic amount."""
    return f"Traffic amount cannot be negative (got {amount_gb} GB)"


def negative_price(field: str, value: Decimal) -> str:
    """Return message for a negative tariff price field."""
    return f"Tariff {field} cannot be negative (got {value})"


def duplicate_id(kind: str, record_id: int) -> str:
    return f"{kind} with ID {record_id} already exists"
