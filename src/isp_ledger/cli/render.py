"""Text rendering of tariffs, clients and billing reports."""

from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from isp_ledger.domain.entities import Client, Tariff

SEPARATOR = "-" * 40


def format_money(amount: Decimal) -> str:
    """Format a currency amount with two decimals."""
    return f"{amount:,.2f} RUB"


def format_gb(amount: Decimal) -> str:
    return f"{amount:,.2f} GB"


def format_timestamp(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%d %H:%M:%S %Z").strip()


def render_tariff(tariff: Tariff) -> str:
    """Render one tariff as a multi-line block."""
    return "\n".join(
        [
            f"ID: {tariff.id}",
            f"Name: {tariff.name}",
            f"Category: {tariff.category_label}",
            f"Price per GB: {format_money(tariff.price_per_gb)}",
            f"Monthly fee: {format_money(tariff.monthly_fee)}/month",
        ]
    )


def render_tariffs(tariffs: Iterable[Tariff]) -> str:
    """Render all tariffs, or a notice when there are none."""
    blocks = [f"{render_tariff(t)}\n{SEPARATOR}" for t in tariffs]
    if not blocks:
        return "No tariffs defined."
    return "\n=== Tariffs ===\n" + "\n".join(blocks)


def render_client(client: Client, cost: Optional[Decimal] = None) -> str:
    """Render one client; the cost line is omitted when it is unknown."""
    lines = [
        f"ID: {client.id}",
        f"Name: {client.name}",
        f"Address: {client.address}",
        f"Phone: {client.phone}",
        f"Registered: {format_timestamp(client.registered_at)}",
        f"Tariff ID: {client.tariff_id}",
        f"Traffic used: {format_gb(client.traffic_used)}",
    ]
    if cost is not None:
        lines.append(f"Cost: {format_money(cost)}")
    return "\n".join(lines)


def render_clients(rows: Iterable[tuple[Client, Optional[Decimal]]]) -> str:
    """Render (client, cost) pairs, or a notice when there are none."""
    blocks = [f"{render_client(client, cost)}\n{SEPARATOR}" for client, cost in rows]
    if not blocks:
        return "No clients registered."
    return "\n=== Clients ===\n" + "\n".join(blocks)


def render_traffic_history(client: Client) -> str:
    """Render a client's traffic events in recorded order."""
    history = client.traffic_history
    header = f"Traffic history for {client.name}:"
    if not history:
        return f"{header}\n  (no traffic recorded)"
    lines = [
        f"  {format_timestamp(event.timestamp)}  {format_gb(event.amount_gb)}"
        for event in history
    ]
    return "\n".join([header, *lines])
