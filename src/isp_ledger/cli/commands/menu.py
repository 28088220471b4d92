"""Interactive back-office menu."""

import click

from isp_ledger.cli.error_handling import report_domain_error
from isp_ledger.cli.params import MAX_ID, NON_NEGATIVE_AMOUNT
from isp_ledger.cli.render import (
    format_money,
    render_client,
    render_clients,
    render_tariffs,
    render_traffic_history,
)
from isp_ledger.domain.entities import CATEGORY_LABELS, TariffCategory
from isp_ledger.domain.errors import DomainError
from isp_ledger.domain.ledger import Ledger

CATEGORY_CHOICES: tuple[TariffCategory, ...] = tuple(TariffCategory)

EXIT_CHOICE = 9


def show_tariffs(ledger: Ledger) -> None:
    click.echo(render_tariffs(ledger.list_tariffs()))


def add_tariff(ledger: Ledger) -> None:
    name = click.prompt("Tariff name")
    click.echo("\nTariff categories:")
    for number, category in enumerate(CATEGORY_CHOICES, start=1):
        click.echo(f"{number}. {CATEGORY_LABELS[category]}")
    choice = click.prompt(
        f"Category (1-{len(CATEGORY_CHOICES)})",
        type=click.IntRange(1, len(CATEGORY_CHOICES)),
    )
    price_per_gb = click.prompt("Price per GB (RUB)", type=NON_NEGATIVE_AMOUNT)
    monthly_fee = click.prompt("Monthly fee (RUB/month)", type=NON_NEGATIVE_AMOUNT)

    tariff = ledger.add_tariff(name, CATEGORY_CHOICES[choice - 1], price_per_gb, monthly_fee)
    click.echo(f"Tariff '{tariff.name}' added (ID: {tariff.id})")


def show_clients(ledger: Ledger) -> None:
    rows = [(client, ledger.client_cost(client.id)) for client in ledger.list_clients()]
    click.echo(render_clients(rows))


def register_client(ledger: Ledger) -> None:
    name = click.prompt("Client full name")
    address = click.prompt("Address")
    phone = click.prompt("Phone")

    show_tariffs(ledger)
    tariff_id = click.prompt("Tariff ID for the client", type=click.IntRange(0, MAX_ID))
    if ledger.find_tariff(tariff_id) is None:
        click.echo(f"Error: Tariff {tariff_id} not found", err=True)
        return

    client = ledger.register_client(name, address, phone, tariff_id)
    click.echo(f"Client '{client.name}' registered (ID: {client.id})")


def add_traffic(ledger: Ledger) -> None:
    show_clients(ledger)
    if not ledger.list_clients():
        return

    client_id = click.prompt("Client ID", type=click.IntRange(0, MAX_ID))
    amount = click.prompt("Traffic used (GB)", type=NON_NEGATIVE_AMOUNT)
    ledger.add_traffic_to_client(client_id, amount)
    click.echo("Traffic recorded.")


def show_traffic_history(ledger: Ledger) -> None:
    show_clients(ledger)
    if not ledger.list_clients():
        return

    client_id = click.prompt("Client ID", type=click.IntRange(0, MAX_ID))
    client = ledger.require_client(client_id)
    click.echo(render_traffic_history(client))


def show_total_revenue(ledger: Ledger) -> None:
    click.echo(f"\nTotal revenue from all clients: {format_money(ledger.total_revenue())}")


def show_top_payer(ledger: Ledger) -> None:
    client = ledger.client_with_max_payment()
    if client is None:
        click.echo("No clients registered.")
        return

    tariff = ledger.tariff_of(client)
    click.echo("\nClient with the highest payment:")
    click.echo(render_client(client))
    click.echo(f"Tariff: {tariff.name}")
    click.echo(f"Total cost: {format_money(client.compute_cost(tariff))}")


# (label, action); the menu number is the position, starting at 1
MENU_ACTIONS = (
    ("Show all tariffs", show_tariffs),
    ("Add a tariff", add_tariff),
    ("Show all clients", show_clients),
    ("Register a client", register_client),
    ("Add traffic to a client", add_traffic),
    ("Show a client's traffic history", show_traffic_history),
    ("Calculate total revenue", show_total_revenue),
    ("Find the client with the highest payment", show_top_payer),
)


def render_menu() -> str:
    lines = ["\n=== ISP back office ==="]
    for number, (label, _) in enumerate(MENU_ACTIONS, start=1):
        lines.append(f"{number}. {label}")
    lines.append(f"{EXIT_CHOICE}. Exit")
    return "\n".join(lines)


def run_menu(ledger: Ledger) -> None:
    """Run the menu loop until the user chooses Exit.

    Domain errors are reported and the loop continues.
    """
    while True:
        click.echo(render_menu())
        choice = click.prompt(
            f"Choose an action (1-{EXIT_CHOICE})", type=click.IntRange(1, EXIT_CHOICE)
        )
        if choice == EXIT_CHOICE:
            click.echo("Exiting...")
            return

        _, action = MENU_ACTIONS[choice - 1]
        try:
            action(ledger)
        except DomainError as e:
            report_domain_error(e)


@click.command("menu")
@click.pass_context
def menu(ctx):
    """Start the interactive back-office menu."""
    run_menu(ctx.obj["ledger"])


def register_commands(cli):
    """Register menu command with main CLI."""
    cli.add_command(menu)
