"""CLI error handling helpers."""

import click

from isp_ledger.domain.errors import DomainError


def report_domain_error(error: DomainError | ValueError) -> None:
    """Render a domain error; the menu keeps running afterwards."""
    click.echo(f"Error: {error}", err=True)
