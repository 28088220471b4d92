"""Tariff listing command."""

import click

from isp_ledger.cli.render import render_tariffs


@click.command("tariffs")
@click.pass_context
def list_tariffs(ctx):
    """List the tariffs a new ledger starts with.

    Examples:
        isp-ledger tariffs
        isp-ledger --no-default-tariffs tariffs
    """
    ledger = ctx.obj["ledger"]
    click.echo(render_tariffs(ledger.list_tariffs()))


def register_commands(cli):
    """Register tariff commands with main CLI."""
    cli.add_command(list_tariffs)
