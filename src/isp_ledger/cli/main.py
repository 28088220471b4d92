"""Main CLI entry point."""

import logging

import click

from isp_ledger.domain.ledger import Ledger

# Import and register all commands at module level
from isp_ledger.cli.commands import menu, tariff

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ClickEchoHandler(logging.Handler):
    """Logging handler that writes through click.echo to stderr.

    The stream is looked up on every record, so output follows click's
    current stderr (including CliRunner's).
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(level: str) -> None:
    """Route isp_ledger log records to stderr at the given level."""
    logger = logging.getLogger("isp_ledger")
    for handler in list(logger.handlers):
        if isinstance(handler, ClickEchoHandler):
            logger.removeHandler(handler)
    handler = ClickEchoHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    # Records are echoed here only, not again by root handlers
    logger.propagate = False


@click.group(invoke_without_command=True)
@click.option(
    "--strict/--lenient",
    default=True,
    envvar="ISP_LEDGER_STRICT",
    show_default=True,
    help="Reject clients registered on an unknown tariff (--lenient stores the reference unchecked)",
)
@click.option(
    "--no-default-tariffs",
    is_flag=True,
    envvar="ISP_LEDGER_NO_DEFAULT_TARIFFS",
    help="Start with an empty tariff list instead of the four default tariffs",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="ISP_LEDGER_LOG_LEVEL",
    show_default=True,
    help="Logging level for ledger events",
)
@click.pass_context
def cli(ctx, strict: bool, no_default_tariffs: bool, log_level: str):
    """ISP ledger - tariffs, clients, traffic and billing.

    Records are kept in memory for the duration of the run. Without a
    subcommand the interactive menu starts.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # An injected ledger (e.g. from tests) takes precedence
    if "ledger" not in ctx.obj:
        ctx.obj["ledger"] = Ledger(
            seed_defaults=not no_default_tariffs, strict_references=strict
        )

    if ctx.invoked_subcommand is None:
        ctx.invoke(menu.menu)


# Register all commands
menu.register_commands(cli)
tariff.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
