"""Shared pytest fixtures for isp_ledger tests."""

from datetime import datetime, timedelta, UTC
import pytest

from isp_ledger.domain.ledger import Ledger
from isp_ledger.storage.factories import create_memory_store


class FakeClock:
    """Deterministic clock advancing one minute per call."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        moment = self.current
        self.current += timedelta(minutes=1)
        return moment


@pytest.fixture
def clock():
    """Create a fake clock starting at a fixed moment."""
    return FakeClock(datetime(2024, 1, 15, 9, 0, tzinfo=UTC))


@pytest.fixture
def memory_store():
    """Create an empty in-memory store."""
    return create_memory_store()


@pytest.fixture
def ledger(clock):
    """Create a ledger seeded with the default tariffs."""
    return Ledger(clock=clock)


@pytest.fixture
def empty_ledger(clock):
    """Create a ledger without default tariffs."""
    return Ledger(seed_defaults=False, clock=clock)


@pytest.fixture
def lenient_ledger(clock):
    """Create a ledger that stores unknown tariff references unchecked."""
    return Ledger(strict_references=False, clock=clock)


@pytest.fixture
def sample_client(ledger):
    """Register a client on the Standard tariff."""
    return ledger.register_client(
        name="A", address="Main St 1", phone="555-0100", tariff_id=2
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
