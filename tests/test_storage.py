"""Tests for the in-memory store."""

from decimal import Decimal

import pytest

from isp_ledger.domain.entities import Client, Tariff, TariffCategory
from isp_ledger.domain.errors import ConflictError
from isp_ledger.storage import Store, create_memory_store


def make_tariff(tariff_id: int) -> Tariff:
    return Tariff(
        id=tariff_id,
        name=f"T{tariff_id}",
        category=TariffCategory.ECONOMY,
        price_per_gb=Decimal("1"),
        monthly_fee=Decimal("2"),
    )


def test_factory_returns_store(memory_store):
    assert isinstance(memory_store, Store)
    assert memory_store.list_tariffs() == []
    assert memory_store.list_clients() == []


def test_id_counters_are_independent(memory_store):
    assert [memory_store.next_tariff_id() for _ in range(3)] == [1, 2, 3]
    assert [memory_store.next_client_id() for _ in range(2)] == [1, 2]
    assert memory_store.next_tariff_id() == 4


def test_stores_do_not_share_state():
    first = create_memory_store()
    second = create_memory_store()
    first.next_tariff_id()
    first.add_tariff(make_tariff(1))
    assert second.next_tariff_id() == 1
    assert second.get_tariff(1) is None


def test_tariff_round_trip_keeps_insertion_order(memory_store):
    for tariff_id in (3, 1, 2):
        memory_store.add_tariff(make_tariff(tariff_id))
    assert [t.id for t in memory_store.list_tariffs()] == [3, 1, 2]
    assert memory_store.get_tariff(1).name == "T1"
    assert memory_store.get_tariff(9) is None


def test_client_lookup(memory_store):
    client = Client(id=1, name="A", address="addr", phone="phone", tariff_id=1)
    memory_store.add_client(client)
    assert memory_store.get_client(1) is client
    assert memory_store.get_client(2) is None
    assert memory_store.list_clients() == [client]


def test_duplicate_ids_rejected(memory_store):
    memory_store.add_tariff(make_tariff(1))
    with pytest.raises(ConflictError, match="Tariff with ID 1 already exists"):
        memory_store.add_tariff(make_tariff(1))

    client = Client(id=1, name="A", address="addr", phone="phone", tariff_id=1)
    memory_store.add_client(client)
    with pytest.raises(ConflictError):
        memory_store.add_client(client)


def test_listing_is_a_copy(memory_store):
    memory_store.add_tariff(make_tariff(1))
    listing = memory_store.list_tariffs()
    listing.clear()
    assert len(memory_store.list_tariffs()) == 1
