"""In-memory implementation of the Store interface."""

from itertools import count
from typing import Optional

from isp_ledger.domain.entities import Client, Tariff
from isp_ledger.domain.errors import ConflictError, duplicate_id
from isp_ledger.storage.base import Store


class InMemoryStore(Store):
    """Dict-backed store; dicts keep insertion order for listings."""

    def __init__(self):
        self._tariffs: dict[int, Tariff] = {}
        self._clients: dict[int, Client] = {}
        self._tariff_ids = count(1)
        self._client_ids = count(1)

    def next_tariff_id(self) -> int:
        return next(self._tariff_ids)

    def next_client_id(self) -> int:
        return next(self._client_ids)

    def add_tariff(self, tariff: Tariff) -> None:
        if tariff.id in self._tariffs:
            raise ConflictError(duplicate_id("Tariff", tariff.id))
        self._tariffs[tariff.id] = tariff

    def get_tariff(self, tariff_id: int) -> Optional[Tariff]:
        return self._tariffs.get(tariff_id)

    def list_tariffs(self) -> list[Tariff]:
        return list(self._tariffs.values())

    def add_client(self, client: Client) -> None:
        if client.id in self._clients:
            raise ConflictError(duplicate_id("Client", client.id))
        self._clients[client.id] = client

    def get_client(self, client_id: int) -> Optional[Client]:
        return self._clients.get(client_id)

    def list_clients(self) -> list[Client]:
        return list(self._clients.values())
