"""Store factory functions."""

from isp_ledger.storage.memory import InMemoryStore


def create_memory_store() -> InMemoryStore:
    """Create an empty in-memory store.

    Records live only as long as the process; nothing is written to disk.
    """
    return InMemoryStore()
