"""Storage layer for isp_ledger."""

from isp_ledger.storage.base import Store
from isp_ledger.storage.factories import create_memory_store

__all__ = ["Store", "create_memory_store"]
