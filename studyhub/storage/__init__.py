"""Data-access layer: the storage contract and its implementations."""

from studyhub.storage.database_storage import DatabaseStorage
from studyhub.storage.memory_storage import MemoryStorage
from studyhub.storage.protocol import Payload, StorageProtocol

__all__ = [
    "DatabaseStorage",
    "MemoryStorage",
    "Payload",
    "StorageProtocol",
]
