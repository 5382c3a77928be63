"""Durable storage for the studio board."""

from .backend import JsonFileStorage, KeyValueStorage, MemoryStorage, StorageUnavailableError
from .board import BoardEntry, BoardState, BoardStore
from .factory import build_storage

__all__ = [
    "BoardEntry",
    "BoardState",
    "BoardStore",
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "StorageUnavailableError",
    "build_storage",
]
