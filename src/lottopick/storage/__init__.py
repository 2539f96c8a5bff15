"""Key/value stores for the combination archive."""

from .base import Store, StoreError
from .json_file import JsonFileStore
from .memory import InMemoryStore

__all__ = ["InMemoryStore", "JsonFileStore", "Store", "StoreError"]
