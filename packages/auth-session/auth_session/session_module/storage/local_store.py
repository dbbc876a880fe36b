from __future__ import annotations
import shelve
from typing import Any, Dict, List

from .base_store import BaseLogStore, BaseStore

DEFAULT_STORE_PATH = ".session_store"
LOG_KEY = "userLogs"


class LocalStore(BaseStore):
    """
    Credential storage implementation using Python's shelve module.
    Values are written unencrypted; anything stored here is readable by
    whoever can read the shelve file.
    """

    def __init__(self, file_path: str = DEFAULT_STORE_PATH):
        """
        Initialize local store.

        Args:
            file_path: Path to the shelve file (default: ".session_store")
        """
        self.file_path = file_path

    def get(self, key: str) -> str | None:
        with shelve.open(self.file_path) as store:
            return store.get(key)

    def set(self, key: str, value: str) -> None:
        with shelve.open(self.file_path) as store:
            store[key] = value
            store.sync()

    def remove(self, key: str) -> None:
        with shelve.open(self.file_path) as store:
            if key in store:
                del store[key]


class LocalLogStore(BaseLogStore):
    """
    Audit log kept as a single list under one key of the shelve file, so it
    can live alongside the credentials. Appends rewrite the whole list.
    """

    def __init__(self, file_path: str = DEFAULT_STORE_PATH, key: str = LOG_KEY):
        self.file_path = file_path
        self.key = key

    def append(self, entry: Dict[str, Any]) -> None:
        with shelve.open(self.file_path) as store:
            entries = list(store.get(self.key, []))
            entries.append(dict(entry))
            store[self.key] = entries
            store.sync()

    def read_all(self) -> List[Dict[str, Any]]:
        with shelve.open(self.file_path) as store:
            return [dict(entry) for entry in store.get(self.key, [])]
