from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, List

class BaseStore(ABC):
    """
    Abstract base class defining the interface for credential storage.
    Values are plain strings keyed by name and must survive process restarts.
    There is no transaction across keys: callers order their writes.
    """
    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Get a stored value.
        Args:
            key: Name of the credential field
        Returns:
            The stored value if found, None otherwise
        """
        pass
    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Store a value, replacing any previous one.
        Args:
            key: Name of the credential field
            value: The value to store
        """
        pass
    @abstractmethod
    def remove(self, key: str) -> None:
        """
        Remove a value. Removing a missing key is not an error.
        Args:
            key: Name of the credential field
        """
        pass


class BaseLogStore(ABC):
    """
    Abstract base class for the append-only audit log.
    Entries are JSON-compatible dicts kept in insertion order.
    """
    @abstractmethod
    def append(self, entry: Dict[str, Any]) -> None:
        """
        Append an entry after every existing one.
        Args:
            entry: Serialized audit log entry
        """
        pass
    @abstractmethod
    def read_all(self) -> List[Dict[str, Any]]:
        """
        Read every entry.
        Returns:
            Entries in insertion order, empty list if none exist
        """
        pass
