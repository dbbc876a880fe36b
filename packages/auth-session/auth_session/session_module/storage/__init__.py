"""
Session Storage Implementations
"""
from .base_store import BaseLogStore, BaseStore
from .local_store import LocalLogStore, LocalStore

__all__ = ["BaseStore", "BaseLogStore", "LocalStore", "LocalLogStore"]
