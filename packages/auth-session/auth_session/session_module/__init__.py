"""
Session Management Module
Provides the session lifecycle manager, its consumer interface and storage.
"""
from .context import SessionContext
from .manager import SessionManager
from .models import CredentialRecord, Session
from .storage.base_store import BaseLogStore, BaseStore
from .storage.local_store import LocalLogStore, LocalStore
__all__ = [
    "SessionManager",
    "SessionContext",
    "Session",
    "CredentialRecord",
    "BaseStore",
    "BaseLogStore",
    "LocalStore",
    "LocalLogStore",
]
