from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional

from .storage.base_store import BaseStore

TOKEN_KEY = "token"
EMAIL_KEY = "email"
ROLE_KEY = "userRole"
ACCOUNT_ID_KEY = "userId"


@dataclass(frozen=True)
class Session:
    """The in-memory record that a user is authenticated in this process."""
    email: Optional[str] = None


@dataclass(frozen=True)
class CredentialRecord:
    """
    Durable fields identifying the current or last session.

    token and email are written and cleared together. role and account_id
    may outlive them after a logout.
    """
    token: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    account_id: Optional[str] = None

    @property
    def has_token(self) -> bool:
        return bool(self.token)

    @property
    def is_corrupted(self) -> bool:
        """A token without the email it was issued for."""
        return bool(self.token) and not self.email

    @classmethod
    def load(cls, store: BaseStore) -> "CredentialRecord":
        """Read every credential field from the store."""
        return cls(
            token=store.get(TOKEN_KEY),
            email=store.get(EMAIL_KEY),
            role=store.get(ROLE_KEY),
            account_id=store.get(ACCOUNT_ID_KEY),
        )

    def save(self, store: BaseStore) -> None:
        """
        Persist the record. Any previous token is removed first and the new
        one written last, so an interrupted write never pairs a token with
        the wrong email.
        """
        store.remove(TOKEN_KEY)
        _put(store, EMAIL_KEY, self.email)
        _put(store, ROLE_KEY, self.role)
        _put(store, ACCOUNT_ID_KEY, self.account_id)
        _put(store, TOKEN_KEY, self.token)

    def clear_session(self, store: BaseStore) -> "CredentialRecord":
        """
        Remove token, email and account id, keeping the role.
        The token goes first for the same reason it is written last.
        """
        store.remove(TOKEN_KEY)
        store.remove(EMAIL_KEY)
        store.remove(ACCOUNT_ID_KEY)
        return replace(self, token=None, email=None, account_id=None)

    def clear_role(self, store: BaseStore) -> "CredentialRecord":
        store.remove(ROLE_KEY)
        return replace(self, role=None)


def _put(store: BaseStore, key: str, value: Optional[str]) -> None:
    if value is None:
        store.remove(key)
    else:
        store.set(key, value)
