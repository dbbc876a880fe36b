from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..session_module.models import CredentialRecord, Session


class SessionStatus(str, Enum):
    """States of the session lifecycle."""
    LOADING = "loading"
    UNAUTHENTICATED = "unauthenticated"
    DASHBOARD_PANEL = "dashboard_panel"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class SessionSnapshot:
    """
    Read-only view of the session published after each transition.
    Derived fields are computed once from the manager's in-memory record,
    never by re-reading storage.
    """
    session: Optional[Session] = None
    loading: bool = True
    error: Optional[str] = None
    is_authenticated: bool = False
    is_dashboard_panel_mode: bool = False
    current_user_role: Optional[str] = None

    @classmethod
    def build(
        cls,
        record: CredentialRecord,
        session: Optional[Session],
        loading: bool,
        error: Optional[str],
    ) -> "SessionSnapshot":
        """
        Derive the consumer view from the credential record.
        Args:
            record: The manager's in-memory copy of the stored credentials
            session: Current in-memory session, None when logged out
            loading: Whether the startup check is still running
            error: Last error message, None if the last transition succeeded
        Returns:
            New snapshot
        """
        return cls(
            session=session,
            loading=loading,
            error=error,
            is_authenticated=record.has_token,
            is_dashboard_panel_mode=bool(record.role) and not record.has_token,
            current_user_role=record.role or None,
        )

    @property
    def status(self) -> SessionStatus:
        if self.loading:
            return SessionStatus.LOADING
        if self.is_authenticated:
            return SessionStatus.AUTHENTICATED
        if self.is_dashboard_panel_mode:
            return SessionStatus.DASHBOARD_PANEL
        return SessionStatus.UNAUTHENTICATED
