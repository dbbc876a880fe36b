from __future__ import annotations
from typing import Callable, Optional

from ..state.session_state import SessionSnapshot, SessionStatus
from .manager import Listener, SessionManager
from .models import Session


class SessionContext:
    """
    The contract UI code depends on. State is read from the last published
    snapshot; every change goes through the transition methods.
    """

    def __init__(self, manager: SessionManager):
        self._manager = manager

    @property
    def snapshot(self) -> SessionSnapshot:
        return self._manager.snapshot

    @property
    def session(self) -> Optional[Session]:
        return self.snapshot.session

    @property
    def loading(self) -> bool:
        """True until the startup check has run; render nothing session-dependent meanwhile."""
        return self.snapshot.loading

    @property
    def error(self) -> Optional[str]:
        return self.snapshot.error

    @property
    def status(self) -> SessionStatus:
        return self.snapshot.status

    @property
    def is_authenticated(self) -> bool:
        return self.snapshot.is_authenticated

    @property
    def is_dashboard_panel_mode(self) -> bool:
        return self.snapshot.is_dashboard_panel_mode

    @property
    def current_user_role(self) -> Optional[str]:
        return self.snapshot.current_user_role

    async def login(self, email: str, password: str) -> Session:
        return await self._manager.login(email, password)

    async def signup(self, full_name: str, email: str, password: str, role: str) -> Session:
        return await self._manager.signup(full_name, email, password, role)

    def logout(self) -> SessionSnapshot:
        return self._manager.logout()

    def sign_out(self) -> SessionSnapshot:
        return self._manager.sign_out()

    async def reset_password(self, email: str) -> None:
        await self._manager.reset_password(email)

    def has_role(self, required_role: str) -> bool:
        return self._manager.has_role(required_role)

    def is_admin(self) -> bool:
        return self._manager.is_admin()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._manager.subscribe(listener)
