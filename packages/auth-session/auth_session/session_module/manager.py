from __future__ import annotations
import logging
from typing import Any, Callable, List, Optional

from ..audit_module.entry import AuditAction
from ..audit_module.manager import AuditManager
from ..exceptions import (
    AuthServiceError,
    AuthenticationFailed,
    CorruptedSessionState,
    RegistrationFailed,
)
from ..state.session_state import SessionSnapshot
from ..utils.ids import UNKNOWN, time_id
from .models import ROLE_KEY, CredentialRecord, Session
from .storage.base_store import BaseStore

logger = logging.getLogger(__name__)

Listener = Callable[[SessionSnapshot], None]

ADMIN_ROLE = "admin"


class SessionManager:
    """
    Single source of truth for the session lifecycle.

    Owns the in-memory session, is the only writer of the credential store
    and the audit log, and publishes one SessionSnapshot per transition.
    Transitions must not overlap: callers await one before starting the next.
    """

    def __init__(self, service_client: Any, store: BaseStore, audit: AuditManager):
        """
        Initialize session manager.

        Args:
            service_client: Authentication Service client (login/register coroutines)
            store: Durable credential store
            audit: Audit log recorder
        """
        self.service_client = service_client
        self.store = store
        self.audit = audit

        self._record = CredentialRecord()
        self._session: Optional[Session] = None
        self._loading = True
        self._error: Optional[str] = None
        self._snapshot = SessionSnapshot()
        self._listeners: List[Listener] = []

    @property
    def snapshot(self) -> SessionSnapshot:
        """The last published state."""
        return self._snapshot

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback receiving every published snapshot.
        Returns:
            Callable removing the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def clear_listeners(self) -> None:
        self._listeners.clear()

    def _publish(self) -> SessionSnapshot:
        self._snapshot = SessionSnapshot.build(
            self._record, self._session, self._loading, self._error)
        for listener in list(self._listeners):
            listener(self._snapshot)
        return self._snapshot

    # Transitions

    def check_auth(self) -> SessionSnapshot:
        """
        Determine the initial state from the credential store. A token stored
        without its email is treated as corrupted and cleared with a logout.
        Always leaves the loading state.
        """
        try:
            self._record = CredentialRecord.load(self.store)
            if self._record.is_corrupted:
                raise CorruptedSessionState()
            if self._record.has_token:
                self._session = Session(email=self._record.email)
        except CorruptedSessionState as error:
            logger.warning("%s Clearing authentication data.", error.message)
            self._logout()
        except Exception:
            logger.exception("Authentication check failed")
            self._sanitize()
        finally:
            self._loading = False
            self._publish()
        return self._snapshot

    async def login(self, email: str, password: str) -> Session:
        """
        Authenticate against the service and persist the credentials.
        Args:
            email: Account email
            password: Account password
        Returns:
            The new session
        Raises:
            AuthenticationFailed: service rejected the credentials or failed
        """
        self._error = None
        try:
            response = await self.service_client.login(email, password)
        except AuthServiceError as error:
            logger.error("Login error for %s: %s", email, error.message)
            self._error = AuthenticationFailed.default_message
            self._publish()
            raise AuthenticationFailed() from error

        session = self._establish(email, response.token, response.role, response.user_id)
        self.audit.record(
            AuditAction.LOGIN,
            username=email,
            role=self._record.role or UNKNOWN,
            user_id=self._record.account_id,
            token=response.token,
        )
        logger.info("User logged in: %s", email)
        self._publish()
        return session

    async def signup(self, full_name: str, email: str, password: str, role: str) -> Session:
        """
        Register a new account and persist the credentials with the given role.
        Args:
            full_name: Display name
            email: Account email
            password: Account password
            role: Role of the new account
        Returns:
            The new session
        Raises:
            RegistrationFailed: service rejected the registration or failed
        """
        self._error = None
        try:
            response = await self.service_client.register(full_name, email, password, role)
        except AuthServiceError as error:
            logger.error("Registration error for %s: %s", email, error.message)
            self._error = RegistrationFailed.default_message
            self._publish()
            raise RegistrationFailed() from error

        session = self._establish(email, response.token, role, response.user_id)
        self.audit.record(
            AuditAction.SIGNUP,
            username=email,
            role=role,
            user_id=self._record.account_id,
            token=response.token,
        )
        logger.info("User registered: %s (%s)", email, role)
        self._publish()
        return session

    def logout(self) -> SessionSnapshot:
        """
        End the session, keeping the role so the dashboard panel stays available.
        A logout without a stored email and role appends no audit entry.
        """
        self._logout()
        return self._publish()

    def sign_out(self) -> SessionSnapshot:
        """Logout and forget the role as well."""
        self._logout()
        self._record = self._record.clear_role(self.store)
        logger.info("User signed out, role cleared")
        return self._publish()

    async def reset_password(self, email: str) -> None:
        # No reset endpoint on the service yet; the request is only logged.
        logger.info("Password reset requested for: %s", email)

    # Queries

    def has_role(self, required_role: str) -> bool:
        """
        Compare against the stored role. While loading, the in-memory record
        is not filled yet, so the store is read directly.
        """
        role = self.store.get(ROLE_KEY) if self._loading else self._record.role
        return role is not None and role == required_role

    def is_admin(self) -> bool:
        return self.has_role(ADMIN_ROLE)

    # Helpers

    def _establish(self, email: str, token: str, role: Optional[str], account_id: Optional[str]) -> Session:
        record = CredentialRecord(
            token=token,
            email=email,
            role=role or self._record.role,
            account_id=account_id or time_id("user"),
        )
        record.save(self.store)
        self._record = record
        self._session = Session(email=email)
        self._error = None
        return self._session

    def _logout(self) -> None:
        # Read what is stored before anything is removed
        stored = CredentialRecord.load(self.store)

        if stored.email and stored.role:
            self.audit.record(
                AuditAction.LOGOUT,
                username=stored.email,
                role=stored.role,
                user_id=stored.account_id,
                token=stored.token,
            )

        self._record = stored.clear_session(self.store)
        self._session = None
        self._error = None
        logger.info("User logged out - dashboard panel mode %s",
                    "activated" if self._record.role else "unavailable")

    def _sanitize(self) -> None:
        # Logout needs a readable store; when it is not, drop the session keys
        # without an audit entry.
        try:
            self._logout()
        except Exception:
            logger.exception("Logout after failed authentication check failed, clearing session keys")
            self._record = self._record.clear_session(self.store)
            self._session = None
            self._error = None
