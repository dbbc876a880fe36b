from __future__ import annotations
import logging
from typing import List

from .base import BaseAuth
from .service_client import AuthServiceClient
from ..audit_module.entry import AuditLogEntry
from ..audit_module.manager import AuditManager
from ..session_module.context import SessionContext
from ..session_module.manager import SessionManager
from ..session_module.storage.base_store import BaseLogStore, BaseStore
from ..session_module.storage.local_store import LocalLogStore, LocalStore

logger = logging.getLogger(__name__)


class SessionAuth(BaseAuth):
    """
    Owns one session lifecycle: wires storage, the Authentication Service
    client and the session manager, and hands consumers a SessionContext.

    Use init() on start and dispose() on shutdown, or ``async with``.
    """

    def __init__(
            self,
            backend_url: str | None = None,
            store_path: str | None = None,
            timeout: float | str | None = None,
            client_ip: str | None = None,
            store: BaseStore | None = None,
            log_store: BaseLogStore | None = None,
            service_client: AuthServiceClient | None = None):
        """Initialize SessionAuth with all necessary components"""
        super().__init__(
            backend_url=backend_url,
            store_path=store_path,
            timeout=timeout,
            client_ip=client_ip,
        )
        # Credentials and the audit log share one file by default
        self.store = store or LocalStore(self.store_path)
        self.log_store = log_store or LocalLogStore(self.store_path)
        self.service_client = service_client or AuthServiceClient(self)
        self.audit = AuditManager(self.log_store, ip_address=self.client_ip)
        self.session_manager = SessionManager(self.service_client, self.store, self.audit)
        self.context = SessionContext(self.session_manager)

    async def init(self) -> SessionContext:
        """Open the service connection and run the startup check."""
        self.service_client.open()
        try:
            snapshot = self.session_manager.check_auth()
        except Exception:
            await self.service_client.close()
            raise
        logger.info("Session restored as %s", snapshot.status.value)
        return self.context

    async def dispose(self) -> None:
        self.session_manager.clear_listeners()
        await self.service_client.close()

    async def __aenter__(self) -> SessionContext:
        return await self.init()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.dispose()

    def audit_log(self) -> List[AuditLogEntry]:
        """Audit entries in the order they were recorded."""
        return self.audit.entries()
