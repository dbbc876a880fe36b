from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, List, Optional

from ..utils.ids import UNKNOWN, time_id, token_name
from .entry import AuditAction, AuditLogEntry

if TYPE_CHECKING:
    from ..session_module.storage.base_store import BaseLogStore

logger = logging.getLogger(__name__)

DEFAULT_IP_ADDRESS = "127.0.0.1"


class AuditManager:
    """
    Builds audit log entries and appends them to the log store.
    Entries are never changed or removed once appended.
    """

    def __init__(self, log_store: BaseLogStore, ip_address: str = DEFAULT_IP_ADDRESS):
        """
        Initialize audit manager.
        Args:
            log_store: Append-only store receiving serialized entries
            ip_address: Address recorded on every entry
        """
        self.log_store = log_store
        self.ip_address = ip_address

    def record(
        self,
        action: AuditAction,
        username: str,
        role: str,
        user_id: Optional[str] = None,
        token: Optional[str] = None,
    ) -> AuditLogEntry:
        """
        Append an entry for a session event.
        Args:
            action: login, logout or signup
            username: Account email
            role: Role held at the time of the event
            user_id: Account id, "unknown" if absent
            token: Session token; only its truncated name is recorded
        Returns:
            The appended entry
        """
        now = datetime.now(timezone.utc)
        entry = AuditLogEntry(
            id=time_id(action.value),
            user_id=user_id or UNKNOWN,
            username=username,
            role=role,
            action=action,
            login_time=None if action is AuditAction.LOGOUT else now,
            logout_time=now if action is AuditAction.LOGOUT else None,
            ip_address=self.ip_address,
            token_name=token_name(token),
        )
        self.log_store.append(entry.to_record())
        logger.info("Recorded %s for %s (%s)", action.value, username, entry.token_name)
        return entry

    def entries(self) -> List[AuditLogEntry]:
        """Every entry in insertion order."""
        return [AuditLogEntry.from_record(record) for record in self.log_store.read_all()]
