"""Audit log entry: the immutable record of a login, logout or signup."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AuditAction(str, Enum):
    LOGIN = "login"
    LOGOUT = "logout"
    SIGNUP = "signup"


class AuditLogEntry(BaseModel):
    """One session event.

    Serialized with camelCase keys (userId, loginTime, tokenName, ...) so the
    stored log keeps the layout admin views already read.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str
    user_id: str
    username: str
    role: str
    action: AuditAction
    login_time: Optional[datetime] = None
    logout_time: Optional[datetime] = None
    ip_address: str
    token_name: str

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "AuditLogEntry":
        return cls.model_validate(record)
