"""
Audit Module
Local, append-only trail of login, logout and signup events.
"""
from .entry import AuditAction, AuditLogEntry
from .manager import AuditManager

__all__ = ["AuditAction", "AuditLogEntry", "AuditManager"]
