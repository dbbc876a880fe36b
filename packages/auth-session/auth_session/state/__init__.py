"""
Session State Module
Lifecycle states and the snapshot published to consumers.
"""
from .session_state import SessionSnapshot, SessionStatus

__all__ = ["SessionSnapshot", "SessionStatus"]
