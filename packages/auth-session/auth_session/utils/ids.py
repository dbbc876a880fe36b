from __future__ import annotations
import time

TOKEN_NAME_LENGTH = 10
UNKNOWN = "unknown"


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def time_id(prefix: str) -> str:
    """
    Build an id such as "user-1718000000000" from the current time in
    milliseconds. Two calls within the same millisecond collide; good enough
    for a single-client audit trail, not for primary keys.
    """
    return f"{prefix}-{_now_ms()}"


def token_name(token: str | None) -> str:
    """Non-secret label for a token: its first characters plus an ellipsis."""
    if not token:
        return UNKNOWN
    return token[:TOKEN_NAME_LENGTH] + "..."
