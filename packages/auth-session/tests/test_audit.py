import pytest

from unittest.mock import patch
from pydantic import ValidationError
from auth_session.audit_module.entry import AuditAction, AuditLogEntry
from auth_session.audit_module.manager import AuditManager
from auth_session.utils.ids import time_id, token_name


def test_logout_entry_fields(audit):
    entry = audit.record(
        AuditAction.LOGOUT,
        username="a@x.com",
        role="admin",
        user_id="user-1",
        token="abcdefghijklmnop",
    )
    assert entry.id.startswith("logout-")
    assert entry.user_id == "user-1"
    assert entry.ip_address == "127.0.0.1"
    assert entry.token_name == "abcdefghij..."
    assert entry.login_time is None
    assert entry.logout_time is not None


@pytest.mark.parametrize("action", [AuditAction.LOGIN, AuditAction.SIGNUP])
def test_login_like_entries_have_login_time(audit, action):
    entry = audit.record(action, username="a@x.com", role="user")
    assert entry.id.startswith(f"{action.value}-")
    assert entry.login_time is not None
    assert entry.logout_time is None
    assert entry.user_id == "unknown"
    assert entry.token_name == "unknown"


def test_entries_keep_order(audit):
    for action in (AuditAction.SIGNUP, AuditAction.LOGOUT, AuditAction.LOGIN):
        audit.record(action, username="a@x.com", role="user")
    assert [entry.action for entry in audit.entries()] == [
        AuditAction.SIGNUP,
        AuditAction.LOGOUT,
        AuditAction.LOGIN,
    ]


def test_stored_record_uses_camel_case(audit, log_store):
    audit.record(AuditAction.LOGOUT, username="a@x.com", role="admin", token="t1")
    record = log_store.read_all()[0]
    assert set(record) == {
        "id", "userId", "username", "role", "action",
        "loginTime", "logoutTime", "ipAddress", "tokenName",
    }
    assert record["action"] == "logout"
    assert record["loginTime"] is None
    assert isinstance(record["logoutTime"], str)
    assert record["tokenName"] == "t1..."


def test_custom_ip_address(log_store):
    entry = AuditManager(log_store, ip_address="10.0.0.7").record(
        AuditAction.LOGIN, username="a@x.com", role="user")
    assert entry.ip_address == "10.0.0.7"


def test_entry_is_immutable(audit):
    entry = audit.record(AuditAction.LOGIN, username="a@x.com", role="user")
    with pytest.raises(ValidationError):
        entry.role = "admin"


def test_entry_reads_camel_case_record():
    entry = AuditLogEntry.from_record({
        "id": "logout-1718000000000",
        "userId": "unknown",
        "username": "a@x.com",
        "role": "admin",
        "action": "logout",
        "loginTime": None,
        "logoutTime": "2024-06-10T06:13:20.000Z",
        "ipAddress": "127.0.0.1",
        "tokenName": "eyJhbGciOi...",
    })
    assert entry.action is AuditAction.LOGOUT
    assert entry.logout_time.year == 2024


def test_time_id_uses_milliseconds():
    with patch("auth_session.utils.ids.time.time_ns", return_value=1_718_000_000_123_456_789):
        assert time_id("user") == "user-1718000000123"


@pytest.mark.parametrize("token,expected", [
    (None, "unknown"),
    ("", "unknown"),
    ("short", "short..."),
    ("0123456789abcdef", "0123456789..."),
])
def test_token_name(token, expected):
    assert token_name(token) == expected
