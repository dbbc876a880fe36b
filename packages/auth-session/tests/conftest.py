import pytest

from unittest.mock import AsyncMock, MagicMock
from auth_session.audit_module.manager import AuditManager
from auth_session.auth.service_client import AuthServiceClient
from auth_session.session_module.manager import SessionManager
from auth_session.session_module.storage.local_store import LocalLogStore, LocalStore


@pytest.fixture
def store_path(tmp_path):
    return str(tmp_path / "session_store")


@pytest.fixture
def store(store_path):
    return LocalStore(store_path)


@pytest.fixture
def log_store(store_path):
    return LocalLogStore(store_path)


@pytest.fixture
def audit(log_store):
    return AuditManager(log_store)


@pytest.fixture
def mock_service_client():
    mock = MagicMock(spec=AuthServiceClient)
    mock.login = AsyncMock()
    mock.register = AsyncMock()
    mock.close = AsyncMock()
    return mock


@pytest.fixture
def manager(mock_service_client, store, audit):
    return SessionManager(mock_service_client, store, audit)
