"""
Client-side session lifecycle: login, signup and logout against an
external Authentication Service, durable credentials, and a local audit
trail of session events.
"""
from .audit_module import AuditAction, AuditLogEntry, AuditManager
from .auth import AuthResponse, AuthServiceClient, BaseAuth, SessionAuth
from .exceptions import (
    AuthServiceError,
    AuthenticationFailed,
    CorruptedSessionState,
    RegistrationFailed,
    SessionError,
)
from .forms import LoginForm, SignupForm
from .session_module import (
    BaseLogStore,
    BaseStore,
    CredentialRecord,
    LocalLogStore,
    LocalStore,
    Session,
    SessionContext,
    SessionManager,
)
from .state import SessionSnapshot, SessionStatus

__all__ = [
    "SessionAuth",
    "BaseAuth",
    "AuthServiceClient",
    "AuthResponse",
    "SessionManager",
    "SessionContext",
    "Session",
    "CredentialRecord",
    "SessionSnapshot",
    "SessionStatus",
    "BaseStore",
    "BaseLogStore",
    "LocalStore",
    "LocalLogStore",
    "AuditAction",
    "AuditLogEntry",
    "AuditManager",
    "LoginForm",
    "SignupForm",
    "SessionError",
    "AuthenticationFailed",
    "RegistrationFailed",
    "CorruptedSessionState",
    "AuthServiceError",
]
