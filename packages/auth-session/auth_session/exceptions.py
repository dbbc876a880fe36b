from __future__ import annotations


class SessionError(Exception):
    """Base class for every error raised by the session lifecycle."""

    default_message = "Session operation failed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthenticationFailed(SessionError):
    """Login was rejected or the Authentication Service could not be reached."""

    default_message = "Failed to login. Please check your credentials."


class RegistrationFailed(SessionError):
    """Signup was rejected or the Authentication Service could not be reached."""

    default_message = "Failed to create an account. Please try again."


class CorruptedSessionState(SessionError):
    """
    A token was found in the credential store without a matching email.
    Recovered by a forced logout during the startup check.
    """

    default_message = "Stored token has no matching email."


class AuthServiceError(SessionError):
    """Transport-level failure talking to the Authentication Service."""

    default_message = "Authentication service request failed."

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
