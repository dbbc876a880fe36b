"""Input validation for the login and signup forms.

The forms only collect and check input; the session transitions stay in
SessionContext. Validation failures raise pydantic.ValidationError.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator, model_validator

from .session_module.context import SessionContext
from .session_module.models import Session

MIN_PASSWORD_LENGTH = 6
DEFAULT_ROLE = "user"


class LoginForm(BaseModel):
    email: str
    password: str

    @field_validator("email", "password")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    async def submit(self, context: SessionContext) -> Session:
        return await context.login(self.email, self.password)


class SignupForm(BaseModel):
    """Registration input. The role comes from the page that opened the form."""

    full_name: str
    email: str
    password: str
    confirm_password: str
    role: str = DEFAULT_ROLE

    @field_validator("full_name", "email", "password", "role")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("password")
    @classmethod
    def check_length(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"must be at least {MIN_PASSWORD_LENGTH} characters")
        return value

    @model_validator(mode="after")
    def check_passwords_match(self) -> "SignupForm":
        if self.password != self.confirm_password:
            raise ValueError("passwords do not match")
        return self

    async def submit(self, context: SessionContext) -> Session:
        return await context.signup(self.full_name, self.email, self.password, self.role)
