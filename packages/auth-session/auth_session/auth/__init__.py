"""
Authentication Module
Configuration, the Authentication Service client and the lifecycle owner.
"""
from .auth_client import SessionAuth
from .base import BaseAuth
from .service_client import AuthResponse, AuthServiceClient

__all__ = ["SessionAuth", "BaseAuth", "AuthServiceClient", "AuthResponse"]
