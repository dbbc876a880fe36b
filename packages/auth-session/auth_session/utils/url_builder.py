from __future__ import annotations
from typing import Any
from urllib.parse import urljoin

LOGIN_PATH = "/api/auth/login"
REGISTER_PATH = "/api/auth/register"


class URLBuilder:
    """
    Handles construction of Authentication Service endpoint URLs.
    """

    def __init__(self, auth_client: Any):
        """
        Initialize URL builder.
        Args:
            auth_client: Object exposing the configured backend_url
        """
        self.auth_client = auth_client

    @property
    def base_url(self) -> str:
        return self.auth_client.backend_url.rstrip("/") + "/"

    def get_login_url(self) -> str:
        """
        Returns:
            Absolute URL of the login endpoint
        """
        return urljoin(self.base_url, LOGIN_PATH.lstrip("/"))

    def get_register_url(self) -> str:
        """
        Returns:
            Absolute URL of the registration endpoint
        """
        return urljoin(self.base_url, REGISTER_PATH.lstrip("/"))
