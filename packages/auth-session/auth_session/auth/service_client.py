from __future__ import annotations
import asyncio
from typing import Any, Dict, Optional

import aiohttp
from auth0.exceptions import Auth0Error
from auth0.rest_async import AsyncRestClient
from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import AuthServiceError
from ..utils.url_builder import URLBuilder


class AuthResponse(BaseModel):
    """Body returned by the login and registration endpoints."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    token: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="userId")
    role: Optional[str] = None


class AuthServiceClient:
    """
    Async client for the external Authentication Service.
    Any non-2xx answer, transport failure or answer without a token raises
    AuthServiceError.
    """

    def __init__(self, auth_client: Any, rest_client: AsyncRestClient | None = None):
        """
        Initialize the service client.
        Args:
            auth_client: Object exposing backend_url and timeout
            rest_client: Optional pre-built REST client
        """
        self.auth_client = auth_client
        self.url_builder = URLBuilder(auth_client)
        self.rest_client = rest_client or AsyncRestClient(
            jwt=None, telemetry=False, timeout=auth_client.timeout)
        self._session: aiohttp.ClientSession | None = None

    def open(self) -> None:
        """Share one aiohttp session across requests until close()."""
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self.rest_client.set_session(self._session)

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def login(self, email: str, password: str) -> AuthResponse:
        """
        Authenticate existing credentials.
        Args:
            email: Account email
            password: Account password
        Returns:
            Parsed service response carrying a token
        """
        return await self._post(self.url_builder.get_login_url(), {
            "email": email,
            "password": password,
        })

    async def register(self, full_name: str, email: str, password: str, role: str) -> AuthResponse:
        """
        Create an account.
        Args:
            full_name: Display name
            email: Account email
            password: Account password
            role: Requested role, e.g. "user" or "admin"
        Returns:
            Parsed service response carrying a token
        """
        return await self._post(self.url_builder.get_register_url(), {
            "fullName": full_name,
            "email": email,
            "password": password,
            "role": role,
        })

    async def _post(self, url: str, payload: Dict[str, Any]) -> AuthResponse:
        try:
            data = await self.rest_client.post(url, data=payload)
        except Auth0Error as error:
            raise AuthServiceError(error.message, status_code=error.status_code) from error
        except (aiohttp.ClientError, asyncio.TimeoutError) as error:
            raise AuthServiceError(f"Could not reach authentication service: {error}") from error

        if not isinstance(data, dict):
            raise AuthServiceError("Unexpected response from authentication service.")
        response = AuthResponse.model_validate(data)
        if not response.token:
            raise AuthServiceError("Authentication service returned no token.")
        return response
