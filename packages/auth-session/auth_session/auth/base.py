from __future__ import annotations
import os
from dotenv import find_dotenv, load_dotenv


class BaseAuth:
    """Base class holding session configuration and its validation"""
    # Config fields, their environment variable names and defaults
    CONFIGS = {
        'backend_url': ('SESSION_BACKEND_URL', 'http://localhost:5000'),
        'store_path': ('SESSION_STORE_PATH', '.session_store'),
        'timeout': ('SESSION_HTTP_TIMEOUT', '5.0'),
        'client_ip': ('SESSION_CLIENT_IP', '127.0.0.1'),
    }

    def __init__(
            self,
            backend_url: str | None = None,
            store_path: str | None = None,
            timeout: float | str | None = None,
            client_ip: str | None = None):

        ENV_FILE = find_dotenv(usecwd=True)
        if ENV_FILE:
            load_dotenv(ENV_FILE)

        values = {
            'backend_url': backend_url,
            'store_path': store_path,
            'timeout': timeout,
            'client_ip': client_ip,
        }
        for field, (env_var, default) in self.CONFIGS.items():
            value = values[field]
            if value is None:
                value = os.environ.get(env_var, default)
            self._validate_and_set(field, value)

    @property
    def backend_url(self) -> str:
        return self._backend_url

    @property
    def store_path(self) -> str:
        return self._store_path

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def client_ip(self) -> str:
        return self._client_ip

    def _validate_and_set(self, field: str, value: float | str | None) -> None:
        """Validate and set a configuration value"""
        env_var = self.CONFIGS[field][0]
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError(
                f"{field} cannot be empty. You can also set {env_var} value in .env file")
        if field == 'timeout':
            try:
                value = float(value)
            except ValueError:
                raise ValueError(f"{field} must be a number of seconds, got {value!r} ({env_var})")
            if value <= 0:
                raise ValueError(f"{field} must be positive ({env_var})")
        setattr(self, f'_{field}', value)
