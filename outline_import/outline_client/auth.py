"""Authentication module for loading Outline credentials.

This module resolves the Outline host and API token from explicit values or
environment variables (a local .env file is loaded with python-dotenv first).
The token is never logged.
"""

import os
from typing import NamedTuple, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

DEFAULT_HOST = "https://app.getoutline.com"

TOKEN_ENV_VAR = "OUTLINE_API_TOKEN"
HOST_ENV_VAR = "OUTLINE_HOST"


class Credentials(NamedTuple):
    """Outline API credentials."""
    host: str
    api_token: str


class Authenticator:
    """Resolves and validates Outline credentials.

    Explicit values passed to the constructor win over the environment.

    Environment variables:
        OUTLINE_API_TOKEN: Outline API token (required unless passed explicitly)
        OUTLINE_HOST: Outline base URL (defaults to https://app.getoutline.com)

    Example:
        >>> auth = Authenticator(token="ol_api_...")
        >>> creds = auth.get_credentials()
        >>> print(f"Connecting to {creds.host}")
    """

    def __init__(self, token: Optional[str] = None, host: Optional[str] = None):
        """Initialize the authenticator and load environment variables from .env.

        Args:
            token: API token given on the command line (optional)
            host: Outline host URL given on the command line (optional)
        """
        load_dotenv()
        self._token = token
        self._host = host

    def get_credentials(self) -> Credentials:
        """Get Outline credentials.

        Returns:
            Credentials: host (without trailing slash) and api_token

        Raises:
            ConfigurationError: If no API token is available
        """
        api_token = self._token or os.getenv(TOKEN_ENV_VAR)
        if not api_token:
            raise ConfigurationError(
                f"Outline API token must be provided via --token or the "
                f"{TOKEN_ENV_VAR} environment variable",
                config_field="token",
            )

        host = self._host or os.getenv(HOST_ENV_VAR) or DEFAULT_HOST
        return Credentials(host=host.rstrip("/"), api_token=api_token)
