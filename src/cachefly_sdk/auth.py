"""
Authentication methods for CacheFly SDK.
"""

import base64
from abc import ABC, abstractmethod
from typing import Dict


class AuthMethod(ABC):
    """Base class for authentication methods."""

    @abstractmethod
    def get_headers(self) -> Dict[str, str]:
        """Get authentication headers."""
        pass


class TokenAuth(AuthMethod):
    """API token authentication."""

    def __init__(self, token: str):
        """
        Initialize token authentication.

        Args:
            token: CacheFly API token
        """
        if not token:
            raise ValueError("token is required")
        self.token = token

    def get_headers(self) -> Dict[str, str]:
        """Get authentication headers."""
        return {"Authorization": f"Bearer {self.token}"}

    def __repr__(self) -> str:
        return "TokenAuth(token='***')"


class BasicAuth(AuthMethod):
    """HTTP Basic authentication."""

    def __init__(self, username: str, password: str):
        """
        Initialize basic authentication.

        Args:
            username: Username for authentication
            password: Password for authentication
        """
        self.username = username
        self.password = password

    def get_headers(self) -> Dict[str, str]:
        """Get authentication headers."""
        credentials = f"{self.username}:{self.password}"
        encoded_credentials = base64.b64encode(credentials.encode()).decode()

        return {"Authorization": f"Basic {encoded_credentials}"}
