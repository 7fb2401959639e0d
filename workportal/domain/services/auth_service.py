"""
Authentication provider interface.
Identity is delegated to an external provider; the domain only needs the
principal id it hands out and the session tokens for the caller.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class AuthSession:
    """Tokens issued by the provider for a signed-in principal."""

    user_id: str
    email: Optional[str] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_at: Optional[int] = None


class AuthProvider(ABC):
    """
    Authentication provider interface.
    Raises AuthenticationError for rejected credentials and
    UpstreamUnavailableError when the provider cannot be reached.
    """

    @abstractmethod
    def sign_up(self, email: str, password: str, metadata: Optional[Dict[str, Any]] = None,
                redirect_to: Optional[str] = None) -> AuthSession:
        """
        Create a principal. The session tokens may be empty when the provider
        requires email confirmation first.
        """
        pass

    @abstractmethod
    def sign_in(self, email: str, password: str) -> AuthSession:
        pass

    @abstractmethod
    def sign_out(self, access_token: str) -> None:
        pass

    @abstractmethod
    def get_user(self, access_token: str) -> Optional[Dict[str, Any]]:
        """Return the principal for a token, or None if the token is not valid."""
        pass
