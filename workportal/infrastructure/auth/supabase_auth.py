"""
Supabase authentication service.
Handles account operations against Supabase Auth.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from supabase import AuthApiError, AuthError, Client

from workportal.domain.models.base import AuthenticationError, UpstreamUnavailableError
from workportal.domain.services.auth_service import AuthProvider, AuthSession


logger = logging.getLogger(__name__)


class SupabaseAuthService(AuthProvider):
    """
    Supabase Auth adapter.

    `client` performs credential flows. `admin_client` holds the service key and
    is only used to revoke sessions.
    """

    def __init__(self, client: Client, admin_client: Optional[Client] = None):
        self.client = client
        self.admin_client = admin_client or client

    def _to_session(self, response) -> AuthSession:
        user = response.user
        session = response.session
        return AuthSession(
            user_id=str(user.id),
            email=user.email,
            access_token=session.access_token if session else None,
            refresh_token=session.refresh_token if session else None,
            expires_at=session.expires_at if session else None,
        )

    def _call(self, action: str, fn, *args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except AuthApiError as e:
            logger.info(f"Auth provider rejected {action}: {e.message}")
            raise AuthenticationError(e.message)
        except AuthError as e:
            logger.error(f"Auth provider failed during {action}: {e.message}")
            raise UpstreamUnavailableError()
        except httpx.HTTPError as e:
            logger.error(f"Auth provider unreachable during {action}: {str(e)}")
            raise UpstreamUnavailableError()

    def sign_up(self, email: str, password: str, metadata: Optional[Dict[str, Any]] = None,
                redirect_to: Optional[str] = None) -> AuthSession:
        options: Dict[str, Any] = {"data": metadata or {}}
        if redirect_to:
            options["email_redirect_to"] = redirect_to

        response = self._call("sign up", self.client.auth.sign_up, {
            "email": email,
            "password": password,
            "options": options,
        })
        if response.user is None:
            raise AuthenticationError("Failed to create user account")
        return self._to_session(response)

    def sign_in(self, email: str, password: str) -> AuthSession:
        response = self._call("sign in", self.client.auth.sign_in_with_password, {
            "email": email,
            "password": password,
        })
        if response.user is None or response.session is None:
            raise AuthenticationError("Invalid email or password")
        return self._to_session(response)

    def sign_out(self, access_token: str) -> None:
        self._call("sign out", self.admin_client.auth.admin.sign_out, access_token)

    def get_user(self, access_token: str) -> Optional[Dict[str, Any]]:
        try:
            response = self._call("token lookup", self.client.auth.get_user, access_token)
        except AuthenticationError:
            return None
        if response is None or response.user is None:
            return None
        return response.user.model_dump()
