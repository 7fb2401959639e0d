"""
Unit tests for token verification and the Supabase Auth adapter.
"""

import pytest
import httpx
from unittest.mock import Mock

from jose import jwt
from supabase import AuthApiError, AuthError

from workportal.domain.models.base import AuthenticationError, UpstreamUnavailableError
from workportal.infrastructure.auth.jwt_handler import JWTHandler
from workportal.infrastructure.auth.supabase_auth import SupabaseAuthService


SECRET = "unit-test-secret"


class TestJWTHandler:
    """Test cases for local JWT verification."""

    def setup_method(self):
        self.handler = JWTHandler(secret=SECRET, algorithm="HS256")

    def test_round_trip(self):
        token = self.handler.generate_test_token("user-1", email="u@example.com")

        payload = self.handler.verify_token(token)

        assert payload["sub"] == "user-1"
        assert payload["email"] == "u@example.com"

    def test_bearer_prefix_is_stripped(self):
        token = self.handler.generate_test_token("user-1")

        assert self.handler.get_user_id(f"Bearer {token}") == "user-1"

    def test_expired_token(self):
        token = self.handler.generate_test_token("user-1", expires_minutes=-1)

        with pytest.raises(AuthenticationError, match="expired"):
            self.handler.verify_token(token)

    def test_wrong_secret(self):
        token = JWTHandler(secret="other-secret", algorithm="HS256").generate_test_token("user-1")

        with pytest.raises(AuthenticationError, match="Invalid token"):
            self.handler.verify_token(token)

    def test_missing_subject(self):
        token = jwt.encode({"exp": 4102444800}, SECRET, algorithm="HS256")

        with pytest.raises(AuthenticationError, match="sub claim"):
            self.handler.verify_token(token)

    def test_missing_expiry(self):
        token = jwt.encode({"sub": "user-1"}, SECRET, algorithm="HS256")

        with pytest.raises(AuthenticationError, match="exp claim"):
            self.handler.verify_token(token)


def auth_response(with_session=True):
    user = Mock(id="user-1", email="u@example.com")
    session = Mock(access_token="access", refresh_token="refresh", expires_at=1700000000) if with_session else None
    return Mock(user=user, session=session)


class TestSupabaseAuthService:
    """Test cases for the Supabase Auth adapter with a mocked client."""

    def setup_method(self):
        self.client = Mock()
        self.admin = Mock()
        self.service = SupabaseAuthService(self.client, self.admin)

    def test_sign_up_passes_metadata_and_redirect(self):
        self.client.auth.sign_up.return_value = auth_response(with_session=False)

        session = self.service.sign_up(
            "u@example.com", "pw", metadata={"role": "client"}, redirect_to="https://app.example.com"
        )

        self.client.auth.sign_up.assert_called_once_with({
            "email": "u@example.com",
            "password": "pw",
            "options": {"data": {"role": "client"}, "email_redirect_to": "https://app.example.com"},
        })
        assert session.user_id == "user-1"
        assert session.access_token is None

    def test_sign_in(self):
        self.client.auth.sign_in_with_password.return_value = auth_response()

        session = self.service.sign_in("u@example.com", "pw")

        assert session.access_token == "access"
        assert session.expires_at == 1700000000

    def test_rejected_credentials(self):
        self.client.auth.sign_in_with_password.side_effect = AuthApiError("Invalid login credentials", 400, None)

        with pytest.raises(AuthenticationError, match="Invalid login credentials"):
            self.service.sign_in("u@example.com", "wrong")

    def test_provider_failure_is_upstream(self):
        self.client.auth.sign_in_with_password.side_effect = AuthError("boom", None)

        with pytest.raises(UpstreamUnavailableError):
            self.service.sign_in("u@example.com", "pw")

    def test_unreachable_provider_is_upstream(self):
        self.client.auth.sign_in_with_password.side_effect = httpx.ConnectTimeout("timed out")

        with pytest.raises(UpstreamUnavailableError):
            self.service.sign_in("u@example.com", "pw")

    def test_sign_out_uses_admin_client(self):
        self.service.sign_out("access")

        self.admin.auth.admin.sign_out.assert_called_once_with("access")
        self.client.auth.sign_out.assert_not_called()

    def test_get_user_with_rejected_token(self):
        self.client.auth.get_user.side_effect = AuthApiError("invalid JWT", 401, None)

        assert self.service.get_user("bad") is None
