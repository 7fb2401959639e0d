"""
JWT token handler for Supabase authentication.
Validates access tokens locally and extracts the principal id.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt as jose_jwt

from workportal.config import get_settings
from workportal.domain.models.base import AuthenticationError


class JWTHandler:
    """Handles JWT token validation and user extraction."""

    def __init__(self, secret: Optional[str] = None, algorithm: Optional[str] = None):
        settings = get_settings()
        self.jwt_secret = secret or settings.supabase_jwt_secret
        self.jwt_algorithm = algorithm or settings.jwt_algorithm

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a Supabase access token.

        Raises:
            AuthenticationError: If the token is malformed, expired or lacks a subject
        """
        if token.startswith("Bearer "):
            token = token[7:]

        try:
            payload = jose_jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                options={"verify_exp": True, "verify_aud": False},
            )
        except ExpiredSignatureError:
            raise AuthenticationError("Token has expired")
        except JWTError as e:
            raise AuthenticationError(f"Invalid token: {str(e)}")

        if not payload.get("sub"):
            raise AuthenticationError("Token missing user ID (sub claim)")
        if "exp" not in payload:
            raise AuthenticationError("Token missing expiration (exp claim)")

        return payload

    def get_user_id(self, token: str) -> str:
        return self.verify_token(token)["sub"]

    def generate_test_token(self, user_id: str, email: str = "test@example.com", expires_minutes: int = 60) -> str:
        """Mint a token signed with the configured secret. Used by local tooling and tests."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "email": email,
            "role": "authenticated",
            "aud": "authenticated",
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=expires_minutes)).timestamp()),
        }
        return jose_jwt.encode(payload, self.jwt_secret, algorithm=self.jwt_algorithm)
