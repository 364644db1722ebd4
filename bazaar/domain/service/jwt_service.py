"""JWT token domain service."""

from uuid import UUID

import logfire
from pydantic import ValidationError

from bazaar.config import AuthSettings
from bazaar.domain.value import AuthContext, UserId, Username, UserRole
from bazaar.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service turning bearer tokens into an ``AuthContext``."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: str, username: str, role: UserRole = UserRole.USER
    ) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            username: Public username
            role: Account role

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(user_id, username, role.value, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_auth_context(self, token: str | None) -> AuthContext | None:
        """Build the caller context from a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            AuthContext if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return AuthContext(
                user_id=UserId(UUID(payload.user_id)),
                username=Username(payload.username),
                role=UserRole(payload.role),
            )
        except (JWTError, ValidationError, ValueError) as e:
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
