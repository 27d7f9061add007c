"""JWT token domain service."""

import logfire

from scribe.config import AuthSettings
from scribe.domain.value import UserId
from scribe.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings (holds the signing secret)
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID

        Returns:
            JWT token string valid for the configured number of days
        """
        with logfire.span("jwt_service.create_token", user_id=str(user_id)):
            token = create_token(user_id, self.auth_settings)
            logfire.info(
                "JWT token created",
                user_id=str(user_id),
                expiry_days=self.auth_settings.jwt_expiry_days,
            )
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            ExpiredTokenError: If token is expired
            JWTError: If token is invalid
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=str(payload.user_id))
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
