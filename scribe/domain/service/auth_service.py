"""Credential verification domain service.

Turns a presented bearer token into the user it was issued to, or fails
with a specific authentication error.
"""

import logfire

from scribe.domain.error import (
    InvalidTokenError,
    MissingTokenError,
    PrincipalNotFoundError,
    TokenExpiredError,
)
from scribe.domain.model import User
from scribe.domain.repository import UserRepository
from scribe.domain.value import UserId
from scribe.util.jwt import ExpiredTokenError, JWTError

from .base import Service
from .jwt_service import JWTService


class AuthService(Service):
    """Domain service for issuing and verifying session tokens."""

    def __init__(
        self, jwt_service: JWTService, user_repository: UserRepository
    ) -> None:
        """Initialize auth service.

        Args:
            jwt_service: JWT token service
            user_repository: User repository used to resolve token principals
        """
        self.jwt_service = jwt_service
        self.user_repository = user_repository

    def issue_token(self, user_id: UserId) -> str:
        """Issue a session token for a user.

        Args:
            user_id: User the token identifies

        Returns:
            Signed token string
        """
        return self.jwt_service.create_token(user_id)

    async def authenticate(self, token: str | None) -> User:
        """Resolve a bearer token to its user.

        Args:
            token: Raw token string, or None when the request carried none

        Returns:
            The user the token was issued to

        Raises:
            MissingTokenError: If no token was presented
            TokenExpiredError: If the token is past its expiry
            InvalidTokenError: If the token is malformed or tampered with
            PrincipalNotFoundError: If the token's user no longer exists
        """
        if not token:
            logfire.warn("Authentication attempted without token")
            raise MissingTokenError()

        with logfire.span("auth_service.authenticate"):
            try:
                payload = self.jwt_service.verify_token(token)
            except ExpiredTokenError as e:
                raise TokenExpiredError(str(e)) from e
            except JWTError as e:
                raise InvalidTokenError(str(e)) from e

            user_id = UserId(payload.user_id)
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("Token principal not found", user_id=str(user_id))
                raise PrincipalNotFoundError(str(user_id))

            logfire.info("User authenticated", user_id=str(user.id))
            return user
