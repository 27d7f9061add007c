"""Login use case."""

from typing import Any

import logfire
from pydantic import BaseModel, Field

from scribe.application.validation import get_rule_set
from scribe.domain.service import AuthService, UserService

from .view import AuthResponse, UserView


class LoginRequest(BaseModel):
    """Login request carrying the raw body."""

    payload: dict[str, Any] = Field(default_factory=dict)


class LoginUseCase:
    """Use case for exchanging email and password for a session token."""

    def __init__(self, user_service: UserService, auth_service: AuthService) -> None:
        """Initialize login use case.

        Args:
            user_service: User service
            auth_service: Auth service (token issuance)
        """
        self.user_service = user_service
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Raises:
            ValidationError: If email or password is missing or malformed
            InvalidCredentialsError: If the email/password pair doesn't match
        """
        with logfire.span("login.execute"):
            data = get_rule_set("login").validate(request.payload)

            user = await self.user_service.check_credentials(
                email=data["email"], password=data["password"]
            )
            token = self.auth_service.issue_token(user.id)

            logfire.info("User logged in", user_id=str(user.id))
            return AuthResponse(token=token, user=UserView.from_user(user))
