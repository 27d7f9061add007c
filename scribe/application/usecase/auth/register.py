"""Register use case."""

from typing import Any

import logfire
from pydantic import BaseModel, Field

from scribe.application.validation import get_rule_set
from scribe.domain.service import AuthService, UserService

from .view import AuthResponse, UserView


class RegisterRequest(BaseModel):
    """Register request carrying the raw body."""

    payload: dict[str, Any] = Field(default_factory=dict)


class RegisterUseCase:
    """Use case for creating an account and signing it in."""

    def __init__(self, user_service: UserService, auth_service: AuthService) -> None:
        """Initialize register use case.

        Args:
            user_service: User service
            auth_service: Auth service (token issuance)
        """
        self.user_service = user_service
        self.auth_service = auth_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute register flow.

        Args:
            request: Raw body with ``username``, ``email`` and ``password``

        Returns:
            Session token and the new user

        Raises:
            ValidationError: If any field is invalid
            UserAlreadyExistsError: If the email is already registered
        """
        with logfire.span("register.execute"):
            data = get_rule_set("register").validate(request.payload)

            user = await self.user_service.register(
                username=data["username"],
                email=data["email"],
                password=data["password"],
            )
            token = self.auth_service.issue_token(user.id)

            return AuthResponse(token=token, user=UserView.from_user(user))
