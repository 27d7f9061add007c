"""Get current user use case."""

from pydantic import BaseModel

from scribe.domain.service import AuthService

from .view import ProfileView


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None


class GetCurrentUserUseCase:
    """Use case for resolving the bearer token to the caller's profile."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: GetCurrentUserRequest) -> ProfileView:
        """Execute get current user flow.

        Raises:
            AuthenticationError: If the token is missing, invalid or expired,
                or its user no longer exists
        """
        user = await self.auth_service.authenticate(request.token)
        return ProfileView.from_user(user)
