"""Domain layer DI providers."""

from dishka import Scope, provide

from scribe.config import AuthSettings
from scribe.domain.repository import PostRepository, UserRepository
from scribe.domain.service import (
    AuthService,
    JWTService,
    OwnershipGuard,
    PasswordService,
    PostService,
    UserService,
)
from scribe.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password digest domain service."""
        return PasswordService(auth_settings=auth_settings)

    @provide
    def get_auth_service(
        self, jwt_service: JWTService, user_repository: UserRepository
    ) -> AuthService:
        """Provide credential verification domain service."""
        return AuthService(jwt_service=jwt_service, user_repository=user_repository)

    @provide
    def get_ownership_guard(self) -> OwnershipGuard:
        """Provide ownership guard."""
        return OwnershipGuard()

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, password_service: PasswordService
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, password_service=password_service
        )
