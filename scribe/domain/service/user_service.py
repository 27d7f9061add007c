"""User domain service."""

from typing import Iterable
from uuid import uuid4

import logfire

from scribe.domain.error import (
    EmailInUseError,
    InvalidCredentialsError,
    NotFoundError,
    UserAlreadyExistsError,
)
from scribe.domain.model import User
from scribe.domain.model.common import utc_now
from scribe.domain.repository import UserRepository
from scribe.domain.value import UserId

from .password_service import PasswordService


class UserService:
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_service: Password digest service
        """
        self.user_repository = user_repository
        self.password_service = password_service

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("user", str(user_id))
            return user

    async def get_users_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Batch lookup used to populate authors.

        Args:
            user_ids: IDs to resolve

        Returns:
            Mapping of the IDs that exist to their users
        """
        ids = set(user_ids)
        with logfire.span("user_service.get_users_by_ids", count=len(ids)):
            if not ids:
                return {}
            return await self.user_repository.find_by_ids(ids)

    async def register(self, username: str, email: str, password: str) -> User:
        """Create a new user.

        Args:
            username: Display name
            email: Normalized email
            password: Plaintext password (only its digest is stored)

        Returns:
            Saved user

        Raises:
            UserAlreadyExistsError: If the email already has an account
        """
        with logfire.span("user_service.register", email=email):
            if await self.user_repository.find_by_email(email):
                logfire.warn("Registration for existing email", email=email)
                raise UserAlreadyExistsError(f"User already exists: {email}")

            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=self.password_service.hash(password),
            )
            try:
                saved = await self.user_repository.save(user)
            except UserAlreadyExistsError:
                # Lost a race with a concurrent registration for the same email
                logfire.warn("Registration for existing email", email=email)
                raise
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def check_credentials(self, email: str, password: str) -> User:
        """Return the user matching an email/password pair.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password
                does not match
        """
        with logfire.span("user_service.check_credentials", email=email):
            user = await self.user_repository.find_by_email(email)
            if user is None or not self.password_service.verify(
                password, user.password_hash
            ):
                logfire.warn("Invalid login attempt", email=email)
                raise InvalidCredentialsError()
            logfire.info("Credentials accepted", user_id=str(user.id))
            return user

    async def update_profile(
        self, user: User, username: str | None = None, email: str | None = None
    ) -> User:
        """Change a user's username and/or email.

        Raises:
            EmailInUseError: If the email belongs to another user
        """
        changes: dict = {}
        if username:
            changes["username"] = username
        if email and email != user.email:
            other = await self.user_repository.find_by_email(email)
            if other is not None and other.id != user.id:
                logfire.warn("Profile email already in use", user_id=str(user.id))
                raise EmailInUseError()
            changes["email"] = email

        with logfire.span(
            "user_service.update_profile", user_id=str(user.id), fields=sorted(changes)
        ):
            changes["updated_at"] = utc_now()
            try:
                saved = await self.user_repository.save(user.model_copy(update=changes))
            except UserAlreadyExistsError as e:
                logfire.warn("Profile email already in use", user_id=str(user.id))
                raise EmailInUseError() from e
            logfire.info("Profile updated", user_id=str(saved.id))
            return saved
