"""In-memory user repository for testing."""

from typing import Iterable, Optional

from scribe.domain.error import UserAlreadyExistsError
from scribe.domain.model import User
from scribe.domain.repository import UserRepository
from scribe.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Find several users at once."""
        return {
            user_id: self._users[user_id]
            for user_id in set(user_ids)
            if user_id in self._users
        }

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user; emails are unique."""
        for other in self._users.values():
            if other.email == user.email and other.id != user.id:
                raise UserAlreadyExistsError(f"Email taken: {user.email}")
        self._users[user.id] = user
        return user
