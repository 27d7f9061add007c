"""PostgreSQL implementation of User repository."""

from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from scribe.domain.error import UserAlreadyExistsError
from scribe.domain.model import User
from scribe.domain.repository import UserRepository
from scribe.domain.value import UserId
from scribe.persistence.error import translate_errors
from scribe.persistence.mappers import row_to_user, user_to_dict
from scribe.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        with translate_errors("user.find_by_id"):
            stmt = select(users_table).where(users_table.c.id == user_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Find several users in one query."""
        ids = list(set(user_ids))
        if not ids:
            return {}
        with translate_errors("user.find_by_ids"):
            stmt = select(users_table).where(users_table.c.id.in_(ids))
            result = await self.session.execute(stmt)
            users = [row_to_user(dict(row)) for row in result.mappings().all()]
            return {user.id: user for user in users}

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        with translate_errors("user.find_by_email"):
            stmt = select(users_table).where(users_table.c.email == email)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            UserAlreadyExistsError: If another user already has the email
        """
        values = user_to_dict(user)
        with translate_errors("user.save"):
            stmt = insert(users_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={k: v for k, v in values.items() if k != "id"},
            )
            try:
                await self.session.execute(stmt)
                await self.session.flush()
            except IntegrityError as e:
                raise UserAlreadyExistsError(f"Email taken: {user.email}") from e
        return user
