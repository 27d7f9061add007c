"""PostgreSQL repository implementations."""

from scribe.persistence.repository.post import PostgresPostRepository
from scribe.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
]
