"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from scribe.domain.model import Post
from scribe.domain.repository import PostRepository
from scribe.domain.value import PostId
from scribe.persistence.error import translate_errors
from scribe.persistence.mappers import post_to_dict, row_to_post
from scribe.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    ``save`` replaces the whole row, so concurrent writers to the same post
    are last-write-wins.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            with translate_errors("post.find_by_id"):
                stmt = select(posts_table).where(posts_table.c.id == post_id)
                result = await self.session.execute(stmt)
                row = result.mappings().first()
            return row_to_post(dict(row)) if row else None

    async def find_all(self, limit: int = 10, offset: int = 0) -> List[Post]:
        """Find posts, newest first."""
        with logfire.span("post_repository.find_all", limit=limit, offset=offset):
            with translate_errors("post.find_all"):
                stmt = (
                    select(posts_table)
                    .order_by(desc(posts_table.c.created_at))
                    .limit(limit)
                    .offset(offset)
                )
                result = await self.session.execute(stmt)
                rows = result.mappings().all()
            return [row_to_post(dict(row)) for row in rows]

    async def count(self) -> int:
        """Count all posts."""
        with translate_errors("post.count"):
            stmt = select(func.count()).select_from(posts_table)
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or replace)."""
        values = post_to_dict(post)
        with logfire.span("post_repository.save", post_id=str(post.id)):
            with translate_errors("post.save"):
                stmt = insert(posts_table).values(**values)
                stmt = stmt.on_conflict_do_update(
                    index_elements=[posts_table.c.id],
                    set_={
                        k: v
                        for k, v in values.items()
                        if k not in ("id", "created_at")
                    },
                )
                await self.session.execute(stmt)
                await self.session.flush()
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post; its comments live on the row and go with it."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            with translate_errors("post.delete"):
                stmt = delete(posts_table).where(posts_table.c.id == post_id)
                await self.session.execute(stmt)
                await self.session.flush()
