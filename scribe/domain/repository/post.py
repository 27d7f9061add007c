"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from scribe.domain.model.post import Post
from scribe.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Posts are stored as whole documents: comments and likes are saved and
    loaded together with the post they belong to.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 10, offset: int = 0) -> List[Post]:
        """Find posts, newest first.

        Args:
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            Posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all posts."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or replace).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post together with its comments.

        Args:
            post_id: The post ID to delete
        """
        pass
