"""Post domain service."""

from uuid import uuid4

import logfire

from scribe.domain.model import Comment, Post
from scribe.domain.model.common import utc_now
from scribe.domain.repository import PostRepository
from scribe.domain.value import CommentId, PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id))
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def list_posts(self, limit: int, offset: int) -> tuple[list[Post], int]:
        """List a page of posts, newest first.

        Args:
            limit: Page size
            offset: Number of posts to skip

        Returns:
            Posts on the page and the total number of posts
        """
        with logfire.span("post_service.list_posts", limit=limit, offset=offset):
            total = await self.post_repository.count()
            posts = await self.post_repository.find_all(limit=limit, offset=offset)
            logfire.info("Posts listed", count=len(posts), total=total)
            return posts, total

    async def create_post(
        self, author_id: UserId, title: str, content: str, tags: list[str]
    ) -> Post:
        """Create a post owned by ``author_id``.

        Args:
            author_id: Author (owner) of the post
            title: Post title
            content: Post body
            tags: Ordered tags

        Returns:
            Saved post
        """
        post = Post(
            id=PostId(uuid4()),
            title=title,
            content=content,
            author_id=author_id,
            tags=list(tags),
        )
        with logfire.span(
            "post_service.create_post", post_id=str(post.id), author_id=str(author_id)
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def update_post(
        self,
        post: Post,
        title: str | None = None,
        content: str | None = None,
        tags: list[str] | None = None,
    ) -> Post:
        """Replace the editable fields that were supplied.

        Empty values leave the existing field untouched. The author never
        changes.

        Args:
            post: Current post
            title: New title
            content: New body
            tags: New tags

        Returns:
            Saved post
        """
        changes: dict = {}
        if title:
            changes["title"] = title
        if content:
            changes["content"] = content
        if tags is not None:
            changes["tags"] = list(tags)

        with logfire.span(
            "post_service.update_post",
            post_id=str(post.id),
            fields=sorted(changes),
        ):
            changes["updated_at"] = utc_now()
            updated = post.model_copy(update=changes)
            saved = await self.post_repository.save(updated)
            logfire.info("Post updated", post_id=str(saved.id))
            return saved

    async def delete_post(self, post: Post) -> None:
        """Delete a post and its comments."""
        with logfire.span("post_service.delete_post", post_id=str(post.id)):
            await self.post_repository.delete(post.id)
            logfire.info(
                "Post deleted", post_id=str(post.id), comments=len(post.comments)
            )

    async def add_comment(self, post: Post, author_id: UserId, text: str) -> Post:
        """Add a comment to the front of a post's comment list.

        Args:
            post: Current post
            author_id: Comment author
            text: Comment text

        Returns:
            Saved post with the new comment at index 0
        """
        comment = Comment(id=CommentId(uuid4()), author_id=author_id, text=text)
        with logfire.span(
            "post_service.add_comment",
            post_id=str(post.id),
            comment_id=str(comment.id),
        ):
            saved = await self.post_repository.save(self.with_comment(post, comment))
            logfire.info(
                "Comment added", post_id=str(post.id), comments=len(saved.comments)
            )
            return saved

    async def toggle_like(self, post: Post, user_id: UserId) -> Post:
        """Add the user's like if absent, remove it if present.

        The read-modify-write is not guarded; concurrent toggles by the same
        user against the same post are last-write-wins.

        Args:
            post: Current post
            user_id: User toggling their like

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.toggle_like", post_id=str(post.id), user_id=str(user_id)
        ):
            saved = await self.post_repository.save(
                self.with_like_toggled(post, user_id)
            )
            logfire.info(
                "Like toggled",
                post_id=str(post.id),
                liked=saved.is_liked_by(user_id),
                likes=len(saved.likes),
            )
            return saved

    @staticmethod
    def with_comment(post: Post, comment: Comment) -> Post:
        """Copy of ``post`` with ``comment`` placed first."""
        return post.model_copy(update={"comments": [comment, *post.comments]})

    @staticmethod
    def with_like_toggled(post: Post, user_id: UserId) -> Post:
        """Copy of ``post`` with the user's membership in the like set flipped."""
        if post.is_liked_by(user_id):
            likes = [liker for liker in post.likes if liker != user_id]
        else:
            likes = [*post.likes, user_id]
        return post.model_copy(update={"likes": likes})
