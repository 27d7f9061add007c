"""Builders for domain objects used across tests."""

from datetime import datetime, timezone
from uuid import uuid4

from scribe.domain.model import Comment, Post, User
from scribe.domain.value import CommentId, PostId, UserId


def make_user(
    username: str = "writer",
    email: str | None = None,
    password_hash: str = "not-a-real-digest",
) -> User:
    """Build a user with a unique id (and email unless given)."""
    user_id = UserId(uuid4())
    return User(
        id=user_id,
        username=username,
        email=email or f"{user_id.hex[:8]}@example.com",
        password_hash=password_hash,
    )


def make_comment(author_id: UserId, text: str = "Nice post") -> Comment:
    return Comment(id=CommentId(uuid4()), author_id=author_id, text=text)


def make_post(
    author_id: UserId,
    title: str = "A valid title",
    content: str = "Some content that is long enough",
    created_at: datetime | None = None,
    **extra,
) -> Post:
    """Build a post owned by ``author_id``."""
    created = created_at or datetime.now(timezone.utc)
    return Post(
        id=PostId(uuid4()),
        title=title,
        content=content,
        author_id=author_id,
        created_at=created,
        updated_at=created,
        **extra,
    )
