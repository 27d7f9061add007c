"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from scribe.domain.model import Comment, Post, User
from scribe.domain.value import CommentId, PostId, UserId


def _uuid(value: Any) -> UUID:
    return value if isinstance(value, UUID) else UUID(str(value))


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        email=row["email"],
        password_hash=row["password_hash"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def document_to_comment(document: Dict[str, Any]) -> Comment:
    """Convert an embedded JSONB comment to a Comment."""
    return Comment(
        id=CommentId(_uuid(document["id"])),
        author_id=UserId(_uuid(document["author_id"])),
        text=document["text"],
        created_at=document["created_at"],
    )


def comment_to_document(comment: Comment) -> Dict[str, Any]:
    """Convert a Comment to a JSON-serializable document."""
    return comment.model_dump(mode="json")


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        tags=list(row.get("tags") or []),
        comments=[document_to_comment(c) for c in row.get("comments") or []],
        likes=[UserId(_uuid(liker)) for liker in row.get("likes") or []],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Embedded collections are converted to plain JSON values.
    """
    return {
        "id": post.id,
        "title": post.title,
        "content": post.content,
        "author_id": post.author_id,
        "tags": list(post.tags),
        "comments": [comment_to_document(c) for c in post.comments],
        "likes": [str(liker) for liker in post.likes],
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }
