"""Domain model entities for Scribe."""

from scribe.domain.model.comment import Comment
from scribe.domain.model.post import Post
from scribe.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
]
