"""Domain value objects for Scribe."""

from scribe.domain.value.identifiers import CommentId, PostId, UserId
from scribe.domain.value.violation import FieldViolation

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Validation
    "FieldViolation",
]
