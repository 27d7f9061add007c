"""Comment entity.

Comments are embedded in their post. They are appended only, never edited,
and disappear together with the post.
"""

from datetime import datetime

from pydantic import Field

from scribe.domain.model.common import DomainModel, utc_now
from scribe.domain.value import CommentId, UserId


class Comment(DomainModel):
    """Comment entity."""

    id: CommentId
    author_id: UserId
    text: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=utc_now)
