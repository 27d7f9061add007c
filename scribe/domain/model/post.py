"""Post aggregate root."""

from datetime import datetime

from pydantic import Field, model_validator

from scribe.domain.model.comment import Comment
from scribe.domain.model.common import DomainModel, utc_now
from scribe.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Invariants:
    - ``author_id`` is set at creation and never changes
    - ``comments`` are ordered newest first
    - a user id appears in ``likes`` at most once
    """

    id: PostId
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    author_id: UserId
    tags: list[str] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    likes: list[UserId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_unique_likes(self) -> "Post":
        """Reject like lists that count a user twice."""
        if len(set(self.likes)) != len(self.likes):
            raise ValueError("A user can like a post only once")
        return self

    def is_liked_by(self, user_id: UserId) -> bool:
        """Check whether the user is in the like set."""
        return user_id in self.likes
