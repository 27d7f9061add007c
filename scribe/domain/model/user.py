"""User aggregate root.

Users are the principals of the system: they register with an email and
password and authenticate afterwards with bearer tokens.
"""

from datetime import datetime

from pydantic import Field

from scribe.domain.model.common import DomainModel, utc_now
from scribe.domain.value import UserId


class User(DomainModel):
    """User aggregate root.

    ``password_hash`` is an opaque bcrypt digest and never leaves the
    domain/persistence layers.
    """

    id: UserId
    username: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password_hash: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
