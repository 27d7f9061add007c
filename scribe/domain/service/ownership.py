"""Resource ownership checks for mutating operations."""

from typing import Any
from uuid import UUID

import logfire

from scribe.domain.error import NotAuthorizedError
from scribe.domain.model import Post, User

from .base import Service


def canonical_id(value: Any) -> str | None:
    """Canonical string form of an identifier, or None if it is not one.

    UUID instances and UUID strings in any accepted spelling (upper case,
    braces, no hyphens) map to the same lowercase hyphenated form.
    """
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, str):
        try:
            return str(UUID(value))
        except ValueError:
            return None
    return None


def authorize(resource_owner_id: Any, acting_user_id: Any) -> bool:
    """Decide whether the acting user owns the resource.

    Pure comparison of canonical forms; anything that is not an identifier
    on either side is a denial.
    """
    owner = canonical_id(resource_owner_id)
    actor = canonical_id(acting_user_id)
    return owner is not None and actor is not None and owner == actor


class OwnershipGuard(Service):
    """Restricts update and delete of a post to its author."""

    def ensure_owner(self, post: Post, user: User, action: str) -> None:
        """Raise unless ``user`` authored ``post``.

        Args:
            post: Loaded post
            user: Authenticated user
            action: Verb used in the rejection message ("update", "delete")

        Raises:
            NotAuthorizedError: If the user is not the author
        """
        if not authorize(post.author_id, user.id):
            logfire.warn(
                "Ownership check failed",
                post_id=str(post.id),
                user_id=str(user.id),
                action=action,
            )
            raise NotAuthorizedError("post", str(post.id), str(user.id), action=action)
