"""Repository interfaces for Scribe domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from scribe.domain.repository.post import PostRepository
from scribe.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
]
