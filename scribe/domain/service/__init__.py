"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .jwt_service import JWTService
from .ownership import OwnershipGuard, authorize, canonical_id
from .password_service import PasswordService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "AuthService",
    "JWTService",
    "OwnershipGuard",
    "PasswordService",
    "PostService",
    "Service",
    "UserService",
    "authorize",
    "canonical_id",
]
