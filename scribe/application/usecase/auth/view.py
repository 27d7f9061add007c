"""Account response models."""

from datetime import datetime

from scribe.application.usecase.base import ResponseModel
from scribe.domain.model import User


class UserView(ResponseModel):
    """Public user fields (the password digest is never exposed)."""

    id: str
    username: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(id=str(user.id), username=user.username, email=user.email)


class ProfileView(UserView):
    """User profile with timestamps."""

    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "ProfileView":
        return cls(
            id=str(user.id),
            username=user.username,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthResponse(ResponseModel):
    """Token plus the user it identifies."""

    token: str
    user: UserView
