"""User use cases."""

from .update_profile import UpdateProfileRequest, UpdateProfileUseCase

__all__ = [
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
]
