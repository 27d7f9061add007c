"""Password hashing domain service."""

import logfire

from scribe.config import AuthSettings
from scribe.util.password import hash_password, verify_password

from .base import Service


class PasswordService(Service):
    """Domain service wrapping one-way password digests."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def hash(self, password: str) -> str:
        """Digest a plaintext password with the configured work factor."""
        with logfire.span(
            "password_service.hash", rounds=self.auth_settings.bcrypt_rounds
        ):
            return hash_password(password, rounds=self.auth_settings.bcrypt_rounds)

    def verify(self, candidate: str, digest: str) -> bool:
        """Check a plaintext candidate against a stored digest."""
        with logfire.span("password_service.verify"):
            return verify_password(candidate, digest)
