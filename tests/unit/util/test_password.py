"""Unit tests for password hashing utilities."""

from scribe.util.password import hash_password, verify_password


class TestPasswordHashing:
    """Tests for hash_password and verify_password."""

    def test_digest_verifies_original_password(self):
        digest = hash_password("secret1", rounds=4)

        assert digest != "secret1"
        assert verify_password("secret1", digest)

    def test_wrong_password_does_not_verify(self):
        digest = hash_password("secret1", rounds=4)

        assert not verify_password("secret2", digest)

    def test_work_factor_is_recorded_in_digest(self):
        assert hash_password("secret1", rounds=4).startswith("$2b$04$")

    def test_malformed_digest_never_verifies(self):
        assert not verify_password("secret1", "plain-text-not-a-digest")

    def test_long_passwords_are_accepted(self):
        """Only the first 72 bytes count, as with every bcrypt implementation."""
        password = "x" * 100
        digest = hash_password(password, rounds=4)

        assert verify_password(password, digest)
