"""Password hashing utilities (bcrypt)."""

import bcrypt

# bcrypt only reads the first 72 bytes; newer releases reject longer input
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a plaintext password.

    Args:
        password: Plaintext password
        rounds: bcrypt work factor

    Returns:
        bcrypt digest as a UTF-8 string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(candidate: str, digest: str) -> bool:
    """Check a plaintext candidate against a stored digest.

    Malformed digests never verify.
    """
    try:
        return bcrypt.checkpw(_encode(candidate), digest.encode("utf-8"))
    except ValueError:
        return False
