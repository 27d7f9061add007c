"""Test configuration and fixtures."""

import os

import logfire

# Settings are read from the environment when the container first resolves
# them, so these must be in place before any test builds a container.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault(
    "AUTH__JWT_SECRET", "test-signing-secret-that-is-long-enough-for-hs256"
)

logfire.configure(send_to_logfire=False, console=False)
