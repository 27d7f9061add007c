"""Domain layer errors.

Every error carries a ``message`` that is safe to show to API clients;
``str(error)`` may carry more detail for logs.
"""

from scribe.domain.value import FieldViolation


class DomainError(Exception):
    """Base domain error."""

    message: str = "Request failed"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.message)


class AuthenticationError(DomainError):
    """Base for every failure to establish who is making a request."""

    message = "Please authenticate"


class MissingTokenError(AuthenticationError):
    """Raised when a request carries no bearer token."""

    message = "Authentication required"


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed or its signature does not verify."""

    message = "Invalid token"


class TokenExpiredError(AuthenticationError):
    """Raised when a correctly signed token is past its expiry."""

    message = "Token has expired"


class PrincipalNotFoundError(AuthenticationError):
    """Raised when a valid token names a user that no longer exists."""

    message = "User not found"

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Token principal not found: {user_id}")


class ValidationError(DomainError):
    """Raised when a payload violates one or more field rules."""

    message = "Validation failed"

    def __init__(self, violations: list[FieldViolation]):
        self.violations = list(violations)
        fields = ", ".join(v.field for v in self.violations)
        super().__init__(f"Validation failed for: {fields}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(
        self, resource: str, resource_id: str, user_id: str, action: str = "edit"
    ):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        self.message = f"Not authorized to {action} this {resource}"
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        self.message = f"{resource.capitalize()} not found"
        super().__init__(f"{resource} not found: {identifier}")


class UserAlreadyExistsError(DomainError):
    """Raised when registering an email that already has an account."""

    message = "User already exists"


class EmailInUseError(DomainError):
    """Raised when a profile update claims another user's email."""

    message = "Email already in use"


class InvalidCredentialsError(DomainError):
    """Raised when login email or password does not match.

    The two cases share one message so callers cannot probe for accounts.
    """

    message = "Invalid credentials"
