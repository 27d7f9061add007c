"""Infrastructure layer errors."""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import SQLAlchemyError


class InfrastructureError(Exception):
    """Base infrastructure error."""

    pass


class StoreError(InfrastructureError):
    """Raised when the document store cannot be read or written."""

    pass


@contextmanager
def translate_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as StoreError.

    Args:
        operation: Name of the repository operation, for the error message
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error("Store operation failed", operation=operation, error=str(e))
        raise StoreError(f"{operation} failed") from e
