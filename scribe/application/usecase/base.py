"""Base use case and shared request/response models."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class ResponseModel(BaseModel):
    """Response body serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AuthenticatedRequest(BaseModel):
    """Request carrying the caller's bearer token and raw body."""

    token: str | None = None
    payload: dict[str, Any] = Field(default_factory=dict)
