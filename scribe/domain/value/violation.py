"""Field-level validation outcome."""

from pydantic import BaseModel, ConfigDict


class FieldViolation(BaseModel):
    """One violated constraint on one payload field."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str
