"""Request payload validation."""

from .engine import (
    Constraint,
    EmailFormat,
    FieldRule,
    IsSequence,
    IsString,
    Length,
    OptionalField,
    Required,
    RuleSet,
    UUIDFormat,
    ValidationOutcome,
    normalize_email,
    trim,
)
from .rules import RULE_SETS, get_rule_set

__all__ = [
    "Constraint",
    "EmailFormat",
    "FieldRule",
    "IsSequence",
    "IsString",
    "Length",
    "OptionalField",
    "RULE_SETS",
    "Required",
    "RuleSet",
    "UUIDFormat",
    "ValidationOutcome",
    "get_rule_set",
    "normalize_email",
    "trim",
]
