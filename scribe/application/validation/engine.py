"""Declarative field validation.

A ``RuleSet`` is an ordered tuple of ``FieldRule``s. Checking a payload runs
every rule and records every violated constraint, so callers can report all
problems at once. Normalizers (trimming, email case folding) run before the
constraints; the normalized values are returned only when nothing failed.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Callable
from uuid import UUID

from email_validator import EmailNotValidError, validate_email

from scribe.domain.error import ValidationError
from scribe.domain.value import FieldViolation

Normalizer = Callable[[Any], Any]


class Constraint(ABC):
    """A single check on a present field value."""

    def __init__(self, message: str) -> None:
        self.message = message

    @abstractmethod
    def check(self, value: Any) -> bool:
        """Return True when ``value`` satisfies the constraint."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class Required(Constraint):
    """The field must be present and non-empty."""

    def check(self, value: Any) -> bool:
        return value is not None and value != ""


class OptionalField(Constraint):
    """Marks a field whose absence is not a violation."""

    def __init__(self) -> None:
        super().__init__("")

    def check(self, value: Any) -> bool:
        return True


class IsString(Constraint):
    """The value is a string."""

    def check(self, value: Any) -> bool:
        return isinstance(value, str)


class Length(Constraint):
    """String length within ``[min, max]`` (either bound may be omitted)."""

    def __init__(
        self, message: str, min: int | None = None, max: int | None = None
    ) -> None:
        super().__init__(message)
        self.min = min
        self.max = max

    def check(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        if self.min is not None and len(value) < self.min:
            return False
        if self.max is not None and len(value) > self.max:
            return False
        return True


class EmailFormat(Constraint):
    """The value has the shape of an email address (no DNS lookup)."""

    def check(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True


class IsSequence(Constraint):
    """The value is a list of strings."""

    def check(self, value: Any) -> bool:
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            return False
        return all(isinstance(item, str) for item in value)


class UUIDFormat(Constraint):
    """The value is a UUID string."""

    def check(self, value: Any) -> bool:
        if isinstance(value, UUID):
            return True
        if not isinstance(value, str):
            return False
        try:
            UUID(value)
        except ValueError:
            return False
        return True


def trim(value: Any) -> Any:
    """Strip surrounding whitespace from strings."""
    return value.strip() if isinstance(value, str) else value


def normalize_email(value: Any) -> Any:
    """Trim and lowercase an email address."""
    return value.strip().lower() if isinstance(value, str) else value


@dataclass(frozen=True)
class FieldRule:
    """Constraints applying to one top-level payload field."""

    field: str
    constraints: tuple[Constraint, ...] = ()
    normalizer: Normalizer | None = None

    @property
    def optional(self) -> bool:
        return any(isinstance(c, OptionalField) for c in self.constraints)

    def _required(self) -> Required | None:
        return next((c for c in self.constraints if isinstance(c, Required)), None)

    def evaluate(
        self, payload: Mapping[str, Any]
    ) -> tuple[bool, Any, list[FieldViolation]]:
        """Run this rule against ``payload``.

        Returns:
            Whether the field is present, its normalized value, and the
            violations found (an absent required field yields exactly one)
        """
        value = payload.get(self.field)
        if value is not None and self.normalizer is not None:
            value = self.normalizer(value)

        if value is None and self.optional:
            return False, None, []
        if (value is None or value == "") and not self.optional:
            required = self._required()
            if required is not None:
                violation = FieldViolation(field=self.field, message=required.message)
                return False, None, [violation]
            if value is None:
                return False, None, []

        violations = [
            FieldViolation(field=self.field, message=c.message)
            for c in self.constraints
            if not isinstance(c, (Required, OptionalField)) and not c.check(value)
        ]
        return True, value, violations


@dataclass(frozen=True)
class ValidationOutcome:
    """Either a clean payload or the full list of violations."""

    payload: dict[str, Any] | None
    violations: tuple[FieldViolation, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.violations


@dataclass(frozen=True)
class RuleSet:
    """Named, ordered collection of field rules for one operation."""

    name: str
    rules: tuple[FieldRule, ...] = ()

    def check(self, payload: Mapping[str, Any] | None) -> ValidationOutcome:
        """Evaluate every rule; never stops at the first failure.

        The input mapping is not modified. Fields without a rule are not
        carried into the clean payload.
        """
        source: Mapping[str, Any] = payload if isinstance(payload, Mapping) else {}
        clean: dict[str, Any] = {}
        violations: list[FieldViolation] = []

        for rule in self.rules:
            present, value, found = rule.evaluate(source)
            violations.extend(found)
            if present:
                clean[rule.field] = value

        if violations:
            return ValidationOutcome(payload=None, violations=tuple(violations))
        return ValidationOutcome(payload=clean)

    def validate(self, payload: Mapping[str, Any] | None) -> dict[str, Any]:
        """Return the clean payload.

        Raises:
            ValidationError: Carrying every violation found
        """
        outcome = self.check(payload)
        if not outcome.is_valid:
            raise ValidationError(list(outcome.violations))
        return outcome.payload or {}
