"""Unit tests for the validation engine."""

from uuid import uuid4

import pytest

from scribe.application.validation import (
    EmailFormat,
    FieldRule,
    IsSequence,
    IsString,
    Length,
    OptionalField,
    Required,
    RuleSet,
    UUIDFormat,
    normalize_email,
    trim,
)
from scribe.domain.error import ValidationError
from scribe.domain.value import FieldViolation

NAME_RULES = RuleSet(
    "sample",
    (
        FieldRule(
            "name",
            (Required("Name is required"), Length("Name too short", min=3)),
            normalizer=trim,
        ),
        FieldRule(
            "email",
            (Required("Email is required"), EmailFormat("Bad email")),
            normalizer=normalize_email,
        ),
        FieldRule("labels", (OptionalField(), IsSequence("Labels must be a list"))),
    ),
)


class TestConstraints:
    """Tests for individual constraints."""

    def test_length_bounds_are_inclusive(self):
        constraint = Length("bad", min=5, max=100)

        assert constraint.check("x" * 5)
        assert constraint.check("x" * 100)
        assert not constraint.check("x" * 4)
        assert not constraint.check("x" * 101)

    def test_length_rejects_non_strings(self):
        assert not Length("bad", min=1).check(12345)

    @pytest.mark.parametrize("value", ["a@b.com", "First.Last@example.org"])
    def test_email_format_accepts_addresses(self, value):
        assert EmailFormat("bad").check(value)

    @pytest.mark.parametrize("value", ["invalid-email", "a@", "@b.com", 42])
    def test_email_format_rejects_non_addresses(self, value):
        assert not EmailFormat("bad").check(value)

    @pytest.mark.parametrize("value", [123456, None, ["secret1"], b"secret1"])
    def test_is_string_rejects_other_values(self, value):
        assert IsString("bad").check("secret1")
        assert not IsString("bad").check(value)

    def test_is_sequence_accepts_list_of_strings(self):
        assert IsSequence("bad").check(["python", "web"])
        assert IsSequence("bad").check([])

    @pytest.mark.parametrize("value", ["python", ["ok", 3], {"a": 1}, 7])
    def test_is_sequence_rejects_other_values(self, value):
        assert not IsSequence("bad").check(value)

    def test_uuid_format(self):
        assert UUIDFormat("bad").check(str(uuid4()))
        assert UUIDFormat("bad").check(uuid4())
        assert not UUIDFormat("bad").check("1234")
        assert not UUIDFormat("bad").check(None)


class TestRuleSetCheck:
    """Tests for RuleSet.check."""

    def test_valid_payload_is_normalized(self):
        """Strings are trimmed and emails lowercased on success."""
        # Arrange
        payload = {"name": "  Alice  ", "email": "  Alice@Example.COM "}

        # Act
        outcome = NAME_RULES.check(payload)

        # Assert
        assert outcome.is_valid
        assert outcome.payload == {"name": "Alice", "email": "alice@example.com"}

    def test_every_violation_is_reported(self):
        """Evaluation does not stop at the first failing field."""
        # Arrange
        payload = {"name": "ab", "email": "nope", "labels": "single"}

        # Act
        outcome = NAME_RULES.check(payload)

        # Assert
        assert not outcome.is_valid
        assert outcome.payload is None
        assert list(outcome.violations) == [
            FieldViolation(field="name", message="Name too short"),
            FieldViolation(field="email", message="Bad email"),
            FieldViolation(field="labels", message="Labels must be a list"),
        ]

    def test_missing_required_field_reports_presence_only(self):
        """An absent required field yields one violation, not one per constraint."""
        outcome = NAME_RULES.check({"email": "a@b.com"})

        assert list(outcome.violations) == [
            FieldViolation(field="name", message="Name is required")
        ]

    def test_whitespace_only_counts_as_missing(self):
        outcome = NAME_RULES.check({"name": "   ", "email": "a@b.com"})

        assert [v.message for v in outcome.violations] == ["Name is required"]

    def test_trimming_happens_before_length_check(self):
        outcome = NAME_RULES.check({"name": "  ab  ", "email": "a@b.com"})

        assert [v.message for v in outcome.violations] == ["Name too short"]

    def test_optional_field_absent_is_not_a_violation(self):
        outcome = NAME_RULES.check({"name": "Alice", "email": "a@b.com"})

        assert outcome.is_valid
        assert "labels" not in outcome.payload

    def test_optional_field_present_is_checked(self):
        outcome = NAME_RULES.check(
            {"name": "Alice", "email": "a@b.com", "labels": ["x", "y"]}
        )

        assert outcome.payload["labels"] == ["x", "y"]

    def test_undeclared_fields_are_dropped(self):
        outcome = NAME_RULES.check(
            {"name": "Alice", "email": "a@b.com", "is_admin": True}
        )

        assert "is_admin" not in outcome.payload

    def test_input_payload_is_not_modified(self):
        payload = {"name": "  Alice ", "email": "A@B.COM"}

        NAME_RULES.check(payload)

        assert payload == {"name": "  Alice ", "email": "A@B.COM"}

    def test_none_payload_reports_all_required_fields(self):
        outcome = NAME_RULES.check(None)

        assert [v.field for v in outcome.violations] == ["name", "email"]


class TestRuleSetValidate:
    """Tests for RuleSet.validate."""

    def test_returns_clean_payload(self):
        data = NAME_RULES.validate({"name": "Alice", "email": "a@b.com"})

        assert data == {"name": "Alice", "email": "a@b.com"}

    def test_raises_with_all_violations(self):
        with pytest.raises(ValidationError) as exc_info:
            NAME_RULES.validate({"name": "x", "email": "x"})

        assert [v.field for v in exc_info.value.violations] == ["name", "email"]
