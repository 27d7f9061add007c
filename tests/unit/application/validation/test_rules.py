"""Unit tests for the per-operation rule tables."""

from uuid import uuid4

import pytest

from scribe.application.validation import RULE_SETS, get_rule_set
from scribe.application.validation.rules import (
    ADD_COMMENT,
    CREATE_POST,
    LOGIN,
    REGISTER,
    RESOURCE_ID,
    UPDATE_PROFILE,
)


def _fields(outcome) -> list[str]:
    return [v.field for v in outcome.violations]


class TestRegisterRules:
    """Tests for the registration rule set."""

    def test_valid_registration(self):
        outcome = REGISTER.check(
            {"username": "ab_user", "email": " A@B.com ", "password": "secret1"}
        )

        assert outcome.payload == {
            "username": "ab_user",
            "email": "a@b.com",
            "password": "secret1",
        }

    def test_invalid_registration_reports_each_field(self):
        outcome = REGISTER.check(
            {"username": "us", "email": "invalid-email", "password": "123"}
        )

        assert [(v.field, v.message) for v in outcome.violations] == [
            ("username", "Username must be at least 3 characters long"),
            ("email", "Please enter a valid email"),
            ("password", "Password must be at least 6 characters long"),
        ]

    def test_password_is_not_trimmed(self):
        outcome = REGISTER.check(
            {"username": "ab_user", "email": "a@b.com", "password": " pass  "}
        )

        assert outcome.payload["password"] == " pass  "


class TestLoginRules:
    """Tests for the login rule set."""

    def test_password_has_no_length_check(self):
        outcome = LOGIN.check({"email": "a@b.com", "password": "x"})

        assert outcome.is_valid

    def test_non_string_password_is_rejected(self):
        outcome = LOGIN.check({"email": "a@b.com", "password": 123456})

        assert [(v.field, v.message) for v in outcome.violations] == [
            ("password", "Password must be a string")
        ]

    def test_missing_password(self):
        outcome = LOGIN.check({"email": "a@b.com"})

        assert [v.message for v in outcome.violations] == ["Password is required"]


class TestPostRules:
    """Tests for the post create/update rule set."""

    def test_short_title_names_title_field(self):
        outcome = CREATE_POST.check(
            {"title": "abc", "content": "Long enough content"}
        )

        assert _fields(outcome) == ["title"]
        assert outcome.violations[0].message == (
            "Title must be between 5 and 100 characters"
        )

    def test_long_title_is_rejected(self):
        outcome = CREATE_POST.check(
            {"title": "x" * 101, "content": "Long enough content"}
        )

        assert _fields(outcome) == ["title"]

    def test_short_content_is_rejected(self):
        outcome = CREATE_POST.check({"title": "Valid title", "content": "short"})

        assert _fields(outcome) == ["content"]

    def test_tags_must_be_a_list(self):
        outcome = CREATE_POST.check(
            {"title": "Valid title", "content": "Long enough content", "tags": "x"}
        )

        assert _fields(outcome) == ["tags"]

    def test_fields_are_trimmed(self):
        outcome = CREATE_POST.check(
            {"title": "  Valid title  ", "content": "  Long enough content  "}
        )

        assert outcome.payload == {
            "title": "Valid title",
            "content": "Long enough content",
        }


class TestCommentRules:
    def test_short_comment_is_rejected(self):
        outcome = ADD_COMMENT.check({"text": " hi "})

        assert [v.message for v in outcome.violations] == [
            "Comment must be at least 3 characters long"
        ]


class TestProfileRules:
    def test_empty_update_is_valid(self):
        assert UPDATE_PROFILE.check({}).payload == {}

    def test_supplied_fields_are_checked(self):
        outcome = UPDATE_PROFILE.check({"username": "x", "email": "bad"})

        assert _fields(outcome) == ["username", "email"]


class TestResourceIdRule:
    def test_uuid_is_accepted(self):
        post_id = str(uuid4())

        assert RESOURCE_ID.check({"id": post_id}).payload == {"id": post_id}

    def test_non_uuid_is_rejected(self):
        outcome = RESOURCE_ID.check({"id": "123"})

        assert [v.message for v in outcome.violations] == ["Invalid ID format"]


class TestRuleSetRegistry:
    def test_rule_sets_are_keyed_by_operation(self):
        assert get_rule_set("register") is REGISTER
        assert set(RULE_SETS) >= {
            "register",
            "login",
            "create_post",
            "update_post",
            "add_comment",
        }

    def test_unknown_operation(self):
        with pytest.raises(KeyError):
            get_rule_set("drop_tables")

    def test_mutations_declare_registered_rule_sets(self):
        from scribe.application.usecase.comment.add_comment import ADD_COMMENT_MUTATION
        from scribe.application.usecase.post.create_post import CREATE_POST_MUTATION
        from scribe.application.usecase.post.update_post import UPDATE_POST_MUTATION
        from scribe.application.usecase.user.update_profile import (
            UPDATE_PROFILE_MUTATION,
        )

        assert ADD_COMMENT_MUTATION.rule_set is RULE_SETS["add_comment"]
        assert CREATE_POST_MUTATION.rule_set is RULE_SETS["create_post"]
        assert UPDATE_POST_MUTATION.rule_set is RULE_SETS["update_post"]
        assert UPDATE_PROFILE_MUTATION.rule_set is RULE_SETS["update_profile"]
