"""Per-operation rule sets.

The tables are fixed; handlers look them up by operation name.
"""

from scribe.application.validation.engine import (
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

USERNAME_LENGTH = "Username must be at least 3 characters long"
EMAIL_FORMAT = "Please enter a valid email"
TITLE_LENGTH = "Title must be between 5 and 100 characters"
CONTENT_LENGTH = "Content must be at least 10 characters long"
TAGS_FORMAT = "Tags must be an array of strings"
COMMENT_LENGTH = "Comment must be at least 3 characters long"
INVALID_ID = "Invalid ID format"

REGISTER = RuleSet(
    "register",
    (
        FieldRule(
            "username",
            (Required("Username is required"), Length(USERNAME_LENGTH, min=3)),
            normalizer=trim,
        ),
        FieldRule(
            "email",
            (Required("Email is required"), EmailFormat(EMAIL_FORMAT)),
            normalizer=normalize_email,
        ),
        FieldRule(
            "password",
            (
                Required("Password is required"),
                Length("Password must be at least 6 characters long", min=6),
            ),
        ),
    ),
)

LOGIN = RuleSet(
    "login",
    (
        FieldRule(
            "email",
            (Required("Email is required"), EmailFormat(EMAIL_FORMAT)),
            normalizer=normalize_email,
        ),
        FieldRule(
            "password",
            (
                Required("Password is required"),
                IsString("Password must be a string"),
            ),
        ),
    ),
)

_POST_RULES = (
    FieldRule(
        "title",
        (Required("Title is required"), Length(TITLE_LENGTH, min=5, max=100)),
        normalizer=trim,
    ),
    FieldRule(
        "content",
        (Required("Content is required"), Length(CONTENT_LENGTH, min=10)),
        normalizer=trim,
    ),
    FieldRule("tags", (OptionalField(), IsSequence(TAGS_FORMAT))),
)

CREATE_POST = RuleSet("create_post", _POST_RULES)
UPDATE_POST = RuleSet("update_post", _POST_RULES)

ADD_COMMENT = RuleSet(
    "add_comment",
    (
        FieldRule(
            "text",
            (Required("Comment text is required"), Length(COMMENT_LENGTH, min=3)),
            normalizer=trim,
        ),
    ),
)

# Body-less mutations still go through validation for the resource id
DELETE_POST = RuleSet("delete_post")
TOGGLE_LIKE = RuleSet("toggle_like")

UPDATE_PROFILE = RuleSet(
    "update_profile",
    (
        FieldRule(
            "username",
            (OptionalField(), Length(USERNAME_LENGTH, min=3)),
            normalizer=trim,
        ),
        FieldRule(
            "email",
            (OptionalField(), EmailFormat(EMAIL_FORMAT)),
            normalizer=normalize_email,
        ),
    ),
)

RESOURCE_ID = RuleSet(
    "resource_id",
    (FieldRule("id", (Required(INVALID_ID), UUIDFormat(INVALID_ID)), normalizer=trim),),
)

RULE_SETS: dict[str, RuleSet] = {
    rule_set.name: rule_set
    for rule_set in (
        REGISTER,
        LOGIN,
        CREATE_POST,
        UPDATE_POST,
        DELETE_POST,
        ADD_COMMENT,
        TOGGLE_LIKE,
        UPDATE_PROFILE,
        RESOURCE_ID,
    )
}


def get_rule_set(operation: str) -> RuleSet:
    """Look up the rule set for an operation.

    Raises:
        KeyError: If no rule set is registered under that name
    """
    return RULE_SETS[operation]
