"""Unit tests for the authenticated mutation pipeline."""

from uuid import uuid4

import pytest

from scribe.application.pipeline import (
    Mutation,
    MutationContext,
    MutationPipeline,
    Stage,
)
from scribe.application.validation.rules import ADD_COMMENT, UPDATE_POST
from scribe.domain.error import (
    InvalidTokenError,
    MissingTokenError,
    NotAuthorizedError,
    NotFoundError,
    UserAlreadyExistsError,
    ValidationError,
)
from scribe.domain.repository import PostRepository, UserRepository
from scribe.domain.service import AuthService
from scribe.persistence.error import StoreError
from tests.factories import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

EDIT = Mutation(
    name="edit", rule_set=UPDATE_POST, loads_post=True, owner_only=True, action="update"
)
COMMENT = Mutation(name="comment", rule_set=ADD_COMMENT, loads_post=True)

VALID_POST = {"title": "A fine title", "content": "Content that is long enough"}


class RecordingCommit:
    """Commit callback that remembers the context it was handed."""

    def __init__(self, result="done", error: Exception | None = None):
        self.result = result
        self.error = error
        self.contexts: list[MutationContext] = []

    async def __call__(self, context: MutationContext):
        self.contexts.append(context)
        if self.error is not None:
            raise self.error
        return self.result

    @property
    def called(self) -> bool:
        return bool(self.contexts)


async def _login(unit_env):
    """Save a user and return it with a token for it."""
    auth_service = await unit_env.get(AuthService)
    user_repo = await unit_env.get(UserRepository)
    user = await user_repo.save(make_user())
    return user, auth_service.issue_token(user.id)


class TestPipelineGates:
    """Each gate rejects with its own error kind, in order."""

    @pytest.mark.asyncio
    async def test_happy_path_reaches_commit(self, unit_env):
        # Arrange
        pipeline = await unit_env.get(MutationPipeline)
        post_repo = await unit_env.get(PostRepository)
        user, token = await _login(unit_env)
        post = await post_repo.save(make_post(user.id))
        commit = RecordingCommit()

        # Act
        result = await pipeline.run(
            EDIT,
            MutationContext(
                token=token,
                payload={**VALID_POST, "title": "  A fine title  "},
                resource_id=str(post.id),
            ),
            commit,
        )

        # Assert
        assert result == "done"
        context = commit.contexts[0]
        assert context.stage is Stage.AUTHORIZED
        assert context.principal == user
        assert context.target == post
        assert context.data["title"] == "A fine title"

    @pytest.mark.asyncio
    async def test_authentication_runs_before_validation(self, unit_env):
        """A bad token wins over a bad payload."""
        pipeline = await unit_env.get(MutationPipeline)
        commit = RecordingCommit()

        with pytest.raises(MissingTokenError):
            await pipeline.run(
                EDIT,
                MutationContext(token=None, payload={}, resource_id="nope"),
                commit,
            )

        assert not commit.called

    @pytest.mark.asyncio
    async def test_invalid_token(self, unit_env):
        pipeline = await unit_env.get(MutationPipeline)
        commit = RecordingCommit()

        with pytest.raises(InvalidTokenError):
            await pipeline.run(
                COMMENT,
                MutationContext(token="garbage", payload={"text": "hello"}),
                commit,
            )

        assert not commit.called

    @pytest.mark.asyncio
    async def test_validation_reports_id_and_payload_together(self, unit_env):
        # Arrange
        pipeline = await unit_env.get(MutationPipeline)
        _, token = await _login(unit_env)
        commit = RecordingCommit()

        # Act
        with pytest.raises(ValidationError) as exc_info:
            await pipeline.run(
                EDIT,
                MutationContext(
                    token=token,
                    payload={"title": "abc", "content": "short"},
                    resource_id="not-a-uuid",
                ),
                commit,
            )

        # Assert
        assert [v.field for v in exc_info.value.violations] == [
            "id",
            "title",
            "content",
        ]
        assert not commit.called

    @pytest.mark.asyncio
    async def test_validation_runs_before_loading(self, unit_env):
        """An invalid payload for a missing post is a validation error, not 404."""
        pipeline = await unit_env.get(MutationPipeline)
        _, token = await _login(unit_env)

        with pytest.raises(ValidationError):
            await pipeline.run(
                EDIT,
                MutationContext(
                    token=token, payload={"title": "abc"}, resource_id=str(uuid4())
                ),
                RecordingCommit(),
            )

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        pipeline = await unit_env.get(MutationPipeline)
        _, token = await _login(unit_env)
        commit = RecordingCommit()

        with pytest.raises(NotFoundError) as exc_info:
            await pipeline.run(
                EDIT,
                MutationContext(
                    token=token, payload=VALID_POST, resource_id=str(uuid4())
                ),
                commit,
            )

        assert exc_info.value.message == "Post not found"
        assert not commit.called

    @pytest.mark.asyncio
    async def test_non_owner_is_rejected(self, unit_env):
        # Arrange
        pipeline = await unit_env.get(MutationPipeline)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user().id))
        _, token = await _login(unit_env)
        commit = RecordingCommit()

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await pipeline.run(
                EDIT,
                MutationContext(
                    token=token, payload=VALID_POST, resource_id=str(post.id)
                ),
                commit,
            )

        assert not commit.called

    @pytest.mark.asyncio
    async def test_non_owner_may_comment(self, unit_env):
        # Arrange
        pipeline = await unit_env.get(MutationPipeline)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user().id))
        _, token = await _login(unit_env)
        commit = RecordingCommit()

        # Act
        await pipeline.run(
            COMMENT,
            MutationContext(
                token=token, payload={"text": "Nice one"}, resource_id=str(post.id)
            ),
            commit,
        )

        # Assert
        assert commit.contexts[0].stage is Stage.LOADED


class TestCommitFailures:
    """Failures raised while committing."""

    @pytest.mark.asyncio
    async def test_unexpected_failure_becomes_store_error(self, unit_env):
        pipeline = await unit_env.get(MutationPipeline)
        _, token = await _login(unit_env)
        create = Mutation(name="create", rule_set=UPDATE_POST)

        with pytest.raises(StoreError) as exc_info:
            await pipeline.run(
                create,
                MutationContext(token=token, payload=VALID_POST),
                RecordingCommit(error=ConnectionError("store unreachable")),
            )

        assert isinstance(exc_info.value.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_domain_errors_pass_through(self, unit_env):
        pipeline = await unit_env.get(MutationPipeline)
        _, token = await _login(unit_env)
        create = Mutation(name="create", rule_set=UPDATE_POST)

        with pytest.raises(UserAlreadyExistsError):
            await pipeline.run(
                create,
                MutationContext(token=token, payload=VALID_POST),
                RecordingCommit(error=UserAlreadyExistsError()),
            )


class TestMutationContext:
    def test_advance_returns_new_context(self):
        context = MutationContext(token="t")

        advanced = context.advance(Stage.AUTHENTICATED)

        assert context.stage is Stage.START
        assert advanced.stage is Stage.AUTHENTICATED
        assert advanced.token == "t"
