"""Authenticated mutation pipeline.

Every state-changing request runs the same gates in the same order:

    START -> AUTHENTICATED -> VALIDATED -> LOADED -> AUTHORIZED -> COMMITTED

Each gate either hands a new ``MutationContext`` to the next one or raises
the single error kind it owns; a raised error leaves the request REJECTED.
Nothing is written to the store before authentication and validation pass,
and ownership is only checked once the post is known to exist.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Awaitable, Callable, Mapping, TypeVar
from uuid import UUID

import logfire

from scribe.application.validation import RuleSet, get_rule_set
from scribe.domain.error import DomainError, NotFoundError, ValidationError
from scribe.domain.model import Post, User
from scribe.domain.service import AuthService, OwnershipGuard, PostService
from scribe.domain.value import FieldViolation, PostId
from scribe.persistence.error import InfrastructureError, StoreError

T = TypeVar("T")


class Stage(str, Enum):
    """Pipeline states."""

    START = "start"
    AUTHENTICATED = "authenticated"
    VALIDATED = "validated"
    LOADED = "loaded"
    AUTHORIZED = "authorized"
    COMMITTED = "committed"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Mutation:
    """Declaration of one mutating operation.

    Attributes:
        name: Operation name, used for logging
        rule_set: Payload rules
        loads_post: Whether the operation targets an existing post
        owner_only: Whether only the post's author may perform it
        action: Verb used in authorization messages
    """

    name: str
    rule_set: RuleSet
    loads_post: bool = False
    owner_only: bool = False
    action: str = "edit"


@dataclass(frozen=True)
class MutationContext:
    """Request state threaded through the pipeline.

    Never modified in place; each gate returns a copy via ``advance``.
    """

    token: str | None
    payload: Mapping[str, Any] = field(default_factory=dict)
    resource_id: str | None = None
    stage: Stage = Stage.START
    user: User | None = None
    data: dict[str, Any] = field(default_factory=dict)
    post: Post | None = None

    def advance(self, stage: Stage, **changes: Any) -> "MutationContext":
        """Copy of this context moved to ``stage``."""
        return replace(self, stage=stage, **changes)

    @property
    def principal(self) -> User:
        """Authenticated user (only valid after AUTHENTICATED)."""
        assert self.user is not None, "context is not authenticated"
        return self.user

    @property
    def target(self) -> Post:
        """Loaded post (only valid after LOADED)."""
        assert self.post is not None, "context has no loaded post"
        return self.post


Commit = Callable[[MutationContext], Awaitable[T]]


class MutationPipeline:
    """Runs a mutation through authentication, validation, loading,
    authorization and commit."""

    def __init__(
        self,
        auth_service: AuthService,
        post_service: PostService,
        ownership_guard: OwnershipGuard,
    ) -> None:
        """Initialize pipeline.

        Args:
            auth_service: Credential verifier
            post_service: Post service used to load targets
            ownership_guard: Author check for owner-only mutations
        """
        self.auth_service = auth_service
        self.post_service = post_service
        self.ownership_guard = ownership_guard

    async def run(
        self, mutation: Mutation, context: MutationContext, commit: Commit[T]
    ) -> T:
        """Execute ``commit`` once every gate has passed.

        Args:
            mutation: Operation declaration
            context: Initial (START) context
            commit: Coroutine performing the write; receives the final context

        Returns:
            Whatever ``commit`` returns

        Raises:
            AuthenticationError: Missing, invalid or expired token, or unknown user
            ValidationError: One or more field violations
            NotFoundError: Target post does not exist
            NotAuthorizedError: User does not own the target post
            InfrastructureError: The commit failed
        """
        with logfire.span(
            "mutation_pipeline.run",
            operation=mutation.name,
            resource_id=context.resource_id,
        ):
            try:
                context = await self.authenticate(context)
                context = self.validate(mutation, context)
                if mutation.loads_post:
                    context = await self.load(context)
                    if mutation.owner_only:
                        context = self.authorize(mutation, context)
                result = await self.commit(mutation, context, commit)
            except (DomainError, InfrastructureError) as e:
                logfire.warn(
                    "Mutation rejected",
                    operation=mutation.name,
                    after_stage=context.stage.value,
                    stage=Stage.REJECTED.value,
                    error_type=type(e).__name__,
                )
                raise

            logfire.info(
                "Mutation committed",
                operation=mutation.name,
                stage=Stage.COMMITTED.value,
                user_id=str(context.principal.id),
            )
            return result

    async def authenticate(self, context: MutationContext) -> MutationContext:
        """START -> AUTHENTICATED."""
        user = await self.auth_service.authenticate(context.token)
        return context.advance(Stage.AUTHENTICATED, user=user)

    def validate(self, mutation: Mutation, context: MutationContext) -> MutationContext:
        """AUTHENTICATED -> VALIDATED.

        The resource id and the payload are checked together so the caller
        sees every violation in one response.
        """
        violations: list[FieldViolation] = []
        if mutation.loads_post:
            id_rules = get_rule_set("resource_id")
            id_outcome = id_rules.check({"id": context.resource_id})
            violations.extend(id_outcome.violations)

        outcome = mutation.rule_set.check(context.payload)
        violations.extend(outcome.violations)

        if violations:
            raise ValidationError(violations)
        return context.advance(Stage.VALIDATED, data=outcome.payload or {})

    async def load(self, context: MutationContext) -> MutationContext:
        """VALIDATED -> LOADED."""
        post_id = PostId(UUID(str(context.resource_id)))
        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("post", str(post_id))
        return context.advance(Stage.LOADED, post=post)

    def authorize(self, mutation: Mutation, context: MutationContext) -> MutationContext:
        """LOADED -> AUTHORIZED."""
        self.ownership_guard.ensure_owner(
            context.target, context.principal, mutation.action
        )
        return context.advance(Stage.AUTHORIZED)

    async def commit(
        self, mutation: Mutation, context: MutationContext, commit: Commit[T]
    ) -> T:
        """Final gate: perform the write.

        Domain errors raised by the write itself (e.g. a duplicate email on
        profile update) pass through unchanged; anything else is reported as
        a store failure.
        """
        try:
            return await commit(context)
        except (DomainError, InfrastructureError):
            raise
        except Exception as e:
            logfire.error(
                "Mutation commit failed",
                operation=mutation.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise StoreError(f"{mutation.name} failed: {e}") from e
