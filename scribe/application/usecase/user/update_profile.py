"""Update profile use case."""

from scribe.application.pipeline import Mutation, MutationContext, MutationPipeline
from scribe.application.usecase.auth.view import ProfileView
from scribe.application.usecase.base import AuthenticatedRequest, BaseUseCase
from scribe.application.validation import get_rule_set
from scribe.domain.service import UserService

# The target is the caller's own account, so there is nothing to load or guard
UPDATE_PROFILE_MUTATION = Mutation(
    name="update_profile", rule_set=get_rule_set("update_profile")
)


class UpdateProfileRequest(AuthenticatedRequest):
    """Update profile request. Payload fields: ``username``, ``email``."""


class UpdateProfileUseCase(BaseUseCase):
    """Use case for changing the caller's username and/or email."""

    def __init__(self, pipeline: MutationPipeline, user_service: UserService) -> None:
        self.pipeline = pipeline
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> ProfileView:
        """Execute update profile flow.

        Raises:
            ValidationError: If a supplied field is invalid
            EmailInUseError: If the email belongs to another account
        """
        context = MutationContext(token=request.token, payload=request.payload)
        return await self.pipeline.run(UPDATE_PROFILE_MUTATION, context, self._commit)

    async def _commit(self, context: MutationContext) -> ProfileView:
        user = await self.user_service.update_profile(
            context.principal,
            username=context.data.get("username"),
            email=context.data.get("email"),
        )
        return ProfileView.from_user(user)
