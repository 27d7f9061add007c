"""Toggle like use case."""

from scribe.application.pipeline import Mutation, MutationContext, MutationPipeline
from scribe.application.usecase.base import (
    AuthenticatedRequest,
    BaseUseCase,
    ResponseModel,
)
from scribe.application.validation import get_rule_set
from scribe.domain.service import PostService

TOGGLE_LIKE_MUTATION = Mutation(
    name="toggle_like", rule_set=get_rule_set("toggle_like"), loads_post=True
)


class ToggleLikeRequest(AuthenticatedRequest):
    """Toggle like request."""

    post_id: str


class ToggleLikeResponse(ResponseModel):
    """Toggle like response."""

    likes: list[str]
    liked: bool


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a post."""

    def __init__(self, pipeline: MutationPipeline, post_service: PostService) -> None:
        self.pipeline = pipeline
        self.post_service = post_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Returns:
            The post's like set after the toggle and whether the caller now
            likes the post
        """
        context = MutationContext(
            token=request.token,
            payload=request.payload,
            resource_id=request.post_id,
        )
        return await self.pipeline.run(TOGGLE_LIKE_MUTATION, context, self._commit)

    async def _commit(self, context: MutationContext) -> ToggleLikeResponse:
        user_id = context.principal.id
        post = await self.post_service.toggle_like(context.target, user_id)
        return ToggleLikeResponse(
            likes=[str(liker) for liker in post.likes],
            liked=post.is_liked_by(user_id),
        )
