"""Update post use case."""

from scribe.application.pipeline import Mutation, MutationContext, MutationPipeline
from scribe.application.usecase.base import AuthenticatedRequest, BaseUseCase
from scribe.application.validation import get_rule_set
from scribe.domain.service import PostService, UserService

from .view import PostView, present_post

UPDATE_POST_MUTATION = Mutation(
    name="update_post",
    rule_set=get_rule_set("update_post"),
    loads_post=True,
    owner_only=True,
    action="update",
)


class UpdatePostRequest(AuthenticatedRequest):
    """Update post request."""

    post_id: str


class UpdatePostUseCase(BaseUseCase):
    """Use case for editing a post's title, content and tags."""

    def __init__(
        self,
        pipeline: MutationPipeline,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        self.pipeline = pipeline
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: UpdatePostRequest) -> PostView:
        """Execute update post flow.

        Only the post's author may update it.

        Args:
            request: Token, post ID and raw body

        Returns:
            Updated post details

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user doesn't own the post
        """
        context = MutationContext(
            token=request.token,
            payload=request.payload,
            resource_id=request.post_id,
        )
        return await self.pipeline.run(UPDATE_POST_MUTATION, context, self._commit)

    async def _commit(self, context: MutationContext) -> PostView:
        updated = await self.post_service.update_post(
            context.target,
            title=context.data.get("title"),
            content=context.data.get("content"),
            tags=context.data.get("tags"),
        )
        return await present_post(updated, self.user_service)
