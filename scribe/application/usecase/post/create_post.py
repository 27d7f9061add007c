"""Create post use case."""

from scribe.application.pipeline import Mutation, MutationContext, MutationPipeline
from scribe.application.usecase.base import AuthenticatedRequest, BaseUseCase
from scribe.application.validation import get_rule_set
from scribe.domain.service import PostService, UserService

from .view import PostView, present_post

CREATE_POST_MUTATION = Mutation(
    name="create_post", rule_set=get_rule_set("create_post")
)


class CreatePostRequest(AuthenticatedRequest):
    """Create post request.

    Payload fields: ``title``, ``content`` and optional ``tags``.
    """


class CreatePostUseCase(BaseUseCase):
    """Use case for publishing a new post as the authenticated user."""

    def __init__(
        self,
        pipeline: MutationPipeline,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize create post use case.

        Args:
            pipeline: Authenticated mutation pipeline
            post_service: Post service
            user_service: User service (author population)
        """
        self.pipeline = pipeline
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Args:
            request: Token and raw post body

        Returns:
            The created post with its author populated
        """
        context = MutationContext(token=request.token, payload=request.payload)
        return await self.pipeline.run(CREATE_POST_MUTATION, context, self._commit)

    async def _commit(self, context: MutationContext) -> PostView:
        post = await self.post_service.create_post(
            author_id=context.principal.id,
            title=context.data["title"],
            content=context.data["content"],
            tags=context.data.get("tags", []),
        )
        return await present_post(post, self.user_service)
