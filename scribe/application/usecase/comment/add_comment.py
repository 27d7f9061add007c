"""Add comment use case."""

from scribe.application.pipeline import Mutation, MutationContext, MutationPipeline
from scribe.application.usecase.base import AuthenticatedRequest, BaseUseCase
from scribe.application.usecase.post.view import CommentView, present_post
from scribe.application.validation import get_rule_set
from scribe.domain.service import PostService, UserService

# Any authenticated user may comment; no ownership gate
ADD_COMMENT_MUTATION = Mutation(
    name="add_comment", rule_set=get_rule_set("add_comment"), loads_post=True
)


class AddCommentRequest(AuthenticatedRequest):
    """Add comment request. Payload field: ``text``."""

    post_id: str


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a post."""

    def __init__(
        self,
        pipeline: MutationPipeline,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize add comment use case.

        Args:
            pipeline: Authenticated mutation pipeline
            post_service: Post service
            user_service: User service (author population)
        """
        self.pipeline = pipeline
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> list[CommentView]:
        """Execute add comment flow.

        Returns:
            The post's comments, newest (the one just added) first
        """
        context = MutationContext(
            token=request.token,
            payload=request.payload,
            resource_id=request.post_id,
        )
        return await self.pipeline.run(ADD_COMMENT_MUTATION, context, self._commit)

    async def _commit(self, context: MutationContext) -> list[CommentView]:
        post = await self.post_service.add_comment(
            context.target, author_id=context.principal.id, text=context.data["text"]
        )
        view = await present_post(post, self.user_service)
        return view.comments
