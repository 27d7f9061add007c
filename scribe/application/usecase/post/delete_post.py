"""Delete post use case."""

from pydantic import BaseModel

from scribe.application.pipeline import Mutation, MutationContext, MutationPipeline
from scribe.application.usecase.base import AuthenticatedRequest, BaseUseCase
from scribe.application.validation import get_rule_set
from scribe.domain.service import PostService

DELETE_POST_MUTATION = Mutation(
    name="delete_post",
    rule_set=get_rule_set("delete_post"),
    loads_post=True,
    owner_only=True,
    action="delete",
)


class DeletePostRequest(AuthenticatedRequest):
    """Delete post request."""

    post_id: str


class DeletePostResponse(BaseModel):
    """Delete post response."""

    message: str = "Post removed"


class DeletePostUseCase(BaseUseCase):
    """Use case for removing a post and its comments."""

    def __init__(self, pipeline: MutationPipeline, post_service: PostService) -> None:
        self.pipeline = pipeline
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        context = MutationContext(
            token=request.token,
            payload=request.payload,
            resource_id=request.post_id,
        )
        return await self.pipeline.run(DELETE_POST_MUTATION, context, self._commit)

    async def _commit(self, context: MutationContext) -> DeletePostResponse:
        await self.post_service.delete_post(context.target)
        return DeletePostResponse()
