"""Get post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.application.validation import get_rule_set
from scribe.domain.error import NotFoundError
from scribe.domain.service import PostService, UserService
from scribe.domain.value import PostId

from .view import PostView, present_post


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostUseCase:
    """Use case for reading a single post (public)."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post service
            user_service: User service (author population)
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Execute get post flow.

        Raises:
            ValidationError: If the ID is not a valid post ID
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("get_post.execute", post_id=request.post_id):
            data = get_rule_set("resource_id").validate({"id": request.post_id})
            post_id = PostId(UUID(data["id"]))

            post = await self.post_service.get_post_by_id(post_id)
            if post is None:
                raise NotFoundError("post", str(post_id))

            return await present_post(post, self.user_service)
