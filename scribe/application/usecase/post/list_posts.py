"""List posts use case."""

import math

import logfire
from pydantic import BaseModel

from scribe.application.usecase.base import ResponseModel
from scribe.config import PaginationSettings
from scribe.domain.service import PostService, UserService

from .view import PostView, present_posts


class ListPostsRequest(BaseModel):
    """List posts request.

    ``page`` and ``limit`` arrive as raw query values; anything that is not a
    positive integer falls back to the configured default.
    """

    page: str | int | None = None
    limit: str | int | None = None


class ListPostsResponse(ResponseModel):
    """List posts response."""

    posts: list[PostView]
    current_page: int
    total_pages: int
    total_posts: int


def _positive_int(value: str | int | None, default: int) -> int:
    try:
        number = int(value) if value is not None else default
    except (TypeError, ValueError):
        return default
    return number if number >= 1 else default


class ListPostsUseCase:
    """Use case for paging through posts, newest first."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post service
            user_service: User service (author population)
            pagination: Page size defaults and cap
        """
        self.post_service = post_service
        self.user_service = user_service
        self.pagination = pagination

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Raw page and limit

        Returns:
            One page of posts plus paging totals
        """
        page = _positive_int(request.page, self.pagination.default_page)
        limit = min(
            _positive_int(request.limit, self.pagination.default_limit),
            self.pagination.max_limit,
        )

        with logfire.span("list_posts.execute", page=page, limit=limit):
            posts, total = await self.post_service.list_posts(
                limit=limit, offset=(page - 1) * limit
            )
            views = await present_posts(posts, self.user_service)

            return ListPostsResponse(
                posts=views,
                current_page=page,
                total_pages=math.ceil(total / limit),
                total_posts=total,
            )
