"""Post routes.

Reads are public. Every write goes through the authenticated mutation
pipeline; errors are turned into responses by the app's exception handlers.
"""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, status

from scribe.application.usecase.comment import AddCommentRequest, AddCommentUseCase
from scribe.application.usecase.like import (
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from scribe.application.usecase.post import (
    CommentView,
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostView,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from scribe.interface.api.dependencies import bearer_token

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: str | None = None,
    limit: str | None = None,
) -> ListPostsResponse:
    """List posts, newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        page: 1-based page number (default 1)
        limit: Page size (default 10)

    Returns:
        Page of posts with paging totals
    """
    return await list_posts_use_case.execute(ListPostsRequest(page=page, limit=limit))


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostView:
    """Get a post by ID."""
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.post("", response_model=PostView, status_code=status.HTTP_201_CREATED)
async def create_post(
    create_post_use_case: FromDishka[CreatePostUseCase],
    payload: dict[str, Any] | None = Body(default=None),
    token: str | None = Depends(bearer_token),
) -> PostView:
    """Create a new post.

    Requires authentication.
    """
    return await create_post_use_case.execute(
        CreatePostRequest(token=token, payload=payload or {})
    )


@router.put("/{post_id}", response_model=PostView)
async def update_post(
    post_id: str,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    payload: dict[str, Any] | None = Body(default=None),
    token: str | None = Depends(bearer_token),
) -> PostView:
    """Update a post. Only the author may update it."""
    return await update_post_use_case.execute(
        UpdatePostRequest(token=token, payload=payload or {}, post_id=post_id)
    )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    token: str | None = Depends(bearer_token),
) -> DeletePostResponse:
    """Delete a post. Only the author may delete it."""
    return await delete_post_use_case.execute(
        DeletePostRequest(token=token, post_id=post_id)
    )


@router.post("/{post_id}/comments", response_model=list[CommentView])
async def add_comment(
    post_id: str,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    payload: dict[str, Any] | None = Body(default=None),
    token: str | None = Depends(bearer_token),
) -> list[CommentView]:
    """Comment on a post. Any authenticated user may comment."""
    return await add_comment_use_case.execute(
        AddCommentRequest(token=token, payload=payload or {}, post_id=post_id)
    )


@router.post("/{post_id}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    post_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    token: str | None = Depends(bearer_token),
) -> ToggleLikeResponse:
    """Like the post, or remove the caller's like if already present."""
    return await toggle_like_use_case.execute(
        ToggleLikeRequest(token=token, post_id=post_id)
    )
