"""Post response models and author population."""

from datetime import datetime

from scribe.application.usecase.base import ResponseModel
from scribe.domain.model import Comment, Post, User
from scribe.domain.service import UserService
from scribe.domain.value import UserId


class AuthorView(ResponseModel):
    """Populated author reference."""

    id: str
    username: str | None


class CommentView(ResponseModel):
    """Comment with its author populated."""

    id: str
    user: AuthorView
    text: str
    created_at: datetime


class PostView(ResponseModel):
    """Post with author and comment authors populated."""

    id: str
    title: str
    content: str
    author: AuthorView
    tags: list[str]
    comments: list[CommentView]
    likes: list[str]
    created_at: datetime
    updated_at: datetime


def _author(user_id: UserId, users: dict[UserId, User]) -> AuthorView:
    user = users.get(user_id)
    return AuthorView(id=str(user_id), username=user.username if user else None)


def comment_view(comment: Comment, users: dict[UserId, User]) -> CommentView:
    return CommentView(
        id=str(comment.id),
        user=_author(comment.author_id, users),
        text=comment.text,
        created_at=comment.created_at,
    )


def post_view(post: Post, users: dict[UserId, User]) -> PostView:
    return PostView(
        id=str(post.id),
        title=post.title,
        content=post.content,
        author=_author(post.author_id, users),
        tags=list(post.tags),
        comments=[comment_view(c, users) for c in post.comments],
        likes=[str(user_id) for user_id in post.likes],
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


async def present_posts(posts: list[Post], user_service: UserService) -> list[PostView]:
    """Build views for ``posts`` with one batched user lookup."""
    user_ids: set[UserId] = set()
    for post in posts:
        user_ids.add(post.author_id)
        user_ids.update(c.author_id for c in post.comments)
    users = await user_service.get_users_by_ids(user_ids)
    return [post_view(post, users) for post in posts]


async def present_post(post: Post, user_service: UserService) -> PostView:
    """Build the view for a single post."""
    views = await present_posts([post], user_service)
    return views[0]
