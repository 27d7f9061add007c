"""Application layer DI providers."""

from dishka import Scope, provide

from scribe.application.pipeline import MutationPipeline
from scribe.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from scribe.application.usecase.comment import AddCommentUseCase
from scribe.application.usecase.like import ToggleLikeUseCase
from scribe.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from scribe.application.usecase.user import UpdateProfileUseCase
from scribe.config import PaginationSettings
from scribe.domain.service import (
    AuthService,
    OwnershipGuard,
    PostService,
    UserService,
)
from scribe.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_mutation_pipeline(
        self,
        auth_service: AuthService,
        post_service: PostService,
        ownership_guard: OwnershipGuard,
    ) -> MutationPipeline:
        """Provide authenticated mutation pipeline."""
        return MutationPipeline(
            auth_service=auth_service,
            post_service=post_service,
            ownership_guard=ownership_guard,
        )

    # Auth use cases
    @provide
    def get_register_use_case(
        self, user_service: UserService, auth_service: AuthService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service, auth_service=auth_service)

    @provide
    def get_login_use_case(
        self, user_service: UserService, auth_service: AuthService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, auth_service=auth_service)

    @provide
    def get_current_user_use_case(
        self, auth_service: AuthService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(auth_service=auth_service)

    # User use cases
    @provide
    def get_update_profile_use_case(
        self, pipeline: MutationPipeline, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(pipeline=pipeline, user_service=user_service)

    # Post use cases
    @provide
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service,
            user_service=user_service,
            pagination=pagination,
        )

    @provide
    def get_get_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_create_post_use_case(
        self,
        pipeline: MutationPipeline,
        post_service: PostService,
        user_service: UserService,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            pipeline=pipeline, post_service=post_service, user_service=user_service
        )

    @provide
    def get_update_post_use_case(
        self,
        pipeline: MutationPipeline,
        post_service: PostService,
        user_service: UserService,
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            pipeline=pipeline, post_service=post_service, user_service=user_service
        )

    @provide
    def get_delete_post_use_case(
        self, pipeline: MutationPipeline, post_service: PostService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(pipeline=pipeline, post_service=post_service)

    # Comment and like use cases
    @provide
    def get_add_comment_use_case(
        self,
        pipeline: MutationPipeline,
        post_service: PostService,
        user_service: UserService,
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            pipeline=pipeline, post_service=post_service, user_service=user_service
        )

    @provide
    def get_toggle_like_use_case(
        self, pipeline: MutationPipeline, post_service: PostService
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(pipeline=pipeline, post_service=post_service)
