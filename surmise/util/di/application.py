"""Application layer DI providers."""

from dishka import Scope, provide

from surmise.application.usecase.auth import (
    AuthenticateUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from surmise.application.usecase.editor import GetEditorConfigUseCase
from surmise.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from surmise.domain.service import CoverStorage, JWTService, PostService, UserService
from surmise.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_authenticate_use_case(self, jwt_service: JWTService) -> AuthenticateUseCase:
        """Provide authenticate use case."""
        return AuthenticateUseCase(jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_register_use_case(self, user_service: UserService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_service: PostService, cover_storage: CoverStorage
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, cover_storage=cover_storage)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self, post_service: PostService, cover_storage: CoverStorage
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service, cover_storage=cover_storage)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Editor use cases
    @provide(scope=Scope.APP)
    def get_editor_config_use_case(self) -> GetEditorConfigUseCase:
        """Provide editor configuration use case."""
        return GetEditorConfigUseCase()
