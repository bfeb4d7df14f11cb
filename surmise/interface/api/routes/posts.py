"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from starlette.datastructures import FormData, UploadFile

from surmise.adapter.error import UploadTooLargeError
from surmise.application.usecase.auth import AuthenticateUseCase
from surmise.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsUseCase,
    MessageResponse,
    PostResponse,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from surmise.config import Settings
from surmise.domain.error import (
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from surmise.domain.model.post import require_post_fields
from surmise.domain.service import CoverStorage, StagedCover
from surmise.interface.api.credentials import require_identity

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)

TEXT_FIELDS = ("title", "summary", "content")


def _text_field(form: FormData, name: str) -> str | None:
    value = form.get(name)
    return value if isinstance(value, str) else None


async def _read_post_form(
    request: Request, cover_storage: CoverStorage, settings: Settings
) -> tuple[dict[str, str | None], StagedCover | None]:
    """Parse a multipart post form and stage its cover.

    Text parts may be up to ``max_field_size`` bytes; larger parts are
    rejected by the form parser with a 400.

    Returns:
        The text fields (None when absent) and the staged cover, if any

    Raises:
        HTTPException: 413 if the cover exceeds the file size limit
    """
    async with request.form(max_part_size=settings.uploads.max_field_size) as form:
        fields = {name: _text_field(form, name) for name in TEXT_FIELDS}

        upload = form.get("file")
        if not isinstance(upload, UploadFile) or not upload.filename:
            return fields, None

        try:
            # The parser has already counted the spooled bytes
            limit = settings.uploads.max_file_size
            if upload.size is not None and upload.size > limit:
                raise UploadTooLargeError(upload.size, limit)
            cover = await cover_storage.stage(upload.filename, await upload.read())
        except UploadTooLargeError as e:
            logfire.warn("Cover rejected", size=e.size, limit=e.limit)
            raise HTTPException(
                status_code=status.HTTP_413_CONTENT_TOO_LARGE,
                detail="Cover image too large",
            )
        return fields, cover


def _post_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


def _not_the_author() -> HTTPException:
    # Kept as 400 for compatibility with existing clients
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST, detail="You are not the author"
    )


@router.get("", response_model=list[PostResponse])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostResponse]:
    """List every post, newest first.

    Returns:
        All posts with their authors resolved
    """
    try:
        return await list_posts_use_case.execute()
    except Exception as e:
        logfire.error("Error fetching posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching posts",
        )


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostResponse:
    """Get a single post.

    Args:
        post_id: Post UUID
        get_post_use_case: Get post use case from DI

    Returns:
        The post

    Raises:
        HTTPException: 404 if the post doesn't exist
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except NotFoundError:
        raise _post_not_found()
    except Exception as e:
        logfire.error("Error fetching post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching post",
        )


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: Request,
    create_post_use_case: FromDishka[CreatePostUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    cover_storage: FromDishka[CoverStorage],
    settings: FromDishka[Settings],
) -> PostResponse:
    """Create a post from a multipart form.

    Form fields: ``title``, ``summary``, ``content`` and an optional ``file``
    holding the cover image. The fields are checked before the caller is
    authenticated.

    Returns:
        The created post

    Raises:
        HTTPException: 400 on missing fields, 401 when not authenticated,
            413 when the cover is too large
    """
    fields, cover = await _read_post_form(request, cover_storage, settings)
    try:
        try:
            require_post_fields(**fields)
        except ValidationError as e:
            logfire.warn("Post creation validation error", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
            )

        identity = await require_identity(
            request, authenticate_use_case, settings.auth
        )

        try:
            return await create_post_use_case.execute(
                CreatePostRequest(
                    author_id=identity.id,
                    author_username=identity.username,
                    cover=cover,
                    **fields,
                )
            )
        except DomainError as e:
            logfire.warn("Post creation domain error", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
            )
        except Exception as e:
            logfire.error("Error creating post", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error creating post",
            )
    finally:
        if cover is not None:
            await cover_storage.discard(cover)


@router.put("/{post_id}", response_model=MessageResponse)
async def update_post(
    post_id: str,
    request: Request,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    cover_storage: FromDishka[CoverStorage],
    settings: FromDishka[Settings],
) -> MessageResponse:
    """Update a post from a multipart form.

    Every field is optional; omitted fields keep their value and the cover is
    only replaced when a new ``file`` is sent. Only the author may update.

    Raises:
        HTTPException: 400 on empty fields or when the caller is not the
            author, 401 when not authenticated, 404 if the post doesn't exist,
            413 when the cover is too large
    """
    fields, cover = await _read_post_form(request, cover_storage, settings)
    try:
        identity = await require_identity(
            request, authenticate_use_case, settings.auth
        )

        try:
            return await update_post_use_case.execute(
                UpdatePostRequest(
                    post_id=post_id, user_id=identity.id, cover=cover, **fields
                )
            )
        except NotFoundError:
            raise _post_not_found()
        except NotAuthorizedError:
            raise _not_the_author()
        except DomainError as e:
            logfire.warn("Post update domain error", post_id=post_id, error=str(e))
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
            )
        except Exception as e:
            logfire.error("Error updating post", post_id=post_id, error=str(e))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error updating post",
            )
    finally:
        if cover is not None:
            await cover_storage.discard(cover)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    request: Request,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[Settings],
) -> MessageResponse:
    """Delete a post. Only the author may delete.

    Raises:
        HTTPException: 400 when the caller is not the author, 401 when not
            authenticated, 404 if the post doesn't exist
    """
    identity = await require_identity(request, authenticate_use_case, settings.auth)

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id, user_id=identity.id)
        )
    except NotFoundError:
        raise _post_not_found()
    except NotAuthorizedError:
        raise _not_the_author()
    except Exception as e:
        logfire.error("Error deleting post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error deleting post",
        )
