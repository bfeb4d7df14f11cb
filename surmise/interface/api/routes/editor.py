"""Editor configuration routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from surmise.application.usecase.editor import (
    GetEditorConfigRequest,
    GetEditorConfigUseCase,
)
from surmise.domain.model import EditorConfig
from surmise.domain.value import Theme

router = APIRouter(prefix="/editor", tags=["editor"], route_class=DishkaRoute)


@router.get("/config", response_model=EditorConfig)
async def get_editor_config(
    get_editor_config_use_case: FromDishka[GetEditorConfigUseCase],
    theme: Theme = Theme.LIGHT,
) -> EditorConfig:
    """Rich-text editor toolbar, formats and palette for a theme.

    Args:
        get_editor_config_use_case: Editor configuration use case from DI
        theme: ``light`` or ``dark``

    Returns:
        Editor configuration
    """
    return await get_editor_config_use_case.execute(
        GetEditorConfigRequest(theme=theme)
    )
