"""Get editor configuration use case."""

from pydantic import BaseModel

from surmise.domain.model.editor import EditorConfig, build_editor_config
from surmise.domain.value import Theme


class GetEditorConfigRequest(BaseModel):
    """Get editor configuration request."""

    theme: Theme = Theme.LIGHT


class GetEditorConfigUseCase:
    """Use case for serving the rich-text editor configuration."""

    async def execute(self, request: GetEditorConfigRequest) -> EditorConfig:
        return build_editor_config(request.theme)
