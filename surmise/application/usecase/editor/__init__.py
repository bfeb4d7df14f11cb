"""Editor use cases."""

from .get_editor_config import GetEditorConfigRequest, GetEditorConfigUseCase

__all__ = ["GetEditorConfigRequest", "GetEditorConfigUseCase"]
