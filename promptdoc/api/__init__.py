"""FastAPI routers and dependencies."""

from promptdoc.api.deps import get_app_settings, get_components
from promptdoc.api.prompts import router as prompts_router

__all__ = [
    "get_app_settings",
    "get_components",
    "prompts_router",
]
