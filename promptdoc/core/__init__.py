"""Core configuration and factory components."""

from promptdoc.core.config import Settings, get_settings
from promptdoc.core.factory import ComponentFactory

__all__ = [
    "Settings",
    "get_settings",
    "ComponentFactory",
]
