"""Abstract base classes for templating strategies."""

from promptdoc.interfaces.renderer import BaseRenderer, BaseVariableExtractor

__all__ = [
    "BaseRenderer",
    "BaseVariableExtractor",
]
