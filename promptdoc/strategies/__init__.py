"""Concrete strategy implementations."""

from promptdoc.strategies.template_engine import (
    AnnotatedRenderer,
    PlainRenderer,
    SampleValueGenerator,
    VariableExtractor,
)

__all__ = [
    "AnnotatedRenderer",
    "PlainRenderer",
    "SampleValueGenerator",
    "VariableExtractor",
]
