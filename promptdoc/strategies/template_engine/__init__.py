"""Template engine strategies.

Implements variable extraction, plain and annotated rendering, and
sample value generation for block-structured prompt documents.
"""

from promptdoc.strategies.template_engine.annotated import AnnotatedRenderer, render_annotated
from promptdoc.strategies.template_engine.extractor import VariableExtractor, extract_variables
from promptdoc.strategies.template_engine.renderer import PlainRenderer, render_plain
from promptdoc.strategies.template_engine.samples import (
    SAMPLE_VALUE_RULES,
    SampleValueGenerator,
    sample_value,
    sample_values,
)

__all__ = [
    "AnnotatedRenderer",
    "PlainRenderer",
    "SAMPLE_VALUE_RULES",
    "SampleValueGenerator",
    "VariableExtractor",
    "extract_variables",
    "render_annotated",
    "render_plain",
    "sample_value",
    "sample_values",
]
