"""Block-structured prompt documents and their variable templating engine."""

from promptdoc.interfaces.document import (
    Block,
    BlockType,
    FallbackPolicy,
    PromptDocument,
    Segment,
    SegmentKind,
    Variable,
    segments_to_text,
)
from promptdoc.strategies.template_engine import (
    AnnotatedRenderer,
    PlainRenderer,
    SampleValueGenerator,
    VariableExtractor,
    extract_variables,
    render_annotated,
    render_plain,
    sample_values,
)

__version__ = "0.1.0"

__all__ = [
    "AnnotatedRenderer",
    "Block",
    "BlockType",
    "FallbackPolicy",
    "PlainRenderer",
    "PromptDocument",
    "SampleValueGenerator",
    "Segment",
    "SegmentKind",
    "Variable",
    "VariableExtractor",
    "extract_variables",
    "render_annotated",
    "render_plain",
    "sample_values",
    "segments_to_text",
]
