"""Prompt document interfaces.

Pydantic models for prompt documents, their blocks and the variables
discovered inside them, plus the segment type produced by the annotated
renderer.
"""

import enum
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class BlockType(str, enum.Enum):
    """Closed set of block variants a prompt document can contain."""

    TEXT = "TEXT"
    PROMPT = "PROMPT"
    CODE = "CODE"
    HEADING = "HEADING"
    QUOTE = "QUOTE"
    LIST = "LIST"
    VARIABLE = "VARIABLE"
    IMAGE = "IMAGE"


# Only these variants are scanned and substituted. CODE shows literal syntax.
TEXT_BEARING_TYPES = frozenset({BlockType.TEXT, BlockType.PROMPT})


class FallbackPolicy(str, enum.Enum):
    """How a variable without a usable value is rendered."""

    BRACKETED = "bracketed"
    UNCHANGED = "unchanged"


class Block(BaseModel):
    """A single content unit of a prompt document."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Opaque identifier, unique within a document")
    type: BlockType = Field(description="Block variant")
    content: dict[str, Any] = Field(
        default_factory=dict,
        description="Variant-specific payload (text, language, level, variable)",
    )
    position: int = Field(default=0, description="Render order")
    indent_level: int = Field(
        default=0,
        ge=0,
        le=10,
        alias="indentLevel",
        description="Nesting depth for visual indentation only",
    )

    @model_validator(mode="before")
    @classmethod
    def fold_text_shorthand(cls, data: Any) -> Any:
        """Accept ``{"type": "text", "text": "..."}`` as shorthand for content.text."""
        if isinstance(data, dict) and "text" in data:
            data = dict(data)
            text = data.pop("text")
            content = data.get("content")
            content = dict(content) if isinstance(content, dict) else {}
            content.setdefault("text", text)
            data["content"] = content
        return data

    @field_validator("content", mode="before")
    @classmethod
    def coerce_content(cls, v: Any) -> Any:
        """Content that is not a mapping is treated as empty."""
        return v if isinstance(v, dict) else {}

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> Any:
        """Block types are matched case-insensitively."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def is_text_bearing(self) -> bool:
        return self.type in TEXT_BEARING_TYPES

    @property
    def text(self) -> str:
        """Raw text the engine reads, empty for opaque or malformed blocks."""
        if not self.is_text_bearing:
            return ""
        value = self.content.get("text")
        return value if isinstance(value, str) else ""


class PromptDocument(BaseModel):
    """An ordered sequence of blocks forming one prompt."""

    title: str | None = Field(default=None, description="Display title")
    blocks: list[Block] = Field(default_factory=list)

    def ordered_blocks(self) -> list[Block]:
        """Return blocks by position; ties keep their original order."""
        return sorted(self.blocks, key=lambda block: block.position)


def as_blocks(document: PromptDocument | Sequence[Block]) -> list[Block]:
    """Return the blocks of a document, or of a bare block sequence, in render order."""
    if isinstance(document, PromptDocument):
        return document.ordered_blocks()
    return PromptDocument(blocks=list(document)).ordered_blocks()


class Variable(BaseModel):
    """A named placeholder referenced by a document."""

    name: str = Field(description="Trimmed text between the double braces")
    description: str | None = Field(default=None, description="Informational only")
    type: str = Field(default="string", description="Declared type from a variable block")
    required: bool = Field(default=True)
    default_value: str | None = Field(default=None, alias="defaultValue")
    options: list[str] | None = Field(default=None, description="Choices for select variables")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def default_description(self) -> "Variable":
        if not self.description:
            self.description = f"Variable: {self.name}"
        return self


VariableValues = Mapping[str, str | None]


def has_value(values: VariableValues, name: str) -> bool:
    """Return True if ``name`` maps to a non-blank value."""
    value = values.get(name)
    return bool(value and value.strip())


class SegmentKind(str, enum.Enum):
    """Render hint carried by an annotated segment."""

    LITERAL = "literal"
    VALUE = "value"
    PLACEHOLDER = "placeholder"
    BREAK = "break"


@dataclass(frozen=True)
class Segment:
    """A span of annotated output.

    Attributes:
        text: The exact text this span contributes to the rendered prompt.
        kind: Whether the span is template text, a filled value, a still
            unfilled placeholder, or the break between two blocks.
        variable: Variable name for VALUE and PLACEHOLDER spans.
    """

    text: str
    kind: SegmentKind
    variable: str | None = None

    @property
    def emphasized(self) -> bool:
        return self.kind is SegmentKind.VALUE


def segments_to_text(segments: list[Segment]) -> str:
    """Concatenate segment text, dropping render hints."""
    return "".join(segment.text for segment in segments)
