"""API request and response schemas.

Pydantic v2 models for API serialization/deserialization.
"""

from typing import Any

from pydantic import BaseModel, Field

from promptdoc.interfaces.document import (
    Block,
    FallbackPolicy,
    PromptDocument,
    Segment,
    SegmentKind,
    Variable,
)


# =============================================================================
# Request Schemas
# =============================================================================


class DocumentRequest(BaseModel):
    """A prompt document sent for extraction or rendering."""

    title: str | None = Field(default=None, description="Prompt title")
    blocks: list[Block] = Field(default_factory=list, description="Blocks in any order")

    def to_document(self) -> PromptDocument:
        return PromptDocument(title=self.title, blocks=self.blocks)


class RenderRequest(DocumentRequest):
    """Request schema for rendering a document."""

    values: dict[str, str | None] = Field(
        default_factory=dict,
        description="Variable name to user-entered value",
    )
    policy: FallbackPolicy | None = Field(
        default=None,
        description="Fallback for unfilled variables; server default when omitted",
    )


# =============================================================================
# Response Schemas
# =============================================================================


class VariablesResponse(BaseModel):
    """Response for variable extraction."""

    variables: list[Variable]
    count: int


class CompletionStatus(BaseModel):
    """How many of the document's variables have a value."""

    filled: int = Field(description="Variables with a non-blank value")
    total: int = Field(description="Variables referenced by the document")
    all_filled: bool


class RenderResponse(BaseModel):
    """Response for plain rendering."""

    text: str = Field(description="The final prompt text")
    policy: FallbackPolicy
    completion: CompletionStatus
    copy_ready: bool = Field(description="True when every variable has a value")


class SegmentResponse(BaseModel):
    """A single annotated span."""

    text: str
    kind: SegmentKind
    variable: str | None = None
    emphasized: bool

    @classmethod
    def from_segment(cls, segment: Segment) -> "SegmentResponse":
        return cls(
            text=segment.text,
            kind=segment.kind,
            variable=segment.variable,
            emphasized=segment.emphasized,
        )


class PreviewResponse(BaseModel):
    """Response for annotated preview rendering."""

    segments: list[SegmentResponse]
    text: str = Field(description="Concatenated segment text")
    policy: FallbackPolicy
    completion: CompletionStatus


class SampleValuesResponse(BaseModel):
    """Response for sample value generation."""

    values: dict[str, str]
    variables: list[Variable]


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str = Field(description="Error message")
    error_code: str | None = Field(default=None, description="Application-specific error code")
    extra: dict[str, Any] | None = Field(default=None, description="Additional error context")
