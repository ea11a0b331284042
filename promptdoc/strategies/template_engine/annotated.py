"""Annotated renderer strategy.

Renders a prompt document into segments that keep template text apart
from substituted values, so a reviewer can see which spans came from
user input. Joining the segment text gives exactly the plain renderer's
output for the same inputs and policy.
"""

import logging
from collections.abc import Sequence

from promptdoc.interfaces.document import (
    Block,
    FallbackPolicy,
    PromptDocument,
    Segment,
    SegmentKind,
    VariableValues,
    as_blocks,
    has_value,
)
from promptdoc.interfaces.renderer import BaseRenderer
from promptdoc.strategies.template_engine.references import split_references
from promptdoc.strategies.template_engine.renderer import (
    BLOCK_SEPARATOR,
    fallback_text,
    rendered_blocks,
)

logger = logging.getLogger(__name__)


class AnnotatedRenderer(BaseRenderer):
    """Renders a document into an ordered list of annotated segments."""

    def render(
        self,
        document: PromptDocument | Sequence[Block],
        values: VariableValues,
        policy: FallbackPolicy | None = None,
    ) -> list[Segment]:
        """Render annotated segments.

        Filled variables become VALUE segments (emphasized). Unfilled ones
        become PLACEHOLDER segments carrying the fallback text without
        emphasis. A BREAK segment separates consecutive blocks.

        Args:
            document: A PromptDocument or a sequence of blocks.
            values: Mapping of variable name to user-entered value.
            policy: Fallback policy for this call.

        Returns:
            Segments in render order.
        """
        policy = self._resolve_policy(policy)
        blocks = rendered_blocks(as_blocks(document))

        segments: list[Segment] = []
        for index, block in enumerate(blocks):
            if index > 0:
                segments.append(Segment(text=BLOCK_SEPARATOR, kind=SegmentKind.BREAK))
            segments.extend(self._render_text(block.text, values, policy))

        logger.debug(f"Annotated {len(blocks)} blocks into {len(segments)} segments")
        return segments

    def _render_text(
        self, text: str, values: VariableValues, policy: FallbackPolicy
    ) -> list[Segment]:
        segments: list[Segment] = []
        for part, name in split_references(text):
            if name is None:
                segments.append(Segment(text=part, kind=SegmentKind.LITERAL))
            elif has_value(values, name):
                segments.append(
                    Segment(text=values[name], kind=SegmentKind.VALUE, variable=name)
                )
            else:
                segments.append(
                    Segment(
                        text=fallback_text(policy, name, part),
                        kind=SegmentKind.PLACEHOLDER,
                        variable=name,
                    )
                )
        return segments


def render_annotated(
    document: PromptDocument | Sequence[Block],
    values: VariableValues,
    policy: FallbackPolicy = FallbackPolicy.BRACKETED,
) -> list[Segment]:
    """Render annotated segments with a fresh :class:`AnnotatedRenderer`."""
    return AnnotatedRenderer(policy=policy).render(document, values)
