"""Plain renderer strategy.

Flattens a prompt document into the final prompt text, substituting
variable values. Variables without a usable value are rendered according
to the fallback policy.
"""

import logging
from collections.abc import Sequence

from promptdoc.interfaces.document import (
    Block,
    FallbackPolicy,
    PromptDocument,
    VariableValues,
    as_blocks,
    has_value,
)
from promptdoc.interfaces.renderer import BaseRenderer
from promptdoc.strategies.template_engine.references import split_references

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "\n\n"


def fallback_text(policy: FallbackPolicy, name: str, reference_text: str) -> str:
    """Return what an unfilled reference renders as.

    Args:
        policy: The active fallback policy.
        name: The trimmed variable name.
        reference_text: The reference exactly as written, braces included.
    """
    if policy is FallbackPolicy.BRACKETED:
        return f"[{name}]"
    return reference_text


def rendered_blocks(blocks: list[Block]) -> list[Block]:
    """Return the blocks that contribute to rendered output."""
    return [block for block in blocks if block.text]


class PlainRenderer(BaseRenderer):
    """Renders a document into a single prompt string.

    Example:
        ```python
        renderer = PlainRenderer(policy=FallbackPolicy.UNCHANGED)
        text = renderer.render(document, {"name": "Ana"})
        ```
    """

    def render(
        self,
        document: PromptDocument | Sequence[Block],
        values: VariableValues,
        policy: FallbackPolicy | None = None,
    ) -> str:
        """Render the final prompt text.

        Each text-bearing block is rendered on its own and blocks are
        joined with a blank line. Every reference is replaced in a single
        pass over the original text, so substituted values are never
        scanned again.

        Args:
            document: A PromptDocument or a sequence of blocks.
            values: Mapping of variable name to user-entered value.
            policy: Fallback policy for this call.

        Returns:
            The rendered prompt.
        """
        policy = self._resolve_policy(policy)
        blocks = rendered_blocks(as_blocks(document))

        rendered = BLOCK_SEPARATOR.join(
            self._render_text(block.text, values, policy) for block in blocks
        )

        logger.debug(
            f"Rendered {len(blocks)} blocks ({len(rendered)} chars, policy={policy.value})"
        )
        return rendered

    def _render_text(
        self, text: str, values: VariableValues, policy: FallbackPolicy
    ) -> str:
        parts: list[str] = []
        for part, name in split_references(text):
            if name is None:
                parts.append(part)
            elif has_value(values, name):
                parts.append(values[name])
            else:
                parts.append(fallback_text(policy, name, part))
        return "".join(parts)


def render_plain(
    document: PromptDocument | Sequence[Block],
    values: VariableValues,
    policy: FallbackPolicy = FallbackPolicy.BRACKETED,
) -> str:
    """Render final prompt text with a fresh :class:`PlainRenderer`."""
    return PlainRenderer(policy=policy).render(document, values)
