"""Variable extractor strategy.

Discovers the variables a prompt document references. Text-bearing
blocks are scanned in position order, left to right; explicit variable
blocks then add or refine descriptors.
"""

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from promptdoc.interfaces.document import (
    Block,
    BlockType,
    PromptDocument,
    Variable,
    as_blocks,
)
from promptdoc.interfaces.renderer import BaseVariableExtractor
from promptdoc.strategies.template_engine.references import iter_reference_names

logger = logging.getLogger(__name__)


class VariableExtractor(BaseVariableExtractor):
    """Extracts an ordered, de-duplicated list of variables."""

    def extract(self, document: PromptDocument | Sequence[Block]) -> list[Variable]:
        """Extract variables referenced by a document.

        The first occurrence of a name fixes its place in the result.
        Variable blocks that declare an already discovered name replace
        its descriptor in place; new names are appended.

        Args:
            document: A PromptDocument or a sequence of blocks.

        Returns:
            Variable descriptors in first-discovery order.
        """
        blocks = as_blocks(document)

        # dict preserves insertion order and acts as the ordered set
        discovered: dict[str, Variable] = {}
        for block in blocks:
            for name in iter_reference_names(block.text):
                if name not in discovered:
                    discovered[name] = Variable(name=name)

        for block in blocks:
            if block.type is not BlockType.VARIABLE:
                continue
            declared = self._declared_variable(block)
            if declared is not None:
                discovered[declared.name] = declared

        logger.debug(f"Extracted {len(discovered)} variables from {len(blocks)} blocks")
        return list(discovered.values())

    def _declared_variable(self, block: Block) -> Variable | None:
        """Build a descriptor from a variable block's payload, if usable."""
        payload: Any = block.content.get("variable")
        if not isinstance(payload, dict):
            return None

        name = payload.get("name")
        if not isinstance(name, str) or not name.strip():
            return None

        try:
            return Variable.model_validate({**payload, "name": name.strip()})
        except ValidationError as e:
            logger.debug(f"Skipping malformed variable block {block.id}: {e}")
            return None


def extract_variables(document: PromptDocument | Sequence[Block]) -> list[Variable]:
    """Extract variables with a fresh :class:`VariableExtractor`."""
    return VariableExtractor().extract(document)
