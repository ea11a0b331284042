"""Variable extraction and rendering interfaces.

Defines abstract base classes for the prompt templating engine.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from promptdoc.interfaces.document import (
    Block,
    FallbackPolicy,
    PromptDocument,
    Variable,
    VariableValues,
)


class BaseVariableExtractor(ABC):
    """Abstract base class for variable discovery strategies."""

    @abstractmethod
    def extract(self, document: PromptDocument | Sequence[Block]) -> list[Variable]:
        """Extract the variables a document references.

        Args:
            document: A PromptDocument or a sequence of blocks.

        Returns:
            De-duplicated Variable descriptors in first-discovery order.
        """


class BaseRenderer(ABC):
    """Abstract base class for rendering strategies.

    A renderer turns a document and a value map into output. Renderers
    hold no per-document state, so one instance can serve any number of
    documents.
    """

    def __init__(self, policy: FallbackPolicy = FallbackPolicy.BRACKETED) -> None:
        """Initialize the renderer.

        Args:
            policy: Default fallback policy for variables without a value.
        """
        self._policy = FallbackPolicy(policy)

    @property
    def policy(self) -> FallbackPolicy:
        """Return the default fallback policy."""
        return self._policy

    def _resolve_policy(self, policy: FallbackPolicy | str | None) -> FallbackPolicy:
        return self._policy if policy is None else FallbackPolicy(policy)

    @abstractmethod
    def render(
        self,
        document: PromptDocument | Sequence[Block],
        values: VariableValues,
        policy: FallbackPolicy | None = None,
    ) -> Any:
        """Render a document with the given variable values.

        Args:
            document: A PromptDocument or a sequence of blocks.
            values: Mapping of variable name to user-entered value.
            policy: Fallback policy for this call; the renderer default
                applies when None.

        Returns:
            The rendered output.
        """
