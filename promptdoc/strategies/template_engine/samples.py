"""Sample value heuristic.

Fills every variable with a plausible placeholder so a document can be
previewed before real values are entered. Matching is a plain substring
test on the lower-cased name; it only has to be non-empty and
deterministic.
"""

import logging
from collections.abc import Iterable

from promptdoc.interfaces.document import Variable

logger = logging.getLogger(__name__)


# First matching rule wins.
SAMPLE_VALUE_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("name",), "Alex"),
    (("topic", "subject"), "artificial intelligence"),
    (("tone", "style"), "professional"),
    (("task", "job"), "writing a blog post"),
    (("requirement",), "detailed examples and clear explanations"),
)


def sample_value(name: str) -> str:
    """Return the sample value for a single variable name."""
    lowered = name.lower()
    for keywords, value in SAMPLE_VALUE_RULES:
        if any(keyword in lowered for keyword in keywords):
            return value
    return f"sample {name}"


class SampleValueGenerator:
    """Generates preview values for a list of variables."""

    def generate(self, variables: Iterable[Variable | str]) -> dict[str, str]:
        """Build a complete value map for ``variables``.

        Args:
            variables: Variable descriptors or bare names.

        Returns:
            Mapping of every variable name to its sample value.
        """
        values: dict[str, str] = {}
        for variable in variables:
            name = variable.name if isinstance(variable, Variable) else variable
            values[name] = sample_value(name)

        logger.debug(f"Generated sample values for {len(values)} variables")
        return values

    def reset(self) -> dict[str, str]:
        """Return an empty value map."""
        return {}


def sample_values(variables: Iterable[Variable | str]) -> dict[str, str]:
    """Generate sample values with a fresh :class:`SampleValueGenerator`."""
    return SampleValueGenerator().generate(variables)
