"""Component Factory for strategy instantiation.

The Factory Pattern allows the application to instantiate
different strategy implementations at runtime based on
configuration or environment variables.
"""

import logging

from promptdoc.core.config import Settings, get_settings
from promptdoc.interfaces.renderer import BaseRenderer, BaseVariableExtractor
from promptdoc.strategies.template_engine import (
    AnnotatedRenderer,
    PlainRenderer,
    SampleValueGenerator,
    VariableExtractor,
)

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating templating components based on configuration.

    Every component is stateless, so cached instances are shared
    across documents and requests.

    Example:
        ```python
        settings = get_settings()
        factory = ComponentFactory(settings)

        extractor = factory.get_extractor()
        renderer = factory.get_renderer("annotated")
        samples = factory.get_sample_generator()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Application settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._extractor_cache: BaseVariableExtractor | None = None
        self._renderer_cache: dict[str, BaseRenderer] = {}
        self._sample_generator_cache: SampleValueGenerator | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_extractor(self) -> BaseVariableExtractor:
        """Get the variable extractor instance."""
        if self._extractor_cache is None:
            logger.info("Instantiating variable extractor")
            self._extractor_cache = VariableExtractor()
        return self._extractor_cache

    def get_renderer(self, renderer_type: str = "plain") -> BaseRenderer:
        """Get a renderer instance based on the specified type.

        Args:
            renderer_type: The renderer type to instantiate: "plain" or "annotated".

        Returns:
            A BaseRenderer implementation using the configured fallback policy.

        Raises:
            ValueError: If the renderer type is unknown.
        """
        if renderer_type not in self._renderer_cache:
            policy = self._settings.default_fallback_policy
            logger.info(f"Instantiating renderer: {renderer_type} (policy={policy.value})")

            match renderer_type:
                case "plain":
                    self._renderer_cache[renderer_type] = PlainRenderer(policy=policy)
                case "annotated":
                    self._renderer_cache[renderer_type] = AnnotatedRenderer(policy=policy)
                case _:
                    raise ValueError(
                        f"Unknown renderer type: {renderer_type}. "
                        f"Valid options: 'plain', 'annotated'"
                    )

        return self._renderer_cache[renderer_type]

    def get_sample_generator(self) -> SampleValueGenerator:
        """Get the sample value generator instance."""
        if self._sample_generator_cache is None:
            logger.info("Instantiating sample value generator")
            self._sample_generator_cache = SampleValueGenerator()
        return self._sample_generator_cache

    def clear_cache(self) -> None:
        """Clear all cached component instances."""
        self._extractor_cache = None
        self._renderer_cache.clear()
        self._sample_generator_cache = None
        logger.info("Component cache cleared")

