"""Unit tests for settings and the component factory."""

import logging

import pytest

from promptdoc.core.config import Settings
from promptdoc.core.errors import DocumentTooLargeError
from promptdoc.core.factory import ComponentFactory
from promptdoc.core.logging_config import setup_logging
from promptdoc.interfaces.document import FallbackPolicy
from promptdoc.strategies.template_engine import (
    AnnotatedRenderer,
    PlainRenderer,
    SampleValueGenerator,
    VariableExtractor,
)


# =============================================================================
# Settings Tests
# =============================================================================


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self):
        """Test the default rendering configuration."""
        settings = Settings()

        assert settings.default_fallback_policy is FallbackPolicy.BRACKETED
        assert settings.log_dir is None

    def test_log_level_normalized(self):
        """Test that log levels are upper-cased."""
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_policy_case_insensitive(self):
        """Test that the fallback policy accepts any case."""
        settings = Settings(default_fallback_policy="UNCHANGED")

        assert settings.default_fallback_policy is FallbackPolicy.UNCHANGED

    def test_policy_from_environment(self, monkeypatch):
        """Test that settings are read from environment variables."""
        monkeypatch.setenv("DEFAULT_FALLBACK_POLICY", "unchanged")
        monkeypatch.setenv("MAX_BLOCKS", "12")

        settings = Settings()

        assert settings.default_fallback_policy is FallbackPolicy.UNCHANGED
        assert settings.max_blocks == 12


# =============================================================================
# Component Factory Tests
# =============================================================================


class TestComponentFactory:
    """Test suite for ComponentFactory."""

    @pytest.fixture
    def factory(self):
        """Create a factory with the unchanged fallback policy."""
        return ComponentFactory(Settings(default_fallback_policy="unchanged"))

    def test_get_extractor_cached(self, factory):
        """Test that the extractor is created once."""
        extractor = factory.get_extractor()

        assert isinstance(extractor, VariableExtractor)
        assert factory.get_extractor() is extractor

    def test_get_renderer_types(self, factory):
        """Test renderer selection by type."""
        assert isinstance(factory.get_renderer("plain"), PlainRenderer)
        assert isinstance(factory.get_renderer("annotated"), AnnotatedRenderer)

    def test_get_renderer_uses_settings(self, factory):
        """Test that renderers use the configured policy and default to plain."""
        renderer = factory.get_renderer()

        assert isinstance(renderer, PlainRenderer)
        assert renderer.policy is FallbackPolicy.UNCHANGED
        assert factory.get_renderer("plain") is renderer

    def test_unknown_renderer(self, factory):
        """Test that unknown renderer types are rejected."""
        with pytest.raises(ValueError, match="Unknown renderer type"):
            factory.get_renderer("html")

    def test_get_sample_generator(self, factory):
        """Test the sample generator getter."""
        generator = factory.get_sample_generator()

        assert isinstance(generator, SampleValueGenerator)
        assert factory.get_sample_generator() is generator

    def test_clear_cache(self, factory):
        """Test that clearing the cache creates new instances."""
        renderer = factory.get_renderer("plain")
        extractor = factory.get_extractor()

        factory.clear_cache()

        assert factory.get_renderer("plain") is not renderer
        assert factory.get_extractor() is not extractor


# =============================================================================
# Error Tests
# =============================================================================


class TestErrors:
    """Test suite for application exceptions."""

    def test_document_too_large_message(self):
        """Test the error carries counts and a readable message."""
        error = DocumentTooLargeError(7, 5)

        assert error.block_count == 7
        assert error.max_blocks == 5
        assert "7 blocks" in str(error)


# =============================================================================
# Logging Tests
# =============================================================================


class TestLoggingSetup:
    """Test suite for setup_logging."""

    def test_console_only_by_default(self):
        """Test that no file handlers are added without a log directory."""
        root_logger = setup_logging(Settings())

        assert not any(isinstance(h, logging.FileHandler) for h in root_logger.handlers)

    def test_file_handlers_with_log_dir(self, tmp_path):
        """Test that info.log and error.log are created in log_dir."""
        log_dir = tmp_path / "logs"

        root_logger = setup_logging(Settings(log_dir=log_dir, log_level="debug"))

        assert (log_dir / "info.log").exists()
        assert (log_dir / "error.log").exists()
        assert root_logger.level == logging.DEBUG

        for handler in list(root_logger.handlers):
            if isinstance(handler, logging.FileHandler):
                handler.close()
                root_logger.removeHandler(handler)
