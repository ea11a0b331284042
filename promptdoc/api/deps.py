"""FastAPI dependencies for dependency injection.

Provides reusable dependencies for routes including:
- Application settings
- The component factory
- Document size limits
"""

import logging

from fastapi import Request

from promptdoc.api.schemas import DocumentRequest
from promptdoc.core.config import Settings
from promptdoc.core.errors import DocumentTooLargeError
from promptdoc.core.factory import ComponentFactory

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""
    return request.app.state.settings


def get_components(request: Request) -> ComponentFactory:
    """Return the application's component factory."""
    return request.app.state.factory


def enforce_block_limit(payload: DocumentRequest, settings: Settings) -> None:
    """Reject documents with more blocks than the configured maximum.

    Args:
        payload: The parsed request body.
        settings: Application settings.

    Raises:
        DocumentTooLargeError: If the block count exceeds ``max_blocks``.
    """
    if len(payload.blocks) > settings.max_blocks:
        logger.warning(
            f"Rejected document with {len(payload.blocks)} blocks "
            f"(max_blocks={settings.max_blocks})"
        )
        raise DocumentTooLargeError(len(payload.blocks), settings.max_blocks)
