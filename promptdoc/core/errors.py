"""Application exceptions.

The templating engine itself never raises for malformed content; these
cover limits enforced by the hosting layers.
"""


class PromptDocError(Exception):
    """Base exception for the application."""

    pass


class DocumentTooLargeError(PromptDocError):
    """Raised when a document has more blocks than the configured maximum."""

    def __init__(self, block_count: int, max_blocks: int) -> None:
        self.block_count = block_count
        self.max_blocks = max_blocks
        super().__init__(
            f"Document has {block_count} blocks; at most {max_blocks} are allowed"
        )
