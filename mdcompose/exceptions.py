class ComposerError(Exception):
    """Base exception for all mdcompose errors."""

    def __init__(self, message: str):
        super().__init__(message)


class StyleStackError(ComposerError):
    """Raised when a styled-text builder is popped without a matching push."""


class ImageLoadError(ComposerError):
    """Raised (inside an AsyncImage future) when an image cannot be loaded."""

    def __init__(self, url: str, reason: str, *, message: str | None = None):
        super().__init__(message or f"Failed to load image {url!r}: {reason}")
        self.url = url
        self.reason = reason
