"""Exception types raised by the pipelines and adapters"""


class SeopubError(RuntimeError):
    """Base class for hard pipeline failures surfaced to callers."""


class LLMError(SeopubError):
    """The completion service is unavailable or misconfigured."""


class ConversionError(SeopubError):
    """Markdown could not be converted to content blocks."""


class CMSError(SeopubError):
    """A content-store request failed."""


class StorageError(SeopubError):
    """A local Markdown file could not be written."""


class MissingImageError(SeopubError):
    """No main image was supplied and none could be resolved."""


class PostValidationError(SeopubError):
    """An assembled post failed schema validation."""

    def __init__(self, errors: list, summary: str):
        self.errors = errors
        super().__init__(f"Post validation failed: {summary}")
