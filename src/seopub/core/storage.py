"""Local Markdown storage for scraped articles"""

import logging
from pathlib import Path

from seopub.errors import StorageError


logger = logging.getLogger(__name__)


class MarkdownStore:
    """Writes one Markdown file per scraped article under a fixed directory."""

    def __init__(self, storage_dir: str | Path = "storage/markdown"):
        self.storage_dir = Path(storage_dir)

    def _ensure_dir(self) -> None:
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to create storage directory: {e}") from e

    def save(self, filename: str, content: str) -> Path:
        """Write content to storage_dir/filename, replacing any existing file. Returns the path."""
        self._ensure_dir()
        path = self.storage_dir / filename
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to save markdown file: {e}") from e
        logger.info("Saved markdown to %s", path)
        return path
