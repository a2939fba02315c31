"""Exceptions raised while reading and parsing flat pages."""

from pathlib import Path


class FlatPagesError(Exception):
    """Base exception for all flatpages errors."""


class PageReadError(FlatPagesError):
    """Raised when a page file or the pages folder cannot be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to read '{self.path}': {reason}")


class FrontmatterError(FlatPagesError):
    """Raised when a frontmatter block is present but cannot be deserialized."""

    def __init__(self, reason: str, path: Path | str | None = None) -> None:
        self.reason = reason
        self.path = str(path) if path is not None else None
        if self.path is None:
            super().__init__(f"Broken frontmatter: {reason}")
        else:
            super().__init__(f"Broken frontmatter in '{self.path}': {reason}")

    def with_path(self, path: Path | str) -> "FrontmatterError":
        """Return a copy of this error attributed to *path*."""
        return FrontmatterError(self.reason, path)
