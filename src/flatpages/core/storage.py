"""File-based page lookup and the page metadata store.

Pages are stored flat in one folder as markdown files with optional YAML
frontmatter. File naming: URL with ``/`` replaced by ``^`` plus ``.md``,
so ``/about/team`` lives in ``^about^team.md``.
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel

from flatpages.config import settings
from flatpages.core.exceptions import FrontmatterError, PageReadError
from flatpages.core.models import FlatPage, FlatPageMeta
from flatpages.core.urls import EXTENSION, filename_to_url, url_to_filename

logger = logging.getLogger(__name__)


def _resolve_root(root: Path | str | None) -> Path:
    return Path(root) if root is not None else settings.pages_dir


def get_page_by_path(
    path: Path | str,
    extra_model: type[BaseModel] | None = None,
) -> FlatPage | None:
    """Read and parse a page file.

    Returns None if the file does not exist.

    Raises:
        PageReadError: If the file exists but cannot be read as UTF-8 text.
        FrontmatterError: If its frontmatter is broken.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError):
        return None
    except OSError as e:
        raise PageReadError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise PageReadError(path, str(e)) from e

    try:
        return FlatPage.from_content(content, extra_model)
    except FrontmatterError as e:
        logger.debug("Broken frontmatter in %s: %s", path, e.reason)
        raise e.with_path(path) from e


def get_page(
    root: Path | str | None,
    url: str,
    extra_model: type[BaseModel] | None = None,
) -> FlatPage | None:
    """Get a page by its URL.

    Args:
        root: Pages folder. Defaults to ``settings.pages_dir``.
        url: Page URL, e.g. ``/about/team``.
        extra_model: Optional pydantic model for extra frontmatter fields.

    Returns:
        The page, or None if no page exists at this URL.
    """
    filename = url_to_filename(url)
    if filename is None:
        return None
    return get_page_by_path(_resolve_root(root) / filename, extra_model)


class FlatPageStore:
    """In-memory store of page metadata for a pages folder.

    Built once by :meth:`read_dir` and read-only afterwards. Rebuild it
    when the files change.
    """

    def __init__(self, root: Path, pages: dict[str, FlatPageMeta]):
        self.root = root
        self.pages = MappingProxyType(dict(pages))

    @classmethod
    def read_dir(cls, root: Path | str | None = None) -> "FlatPageStore":
        """Create a store by scanning the pages folder.

        Only files directly in the folder can be pages, subdirectories are
        never entered. Files that are not named like a page are skipped.
        Any page that cannot be read or parsed aborts the whole scan.

        Raises:
            PageReadError: If the folder or a page file cannot be read.
            FrontmatterError: If a page has broken frontmatter.
        """
        root = _resolve_root(root)
        if not root.is_dir():
            raise PageReadError(root, "not a directory")
        try:
            entries = sorted(root.iterdir())
        except OSError as e:
            raise PageReadError(root, e.strerror or str(e)) from e

        pages: dict[str, FlatPageMeta] = {}
        for path in entries:
            if not path.name.endswith(EXTENSION) or not path.is_file():
                continue
            url = filename_to_url(path.name)
            if url is None:
                logger.debug("Skipping %s: not a page file name", path)
                continue
            page = get_page_by_path(path)
            if page is None:
                # Removed between listing and reading
                continue
            pages[url] = FlatPageMeta.from_page(url, page)

        logger.info("Loaded %d pages from %s", len(pages), root)
        return cls(root, pages)

    def meta_by_url(self, url: str) -> FlatPageMeta | None:
        """Return page metadata by its URL. Never touches the filesystem."""
        return self.pages.get(url)

    def page_by_url(
        self,
        url: str,
        extra_model: type[BaseModel] | None = None,
    ) -> FlatPage | None:
        """Read the full page for a URL known to the store."""
        if url not in self.pages:
            return None
        return get_page(self.root, url, extra_model)

    def meta_by_stem(self, stem: str) -> FlatPageMeta | None:
        """Return page metadata by its file stem, e.g. ``^about^team``."""
        url = filename_to_url(stem + EXTENSION)
        if url is None:
            return None
        return self.meta_by_url(url)

    def page_by_stem(
        self,
        stem: str,
        extra_model: type[BaseModel] | None = None,
    ) -> FlatPage | None:
        """Read the full page for a file stem known to the store."""
        url = filename_to_url(stem + EXTENSION)
        if url is None:
            return None
        return self.page_by_url(url, extra_model)

    def urls(self) -> list[str]:
        """List all page URLs, sorted."""
        return sorted(self.pages)

    def __contains__(self, url: object) -> bool:
        return url in self.pages

    def __len__(self) -> int:
        return len(self.pages)

    def __iter__(self) -> Iterator[FlatPageMeta]:
        return (self.pages[url] for url in self.urls())
