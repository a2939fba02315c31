"""Mapping between page URLs and page file names.

A URL such as ``/docs/getting-started`` is stored in the pages folder as
``^docs^getting-started.md``. URLs may only contain ASCII letters, digits,
``-``, ``_`` and ``/``, so a mapped file name can never contain a path
separator, a dot segment or a drive prefix.
"""

import re

SEPARATOR = "^"
EXTENSION = ".md"

# Pattern for page URLs: /, /foo, /foo/bar-baz, /foo/ (empty segments allowed)
URL_PATTERN = re.compile(r"/[A-Za-z0-9_\-/]*")

# Pattern for page file stems: URL_PATTERN with / replaced by the separator
STEM_PATTERN = re.compile(r"\^[A-Za-z0-9_\-^]*")


def is_valid_url(url: str) -> bool:
    """Check whether *url* only uses the characters allowed in page URLs."""
    return URL_PATTERN.fullmatch(url) is not None


def url_to_filename(url: str) -> str | None:
    """Convert a page URL to its file name.

    Returns None if the URL cannot name a page.
    """
    if not is_valid_url(url):
        return None
    return url.replace("/", SEPARATOR) + EXTENSION


def filename_to_url(filename: str) -> str | None:
    """Convert a page file name (relative to the pages folder) back to its URL.

    Returns None if the name is not a page file name.
    """
    if not filename.endswith(EXTENSION):
        return None
    stem = filename.removesuffix(EXTENSION)
    if STEM_PATTERN.fullmatch(stem) is None:
        return None
    return stem.replace(SEPARATOR, "/")
