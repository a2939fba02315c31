"""YAML frontmatter parser for page markdown files."""

import re
from enum import Enum
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from flatpages.core.exceptions import FrontmatterError

MARKER = "---"

# Pattern for a markdown header prefix: "#", "## ", "### " ...
HEADER_PREFIX_PATTERN = re.compile(r"^#+(?:\s+|$)")


class Frontmatter(BaseModel):
    """Metadata read from a page frontmatter block.

    Keys other than ``title`` and ``description`` are kept as extras.
    """

    model_config = ConfigDict(extra="allow")

    title: str | None = None
    description: str | None = None

    @property
    def extra_fields(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class ParsedContent(BaseModel):
    """Result of splitting a page file into metadata and body."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str | None = None
    body: str = ""
    extra: Any = None


class _State(Enum):
    OUTSIDE = "outside"
    INSIDE = "inside"


def _is_marker(line: str) -> bool:
    return line.rstrip() == MARKER


def split_frontmatter(text: str) -> tuple[str, str] | None:
    """Split *text* into its frontmatter block and body.

    After leading whitespace the first line must be the ``---`` marker and
    the block ends at the next marker line. Returns None if there is no
    frontmatter block, including when the closing marker is missing.
    """
    lines = text.lstrip().splitlines(keepends=True)
    state = _State.OUTSIDE
    block: list[str] = []
    for index, line in enumerate(lines):
        if state is _State.OUTSIDE:
            if not _is_marker(line):
                return None
            state = _State.INSIDE
        elif _is_marker(line):
            return "".join(block), "".join(lines[index + 1 :])
        else:
            block.append(line)

    # Unterminated block: the whole text is the body
    return None


def title_from_markdown(text: str) -> str:
    """Take the first line as the page title, dropping a ``#`` header prefix."""
    lines = text.splitlines()
    if not lines:
        return ""
    line = lines[0].strip()
    return HEADER_PREFIX_PATTERN.sub("", line, count=1).strip()


def _load_block(block: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise FrontmatterError(str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontmatterError(
            f"expected a mapping, got {type(data).__name__}"
        )
    return data


def parse_frontmatter(
    text: str,
    extra_model: type[BaseModel] | None = None,
) -> ParsedContent:
    """Parse page text with optional YAML frontmatter.

    Args:
        text: Raw page file content.
        extra_model: Optional pydantic model validating the frontmatter
            keys other than ``title`` and ``description``. Without it the
            extras are returned as a plain dict.

    Returns:
        Parsed title, description, body and extras. The body is stripped
        of surrounding whitespace. A missing title is taken from its first
        line.

    Raises:
        FrontmatterError: If a frontmatter block exists but is not valid
            YAML, is not a mapping, or fails validation.
    """
    split = split_frontmatter(text)
    if split is None:
        data: dict[str, Any] = {}
        body = text.strip()
    else:
        block, body = split
        body = body.strip()
        data = _load_block(block)

    try:
        matter = Frontmatter.model_validate(data)
    except ValidationError as e:
        raise FrontmatterError(str(e)) from e

    extra: Any = matter.extra_fields
    if extra_model is not None:
        try:
            extra = extra_model.model_validate(extra)
        except ValidationError as e:
            raise FrontmatterError(str(e)) from e

    title = matter.title
    if title is None:
        title = title_from_markdown(body)

    return ParsedContent(
        title=title,
        description=matter.description,
        body=body,
        extra=extra,
    )
