"""Data models for flat pages."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from flatpages.core.frontmatter import parse_frontmatter
from flatpages.core.parser import render_markdown


class FlatPage(BaseModel):
    """A page parsed from a markdown file with optional frontmatter."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str | None = None
    body: str = ""
    extra: Any = None

    @classmethod
    def from_content(
        cls,
        content: str,
        extra_model: type[BaseModel] | None = None,
    ) -> "FlatPage":
        """Parse a page from the raw file text.

        Raises:
            FrontmatterError: If the frontmatter block is broken.
        """
        parsed = parse_frontmatter(content, extra_model)
        return cls(
            title=parsed.title,
            description=parsed.description,
            body=parsed.body,
            extra=parsed.extra,
        )

    def html(self) -> str:
        """Return the body rendered to HTML. Not cached."""
        return render_markdown(self.body)


class FlatPageMeta(BaseModel):
    """Title and description of a page, kept by the page store."""

    model_config = ConfigDict(frozen=True)

    url: str
    title: str
    description: str | None = None

    @classmethod
    def from_page(cls, url: str, page: FlatPage) -> "FlatPageMeta":
        return cls(url=url, title=page.title, description=page.description)
