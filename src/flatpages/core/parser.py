"""Markdown to HTML rendering for page bodies."""

from markdown import Markdown
from markdown.extensions import Extension
from markdown.inlinepatterns import SimpleTagInlineProcessor

from flatpages.config import settings

# Pattern for strikethrough: ~~text~~
# Group 2 must contain the text (SimpleTagInlineProcessor expectation)
STRIKETHROUGH_PATTERN = r"(~~)(.*?)~~"


class StrikethroughExtension(Extension):
    """Markdown extension for ~~strikethrough~~ text."""

    def extendMarkdown(self, md: Markdown) -> None:
        """Add strikethrough pattern to markdown parser."""
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_PATTERN, "del"),
            "strikethrough",
            50,
        )


def create_parser(extensions: list[str] | None = None) -> Markdown:
    """Create a Markdown parser for page bodies.

    Args:
        extensions: Names of Python-Markdown extensions to enable.
                    Defaults to ``settings.markdown_extensions``.

    Returns:
        Configured Markdown parser instance.
    """
    if extensions is None:
        extensions = settings.markdown_extensions
    return Markdown(extensions=[*extensions, StrikethroughExtension()])


def render_markdown(content: str, extensions: list[str] | None = None) -> str:
    """Render markdown to HTML.

    A fresh parser is built for every call, Markdown instances keep state
    between conversions. Non-empty output ends with a newline.

    Args:
        content: Markdown source.
        extensions: Optional override of the enabled extensions.

    Returns:
        HTML string, empty for an empty body.
    """
    html = create_parser(extensions).convert(content)
    if not html:
        return ""
    return html + "\n"
