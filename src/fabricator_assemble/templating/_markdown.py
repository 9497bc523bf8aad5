"""Markdown to HTML conversion for docs and material notes."""

import markdown

MARKDOWN_EXTENSIONS: tuple[str, ...] = ("extra", "sane_lists")


def render_markdown(text: str) -> str:
    """Render markdown to HTML.

    Raw HTML in the source passes through untouched.
    """
    return markdown.markdown(text, extensions=list(MARKDOWN_EXTENSIONS))
