"""Text formatters that turn documentation Markdown into plain text."""

from .markdown_cleaner import ADMONITION_KINDS, clean_markdown, strip_frontmatter

__all__ = ["ADMONITION_KINDS", "clean_markdown", "strip_frontmatter"]
