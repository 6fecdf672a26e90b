"""
Markdown cleanup for llms.txt output.

Two pure transforms applied to every document, in this order:
- strip_frontmatter: drop a leading ``---`` metadata block
- clean_markdown: unwrap admonitions, drop <Fragment> tags, turn <br> tags
  into newlines and collapse runs of blank lines
"""

import re

ADMONITION_KINDS = ("note", "info", "caution")

FRONTMATTER_PATTERN = re.compile(r"\A---\s*([\s\S]*?)\s*---\s*")

# Body is non-greedy: the first fence-only line closes the block.
# The closing fence may be followed by \r on CRLF documents.
ADMONITION_PATTERN = re.compile(
    r"^:::(?:" + "|".join(ADMONITION_KINDS) + r")\s*\n([\s\S]*?)\n:::(?=\r?$)",
    re.MULTILINE,
)
FRAGMENT_TAG_PATTERN = re.compile(r"</?Fragment>")
LINE_BREAK_PATTERN = re.compile(r"<br\s*/?>", re.IGNORECASE)
BLANK_RUN_PATTERN = re.compile(r"(?:\s*\n){3,}")


def strip_frontmatter(content: str) -> str:
    """
    Remove a frontmatter block from the start of markdown content.

    Whitespace around the delimiters is part of the block. Content that does
    not start with ``---`` is returned unchanged.
    """
    match = FRONTMATTER_PATTERN.match(content)
    if match:
        return content[match.end():]
    return content


def clean_markdown(content: str) -> str:
    """Clean the markdown content by removing docs-specific formatting."""
    processed = ADMONITION_PATTERN.sub(r"\1", content)
    processed = FRAGMENT_TAG_PATTERN.sub("", processed)
    processed = LINE_BREAK_PATTERN.sub("\n", processed)
    processed = BLANK_RUN_PATTERN.sub("\n\n", processed)
    return processed.strip()
