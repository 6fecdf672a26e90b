"""
llmstxt - Flatten a Markdown documentation tree into a single llms.txt file.

The generator walks a documentation directory, strips YAML frontmatter and
documentation-site markup (admonitions, Fragment tags, <br> tags, extra blank
lines) from every Markdown file, and writes the concatenated plain text to one
output file suitable for LLM ingestion or search indexing.

Usage:
    from llmstxt import LlmsTxtGenerator, GeneratorConfig

    generator = LlmsTxtGenerator(GeneratorConfig(docs_dir="docs"))
    result = generator.generate()
"""

from .config import GeneratorConfig
from .errors import (
    LlmsTxtError,
    DirectoryReadError,
    FileProcessError,
    OutputWriteError,
)
from .formatters import clean_markdown, strip_frontmatter
from .generator import LlmsTxtGenerator, build_combined_text
from .schemas import GenerationResult, SkippedFile

__all__ = [
    # Main generator
    "LlmsTxtGenerator",
    "GeneratorConfig",
    "build_combined_text",

    # Text transforms
    "strip_frontmatter",
    "clean_markdown",

    # Errors
    "LlmsTxtError",
    "DirectoryReadError",
    "FileProcessError",
    "OutputWriteError",

    # Output schemas
    "GenerationResult",
    "SkippedFile",
]

__version__ = "0.1.0"
