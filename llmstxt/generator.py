"""
llms.txt Generator - Main orchestration logic.

Ties together discovery, the per-document transforms and the final write:
1. Scan the documentation directory
2. Read, strip and clean each file, one at a time, in discovery order
3. Concatenate the cleaned documents and write llms.txt once
"""

import asyncio
import os
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional
import logging

from llmstxt.config import GeneratorConfig
from llmstxt.errors import FileProcessError, OutputWriteError
from llmstxt.formatters import clean_markdown, strip_frontmatter
from llmstxt.schemas import GenerationResult, SkippedFile
from llmstxt.utils import FileScanner, FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)

DOCUMENT_SEPARATOR = "\n\n"


def build_combined_text(documents: Iterable[str]) -> str:
    """Join cleaned documents with a blank line between each and trim the result."""
    combined = ""
    for document in documents:
        combined += DOCUMENT_SEPARATOR
        combined += document
    return combined.strip()


class LlmsTxtGenerator:
    """
    Main generator for llms.txt.

    Discovery may list directories concurrently, but documents are read and
    transformed strictly one after another so the output order always matches
    the discovery order.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        filesystem: Optional[FileSystem] = None,
    ):
        """
        Initialize the generator.

        Args:
            config: Paths and options (default: docs/ and llms.txt in the cwd)
            filesystem: File system to read and write through (default: local disk)
        """
        self.config = config or GeneratorConfig()
        self.filesystem = filesystem or LocalFileSystem()

    def generate(self) -> GenerationResult:
        """Run the pipeline to completion. See agenerate()."""
        return asyncio.run(self.agenerate())

    async def agenerate(self) -> GenerationResult:
        """
        Run the complete generation pipeline.

        Returns:
            GenerationResult with counts and the output path

        Raises:
            DirectoryReadError: The documentation directory could not be listed
            OutputWriteError: The output file could not be written
        """
        docs_path = self.config.docs_path
        output_path = self.config.output_path

        logger.info(f"Scanning for markdown files in: {docs_path}")
        scanner = FileScanner(
            docs_path,
            filesystem=self.filesystem,
            extension=self.config.extension,
            sort_paths=self.config.sort_paths,
        )
        all_files = await scanner.scan()
        logger.info(f"Found {len(all_files)} markdown files to process.")

        documents: List[str] = []
        skipped: List[SkippedFile] = []

        for file_path in all_files:
            logger.info(f"  Processing: {self._display_path(file_path)}")
            try:
                documents.append(self.process_file(file_path))
            except FileProcessError as e:
                logger.warning(f"  Could not read or process file \"{e.path}\". Skipping.")
                logger.warning(f"  {e.cause}")
                skipped.append(SkippedFile(path=str(e.path), error=str(e.cause)))

        final_output = build_combined_text(documents)
        self.write_output(output_path, final_output)
        logger.info(f"Successfully generated combined file: {output_path}")

        return GenerationResult(
            docs_path=str(docs_path),
            output_path=str(output_path),
            files_found=len(all_files),
            files_processed=len(documents),
            files_skipped=skipped,
            output_chars=len(final_output),
            timestamp=datetime.now().isoformat(),
        )

    def process_file(self, file_path: Path) -> str:
        """
        Read one document and return its cleaned text.

        Raises:
            FileProcessError: If the file cannot be read, decoded or transformed
        """
        try:
            raw_content = self.filesystem.read_text(file_path)
            content = strip_frontmatter(raw_content)
            return clean_markdown(content)
        except (OSError, ValueError) as e:
            raise FileProcessError(file_path, e) from e

    def write_output(self, output_path: Path, text: str) -> None:
        """
        Write the combined text, replacing any existing file.

        Raises:
            OutputWriteError: If the file cannot be written
        """
        try:
            self.filesystem.write_text(output_path, text)
        except OSError as e:
            raise OutputWriteError(output_path, e) from e

    def _display_path(self, file_path: Path) -> str:
        try:
            return os.path.relpath(file_path, Path(self.config.working_dir).resolve())
        except ValueError:
            # Different drive on Windows
            return str(file_path)
