"""
File scanner for documentation directories.

Recursively scans a documentation directory to find every Markdown file.
Sibling subdirectories are listed concurrently; the flattened result keeps
each directory's listing order, and is sorted afterwards unless the caller
asks for raw traversal order.
"""

import asyncio
from pathlib import Path
from typing import List, Optional
import logging

from llmstxt.errors import DirectoryReadError
from llmstxt.utils.filesystem import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)


class FileScanner:
    """
    Recursively scan a documentation directory for files with one extension.

    Unlike a site builder, nothing is excluded: hidden directories are walked
    too, and the extension match is an exact, case-sensitive suffix check on
    the file name.
    """

    DEFAULT_EXTENSION = ".md"

    def __init__(
        self,
        base_path: Path,
        filesystem: Optional[FileSystem] = None,
        extension: str = DEFAULT_EXTENSION,
        sort_paths: bool = True,
    ):
        """
        Initialize the file scanner.

        Args:
            base_path: Base directory to scan
            filesystem: File system to list directories with (default: local disk)
            extension: File name suffix to include (default: .md)
            sort_paths: Sort results lexicographically for reproducible output
        """
        self.base_path = Path(base_path).resolve()
        self.filesystem = filesystem or LocalFileSystem()
        self.extension = extension
        self.sort_paths = sort_paths

    async def scan(self) -> List[Path]:
        """
        Scan the base directory recursively for documentation files.

        Returns:
            List of absolute Path objects for all matching files.

        Raises:
            DirectoryReadError: If the base directory or any subdirectory
                cannot be listed. No partial results are returned.
        """
        logger.debug(f"Scanning {self.base_path} for *{self.extension} files")

        doc_files = await self._walk_directory(self.base_path)

        if self.sort_paths:
            doc_files.sort()

        logger.debug(f"Found {len(doc_files)} documentation files")
        return doc_files

    async def _walk_directory(self, directory: Path) -> List[Path]:
        """
        Walk one directory, fanning out over its subdirectories.

        Args:
            directory: Directory to walk

        Returns:
            Matching files in this subtree, in listing order
        """
        try:
            entries = await asyncio.to_thread(self.filesystem.list_dir, directory)
        except OSError as e:
            raise DirectoryReadError(directory, e) from e

        subtrees = await asyncio.gather(*(
            self._walk_directory(entry.path)
            for entry in entries
            if entry.is_dir
        ))
        subtree_iter = iter(subtrees)

        found: List[Path] = []
        for entry in entries:
            if entry.is_dir:
                found.extend(next(subtree_iter))
            elif self._matches(entry.path):
                found.append(entry.path)

        return found

    def _matches(self, path: Path) -> bool:
        return path.name.endswith(self.extension)


async def scan_documentation(
    docs_path: Path,
    filesystem: Optional[FileSystem] = None,
    extension: str = FileScanner.DEFAULT_EXTENSION,
    sort_paths: bool = True,
) -> List[Path]:
    """
    Convenience function to scan a documentation directory.

    Args:
        docs_path: Base documentation directory
        filesystem: Optional file system implementation
        extension: File name suffix to include
        sort_paths: Sort results lexicographically

    Returns:
        List of documentation file paths

    Example:
        >>> docs = asyncio.run(scan_documentation(Path("docs")))
    """
    scanner = FileScanner(
        docs_path,
        filesystem=filesystem,
        extension=extension,
        sort_paths=sort_paths,
    )
    return await scanner.scan()
