"""
File system access used by the scanner and the generator.

The pipeline only needs three capabilities: list a directory, read a text file
and write a text file. Keeping them behind a small class lets tests swap in
implementations that fail on purpose or never touch the disk.
"""

import os
from pathlib import Path
from typing import List, NamedTuple


class DirEntry(NamedTuple):
    """One entry of a directory listing."""
    path: Path
    is_dir: bool


class FileSystem:
    """Interface for the file operations the pipeline performs."""

    def list_dir(self, directory: Path) -> List[DirEntry]:
        raise NotImplementedError

    def read_text(self, path: Path) -> str:
        raise NotImplementedError

    def write_text(self, path: Path, text: str) -> None:
        raise NotImplementedError


class LocalFileSystem(FileSystem):
    """FileSystem backed by the real disk, using UTF-8 for all text."""

    encoding = "utf-8"

    def list_dir(self, directory: Path) -> List[DirEntry]:
        """
        List a directory, hidden entries included.

        Symlinks are never reported as directories, so linked folders are not
        walked.

        Raises:
            OSError: If the directory is missing, unreadable or not a directory
        """
        with os.scandir(directory) as entries:
            return [
                DirEntry(Path(directory) / entry.name, entry.is_dir(follow_symlinks=False))
                for entry in entries
            ]

    def read_text(self, path: Path) -> str:
        # newline="" keeps \r\n and lone \r line endings as written
        with open(path, encoding=self.encoding, newline="") as f:
            return f.read()

    def write_text(self, path: Path, text: str) -> None:
        # no newline translation on write either
        with open(path, "w", encoding=self.encoding, newline="") as f:
            f.write(text)
