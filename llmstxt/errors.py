"""Exceptions raised by the llms.txt generation pipeline."""

from pathlib import Path
from typing import Union


class LlmsTxtError(Exception):
    """Base class for pipeline errors carrying the offending path and cause."""

    def __init__(self, path: Union[str, Path], cause: Union[BaseException, str]):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{self.path}: {cause}")


class DirectoryReadError(LlmsTxtError):
    """A documentation directory could not be listed. Fatal."""


class FileProcessError(LlmsTxtError):
    """A single documentation file could not be read or transformed."""


class OutputWriteError(LlmsTxtError):
    """The combined output file could not be written. Fatal."""
