"""Utility functions for the llms.txt generator."""

from .file_scanner import FileScanner, scan_documentation
from .filesystem import DirEntry, FileSystem, LocalFileSystem

__all__ = [
    "FileScanner",
    "scan_documentation",
    "DirEntry",
    "FileSystem",
    "LocalFileSystem",
]
