"""Shared fixtures for the llmstxt test suite."""
from pathlib import Path

import pytest

from llmstxt.utils.filesystem import LocalFileSystem

ENV_VARS = ("LLMSTXT_DOCS_DIR", "LLMSTXT_OUTPUT", "LLMSTXT_EXTENSION", "LLMSTXT_SORT")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep LLMSTXT_* variables (including ones loaded from .env files) out of every test."""
    for name in ENV_VARS:
        # setenv first so teardown removes anything load_dotenv adds later
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class FailingFileSystem(LocalFileSystem):
    """Local file system that fails on chosen paths."""

    def __init__(self, fail_reads=(), fail_lists=(), fail_writes=False):
        self.fail_reads = {Path(p).resolve() for p in fail_reads}
        self.fail_lists = {Path(p).resolve() for p in fail_lists}
        self.fail_writes = fail_writes

    def list_dir(self, directory):
        if Path(directory).resolve() in self.fail_lists:
            raise PermissionError(f"Permission denied: '{directory}'")
        return super().list_dir(directory)

    def read_text(self, path):
        if Path(path).resolve() in self.fail_reads:
            raise PermissionError(f"Permission denied: '{path}'")
        return super().read_text(path)

    def write_text(self, path, text):
        if self.fail_writes:
            raise OSError(28, "No space left on device")
        super().write_text(path, text)


def write_doc(root: Path, relative: str, content: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
