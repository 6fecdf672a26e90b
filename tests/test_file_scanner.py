"""Tests for Markdown file discovery."""
import asyncio
import os

import pytest

from llmstxt.errors import DirectoryReadError
from llmstxt.utils import FileScanner, scan_documentation

from tests.conftest import FailingFileSystem, write_doc


@pytest.fixture
def docs_tree(tmp_path):
    docs = tmp_path / "docs"
    write_doc(docs, "index.md", "# Index")
    write_doc(docs, "guide/intro.md", "# Intro")
    write_doc(docs, "guide/advanced/deep/nested.md", "# Nested")
    write_doc(docs, ".hidden/secret.md", "# Hidden")
    write_doc(docs, "folder.md/inside.md", "# Inside a dir named like a doc")
    write_doc(docs, "image.png", "not markdown")
    write_doc(docs, "guide/notes.txt", "not markdown")
    write_doc(docs, "UPPER.MD", "wrong case")
    write_doc(docs, "backup.md.bak", "wrong suffix")
    (docs / "empty_dir").mkdir()
    return docs


def test_scan_finds_every_markdown_file(docs_tree):
    found = asyncio.run(FileScanner(docs_tree).scan())

    relative = [p.relative_to(docs_tree).as_posix() for p in found]
    assert relative == [
        ".hidden/secret.md",
        "folder.md/inside.md",
        "guide/advanced/deep/nested.md",
        "guide/intro.md",
        "index.md",
    ]


def test_scan_returns_absolute_file_paths(docs_tree):
    found = asyncio.run(FileScanner(docs_tree).scan())

    assert all(p.is_absolute() for p in found)
    assert all(p.is_file() for p in found)


def test_scan_unsorted_returns_same_set(docs_tree):
    sorted_found = asyncio.run(FileScanner(docs_tree).scan())
    raw_found = asyncio.run(FileScanner(docs_tree, sort_paths=False).scan())

    assert sorted(raw_found) == sorted_found


def test_scan_with_custom_extension(docs_tree):
    found = asyncio.run(FileScanner(docs_tree, extension=".txt").scan())

    assert [p.name for p in found] == ["notes.txt"]


def test_scan_empty_directory(tmp_path):
    assert asyncio.run(FileScanner(tmp_path).scan()) == []


def test_scan_documentation_helper(docs_tree):
    found = asyncio.run(scan_documentation(docs_tree))
    assert len(found) == 5


def test_scan_counts_many_files(tmp_path):
    docs = tmp_path / "docs"
    for i in range(12):
        write_doc(docs, f"level{i % 3}/sub{i % 2}/doc{i}.md", f"doc {i}")
        write_doc(docs, f"level{i % 3}/asset{i}.json", "{}")

    found = asyncio.run(FileScanner(docs).scan())

    assert len(found) == 12
    assert all(p.name.endswith(".md") for p in found)


# ── Failures ───────────────────────────────────────────────────────────────

def test_missing_root_raises_directory_read_error(tmp_path):
    missing = tmp_path / "does-not-exist"

    with pytest.raises(DirectoryReadError) as exc_info:
        asyncio.run(FileScanner(missing).scan())

    assert exc_info.value.path == missing.resolve()
    assert isinstance(exc_info.value.cause, FileNotFoundError)


def test_root_that_is_a_file_raises_directory_read_error(tmp_path):
    not_a_dir = write_doc(tmp_path, "file.md", "text")

    with pytest.raises(DirectoryReadError):
        asyncio.run(FileScanner(not_a_dir).scan())


def test_unreadable_subdirectory_aborts_discovery(docs_tree):
    blocked = docs_tree / "guide" / "advanced"
    filesystem = FailingFileSystem(fail_lists=[blocked])

    with pytest.raises(DirectoryReadError) as exc_info:
        asyncio.run(FileScanner(docs_tree, filesystem=filesystem).scan())

    assert exc_info.value.path == blocked.resolve()
    assert isinstance(exc_info.value.cause, PermissionError)


# ── Symlinks ───────────────────────────────────────────────────────────────

def test_symlink_cycle_is_not_followed(tmp_path):
    docs = tmp_path / "docs"
    write_doc(docs, "index.md", "# Index")
    os.symlink(docs, docs / "loop")

    found = asyncio.run(FileScanner(docs).scan())

    assert [p.relative_to(docs).as_posix() for p in found] == ["index.md"]


def test_symlinked_directory_alias_is_not_scanned_twice(tmp_path):
    docs = tmp_path / "docs"
    write_doc(docs, "real/a.md", "# A")
    os.symlink(docs / "real", docs / "alias")

    found = asyncio.run(FileScanner(docs).scan())

    assert [p.relative_to(docs).as_posix() for p in found] == ["real/a.md"]
