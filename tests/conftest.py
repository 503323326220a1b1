"""Shared fixtures for iconforge tests."""

import fnmatch
import logging
import posixpath

import pytest

from iconforge.io import expand_braces

SQUARE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
    '<path d="M2 2H22V22H2Z"/></svg>'
)
WIDE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="48" height="24">'
    '<rect x="0" y="0" width="48" height="24"/></svg>'
)
CIRCLE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
    '<circle cx="12" cy="12" r="10"/></svg>'
)


class MemoryFileSystem:
    """In-memory FileSystem keyed by posix paths."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files = dict(files or {})
        self.reads: list[str] = []
        self.globs: list[tuple[str, str]] = []

    async def read_text(self, path: str) -> str:
        self.reads.append(path)
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(2, "No such file or directory", path) from None

    async def glob(self, pattern: str, cwd: str) -> list[str]:
        self.globs.append((pattern, cwd))
        matches: list[str] = []
        for expanded in expand_braces(pattern):
            full = posixpath.normpath(posixpath.join(cwd, expanded))
            for path in sorted(self.files):
                if fnmatch.fnmatchcase(path, full) and path not in matches:
                    matches.append(path)
        return matches


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """Filesystem holding a few icons under icons/."""
    return MemoryFileSystem(
        {
            "icons/add.svg": SQUARE_SVG,
            "icons/remove.svg": CIRCLE_SVG,
            "icons/wide.svg": WIDE_SVG,
        }
    )


@pytest.fixture
def restore_root_handlers():
    """Remove handlers configure_logging adds to the root logger."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
