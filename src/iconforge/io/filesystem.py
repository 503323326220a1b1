"""Filesystem capability used to resolve icon sources.

The compiler never touches the disk directly; it goes through an object
implementing :class:`FileSystem`. :class:`LocalFileSystem` is the default,
and tests or build tools can pass their own implementation (an in-memory
tree, a virtual filesystem, ...).
"""

import asyncio
import re
from pathlib import Path
from typing import Protocol, runtime_checkable

_GLOB_CHARS = re.compile(r"[*?\[{]")


def is_glob(pattern: str) -> bool:
    """Check if a source attribute is a glob pattern rather than a path.

    Args:
        pattern: Source attribute value

    Returns:
        True if the value contains glob syntax
    """
    return _GLOB_CHARS.search(pattern) is not None


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternatives, which pathlib globbing lacks.

    Args:
        pattern: Glob pattern, possibly with brace groups

    Returns:
        Patterns without brace groups, in expansion order
    """
    match = re.search(r"\{([^{}]*)\}", pattern)
    if match is None:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(f"{head}{option}{tail}"))
    return expanded


@runtime_checkable
class FileSystem(Protocol):
    """Read access to icon sources."""

    async def read_text(self, path: str) -> str:
        """Read a UTF-8 text file."""
        ...

    async def glob(self, pattern: str, cwd: str) -> list[str]:
        """List files matching *pattern* relative to *cwd*."""
        ...


class LocalFileSystem:
    """FileSystem backed by the local disk.

    Blocking calls run in a worker thread so collecting many files does
    not stall the event loop.

    Example:
        fs = LocalFileSystem()
        paths = await fs.glob("icons/*.svg", "/project")
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the filesystem.

        Args:
            encoding: Encoding used to decode text files
        """
        self._encoding = encoding

    async def read_text(self, path: str) -> str:
        """Read a text file.

        Args:
            path: File path

        Returns:
            Decoded file content

        Raises:
            OSError: If the file cannot be read
        """
        return await asyncio.to_thread(Path(path).read_text, encoding=self._encoding)

    async def glob(self, pattern: str, cwd: str) -> list[str]:
        """List files matching a glob pattern.

        Matches are returned sorted so repeated builds visit icons in the
        same order.

        Args:
            pattern: Glob pattern (``**`` and ``{a,b}`` supported)
            cwd: Directory relative patterns are resolved against

        Returns:
            Matching file paths
        """
        return await asyncio.to_thread(self._glob_sync, pattern, cwd)

    def _glob_sync(self, pattern: str, cwd: str) -> list[str]:
        base = Path(cwd)
        matches: list[str] = []
        seen: set[str] = set()
        for expanded in expand_braces(pattern):
            if Path(expanded).is_absolute():
                anchor = Path(Path(expanded).anchor)
                expanded = str(Path(expanded).relative_to(anchor))
                root = anchor
            else:
                root = base
            for match in sorted(root.glob(expanded)):
                path = str(match)
                if match.is_file() and path not in seen:
                    seen.add(path)
                    matches.append(path)
        return matches
