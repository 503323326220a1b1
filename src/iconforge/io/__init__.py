"""I/O layer for iconforge.

This module handles everything that reads outside data: the filesystem
capability used to resolve icon sources and the XML parsing of manifests
and SVG files.

Key classes:
- FileSystem: Protocol for reading sources and expanding globs
- LocalFileSystem: FileSystem backed by the local disk
"""

from iconforge.io.filesystem import FileSystem, LocalFileSystem, expand_braces, is_glob
from iconforge.io.xml import (
    SVG_NS,
    local_name,
    parse_document,
    serialize,
    strip_namespaces,
)

__all__ = [
    "SVG_NS",
    "FileSystem",
    "LocalFileSystem",
    "expand_braces",
    "is_glob",
    "local_name",
    "parse_document",
    "serialize",
    "strip_namespaces",
]
