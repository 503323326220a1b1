"""Domain models for iconforge.

This module contains the domain models of one compile run. They are
independent of fonttools and of the filesystem.

Key classes:
- Icon: A registered icon with its unique identity and SVG markup
- IconSource: An icon supplied directly by a caller
- IdentifierRegistry: Allocator of unique names, classes and code points
- OutputFormat: Artifacts the compiler can produce
- CompileResult: Icons, dependencies and generated artifacts of one run
"""

from iconforge.domain.formats import (
    FORMAT_DEPENDENCIES,
    OutputFormat,
    parse_format,
    resolve_formats,
)
from iconforge.domain.icon import Icon, IconSource
from iconforge.domain.registry import (
    IdentifierRegistry,
    allocate_unicode,
    allocate_unique_string,
)
from iconforge.domain.result import CompileResult, GlobDependency

__all__: list[str] = [
    # Enums
    "OutputFormat",
    # Core types
    "CompileResult",
    "GlobDependency",
    "Icon",
    "IconSource",
    "IdentifierRegistry",
    # Functions
    "FORMAT_DEPENDENCIES",
    "allocate_unicode",
    "allocate_unique_string",
    "parse_format",
    "resolve_formats",
]
