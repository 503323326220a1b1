"""Output formats and their build dependencies.

Each format names the formats it is built from. Requesting a format
activates its whole dependency chain; :func:`resolve_formats` computes that
closure and returns it in build order.
"""

from collections.abc import Iterable
from enum import Enum

from iconforge.exceptions import UnknownFormatError


class OutputFormat(str, Enum):
    """Artifacts the compiler can produce."""

    SVG_FONT = "svgFont"
    TTF = "ttf"
    EOT = "eot"
    WOFF = "woff"
    WOFF2 = "woff2"
    SVG = "svg"
    JS = "js"
    CSS = "css"
    HTML = "html"

    @property
    def is_binary(self) -> bool:
        """Check if the artifact is a byte buffer rather than text."""
        return self in BINARY_FORMATS

    @property
    def requires(self) -> tuple["OutputFormat", ...]:
        """Get the formats this one is built from."""
        return FORMAT_DEPENDENCIES[self]


FORMAT_DEPENDENCIES: dict[OutputFormat, tuple[OutputFormat, ...]] = {
    OutputFormat.SVG_FONT: (),
    OutputFormat.TTF: (OutputFormat.SVG_FONT,),
    OutputFormat.EOT: (OutputFormat.TTF,),
    OutputFormat.WOFF: (OutputFormat.TTF,),
    OutputFormat.WOFF2: (OutputFormat.TTF,),
    OutputFormat.SVG: (),
    OutputFormat.JS: (OutputFormat.SVG,),
    OutputFormat.CSS: (),
    OutputFormat.HTML: (),
}

BINARY_FORMATS = frozenset(
    {OutputFormat.TTF, OutputFormat.EOT, OutputFormat.WOFF, OutputFormat.WOFF2}
)

# Enum order is a valid topological order of FORMAT_DEPENDENCIES.
BUILD_ORDER: tuple[OutputFormat, ...] = tuple(OutputFormat)


def parse_format(name: "str | OutputFormat") -> OutputFormat:
    """Convert a symbolic format name to an OutputFormat.

    Args:
        name: Format name such as "woff2" or "svgFont"

    Returns:
        Matching OutputFormat

    Raises:
        UnknownFormatError: If the name is not a known format
    """
    try:
        return OutputFormat(name)
    except ValueError:
        raise UnknownFormatError(str(name)) from None


def resolve_formats(requested: Iterable["str | OutputFormat"]) -> list[OutputFormat]:
    """Compute every format that must be built for a request.

    Args:
        requested: Requested format names (duplicates allowed)

    Returns:
        Requested formats plus their transitive dependencies, each once, in
        build order

    Raises:
        UnknownFormatError: If a requested name is not a known format
    """
    active: set[OutputFormat] = set()
    pending = [parse_format(name) for name in requested]
    while pending:
        fmt = pending.pop()
        if fmt in active:
            continue
        active.add(fmt)
        pending.extend(fmt.requires)
    return [fmt for fmt in BUILD_ORDER if fmt in active]
