"""Compile result aggregate.

A :class:`CompileResult` is created at the start of one compile call, filled
by the collector (icons, dependencies) and the orchestrator (artifacts), and
handed back to the caller.
"""

from dataclasses import dataclass, field

from iconforge.domain.formats import OutputFormat
from iconforge.domain.icon import Icon
from iconforge.domain.registry import IdentifierRegistry

_OUTPUT_ATTRIBUTES: dict[OutputFormat, str] = {
    OutputFormat.SVG_FONT: "svg_font",
    OutputFormat.TTF: "ttf",
    OutputFormat.EOT: "eot",
    OutputFormat.WOFF: "woff",
    OutputFormat.WOFF2: "woff2",
    OutputFormat.SVG: "svg",
    OutputFormat.JS: "js",
    OutputFormat.CSS: "css",
    OutputFormat.HTML: "html",
}


@dataclass(frozen=True)
class GlobDependency:
    """A glob pattern whose matches feed the compile.

    Attributes:
        glob: Pattern as written in the manifest
        cwd: Directory the pattern is resolved against
    """

    glob: str
    cwd: str


@dataclass
class CompileResult:
    """Everything one compile run produced.

    Attributes:
        registry: Identifier registry of this run
        icons: Registered icons in output order
        dependencies: Files read during the compile
        glob_dependencies: Glob patterns expanded during the compile
        svg_font: SVG font container
        ttf: TrueType binary
        eot: Embedded OpenType binary
        woff: WOFF binary
        woff2: WOFF2 binary
        svg: SVG sprite
        js: Sprite injection script
        css: Stylesheet
        html: Preview page
    """

    registry: IdentifierRegistry = field(default_factory=IdentifierRegistry)
    icons: list[Icon] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    glob_dependencies: list[GlobDependency] = field(default_factory=list)
    svg_font: str | None = None
    ttf: bytes | None = None
    eot: bytes | None = None
    woff: bytes | None = None
    woff2: bytes | None = None
    svg: str | None = None
    js: str | None = None
    css: str | None = None
    html: str | None = None

    @property
    def icon_names(self) -> set[str]:
        """Get the icon names used so far."""
        return self.registry.used_names

    @property
    def class_names(self) -> set[str]:
        """Get the CSS class names used so far."""
        return self.registry.used_class_names

    @property
    def unicodes(self) -> set[int]:
        """Get the code points used so far."""
        return self.registry.used_unicodes

    @property
    def start_unicode(self) -> int:
        """Get the cursor automatic code point allocation continues from."""
        return self.registry.next_unicode

    def add_icon(self, icon: Icon) -> None:
        """Append a registered icon."""
        self.icons.append(icon)

    def get_output(self, fmt: OutputFormat) -> str | bytes | None:
        """Get the artifact generated for a format.

        Args:
            fmt: Output format

        Returns:
            Artifact, or None if the format was not generated
        """
        return getattr(self, _OUTPUT_ATTRIBUTES[fmt])

    def set_output(self, fmt: OutputFormat, value: str | bytes) -> None:
        """Store the artifact generated for a format."""
        setattr(self, _OUTPUT_ATTRIBUTES[fmt], value)

    def outputs(self) -> dict[OutputFormat, str | bytes]:
        """Get every generated artifact keyed by format.

        Returns:
            Generated artifacts in build order
        """
        return {
            fmt: value
            for fmt in OutputFormat
            if (value := self.get_output(fmt)) is not None
        }
