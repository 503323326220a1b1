"""Artifact generation for a collected compile result.

This module resolves the requested formats to their full dependency chain
and builds each artifact once, in build order, from the shared icon list.

Key components:
- FormatOrchestrator: Builds the requested artifacts into a CompileResult
"""

from collections.abc import Callable, Iterable

from iconforge.codecs import (
    assemble_svg_font,
    svg_font_to_ttf,
    ttf_to_eot,
    ttf_to_woff,
    ttf_to_woff2,
)
from iconforge.config import IconFontOptions
from iconforge.domain import CompileResult, OutputFormat, resolve_formats
from iconforge.exceptions import FontEncodeError
from iconforge.generators import generate_css, generate_html, generate_js, generate_svg_sprite
from iconforge.utils import CompileLogger

Artifact = str | bytes

CODEC_FORMATS = frozenset(
    {
        OutputFormat.SVG_FONT,
        OutputFormat.TTF,
        OutputFormat.EOT,
        OutputFormat.WOFF,
        OutputFormat.WOFF2,
    }
)


class FormatOrchestrator:
    """Builds output artifacts from registered icons.

    Artifacts are collected first and only stored on the result once every
    requested format has been built, so a failing codec leaves no partial
    output behind.

    Example:
        orchestrator = FormatOrchestrator(options)
        orchestrator.generate(result, ["woff2", "css"])
    """

    def __init__(
        self,
        options: IconFontOptions,
        compile_logger: CompileLogger | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            options: Compile options shared by every generator
            compile_logger: Optional logger receiving artifact events
        """
        self.options = options
        self._compile_logger = compile_logger
        self._builders: dict[OutputFormat, Callable[[CompileResult, dict], Artifact]] = {
            OutputFormat.SVG_FONT: self._build_svg_font,
            OutputFormat.TTF: lambda result, built: svg_font_to_ttf(
                built[OutputFormat.SVG_FONT], self.options.ttf
            ),
            OutputFormat.EOT: lambda result, built: ttf_to_eot(built[OutputFormat.TTF]),
            OutputFormat.WOFF: lambda result, built: ttf_to_woff(built[OutputFormat.TTF]),
            OutputFormat.WOFF2: lambda result, built: ttf_to_woff2(built[OutputFormat.TTF]),
            OutputFormat.SVG: lambda result, built: generate_svg_sprite(result.icons),
            OutputFormat.JS: lambda result, built: generate_js(built[OutputFormat.SVG]),
            OutputFormat.CSS: lambda result, built: generate_css(result.icons, self.options),
            OutputFormat.HTML: lambda result, built: generate_html(result.icons, self.options),
        }

    def generate(
        self,
        result: CompileResult,
        formats: Iterable["str | OutputFormat"],
    ) -> list[OutputFormat]:
        """Build the requested formats and their dependencies.

        Args:
            result: Result holding the registered icons; receives the artifacts
            formats: Requested format names

        Returns:
            Every format that was built, in build order

        Raises:
            UnknownFormatError: If a requested format is unknown
            FontEncodeError: If a codec fails
        """
        plan = resolve_formats(formats)
        built: dict[OutputFormat, Artifact] = {}
        for fmt in plan:
            built[fmt] = self.build(fmt, result, built)

        for fmt, artifact in built.items():
            result.set_output(fmt, artifact)
            if self._compile_logger is not None:
                self._compile_logger.log_artifact(fmt.value, len(artifact))
        return plan

    def build(
        self,
        fmt: OutputFormat,
        result: CompileResult,
        built: dict[OutputFormat, Artifact],
    ) -> Artifact:
        """Build one artifact whose dependencies are already in *built*."""
        if fmt not in CODEC_FORMATS:
            return self._builders[fmt](result, built)
        try:
            return self._builders[fmt](result, built)
        except Exception as e:
            raise FontEncodeError(fmt.value, str(e) or type(e).__name__) from e

    def _build_svg_font(self, result: CompileResult, built: dict) -> str:
        options = self.options
        # An empty font has no tallest icon to scale against
        if not result.icons and not options.normalize:
            options = options.model_copy(update={"normalize": True})
        return assemble_svg_font(result.icons, options)
