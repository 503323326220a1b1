"""SVG font assembly.

Places every icon in the em square and writes an SVG 1.1 ``<font>``
document, the container the TTF codec reads its glyphs from.

Each icon is drawn through fontTools pens: the outline is recorded in SVG
user space, scaled to the font height, flipped to a y-up coordinate system
with the baseline ``descent`` units above the bottom of the icon, optionally
centered in its advance width, and rounded to the configured precision.
"""

import logging
import math
import re
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from dataclasses import dataclass
from html import escape

from fontTools.misc.transform import Transform
from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.roundingPen import RoundingPen
from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.pens.transformPen import TransformPen
from fontTools.svgLib.path import parse_path
from fontTools.svgLib.path.shapes import PathBuilder

from iconforge.config import IconFontOptions
from iconforge.domain import Icon
from iconforge.io import local_name, parse_document

logger = logging.getLogger(__name__)

DEFAULT_FONT_NAME = "iconfont"
DEFAULT_FONT_HEIGHT = 1024.0
DEFAULT_ROUND = 10e12
DEFAULT_DESCENT = 150.0

_NUMBER = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_TRANSFORM = re.compile(r"([A-Za-z]+)\s*\(([^)]*)\)")
_NOT_RENDERED = frozenset(
    {"defs", "clipPath", "mask", "marker", "pattern", "symbol", "title", "desc", "metadata"}
)


@dataclass(frozen=True)
class FontMetrics:
    """Resolved font-wide settings for glyph placement.

    Attributes:
        font_name: Font family name
        font_id: Font element id
        font_height: Units per em
        ascent: Distance from baseline to top
        descent: Distance from baseline to bottom (positive)
        round: Coordinates are rounded to multiples of 1/round
        normalize: Scale every icon to font_height
        center_horizontally: Center glyphs in their advance width
        fixed_width: Give every glyph the widest advance
    """

    font_name: str
    font_id: str
    font_height: float
    ascent: float
    descent: float
    round: float
    normalize: bool
    center_horizontally: bool
    fixed_width: bool

    @classmethod
    def from_options(cls, options: IconFontOptions) -> "FontMetrics":
        """Apply defaults to compile options.

        Args:
            options: Compile options

        Returns:
            FontMetrics with every field resolved
        """
        font_name = options.font_name or DEFAULT_FONT_NAME
        font_height = options.font_height or DEFAULT_FONT_HEIGHT
        descent = options.descent if options.descent is not None else DEFAULT_DESCENT
        return cls(
            font_name=font_name,
            font_id=options.font_id or font_name,
            font_height=font_height,
            ascent=options.ascent if options.ascent is not None else font_height - descent,
            descent=descent,
            round=options.round or DEFAULT_ROUND,
            normalize=True if options.normalize is None else options.normalize,
            center_horizontally=(
                True if options.center_horizontally is None else options.center_horizontally
            ),
            fixed_width=bool(options.fixed_width),
        )


@dataclass
class GlyphOutline:
    """An icon outline in SVG user space, relative to its viewBox origin.

    Attributes:
        icon: Icon the outline belongs to
        recording: Recorded pen operations
        width: Viewport width
        height: Viewport height
    """

    icon: Icon
    recording: RecordingPen
    width: float
    height: float


def format_number(value: float) -> str:
    """Format a coordinate compactly ("12", "12.5", "-0.25")."""
    if value == int(value):
        return str(int(value))
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _parse_length(value: str | None) -> float | None:
    if value is None or value.strip().endswith("%"):
        return None
    match = _NUMBER.match(value.strip())
    return float(match.group(0)) if match else None


def _viewport(root: ET.Element) -> tuple[float, float, float, float] | None:
    view_box = root.get("viewBox")
    if view_box:
        parts = [float(p) for p in _NUMBER.findall(view_box)]
        if len(parts) == 4:
            return parts[0], parts[1], parts[2], parts[3]
    width = _parse_length(root.get("width"))
    height = _parse_length(root.get("height"))
    if width is not None and height is not None:
        return 0.0, 0.0, width, height
    return None


def _transform_function(name: str, args: list[float]) -> Transform:
    if name == "matrix" and len(args) == 6:
        return Transform(*args)
    if name == "translate" and len(args) in (1, 2):
        return Transform().translate(args[0], args[1] if len(args) == 2 else 0)
    if name == "scale" and len(args) in (1, 2):
        return Transform().scale(args[0], args[1] if len(args) == 2 else args[0])
    if name == "rotate" and len(args) in (1, 3):
        cx, cy = args[1:] if len(args) == 3 else (0.0, 0.0)
        return Transform().translate(cx, cy).rotate(math.radians(args[0])).translate(-cx, -cy)
    if name == "skewX" and len(args) == 1:
        return Transform().skew(math.radians(args[0]), 0)
    if name == "skewY" and len(args) == 1:
        return Transform().skew(0, math.radians(args[0]))
    raise ValueError(f"Unsupported transform {name}({', '.join(map(format_number, args))})")


def parse_transform(value: str | None) -> Transform:
    """Parse an SVG ``transform`` attribute.

    Supports ``matrix``, ``translate``, ``scale``, ``rotate`` (with an
    optional center), ``skewX`` and ``skewY``. As in SVG, the rightmost
    function applies to the element first.

    Args:
        value: Attribute value (None or empty for the identity)

    Returns:
        Composed transformation

    Raises:
        ValueError: If a function is unknown or has the wrong argument count
    """
    transform = Transform()
    if not value:
        return transform
    for name, raw_args in _TRANSFORM.findall(value):
        args = [float(arg) for arg in _NUMBER.findall(raw_args)]
        transform = transform.transform(_transform_function(name, args))
    return transform


def draw_element(element: ET.Element, pen, transform: Transform | None = None) -> None:
    """Draw an SVG element and its descendants onto *pen*.

    Each shape is drawn through the transforms of all its ancestors and its
    own ``transform``. Subtrees that are only referenced (``<defs>``,
    ``<clipPath>``, ...) are skipped.

    Args:
        element: Element to draw
        pen: fontTools pen receiving the outlines
        transform: Transformation inherited from the ancestors
    """
    if not isinstance(element.tag, str):
        return
    tag = local_name(element.tag)
    if tag in _NOT_RENDERED:
        return
    transform = (transform or Transform()).transform(parse_transform(element.get("transform")))

    # PathBuilder only understands matrix() transforms, so it never sees one
    shape = ET.Element(tag, {k: v for k, v in element.attrib.items() if k != "transform"})
    builder = PathBuilder()
    if builder.add_path_from_element(shape):
        shape_pen = TransformPen(pen, transform)
        for path in builder.paths:
            parse_path(path, shape_pen)

    for child in element:
        draw_element(child, pen, transform)


def load_outline(icon: Icon) -> GlyphOutline:
    """Record an icon's outline.

    The viewport is taken from ``viewBox``, else ``width``/``height``, else
    the bounds of the drawing itself.

    Args:
        icon: Icon to draw

    Returns:
        Outline positioned at the viewport origin
    """
    root = parse_document(icon.source, icon.path or icon.icon_name)
    viewport = _viewport(root)
    drawing = RecordingPen()
    draw_element(root, drawing)

    if viewport is None:
        bounds_pen = BoundsPen(None)
        drawing.replay(bounds_pen)
        if bounds_pen.bounds is None:
            viewport = (0.0, 0.0, 0.0, 0.0)
        else:
            x_min, y_min, x_max, y_max = bounds_pen.bounds
            viewport = (x_min, y_min, x_max - x_min, y_max - y_min)

    x, y, width, height = viewport
    recording = RecordingPen()
    drawing.replay(TransformPen(recording, (1, 0, 0, 1, -x, -y)))
    return GlyphOutline(icon=icon, recording=recording, width=width, height=height)


def _glyph_path(
    outline: GlyphOutline,
    scale: float,
    advance: float,
    metrics: FontMetrics,
) -> str:
    # y-down viewport -> y-up em square with the bottom edge at -descent
    matrix = [scale, 0, 0, -scale, 0, outline.height * scale - metrics.descent]

    if metrics.center_horizontally:
        bounds_pen = BoundsPen(None)
        outline.recording.replay(TransformPen(bounds_pen, tuple(matrix)))
        if bounds_pen.bounds is not None:
            x_min, _, x_max, _ = bounds_pen.bounds
            matrix[4] = (advance - (x_max - x_min)) / 2 - x_min

    precision = metrics.round
    path_pen = SVGPathPen(None, ntos=format_number)
    rounding_pen = RoundingPen(path_pen, roundFunc=lambda v: round(v * precision) / precision)
    outline.recording.replay(TransformPen(rounding_pen, tuple(matrix)))
    return path_pen.getCommands()


def assemble_svg_font(
    icons: Sequence[Icon],
    options: IconFontOptions,
) -> str:
    """Build an SVG font from registered icons.

    Args:
        icons: Icons in output order
        options: Compile options (``prepend_unicode`` prefixes glyph names
            with their code point)

    Returns:
        SVG font document

    Raises:
        ValueError: If icons cannot be placed (e.g. no icons without
            normalization, since there is no tallest icon to scale against)
    """
    metrics = FontMetrics.from_options(options)
    outlines = [load_outline(icon) for icon in icons]

    if metrics.normalize:
        scales = [
            metrics.font_height / o.height if o.height else 1.0 for o in outlines
        ]
    else:
        tallest = max(o.height for o in outlines)
        scale = metrics.font_height / tallest if tallest else 1.0
        scales = [scale] * len(outlines)

    advances = [o.width * s for o, s in zip(outlines, scales)]
    font_advance = max(advances, default=metrics.font_height)
    if metrics.fixed_width:
        advances = [font_advance] * len(advances)

    lines = [
        '<?xml version="1.0" standalone="no"?>',
        '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
        '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd" >',
        '<svg xmlns="http://www.w3.org/2000/svg">',
    ]
    if options.metadata:
        lines.append(f"<metadata>{escape(options.metadata, quote=False)}</metadata>")

    face_attrs = [
        f'font-family="{escape(metrics.font_name)}"',
        f'units-per-em="{format_number(metrics.font_height)}"',
        f'ascent="{format_number(metrics.ascent)}"',
        f'descent="{format_number(-metrics.descent)}"',
    ]
    if options.font_weight is not None:
        face_attrs.append(f'font-weight="{escape(str(options.font_weight))}"')
    if options.font_style:
        face_attrs.append(f'font-style="{escape(options.font_style)}"')

    lines += [
        "<defs>",
        f'  <font id="{escape(metrics.font_id)}" horiz-adv-x="{format_number(font_advance)}">',
        f"    <font-face {' '.join(face_attrs)} />",
        '    <missing-glyph horiz-adv-x="0" />',
    ]
    for outline, scale, advance in zip(outlines, scales, advances):
        icon = outline.icon
        glyph_name = icon.icon_name
        if options.prepend_unicode:
            glyph_name = f"u{icon.unicode:04X}-{glyph_name}"
        path = _glyph_path(outline, scale, advance, metrics)
        logger.debug("Placed glyph %s scale=%.4f advance=%.2f", glyph_name, scale, advance)
        lines += [
            f'    <glyph glyph-name="{escape(glyph_name)}"',
            f'      unicode="&#x{icon.unicode:X};"',
            f'      horiz-adv-x="{format_number(advance)}" d="{path}" />',
        ]
    lines += ["  </font>", "</defs>", "</svg>"]
    return "\n".join(lines) + "\n"

