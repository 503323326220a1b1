"""TrueType encoding of SVG fonts.

Reads the ``<font>`` element produced by :mod:`iconforge.codecs.svgfont`,
converts every glyph's cubic outline to quadratic splines and builds a
TTF binary with fontTools' FontBuilder.
"""

import io
import logging
import re
import time
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from fontTools.fontBuilder import FontBuilder
from fontTools.misc.timeTools import timestampSinceEpoch
from fontTools.pens.cu2quPen import Cu2QuPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.svgLib.path import parse_path

from iconforge.config import TTFOptions
from iconforge.io import local_name, parse_document

logger = logging.getLogger(__name__)

NOTDEF = ".notdef"
DEFAULT_VERSION = "1.0"
STYLE_NAME = "Regular"

_GLYPH_NAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")
_VERSION = re.compile(r"^\s*(?:version\s*)?(\d+)(?:\.(\d+))?", re.IGNORECASE)


@dataclass
class SVGFontGlyph:
    """One ``<glyph>`` of an SVG font."""

    name: str
    unicode: str
    advance: float
    path: str


@dataclass
class SVGFontData:
    """The parts of an SVG font a TTF is built from."""

    font_id: str
    family_name: str
    units_per_em: int
    ascent: float
    descent: float
    default_advance: float
    missing_advance: float
    weight: str | None = None
    style: str | None = None
    glyphs: list[SVGFontGlyph] = field(default_factory=list)


def _float(value: str | None, default: float) -> float:
    if value is None or not value.strip():
        return default
    return float(value)


def parse_svg_font(svg_font: str) -> SVGFontData:
    """Extract font metrics and glyphs from an SVG font document.

    Args:
        svg_font: SVG font markup

    Returns:
        Parsed font data

    Raises:
        ValueError: If the document has no ``<font>`` element
    """
    root = parse_document(svg_font, "<svg font>")
    font = next(
        (el for el in root.iter() if isinstance(el.tag, str) and local_name(el.tag) == "font"),
        None,
    )
    if font is None:
        raise ValueError("SVG font has no <font> element")

    face = _child(font, "font-face")
    face_attrs = face.attrib if face is not None else {}
    units_per_em = int(round(_float(face_attrs.get("units-per-em"), 1000)))
    descent = abs(_float(face_attrs.get("descent"), 0))
    default_advance = _float(font.get("horiz-adv-x"), units_per_em)
    missing = _child(font, "missing-glyph")

    data = SVGFontData(
        font_id=font.get("id", ""),
        family_name=face_attrs.get("font-family") or font.get("id") or "iconfont",
        units_per_em=units_per_em,
        ascent=_float(face_attrs.get("ascent"), units_per_em - descent),
        descent=descent,
        default_advance=default_advance,
        missing_advance=(
            _float(missing.get("horiz-adv-x"), default_advance)
            if missing is not None
            else default_advance
        ),
        weight=face_attrs.get("font-weight"),
        style=face_attrs.get("font-style"),
    )
    for element in font:
        if not isinstance(element.tag, str) or local_name(element.tag) != "glyph":
            continue
        data.glyphs.append(
            SVGFontGlyph(
                name=element.get("glyph-name", ""),
                unicode=element.get("unicode", ""),
                advance=_float(element.get("horiz-adv-x"), default_advance),
                path=element.get("d", ""),
            )
        )
    return data


def _child(element: ET.Element, name: str) -> ET.Element | None:
    for child in element:
        if isinstance(child.tag, str) and local_name(child.tag) == name:
            return child
    return None


def _unique_glyph_name(name: str, index: int, used: set[str]) -> str:
    candidate = _GLYPH_NAME_CHARS.sub("_", name) or f"glyph{index}"
    if candidate == NOTDEF:
        candidate = f"glyph{index}"
    unique = candidate
    suffix = 1
    while unique in used:
        unique = f"{candidate}.{suffix}"
        suffix += 1
    used.add(unique)
    return unique


def _draw_glyph(path: str):
    tt_pen = TTGlyphPen(None)
    if path.strip():
        parse_path(path, Cu2QuPen(tt_pen, max_err=1.0, reverse_direction=True))
    return tt_pen.glyph()


def parse_version(version: str | None) -> tuple[float, str]:
    """Parse a "major.minor" version.

    Args:
        version: Version string, e.g. "1.2" or "Version 1.2"

    Returns:
        Tuple of (head fontRevision, name table version string)
    """
    match = _VERSION.match(version or DEFAULT_VERSION) or _VERSION.match(DEFAULT_VERSION)
    major = int(match.group(1))
    minor = match.group(2) or "0"
    return float(f"{major}.{minor}"), f"Version {major}.{minor}"


def _weight_class(weight: str | None) -> int:
    if weight is None:
        return 400
    if weight.strip().lower() == "bold":
        return 700
    try:
        return max(1, min(1000, int(float(weight))))
    except ValueError:
        return 400


def svg_font_to_ttf(svg_font: str, options: TTFOptions | None = None) -> bytes:
    """Encode an SVG font as a TrueType font.

    Args:
        svg_font: SVG font markup
        options: Name table and timestamp values

    Returns:
        TTF binary

    Raises:
        ValueError: If the SVG font or one of its glyph paths is malformed
    """
    options = options or TTFOptions()
    data = parse_svg_font(svg_font)

    glyph_order = [NOTDEF]
    glyphs = {NOTDEF: TTGlyphPen(None).glyph()}
    advances = {NOTDEF: data.missing_advance}
    cmap: dict[int, str] = {}
    used = {NOTDEF}

    for index, glyph in enumerate(data.glyphs, start=1):
        name = _unique_glyph_name(glyph.name, index, used)
        glyph_order.append(name)
        glyphs[name] = _draw_glyph(glyph.path)
        advances[name] = glyph.advance
        # ligature glyphs (multi-character unicode) are not mapped
        if len(glyph.unicode) == 1:
            cmap.setdefault(ord(glyph.unicode), name)

    timestamp = options.ts if options.ts is not None else int(time.time())
    revision, version_name = parse_version(options.version)
    family = data.family_name

    builder = FontBuilder(data.units_per_em, isTTF=True)
    builder.updateHead(
        created=timestampSinceEpoch(timestamp),
        modified=timestampSinceEpoch(timestamp),
        fontRevision=revision,
        macStyle=0b10 if data.style == "italic" else 0,
    )
    builder.setupGlyphOrder(glyph_order)
    builder.setupCharacterMap(cmap)
    builder.setupGlyf(glyphs)

    glyf = builder.font["glyf"]
    builder.setupHorizontalMetrics(
        {
            name: (int(round(advances[name])), getattr(glyf[name], "xMin", 0))
            for name in glyph_order
        }
    )

    ascent = int(round(data.ascent))
    descent = int(round(data.descent))
    builder.setupHorizontalHeader(ascent=ascent, descent=-descent)
    builder.setupOS2(
        usWeightClass=_weight_class(data.weight),
        sTypoAscender=ascent,
        sTypoDescender=-descent,
        sTypoLineGap=0,
        usWinAscent=ascent,
        usWinDescent=descent,
        fsSelection=0x01 if data.style == "italic" else 0x40,
    )

    names = {
        "familyName": family,
        "styleName": STYLE_NAME,
        "uniqueFontIdentifier": f"{family} {STYLE_NAME}",
        "fullName": family,
        "version": version_name,
        "psName": _GLYPH_NAME_CHARS.sub("", family.replace(" ", "")) or "iconfont",
    }
    if options.copyright:
        names["copyright"] = options.copyright
    if options.description:
        names["description"] = options.description
    if options.url:
        names["vendorURL"] = options.url
    builder.setupNameTable(names)
    builder.setupPost()
    builder.setupMaxp()

    buffer = io.BytesIO()
    builder.save(buffer)
    logger.debug("Encoded %d glyphs as TTF", len(data.glyphs))
    return buffer.getvalue()
