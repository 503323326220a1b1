"""Manifest attribute parsing.

The root ``<iconfont>`` element of a manifest configures the compile through
string attributes. This module turns those strings into an
:class:`IconFontOptions` instance.
"""

import math
from collections.abc import Mapping
from pathlib import PurePath

from iconforge.config.settings import IconFontOptions

# Older manifests spell the rounding attribute this way; it is still honoured
# when ``round`` is absent.
LEGACY_ROUND_ATTRIBUTE = "foroundntHeight"


def parse_boolean(value: str | None) -> bool | None:
    """Parse a manifest boolean.

    Only the literal string ``"false"`` is false; any other present value is
    true.

    Args:
        value: Raw attribute value

    Returns:
        Parsed boolean, or None when the attribute is absent
    """
    if value is None:
        return None
    return value != "false"


def parse_number(value: str | None) -> float | None:
    """Parse a manifest number.

    Accepts decimal (``"12.5"``), hexadecimal (``"0xEA01"``) and percentage
    (``"50%"`` -> ``0.5``) forms. Leading numeric prefixes are honoured the
    way ``parseFloat`` does, so ``"12px"`` is ``12``.

    Args:
        value: Raw attribute value

    Returns:
        Parsed number, NaN for unparseable text, or None when absent
    """
    if value is None:
        return None
    value = value.strip()
    if value.startswith("0x"):
        try:
            return float(int(value[2:], 16))
        except ValueError:
            return math.nan
    if value.endswith("%"):
        return _parse_float_prefix(value[:-1]) / 100
    return _parse_float_prefix(value)


def _parse_float_prefix(text: str) -> float:
    """Parse the longest leading float literal in *text*."""
    for end in range(len(text), 0, -1):
        try:
            return float(text[:end])
        except ValueError:
            continue
    return math.nan


def _finite(value: float | None) -> float | None:
    if value is None or not math.isfinite(value):
        return None
    return value


def options_from_attributes(attrs: Mapping[str, str], path: str) -> IconFontOptions:
    """Build compile options from manifest root attributes.

    Args:
        attrs: Attributes of the manifest root element
        path: Manifest path; its stem is the default font name and the path
            itself is the default output file name

    Returns:
        Options with every attribute present in the manifest set
    """
    values: dict[str, object] = {
        "font_name": attrs.get("fontName", PurePath(path).stem),
        "file_name": path,
    }

    for key, attr in (
        ("font_id", "fontId"),
        ("font_style", "fontStyle"),
        ("font_weight", "fontWeight"),
        ("metadata", "metadata"),
        ("class_name_prefix", "classNamePrefix"),
        ("hash", "hash"),
    ):
        if attr in attrs:
            values[key] = attrs[attr]

    for key, attr in (
        ("fixed_width", "fixedWidth"),
        ("center_horizontally", "centerHorizontally"),
        ("normalize", "normalize"),
        ("prepend_unicode", "prependUnicode"),
    ):
        parsed = parse_boolean(attrs.get(attr))
        if parsed is not None:
            values[key] = parsed

    round_attr = attrs.get("round", attrs.get(LEGACY_ROUND_ATTRIBUTE))
    for key, raw in (
        ("font_height", attrs.get("fontHeight")),
        ("round", round_attr),
        ("ascent", attrs.get("ascent")),
        ("descent", attrs.get("descent")),
    ):
        number = _finite(parse_number(raw))
        if number is not None:
            values[key] = number

    start_unicode = _finite(parse_number(attrs.get("startUnicode")))
    if start_unicode is not None:
        values["start_unicode"] = int(start_unicode)

    return IconFontOptions(**values)
