"""Font codecs.

This module converts icons into font binaries:

- SVG font assembly from registered icons
- TTF encoding of SVG fonts
- EOT, WOFF and WOFF2 encoding of TTF binaries
"""

from iconforge.codecs.eot import ttf_to_eot
from iconforge.codecs.svgfont import FontMetrics, assemble_svg_font
from iconforge.codecs.ttf import parse_svg_font, svg_font_to_ttf
from iconforge.codecs.woff import ttf_to_woff, ttf_to_woff2

__all__ = [
    "FontMetrics",
    "assemble_svg_font",
    "parse_svg_font",
    "svg_font_to_ttf",
    "ttf_to_eot",
    "ttf_to_woff",
    "ttf_to_woff2",
]
