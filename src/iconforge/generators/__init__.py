"""Text artifact generators.

This module renders the registered icons as text artifacts:

- CSS stylesheet with an ``@font-face`` rule and one class per icon
- HTML preview page
- SVG sprite with one ``<symbol>`` per icon
- JavaScript injector for the sprite
"""

from iconforge.generators.common import base_name, class_prefix, font_family, icon_class
from iconforge.generators.css import generate_css
from iconforge.generators.html import generate_html
from iconforge.generators.script import generate_js, quote_js_string
from iconforge.generators.sprite import generate_svg_sprite

__all__ = [
    "base_name",
    "class_prefix",
    "font_family",
    "generate_css",
    "generate_html",
    "generate_js",
    "generate_svg_sprite",
    "icon_class",
    "quote_js_string",
]
