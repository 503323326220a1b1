"""SVG sprite generation."""

from collections.abc import Sequence

from iconforge.domain import Icon
from iconforge.io import parse_document, serialize, strip_namespaces

SPRITE_OPEN = '<svg style="position:absolute;width:0;height:0;overflow:hidden" aria-hidden="true">'
SPRITE_CLOSE = "</svg>"


def to_symbol(icon: Icon) -> str:
    """Convert an icon to a ``<symbol>`` element.

    The root ``<svg>`` is renamed to ``<symbol>``; its ``id`` defaults to
    the icon's class name.

    Args:
        icon: Icon to convert

    Returns:
        Serialized symbol without namespace prefixes
    """
    root = strip_namespaces(parse_document(icon.source, icon.path or icon.icon_name))
    root.tag = "symbol"
    if not root.get("id"):
        root.set("id", icon.class_name)
    return serialize(root)


def generate_svg_sprite(icons: Sequence[Icon]) -> str:
    """Generate an SVG sprite with one ``<symbol>`` per icon.

    Args:
        icons: Registered icons

    Returns:
        Hidden ``<svg>`` wrapping every symbol
    """
    return "\n".join([SPRITE_OPEN, *(to_symbol(icon) for icon in icons), SPRITE_CLOSE])
