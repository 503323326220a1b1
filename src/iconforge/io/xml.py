"""XML helpers for manifests and SVG icons.

Thin wrappers around ElementTree that report parse failures as
:class:`ManifestParseError` and serialize SVG without ``ns0:`` prefixes.
"""

import copy
import xml.etree.ElementTree as ET

from iconforge.exceptions import ManifestParseError

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"


def parse_document(text: str, path: str) -> ET.Element:
    """Parse an XML document.

    Args:
        text: Document source
        path: Path used in error messages

    Returns:
        Root element

    Raises:
        ManifestParseError: If the document is not well-formed
    """
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        raise ManifestParseError(path, str(e)) from e


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` part of an ElementTree tag."""
    return tag.split("}", 1)[1] if tag.startswith("{") else tag


def serialize(element: ET.Element) -> str:
    """Serialize an element (and its subtree) to markup.

    SVG elements are written unprefixed under a default ``xmlns`` and xlink
    attributes keep their ``xlink:`` prefix. ElementTree's global prefix
    registry is left untouched. The element's tail text is not included.
    """
    clone = copy.deepcopy(element)
    clone.tail = None
    svg_tag = f"{{{SVG_NS}}}"
    xlink_attr = f"{{{XLINK_NS}}}"

    declarations = {}
    if isinstance(clone.tag, str) and clone.tag.startswith(svg_tag):
        declarations["xmlns"] = SVG_NS
    for node in clone.iter():
        if isinstance(node.tag, str) and node.tag.startswith(svg_tag):
            node.tag = node.tag[len(svg_tag) :]
        for key in [key for key in node.attrib if key.startswith(xlink_attr)]:
            node.set(f"xlink:{key[len(xlink_attr) :]}", node.attrib.pop(key))
            declarations["xmlns:xlink"] = XLINK_NS

    if declarations:
        attributes = dict(clone.attrib)
        clone.attrib.clear()
        clone.attrib.update(declarations)
        clone.attrib.update(attributes)
    return ET.tostring(clone, encoding="unicode")


def strip_namespaces(element: ET.Element) -> ET.Element:
    """Return a deep copy of *element* with namespace-free tag names.

    Used for markup that is inlined into HTML, where the SVG namespace is
    implied.
    """
    clone = copy.deepcopy(element)
    for node in clone.iter():
        if isinstance(node.tag, str):
            node.tag = local_name(node.tag)
    return clone
