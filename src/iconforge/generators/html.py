"""HTML preview page generation.

The page lists every icon with its glyph, title, class name and code point.
Clicking an entry copies its class name (or its character, for icons with a
declared code point) to the clipboard.
"""

from collections.abc import Sequence
from html import escape

from iconforge.config import IconFontOptions
from iconforge.domain import Icon
from iconforge.generators.common import base_name, class_prefix, font_family, icon_class

_STYLE = """\
\t<style>
\t\t.icon-demo-container {
\t\t\tmargin: 0 auto;
\t\t\tpadding: 0;
\t\t\tdisplay: flex;
\t\t\tflex-wrap: wrap;
\t\t\tfont-weight: normal;
\t\t\tline-height: 1.5;
\t\t}
\t\t.icon-demo-container li {
\t\t\tlist-style: none;
\t\t\ttext-align: center;
\t\t\tmargin: 0 .5em 1.5em;
\t\t\twidth: 6em;
\t\t\tborder: 1px solid transparent;
\t\t\tborder-radius: 3px;
\t\t\tcursor: pointer;
\t\t\tword-break: break-all;
\t\t}
\t\t.icon-demo-container li:hover {
\t\t\tborder-color: #009b7d;
\t\t}
\t\t.icon-demo-container i {
\t\t\tdisplay: block;
\t\t\tfont-size: 1.5em;
\t\t\tfont-style: normal;
\t\t\tuser-select: text;
\t\t\tline-height: 2;
\t\t}
\t\t.icon-demo-container small {
\t\t\tdisplay: block;
\t\t\tfont-size: .8em;
\t\t\tfont-family: monospace;
\t\t\topacity: .8;
\t\t}
\t</style>"""

_SCRIPT = """\
\t<script>
\t\tfunction iconDemoCopy(elem, event) {
\t\t\tif (event) event.stopPropagation()
\t\t\tvar text = elem.getAttribute("data-copy")
\t\t\tcopyText(text, function (success) {
\t\t\t\tshowTip((success ? "Copied " : "Copy manually: ") + text, success ? 2000 : 4000)
\t\t\t})
\t\t\tfunction copyText(text, callback) {
\t\t\t\tif (navigator.clipboard) {
\t\t\t\t\treturn navigator.clipboard.writeText(text).then(function () { callback(true) }, function () { callback(false) })
\t\t\t\t}
\t\t\t\tvar textArea = document.body.appendChild(document.createElement("textarea"))
\t\t\t\ttextArea.value = text
\t\t\t\ttry {
\t\t\t\t\ttextArea.select()
\t\t\t\t\tcallback(document.execCommand("Copy"))
\t\t\t\t} catch (err) {
\t\t\t\t\tcallback(false)
\t\t\t\t} finally {
\t\t\t\t\tdocument.body.removeChild(textArea)
\t\t\t\t}
\t\t\t}
\t\t\tfunction showTip(text, timeout) {
\t\t\t\tvar tip = document.body.appendChild(document.createElement("div"))
\t\t\t\ttip.textContent = text
\t\t\t\ttip.style = "position: fixed; left: 50%; top: 2em; transform: translate(-50%, 0); z-index: 65530; background: #fff; border-radius: 4px; padding: .5em 1em; box-shadow: 0 4px 12px rgba(0, 0, 0, 0.15); line-height: 2;"
\t\t\t\tsetTimeout(function () { document.body.removeChild(tip) }, timeout)
\t\t\t}
\t\t}
\t</script>"""


def render_item(icon: Icon, prefix: str, family: str) -> str:
    """Render the ``<li>`` entry of one icon.

    Args:
        icon: Icon to render
        prefix: CSS class prefix
        family: Base class carrying the font family

    Returns:
        HTML fragment
    """
    full_class = icon_class(icon, prefix)
    entity = f"&#x{icon.hex_code};"
    item_copy = full_class if icon.auto_unicode else icon.char
    code_copy = entity if icon.auto_unicode else icon.char
    code_label = f"U+{icon.unicode:04X}"
    if not icon.auto_unicode:
        code_label += escape(f"({icon.char})")

    lines = [
        f'\t\t<li onclick="iconDemoCopy(this)" data-copy="{escape(item_copy)}"'
        f' title="Click to copy {escape(item_copy)}">',
        f'\t\t\t<i class="{escape(family)}">{entity}</i>',
    ]
    if icon.title and icon.title != icon.class_name:
        lines.append(f"\t\t\t<div>{escape(icon.title)}</div>")
    lines += [
        f'\t\t\t<div onclick="iconDemoCopy(this, event)" data-copy="{escape(full_class)}"'
        f' title="Click to copy {escape(full_class)}">{escape(icon.class_name)}</div>',
        f'\t\t\t<small onclick="iconDemoCopy(this, event)" data-copy="{escape(code_copy)}"'
        f' title="Click to copy {escape(code_copy)}">{code_label}</small>',
        "\t\t</li>",
    ]
    return "\n".join(lines)


def generate_html(icons: Sequence[Icon], options: IconFontOptions) -> str:
    """Generate the HTML preview page.

    Args:
        icons: Registered icons
        options: Compile options

    Returns:
        HTML fragment linking the generated stylesheet
    """
    prefix = class_prefix(options)
    family = font_family(options)
    items = [render_item(icon, prefix, family) for icon in icons]
    return "\n".join(
        [
            f'<link rel="stylesheet" href="{escape(base_name(options))}.css">',
            "<div>",
            _STYLE,
            '\t<ul class="icon-demo-container">',
            *items,
            "\t</ul>",
            _SCRIPT,
            "</div>",
        ]
    ) + "\n"
