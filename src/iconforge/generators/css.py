"""CSS stylesheet generation."""

from collections.abc import Sequence

from iconforge.config import IconFontOptions
from iconforge.domain import Icon
from iconforge.generators.common import base_name, class_prefix, font_family, icon_class

_BASE_RULE = """\
.{family} {{
\tdisplay: inline-block;
\tfont-family: '{family}';
\tfont-size: inherit;
\tfont-weight: normal;
\tfont-style: normal;
\tfont-variant: normal;
\tline-height: 1;
\ttext-decoration: none !important;
\ttext-rendering: auto;
\ttext-transform: none;
\t-webkit-font-smoothing: antialiased;
\t-moz-osx-font-smoothing: grayscale;
\tuser-select: none;
}}"""


def font_face(options: IconFontOptions, hash_token: str) -> str:
    """Build the ``@font-face`` rule referencing every font binary.

    Args:
        options: Compile options
        hash_token: Cache-busting token appended as ``?v=``

    Returns:
        CSS rule
    """
    name = base_name(options)
    family = font_family(options)
    sources = [
        f"url('{name}.eot?#iefix&v={hash_token}') format('embedded-opentype')",
        f"url('{name}.woff2?v={hash_token}') format('woff2')",
        f"url('{name}.woff?v={hash_token}') format('woff')",
        f"url('{name}.ttf?v={hash_token}') format('truetype')",
        f"url('{name}.svg?v={hash_token}#regular') format('svg')",
    ]
    return (
        "@font-face {\n"
        f"\tfont-family: '{family}';\n"
        f"\tsrc: url('{name}.eot?v={hash_token}'); /* IE9 */\n"
        f"\tsrc: {', '.join(sources)};\n"
        "\tfont-weight: normal;\n"
        "\tfont-style: normal;\n"
        "}"
    )


def generate_css(icons: Sequence[Icon], options: IconFontOptions) -> str:
    """Generate the icon font stylesheet.

    Args:
        icons: Registered icons
        options: Compile options (``hash`` defaults to the icon count)

    Returns:
        CSS text with one ``::before`` rule per icon
    """
    hash_token = options.hash if options.hash is not None else str(len(icons))
    prefix = class_prefix(options)
    rules = [
        f'.{icon_class(icon, prefix)}::before {{ content: "\\{icon.hex_code}"; }}'
        for icon in icons
    ]
    parts = [font_face(options, hash_token), _BASE_RULE.format(family=font_family(options))]
    if rules:
        parts.append("\n".join(rules))
    return "\n".join(parts) + "\n"
