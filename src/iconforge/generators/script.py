"""JavaScript sprite injector generation."""

import json


def quote_js_string(text: str) -> str:
    """Quote text as a JavaScript string literal safe inside ``<script>``."""
    return json.dumps(text).replace("</", "<\\/")


def generate_js(svg: str) -> str:
    """Generate a script that inserts an SVG sprite into the page.

    The script inserts the sprite at the start of ``document.body``,
    retrying every 10ms until the body exists.

    Args:
        svg: SVG sprite markup

    Returns:
        Self-invoking JavaScript function
    """
    return (
        "!function iconFontInjectSVG(){var b=document.body,d;"
        'if(b){d=document.createElement("div");'
        f"d.innerHTML={quote_js_string(svg)};"
        "while(d.firstChild)b.insertBefore(d.firstChild,b.firstChild)}"
        "else setTimeout(iconFontInjectSVG,10)}();"
    )
