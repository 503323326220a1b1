"""iconforge - Compile SVG icons into icon fonts.

iconforge reads an ``.iconfont`` manifest (or a plain list of SVG files),
gives every icon a unique name, CSS class and private-use code point, and
generates the requested artifacts: an SVG font, TTF/EOT/WOFF/WOFF2 binaries,
a stylesheet, an HTML preview page, an SVG sprite and a sprite injection
script.

Example:
    $ iconforge icons.iconfont -f woff2 -f css

This will create icons.woff2 and icons.css next to the manifest.
"""

__version__ = "0.1.0"

import logging

from iconforge.core.compiler import (
    DEFAULT_FORMATS,
    compile_from_manifest,
    compile_from_sources,
)

# Library events stay silent until the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_FORMATS",
    "__version__",
    "compile_from_manifest",
    "compile_from_sources",
]
