"""WOFF and WOFF2 encoding of TTF binaries."""

import io

from fontTools.ttLib import TTFont


def _reflavor(ttf: bytes, flavor: str) -> bytes:
    font = TTFont(io.BytesIO(ttf))
    font.flavor = flavor
    buffer = io.BytesIO()
    font.save(buffer)
    return buffer.getvalue()


def ttf_to_woff(ttf: bytes) -> bytes:
    """Compress a TTF binary as WOFF (zlib)."""
    return _reflavor(ttf, "woff")


def ttf_to_woff2(ttf: bytes) -> bytes:
    """Compress a TTF binary as WOFF2.

    Requires the ``brotli`` package.
    """
    return _reflavor(ttf, "woff2")
