"""Embedded OpenType (EOT) encoding.

An EOT file is an uncompressed TTF prefixed with a version 0x00020001
header that repeats a few OS/2, head and name table values.
"""

import io
import struct

from fontTools.ttLib import TTFont

EOT_VERSION = 0x00020001
EOT_MAGIC = 0x504C
DEFAULT_CHARSET = 1

# EOTSize..Reserved4 plus Padding1
_HEADER = struct.Struct("<IIII10sBBIHHIIIIIIIIIIIH")

NAME_FAMILY = 1
NAME_STYLE = 2
NAME_FULL = 4
NAME_VERSION = 5


def _name(font: TTFont, name_id: int) -> bytes:
    record = font["name"].getName(name_id, 3, 1, 0x409)
    if record is None:
        record = font["name"].getName(name_id, 1, 0, 0)
    text = record.toUnicode() if record is not None else ""
    return text.encode("utf-16-le")


def _name_entry(value: bytes) -> bytes:
    return struct.pack("<H", len(value)) + value


def ttf_to_eot(ttf: bytes) -> bytes:
    """Wrap a TTF binary in an EOT header.

    Args:
        ttf: TrueType font binary

    Returns:
        EOT binary

    Raises:
        ValueError: If *ttf* lacks the OS/2, head or name table
    """
    font = TTFont(io.BytesIO(ttf))
    for tag in ("OS/2", "head", "name"):
        if tag not in font:
            raise ValueError(f"TTF has no '{tag}' table")
    os2 = font["OS/2"]
    head = font["head"]

    panose = os2.panose
    panose_bytes = bytes(
        [
            panose.bFamilyType,
            panose.bSerifStyle,
            panose.bWeight,
            panose.bProportion,
            panose.bContrast,
            panose.bStrokeVariation,
            panose.bArmStyle,
            panose.bLetterForm,
            panose.bMidline,
            panose.bXHeight,
        ]
    )

    # Padding2..Padding4 sit between the names
    names = struct.pack("<H", 0).join(
        _name_entry(_name(font, name_id))
        for name_id in (NAME_FAMILY, NAME_STYLE, NAME_VERSION, NAME_FULL)
    )
    # Padding5 + RootStringSize
    trailer = struct.pack("<HH", 0, 0)

    size = _HEADER.size + len(names) + len(trailer) + len(ttf)
    header = _HEADER.pack(
        size,
        len(ttf),
        EOT_VERSION,
        0,
        panose_bytes,
        DEFAULT_CHARSET,
        1 if os2.fsSelection & 0x01 else 0,
        os2.usWeightClass,
        os2.fsType,
        EOT_MAGIC,
        os2.ulUnicodeRange1,
        os2.ulUnicodeRange2,
        os2.ulUnicodeRange3,
        os2.ulUnicodeRange4,
        getattr(os2, "ulCodePageRange1", 0),
        getattr(os2, "ulCodePageRange2", 0),
        head.checkSumAdjustment,
        0,
        0,
        0,
        0,
        0,
    )
    return header + names + trailer + ttf
