"""Naming shared by the text generators."""

from pathlib import PurePath

from iconforge.config import IconFontOptions
from iconforge.domain import Icon

DEFAULT_BASE_NAME = "icon"


def base_name(options: IconFontOptions) -> str:
    """Get the output base name.

    The stem of ``file_name`` when set, else the stem of ``font_name``,
    else ``"icon"``.
    """
    name = options.file_name or options.font_name or DEFAULT_BASE_NAME
    return PurePath(name).stem or DEFAULT_BASE_NAME


def class_prefix(options: IconFontOptions) -> str:
    """Get the CSS class prefix (the base name unless set, may be empty)."""
    if options.class_name_prefix is not None:
        return options.class_name_prefix
    return base_name(options)


def font_family(options: IconFontOptions) -> str:
    """Get the CSS font family and base class name.

    This is the class prefix, or the base name when the prefix is empty.
    """
    return class_prefix(options) or base_name(options)


def icon_class(icon: Icon, prefix: str) -> str:
    """Get the full CSS class of an icon ("prefix-name", or "name" without prefix)."""
    return f"{prefix}-{icon.class_name}" if prefix else icon.class_name
