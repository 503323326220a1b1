"""Configuration management for iconforge.

This module provides configuration management using Pydantic models.
Options can come from manifest attributes, the CLI, or API callers.

Key classes:
- IconFontOptions: Compile options (font metrics, naming, CSS prefix)
- TTFOptions: TTF name table settings
- LoggingConfig: Logging settings
"""

from iconforge.config.attributes import (
    options_from_attributes,
    parse_boolean,
    parse_number,
)
from iconforge.config.settings import (
    DEFAULT_START_UNICODE,
    IconFontOptions,
    LoggingConfig,
    TTFOptions,
)

__all__ = [
    "DEFAULT_START_UNICODE",
    "IconFontOptions",
    "LoggingConfig",
    "TTFOptions",
    "options_from_attributes",
    "parse_boolean",
    "parse_number",
]
