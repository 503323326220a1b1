"""Configuration settings for iconforge."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_START_UNICODE = 0xEA01


class TTFOptions(BaseModel):
    """Name table and header values written into the TTF binary."""

    model_config = ConfigDict(frozen=True)

    copyright: str | None = Field(default=None, description="Copyright notice")
    description: str | None = Field(default=None, description="Font description")
    ts: int | None = Field(
        default=None,
        ge=0,
        description="Creation time as a Unix timestamp (seconds)",
    )
    url: str | None = Field(default=None, description="Vendor or designer URL")
    version: str | None = Field(default=None, description="Font version (x.y)")


class IconFontOptions(BaseModel):
    """Options for one compile run.

    Unset fields fall back to the defaults of the step that consumes them,
    so an options object can be layered over manifest attributes without
    clobbering values the caller never mentioned.
    """

    model_config = ConfigDict(frozen=True)

    font_name: str | None = Field(default=None, description="Font family name")
    font_id: str | None = Field(default=None, description="Font id (defaults to font_name)")
    font_style: str | None = Field(default=None, description="CSS font style, e.g. 'italic'")
    font_weight: str | int | None = Field(default=None, description="CSS font weight")
    fixed_width: bool | None = Field(
        default=None,
        description="Give every glyph the advance of the widest icon",
    )
    center_horizontally: bool | None = Field(
        default=None,
        description="Center each glyph inside its advance width",
    )
    normalize: bool | None = Field(
        default=None,
        description="Scale every icon to the full font height",
    )
    font_height: float | None = Field(default=None, gt=0, description="Units per em")
    round: float | None = Field(
        default=None,
        gt=0,
        description="Path precision; coordinates are rounded to 1/round",
    )
    ascent: float | None = Field(default=None, description="Font ascent")
    descent: float | None = Field(default=None, description="Font descent (positive)")
    metadata: str | None = Field(default=None, description="SVG font metadata text")
    start_unicode: int | None = Field(
        default=None,
        ge=0,
        le=0x10FFFF,
        description="First code point handed out to icons without one",
    )
    prepend_unicode: bool | None = Field(
        default=None,
        description="Prefix glyph names with their code point (uXXXX-name)",
    )
    class_name_prefix: str | None = Field(
        default=None,
        description="CSS class prefix (defaults to the output base name)",
    )
    ttf: TTFOptions = Field(default_factory=TTFOptions)
    file_name: str | None = Field(default=None, description="Output file name")
    hash: str | None = Field(default=None, description="Cache-busting token for URLs")

    def merged(self, overrides: "IconFontOptions | None") -> "IconFontOptions":
        """Return a copy with the explicitly-set fields of *overrides* applied.

        Args:
            overrides: Options whose set fields win over this instance

        Returns:
            New options instance
        """
        if overrides is None:
            return self
        update: dict[str, Any] = overrides.model_dump(exclude_unset=True)
        if "ttf" in update:
            update["ttf"] = self.ttf.model_copy(
                update=overrides.ttf.model_dump(exclude_unset=True)
            )
        return self.model_copy(update=update)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
