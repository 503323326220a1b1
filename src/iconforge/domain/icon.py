"""Icon records and explicit icon sources.

This module defines the icon domain model: the resolved identity of one
icon (name, CSS class, code point) together with its SVG markup.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from os import PathLike, fspath
from typing import Any


@dataclass(frozen=True)
class Icon:
    """A registered icon.

    Attributes:
        icon_name: Unique glyph name
        class_name: Unique CSS class name (without prefix)
        unicode: Unique code point selecting the glyph
        auto_unicode: True when the code point was assigned automatically
        title: Human readable title
        source: Serialized SVG markup of the icon
        path: File the icon was read from (None for inline manifest icons)
    """

    icon_name: str
    class_name: str
    unicode: int
    auto_unicode: bool
    title: str
    source: str
    path: str | None = None

    @property
    def char(self) -> str:
        """Get the character selecting this glyph."""
        return chr(self.unicode)

    @property
    def hex_code(self) -> str:
        """Get the code point as lowercase hex without prefix (e.g. "ea01")."""
        return f"{self.unicode:x}"

    def __str__(self) -> str:
        return self.source

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the icon
        """
        return {
            "icon_name": self.icon_name,
            "class_name": self.class_name,
            "unicode": self.unicode,
            "auto_unicode": self.auto_unicode,
            "title": self.title,
            "source": self.source,
            "path": self.path,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Icon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of an icon

        Returns:
            Icon instance
        """
        return cls(
            icon_name=data["icon_name"],
            class_name=data["class_name"],
            unicode=data["unicode"],
            auto_unicode=data["auto_unicode"],
            title=data["title"],
            source=data["source"],
            path=data.get("path"),
        )


@dataclass(frozen=True)
class IconSource:
    """An icon handed to the compiler directly instead of through a manifest.

    Any identity field left as None is derived from the file the same way
    manifest icons are. Supplied values still go through the registry, so a
    duplicate name is disambiguated rather than rejected.

    Attributes:
        path: Icon file path (used for the default name and as a dependency)
        content: SVG markup; read from ``path`` when None
        icon_name: Preferred glyph name
        class_name: Preferred CSS class name
        unicode: Preferred code point
        title: Preferred title
    """

    path: str
    content: str | None = None
    icon_name: str | None = None
    class_name: str | None = None
    unicode: int | None = None
    title: str | None = None

    @classmethod
    def coerce(cls, item: "str | PathLike[str] | IconSource | Mapping[str, Any]") -> "IconSource":
        """Normalize a path, mapping or IconSource into an IconSource.

        Args:
            item: Source list entry

        Returns:
            IconSource instance
        """
        if isinstance(item, IconSource):
            return item
        if isinstance(item, Mapping):
            return cls(
                path=fspath(item["path"]),
                content=item.get("content"),
                icon_name=item.get("icon_name"),
                class_name=item.get("class_name"),
                unicode=item.get("unicode"),
                title=item.get("title"),
            )
        return cls(path=fspath(item))
