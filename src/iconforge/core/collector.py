"""Icon collection from manifests and explicit source lists.

The collector walks the sources of one compile run in order, reads and
parses each SVG through the filesystem capability, and registers one
:class:`Icon` per accepted ``<svg>`` element. Identity allocation happens
synchronously right after each read, so icon order (and therefore every
automatically assigned code point) follows source order, never I/O timing.
"""

import logging
import os
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Mapping
from pathlib import PurePath
from typing import Any

from iconforge.domain import CompileResult, GlobDependency, Icon, IconSource
from iconforge.exceptions import SourceNotFoundError
from iconforge.io import FileSystem, is_glob, local_name, parse_document, serialize
from iconforge.utils import CompileLogger

logger = logging.getLogger(__name__)

MANIFEST_ROOT = "iconfont"
ICON_TAG = "svg"


def parse_unicode_attribute(value: str) -> int | None:
    """Parse a ``unicode`` attribute.

    ``0x``-prefixed values are hexadecimal code points; anything else names
    the glyph by its first character.

    Args:
        value: Raw attribute value

    Returns:
        Code point, or None when the value is unusable (the registry then
        falls back to its default start)
    """
    if value.startswith("0x"):
        try:
            return int(value[2:], 16)
        except ValueError:
            return None
    if not value:
        return None
    return ord(value[0])


def resolve_source_path(manifest_path: str, src: str) -> str:
    """Resolve a ``src`` attribute against the manifest's directory."""
    base = os.path.dirname(manifest_path)
    return os.path.normpath(os.path.join(base, src))


class IconCollector:
    """Collects icons into a CompileResult.

    Example:
        result = CompileResult()
        collector = IconCollector(result, LocalFileSystem())
        await collector.collect_manifest(root, "icons/app.iconfont")
    """

    def __init__(
        self,
        result: CompileResult,
        fs: FileSystem,
        compile_logger: CompileLogger | None = None,
    ) -> None:
        """Initialize the collector.

        Args:
            result: Result receiving icons and dependencies
            fs: Filesystem used to read icon files and expand globs
            compile_logger: Optional logger receiving collection events
        """
        self._result = result
        self._fs = fs
        self._compile_logger = compile_logger

    async def collect_manifest(self, root: ET.Element, path: str) -> None:
        """Collect every icon a parsed manifest declares.

        Args:
            root: Manifest root element
            path: Manifest path (relative sources resolve against its directory)

        Raises:
            SourceNotFoundError: If a referenced file or glob cannot be read
            ManifestParseError: If a referenced icon file is malformed
        """
        if local_name(root.tag) != MANIFEST_ROOT:
            self.collect_element(root, path)
            return

        for child in root:
            if not isinstance(child.tag, str) or local_name(child.tag) != ICON_TAG:
                continue
            src = child.get("src")
            if src is None:
                self.collect_element(child, path)
            elif is_glob(src):
                await self.collect_glob(src, os.path.dirname(path))
            else:
                await self.collect_file(resolve_source_path(path, src))

    async def collect_glob(self, pattern: str, cwd: str) -> None:
        """Collect every file a glob pattern matches.

        The pattern is recorded once as a glob dependency; each match is
        recorded as a path dependency by :meth:`collect_file`.

        Args:
            pattern: Glob pattern
            cwd: Directory the pattern is resolved against
        """
        self._result.glob_dependencies.append(GlobDependency(glob=pattern, cwd=cwd))
        try:
            matches = await self._fs.glob(pattern, cwd)
        except OSError as e:
            raise SourceNotFoundError(os.path.join(cwd, pattern), str(e)) from e
        if self._compile_logger is not None:
            self._compile_logger.log_glob_expanded(pattern, cwd, len(matches))
        for match in matches:
            await self.collect_file(match)

    async def collect_file(self, path: str) -> None:
        """Read, parse and register one icon file.

        Args:
            path: Icon file path
        """
        content = await self._read(path)
        root = parse_document(content, path)
        self.collect_element(root, path)

    async def collect_sources(
        self,
        sources: Iterable["str | os.PathLike[str] | IconSource | Mapping[str, Any]"],
    ) -> None:
        """Collect icons from an explicit source list.

        Plain paths are parsed like manifest-referenced files, so their
        ``id``/``class``/``unicode``/``title`` attributes apply. IconSource
        items take their identity from their own fields and their markup is
        used as-is.

        Args:
            sources: Paths, IconSource objects or mappings with IconSource keys
        """
        for item in sources:
            if isinstance(item, (str, os.PathLike)):
                await self.collect_file(os.fspath(item))
                continue
            source = IconSource.coerce(item)
            if source.content is None:
                content = await self._read(source.path)
            else:
                self._result.dependencies.append(source.path)
                content = source.content
            self.register(
                source=content,
                path=source.path,
                icon_name=source.icon_name,
                class_name=source.class_name,
                unicode=source.unicode,
                title=source.title,
            )

    def collect_element(self, element: ET.Element, path: str) -> Icon | None:
        """Register an ``<svg>`` element as an icon.

        Args:
            element: Parsed SVG element
            path: File the element came from (its stem is the default name)

        Returns:
            The registered icon, or None if the element is not ``<svg>``
        """
        if local_name(element.tag) != ICON_TAG:
            logger.debug("Ignoring non-svg root <%s> in %s", element.tag, path)
            return None

        unicode_attr = element.get("unicode")
        return self.register(
            source=serialize(element),
            path=path,
            icon_name=element.get("id") or element.get("name"),
            class_name=element.get("class"),
            unicode=None if unicode_attr is None else parse_unicode_attribute(unicode_attr),
            explicit_unicode=unicode_attr is not None,
            title=element.get("title"),
        )

    def register(
        self,
        source: str,
        path: str,
        icon_name: str | None = None,
        class_name: str | None = None,
        unicode: int | None = None,
        title: str | None = None,
        explicit_unicode: bool | None = None,
    ) -> Icon:
        """Allocate an identity for an icon and append it to the result.

        Args:
            source: SVG markup of the icon
            path: Source path; its stem is the default icon name
            icon_name: Preferred name
            class_name: Preferred CSS class (defaults to the allocated name)
            unicode: Preferred code point
            title: Title (defaults to the allocated name)
            explicit_unicode: Whether the icon declared a code point; when
                None, any non-None *unicode* counts as declared

        Returns:
            The registered icon
        """
        icon = self.build_icon(
            source=source,
            path=path,
            icon_name=icon_name,
            class_name=class_name,
            unicode=unicode,
            title=title,
            explicit_unicode=unicode is not None if explicit_unicode is None else explicit_unicode,
        )
        self._result.add_icon(icon)
        if self._compile_logger is not None:
            self._compile_logger.log_icon_registered(
                icon.icon_name, icon.class_name, icon.unicode, icon.auto_unicode
            )
        return icon

    def build_icon(
        self,
        source: str,
        path: str,
        icon_name: str | None,
        class_name: str | None,
        unicode: int | None,
        title: str | None,
        explicit_unicode: bool,
    ) -> Icon:
        """Build an Icon whose identifiers are reserved in the registry."""
        registry = self._result.registry
        name = registry.allocate_name(icon_name if icon_name is not None else PurePath(path).stem)
        css_class = registry.allocate_class_name(class_name if class_name is not None else name)
        if explicit_unicode:
            code = registry.allocate_explicit_unicode(unicode)
        else:
            code = registry.allocate_auto_unicode()
        return Icon(
            icon_name=name,
            class_name=css_class,
            unicode=code,
            auto_unicode=not explicit_unicode,
            title=title if title is not None else name,
            source=source,
            path=path,
        )

    async def _read(self, path: str) -> str:
        self._result.dependencies.append(path)
        if self._compile_logger is not None:
            self._compile_logger.log_dependency(path)
        try:
            return await self._fs.read_text(path)
        except OSError as e:
            raise SourceNotFoundError(path, str(e)) from e
