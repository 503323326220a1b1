"""Unit tests for the async compile entry points."""

import asyncio
from unittest.mock import Mock

import pytest
from conftest import SQUARE_SVG, MemoryFileSystem

from iconforge import DEFAULT_FORMATS, compile_from_manifest, compile_from_sources
from iconforge.config import IconFontOptions
from iconforge.domain import IconSource
from iconforge.exceptions import ManifestParseError, SourceNotFoundError, UnknownFormatError

MANIFEST = """\
<iconfont fontName="MyIcons" classNamePrefix="mi" startUnicode="0xE000">
    <svg src="icons/add.svg"/>
    <svg src="icons/*.svg"/>
    <svg name="inline" viewBox="0 0 10 10"><path d="M0 0H10V10Z"/></svg>
</iconfont>
"""


class TestCompileFromManifest:
    """Tests for compile_from_manifest."""

    def test_default_formats(self):
        """Test the default format list."""
        assert DEFAULT_FORMATS == ("eot", "ttf", "woff", "woff2", "css", "html")

    def test_manifest_attributes_apply(self, memory_fs):
        """Test root attributes configure naming and code points."""
        result = asyncio.run(
            compile_from_manifest(MANIFEST, "app.iconfont", formats=["css"], fs=memory_fs)
        )
        assert [icon.icon_name for icon in result.icons] == [
            "add",
            "add-2",
            "remove",
            "wide",
            "inline",
        ]
        assert [icon.unicode for icon in result.icons] == [
            0xE000,
            0xE001,
            0xE002,
            0xE003,
            0xE004,
        ]
        assert ".mi-add::before" in result.css
        assert "url('app.woff2?v=5')" in result.css
        assert result.start_unicode == 0xE004

    def test_caller_options_win(self, memory_fs):
        """Test caller options override manifest attributes."""
        result = asyncio.run(
            compile_from_manifest(
                MANIFEST,
                "app.iconfont",
                formats=["css"],
                options=IconFontOptions(class_name_prefix="", hash="h"),
                fs=memory_fs,
            )
        )
        assert ".add::before" in result.css
        assert "?v=h" in result.css
        assert result.icons[0].unicode == 0xE000

    def test_dependencies(self, memory_fs):
        """Test files and globs are recorded."""
        result = asyncio.run(
            compile_from_manifest(MANIFEST, "app.iconfont", formats=[], fs=memory_fs)
        )
        assert result.dependencies == [
            "icons/add.svg",
            "icons/add.svg",
            "icons/remove.svg",
            "icons/wide.svg",
        ]
        assert [g.glob for g in result.glob_dependencies] == ["icons/*.svg"]

    def test_deterministic(self, memory_fs):
        """Test compiling twice gives identical artifacts and identities."""
        formats = ["svgFont", "css", "html", "js"]
        first = asyncio.run(
            compile_from_manifest(MANIFEST, "app.iconfont", formats, fs=memory_fs)
        )
        second = asyncio.run(
            compile_from_manifest(MANIFEST, "app.iconfont", formats, fs=memory_fs)
        )
        assert first.icons == second.icons
        assert first.svg_font == second.svg_font
        assert first.css == second.css
        assert first.html == second.html
        assert first.js == second.js

    def test_malformed_manifest(self):
        """Test malformed manifests raise ManifestParseError."""
        with pytest.raises(ManifestParseError) as exc_info:
            asyncio.run(compile_from_manifest("<iconfont>", "app.iconfont", fs=Mock()))
        assert exc_info.value.path == "app.iconfont"

    def test_missing_source(self):
        """Test missing sources raise SourceNotFoundError."""
        with pytest.raises(SourceNotFoundError):
            asyncio.run(
                compile_from_manifest(
                    '<iconfont><svg src="nope.svg"/></iconfont>',
                    "app.iconfont",
                    fs=MemoryFileSystem(),
                )
            )

    def test_unknown_format_before_reads(self):
        """Test unknown formats fail before any source is read."""
        fs = MemoryFileSystem({"a.svg": SQUARE_SVG})
        with pytest.raises(UnknownFormatError):
            asyncio.run(
                compile_from_manifest(
                    '<iconfont><svg src="a.svg"/></iconfont>', "app.iconfont", ["otf"], fs=fs
                )
            )
        assert fs.reads == []

    def test_empty_manifest_builds_fonts(self):
        """Test a manifest without icons still produces every default artifact."""
        result = asyncio.run(
            compile_from_manifest(
                '<iconfont normalize="false"/>', "empty.iconfont", fs=MemoryFileSystem()
            )
        )
        assert result.icons == []
        for attr in ("eot", "ttf", "woff", "woff2", "css", "html"):
            assert getattr(result, attr)

    def test_logger_receives_events(self, memory_fs):
        """Test a caller supplied logger receives compile events."""
        logger = Mock()
        asyncio.run(
            compile_from_manifest(
                MANIFEST, "app.iconfont", ["css"], fs=memory_fs, logger=logger
            )
        )
        messages = [c.args[0] for c in logger.info.call_args_list]
        assert messages[0] == "Compiling icon font"
        assert "Generated artifact" in messages
        assert messages[-1] == "Compile complete"

    def test_failure_is_logged(self):
        """Test fatal errors are logged before propagating."""
        logger = Mock()
        with pytest.raises(SourceNotFoundError):
            asyncio.run(
                compile_from_manifest(
                    '<iconfont><svg src="nope.svg"/></iconfont>',
                    "app.iconfont",
                    fs=MemoryFileSystem(),
                    logger=logger,
                )
            )
        logger.error.assert_called_once()
        assert logger.error.call_args.kwargs["error_type"] == "SourceNotFoundError"


class TestCompileFromSources:
    """Tests for compile_from_sources."""

    def test_mixed_sources(self, memory_fs):
        """Test paths, IconSource objects and mappings."""
        result = asyncio.run(
            compile_from_sources(
                [
                    "icons/add.svg",
                    IconSource(path="icons/remove.svg", unicode=0x2D),
                    {"path": "virtual/star.svg", "content": SQUARE_SVG, "icon_name": "star"},
                ],
                formats=["css"],
                options=IconFontOptions(font_name="set"),
                fs=memory_fs,
            )
        )
        assert [icon.icon_name for icon in result.icons] == ["add", "remove", "star"]
        assert [icon.unicode for icon in result.icons] == [0xEA01, 0x2D, 0xEA02]
        assert result.dependencies == ["icons/add.svg", "icons/remove.svg", "virtual/star.svg"]
        assert ".set-star::before" in result.css

    def test_start_unicode_option(self, memory_fs):
        """Test start_unicode seeds automatic allocation."""
        result = asyncio.run(
            compile_from_sources(
                ["icons/add.svg", "icons/remove.svg"],
                formats=[],
                options=IconFontOptions(start_unicode=0xF000),
                fs=memory_fs,
            )
        )
        assert [icon.unicode for icon in result.icons] == [0xF000, 0xF001]

    def test_accepts_generator(self, memory_fs):
        """Test sources may be any iterable."""
        result = asyncio.run(
            compile_from_sources(
                (p for p in ["icons/add.svg"]), formats=["svgFont"], fs=memory_fs
            )
        )
        assert result.svg_font is not None

    def test_concurrent_compiles_are_isolated(self, memory_fs):
        """Test two compiles in one event loop do not share identities."""

        async def run_both():
            return await asyncio.gather(
                compile_from_sources(["icons/add.svg"], formats=[], fs=memory_fs),
                compile_from_sources(["icons/add.svg"], formats=[], fs=memory_fs),
            )

        first, second = asyncio.run(run_both())
        assert first.icons[0].icon_name == second.icons[0].icon_name == "add"
        assert first.icons[0].unicode == second.icons[0].unicode == 0xEA01
