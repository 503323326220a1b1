"""End-to-end test that compiles a manifest from disk and inspects the fonts."""

import asyncio
import io
import struct
from pathlib import Path

import pytest
from conftest import CIRCLE_SVG, SQUARE_SVG
from fontTools.ttLib import TTFont

from iconforge import compile_from_manifest, compile_from_sources
from iconforge.config import IconFontOptions, TTFOptions
from iconforge.exceptions import FontEncodeError

MANIFEST = """\
<iconfont fontName="Demo" classNamePrefix="demo">
    <svg src="icons/{add,remove}.svg"/>
    <svg src="extra/wide.svg"/>
</iconfont>
"""

WIDE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="48" height="24" '
    'unicode="0xF001" class="stretch">'
    '<rect x="0" y="0" width="48" height="24"/></svg>'
)

ALL_FORMATS = ["svgFont", "ttf", "eot", "woff", "woff2", "svg", "js", "css", "html"]


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Icon project laid out on disk."""
    (tmp_path / "icons").mkdir()
    (tmp_path / "extra").mkdir()
    (tmp_path / "icons" / "add.svg").write_text(SQUARE_SVG, encoding="utf-8")
    (tmp_path / "icons" / "remove.svg").write_text(CIRCLE_SVG, encoding="utf-8")
    (tmp_path / "extra" / "wide.svg").write_text(WIDE_SVG, encoding="utf-8")
    manifest = tmp_path / "demo.iconfont"
    manifest.write_text(MANIFEST, encoding="utf-8")
    return manifest


def compile_project(manifest: Path, formats=ALL_FORMATS):
    return asyncio.run(
        compile_from_manifest(
            manifest.read_text(encoding="utf-8"),
            str(manifest),
            formats=formats,
            options=IconFontOptions(ttf=TTFOptions(version="2.1", copyright="(c) Demo")),
        )
    )


class TestManifestCompile:
    """Compiles a manifest with every output format."""

    def test_icons_and_dependencies(self, project: Path):
        """Test icons are collected from disk in manifest order."""
        result = compile_project(project)

        assert [icon.icon_name for icon in result.icons] == ["add", "remove", "wide"]
        assert [icon.class_name for icon in result.icons] == ["add", "remove", "stretch"]
        assert [icon.unicode for icon in result.icons] == [0xEA01, 0xEA02, 0xF001]
        assert result.icons[2].auto_unicode is False
        assert len(result.dependencies) == 3
        assert len(result.glob_dependencies) == 1
        assert result.glob_dependencies[0].cwd == str(project.parent)

    def test_every_format_generated(self, project: Path):
        """Test each requested format is present on the result."""
        result = compile_project(project)
        assert sorted(fmt.value for fmt in result.outputs()) == sorted(ALL_FORMATS)

    def test_ttf_tables(self, project: Path):
        """Test the TTF carries the glyphs, names and version."""
        result = compile_project(project)
        font = TTFont(io.BytesIO(result.ttf))

        cmap = font.getBestCmap()
        assert cmap[0xEA01] == "add"
        assert cmap[0xEA02] == "remove"
        assert cmap[0xF001] == "wide"
        assert font["name"].getDebugName(1) == "Demo"
        assert font["name"].getDebugName(0) == "(c) Demo"
        assert font["head"].fontRevision == pytest.approx(2.1, abs=1e-3)

        glyf = font["glyf"]
        assert glyf["add"].numberOfContours == 1
        assert glyf["remove"].numberOfContours == 1
        # The circle is drawn with quadratic curves, so it has off-curve points
        assert any(flag & 0x01 == 0 for flag in glyf["remove"].flags)
        for name in ("add", "remove", "wide"):
            assert font["hmtx"][name][0] > 0

    def test_wide_icon_is_wider(self, project: Path):
        """Test a 2:1 icon gets twice the advance of a square one."""
        result = compile_project(project)
        font = TTFont(io.BytesIO(result.ttf))

        square_advance = font["hmtx"]["add"][0]
        wide_advance = font["hmtx"]["wide"][0]
        assert wide_advance == pytest.approx(2 * square_advance, abs=2)

    def test_web_fonts_wrap_the_ttf(self, project: Path):
        """Test WOFF, WOFF2 and EOT decode to the same glyph set."""
        result = compile_project(project)

        woff = TTFont(io.BytesIO(result.woff))
        woff2 = TTFont(io.BytesIO(result.woff2))
        assert woff.flavor == "woff"
        assert woff2.flavor == "woff2"
        assert woff.getGlyphOrder() == woff2.getGlyphOrder()
        assert set(woff.getBestCmap()) == {0xEA01, 0xEA02, 0xF001}

        (eot_size, font_data_size) = struct.unpack_from("<II", result.eot)
        assert eot_size == len(result.eot)
        assert font_data_size == len(result.ttf)
        assert result.eot.endswith(result.ttf)

    def test_text_artifacts(self, project: Path):
        """Test stylesheet, preview, sprite and script reference the icons."""
        result = compile_project(project)

        assert "font-family: 'demo';" in result.css
        assert '.demo-stretch::before { content: "\\f001"; }' in result.css
        assert 'href="demo.css"' in result.html
        assert 'id="stretch"' in result.svg
        assert result.svg.count("<symbol") == 3
        assert "iconFontInjectSVG" in result.js

    def test_transformed_icon_matches_plain(self, project: Path):
        """Test a group-transformed icon compiles to the same glyph as plain coordinates."""
        plain = TTFont(io.BytesIO(compile_project(project, ["ttf"]).ttf))
        (project.parent / "icons" / "add.svg").write_text(
            '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
            '<g transform="translate(2 2)"><path transform="scale(2)" d="M0 0H10V10H0Z"/></g>'
            "</svg>",
            encoding="utf-8",
        )
        transformed = TTFont(io.BytesIO(compile_project(project, ["ttf"]).ttf))

        assert list(transformed["glyf"]["add"].coordinates) == list(
            plain["glyf"]["add"].coordinates
        )
        assert transformed["hmtx"]["add"] == plain["hmtx"]["add"]

    def test_unknown_transform_fails(self, project: Path):
        """Test an outline the font codec cannot read fails the compile."""
        (project.parent / "icons" / "add.svg").write_text(
            '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
            '<path transform="perspective(45)" d="M2 2H22V22H2Z"/></svg>',
            encoding="utf-8",
        )
        with pytest.raises(FontEncodeError) as exc_info:
            compile_project(project, ["woff2"])
        assert exc_info.value.format_name == "svgFont"

        # Text artifacts never draw outlines
        result = compile_project(project, ["css"])
        assert result.css is not None


class TestSourcesCompile:
    """Compiles an explicit source list from disk."""

    def test_paths_and_overrides(self, tmp_path: Path):
        """Test plain paths and mappings compile together."""
        add = tmp_path / "add.svg"
        add.write_text(SQUARE_SVG, encoding="utf-8")
        remove = tmp_path / "remove.svg"
        remove.write_text(CIRCLE_SVG, encoding="utf-8")

        result = asyncio.run(
            compile_from_sources(
                [add, {"path": str(remove), "class_name": "minus", "unicode": 0xF100}],
                formats=["ttf", "css"],
                options=IconFontOptions(font_name="set", class_name_prefix=""),
            )
        )

        assert [icon.class_name for icon in result.icons] == ["add", "minus"]
        assert '.minus::before { content: "\\f100"; }' in result.css
        cmap = TTFont(io.BytesIO(result.ttf)).getBestCmap()
        assert cmap == {0xEA01: "add", 0xF100: "remove"}
