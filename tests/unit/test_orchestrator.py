"""Unit tests for artifact generation."""

from unittest.mock import Mock, patch

import pytest
from conftest import SQUARE_SVG

from iconforge.config import IconFontOptions
from iconforge.core.orchestrator import FormatOrchestrator
from iconforge.domain import CompileResult, Icon, OutputFormat
from iconforge.exceptions import FontEncodeError, UnknownFormatError


@pytest.fixture
def result() -> CompileResult:
    result = CompileResult()
    result.add_icon(
        Icon(
            icon_name="add",
            class_name="add",
            unicode=0xEA01,
            auto_unicode=True,
            title="add",
            source=SQUARE_SVG,
        )
    )
    return result


class TestFormatOrchestrator:
    """Tests for FormatOrchestrator."""

    def test_woff2_only(self, result):
        """Test woff2 builds its chain and nothing else."""
        plan = FormatOrchestrator(IconFontOptions()).generate(result, ["woff2"])
        assert plan == [OutputFormat.SVG_FONT, OutputFormat.TTF, OutputFormat.WOFF2]
        assert result.svg_font is not None
        assert result.ttf is not None
        assert result.woff2 is not None
        for attr in ("eot", "woff", "css", "html", "js", "svg"):
            assert getattr(result, attr) is None

    def test_js_builds_sprite(self, result):
        """Test js pulls in the sprite."""
        FormatOrchestrator(IconFontOptions()).generate(result, ["js"])
        assert result.svg is not None
        assert result.js is not None
        assert result.svg_font is None

    def test_text_formats(self, result):
        """Test css and html need no font binaries."""
        FormatOrchestrator(IconFontOptions(class_name_prefix="")).generate(
            result, ["css", "html"]
        )
        assert '.add::before { content: "\\ea01"; }' in result.css
        assert result.ttf is None

    def test_unknown_format(self, result):
        """Test unknown formats are rejected before building."""
        with pytest.raises(UnknownFormatError):
            FormatOrchestrator(IconFontOptions()).generate(result, ["css", "otf"])
        assert result.css is None

    def test_empty_font_forces_normalize(self):
        """Test an empty icon list still builds with normalize disabled."""
        result = CompileResult()
        FormatOrchestrator(IconFontOptions(normalize=False)).generate(result, ["ttf"])
        assert result.ttf is not None

    def test_codec_failure_is_fatal(self, result):
        """Test codec errors are wrapped and leave no partial output."""
        with patch(
            "iconforge.core.orchestrator.ttf_to_woff",
            side_effect=RuntimeError("zlib exploded"),
        ):
            with pytest.raises(FontEncodeError) as exc_info:
                FormatOrchestrator(IconFontOptions()).generate(result, ["woff", "css"])
        assert exc_info.value.format_name == "woff"
        assert "zlib exploded" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert result.svg_font is None
        assert result.ttf is None
        assert result.css is None

    def test_unknown_transform_is_codec_error(self):
        """Test unknown transform functions inside icons fail as codec errors."""
        result = CompileResult()
        result.add_icon(
            Icon(
                icon_name="rot",
                class_name="rot",
                unicode=0xEA01,
                auto_unicode=True,
                title="rot",
                source=(
                    '<svg viewBox="0 0 10 10">'
                    '<path transform="perspective(2)" d="M0 0H5V5Z"/></svg>'
                ),
            )
        )
        with pytest.raises(FontEncodeError) as exc_info:
            FormatOrchestrator(IconFontOptions()).generate(result, ["svgFont"])
        assert exc_info.value.format_name == "svgFont"
        assert "perspective" in exc_info.value.reason

    def test_rotated_icon_builds_fonts(self):
        """Test transformed icons go through every font codec."""
        result = CompileResult()
        result.add_icon(
            Icon(
                icon_name="rot",
                class_name="rot",
                unicode=0xEA01,
                auto_unicode=True,
                title="rot",
                source=(
                    '<svg viewBox="0 0 10 10"><g transform="translate(5 5)">'
                    '<path transform="rotate(45)" d="M0 0H5V5Z"/></g></svg>'
                ),
            )
        )
        FormatOrchestrator(IconFontOptions()).generate(result, ["woff2"])
        assert result.woff2 is not None

    def test_logs_artifact_sizes(self, result):
        """Test every built artifact is reported with its size."""
        compile_logger = Mock()
        FormatOrchestrator(IconFontOptions(), compile_logger).generate(result, ["js"])
        calls = [c.args for c in compile_logger.log_artifact.call_args_list]
        assert calls == [("svg", len(result.svg)), ("js", len(result.js))]
