"""Unit tests for the command-line interface."""

import logging
from pathlib import Path

import pytest
from conftest import SQUARE_SVG
from fontTools.ttLib import TTFont
from typer.testing import CliRunner

from iconforge import __version__
from iconforge.cli.app import app, output_file_name
from iconforge.domain import OutputFormat

runner = CliRunner()


@pytest.fixture
def manifest(tmp_path: Path) -> Path:
    (tmp_path / "icons").mkdir()
    (tmp_path / "icons" / "add.svg").write_text(SQUARE_SVG, encoding="utf-8")
    path = tmp_path / "app.iconfont"
    path.write_text('<iconfont><svg src="icons/*.svg"/></iconfont>', encoding="utf-8")
    return path


class TestOutputFileName:
    """Tests for artifact file naming."""

    def test_binary(self):
        """Test formats use their name as extension."""
        assert output_file_name("app", OutputFormat.WOFF2) == "app.woff2"

    def test_svg_font_and_sprite(self):
        """Test the two SVG artifacts get distinct names."""
        assert output_file_name("app", OutputFormat.SVG_FONT) == "app.svg"
        assert output_file_name("app", OutputFormat.SVG) == "app.sprite.svg"


@pytest.mark.usefixtures("restore_root_handlers")
class TestCLI:
    """Tests for the iconforge command."""

    def test_version(self):
        """Test --version prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_list_formats(self):
        """Test --list-formats prints every format."""
        result = runner.invoke(app, ["--list-formats"])
        assert result.exit_code == 0
        for fmt in OutputFormat:
            assert fmt.value in result.stdout

    def test_default_formats(self, manifest: Path):
        """Test the default formats are written next to the manifest."""
        result = runner.invoke(app, [str(manifest), "--quiet"])
        assert result.exit_code == 0, result.stdout
        names = ("app.svg", "app.ttf", "app.eot", "app.woff", "app.woff2", "app.css", "app.html")
        for name in names:
            assert (manifest.parent / name).is_file(), name
        font = TTFont(manifest.parent / "app.ttf")
        assert font.getBestCmap()[0xEA01] == "add"

    def test_selected_formats_and_output_dir(self, manifest: Path, tmp_path: Path):
        """Test -f and -o select artifacts and their directory."""
        out = tmp_path / "dist"
        result = runner.invoke(
            app, [str(manifest), "-f", "css", "-f", "js", "-o", str(out), "--quiet"]
        )
        assert result.exit_code == 0, result.stdout
        assert sorted(p.name for p in out.iterdir()) == ["app.css", "app.js", "app.sprite.svg"]

    def test_option_overrides(self, manifest: Path):
        """Test CLI options reach the generators."""
        result = runner.invoke(
            app,
            [str(manifest), "-f", "css", "--class-prefix", "ic", "--hash", "v1", "--quiet"],
        )
        assert result.exit_code == 0, result.stdout
        css = (manifest.parent / "app.css").read_text(encoding="utf-8")
        assert ".ic-add::before" in css
        assert "app.woff2?v=v1" in css

    def test_summary_output(self, manifest: Path):
        """Test the rich summary lists written files."""
        result = runner.invoke(app, [str(manifest), "-f", "css"])
        assert result.exit_code == 0, result.stdout
        assert "1 icons" in result.stdout
        assert "1 files written" in result.stdout
        assert "Complete" in result.stdout

    def test_missing_manifest(self, tmp_path: Path):
        """Test a missing manifest exits with an error."""
        result = runner.invoke(app, [str(tmp_path / "nope.iconfont"), "--quiet"])
        assert result.exit_code == 1
        assert "Error" in result.stdout

    def test_unknown_format(self, manifest: Path):
        """Test an unknown format exits with an error."""
        result = runner.invoke(app, [str(manifest), "-f", "otf", "--quiet"])
        assert result.exit_code == 1
        assert "otf" in result.stdout

    def test_log_file(self, manifest: Path, tmp_path: Path):
        """Test --log-file writes structured logs."""
        log_file = tmp_path / "build.log"
        result = runner.invoke(
            app, [str(manifest), "-f", "css", "--log-file", str(log_file), "--quiet"]
        )
        assert result.exit_code == 0, result.stdout
        assert "Compile complete" in log_file.read_text(encoding="utf-8")

    def test_repeated_runs_do_not_stack_handlers(self, manifest: Path):
        """Test each run replaces the console handler of the previous one."""
        for _ in range(2):
            result = runner.invoke(app, [str(manifest), "-f", "css"])
            assert result.exit_code == 0, result.stdout

        ours = [h for h in logging.getLogger().handlers if h.get_name() == "iconforge"]
        assert len(ours) == 1
