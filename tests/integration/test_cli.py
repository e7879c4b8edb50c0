"""Integration tests for the command-line interface."""

import json

from typer.testing import CliRunner

from icon_font_generator import __version__
from icon_font_generator.cli.app import app, expand_globs, parse_types

runner = CliRunner()


class TestCli:
    """Tests for the icon-font-generator command."""

    def test_version(self):
        """Test the version flag."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_generate_from_glob(self, icon_paths, output_dir):
        """Test a run driven by a glob pattern."""
        pattern = str(icon_paths[0].parent / "*.svg")

        result = runner.invoke(app, [pattern, "-o", str(output_dir), "--types", "svg,ttf", "-s"])

        assert result.exit_code == 0, result.output
        names = sorted(path.name for path in output_dir.iterdir())
        assert names == ["icons.css", "icons.html", "icons.json", "icons.svg", "icons.ttf"]
        codepoints = json.loads((output_dir / "icons.json").read_text())
        assert list(codepoints) == ["arrow-left", "home", "user"]

    def test_reports_progress(self, icon_paths, output_dir):
        """Test that a non-silent run lists generated files."""
        result = runner.invoke(
            app,
            [str(icon_paths[0]), "-o", str(output_dir), "--types", "svg", "--no-html"],
        )

        assert result.exit_code == 0, result.output
        assert "Generated" in result.output
        assert "Done" in result.output
        assert not (output_dir / "icons.html").exists()

    def test_options_forwarded(self, icon_paths, output_dir):
        """Test name, prefix and start code point flags."""
        result = runner.invoke(
            app,
            [
                str(icon_paths[0]),
                "-o",
                str(output_dir),
                "-n",
                "glyphs",
                "-p",
                "gl",
                "--start-codepoint",
                "0xE000",
                "--types",
                "woff",
                "-s",
            ],
        )

        assert result.exit_code == 0, result.output
        assert json.loads((output_dir / "glyphs.json").read_text()) == {"home": 0xE000}
        assert ".gl-home:before" in (output_dir / "glyphs.css").read_text()

    def test_missing_output_dir(self, icon_paths):
        """Test that validation errors print the message and exit 1."""
        result = runner.invoke(app, [str(icon_paths[0])])

        assert result.exit_code == 1
        assert "Please specify an output directory" in result.output

    def test_no_matches(self, tmp_path, output_dir):
        """Test that a glob matching nothing is a validation error."""
        result = runner.invoke(app, [str(tmp_path / "*.svg"), "-o", str(output_dir)])

        assert result.exit_code == 1
        assert "No paths specified" in result.output

    def test_invalid_start_codepoint(self, icon_paths, output_dir):
        """Test that a bad start code point is reported."""
        result = runner.invoke(
            app,
            [str(icon_paths[0]), "-o", str(output_dir), "--start-codepoint", "nope"],
        )

        assert result.exit_code == 1
        assert "Invalid start codepoint 'nope'" in result.output

    def test_engine_error(self, tmp_path, output_dir):
        """Test that icon errors are reported without a traceback."""
        broken = tmp_path / "broken.svg"
        broken.write_text("not xml")

        result = runner.invoke(app, [str(broken), "-o", str(output_dir), "-s"])

        assert result.exit_code == 1
        assert "Failed to load icon" in result.output
        assert "Traceback" not in result.output


class TestCliHelpers:
    """Tests for argument helpers."""

    def test_expand_globs_dedupes(self, icon_paths):
        """Test that files matched twice are kept once, in pattern order."""
        home = str(icon_paths[0])
        pattern = str(icon_paths[0].parent / "*.svg")

        paths = expand_globs([home, pattern])

        assert [path.name for path in paths] == ["home.svg", "arrow-left.svg", "user.svg"]

    def test_parse_types(self):
        """Test comma separated type parsing."""
        assert parse_types("svg, ttf,,woff") == ["svg", "ttf", "woff"]
        assert parse_types(None) is None
