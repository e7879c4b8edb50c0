"""Unit tests for output path resolution."""

from pathlib import Path

import pytest

from icon_font_generator.config import FontType, GenerationOptions
from icon_font_generator.core.paths import font_path, relative_url, resolved_path, url_prefix


class TestResolvedPath:
    """Tests for resolved_path and font_path."""

    @pytest.mark.parametrize("artifact", ["html", "css", "json"])
    def test_default_location(self, tmp_path, artifact):
        """Test that artifacts default to the output directory."""
        options = GenerationOptions(output_dir=tmp_path, font_name="glyphs")
        assert resolved_path(options, artifact) == tmp_path / f"glyphs.{artifact}"

    def test_explicit_path_wins(self, tmp_path):
        """Test that an explicit artifact path overrides the default."""
        options = GenerationOptions(output_dir=tmp_path, css_path=tmp_path / "css" / "style.css")
        assert resolved_path(options, "css") == tmp_path / "css" / "style.css"
        assert resolved_path(options, "html") == tmp_path / "icons.html"

    def test_relative_explicit_path(self, tmp_path, monkeypatch):
        """Test that relative explicit paths resolve from the working directory."""
        monkeypatch.chdir(tmp_path)
        options = GenerationOptions(output_dir=tmp_path, json_path=Path("maps/icons.json"))

        path = resolved_path(options, "json")

        assert path.is_absolute()
        assert path == tmp_path / "maps" / "icons.json"

    def test_font_path(self, tmp_path):
        """Test that fonts always live in the output directory."""
        options = GenerationOptions(output_dir=tmp_path)
        assert font_path(options, FontType.WOFF2) == tmp_path / "icons.woff2"
        assert resolved_path(options, FontType.EOT) == tmp_path / "icons.eot"


class TestRelativeUrl:
    """Tests for relative_url and url_prefix."""

    def test_sibling_directories(self, tmp_path):
        """Test a path to a sibling directory."""
        assert relative_url(tmp_path / "css", tmp_path / "fonts") == "../fonts"

    def test_same_directory(self, tmp_path):
        """Test that a directory relative to itself is '.'."""
        assert relative_url(tmp_path, tmp_path) == "."

    def test_child_directory(self, tmp_path):
        """Test a path into a subdirectory."""
        assert relative_url(tmp_path, tmp_path / "a" / "b") == "a/b"

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("", "./"),
            (".", "./"),
            ("../fonts", "../fonts/"),
            ("/static/fonts/", "/static/fonts/"),
            ("https://cdn.example.com/f", "https://cdn.example.com/f/"),
        ],
    )
    def test_url_prefix(self, url, expected):
        """Test that prefixes always end with a slash."""
        assert url_prefix(url) == expected
