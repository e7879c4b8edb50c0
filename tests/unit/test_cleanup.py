"""Unit tests for removing unrequested font formats."""

import asyncio

from icon_font_generator.config import FONT_TYPES, resolve_options
from icon_font_generator.core.cleanup import delete_unrequested_formats


def write_all_fonts(directory, font_name="icons"):
    """Create a placeholder file for every font format."""
    for font_type in FONT_TYPES:
        (directory / f"{font_name}.{font_type.value}").write_bytes(b"font")


class TestDeleteUnrequestedFormats:
    """Tests for delete_unrequested_formats."""

    def test_deletes_only_unrequested(self, output_dir):
        """Test that requested formats survive and the rest are removed."""
        write_all_fonts(output_dir)
        options = resolve_options({"output_dir": output_dir, "types": ["svg", "ttf"]})

        deleted = asyncio.run(delete_unrequested_formats(options))

        assert sorted(path.name for path in output_dir.iterdir()) == ["icons.svg", "icons.ttf"]
        assert {path.name for path in deleted} == {"icons.woff", "icons.woff2", "icons.eot"}

    def test_missing_files_ignored(self, output_dir):
        """Test that absent files are not an error."""
        options = resolve_options({"output_dir": output_dir, "types": ["woff2"]})
        assert asyncio.run(delete_unrequested_formats(options)) == []

    def test_all_requested(self, output_dir):
        """Test that nothing is deleted when every format is requested."""
        write_all_fonts(output_dir)
        options = resolve_options({"output_dir": output_dir})

        assert asyncio.run(delete_unrequested_formats(options)) == []
        assert len(list(output_dir.iterdir())) == len(FONT_TYPES)

    def test_uses_font_name(self, output_dir):
        """Test that only files named after the font are touched."""
        write_all_fonts(output_dir, "glyphs")
        write_all_fonts(output_dir, "other")
        options = resolve_options({
            "output_dir": output_dir,
            "font_name": "glyphs",
            "types": ["woff"],
        })

        asyncio.run(delete_unrequested_formats(options))

        names = {path.name for path in output_dir.iterdir()}
        assert "glyphs.woff" in names
        assert "glyphs.ttf" not in names
        assert "other.ttf" in names
