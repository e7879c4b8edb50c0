"""Unit tests for option validation."""

import asyncio
import re

import pytest

from icon_font_generator.config import GenerationOptions
from icon_font_generator.core.validator import validate_options
from icon_font_generator.exceptions import ValidationError


def validate(**values) -> None:
    """Run validate_options on options built from keyword values."""
    asyncio.run(validate_options(GenerationOptions(**values)))


class TestValidateOptions:
    """Tests for validate_options, in check order."""

    def test_valid_options(self, make_svg, output_dir):
        """Test that complete options pass."""
        validate(paths=[make_svg("home")], output_dir=output_dir)

    def test_no_paths(self, output_dir):
        """Test that an empty icon list fails first."""
        with pytest.raises(ValidationError, match="No paths specified"):
            validate(paths=[], output_dir=output_dir)

    def test_no_paths_reported_before_output_dir(self):
        """Test that check order is fixed when several checks fail."""
        with pytest.raises(ValidationError, match="No paths specified"):
            validate(paths=[], output_dir=None)

    def test_missing_output_dir_option(self, make_svg):
        """Test that the output directory is required."""
        with pytest.raises(ValidationError) as exc_info:
            validate(paths=[make_svg("home")])
        assert exc_info.value.message == "Please specify an output directory with -o or --output"

    def test_output_dir_does_not_exist(self, make_svg, tmp_path):
        """Test that the output directory must exist."""
        with pytest.raises(ValidationError, match="Output directory doesn't exist"):
            validate(paths=[make_svg("home")], output_dir=tmp_path / "missing")

    def test_output_dir_is_file(self, make_svg, tmp_path):
        """Test that the output path must be a directory."""
        target = tmp_path / "file.txt"
        target.write_text("x")
        with pytest.raises(ValidationError, match="Output path must be a directory"):
            validate(paths=[make_svg("home")], output_dir=target)

    def test_css_template_missing(self, make_svg, output_dir, tmp_path):
        """Test that a custom CSS template must exist."""
        with pytest.raises(ValidationError, match="CSS template not found"):
            validate(
                paths=[make_svg("home")],
                output_dir=output_dir,
                css_template=tmp_path / "missing.jinja",
            )

    def test_html_template_missing(self, make_svg, output_dir, tmp_path):
        """Test that a custom HTML template must exist."""
        with pytest.raises(ValidationError, match="HTML template not found"):
            validate(
                paths=[make_svg("home")],
                output_dir=output_dir,
                html_template=tmp_path / "missing.jinja",
            )

    def test_codepoints_missing(self, make_svg, output_dir, tmp_path):
        """Test that a codepoints file must exist."""
        missing = tmp_path / "codepoints.json"
        with pytest.raises(ValidationError, match=re.escape(f"Cannot find json file @ {missing}!")):
            validate(paths=[make_svg("home")], output_dir=output_dir, codepoints=missing)

    def test_codepoints_not_json(self, make_svg, output_dir, tmp_path):
        """Test that a codepoints file must have a .json extension."""
        codepoints = tmp_path / "codepoints.txt"
        codepoints.write_text("{}")
        with pytest.raises(
            ValidationError,
            match=re.escape(f"Codepoints file must be JSON {codepoints} is not a valid file."),
        ):
            validate(paths=[make_svg("home")], output_dir=output_dir, codepoints=codepoints)

    def test_codepoints_directory(self, make_svg, output_dir, tmp_path):
        """Test that a directory named like a JSON file is rejected."""
        codepoints = tmp_path / "codepoints.json"
        codepoints.mkdir()
        with pytest.raises(ValidationError, match="Codepoints file must be JSON"):
            validate(paths=[make_svg("home")], output_dir=output_dir, codepoints=codepoints)

    def test_codepoints_valid(self, make_svg, output_dir, tmp_path):
        """Test that an existing JSON file passes."""
        codepoints = tmp_path / "codepoints.json"
        codepoints.write_text("{}")
        validate(paths=[make_svg("home")], output_dir=output_dir, codepoints=codepoints)
