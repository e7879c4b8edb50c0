"""Engine-facing configuration models.

A GeneratorConfig is derived from validated options on every run, handed to
the compilation engine and then discarded.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from icon_font_generator.config.settings import DEFAULT_START_CODEPOINT, FontType

OptionValue = str | int | float | bool


@dataclass(frozen=True)
class TemplateOptions:
    """Variables the CSS and HTML templates consume."""

    base_tag: str = "i"
    base_selector: str | None = None
    base_class_names: str = ""
    class_prefix: str = "icon-"
    css_relative_dir: str = "."

    def to_dict(self) -> dict[str, Any]:
        """Convert to a template context mapping."""
        return {
            "base_tag": self.base_tag,
            "base_selector": self.base_selector,
            "base_class_names": self.base_class_names,
            "class_prefix": self.class_prefix,
            "css_relative_dir": self.css_relative_dir,
        }


@dataclass(frozen=True)
class GeneratorConfig:
    """Flattened configuration handed to the compilation engine.

    Attributes:
        files: SVG icon files in glyph order
        dest: Directory receiving the font files
        types: Font formats to produce
        codepoints: Explicit icon name to code point assignments
        start_codepoint: First code point for icons missing from ``codepoints``
        css_dest: Stylesheet output path
        html_dest: HTML preview output path
        css_fonts_url: URL prefix the stylesheet uses for font files
        css_template: Stylesheet template path
        html_template: HTML preview template path
        template_options: Variables for both templates
        styling: Pass-through options keyed by option name
    """

    files: tuple[Path, ...]
    dest: Path
    types: tuple[FontType, ...]
    css_dest: Path
    html_dest: Path
    css_fonts_url: str
    css_template: Path
    html_template: Path
    codepoints: Mapping[str, int] = field(default_factory=dict)
    start_codepoint: int = DEFAULT_START_CODEPOINT
    template_options: TemplateOptions = field(default_factory=TemplateOptions)
    styling: Mapping[str, OptionValue] = field(default_factory=dict)

    @property
    def font_name(self) -> str:
        """Font family and file base name."""
        return str(self.styling.get("font_name", "icons"))

    @property
    def write_css(self) -> bool:
        return bool(self.styling.get("css", True))

    @property
    def write_html(self) -> bool:
        return bool(self.styling.get("html", True))
