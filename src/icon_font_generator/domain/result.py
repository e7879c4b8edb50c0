"""Results produced by the engine and the generation pipeline."""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from icon_font_generator.config.settings import FontType


@dataclass
class GenerationResult:
    """What a compilation engine returns after a successful run.

    ``codepoints`` is the structured name to code point map. Engines that
    cannot provide one leave it empty, and the pipeline falls back to reading
    the map out of the rendered stylesheet.
    """

    css_renderer: Callable[[], str]
    html_renderer: Callable[[], str] | None = None
    codepoints: dict[str, int] = field(default_factory=dict)
    fonts: dict[FontType, bytes] = field(default_factory=dict)

    def generate_css(self) -> str:
        """Render the stylesheet for the generated icon set."""
        return self.css_renderer()

    def generate_html(self) -> str:
        """Render the HTML preview for the generated icon set."""
        if self.html_renderer is None:
            return ""
        return self.html_renderer()


@dataclass
class GenerationReport:
    """Files written by one generation run."""

    fonts: list[Path] = field(default_factory=list)
    html: Path | None = None
    css: Path | None = None
    json: Path | None = None
    deleted: list[Path] = field(default_factory=list)
    codepoints: dict[str, int] = field(default_factory=dict)

    @property
    def outputs(self) -> list[Path]:
        """All written paths, fonts first."""
        extra = [path for path in (self.html, self.css, self.json) if path is not None]
        return [*self.fonts, *extra]
