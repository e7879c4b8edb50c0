"""Font compilation engine.

The generation pipeline only depends on the FontEngine protocol. The bundled
FontToolsEngine reads SVG icons, places them on a shared em square, writes
the requested font formats and renders the stylesheet and HTML preview.
"""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol

from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.transformPen import TransformPen

from icon_font_generator.config.settings import FontType
from icon_font_generator.core.paths import relative_url, url_prefix
from icon_font_generator.domain import GenerationResult, GeneratorConfig
from icon_font_generator.exceptions import StylingValueError
from icon_font_generator.io.font_writer import (
    FontMetrics,
    PlacedGlyph,
    advance_for,
    glyph_name_for,
    serialize_fonts,
)
from icon_font_generator.io.svg_reader import Icon, read_icons
from icon_font_generator.io.templates import font_src, render_template
from icon_font_generator.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_UNITS_PER_EM = 1000
MIN_UNITS_PER_EM = 16
MAX_UNITS_PER_EM = 16384


class FontEngine(Protocol):
    """Anything that can compile icons into a font set."""

    def generate(self, config: GeneratorConfig) -> GenerationResult: ...


def assign_codepoints(
    names: Sequence[str],
    codepoints: Mapping[str, int],
    start_codepoint: int,
) -> dict[str, int]:
    """Give every icon a code point.

    Icons listed in ``codepoints`` keep their value. The rest are numbered
    upwards from ``start_codepoint``, skipping values already taken by the
    explicit map.

    Returns:
        Icon name to code point, in ``names`` order
    """
    taken = set(codepoints.values())
    current = start_codepoint
    assigned: dict[str, int] = {}
    for name in names:
        if name in codepoints:
            assigned[name] = codepoints[name]
            continue
        while current in taken:
            current += 1
        assigned[name] = current
        current += 1
    return assigned


def _number(styling: Mapping[str, Any], key: str, default: float | None) -> float | None:
    value = styling.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        raise StylingValueError(key, value)
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise StylingValueError(key, value) from e


def font_metrics(styling: Mapping[str, Any]) -> FontMetrics:
    """Derive the em square and vertical metrics from styling options.

    Raises:
        StylingValueError: If ``font_height`` or ``descent`` is unusable
    """
    height = _number(styling, "font_height", DEFAULT_UNITS_PER_EM)
    units_per_em = round(height)
    if not MIN_UNITS_PER_EM <= units_per_em <= MAX_UNITS_PER_EM:
        raise StylingValueError("font_height", styling.get("font_height"))

    descent = round(_number(styling, "descent", 0.0))
    return FontMetrics(
        units_per_em=units_per_em,
        ascent=units_per_em - descent,
        descent=descent,
    )


def place_glyphs(
    icons: Sequence[Icon],
    codepoints: Mapping[str, int],
    metrics: FontMetrics,
    styling: Mapping[str, Any],
) -> list[PlacedGlyph]:
    """Scale icons onto the em square and flip them into font coordinates.

    Without ``normalize`` all icons share one scale, chosen so the tallest
    icon fills the em; with it every icon fills the em on its own.
    """
    normalize = bool(styling.get("normalize", False))
    fixed_width = bool(styling.get("fixed_width", False))
    center = bool(styling.get("center_horizontally", False))
    tallest = max((icon.box.height for icon in icons), default=1.0)

    used_names: set[str] = set()
    glyphs = []
    for icon in icons:
        box = icon.box
        scale = metrics.units_per_em / (box.height if normalize else tallest)
        transform = (
            scale,
            0,
            0,
            -scale,
            -box.min_x * scale,
            (box.min_y + box.height) * scale - metrics.descent,
        )
        outline = RecordingPen()
        icon.replay(TransformPen(outline, transform))

        advance = metrics.units_per_em if fixed_width else advance_for(box.width * scale)

        if center:
            bounds_pen = BoundsPen(None)
            outline.replay(bounds_pen)
            if bounds_pen.bounds is not None:
                x_min, _, x_max, _ = bounds_pen.bounds
                shift = (advance - (x_max - x_min)) / 2 - x_min
                centered = RecordingPen()
                outline.replay(TransformPen(centered, (1, 0, 0, 1, shift, 0)))
                outline = centered

        glyphs.append(
            PlacedGlyph(
                name=icon.name,
                glyph_name=glyph_name_for(icon.name, used_names),
                codepoint=codepoints[icon.name],
                advance=advance,
                outline=outline,
            )
        )
    return glyphs


class FontToolsEngine:
    """Compile SVG icons into webfonts with fontTools and Jinja2 templates.

    Example:
        engine = FontToolsEngine()
        result = engine.generate(config)
        css = result.generate_css()
    """

    def __init__(self, write_files: bool = True) -> None:
        """Initialize the engine.

        Args:
            write_files: Write fonts, CSS and HTML to disk (off for dry runs)
        """
        self._write_files = write_files

    def generate(self, config: GeneratorConfig) -> GenerationResult:
        """Compile the icons described by ``config``.

        Args:
            config: Engine configuration

        Returns:
            Result with the codepoint map, font bytes and template renderers

        Raises:
            IconLoadError: If an icon cannot be read
            DuplicateIconError: If two icons share a name
            StylingValueError: If a numeric styling option is unusable
        """
        styling = config.styling
        font_name = config.font_name

        icons = read_icons(config.files)
        codepoints = assign_codepoints(
            [icon.name for icon in icons],
            config.codepoints,
            config.start_codepoint,
        )
        logger.debug("Icons loaded", count=len(icons), font=font_name)

        metrics = font_metrics(styling)
        glyphs = place_glyphs(icons, codepoints, metrics, styling)
        fonts = serialize_fonts(
            font_name,
            glyphs,
            metrics,
            config.types,
            precision=_number(styling, "round", None),
        )

        def render_css(fonts_url: str = config.css_fonts_url) -> str:
            return render_template(
                config.css_template,
                self._context(config, codepoints, fonts_url),
            )

        def render_html() -> str:
            context = self._context(config, codepoints, config.css_fonts_url)
            context["css_file"] = config.css_dest.name
            context["styles"] = ""
            if not config.write_css:
                fonts_url = relative_url(config.html_dest.parent, config.dest)
                context["styles"] = render_css(url_prefix(fonts_url))
            return render_template(config.html_template, context, autoescape=True)

        result = GenerationResult(
            css_renderer=render_css,
            html_renderer=render_html,
            codepoints=codepoints,
            fonts=fonts,
        )

        if self._write_files:
            self._write(config, result)
        return result

    @staticmethod
    def _context(
        config: GeneratorConfig,
        codepoints: Mapping[str, int],
        fonts_url: str,
    ) -> dict[str, Any]:
        return {
            "font_name": config.font_name,
            "fonts_url": fonts_url,
            "src": font_src(config.font_name, fonts_url, config.types),
            "types": [font_type.value for font_type in config.types],
            "codepoints": {name: f"{value:x}" for name, value in codepoints.items()},
            "icons": [
                {"name": name, "codepoint": value, "hex": f"{value:x}"}
                for name, value in codepoints.items()
            ],
            **config.template_options.to_dict(),
        }

    def _write(self, config: GeneratorConfig, result: GenerationResult) -> None:
        for font_type, data in result.fonts.items():
            path = Path(config.dest) / f"{config.font_name}.{font_type.value}"
            path.write_bytes(data)
            logger.debug("Font written", path=str(path), format=font_type.value)

        if config.write_css:
            _write_text(config.css_dest, result.generate_css())
            logger.debug("Stylesheet written", path=str(config.css_dest))

        if config.write_html:
            _write_text(config.html_dest, result.generate_html())
            logger.debug("Preview written", path=str(config.html_dest))


def _write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")

