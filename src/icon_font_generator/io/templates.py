"""Jinja2 rendering for the stylesheet and HTML preview."""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from icon_font_generator.config.settings import FontType

# @font-face src order, most specific first
FONT_SRC_ORDER: tuple[FontType, ...] = (
    FontType.EOT,
    FontType.WOFF2,
    FontType.WOFF,
    FontType.TTF,
    FontType.SVG,
)

FONT_SRC_FORMATS: dict[FontType, str] = {
    FontType.EOT: "embedded-opentype",
    FontType.WOFF2: "woff2",
    FontType.WOFF: "woff",
    FontType.TTF: "truetype",
    FontType.SVG: "svg",
}


def font_src(font_name: str, fonts_url: str, types: Sequence[FontType]) -> list[dict[str, str]]:
    """Build the ``@font-face`` source list for the requested formats."""
    sources = []
    for font_type in FONT_SRC_ORDER:
        if font_type not in types:
            continue
        url = f"{fonts_url}{font_name}.{font_type.value}"
        if font_type is FontType.EOT:
            url += "?#iefix"
        elif font_type is FontType.SVG:
            url += f"#{font_name}"
        sources.append({
            "type": font_type.value,
            "url": url,
            "format": FONT_SRC_FORMATS[font_type],
        })
    return sources


def _build_environment(template_path: Path, autoescape: bool) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(template_path.parent)),
        autoescape=autoescape,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def render_template(
    template_path: Path,
    context: Mapping[str, Any],
    autoescape: bool = False,
) -> str:
    """Render a template file with the given context.

    Args:
        template_path: Path to the Jinja2 template
        context: Template variables
        autoescape: HTML-escape substituted values

    Returns:
        Rendered text
    """
    template_path = Path(template_path)
    environment = _build_environment(template_path, autoescape)
    template = environment.get_template(template_path.name)
    return template.render(dict(context))
