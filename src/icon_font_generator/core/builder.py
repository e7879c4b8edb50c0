"""Translate generation options into the engine configuration."""

import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from icon_font_generator.config.settings import OPTIONAL_PARAMS, TEMPLATES, GenerationOptions
from icon_font_generator.core.paths import relative_url, resolved_path, url_prefix
from icon_font_generator.core.selector import parse_selector
from icon_font_generator.domain import GeneratorConfig, OptionValue, TemplateOptions


def _number_text(number: float) -> str:
    """Shortest text for a float, without a trailing ``.0`` on whole numbers."""
    if number.is_integer():
        return str(int(number))
    return repr(number)


def coerce_numeric(value: Any) -> Any:
    """Turn numeric-looking values into numbers.

    A value is converted only when its text survives a float round trip
    unchanged, so ``"10"`` becomes ``10`` and ``"1.5"`` becomes ``1.5`` while
    ``"10.0"``, ``"1e3"`` and ``"abc"`` are returned as given. Booleans are
    never converted, and integers are returned as given.
    """
    if isinstance(value, int) or not isinstance(value, (str, float)):
        return value

    try:
        number = float(value)
    except ValueError:
        return value

    if not math.isfinite(number):
        return value

    text = _number_text(number)
    source = value if isinstance(value, str) else _number_text(value)
    if text != source:
        return value
    return int(number) if number.is_integer() else number


def css_fonts_url(options: GenerationOptions) -> str:
    """URL prefix the stylesheet uses to reference font files.

    An explicit ``fonts_path`` wins. With a custom stylesheet location the
    prefix is the relative path from the stylesheet to the output directory.
    Otherwise fonts sit next to the stylesheet.
    """
    if options.fonts_path:
        return url_prefix(options.fonts_path)
    if options.css_path is not None:
        css_dir = resolved_path(options, "css").parent
        return url_prefix(relative_url(css_dir, Path(options.output_dir or ".")))
    return "./"


def template_options(options: GenerationOptions) -> TemplateOptions:
    """Compute the variables shared by the CSS and HTML templates."""
    selector = parse_selector(options.base_selector)
    css_dir = resolved_path(options, "css").parent
    html_dir = resolved_path(options, "html").parent

    return TemplateOptions(
        base_tag=selector.tag or options.base_tag or "i",
        base_selector=options.base_selector or None,
        base_class_names=" ".join(selector.class_names),
        class_prefix=f"{options.class_prefix or 'icon'}-",
        css_relative_dir=relative_url(html_dir, css_dir),
    )


def styling_options(options: GenerationOptions) -> dict[str, OptionValue]:
    """Collect the pass-through options that are set, numbers normalized."""
    styling: dict[str, OptionValue] = {}
    for key in OPTIONAL_PARAMS:
        value = getattr(options, key)
        if value is not None:
            styling[key] = coerce_numeric(value)
    return styling


def build_config(
    options: GenerationOptions,
    codepoints: Mapping[str, int] | None = None,
) -> GeneratorConfig:
    """Build the engine configuration from validated options.

    Args:
        options: Validated options with defaults applied
        codepoints: Parsed codepoints map, if one was supplied

    Returns:
        New GeneratorConfig
    """
    return GeneratorConfig(
        files=tuple(options.paths),
        dest=Path(options.output_dir or "."),
        types=tuple(options.types),
        codepoints=dict(codepoints or {}),
        start_codepoint=options.start_codepoint,
        css_dest=resolved_path(options, "css"),
        html_dest=resolved_path(options, "html"),
        css_fonts_url=css_fonts_url(options),
        css_template=options.css_template or TEMPLATES["css"],
        html_template=options.html_template or TEMPLATES["html"],
        template_options=template_options(options),
        styling=styling_options(options),
    )
