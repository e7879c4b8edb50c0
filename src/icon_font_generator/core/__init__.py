"""Core option resolution and post-processing for icon font generation.

This package sits between the CLI and the compilation engine:

- codepoint: Codepoint token and map file parsing
- selector: Base selector parsing
- paths: Output path and relative URL resolution
- validator: Filesystem precondition checks
- builder: Options to engine configuration
- extractor: Codepoint map recovery from generated CSS
- cleanup: Removal of unrequested font formats
- pipeline: The generate() orchestrator
"""

from icon_font_generator.core.builder import build_config, coerce_numeric
from icon_font_generator.core.cleanup import delete_unrequested_formats
from icon_font_generator.core.codepoint import parse_code_point, parse_codepoints_map
from icon_font_generator.core.extractor import codepoints_from_css, extract_json
from icon_font_generator.core.paths import resolved_path
from icon_font_generator.core.pipeline import generate
from icon_font_generator.core.selector import Selector, parse_selector
from icon_font_generator.core.validator import validate_options

__all__ = [
    "Selector",
    "build_config",
    "codepoints_from_css",
    "coerce_numeric",
    "delete_unrequested_formats",
    "extract_json",
    "generate",
    "parse_code_point",
    "parse_codepoints_map",
    "parse_selector",
    "resolved_path",
    "validate_options",
]
