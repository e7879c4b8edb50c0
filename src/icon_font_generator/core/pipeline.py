"""Generation pipeline.

This module sequences one font kit generation:

1. Layer options over defaults
2. Validate options against the filesystem
3. Parse the external codepoints map, if any
4. Build the engine configuration and run the engine
5. Delete font formats that were not requested
6. Write the JSON codepoint map
7. Report generated files

Each stage is an ordinary async function whose return value feeds the next
one. A failure in any stage propagates and skips the remaining stages; files
written by earlier stages are left in place.
"""

import asyncio
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from icon_font_generator.config.settings import GenerationOptions, resolve_options
from icon_font_generator.core.builder import build_config
from icon_font_generator.core.cleanup import delete_unrequested_formats
from icon_font_generator.core.codepoint import load_codepoints_map
from icon_font_generator.core.extractor import codepoints_from_css, write_json_map
from icon_font_generator.core.paths import font_path, resolved_path
from icon_font_generator.core.validator import validate_options
from icon_font_generator.domain import GenerationReport, GenerationResult, GeneratorConfig
from icon_font_generator.utils.logging import get_logger, log, log_output

if TYPE_CHECKING:
    from icon_font_generator.io.engine import FontEngine

logger = get_logger(__name__)


def _default_engine() -> "FontEngine":
    from icon_font_generator.io.engine import FontToolsEngine

    return FontToolsEngine()


async def run_engine(engine: "FontEngine", config: GeneratorConfig) -> GenerationResult:
    """Run the (blocking) engine in a worker thread."""
    return await asyncio.to_thread(engine.generate, config)


async def write_codepoints(
    options: GenerationOptions,
    result: GenerationResult,
) -> tuple[Path, dict[str, int]]:
    """Write the JSON map for the generated icons.

    The engine's structured map is used when it has one; otherwise the map is
    scraped from the rendered stylesheet.

    Returns:
        Path written and the map itself
    """
    codepoints = dict(result.codepoints)
    if not codepoints:
        logger.debug("Engine returned no codepoint map, reading stylesheet")
        codepoints = codepoints_from_css(result.generate_css())

    json_path = resolved_path(options, "json")
    await write_json_map(json_path, codepoints)
    return json_path, codepoints


def report(options: GenerationOptions, result: GenerationReport) -> None:
    """Log every generated file and a completion line."""
    for path in result.fonts:
        log_output(options, path)
    if result.html is not None:
        log_output(options, result.html)
    if result.css is not None:
        log_output(options, result.css)
    if result.json is not None:
        log_output(options, result.json)
    log(options, "[green]Done[/green]")


async def generate(
    options: GenerationOptions | Mapping[str, Any] | None = None,
    engine: "FontEngine | None" = None,
) -> GenerationReport:
    """Generate an icon font kit.

    Args:
        options: GenerationOptions, or a raw mapping layered over the defaults
        engine: Object with ``generate(config) -> GenerationResult``; the
            fontTools engine when omitted

    Returns:
        Report of the files written

    Raises:
        ValidationError: If the options are invalid
        Exception: Whatever the engine or the filesystem raises, unchanged
    """
    options = resolve_options(options)
    log(
        options,
        f"[yellow]Generating font kit from {len(options.paths)} SVG icons[/yellow]",
    )

    await validate_options(options)
    logger.debug("Options validated", output_dir=str(options.output_dir))

    codepoints = None
    if options.codepoints:
        codepoints = await load_codepoints_map(options.codepoints)
        logger.debug("Codepoints map loaded", count=len(codepoints))

    config = build_config(options, codepoints)
    result = await run_engine(engine or _default_engine(), config)
    logger.debug("Engine finished", font=config.font_name)

    deleted = await delete_unrequested_formats(options)

    generated = GenerationReport(
        fonts=[font_path(options, font_type) for font_type in options.types],
        html=resolved_path(options, "html") if options.html else None,
        css=resolved_path(options, "css") if options.css else None,
        deleted=deleted,
        codepoints=dict(result.codepoints),
    )

    if options.json_map:
        generated.json, generated.codepoints = await write_codepoints(options, result)

    report(options, generated)
    return generated
