"""Filesystem and structural checks run before any generation work.

Checks run in a fixed order and the first violation is raised, so the same
bad input always produces the same message.
"""

import asyncio
from pathlib import Path

from icon_font_generator.config.settings import GenerationOptions
from icon_font_generator.exceptions import ValidationError


async def _exists(path: Path) -> bool:
    return await asyncio.to_thread(Path(path).exists)


async def _is_dir(path: Path) -> bool:
    return await asyncio.to_thread(Path(path).is_dir)


async def _is_file(path: Path) -> bool:
    return await asyncio.to_thread(Path(path).is_file)


async def validate_options(options: GenerationOptions) -> None:
    """Validate generation options against the filesystem.

    Args:
        options: Options to check

    Raises:
        ValidationError: On the first failed check
    """
    if not options.paths:
        raise ValidationError("No paths specified")

    if not options.output_dir:
        raise ValidationError("Please specify an output directory with -o or --output")

    if not await _exists(options.output_dir):
        raise ValidationError("Output directory doesn't exist")

    if not await _is_dir(options.output_dir):
        raise ValidationError("Output path must be a directory")

    if options.css_template and not await _exists(options.css_template):
        raise ValidationError("CSS template not found")

    if options.html_template and not await _exists(options.html_template):
        raise ValidationError("HTML template not found")

    if options.codepoints:
        if not await _exists(options.codepoints):
            raise ValidationError(f"Cannot find json file @ {options.codepoints}!")

        if not await _is_file(options.codepoints) or options.codepoints.suffix != ".json":
            raise ValidationError(
                f"Codepoints file must be JSON {options.codepoints} is not a valid file."
            )
