"""Remove font files of formats the user did not ask for."""

import asyncio
from pathlib import Path

from icon_font_generator.config.settings import FONT_TYPES, GenerationOptions
from icon_font_generator.core.paths import font_path
from icon_font_generator.utils.logging import get_logger

logger = get_logger(__name__)


def _delete_if_exists(path: Path) -> bool:
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    return True


async def delete_unrequested_formats(options: GenerationOptions) -> list[Path]:
    """Delete ``<output_dir>/<font_name>.<ext>`` for every unrequested format.

    Files of different formats are independent, so the deletes run
    concurrently. A missing file is not an error.

    Args:
        options: Generation options

    Returns:
        Paths that were deleted
    """
    candidates = [font_path(options, ext) for ext in FONT_TYPES if ext not in options.types]
    deleted = await asyncio.gather(
        *(asyncio.to_thread(_delete_if_exists, path) for path in candidates)
    )

    removed = [path for path, was_deleted in zip(candidates, deleted) if was_deleted]
    for path in removed:
        logger.debug("Deleted unrequested font", path=str(path))
    return removed
