"""Output path resolution for generated artifacts."""

import os
from pathlib import Path
from typing import Literal

from icon_font_generator.config.settings import FontType, GenerationOptions

Artifact = Literal["html", "css", "json"]


def _absolute(path: Path | str) -> Path:
    return Path(os.path.abspath(path))


def resolved_path(options: GenerationOptions, artifact: Artifact | FontType) -> Path:
    """Return the absolute output path for an artifact.

    An explicit ``<artifact>_path`` option wins. Otherwise the artifact is
    written to ``<output_dir>/<font_name>.<artifact>``. Font formats have no
    explicit override.

    Args:
        options: Generation options
        artifact: ``"html"``, ``"css"``, ``"json"`` or a font format

    Returns:
        Absolute path
    """
    if isinstance(artifact, FontType):
        extension = artifact.value
        explicit = None
    else:
        extension = artifact
        explicit = getattr(options, f"{artifact}_path")

    if explicit is not None:
        return _absolute(explicit)
    return _absolute(Path(options.output_dir or ".") / f"{options.font_name}.{extension}")


def font_path(options: GenerationOptions, font_type: FontType) -> Path:
    """Return the absolute path of a font file."""
    return resolved_path(options, font_type)


def relative_url(from_dir: Path, to_dir: Path) -> str:
    """Relative URL (POSIX separators) from one directory to another."""
    relative = os.path.relpath(_absolute(to_dir), _absolute(from_dir))
    return Path(relative).as_posix()


def url_prefix(url: str) -> str:
    """Normalize a URL directory prefix to end with ``/``."""
    if url in ("", "."):
        return "./"
    return url if url.endswith("/") else f"{url}/"
