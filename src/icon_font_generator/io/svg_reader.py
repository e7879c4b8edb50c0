"""SVG icon reader.

This module loads SVG icon files into Icon models: the outline is recorded in
SVG user space with a RecordingPen, and the icon box comes from the
``viewBox`` (or ``width``/``height``) of the root element.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.recordingPen import RecordingPen
from fontTools.svgLib import SVGPath

from icon_font_generator.exceptions import DuplicateIconError, IconLoadError

_LENGTH_RE = re.compile(r"^\s*([0-9.eE+-]+)\s*(px)?\s*$")


@dataclass(frozen=True)
class IconBox:
    """Icon canvas in SVG user units."""

    min_x: float
    min_y: float
    width: float
    height: float


@dataclass
class Icon:
    """A single icon ready to become a glyph."""

    name: str
    path: Path
    box: IconBox
    outline: RecordingPen

    def replay(self, pen: object) -> None:
        """Draw the recorded outline into ``pen``."""
        self.outline.replay(pen)


def _parse_length(value: str | None) -> float | None:
    if value is None:
        return None
    match = _LENGTH_RE.match(value)
    if match is None:
        return None
    try:
        return float(match.group(1))
    except ValueError:
        return None


def _icon_box(attrib: dict[str, str], outline: RecordingPen) -> IconBox | None:
    view_box = attrib.get("viewBox")
    if view_box:
        parts = [float(part) for part in re.split(r"[\s,]+", view_box.strip()) if part]
        if len(parts) == 4 and parts[2] > 0 and parts[3] > 0:
            return IconBox(*parts)

    width = _parse_length(attrib.get("width"))
    height = _parse_length(attrib.get("height"))
    if width and height:
        return IconBox(0.0, 0.0, width, height)

    bounds_pen = BoundsPen(None)
    outline.replay(bounds_pen)
    if bounds_pen.bounds is None:
        return None
    x_min, y_min, x_max, y_max = bounds_pen.bounds
    if x_max <= x_min or y_max <= y_min:
        return None
    return IconBox(x_min, y_min, x_max - x_min, y_max - y_min)


def read_icon(path: Path) -> Icon:
    """Load one SVG icon, named after its file stem.

    Args:
        path: Path to the SVG file

    Returns:
        Icon model

    Raises:
        IconLoadError: If the file cannot be parsed or has no usable size
    """
    path = Path(path)
    try:
        svg = SVGPath(filename=str(path))
        outline = RecordingPen()
        svg.draw(outline)
    except Exception as e:
        raise IconLoadError(str(path), str(e)) from e

    try:
        box = _icon_box(dict(svg.root.attrib), outline)
    except ValueError as e:
        raise IconLoadError(str(path), f"invalid viewBox ({e})") from e
    if box is None:
        raise IconLoadError(str(path), "no viewBox, size or drawable content")

    return Icon(name=path.stem, path=path, box=box, outline=outline)


def read_icons(paths: Iterable[Path]) -> list[Icon]:
    """Load icons in order, rejecting duplicate names.

    Raises:
        IconLoadError: If an icon cannot be loaded
        DuplicateIconError: If two files share a stem
    """
    icons: list[Icon] = []
    seen: set[str] = set()
    for path in paths:
        icon = read_icon(path)
        if icon.name in seen:
            raise DuplicateIconError(icon.name)
        seen.add(icon.name)
        icons.append(icon)
    return icons
