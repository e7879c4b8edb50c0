"""Shared fixtures for icon-font-generator tests."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"
ICONS_DIR = FIXTURES_DIR / "icons"

SQUARE_SVG = '<svg xmlns="http://www.w3.org/2000/svg"{attributes}><path d="{path}"/></svg>'


@pytest.fixture
def icon_paths() -> list[Path]:
    """The bundled fixture icons, in glyph order."""
    return [ICONS_DIR / "home.svg", ICONS_DIR / "user.svg", ICONS_DIR / "arrow-left.svg"]


@pytest.fixture
def make_svg(tmp_path):
    """Factory writing a one-path SVG icon into ``tmp_path/svg``."""
    svg_dir = tmp_path / "svg"
    svg_dir.mkdir()

    def _make(
        name: str,
        view_box: str | None = "0 0 100 100",
        path: str = "M10 10 L90 10 L90 90 L10 90 Z",
    ) -> Path:
        svg_path = svg_dir / f"{name}.svg"
        attributes = f' viewBox="{view_box}"' if view_box is not None else ""
        svg_path.write_text(SQUARE_SVG.format(attributes=attributes, path=path), encoding="utf-8")
        return svg_path

    return _make


@pytest.fixture
def output_dir(tmp_path) -> Path:
    """An existing, empty output directory."""
    out = tmp_path / "out"
    out.mkdir()
    return out
