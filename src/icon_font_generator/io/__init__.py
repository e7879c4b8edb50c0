"""Font compilation engine for icon-font-generator.

This package turns SVG icons into font files using fonttools, and renders
the stylesheet and HTML preview with Jinja2.

Key responsibilities:
- Load SVG icons and their canvas size
- Assign code points and place glyphs on the em square
- Write TTF, WOFF, WOFF2, EOT and SVG fonts
- Render CSS and HTML templates

Key classes:
- FontEngine: Protocol the generation pipeline depends on
- FontToolsEngine: The bundled engine
"""

from icon_font_generator.io.engine import FontEngine, FontToolsEngine, assign_codepoints

__all__ = [
    "FontEngine",
    "FontToolsEngine",
    "assign_codepoints",
]
