"""icon-font-generator - Build webfont kits from SVG icons.

icon-font-generator is a CLI tool that turns a set of SVG icons into a
webfont distribution: font files (svg, ttf, woff, woff2, eot), a stylesheet,
an HTML preview page and a JSON map of icon names to code points.

Example:
    $ icon-font-generator "icons/*.svg" -o dist

This will create dist/icons.ttf, dist/icons.css, dist/icons.html,
dist/icons.json and the other font formats.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
