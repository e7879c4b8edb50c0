"""Recover the icon name to code point map from generated CSS.

Only used when the engine does not return a structured codepoint map.
"""

import asyncio
import json
import re
from collections.abc import Mapping
from pathlib import Path

from icon_font_generator.core.codepoint import parse_code_point

CSS_PARSE_REGEX = re.compile(r'-(.*?):before.*\n\s*content: "(.*?)"', re.MULTILINE)


def extract_json(css_text: str) -> dict[str, str]:
    """Map icon class names to the ``content`` code of their ``:before`` rule.

    Args:
        css_text: Stylesheet text, either line-ending convention

    Returns:
        Icon name to code text (``"f101"``), in first-seen order
    """
    text = css_text.replace("\r\n", "\n").replace("\r", "\n")
    mapping: dict[str, str] = {}
    for name, code in CSS_PARSE_REGEX.findall(text):
        mapping.setdefault(name, code.lstrip("\\"))
    return mapping


def codepoints_from_css(css_text: str) -> dict[str, int]:
    """Extract the codepoint map from stylesheet text as integers."""
    return {
        name: parse_code_point(f"\\{code}", name)
        for name, code in extract_json(css_text).items()
    }


def _dump(path: Path, mapping: Mapping[str, object]) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    Path(path).write_text(json.dumps(dict(mapping), indent=4), encoding="utf-8")


async def write_json_map(path: Path, mapping: Mapping[str, object]) -> None:
    """Write a codepoint map as JSON with 4-space indentation."""
    await asyncio.to_thread(_dump, path, mapping)
