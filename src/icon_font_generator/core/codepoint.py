"""Codepoint token parsing.

Accepted token shapes, checked in order:

- numeric literal: ``0xF101`` or ``61697``
- a single character: ``"A"``
- CSS unicode escape: ``"\\f101"``, see
  https://www.w3.org/International/questions/qa-escapes#cssescapes
"""

import asyncio
import json
import re
from pathlib import Path

from icon_font_generator.exceptions import ValidationError

_NUMBER_RE = re.compile(r"0x[0-9a-f]+|[0-9]+", re.IGNORECASE)
_UNICODE_ESCAPE_RE = re.compile(r"\\[0-9a-f]{1,6}", re.IGNORECASE)


def parse_code_point(token: str, icon_name: str) -> int:
    """Convert a codepoint token to an integer.

    Args:
        token: Token from a codepoints map
        icon_name: Icon the token belongs to, used in the error message

    Returns:
        The code point

    Raises:
        ValidationError: If the token matches none of the accepted shapes
    """
    if _NUMBER_RE.fullmatch(token):
        if token[:2].lower() == "0x":
            return int(token, 16)
        return int(token, 10)
    if len(token) == 1:
        return ord(token)
    if _UNICODE_ESCAPE_RE.fullmatch(token):
        return int(token[1:], 16)
    raise ValidationError(f"Codepoints map contains invalid code point for icon '{icon_name}'")


def parse_codepoints_map(file_path: Path) -> dict[str, int]:
    """Read a JSON codepoints map file.

    JSON integers are treated as decimal tokens.

    Args:
        file_path: Path to the JSON file

    Returns:
        Mapping of icon name to code point, in file order

    Raises:
        ValidationError: If the file is not a JSON object or a value is invalid
    """
    content = Path(file_path).read_bytes()
    try:
        raw = json.loads(content.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValidationError("Codepoints map is invalid JSON") from e

    if not isinstance(raw, dict):
        raise ValidationError("Codepoints map is invalid JSON")

    codepoints: dict[str, int] = {}
    for icon_name, token in raw.items():
        if isinstance(token, int) and not isinstance(token, bool):
            token = str(token)
        if not isinstance(token, str):
            raise ValidationError(
                f"Codepoints map contains invalid code point for icon '{icon_name}'"
            )
        codepoints[icon_name] = parse_code_point(token, icon_name)
    return codepoints


async def load_codepoints_map(file_path: Path) -> dict[str, int]:
    """Parse a codepoints map file off the event loop."""
    return await asyncio.to_thread(parse_codepoints_map, file_path)
