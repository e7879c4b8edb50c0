"""CSS selector parsing for the icon base rule.

Parsing is deliberately loose: a malformed selector is not an error, it just
yields whatever tag and class names the patterns pick up.
"""

import re
from dataclasses import dataclass, field

_IDENT = r"[a-zA-Z0-9='\"\[\]_-]"
_TAG_RE = re.compile(rf"^{_IDENT}*")
_CLASS_RE = re.compile(rf"\.({_IDENT}+)")


@dataclass(frozen=True)
class Selector:
    """Base tag and class names of a selector."""

    tag: str | None = None
    class_names: list[str] = field(default_factory=list)


def parse_selector(selector: str | None) -> Selector:
    """Split a selector such as ``span.foo.bar`` into tag and class names.

    Args:
        selector: CSS-like selector string, or None

    Returns:
        Selector with ``tag=None`` and no class names for empty input;
        otherwise the leading tag (possibly empty) and every ``.class``
    """
    if not selector:
        return Selector()

    tag_match = _TAG_RE.match(selector)
    tag = tag_match.group(0) if tag_match else ""
    class_names = _CLASS_RE.findall(selector, len(tag))
    return Selector(tag=tag, class_names=class_names)
