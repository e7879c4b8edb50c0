"""Font binary writers.

This module turns placed glyph outlines into font files. TrueType is built
with fontTools' FontBuilder; WOFF and WOFF2 are re-flavored copies of that
TrueType font, EOT wraps it in an Embedded OpenType header, and the legacy
SVG font is written as XML from the same outlines.
"""

import io
import math
import re
import struct
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from xml.sax.saxutils import quoteattr

from fontTools.fontBuilder import FontBuilder
from fontTools.misc.roundTools import otRound
from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.cu2quPen import Cu2QuPen
from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont

from icon_font_generator.config.settings import FontType

# EOT header constants
EOT_VERSION = 0x00020001
EOT_MAGIC = 0x504C
EOT_DEFAULT_CHARSET = 1

# name table IDs copied into the EOT header, in header order
NAME_ID_FAMILY = 1
NAME_ID_SUBFAMILY = 2
NAME_ID_VERSION = 5
NAME_ID_FULL_NAME = 4


@dataclass(frozen=True)
class FontMetrics:
    """Vertical metrics shared by every glyph."""

    units_per_em: int
    ascent: int
    descent: int


@dataclass
class PlacedGlyph:
    """A glyph outline in font units with its code point and advance."""

    name: str
    glyph_name: str
    codepoint: int
    advance: int
    outline: RecordingPen

    @property
    def bounds(self) -> tuple[float, float, float, float] | None:
        pen = BoundsPen(None)
        self.outline.replay(pen)
        return pen.bounds


def glyph_name_for(icon_name: str, used: set[str]) -> str:
    """Derive a unique, post-table safe glyph name from an icon name."""
    base = re.sub(r"[^A-Za-z0-9._-]", "_", icon_name)[:60] or "icon"
    if base[0].isdigit() or base[0] == ".":
        base = f"g{base}"
    name = base
    suffix = 1
    while name in used:
        name = f"{base}.{suffix}"
        suffix += 1
    used.add(name)
    return name


def build_ttf(font_name: str, glyphs: Sequence[PlacedGlyph], metrics: FontMetrics) -> bytes:
    """Compile placed glyphs into a TrueType font.

    Cubic segments are converted to quadratics and contour direction is
    reversed to the TrueType convention.

    Args:
        font_name: Family name written to the name table
        glyphs: Glyphs in font order
        metrics: Vertical metrics

    Returns:
        TrueType font bytes
    """
    glyph_order = [".notdef"]
    tt_glyphs = {".notdef": TTGlyphPen(None).glyph()}
    h_metrics: dict[str, tuple[int, int]] = {".notdef": (metrics.units_per_em, 0)}
    cmap: dict[int, str] = {}

    for glyph in glyphs:
        tt_pen = TTGlyphPen(None)
        glyph.outline.replay(Cu2QuPen(tt_pen, max_err=1.0, reverse_direction=True))
        bounds = glyph.bounds

        glyph_order.append(glyph.glyph_name)
        tt_glyphs[glyph.glyph_name] = tt_pen.glyph()
        h_metrics[glyph.glyph_name] = (glyph.advance, otRound(bounds[0]) if bounds else 0)
        cmap[glyph.codepoint] = glyph.glyph_name

    fb = FontBuilder(metrics.units_per_em, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(tt_glyphs)
    fb.setupHorizontalMetrics(h_metrics)
    fb.setupHorizontalHeader(ascent=metrics.ascent, descent=-metrics.descent)
    fb.setupOS2(
        sTypoAscender=metrics.ascent,
        sTypoDescender=-metrics.descent,
        sTypoLineGap=0,
        usWinAscent=max(metrics.ascent, 0),
        usWinDescent=max(metrics.descent, 0),
    )
    fb.setupNameTable({
        "familyName": font_name,
        "styleName": "Regular",
        "uniqueFontIdentifier": f"{font_name}-Regular",
        "fullName": f"{font_name} Regular",
        "psName": re.sub(r"[^A-Za-z0-9-]", "", f"{font_name}-Regular") or "icons-Regular",
        "version": "Version 1.0",
    })
    fb.setupPost()
    fb.setupMaxp()

    buffer = io.BytesIO()
    fb.save(buffer)
    return buffer.getvalue()


def to_flavor(ttf_data: bytes, flavor: str) -> bytes:
    """Re-serialize a TrueType font as WOFF or WOFF2.

    WOFF2 compression requires the ``brotli`` package.
    """
    font = TTFont(io.BytesIO(ttf_data))
    font.flavor = flavor
    buffer = io.BytesIO()
    font.save(buffer)
    return buffer.getvalue()


def _eot_name(font: TTFont, name_id: int) -> bytes:
    value = font["name"].getDebugName(name_id) or ""
    return value.encode("utf-16-le")


def build_eot(ttf_data: bytes) -> bytes:
    """Wrap a TrueType font in an Embedded OpenType (version 2.1) header.

    Args:
        ttf_data: TrueType font bytes

    Returns:
        EOT font bytes
    """
    font = TTFont(io.BytesIO(ttf_data))
    os2 = font["OS/2"]
    head = font["head"]
    panose = os2.panose

    names = b""
    for name_id in (NAME_ID_FAMILY, NAME_ID_SUBFAMILY, NAME_ID_VERSION, NAME_ID_FULL_NAME):
        encoded = _eot_name(font, name_id)
        names += struct.pack("<H", len(encoded)) + encoded + struct.pack("<H", 0)
    # RootStringSize: no root string
    names += struct.pack("<H", 0)

    fixed = struct.pack(
        "<IIII10sBBIHH4I2IIIIIIH",
        0,  # EOTSize, patched below
        len(ttf_data),
        EOT_VERSION,
        0,  # Flags
        bytes([
            panose.bFamilyType,
            panose.bSerifStyle,
            panose.bWeight,
            panose.bProportion,
            panose.bContrast,
            panose.bStrokeVariation,
            panose.bArmStyle,
            panose.bLetterForm,
            panose.bMidline,
            panose.bXHeight,
        ]),
        EOT_DEFAULT_CHARSET,
        os2.fsSelection & 0x01,
        os2.usWeightClass,
        os2.fsType,
        EOT_MAGIC,
        os2.ulUnicodeRange1,
        os2.ulUnicodeRange2,
        os2.ulUnicodeRange3,
        os2.ulUnicodeRange4,
        getattr(os2, "ulCodePageRange1", 0),
        getattr(os2, "ulCodePageRange2", 0),
        head.checkSumAdjustment,
        0,  # Reserved1
        0,  # Reserved2
        0,  # Reserved3
        0,  # Reserved4
        0,  # Padding1
    )

    header = fixed + names
    eot_size = len(header) + len(ttf_data)
    return struct.pack("<I", eot_size) + header[4:] + ttf_data


def _number_formatter(precision: float | None) -> Callable[[float], str]:
    def ntos(value: float) -> str:
        if precision:
            value = round(value * precision) / precision
        if float(value).is_integer():
            return str(int(value))
        return repr(float(value))

    return ntos


def build_svg_font(
    font_name: str,
    glyphs: Sequence[PlacedGlyph],
    metrics: FontMetrics,
    precision: float | None = None,
) -> bytes:
    """Write glyphs as a legacy SVG font.

    Args:
        font_name: Font id and family name
        glyphs: Glyphs in font order
        metrics: Vertical metrics
        precision: Coordinate rounding multiplier (``round(v * p) / p``)

    Returns:
        UTF-8 encoded SVG document
    """
    ntos = _number_formatter(precision)
    lines = [
        '<?xml version="1.0" standalone="no"?>',
        '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
        '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">',
        '<svg xmlns="http://www.w3.org/2000/svg">',
        "<defs>",
        f'  <font id={quoteattr(font_name)} horiz-adv-x="{metrics.units_per_em}">',
        f"    <font-face font-family={quoteattr(font_name)}"
        f' units-per-em="{metrics.units_per_em}"'
        f' ascent="{metrics.ascent}" descent="{-metrics.descent}" />',
        '    <missing-glyph horiz-adv-x="0" />',
    ]
    for glyph in glyphs:
        pen = SVGPathPen(None, ntos=ntos)
        glyph.outline.replay(pen)
        lines.append(
            f"    <glyph glyph-name={quoteattr(glyph.name)}"
            f' unicode="&#x{glyph.codepoint:X};"'
            f' horiz-adv-x="{glyph.advance}"'
            f" d={quoteattr(pen.getCommands())} />"
        )
    lines += ["  </font>", "</defs>", "</svg>", ""]
    return "\n".join(lines).encode("utf-8")


def serialize_fonts(
    font_name: str,
    glyphs: Sequence[PlacedGlyph],
    metrics: FontMetrics,
    types: Sequence[FontType],
    precision: float | None = None,
) -> dict[FontType, bytes]:
    """Produce font bytes for each requested format.

    Returns:
        Font bytes keyed by format, in ``types`` order
    """
    ttf_data = build_ttf(font_name, glyphs, metrics)
    fonts: dict[FontType, bytes] = {}
    for font_type in types:
        if font_type is FontType.TTF:
            fonts[font_type] = ttf_data
        elif font_type is FontType.WOFF:
            fonts[font_type] = to_flavor(ttf_data, "woff")
        elif font_type is FontType.WOFF2:
            fonts[font_type] = to_flavor(ttf_data, "woff2")
        elif font_type is FontType.EOT:
            fonts[font_type] = build_eot(ttf_data)
        elif font_type is FontType.SVG:
            fonts[font_type] = build_svg_font(font_name, glyphs, metrics, precision)
    return fonts


def advance_for(width: float) -> int:
    """Round an advance width up to whole font units."""
    return max(int(math.ceil(width - 1e-9)), 0)
