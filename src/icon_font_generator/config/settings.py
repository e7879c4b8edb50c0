"""Configuration settings for icon-font-generator."""

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from icon_font_generator.exceptions import ValidationError


class FontType(str, Enum):
    """Font formats the engine can produce."""

    SVG = "svg"
    TTF = "ttf"
    WOFF = "woff"
    WOFF2 = "woff2"
    EOT = "eot"


FONT_TYPES: tuple[FontType, ...] = tuple(FontType)

DEFAULT_START_CODEPOINT = 0xF101

_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

TEMPLATES: dict[str, Path] = {
    "css": _TEMPLATE_DIR / "css.jinja",
    "html": _TEMPLATE_DIR / "html.jinja",
}

# Options copied through to the engine when set
OPTIONAL_PARAMS: tuple[str, ...] = (
    "css",
    "html",
    "font_name",
    "class_prefix",
    "normalize",
    "round",
    "fixed_width",
    "font_height",
    "descent",
    "center_horizontally",
)

DEFAULT_OPTIONS: dict[str, Any] = {
    "font_name": "icons",
    "css": True,
    "json": True,
    "html": True,
    "silent": True,
    "types": list(FONT_TYPES),
}


class GenerationOptions(BaseModel):
    """Options for one font kit generation run.

    Instances are immutable. Structural checks that need the filesystem
    (output directory, template and codepoint files) are done by the options
    validator, not here.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    paths: list[Path] = Field(
        default_factory=list,
        description="SVG icon files, in glyph order",
    )
    output_dir: Path | None = Field(
        default=None,
        description="Directory receiving the font files",
    )
    font_name: str = Field(
        default="icons",
        description="Base name for fonts and generated files",
    )
    fonts_path: str | None = Field(
        default=None,
        description="URL prefix the stylesheet uses to reference font files",
    )
    types: list[FontType] = Field(
        default_factory=lambda: list(FONT_TYPES),
        description="Font formats to keep in the output directory",
    )
    css: bool = Field(default=True, description="Write the stylesheet")
    html: bool = Field(default=True, description="Write the HTML preview")
    json_map: bool = Field(
        default=True,
        alias="json",
        description="Write the JSON codepoint map",
    )
    css_path: Path | None = None
    html_path: Path | None = None
    json_path: Path | None = None
    css_template: Path | None = None
    html_template: Path | None = None
    class_prefix: str = Field(default="icon", description="CSS class name prefix")
    base_tag: str = Field(default="i", description="Tag the icon rules apply to")
    base_selector: str | None = Field(
        default=None,
        description="CSS selector overriding the base tag",
    )
    codepoints: Path | None = Field(
        default=None,
        description="JSON file mapping icon names to code points",
    )
    start_codepoint: int = Field(
        default=DEFAULT_START_CODEPOINT,
        ge=0,
        le=0x10FFFF,
        description="First code point assigned to unmapped icons",
    )
    normalize: bool | None = None
    round: float | str | None = None
    descent: float | str | None = None
    fixed_width: bool | None = None
    font_height: float | str | None = None
    center_horizontally: bool | None = None
    silent: bool = Field(default=True, description="Suppress console output")

    @field_validator("types", mode="before")
    @classmethod
    def _default_types(cls, value: Any) -> Any:
        if value is None:
            return list(FONT_TYPES)
        if isinstance(value, str):
            value = [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("types")
    @classmethod
    def _unique_types(cls, value: list[FontType]) -> list[FontType]:
        if not value:
            return list(FONT_TYPES)
        return list(dict.fromkeys(value))


def resolve_options(
    options: "GenerationOptions | Mapping[str, Any] | None" = None,
) -> GenerationOptions:
    """Layer caller options over the documented defaults.

    Args:
        options: Fully built options, a raw mapping of field values, or None

    Returns:
        A new GenerationOptions; the caller's value is never modified

    Raises:
        ValidationError: If the raw values do not fit the options model
    """
    if isinstance(options, GenerationOptions):
        return options

    raw = dict(options or {})
    layered = {**DEFAULT_OPTIONS, **raw}
    # the JSON switch may be given by field name instead of its alias
    if "json_map" in raw and "json" not in raw:
        del layered["json"]
    try:
        return GenerationOptions.model_validate(layered)
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ValidationError(f"Invalid option '{location}': {first['msg']}") from e


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
