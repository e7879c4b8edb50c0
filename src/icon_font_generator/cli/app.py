"""CLI application entry point for icon-font-generator.

This module provides the main CLI interface using Typer.
"""

import asyncio
import glob
from pathlib import Path
from typing import Annotated, Any

import typer

from icon_font_generator import __version__
from icon_font_generator.cli.output import (
    console,
    print_deleted,
    print_error,
    print_header,
    print_inputs,
    print_unexpected_error,
)
from icon_font_generator.config import LoggingConfig, resolve_options
from icon_font_generator.core import generate, parse_code_point
from icon_font_generator.exceptions import IconFontError, ValidationError
from icon_font_generator.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="icon-font-generator",
    help="Generate a webfont kit (fonts, CSS, HTML preview, JSON map) from SVG icons.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]icon-font-generator[/bold blue] v{__version__}")
        raise typer.Exit()


def expand_globs(patterns: list[str]) -> list[Path]:
    """Resolve shell patterns to files, keeping pattern order.

    Matches of one pattern are sorted; a file matched twice is kept once.
    """
    paths: list[Path] = []
    seen: set[Path] = set()
    for pattern in patterns:
        for match in sorted(glob.glob(pattern, recursive=True)):
            path = Path(match)
            if path not in seen:
                seen.add(path)
                paths.append(path)
    return paths


def parse_types(value: str | None) -> list[str] | None:
    """Split a comma separated list of font types."""
    if value is None:
        return None
    return [part.strip() for part in value.split(",") if part.strip()]


@app.command()
def main(
    patterns: Annotated[
        list[str] | None,
        typer.Argument(
            help="SVG icon files or glob patterns",
            show_default=False,
        ),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Output icon font set files to <out> directory"),
    ] = None,
    name: Annotated[
        str,
        typer.Option("--name", "-n", help="Name to use for generated fonts and files"),
    ] = "icons",
    fontspath: Annotated[
        str | None,
        typer.Option(
            "--fontspath",
            "-f",
            help="Relative path to fonts directory to use in output files (default: ./)",
        ),
    ] = None,
    types: Annotated[
        str | None,
        typer.Option(
            "--types",
            help="Comma delimited list of font types (default: svg,ttf,woff,woff2,eot)",
        ),
    ] = None,
    css: Annotated[
        bool,
        typer.Option("--css/--no-css", "-c", help="Generate CSS file"),
    ] = True,
    csspath: Annotated[
        Path | None,
        typer.Option("--csspath", help="CSS output path (default: <out>/<name>.css)"),
    ] = None,
    csstp: Annotated[
        Path | None,
        typer.Option("--csstp", help="CSS Jinja2 template path"),
    ] = None,
    html: Annotated[
        bool,
        typer.Option("--html/--no-html", help="Generate HTML preview file"),
    ] = True,
    htmlpath: Annotated[
        Path | None,
        typer.Option("--htmlpath", help="HTML output path (default: <out>/<name>.html)"),
    ] = None,
    htmltp: Annotated[
        Path | None,
        typer.Option("--htmltp", help="HTML Jinja2 template path"),
    ] = None,
    json: Annotated[
        bool,
        typer.Option("--json/--no-json", "-j", help="Generate JSON map file"),
    ] = True,
    jsonpath: Annotated[
        Path | None,
        typer.Option("--jsonpath", help="JSON output path (default: <out>/<name>.json)"),
    ] = None,
    prefix: Annotated[
        str,
        typer.Option("--prefix", "-p", help="CSS classname prefix for icons"),
    ] = "icon",
    tag: Annotated[
        str,
        typer.Option("--tag", "-t", help="CSS base tag for icons"),
    ] = "i",
    selector: Annotated[
        str | None,
        typer.Option("--selector", help="CSS base selector for icons (overrides --tag)"),
    ] = None,
    codepoints: Annotated[
        Path | None,
        typer.Option("--codepoints", help="JSON file mapping icon names to code points"),
    ] = None,
    start_codepoint: Annotated[
        str | None,
        typer.Option(
            "--start-codepoint",
            help="First code point for unmapped icons (default: 0xF101)",
        ),
    ] = None,
    normalize: Annotated[
        bool | None,
        typer.Option("--normalize", help="Normalize icons sizes"),
    ] = None,
    round_: Annotated[
        str | None,
        typer.Option("--round", help="SVG font coordinate rounding precision"),
    ] = None,
    descent: Annotated[
        str | None,
        typer.Option("--descent", help="Offset applied to the baseline"),
    ] = None,
    mono: Annotated[
        bool | None,
        typer.Option("--mono", help="Make font monospace"),
    ] = None,
    height: Annotated[
        str | None,
        typer.Option("--height", help="Fixed font height value"),
    ] = None,
    center: Annotated[
        bool | None,
        typer.Option("--center", help="Center glyphs horizontally"),
    ] = None,
    silent: Annotated[
        bool,
        typer.Option("--silent", "-s", help="Do not produce output logs other than errors"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate an icon font kit from SVG icons.

    Example:
        icon-font-generator "src/*.svg" -o dist

    This will write dist/icons.{svg,ttf,woff,woff2,eot}, dist/icons.css,
    dist/icons.html and dist/icons.json.
    """
    logging_config = LoggingConfig(log_file=log_file, log_level=log_level)
    configure_logging(
        log_file=logging_config.log_file,
        console_level=logging_config.log_level,
        file_level=logging_config.file_log_level,
        quiet=silent,
    )

    patterns = patterns or []
    paths = expand_globs(patterns)

    if not silent:
        print_header(__version__)
        print_inputs(len(patterns), len(paths))

    raw: dict[str, Any] = {
        "paths": paths,
        "output_dir": out,
        "font_name": name,
        "fonts_path": fontspath,
        "types": parse_types(types),
        "css": css,
        "css_path": csspath,
        "css_template": csstp,
        "html": html,
        "html_path": htmlpath,
        "html_template": htmltp,
        "json": json,
        "json_path": jsonpath,
        "class_prefix": prefix,
        "base_tag": tag,
        "base_selector": selector,
        "codepoints": codepoints,
        "normalize": normalize,
        "round": round_,
        "descent": descent,
        "fixed_width": mono,
        "font_height": height,
        "center_horizontally": center,
        "silent": silent,
    }

    try:
        if start_codepoint is not None:
            raw["start_codepoint"] = _parse_start_codepoint(start_codepoint)
        options = resolve_options({key: value for key, value in raw.items() if value is not None})
        result = asyncio.run(generate(options))
    except ValidationError as e:
        print_error(e.message)
        raise typer.Exit(code=1)
    except IconFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except Exception:
        print_unexpected_error()
        raise typer.Exit(code=1)

    if not silent and result.deleted:
        print_deleted([str(path) for path in result.deleted])


def _parse_start_codepoint(value: str) -> int:
    try:
        return parse_code_point(value, "--start-codepoint")
    except ValidationError as e:
        raise ValidationError(f"Invalid start codepoint '{value}'") from e


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
