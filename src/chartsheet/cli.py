import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import NoReturn

import click

from .config import RenderOptions, load_options
from .exceptions import (
    ConfigError,
    FetchError,
    ParseError,
    SourceError,
    UnsupportedSourceError,
)
from .layout import layout_document
from .models import Document
from .parser import parse_document
from .registry import get_renderer, get_source, renderer_names
from .song import Song

logger = logging.getLogger(__name__)


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _load_chart(location: str) -> Song:
    """Return the chart at location as a text :class:`Song`, exiting with a message on failure."""
    try:
        source = get_source(location)
        text = source.load(location)
        return Song(title=source.name(location), artist="", music_type="text", music_text=text)
    except UnsupportedSourceError as exc:
        _fail(f"{exc}\nSupported sources: local files, '-' for stdin, http(s):// URLs")
    except FetchError as exc:
        msg = f"Could not fetch {exc.url}"
        if exc.status_code:
            msg += f" (HTTP {exc.status_code})"
        if exc.status_code == 403:
            msg += "; the site refuses automated requests; save the page and pass the file"
        _fail(msg)
    except (ParseError, SourceError) as exc:
        _fail(str(exc))


def _document_dict(document: Document) -> dict:
    return {
        "sections": [
            {
                "label": section.label,
                "has_border": section.has_border,
                "lines": [
                    {
                        "kind": line.kind.name.lower(),
                        "text": line.text,
                        "inline_after_label": line.is_inline_after_label,
                    }
                    for line in section.lines
                ],
            }
            for section in document.sections
        ]
    }


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress to stderr.")
def main(verbose: bool) -> None:
    """Render plain-text chord charts as aligned chord/lyric sheets.

    \b
    Markup:
      [verse]  [chorus]*  [/]     section, bordered section, close
      |C    |G   F  |            chord line
      **bold** *italic* _underline_ ~smaller~
      3/4                        time signature
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command()
@click.argument("source")
@click.option("-f", "--format", "fmt", type=click.Choice(renderer_names()), default="text",
              show_default=True, help="Output format.")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Output file path (default: <source-name>.<ext>)")
@click.option("--stdout", is_flag=True, default=False,
              help="Print to stdout instead of writing a file.")
@click.option("--standalone", is_flag=True, default=False,
              help="Emit a complete document (HTML page, or text with a title).")
@click.option("--config", "config_path", default=None, metavar="PATH",
              help="JSON file of render options.")
@click.option("--font-size", type=float, default=None, help="Base font size in px (HTML).")
def render(source: str, fmt: str, output_path: str | None, stdout: bool, standalone: bool,
           config_path: str | None, font_size: float | None) -> None:
    """Render the chart at SOURCE (file path, '-' or URL)."""
    # --- Options ---
    options = RenderOptions()
    if config_path:
        try:
            options = load_options(config_path)
        except ConfigError as exc:
            _fail(str(exc))
    if font_size is not None:
        if font_size <= 0:
            _fail("--font-size must be positive")
        options = replace(options, font_size=font_size)

    # --- Load + parse ---
    song = _load_chart(source)
    sheet = layout_document(parse_document(song.music_text))
    logger.debug(f"Laid out {len(sheet.sections)} section(s) from {source}")

    # --- Render ---
    renderer = get_renderer(fmt, options, standalone=standalone)
    output = renderer.render(sheet, title=song.title)

    # --- Output ---
    if stdout:
        click.echo(output, nl=False)
        return

    dest = Path(output_path) if output_path else Path(
        f"{song.slug or 'chart'}.{renderer.extension}"
    )
    dest.write_text(output, encoding="utf-8")
    click.echo(f"Written to {dest}")


@main.command("inspect")
@click.argument("source")
def inspect_chart(source: str) -> None:
    """Print the parsed structure of the chart at SOURCE as JSON."""
    song = _load_chart(source)
    click.echo(json.dumps(_document_dict(parse_document(song.music_text)), indent=2))
