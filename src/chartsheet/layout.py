"""Document → render tree.

Every line is laid out on its own, from its text and kind alone:

- EMPTY lines carry no items (renderers draw a spacer).
- CHORD lines: time signatures first, then the chord superscript transform
  on the text between them, then inline formatting on the text between
  chords.
- LYRICS lines: time signatures first, then inline formatting.
"""

from .models import Document, Line, LineKind, RenderedLine, RenderedSection, Sheet
from .parser import parse_document
from .timesig import compose_time_signatures


def layout_line(line: Line) -> RenderedLine:
    if line.kind == LineKind.EMPTY:
        items = ()
    else:
        items = tuple(compose_time_signatures(line.text, chord_line=line.kind == LineKind.CHORD))
    return RenderedLine(kind=line.kind, items=items, is_inline_after_label=line.is_inline_after_label)


def layout_document(document: Document) -> Sheet:
    return Sheet(
        sections=tuple(
            RenderedSection(
                label=section.label,
                has_border=section.has_border,
                lines=tuple(layout_line(line) for line in section.lines),
            )
            for section in document.sections
        )
    )


def layout_text(text: str) -> Sheet:
    """Parse and lay out chart *text* in one step."""
    return layout_document(parse_document(text))
