"""Chart markup parser: raw text → :class:`~chartsheet.models.Document`.

Implements the two leaf stages of the pipeline:

  1. classify_line()  : CLOSE / HEADER / EMPTY / CHORD / LYRICS
  2. parse_document() : group classified lines into sections

Markup recognised here::

    [verse]            section header
    [chorus]*          section header, boxed with a border
    [intro] |Am |G |   header with inline content on the same line
    [/]                close the current section
    |C    |G   F  |    chord line (leading pipe, or a |-delimited chord run)
    anything else      lyrics

Classification is a heuristic, not a grammar: the checks run in a fixed
order and the first one that matches wins.  A lyric line containing a pipe
followed by a note letter ("stay |A while") is read as a chord line.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from .models import Document, Line, LineKind, Section

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Regexes
# ---------------------------------------------------------------------------

CLOSE_MARKER = "[/]"

# [label], [label]*, either optionally followed by inline content.
HEADER_RE = re.compile(r"^\[([^\]]+)\](\*)?(?:\s+(.+))?$")

# One chord-like token: note letter, accidental, optional quality, digit.
_CHORD_WORD = r"[A-G][#b]?(?:m|maj|min|dim|aug|sus|add|7|9|11|13|M)?[0-9]?"

# A pipe followed by a run of chord-like tokens, "break" allowed as a filler.
#   |Am  G  break  F|
CHORD_SEQUENCE_RE = re.compile(
    rf"\|{_CHORD_WORD}(?:\s+(?:break|{_CHORD_WORD}))*\s*\|?"
)


# ---------------------------------------------------------------------------
# LineType
# ---------------------------------------------------------------------------


class LineType(Enum):
    CLOSE = auto()  # [/], structural signal only
    HEADER = auto()  # [label] or [label]*, structural signal only
    EMPTY = auto()  # empty or whitespace only
    CHORD = auto()  # chord line
    LYRICS = auto()  # everything else


@dataclass(frozen=True)
class Header:
    """A parsed section header line."""

    label: str
    has_border: bool = False
    inline_content: str | None = None


# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------


def parse_header(line: str) -> Header | None:
    """Return the :class:`Header` on *line*, or ``None`` if it is not one.

    ``[/]`` is not a header even though it matches the bracket pattern;
    callers must test :func:`is_close_line` first.
    """
    m = HEADER_RE.match(line.strip())
    if not m:
        return None
    return Header(label=m.group(1), has_border=m.group(2) == "*", inline_content=m.group(3))


def is_close_line(line: str) -> bool:
    return line.strip() == CLOSE_MARKER


def is_header_line(line: str) -> bool:
    return parse_header(line) is not None


def is_empty_line(line: str) -> bool:
    return line.strip() == ""


def is_chord_line(line: str) -> bool:
    """True for a line that starts with ``|`` or holds a ``|``-delimited chord run."""
    if line.lstrip().startswith("|"):
        return True
    return CHORD_SEQUENCE_RE.search(line) is not None


# First match wins.  The order is part of the markup's behaviour: "[/]"
# would otherwise read as a header labelled "/", and a blank line holding
# only whitespace must never reach the chord check.
_CHECKS: list[tuple[LineType, Callable[[str], bool]]] = [
    (LineType.CLOSE, is_close_line),
    (LineType.HEADER, is_header_line),
    (LineType.EMPTY, is_empty_line),
    (LineType.CHORD, is_chord_line),
]

_LINE_KINDS = {
    LineType.EMPTY: LineKind.EMPTY,
    LineType.CHORD: LineKind.CHORD,
    LineType.LYRICS: LineKind.LYRICS,
}


def classify_line(line: str) -> LineType:
    """Classify a single physical line of chart text.

    Pure function of *line*; neighbouring lines are never consulted.
    """
    for line_type, predicate in _CHECKS:
        if predicate(line):
            return line_type
    return LineType.LYRICS


def _content_kind(text: str) -> LineKind:
    """Kind for inline content that followed a header: chord or lyrics only."""
    return LineKind.CHORD if is_chord_line(text) else LineKind.LYRICS


# ---------------------------------------------------------------------------
# Section building
# ---------------------------------------------------------------------------


class _SectionAccumulator:
    """The section currently being filled while walking the lines."""

    def __init__(self, label: str | None = None, has_border: bool = False):
        self.label = label
        self.has_border = has_border
        self.lines: list[Line] = []

    def is_empty(self) -> bool:
        return not self.lines and not self.label

    def freeze(self) -> Section:
        return Section(label=self.label, has_border=self.has_border, lines=tuple(self.lines))


def parse_document(text: str) -> Document:
    """Parse chart *text* into a :class:`~chartsheet.models.Document`.

    Algorithm
    ---------
    1. Split *text* on ``\\n`` and classify each line.
    2. A HEADER closes the current section (if it holds a label or any
       lines) and opens a new one with the header's label and border flag.
       Inline content after the header becomes the first line of the new
       section, flagged ``is_inline_after_label``.
    3. A CLOSE closes the current section (if non-empty) and opens a new
       unlabelled, unbordered one.
    4. EMPTY, CHORD and LYRICS lines are appended to the current section
       with their raw text.
    5. At end of input the current section is emitted if non-empty.

    Never raises: any text parses.  A section that is never closed runs to
    the end of the document.
    """
    sections: list[Section] = []
    current = _SectionAccumulator()

    for raw in text.split("\n"):
        lt = classify_line(raw)

        if lt == LineType.CLOSE:
            if not current.is_empty():
                sections.append(current.freeze())
            current = _SectionAccumulator()
            continue

        if lt == LineType.HEADER:
            header = parse_header(raw)
            if not current.is_empty():
                sections.append(current.freeze())
            current = _SectionAccumulator(label=header.label, has_border=header.has_border)
            if header.inline_content:
                current.lines.append(
                    Line(
                        kind=_content_kind(header.inline_content),
                        text=header.inline_content,
                        is_inline_after_label=True,
                    )
                )
            continue

        current.lines.append(Line(kind=_LINE_KINDS[lt], text=raw))

    if not current.is_empty():
        sections.append(current.freeze())

    logger.debug(f"Parsed {len(sections)} section(s) from {len(text)} characters")
    return Document(sections=tuple(sections))


def source_lines(document: Document) -> list[str]:
    """Return the raw text of every non-inline line, in document order.

    For any input, this equals the input's lines minus header and close
    lines.
    """
    return [
        line.text
        for section in document.sections
        for line in section.lines
        if not line.is_inline_after_label
    ]
