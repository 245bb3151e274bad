"""Time signature composer.

A bare ``N/M`` (one or two digits each side) becomes a
:class:`~chartsheet.models.TimeSignatureGlyph`, drawn as two stacked rows.
Slash chords are not time signatures: a match may not follow a note letter
or accidental (``Bb/D``, ``D7/9``), and outside chord lines it may not be
followed by a note letter either.  Neither side may run into more digits,
so ``120/4`` and ``3/456`` are left alone.
"""

import re

from .chords import transform_chords
from .formatting import format_inline
from .models import LineItem, TimeSignatureGlyph, TimeSignatureToken

CHORD_LINE_TIME_SIGNATURE_RE = re.compile(r"(?<![A-G#b0-9])([0-9]{1,2})/([0-9]{1,2})(?![0-9])")
TIME_SIGNATURE_RE = re.compile(r"(?<![A-G#b0-9])([0-9]{1,2})/([0-9]{1,2})(?![0-9A-G])")


def find_time_signatures(text: str, chord_line: bool = False) -> list[TimeSignatureToken]:
    pattern = CHORD_LINE_TIME_SIGNATURE_RE if chord_line else TIME_SIGNATURE_RE
    return [TimeSignatureToken(top=m.group(1), bottom=m.group(2)) for m in pattern.finditer(text)]


def compose_time_signatures(text: str, chord_line: bool = False) -> list[LineItem]:
    """Split *text* at each time signature and lay out the pieces.

    On chord lines the pieces between matches go through the chord
    superscript transform; elsewhere they go through inline formatting.
    """
    pattern = CHORD_LINE_TIME_SIGNATURE_RE if chord_line else TIME_SIGNATURE_RE
    route = transform_chords if chord_line else format_inline

    items: list[LineItem] = []
    pos = 0
    for m in pattern.finditer(text):
        if m.start() > pos:
            items.extend(route(text[pos : m.start()]))
        items.append(TimeSignatureGlyph(TimeSignatureToken(top=m.group(1), bottom=m.group(2))))
        pos = m.end()
    if pos < len(text):
        items.extend(route(text[pos:]))
    return items
