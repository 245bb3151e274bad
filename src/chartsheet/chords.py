"""Chord superscript transform for chord lines.

Each chord symbol with a quality suffix is split into a root and a suffix::

    Asus4  → root "A",   suffix "sus4"
    C#m7   → root "C#m", suffix "7"
    Fmaj7  → root "F",   suffix "maj7"   ("maj" is never a bare minor "m")

and emitted as a :class:`~chartsheet.models.ChordGlyph`, which draws the
suffix small and raised inside the footprint of the original text.  The
root and suffix always add up to the matched text, character for
character, so column alignment with the lyric line below is kept.

Chords without a suffix ("C", "Am", "Bb/D") are left as plain text.
"""

import re

from .formatting import format_inline
from .models import ChordGlyph, ChordToken, LineItem

# Order matters inside the suffix group: "sus4" before "sus", "maj7" before
# "maj".  The delta accepts both U+0394 and U+2206.
CHORD_TOKEN_RE = re.compile(
    r"(?P<root>[A-G][#b]?(?:m(?!aj))?)"
    r"(?P<suffix>sus[24]?|maj7?|min7?|dim7?|aug|add[0-9]+|7|9|11|13|6|M7|[Δ∆]7?)"
)


def split_chord(symbol: str) -> ChordToken | None:
    """Split a whole chord *symbol* into a :class:`ChordToken`.

    Returns ``None`` when *symbol* is not exactly one chord with a suffix.
    """
    m = CHORD_TOKEN_RE.fullmatch(symbol)
    if not m:
        return None
    return ChordToken(root=m.group("root"), suffix=m.group("suffix"))


def find_chord_tokens(text: str) -> list[ChordToken]:
    """Return every chord-with-suffix in *text*, left to right."""
    return [
        ChordToken(root=m.group("root"), suffix=m.group("suffix"))
        for m in CHORD_TOKEN_RE.finditer(text)
    ]


def transform_chords(text: str) -> list[LineItem]:
    """Turn a chord-line segment into chord glyphs and formatted spans.

    Text between chord matches (all of it, when nothing matches) goes
    through :func:`~chartsheet.formatting.format_inline`.
    """
    items: list[LineItem] = []
    pos = 0
    for m in CHORD_TOKEN_RE.finditer(text):
        if m.start() > pos:
            items.extend(format_inline(text[pos : m.start()]))
        items.append(ChordGlyph(ChordToken(root=m.group("root"), suffix=m.group("suffix"))))
        pos = m.end()
    if pos < len(text):
        items.extend(format_inline(text[pos:]))
    return items
