"""Inline emphasis markers → tree of styled spans.

Markers::

    **bold**   *italic*   _underline_   ~smaller~

``~smaller~`` blocks are resolved first, as an outer pass; the text inside
and around them is then scanned for bold, italic and underline.  So an
underline can sit inside a shrink (``~When _you_ look~``) but a shrink can
never sit inside the others.  Bold, italic and underline do not nest.

Unpaired markers stay in the text as literal characters.
"""

import re

from .models import Bold, FormattedSpan, Italic, Plain, Shrink, Underline

SHRINK_RE = re.compile(r"~([^~]+)~")

# Tried in this order when two markers start at the same position, so
# "**x**" is bold rather than an italic "*x" followed by a stray "*".
_INNER_MARKERS: list[tuple[re.Pattern, type]] = [
    (re.compile(r"\*\*(.+?)\*\*"), Bold),
    (re.compile(r"\*([^*]+)\*"), Italic),
    (re.compile(r"_([^_]+)_"), Underline),
]


def _earliest_inner_match(
    text: str, pos: int, pending: list[re.Match | None]
) -> tuple[re.Match, type] | None:
    """Earliest marker match at or after *pos*.

    *pending* holds the last match found for each marker and is updated in
    place; a pattern is searched again only once *pos* has passed its
    cached match, so each marker scans the text once overall.
    """
    best = None
    for i, (pattern, span_type) in enumerate(_INNER_MARKERS):
        m = pending[i]
        if m is not None and m.start() < pos:
            m = pending[i] = pattern.search(text, pos)
        if m and (best is None or m.start() < best[0].start()):
            best = (m, span_type)
    return best


def format_emphasis(text: str) -> list[FormattedSpan]:
    """Resolve bold, italic and underline markers in *text*.

    Scans left to right; each pass takes the earliest-starting match among
    the three markers, emits the text before it as :class:`Plain`, and
    continues after it.
    """
    spans: list[FormattedSpan] = []
    pending = [pattern.search(text) for pattern, _ in _INNER_MARKERS]
    pos = 0
    while pos < len(text):
        found = _earliest_inner_match(text, pos, pending)
        if found is None:
            break
        m, span_type = found
        if m.start() > pos:
            spans.append(Plain(text[pos : m.start()]))
        spans.append(span_type(children=(Plain(m.group(1)),)))
        pos = m.end()
    if pos < len(text):
        spans.append(Plain(text[pos:]))
    return spans


def format_inline(text: str) -> list[FormattedSpan]:
    """Resolve every emphasis marker in *text* into a list of spans.

    Example::

        format_inline("This **rocks** and ~_swings_ low~")
        # [Plain("This "), Bold(Plain("rocks")), Plain(" and "),
        #  Shrink(Underline(Plain("swings")), Plain(" low"))]
    """
    spans: list[FormattedSpan] = []
    pos = 0
    for m in SHRINK_RE.finditer(text):
        spans.extend(format_emphasis(text[pos : m.start()]))
        spans.append(Shrink(children=tuple(format_emphasis(m.group(1)))))
        pos = m.end()
    spans.extend(format_emphasis(text[pos:]))
    return spans


def plain_text(spans) -> str:
    """Visible text of *spans*, markers removed."""
    parts = []
    for span in spans:
        if isinstance(span, Plain):
            parts.append(span.text)
        else:
            parts.append(plain_text(span.children))
    return "".join(parts)


def to_markup(spans) -> str:
    """Re-emit *spans* as marked-up text.

    ``to_markup(format_inline(text)) == text`` for any *text*.
    """
    parts = []
    for span in spans:
        if isinstance(span, Plain):
            parts.append(span.text)
        else:
            parts.append(f"{span.marker}{to_markup(span.children)}{span.marker}")
    return "".join(parts)
