"""Monospace text rendering.

Each character occupies one cell, so a chord keeps its column simply by
being written out in full: the reserve of a :class:`ChordGlyph` is its own
text.  Emphasis markers are dropped, time signatures are written ``N/M``,
labels are upper-cased and bordered sections are boxed::

    +-------------+
    | CHORUS      |
    | |Am  |Dm  | |
    | Hello       |
    +-------------+
"""

from ..formatting import plain_text
from ..models import ChordGlyph, LineItem, LineKind, RenderedSection, Sheet, TimeSignatureGlyph
from .base import Renderer


def item_text(item: LineItem) -> str:
    if isinstance(item, ChordGlyph):
        return item.token.original_text
    if isinstance(item, TimeSignatureGlyph):
        return item.token.text
    return plain_text([item])


class TextRenderer(Renderer):
    name = "text"
    extension = "txt"

    def render(self, sheet: Sheet, title: str | None = None) -> str:
        out: list[str] = []
        if self.standalone and title:
            out.extend([title, "=" * len(title), ""])
        for section in sheet.sections:
            out.extend(self._render_section(section))
        return "\n".join(out) + "\n"

    def _render_section(self, section: RenderedSection) -> list[str]:
        rows: list[str] = []
        if section.label:
            rows.append(section.label.upper())
        for line in section.lines:
            if line.kind == LineKind.EMPTY:
                rows.append("")
                continue
            text = "".join(item_text(item) for item in line.items)
            rows.append(text.expandtabs(self.options.tab_size).rstrip())

        if not section.has_border:
            return rows

        width = max((len(r) for r in rows), default=0)
        rule = "+" + "-" * (width + 2) + "+"
        return [rule, *(f"| {r.ljust(width)} |" for r in rows), rule]
