"""HTML rendering, built as a BeautifulSoup tree.

Output structure::

    <div class="chart-sheet">                      monospace, tab-size
      <div class="section bordered">               border box, optional
        <div class="section-label">chorus</div>
        <div class="line chord-line">...</div>     white-space: pre
        <div class="line lyrics-line">...</div>
        <div class="line empty"></div>             fixed-height spacer
      </div>
    </div>

A chord glyph is an invisible copy of the full chord text, which holds the
chord's width in the line, with the visible chord drawn over it from the
same left edge::

    <span class="chord">
      <span class="chord-reserve">Asus4</span>
      <span class="chord-overlay">A<sup class="chord-suffix">sus4</sup></span>
    </span>
"""

from bs4 import BeautifulSoup, Tag

from ..models import (
    Bold,
    ChordGlyph,
    Italic,
    LineItem,
    LineKind,
    Plain,
    RenderedLine,
    RenderedSection,
    Sheet,
    Shrink,
    TimeSignatureGlyph,
    Underline,
)
from .base import Renderer

_PAGE = (
    "<!DOCTYPE html>"
    '<html><head><meta charset="utf-8"/><title></title></head>'
    "<body></body></html>"
)

_LINE_CLASSES = {
    LineKind.CHORD: "line chord-line",
    LineKind.LYRICS: "line lyrics-line",
    LineKind.EMPTY: "line empty",
}


class HtmlRenderer(Renderer):
    name = "html"
    extension = "html"

    def render(self, sheet: Sheet, title: str | None = None) -> str:
        if self.standalone:
            soup = BeautifulSoup(_PAGE, "html.parser")
            soup.title.string = title or "Chord chart"
            soup.body.append(self._render_sheet(soup, sheet))
        else:
            soup = BeautifulSoup("", "html.parser")
            soup.append(self._render_sheet(soup, sheet))
        return str(soup)

    # ------------------------------------------------------------------
    # Tree building
    # ------------------------------------------------------------------

    def _render_sheet(self, soup: BeautifulSoup, sheet: Sheet) -> Tag:
        opts = self.options
        root = soup.new_tag(
            "div",
            attrs={
                "class": "chart-sheet",
                "style": (
                    f"font-family: monospace; font-size: {opts.font_size:g}px; "
                    f"tab-size: {opts.tab_size}"
                ),
            },
        )
        for section in sheet.sections:
            root.append(self._render_section(soup, section))
        return root

    def _render_section(self, soup: BeautifulSoup, section: RenderedSection) -> Tag:
        div = soup.new_tag("div", attrs={"class": "section"})
        if section.has_border:
            # negative side margins keep the content in the same columns as
            # unbordered sections
            div["class"] = "section bordered"
            div["style"] = (
                "border: 1px solid #d4d4d8; border-radius: 6px; "
                "margin: 0.5em -0.75em; padding: 0.25em 0.75em"
            )

        if section.label:
            label = soup.new_tag(
                "div",
                attrs={
                    "class": "section-label",
                    "style": (
                        f"font-size: {self.options.font_size * self.options.label_scale:g}px; "
                        "text-transform: uppercase; letter-spacing: 0.05em; color: #71717a"
                    ),
                },
            )
            label.string = section.label
            div.append(label)

        for line in section.lines:
            div.append(self._render_line(soup, line))
        return div

    def _render_line(self, soup: BeautifulSoup, line: RenderedLine) -> Tag:
        div = soup.new_tag("div", attrs={"class": _LINE_CLASSES[line.kind]})
        if line.kind == LineKind.EMPTY:
            div["style"] = f"height: {self.options.empty_line_height:g}em"
            return div

        div["style"] = "white-space: pre"
        if line.kind == LineKind.CHORD:
            div["style"] += "; color: #2563eb; font-weight: 600"
        for item in line.items:
            div.append(self._render_item(soup, item))
        return div

    def _render_item(self, soup: BeautifulSoup, item: LineItem):
        if isinstance(item, Plain):
            return item.text
        if isinstance(item, ChordGlyph):
            return self._render_chord(soup, item)
        if isinstance(item, TimeSignatureGlyph):
            return self._render_time_signature(soup, item)

        if isinstance(item, Bold):
            tag = soup.new_tag("strong")
        elif isinstance(item, Italic):
            tag = soup.new_tag("em")
        elif isinstance(item, Underline):
            tag = soup.new_tag(
                "span",
                attrs={
                    "class": "underline",
                    "style": "text-decoration: underline; text-underline-offset: 2px",
                },
            )
        elif isinstance(item, Shrink):
            tag = soup.new_tag(
                "span",
                attrs={"class": "smaller", "style": f"font-size: {self.options.shrink_scale:g}em"},
            )
        else:
            raise TypeError(f"Cannot render {type(item).__name__}")

        for child in item.children:
            tag.append(self._render_item(soup, child))
        return tag

    def _render_chord(self, soup: BeautifulSoup, glyph: ChordGlyph) -> Tag:
        opts = self.options
        chord = soup.new_tag(
            "span", attrs={"class": "chord", "style": "position: relative; display: inline-block"}
        )

        reserve = soup.new_tag(
            "span", attrs={"class": "chord-reserve", "style": "visibility: hidden"}
        )
        reserve.string = glyph.token.original_text
        chord.append(reserve)

        overlay = soup.new_tag(
            "span",
            attrs={
                "class": "chord-overlay",
                "style": "position: absolute; left: 0; top: 0; white-space: nowrap",
            },
        )
        overlay.append(glyph.token.root)
        suffix = soup.new_tag(
            "sup",
            attrs={
                "class": "chord-suffix",
                "style": (
                    f"font-size: {opts.suffix_scale:g}em; "
                    f"vertical-align: {opts.suffix_raise:g}em; line-height: 0"
                ),
            },
        )
        suffix.string = glyph.token.suffix
        overlay.append(suffix)
        chord.append(overlay)
        return chord

    def _render_time_signature(self, soup: BeautifulSoup, glyph: TimeSignatureGlyph) -> Tag:
        stack = soup.new_tag(
            "span",
            attrs={
                "class": "time-signature",
                "style": (
                    "display: inline-flex; flex-direction: column; "
                    "vertical-align: middle; text-align: center; line-height: 1; "
                    "font-weight: 700"
                ),
                "aria-label": glyph.token.text,
            },
        )
        for part, value in (("ts-top", glyph.token.top), ("ts-bottom", glyph.token.bottom)):
            row = soup.new_tag("span", attrs={"class": part})
            row.string = value
            stack.append(row)
        return stack
