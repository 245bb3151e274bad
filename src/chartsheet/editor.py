"""Authoring session behind a chart editor with a live preview.

The host UI owns the widgets; :class:`EditorSession` owns the state they
show.  Every change to the source re-parses and re-lays-out the whole chart
synchronously, so the preview is always in step with the text.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .layout import layout_document
from .models import Document, Sheet
from .parser import parse_document

PLACEHOLDER = (
    "Enter chord chart...\n"
    "\n"
    "Use | for chord lines, e.g.:\n"
    "|C      |G   F   |C      |\n"
    "I see a bad moon arising\n"
    "\n"
    "Use [section] for labels, [section]* for borders, [/] to close\n"
    "Use **bold**, *italic*, _underline_ and ~smaller~ text"
)

PREVIEW_PLACEHOLDER = "Preview will appear here..."


class ViewMode(Enum):
    EDIT = "edit"
    SPLIT = "split"
    PREVIEW = "preview"

    @property
    def shows_source(self) -> bool:
        return self in (ViewMode.EDIT, ViewMode.SPLIT)

    @property
    def shows_preview(self) -> bool:
        return self in (ViewMode.PREVIEW, ViewMode.SPLIT)


@dataclass(frozen=True)
class ScrollMetrics:
    """Scroll geometry of one pane, in pixels."""

    scroll_top: float
    scroll_height: float
    client_height: float

    @property
    def max_scroll(self) -> float:
        return self.scroll_height - self.client_height


class EditorSession:
    """Source text, view mode and fullscreen flag of one editor.

    ``on_change`` is called with the new source after every edit;
    ``on_fullscreen_change`` with the new flag after every toggle.
    """

    def __init__(
        self,
        source: str = "",
        on_change: Callable[[str], None] | None = None,
        on_fullscreen_change: Callable[[bool], None] | None = None,
    ):
        self.view_mode = ViewMode.SPLIT
        self.fullscreen = False
        self._on_change = on_change
        self._on_fullscreen_change = on_fullscreen_change
        self._source = ""
        self.document = Document()
        self.sheet: Sheet | None = None
        self._recompute(source)

    @property
    def source(self) -> str:
        return self._source

    def _recompute(self, source: str) -> None:
        self._source = source
        self.document = parse_document(source)
        # An empty editor shows PREVIEW_PLACEHOLDER instead of a sheet.
        self.sheet = layout_document(self.document) if source else None

    def set_source(self, source: str) -> None:
        self._recompute(source)
        if self._on_change:
            self._on_change(source)

    def insert_tab(self, selection_start: int, selection_end: int) -> int:
        """Replace the selection with a tab character; return the new cursor."""
        source = self._source
        self.set_source(source[:selection_start] + "\t" + source[selection_end:])
        return selection_start + 1

    def handle_key(self, key: str, selection_start: int = 0, selection_end: int = 0) -> int | None:
        """Handle a key press in the source pane.

        Tab inserts a literal tab instead of moving focus and returns the
        new cursor position.  Escape leaves fullscreen.  Returns None for
        keys the host should process itself.
        """
        if key == "Tab":
            return self.insert_tab(selection_start, selection_end)
        if key == "Escape" and self.fullscreen:
            self.set_fullscreen(False)
        return None

    def set_view_mode(self, mode: ViewMode | str) -> None:
        self.view_mode = ViewMode(mode)

    def set_fullscreen(self, fullscreen: bool) -> None:
        self.fullscreen = fullscreen
        if self._on_fullscreen_change:
            self._on_fullscreen_change(fullscreen)

    def toggle_fullscreen(self) -> bool:
        self.set_fullscreen(not self.fullscreen)
        return self.fullscreen

    def sync_scroll(self, source: ScrollMetrics, preview: ScrollMetrics) -> float | None:
        """Return the preview's scroll top matching the source pane's position.

        Only the split view syncs, and only from source to preview.  A source
        pane with nothing to scroll counts as scrolled to the top, and a
        preview that cannot scroll stays at the top.
        """
        if self.view_mode != ViewMode.SPLIT:
            return None
        ratio = source.scroll_top / source.max_scroll if source.max_scroll > 0 else 0.0
        return max(0.0, ratio * preview.max_scroll)
