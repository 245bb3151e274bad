from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, Union


class LineKind(Enum):
    CHORD = auto()  # chord line, aligned over the lyric below it
    LYRICS = auto()
    EMPTY = auto()  # blank or whitespace only


@dataclass(frozen=True)
class Line:
    """One physical line of a chart.

    ``text`` is the raw line exactly as written (no trimming), except for
    lines flagged ``is_inline_after_label``, which hold the content that
    followed a section header on the same line: ``[chorus] Hello`` gives
    ``Line(LineKind.LYRICS, "Hello", is_inline_after_label=True)``.
    """

    kind: LineKind
    text: str
    is_inline_after_label: bool = False


@dataclass(frozen=True)
class Section:
    """A labelled or unlabelled run of lines, optionally boxed with a border."""

    label: str | None = None  # e.g. "chorus", None for unlabelled passages
    has_border: bool = False
    lines: tuple[Line, ...] = ()


@dataclass(frozen=True)
class Document:
    """Parse result for one block of chart text."""

    sections: tuple[Section, ...] = ()


# ---------------------------------------------------------------------------
# Inline spans
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Plain:
    text: str


@dataclass(frozen=True)
class _Styled:
    children: tuple["FormattedSpan", ...] = ()

    marker: ClassVar[str] = ""


@dataclass(frozen=True)
class Bold(_Styled):
    marker: ClassVar[str] = "**"


@dataclass(frozen=True)
class Italic(_Styled):
    marker: ClassVar[str] = "*"


@dataclass(frozen=True)
class Underline(_Styled):
    marker: ClassVar[str] = "_"


@dataclass(frozen=True)
class Shrink(_Styled):
    marker: ClassVar[str] = "~"


FormattedSpan = Union[Plain, Bold, Italic, Underline, Shrink]


# ---------------------------------------------------------------------------
# Chord and time signature tokens
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChordToken:
    """A chord symbol split into its root and its quality suffix.

    ``root`` carries the note letter, accidental and a bare minor ``m``
    ("C#m"); ``suffix`` carries the quality ("7", "sus4", "maj7").
    """

    root: str
    suffix: str

    @property
    def original_text(self) -> str:
        return self.root + self.suffix


@dataclass(frozen=True)
class TimeSignatureToken:
    top: str
    bottom: str

    @property
    def text(self) -> str:
        return f"{self.top}/{self.bottom}"


# ---------------------------------------------------------------------------
# Layout instructions and the render tree
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChordGlyph:
    """Draw a chord with its suffix shrunk and raised.

    A renderer reserves horizontal space equal to :attr:`width` (the width of
    the original chord text at normal size), draws the root at the baseline
    from the reserve's left edge, and draws the suffix right after the root
    at reduced scale, raised.  The reserve keeps the chord's column footprint
    identical to the unstyled text, so alignment with the lyric line below is
    unaffected.
    """

    token: ChordToken

    @property
    def width(self) -> int:
        return len(self.token.original_text)


@dataclass(frozen=True)
class TimeSignatureGlyph:
    """Draw a time signature as two stacked rows of digits."""

    token: TimeSignatureToken

    @property
    def width(self) -> int:
        return max(len(self.token.top), len(self.token.bottom))


LineItem = Union[Plain, Bold, Italic, Underline, Shrink, ChordGlyph, TimeSignatureGlyph]


@dataclass(frozen=True)
class RenderedLine:
    kind: LineKind
    items: tuple[LineItem, ...] = ()
    is_inline_after_label: bool = False


@dataclass(frozen=True)
class RenderedSection:
    label: str | None = None
    has_border: bool = False
    lines: tuple[RenderedLine, ...] = ()


@dataclass(frozen=True)
class Sheet:
    """Render tree for a whole document, ready for a renderer."""

    sections: tuple[RenderedSection, ...] = ()
