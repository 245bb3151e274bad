from chartsheet.models import Document, Line, LineKind, Section
from chartsheet.parser import (
    Header,
    LineType,
    classify_line,
    is_chord_line,
    parse_document,
    parse_header,
    source_lines,
)

# ---------------------------------------------------------------------------
# classify_line
# ---------------------------------------------------------------------------


def test_classify_close_marker():
    assert classify_line("[/]") == LineType.CLOSE
    assert classify_line("   [/]  ") == LineType.CLOSE


def test_classify_close_wins_over_header():
    # "[/]" also fits the header pattern with label "/"
    assert parse_header("[/]") == Header(label="/")
    assert classify_line("[/]") == LineType.CLOSE


def test_classify_header():
    assert classify_line("[verse]") == LineType.HEADER
    assert classify_line("[chorus]*") == LineType.HEADER
    assert classify_line("  [intro] |Am |G |") == LineType.HEADER


def test_classify_header_wins_over_chord():
    assert classify_line("[intro]* |Am |G |") == LineType.HEADER


def test_classify_empty():
    assert classify_line("") == LineType.EMPTY
    assert classify_line("   \t ") == LineType.EMPTY


def test_classify_leading_pipe_is_chord():
    assert classify_line("|C      |G   F   |C      |") == LineType.CHORD
    assert classify_line("   |anything goes here") == LineType.CHORD
    assert classify_line("|") == LineType.CHORD


def test_classify_chord_sequence_mid_line():
    assert classify_line("Intro: |Am  G  break  F|") == LineType.CHORD
    assert classify_line("x2 |Cmaj7 |Dm7 |") == LineType.CHORD


def test_classify_lyrics():
    assert classify_line("I see a bad moon arising") == LineType.LYRICS
    assert classify_line("[unclosed header") == LineType.LYRICS


def test_classify_bare_note_words_stay_lyrics():
    # No pipe, so note-letter words are not enough for a chord line
    assert classify_line("A journey in G minor") == LineType.LYRICS


def test_classify_pipe_before_note_letter_is_chord_known_limitation():
    # Heuristic: a lyric with "|A" reads as a chord line.  Kept for
    # compatibility with charts already written against it.
    assert classify_line("stay here |A while") == LineType.CHORD


def test_classify_pipe_before_lowercase_is_lyrics():
    assert classify_line("either | or") == LineType.LYRICS
    assert classify_line("this |am not a chord") == LineType.LYRICS


def test_is_chord_line():
    assert is_chord_line("|Am|Dm|G|C|")
    assert not is_chord_line("Hello")


# ---------------------------------------------------------------------------
# parse_header
# ---------------------------------------------------------------------------


def test_parse_header_plain():
    assert parse_header("[verse]") == Header(label="verse", has_border=False, inline_content=None)


def test_parse_header_border():
    assert parse_header("[chorus]*") == Header(label="chorus", has_border=True)


def test_parse_header_inline_content():
    header = parse_header("[intro]*   |Am |G |")
    assert header.label == "intro"
    assert header.has_border
    assert header.inline_content == "|Am |G |"


def test_parse_header_label_with_spaces():
    assert parse_header("[Verse 1]").label == "Verse 1"


def test_parse_header_rejects_glued_text():
    assert parse_header("[verse]text") is None
    assert parse_header("x [verse]") is None


# ---------------------------------------------------------------------------
# parse_document: scenarios
# ---------------------------------------------------------------------------


def test_unlabelled_chord_and_lyrics():
    doc = parse_document("|C      |G   F   |C      |\nI see a bad moon arising")
    assert doc == Document(
        sections=(
            Section(
                label=None,
                has_border=False,
                lines=(
                    Line(LineKind.CHORD, "|C      |G   F   |C      |"),
                    Line(LineKind.LYRICS, "I see a bad moon arising"),
                ),
            ),
        )
    )


def test_bordered_labelled_section():
    doc = parse_document("[chorus]*\n|Am|Dm|G|C|\nHello")
    assert len(doc.sections) == 1
    section = doc.sections[0]
    assert section.label == "chorus"
    assert section.has_border
    assert [line.kind for line in section.lines] == [LineKind.CHORD, LineKind.LYRICS]


def test_close_marker_starts_fresh_section():
    doc = parse_document("[/]\nPlain text")
    assert doc.sections == (
        Section(label=None, has_border=False, lines=(Line(LineKind.LYRICS, "Plain text"),)),
    )


def test_close_ends_bordered_section():
    doc = parse_document("[chorus]*\nHello\n[/]\nAfter")
    assert len(doc.sections) == 2
    assert doc.sections[0].has_border
    assert doc.sections[1].label is None
    assert not doc.sections[1].has_border
    assert doc.sections[1].lines == (Line(LineKind.LYRICS, "After"),)


def test_inline_content_after_label():
    doc = parse_document("[intro] |Am |G |\nla la")
    lines = doc.sections[0].lines
    assert lines[0] == Line(LineKind.CHORD, "|Am |G |", is_inline_after_label=True)
    assert lines[1] == Line(LineKind.LYRICS, "la la")


def test_inline_lyrics_after_label():
    doc = parse_document("[chorus] Hello there")
    assert doc.sections[0].lines == (
        Line(LineKind.LYRICS, "Hello there", is_inline_after_label=True),
    )


def test_label_only_section_is_kept():
    doc = parse_document("[verse]\n[chorus]\nHello")
    assert [s.label for s in doc.sections] == ["verse", "chorus"]
    assert doc.sections[0].lines == ()


def test_empty_unlabelled_sections_are_dropped():
    doc = parse_document("[/]\n[/]\n[verse]\nHi")
    assert len(doc.sections) == 1
    assert doc.sections[0].label == "verse"


def test_header_after_lines_closes_section():
    doc = parse_document("one\n[verse]\ntwo")
    assert [s.label for s in doc.sections] == [None, "verse"]


def test_unclosed_section_runs_to_end():
    doc = parse_document("[chorus]*\na\n\nb\n|C|")
    assert len(doc.sections) == 1
    assert len(doc.sections[0].lines) == 4


def test_empty_lines_keep_raw_text():
    doc = parse_document("a\n   \nb")
    assert doc.sections[0].lines[1] == Line(LineKind.EMPTY, "   ")


def test_empty_input():
    doc = parse_document("")
    assert doc.sections == (Section(lines=(Line(LineKind.EMPTY, ""),)),)


def test_trailing_newline_gives_trailing_empty_line():
    doc = parse_document("Hello\n")
    assert doc.sections[0].lines[-1] == Line(LineKind.EMPTY, "")


def test_lines_keep_indentation():
    doc = parse_document("    |C    |G")
    assert doc.sections[0].lines[0].text == "    |C    |G"


# ---------------------------------------------------------------------------
# parse_document: properties
# ---------------------------------------------------------------------------

CHART = """[intro]* |Am  |F   |C   |G   |
[/]
[verse]
|C      |G   F   |C      |
I see a **bad** moon arising
   |C         |G       F  |C    |
I see ~trouble _on_ the way~

[chorus]*
|F          |C      |
Don't go around tonight   3/4
[/]
Outro text"""


def test_parse_is_deterministic():
    assert parse_document(CHART) == parse_document(CHART)


def test_source_lines_reproduce_input_minus_markers():
    expected = [
        line
        for line in CHART.split("\n")
        if classify_line(line) not in (LineType.HEADER, LineType.CLOSE)
    ]
    assert source_lines(parse_document(CHART)) == expected


def test_border_only_from_star_header():
    doc = parse_document(CHART)
    assert [(s.label, s.has_border) for s in doc.sections] == [
        ("intro", True),
        ("verse", False),
        ("chorus", True),
        (None, False),
    ]
