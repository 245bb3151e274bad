import pytest

from chartsheet.models import ChordGlyph, ChordToken, Plain, TimeSignatureGlyph, TimeSignatureToken
from chartsheet.timesig import compose_time_signatures, find_time_signatures

# ---------------------------------------------------------------------------
# find_time_signatures
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("chord_line", [False, True])
def test_standalone_time_signature(chord_line):
    assert find_time_signatures("3/4", chord_line) == [TimeSignatureToken("3", "4")]


@pytest.mark.parametrize("chord_line", [False, True])
def test_slash_chord_is_not_a_time_signature(chord_line):
    assert find_time_signatures("Bb/D", chord_line) == []
    assert find_time_signatures("|D7/9  |G#6/4|", chord_line) == []


def test_two_digit_parts():
    assert find_time_signatures("in 12/8 feel") == [TimeSignatureToken("12", "8")]
    assert find_time_signatures("11/16") == [TimeSignatureToken("11", "16")]


@pytest.mark.parametrize("text", ["120/4", "3/456", "x100/10"])
def test_longer_numbers_are_not_time_signatures(text):
    assert find_time_signatures(text) == []


@pytest.mark.parametrize("chord_line", [False, True])
def test_non_ascii_digits_are_not_time_signatures(chord_line):
    assert find_time_signatures("swing in ٣/٤ time", chord_line=chord_line) == []
    assert find_time_signatures("٣3/4") == [TimeSignatureToken("3", "4")]


def test_following_note_letter_excluded_outside_chord_lines():
    assert find_time_signatures("3/4G") == []
    assert find_time_signatures("3/4G", chord_line=True) == [TimeSignatureToken("3", "4")]


def test_time_signature_text():
    assert TimeSignatureToken("6", "8").text == "6/8"
    assert TimeSignatureGlyph(TimeSignatureToken("12", "8")).width == 2


# ---------------------------------------------------------------------------
# compose_time_signatures
# ---------------------------------------------------------------------------


def test_compose_lyrics_line():
    assert compose_time_signatures("Let's swing in 3/4 time") == [
        Plain("Let's swing in "),
        TimeSignatureGlyph(TimeSignatureToken(top="3", bottom="4")),
        Plain(" time"),
    ]


def test_compose_lyrics_line_formats_segments():
    items = compose_time_signatures("**4/4** now")
    assert items[0] == Plain("**")
    assert items[1] == TimeSignatureGlyph(TimeSignatureToken("4", "4"))
    assert items[2] == Plain("** now")


def test_compose_chord_line_routes_segments_through_chords():
    assert compose_time_signatures("|3/4 Asus4 |G |", chord_line=True) == [
        Plain("|"),
        TimeSignatureGlyph(TimeSignatureToken("3", "4")),
        Plain(" "),
        ChordGlyph(ChordToken("A", "sus4")),
        Plain(" |G |"),
    ]


def test_compose_without_time_signature():
    assert compose_time_signatures("no meter here") == [Plain("no meter here")]
    assert compose_time_signatures("") == []
