import math

import pytest

from music_note.errors import OperatorError, PropertyError
from music_note.models import NO_NOTE, NoteParams
from music_note.note import make_note
from music_note.operations import (
    cmp,
    compare,
    distance,
    enharmonic,
    note_property,
    simplify,
    to_note,
    transpose,
)


def test_to_note_passes_records_through(a4) -> None:
    assert to_note(a4) is a4
    assert to_note(NO_NOTE) is NO_NOTE


def test_to_note_builds_from_names_and_dicts() -> None:
    assert to_note("A4").midi == 69
    assert to_note({"midi": 61, "sharps": False}).name == "Db4"
    assert to_note({"frequency": 440.0}).name == "A4"


def test_to_note_applies_params() -> None:
    params = NoteParams(tuning=432.0, sharps=False)
    assert to_note("A4", params).frequency == 432.0
    assert to_note({"midi": 61}, params).name == "Db4"
    # explicit keys win over params
    assert to_note({"midi": 61, "sharps": True}, params).name == "C#4"


@pytest.mark.parametrize("source", [42, 440.0, None, ["A4"]])
def test_to_note_rejects_other_types(source) -> None:
    assert to_note(source) is NO_NOTE


def test_transpose_midi(a4) -> None:
    result = transpose(a4, 1, "midi")
    assert result.name == "A#4"
    # the source is untouched
    assert a4.name == "A4"


def test_transpose_accepts_names_and_spelling() -> None:
    assert transpose("A4", -2).name == "G4"
    assert transpose("A4", 1, params=NoteParams(sharps=False)).name == "Bb4"


def test_transpose_frequency() -> None:
    result = transpose("A4", 440.0, "frequency")
    assert result.name == "A5"
    assert result.frequency == 880.0


def test_transpose_octave_keeps_spelling() -> None:
    assert transpose("C4", 2, "octave").name == "C6"
    assert transpose("Db4", -1, "octave").name == "Db3"
    assert transpose("C4", 1.0, "octave").name == "C5"


def test_transpose_midi_accepts_whole_float_amounts() -> None:
    assert transpose("A4", 1.0, "midi").name == "A#4"
    assert transpose("A4", -12.0).midi == 57
    assert transpose("A4", 0.5, "midi") is NO_NOTE
    assert transpose("A4", float("nan"), "midi") is NO_NOTE


def test_transpose_octave_with_carry_moves_twelve_semitones() -> None:
    source = make_note(name="Cb4")
    result = transpose(source, 1, "octave")
    assert result.pc == "Cb"
    assert result.midi == source.midi + 12


def test_transpose_invalid_results() -> None:
    assert transpose("G10", 12) is NO_NOTE
    assert transpose("H4", 1) is NO_NOTE
    assert transpose("C4", 0.5, "octave") is NO_NOTE
    assert transpose("A4", -440.0, "frequency") is NO_NOTE


def test_transpose_unknown_property() -> None:
    with pytest.raises(PropertyError):
        transpose("A4", 1, "chroma")


def test_distance() -> None:
    assert distance(make_note(name="C4"), make_note(name="C5"), "midi") == 12
    assert distance("C5", "C4") == -12
    assert distance("C4", "C5", "octave") == 1
    assert distance("C4", "E4", "step") == 2
    assert distance("A4", "A5", "frequency") == pytest.approx(440.0)


def test_distance_chroma_does_not_wrap() -> None:
    assert distance("B4", "C5", "chroma") == -11
    assert distance("C4", "B4", "chroma") == 11


def test_distance_with_invalid_note_is_nan() -> None:
    assert math.isnan(distance("H4", "C4"))
    assert math.isnan(distance("C4", {"midi": 200}))


def test_distance_unknown_property() -> None:
    with pytest.raises(PropertyError):
        distance("C4", "D4", "name")


@pytest.mark.parametrize(
    "op, expected",
    [("lt", True), ("leq", True), ("eq", False), ("neq", True), ("gt", False), ("geq", False)],
)
def test_compare_operators(op, expected) -> None:
    assert compare(op, make_note(name="C4"), make_note(name="D4"), "midi") is expected


def test_compare_by_other_properties() -> None:
    assert compare("eq", "C#4", "Db4")
    assert not compare("eq", "C#4", "Db4", "step")
    assert compare("eq", "C4", "C5", "chroma")


def test_compare_with_invalid_note_is_false() -> None:
    assert compare("lt", "H4", "C4") is False
    assert compare("neq", "C4", "H4") is False


def test_compare_unknown_operator() -> None:
    with pytest.raises(OperatorError):
        compare("cmp", "C4", "D4")


def test_cmp() -> None:
    assert cmp("C4", "D4") == -1
    assert cmp("D4", "D4") == 0
    assert cmp("E4", "D4") == 1
    assert cmp("C5", "B4", "chroma") == -1
    assert cmp("H4", "D4") is None


@pytest.mark.parametrize(
    "name, keep, expected",
    [
        ("C##4", True, "D4"),
        ("Dbb4", True, "C4"),
        ("Fb4", True, "E4"),
        ("C#4", True, "C#4"),
        ("C#4", False, "Db4"),
        ("Db4", True, "Db4"),
        ("Cb4", True, "B3"),
        ("B#4", True, "C5"),
    ],
)
def test_simplify(name, keep, expected) -> None:
    assert simplify(name, keep) == expected


def test_simplify_invalid_name() -> None:
    assert simplify("H4") == ""
    assert enharmonic("") == ""


@pytest.mark.parametrize(
    "name, expected",
    [("C#4", "Db4"), ("Db4", "C#4"), ("E4", "E4"), ("Cb4", "B3"), ("B#4", "C5"), ("E#4", "F4")],
)
def test_enharmonic(name, expected) -> None:
    assert enharmonic(name) == expected


def test_double_enharmonic_keeps_pitch(spelled_names) -> None:
    for name in spelled_names:
        original = make_note(name=name)
        twice = make_note(name=enharmonic(enharmonic(name)))
        assert (twice.chroma, twice.octave) == (original.chroma, original.octave)


def test_double_enharmonic_restores_single_accidentals() -> None:
    assert enharmonic(enharmonic("C#4")) == "C#4"
    assert enharmonic(enharmonic("Bb2")) == "Bb2"


def test_note_property() -> None:
    midi = note_property("midi")
    assert midi("A4") == 69
    assert midi({"frequency": 440.0}) == 69
    assert midi("H4") is None
    assert note_property("name")("H4") == ""
    assert note_property("valid")("H4") is False


def test_note_property_unknown_field() -> None:
    with pytest.raises(PropertyError):
        note_property("duration")
