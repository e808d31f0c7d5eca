import pytest
from pydantic import ValidationError

from moodsong.models import Key
from moodsong.services.music_theory import (
    build_chord_notes,
    diatonic_chords,
    function_for_degree,
    key_id,
    make_chord,
    normalize_note_name,
    parallel_key,
    parse_key_id,
    relative_key,
    scale_notes,
    transpose_note,
)


def test_note_names_normalize_to_sharp_spellings():
    assert normalize_note_name("Bb") == "A#"
    assert normalize_note_name("db") == "C#"
    assert normalize_note_name(" g ") == "G"
    with pytest.raises(ValueError):
        normalize_note_name("H")


def test_transpose_wraps_around_the_octave():
    assert transpose_note("A", 3) == "C"
    assert transpose_note("C", -1) == "B"


def test_c_major_diatonic_chords():
    chords = diatonic_chords(Key(tonic="C", mode="major"))

    assert [chord.name for chord in chords] == ["C", "Dm", "Em", "F", "G", "Am", "Bdim"]
    assert [chord.roman_numeral for chord in chords] == ["I", "ii", "iii", "IV", "V", "vi", "vii°"]
    assert [chord.function for chord in chords] == [
        "tonic",
        "predominant",
        "tonic",
        "subdominant",
        "dominant",
        "tonic",
        "dominant",
    ]


def test_a_minor_diatonic_chords():
    chords = diatonic_chords(Key(tonic="A", mode="minor"))

    assert [chord.name for chord in chords] == ["Am", "Bdim", "C", "Dm", "Em", "F", "G"]
    assert chords[0].roman_numeral == "i"
    assert chords[2].roman_numeral == "III"


def test_flat_keys_spell_chord_names_with_flats():
    chords = diatonic_chords(Key(tonic="F", mode="major"))

    assert chords[3].root == "A#"
    assert chords[3].name == "Bb"


def test_chord_notes_follow_quality_intervals():
    assert build_chord_notes("C", "dominant7") == ["C", "E", "G", "A#"]
    assert build_chord_notes("A", "minor") == ["A", "C", "E"]
    assert build_chord_notes("B", "half-diminished7") == ["B", "D", "F", "A"]
    assert build_chord_notes("E", "power") == ["E", "B"]
    assert build_chord_notes("C", "add9") == ["C", "E", "G", "D"]


def test_make_chord_carries_labels():
    chord = make_chord("G", "dominant7", "V7", "dominant", "C")

    assert chord.name == "G7"
    assert chord.notes == ["G", "B", "D", "F"]
    assert chord.roman_numeral == "V7"
    assert chord.function == "dominant"
    assert chord.bass_note is None


def test_scale_notes_and_key_ids():
    assert scale_notes(Key(tonic="D", mode="major")) == ["D", "E", "F#", "G", "A", "B", "C#"]
    assert scale_notes(Key(tonic="E", mode="minor")) == ["E", "F#", "G", "A", "B", "C", "D"]
    assert key_id(Key(tonic="A", mode="minor")) == "Am"
    assert parse_key_id("F#m") == Key(tonic="F#", mode="minor")
    assert parse_key_id("Bb") == Key(tonic="A#", mode="major")


def test_function_for_degree_falls_back_to_tonic():
    assert function_for_degree(4, "minor") == "dominant"
    assert function_for_degree(6, "minor") == "subdominant"
    assert function_for_degree(9, "major") == "tonic"


def test_related_keys():
    c_major = Key(tonic="C", mode="major")

    assert relative_key(c_major) == Key(tonic="A", mode="minor")
    assert relative_key(Key(tonic="A", mode="minor")) == c_major
    assert parallel_key(c_major) == Key(tonic="C", mode="minor")


def test_key_model_normalizes_tonic_and_rejects_unknown_names():
    assert Key(tonic="Eb", mode="minor").id == "D#m"
    assert Key(tonic="f").tonic == "F"
    with pytest.raises(ValidationError):
        Key(tonic="H", mode="major")
    with pytest.raises(ValidationError):
        Key(tonic="C", mode="dorian")
