from __future__ import annotations

from moodsong.models import CanonicalNote, Chord, ChordFunction, ChordQuality, Key, Mode

CHROMATIC_NOTES: list[CanonicalNote] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

NOTE_TO_SEMITONE = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
}
SHARP_TO_FLAT = {"C#": "Db", "D#": "Eb", "F#": "Gb", "G#": "Ab", "A#": "Bb"}

# Keys whose chord names read better with flats.
FLAT_KEY_IDS = {"F", "A#", "D#", "G#", "C#", "Dm", "Gm", "Cm", "Fm", "A#m", "D#m"}

MAJOR_PATTERN = [0, 2, 4, 5, 7, 9, 11]
MINOR_PATTERN = [0, 2, 3, 5, 7, 8, 10]
MAJOR_TRIAD_QUALITIES: list[ChordQuality] = ["major", "minor", "minor", "major", "major", "minor", "diminished"]
MINOR_TRIAD_QUALITIES: list[ChordQuality] = ["minor", "diminished", "major", "minor", "minor", "major", "major"]
MAJOR_ROMAN_NUMERALS = ["I", "ii", "iii", "IV", "V", "vi", "vii°"]
MINOR_ROMAN_NUMERALS = ["i", "ii°", "III", "iv", "v", "VI", "VII"]

QUALITY_SUFFIXES: dict[str, str] = {
    "major": "",
    "minor": "m",
    "diminished": "dim",
    "augmented": "aug",
    "dominant7": "7",
    "major7": "maj7",
    "minor7": "m7",
    "dim7": "dim7",
    "half-diminished7": "m7b5",
    "sus2": "sus2",
    "sus4": "sus4",
    "add9": "add9",
    "power": "5",
}

CHORD_INTERVALS: dict[str, list[int]] = {
    "major": [0, 4, 7],
    "minor": [0, 3, 7],
    "diminished": [0, 3, 6],
    "augmented": [0, 4, 8],
    "dominant7": [0, 4, 7, 10],
    "major7": [0, 4, 7, 11],
    "minor7": [0, 3, 7, 10],
    "dim7": [0, 3, 6, 9],
    "half-diminished7": [0, 3, 6, 10],
    "sus2": [0, 2, 7],
    "sus4": [0, 5, 7],
    "add9": [0, 4, 7, 14],
    "power": [0, 7],
}

_MAJOR_FUNCTIONS: list[ChordFunction] = [
    "tonic",
    "predominant",
    "tonic",
    "subdominant",
    "dominant",
    "tonic",
    "dominant",
]
_MINOR_FUNCTIONS: list[ChordFunction] = [
    "tonic",
    "predominant",
    "tonic",
    "subdominant",
    "dominant",
    "subdominant",
    "subdominant",
]


def normalize_note_name(note: str) -> CanonicalNote:
    cleaned = note.strip()
    if not cleaned:
        raise ValueError("Empty note name.")
    cleaned = cleaned[0].upper() + cleaned[1:]
    if cleaned not in NOTE_TO_SEMITONE:
        raise ValueError(f"Unknown note name '{note}'.")
    return CHROMATIC_NOTES[NOTE_TO_SEMITONE[cleaned]]


def transpose_note(note: str, semitones: int) -> CanonicalNote:
    return CHROMATIC_NOTES[(NOTE_TO_SEMITONE[normalize_note_name(note)] + semitones) % 12]


def display_note_name(note: CanonicalNote, key_context: str | None = None) -> str:
    if key_context in FLAT_KEY_IDS:
        return SHARP_TO_FLAT.get(note, note)
    return note


def format_chord_name(root: str, quality: ChordQuality, key_context: str | None = None) -> str:
    return display_note_name(normalize_note_name(root), key_context) + QUALITY_SUFFIXES[quality]


def build_chord_notes(root: str, quality: ChordQuality) -> list[CanonicalNote]:
    return [transpose_note(root, interval) for interval in CHORD_INTERVALS[quality]]


def make_chord(
    root: str,
    quality: ChordQuality,
    roman_numeral: str | None = None,
    function: ChordFunction | None = None,
    key_context: str | None = None,
) -> Chord:
    return Chord(
        root=normalize_note_name(root),
        quality=quality,
        name=format_chord_name(root, quality, key_context),
        notes=build_chord_notes(root, quality),
        roman_numeral=roman_numeral,
        function=function,
    )


def function_for_degree(degree: int, mode: Mode) -> ChordFunction:
    """Harmonic role of a 0-indexed scale degree."""
    table = _MAJOR_FUNCTIONS if mode == "major" else _MINOR_FUNCTIONS
    if 0 <= degree < len(table):
        return table[degree]
    return "tonic"


def key_id(key: Key) -> str:
    return f"{key.tonic}m" if key.mode == "minor" else key.tonic


def parse_key_id(value: str) -> Key:
    cleaned = value.strip()
    is_minor = len(cleaned) > 1 and cleaned.endswith("m")
    tonic = cleaned[:-1] if is_minor else cleaned
    return Key(tonic=normalize_note_name(tonic), mode="minor" if is_minor else "major")


def scale_notes(key: Key) -> list[CanonicalNote]:
    pattern = MAJOR_PATTERN if key.mode == "major" else MINOR_PATTERN
    return [transpose_note(key.tonic, step) for step in pattern]


def diatonic_chords(key: Key) -> list[Chord]:
    qualities = MAJOR_TRIAD_QUALITIES if key.mode == "major" else MINOR_TRIAD_QUALITIES
    numerals = MAJOR_ROMAN_NUMERALS if key.mode == "major" else MINOR_ROMAN_NUMERALS
    context = key_id(key)
    return [
        make_chord(root, qualities[idx], numerals[idx], function_for_degree(idx, key.mode), context)
        for idx, root in enumerate(scale_notes(key))
    ]


def parallel_key(key: Key) -> Key:
    return Key(tonic=key.tonic, mode="minor" if key.mode == "major" else "major")


def relative_key(key: Key) -> Key:
    if key.mode == "major":
        return Key(tonic=transpose_note(key.tonic, 9), mode="minor")
    return Key(tonic=transpose_note(key.tonic, 3), mode="major")
