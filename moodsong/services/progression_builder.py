from __future__ import annotations

import re
from dataclasses import dataclass

from moodsong.models import Chord, ChordFunction, ChordQuality, Complexity, Key, MoodAnalysis, NamedProgression, SectionType
from moodsong.services.music_theory import (
    MAJOR_ROMAN_NUMERALS,
    MINOR_ROMAN_NUMERALS,
    function_for_degree,
    key_id,
    make_chord,
    transpose_note,
)
from moodsong.services.progression_library import select_named_progression
from moodsong.services.seeded_random import SeededRandom

NAMED_PATTERN_CHANCE = 0.7
SEVENTH_THRESHOLD = 0.3
SUSPENSION_THRESHOLD = 0.8
COMPLEX_BORROW_THRESHOLD = 0.7
CHORUS_TONIC_START_CHANCE = 0.6

UPPER_CASE_QUALITIES = {"major", "major7", "dominant7", "augmented"}
LOWER_CASE_QUALITIES = {"minor", "minor7", "diminished", "dim7", "half-diminished7"}
NUMERAL_SUFFIXES = {
    "dominant7": "7",
    "major7": "maj7",
    "minor7": "7",
    "diminished": "°",
    "dim7": "°7",
    "half-diminished7": "ø7",
    "augmented": "+",
    "power": "5",
    "sus2": "sus2",
    "sus4": "sus4",
    "add9": "add9",
}
TRIAD_FAMILIES = {
    "major": "major",
    "major7": "major",
    "dominant7": "major",
    "minor": "minor",
    "minor7": "minor",
    "diminished": "diminished",
    "half-diminished7": "diminished",
    "dim7": "diminished",
}
_NUMERAL_RE = re.compile(r"^(b?)([IViv]+)")

# Any flat key id makes chord names spell accidentals as flats.
FLAT_SPELLING_CONTEXT = "F"

# Major-key degrees whose major chord is taken from the parallel minor, and the minor-key
# Phrygian supertonic.
FLATTENED_DEGREES = {"major": {3, 6, 7}, "minor": {2}}


@dataclass
class HarmonicContext:
    key: Key
    scale: list[str]
    diatonic: list[Chord]
    parallel_diatonic: list[Chord]

    @property
    def key_id(self) -> str:
        return key_id(self.key)

    def borrowed_chords(self) -> list[Chord]:
        originals = {(chord.root, chord.quality) for chord in self.diatonic}
        borrowed = []
        for chord in self.parallel_diatonic:
            if (chord.root, chord.quality) in originals:
                continue
            numeral = chord.roman_numeral
            if self.key.mode == "major" and chord.quality == "major":
                numeral = f"b{numeral}"
            borrowed.append(chord.model_copy(update={"function": "borrowed", "roman_numeral": numeral}))
        return borrowed


def restyle_numeral(numeral: str | None, quality: ChordQuality) -> str | None:
    match = _NUMERAL_RE.match(numeral or "")
    if not match:
        return numeral
    prefix, letters = match.groups()
    if quality in UPPER_CASE_QUALITIES:
        letters = letters.upper()
    elif quality in LOWER_CASE_QUALITIES:
        letters = letters.lower()
    return f"{prefix}{letters}{NUMERAL_SUFFIXES.get(quality, '')}"


def seventh_quality(quality: ChordQuality, function: ChordFunction | None) -> ChordQuality:
    if quality == "major":
        return "dominant7" if function == "dominant" else "major7"
    if quality == "minor":
        return "minor7"
    if quality == "diminished":
        return "half-diminished7"
    return quality


def _requalify(chord: Chord, quality: ChordQuality, key_context: str) -> Chord:
    if quality == chord.quality:
        return chord
    if chord.name[1:2] == "b":
        key_context = FLAT_SPELLING_CONTEXT
    return make_chord(chord.root, quality, restyle_numeral(chord.roman_numeral, quality), chord.function, key_context)


def upgrade_to_seventh(chord: Chord, key_context: str) -> Chord:
    return _requalify(chord, seventh_quality(chord.quality, chord.function), key_context)


def add_suspension(chord: Chord, key_context: str, rng: SeededRandom) -> Chord:
    if chord.quality not in {"major", "minor"}:
        return chord
    return _requalify(chord, "sus4" if rng.next() > 0.5 else "sus2", key_context)


def _pattern_chord(
    context: HarmonicContext,
    degree: int,
    hint: str,
    analysis: MoodAnalysis,
    complexity: Complexity,
    rng: SeededRandom,
) -> Chord:
    mode = context.key.mode
    index = (degree - 1) % 7
    root = context.scale[index]
    natural_quality = context.diatonic[index].quality
    quality: ChordQuality = natural_quality if hint == "diatonic" else hint  # type: ignore[assignment]
    function = function_for_degree(index, mode)
    prefix = ""

    if hint in {"major", "major7"} and degree in FLATTENED_DEGREES[mode]:
        root = transpose_note(root, -1)
        prefix = "b"

    family = TRIAD_FAMILIES.get(quality)
    if hint != "diatonic" and family and not (mode == "minor" and degree == 5):
        parallel = {chord.root: TRIAD_FAMILIES.get(chord.quality) for chord in context.parallel_diatonic}
        native = {chord.root: TRIAD_FAMILIES.get(chord.quality) for chord in context.diatonic}
        if native.get(root) != family and parallel.get(root) == family:
            function = "borrowed"

    if complexity != "simple" and hint == "diatonic" and analysis.use_sevenths and rng.next() > SEVENTH_THRESHOLD:
        quality = seventh_quality(quality, function)

    numerals = MAJOR_ROMAN_NUMERALS if mode == "major" else MINOR_ROMAN_NUMERALS
    numeral = restyle_numeral(prefix + numerals[index], quality)
    return make_chord(root, quality, numeral, function, FLAT_SPELLING_CONTEXT if prefix else context.key_id)


def build_from_pattern(
    pattern: NamedProgression,
    context: HarmonicContext,
    length: int,
    analysis: MoodAnalysis,
    complexity: Complexity,
    rng: SeededRandom,
) -> list[Chord]:
    chords = [
        _pattern_chord(context, degree, hint, analysis, complexity, rng)
        for degree, hint in list(zip(pattern.degrees, pattern.qualities))[:length]
    ]
    while len(chords) < length:
        chords.append(chords[len(chords) % len(pattern.degrees)].model_copy())
    return chords[:length]


def build_algorithmic(
    context: HarmonicContext,
    length: int,
    analysis: MoodAnalysis,
    complexity: Complexity,
    section_type: SectionType,
    rng: SeededRandom,
) -> list[Chord]:
    key_context = context.key_id
    diatonic = context.diatonic
    borrowed = context.borrowed_chords() if analysis.use_borrowed_chords else []
    buckets: dict[str, list[Chord]] = {
        "tonic": [chord for chord in diatonic if chord.function == "tonic"],
        "subdominant": [chord for chord in diatonic if chord.function in {"subdominant", "predominant"}],
        "dominant": [chord for chord in diatonic if chord.function == "dominant"],
    }

    if section_type == "chorus":
        start = rng.pick(buckets["tonic"]) if rng.chance(CHORUS_TONIC_START_CHANCE) else rng.pick(buckets["subdominant"])
    elif section_type == "bridge":
        start = rng.pick([*buckets["subdominant"], *borrowed[:2]])
    else:
        start = rng.pick(buckets["tonic"])

    if complexity != "simple" and analysis.use_sevenths and rng.next() > SEVENTH_THRESHOLD:
        start = upgrade_to_seventh(start, key_context)
    progression = [start]

    for position in range(1, length):
        is_last = position == length - 1
        is_second_to_last = position == length - 2

        if is_last and section_type != "bridge":
            chord = diatonic[0]
        elif is_second_to_last and section_type != "bridge":
            chord = rng.pick(buckets["dominant"])
        else:
            pool = [chord for function in analysis.preferred_functions for chord in buckets.get(function, [])]
            if complexity == "complex" and rng.next() > COMPLEX_BORROW_THRESHOLD:
                pool.extend(borrowed)
            previous = progression[-1]
            fresh = [c for c in pool if (c.root, c.quality) != (previous.root, previous.quality)]
            chord = rng.pick(fresh or pool or diatonic)

        if complexity != "simple":
            if analysis.use_sevenths and rng.next() > SEVENTH_THRESHOLD:
                chord = upgrade_to_seventh(chord, key_context)
            if analysis.use_suspensions and rng.next() > SUSPENSION_THRESHOLD:
                chord = add_suspension(chord, key_context, rng)
        progression.append(chord)

    return progression


def generate_progression(
    context: HarmonicContext,
    length: int,
    analysis: MoodAnalysis,
    complexity: Complexity,
    section_type: SectionType,
    rng: SeededRandom,
) -> tuple[list[Chord], NamedProgression | None]:
    """Chords for one section plus the catalog entry used, if the named-pattern path won."""
    if rng.chance(NAMED_PATTERN_CHANCE):
        pattern = select_named_progression(analysis, section_type, length, rng)
        if pattern is not None:
            return build_from_pattern(pattern, context, length, analysis, complexity, rng), pattern
    return build_algorithmic(context, length, analysis, complexity, section_type, rng), None
