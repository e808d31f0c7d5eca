from __future__ import annotations

from moodsong.models import CanonicalNote, Chord, Complexity, Key, MoodAnalysis
from moodsong.services.music_theory import display_note_name, key_id
from moodsong.services.seeded_random import SeededRandom

INVERSION_CHANCE = 0.18
FIRST_INVERSION_SHARE = 0.7
DOMINANT_PEDAL_SHARE = 0.7


def with_bass(chord: Chord, bass: CanonicalNote, key_context: str | None = None) -> Chord:
    base_name = chord.name.split("/", 1)[0]
    name = base_name if bass == chord.root else f"{base_name}/{display_note_name(bass, key_context)}"
    return chord.model_copy(update={"bass_note": bass, "name": name})


def apply_inversions(
    chords: list[Chord],
    analysis: MoodAnalysis,
    complexity: Complexity,
    rng: SeededRandom,
    key: Key | None = None,
) -> list[Chord]:
    if complexity == "simple" or not analysis.use_inversions or len(chords) < 2:
        return chords

    key_context = key_id(key) if key else None
    result = list(chords)
    for idx in range(1, len(chords) - 1):
        if rng.next() > INVERSION_CHANCE:
            continue
        chord = result[idx]
        bass_index = 1 if rng.chance(FIRST_INVERSION_SHARE) else 2
        if len(chord.notes) < 3:
            continue
        result[idx] = with_bass(chord, chord.notes[bass_index], key_context)
    return result


def apply_pedal_bass(
    chords: list[Chord],
    analysis: MoodAnalysis,
    complexity: Complexity,
    key: Key,
    rng: SeededRandom,
) -> list[Chord]:
    """Hold one bass note under a short run of chords."""
    if complexity == "simple" or analysis.pedal_bass_chance <= 0 or len(chords) < 3:
        return chords
    if rng.next() > analysis.pedal_bass_chance:
        return chords

    first_notes = chords[0].notes
    if rng.chance(DOMINANT_PEDAL_SHARE):
        pedal = first_notes[2] if len(first_notes) > 2 else first_notes[-1]
    else:
        pedal = key.tonic
    run_length = rng.between(2, 4)
    start = rng.between(0, max(1, len(chords) - run_length) - 1)

    key_context = key_id(key)
    result = list(chords)
    for idx in range(start, min(start + run_length, len(chords))):
        chord = result[idx]
        if pedal in chord.notes or pedal == key.tonic:
            result[idx] = with_bass(chord, pedal, key_context)
    return result
