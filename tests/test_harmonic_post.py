from moodsong.models import Key, MoodAnalysis
from moodsong.services.harmonic_post import apply_inversions, apply_pedal_bass, with_bass
from moodsong.services.music_theory import make_chord
from moodsong.services.seeded_random import SeededRandom


class ScriptedRandom(SeededRandom):
    def __init__(self, values):
        super().__init__("scripted")
        self.values = list(values)

    def next(self) -> float:
        self.draws += 1
        return self.values.pop(0)


C_MAJOR = Key(tonic="C", mode="major")


def _progression(*chords):
    return [make_chord(root, quality, key_context="C") for root, quality in chords]


def test_with_bass_names_slash_chord_and_keeps_root_position_name():
    chord = make_chord("A", "minor")

    assert with_bass(chord, "C").name == "Am/C"
    assert with_bass(chord, "C").bass_note == "C"
    assert with_bass(chord, "A").name == "Am"
    assert with_bass(with_bass(chord, "C"), "E").name == "Am/E"


def test_inversion_puts_third_in_bass_for_interior_chord():
    chords = _progression(("C", "major"), ("A", "minor"), ("F", "major"), ("G", "major"))
    rng = ScriptedRandom([0.1, 0.5, 0.9])

    result = apply_inversions(chords, MoodAnalysis(use_inversions=True), "moderate", rng, C_MAJOR)

    assert [chord.name for chord in result] == ["C", "Am/C", "F", "G"]
    assert rng.draws == 3


def test_inversion_can_choose_fifth_and_never_touches_outer_chords():
    chords = _progression(("C", "major"), ("F", "major"), ("G", "major"))
    rng = ScriptedRandom([0.0, 0.95])

    result = apply_inversions(chords, MoodAnalysis(use_inversions=True), "complex", rng, C_MAJOR)

    assert [chord.name for chord in result] == ["C", "F/C", "G"]


def test_inversion_skips_two_note_chords_after_drawing():
    chords = _progression(("C", "major"), ("C", "power"), ("G", "major"))
    rng = ScriptedRandom([0.1, 0.5])

    result = apply_inversions(chords, MoodAnalysis(use_inversions=True), "moderate", rng, C_MAJOR)

    assert result == chords
    assert rng.draws == 2


def test_inversions_disabled_for_simple_songs_or_without_flag():
    chords = _progression(("C", "major"), ("A", "minor"), ("G", "major"))
    rng = ScriptedRandom([])

    assert apply_inversions(chords, MoodAnalysis(use_inversions=True), "simple", rng) is chords
    assert apply_inversions(chords, MoodAnalysis(), "complex", rng) is chords
    assert rng.draws == 0


def test_tonic_pedal_applies_to_every_chord_in_the_run():
    chords = _progression(("C", "major"), ("F", "major"), ("G", "major"), ("C", "major"))
    rng = ScriptedRandom([0.1, 0.9, 0.99, 0.0])

    result = apply_pedal_bass(chords, MoodAnalysis(pedal_bass_chance=0.5), "moderate", C_MAJOR, rng)

    assert [chord.name for chord in result] == ["C", "F/C", "G/C", "C"]
    assert all(chord.bass_note == "C" for chord in result)


def test_dominant_pedal_only_lands_on_chords_containing_it():
    chords = _progression(("C", "major"), ("F", "major"), ("G", "major"), ("C", "major"))
    rng = ScriptedRandom([0.1, 0.2, 0.0, 0.0])

    result = apply_pedal_bass(chords, MoodAnalysis(pedal_bass_chance=0.5), "moderate", C_MAJOR, rng)

    assert result[0].name == "C/G"
    assert result[1] == chords[1]
    assert result[2:] == chords[2:]


def test_pedal_skipped_when_chance_draw_misses():
    chords = _progression(("C", "major"), ("F", "major"), ("G", "major"))
    rng = ScriptedRandom([0.9])

    result = apply_pedal_bass(chords, MoodAnalysis(pedal_bass_chance=0.5), "complex", C_MAJOR, rng)

    assert result is chords
    assert rng.draws == 1


def test_pedal_never_applies_to_simple_songs():
    chords = _progression(("C", "major"), ("F", "major"), ("G", "major"))
    rng = ScriptedRandom([])

    assert apply_pedal_bass(chords, MoodAnalysis(pedal_bass_chance=1.0), "simple", C_MAJOR, rng) is chords
    assert rng.draws == 0
