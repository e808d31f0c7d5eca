import logging

from moodsong.models import Key, MoodAnalysis
from moodsong.services import progression_builder
from moodsong.services.music_theory import build_chord_notes, diatonic_chords, parallel_key, scale_notes
from moodsong.services.progression_builder import (
    HarmonicContext,
    build_algorithmic,
    build_from_pattern,
    generate_progression,
    restyle_numeral,
    upgrade_to_seventh,
)
from moodsong.services.progression_library import catalog, mood_tags_for, select_named_progression
from moodsong.services.seeded_random import SeededRandom


class ScriptedRandom(SeededRandom):
    def __init__(self, values):
        super().__init__("scripted")
        self.values = list(values)

    def next(self) -> float:
        self.draws += 1
        return self.values.pop(0)


def _context(tonic: str, mode: str) -> HarmonicContext:
    key = Key(tonic=tonic, mode=mode)
    return HarmonicContext(
        key=key,
        scale=scale_notes(key),
        diatonic=diatonic_chords(key),
        parallel_diatonic=diatonic_chords(parallel_key(key)),
    )


def _pattern(name: str):
    return next(progression for progression in catalog() if progression.name == name)


def test_catalog_covers_every_section_type():
    entries = catalog()
    covered = {section for entry in entries for section in entry.suitable_for}

    assert len(entries) >= 40
    assert covered == {"intro", "verse", "pre-chorus", "chorus", "bridge", "outro"}
    assert len({entry.name for entry in entries}) == len(entries)


def test_mood_tags_follow_decision_table():
    happy = MoodAnalysis(mode="major", brightness="bright", energy="high", positivity=0.8)
    gloomy = MoodAnalysis(mode="minor", brightness="dark", energy="low", tension="low")

    assert mood_tags_for(happy) == ["happy", "energetic", "any"]
    assert mood_tags_for(gloomy) == ["sad", "nostalgic", "chill", "romantic", "any"]
    assert mood_tags_for(MoodAnalysis()) == ["any"]


def test_selection_filters_by_mood_section_and_length():
    analysis = MoodAnalysis(mode="major", brightness="bright", energy="high", positivity=0.8)
    rng = SeededRandom("select")

    for _ in range(20):
        chosen = select_named_progression(analysis, "chorus", 4, rng)
        assert chosen is not None
        assert "chorus" in chosen.suitable_for
        assert 2 <= len(chosen.degrees) <= 6
        assert {"happy", "energetic", "any"} & set(chosen.moods)


def test_selection_relaxes_to_section_type_when_moods_do_not_match(caplog):
    rng = SeededRandom("relaxed")

    with caplog.at_level(logging.DEBUG):
        chosen = select_named_progression(MoodAnalysis(), "intro", 4, rng)

    assert chosen is not None
    assert "intro" in chosen.suitable_for
    selected = [record for record in caplog.records if getattr(record, "event", "") == "named_progression_selected"]
    assert selected and selected[-1].relaxed is True


def test_four_chord_song_in_c_major():
    chords = build_from_pattern(
        _pattern("Four Chord Song"), _context("C", "major"), 4, MoodAnalysis(), "simple", SeededRandom("x")
    )

    assert [chord.name for chord in chords] == ["C", "G", "Am", "F"]
    assert [chord.roman_numeral for chord in chords] == ["I", "V", "vi", "IV"]


def test_pattern_cycles_then_truncates_to_requested_length():
    chords = build_from_pattern(
        _pattern("Four Chord Song"), _context("C", "major"), 6, MoodAnalysis(), "simple", SeededRandom("x")
    )

    assert [chord.name for chord in chords] == ["C", "G", "Am", "F", "C", "G"]
    assert len(build_from_pattern(_pattern("Pachelbel Canon"), _context("C", "major"), 3, MoodAnalysis(), "simple", SeededRandom("x"))) == 3


def test_major_key_borrowed_degree_uses_flattened_root():
    chords = build_from_pattern(
        _pattern("Modal Rock"), _context("C", "major"), 4, MoodAnalysis(), "simple", SeededRandom("x")
    )

    assert [chord.name for chord in chords] == ["C", "Bb", "F", "C"]
    assert chords[1].root == "A#"
    assert chords[1].roman_numeral == "bVII"
    assert chords[1].function == "borrowed"
    assert chords[2].function == "subdominant"


def test_minor_key_phrygian_supertonic_and_raised_dominant():
    phrygian = build_from_pattern(
        _pattern("Spanish Phrygian"), _context("A", "minor"), 4, MoodAnalysis(), "simple", SeededRandom("x")
    )
    deceptive = build_from_pattern(
        _pattern("Deceptive Minor"), _context("A", "minor"), 4, MoodAnalysis(), "simple", SeededRandom("x")
    )

    assert [chord.name for chord in phrygian] == ["Am", "Bb", "Am", "G"]
    assert [chord.roman_numeral for chord in phrygian] == ["i", "bII", "i", "VII"]
    assert [chord.name for chord in deceptive] == ["Am", "Dm", "F", "E"]
    assert deceptive[3].roman_numeral == "V"
    assert deceptive[3].function == "dominant"


def test_simple_complexity_draws_nothing_while_building_a_pattern():
    rng = SeededRandom("simple")
    build_from_pattern(_pattern("Four Chord Song"), _context("G", "major"), 8, MoodAnalysis(use_sevenths=True), "simple", rng)

    assert rng.draws == 0


def test_pattern_seventh_upgrades_respect_degree_function():
    analysis = MoodAnalysis(use_sevenths=True)
    for seed in range(10):
        chords = build_from_pattern(
            _pattern("Four Chord Song"), _context("C", "major"), 4, analysis, "moderate", SeededRandom(str(seed))
        )
        assert chords[1].quality in {"major", "dominant7"}
        assert chords[0].quality in {"major", "major7"}
        assert chords[2].quality in {"minor", "minor7"}
        for chord in chords:
            assert chord.notes == build_chord_notes(chord.root, chord.quality)


def test_seventh_upgrade_rewrites_numeral():
    dominant, leading = diatonic_chords(Key(tonic="C", mode="major"))[4::2]

    assert upgrade_to_seventh(dominant, "C").roman_numeral == "V7"
    assert upgrade_to_seventh(dominant, "C").name == "G7"
    assert upgrade_to_seventh(leading, "C").roman_numeral == "viiø7"
    assert restyle_numeral("I", "major7") == "Imaj7"
    assert restyle_numeral("bVII", "power") == "bVII5"


def test_algorithmic_verse_resolves_through_dominant_to_tonic():
    context = _context("C", "major")
    for seed in range(10):
        chords = build_algorithmic(context, 6, MoodAnalysis(), "simple", "verse", SeededRandom(str(seed)))
        assert len(chords) == 6
        assert chords[0].function == "tonic"
        assert chords[-2].function == "dominant"
        assert chords[-1].name == "C"


def test_algorithmic_chorus_starts_on_tonic_or_subdominant():
    context = _context("D", "minor")
    for seed in range(10):
        chords = build_algorithmic(context, 4, MoodAnalysis(mode="minor"), "simple", "chorus", SeededRandom(str(seed)))
        assert chords[0].function in {"tonic", "subdominant", "predominant"}
        assert chords[-1].name == "Dm"


def test_algorithmic_bridge_may_open_with_borrowed_chord_and_skips_cadence():
    context = _context("C", "major")
    analysis = MoodAnalysis(use_borrowed_chords=True)
    openers = set()
    for seed in range(40):
        chords = build_algorithmic(context, 4, analysis, "complex", "bridge", SeededRandom(str(seed)))
        openers.add(chords[0].function)
        assert len(chords) == 4
    assert openers <= {"subdominant", "predominant", "borrowed"}


def test_algorithmic_complex_build_keeps_notes_valid():
    context = _context("E", "major")
    analysis = MoodAnalysis(use_sevenths=True, use_suspensions=True, use_borrowed_chords=True)
    for seed in range(10):
        for chord in build_algorithmic(context, 8, analysis, "complex", "verse", SeededRandom(str(seed))):
            assert chord.notes == build_chord_notes(chord.root, chord.quality)


def test_generate_progression_is_reproducible():
    context = _context("G", "major")
    analysis = MoodAnalysis(use_sevenths=True)

    first, first_pattern = generate_progression(context, 6, analysis, "moderate", "verse", SeededRandom("same"))
    second, second_pattern = generate_progression(context, 6, analysis, "moderate", "verse", SeededRandom("same"))

    assert first == second
    assert first_pattern == second_pattern


def test_pattern_gate_at_threshold_goes_straight_to_algorithmic_builder(monkeypatch):
    def _unexpected(*_args, **_kwargs):
        raise AssertionError("named selection should not run")

    monkeypatch.setattr(progression_builder, "select_named_progression", _unexpected)
    rng = ScriptedRandom([0.7, 0.0, 0.0, 0.0])

    chords, pattern = generate_progression(_context("C", "major"), 4, MoodAnalysis(), "simple", "verse", rng)

    assert pattern is None
    assert [chord.name for chord in chords] == ["C", "Em", "G", "C"]
    assert rng.draws == 4
    assert rng.values == []


def test_pattern_gate_below_threshold_tries_named_selection(monkeypatch):
    calls = []

    def _select(analysis, section_type, length, rng):
        calls.append((section_type, length))
        return rng.pick([_pattern("Four Chord Song")])

    monkeypatch.setattr(progression_builder, "select_named_progression", _select)
    rng = ScriptedRandom([0.69, 0.0])

    chords, pattern = generate_progression(_context("C", "major"), 4, MoodAnalysis(), "simple", "chorus", rng)

    assert calls == [("chorus", 4)]
    assert pattern.name == "Four Chord Song"
    assert [chord.name for chord in chords] == ["C", "G", "Am", "F"]
    assert rng.draws == 2


def test_no_named_match_falls_through_to_algorithmic_builder(monkeypatch):
    monkeypatch.setattr(progression_builder, "select_named_progression", lambda *_args: None)
    rng = ScriptedRandom([0.0, 0.0, 0.0, 0.0])

    chords, pattern = generate_progression(_context("C", "major"), 4, MoodAnalysis(), "simple", "verse", rng)

    assert pattern is None
    assert [chord.name for chord in chords] == ["C", "Em", "G", "C"]
    assert rng.values == []


def test_chorus_start_splits_sixty_forty_between_tonic_and_subdominant():
    context = _context("C", "major")

    tonic_start = build_algorithmic(context, 2, MoodAnalysis(), "simple", "chorus", ScriptedRandom([0.59, 0.0]))
    subdominant_start = build_algorithmic(context, 2, MoodAnalysis(), "simple", "chorus", ScriptedRandom([0.6, 0.0]))
    last_subdominant = build_algorithmic(context, 2, MoodAnalysis(), "simple", "chorus", ScriptedRandom([0.6, 0.99]))

    assert tonic_start[0].name == "C"
    assert subdominant_start[0].name == "Dm"
    assert subdominant_start[0].function == "predominant"
    assert last_subdominant[0].name == "F"
    assert [chords[-1].name for chords in (tonic_start, subdominant_start, last_subdominant)] == ["C", "C", "C"]


def test_pattern_upgrades_diminished_degree_to_half_diminished_seventh():
    rng = ScriptedRandom([0.0, 0.9, 0.0, 0.0])

    chords = build_from_pattern(
        _pattern("Circle Progression"), _context("A", "minor"), 4, MoodAnalysis(use_sevenths=True), "moderate", rng
    )

    assert [chord.quality for chord in chords] == ["major", "half-diminished7", "minor", "minor"]
    assert chords[1].roman_numeral == "iiø7"
    assert rng.draws == 4
