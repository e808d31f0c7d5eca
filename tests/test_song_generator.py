import logging

import pytest

from moodsong.models import Key, SongRequest
from moodsong.services import song_generator
from moodsong.services.music_theory import build_chord_notes
from moodsong.services.seeded_random import SeededRandom, composite_seed
from moodsong.services.song_generator import TheoryConfigurationError, describe_song, generate_song, song_title


def test_same_request_generates_identical_song():
    request = SongRequest(mood="rainy afternoon, a little nostalgic", complexity="complex")

    assert generate_song(request).model_dump() == generate_song(request).model_dump()


def test_different_complexity_changes_the_song():
    simple = generate_song(SongRequest(mood="rainy afternoon", complexity="simple"))
    complex_song = generate_song(SongRequest(mood="rainy afternoon", complexity="complex"))

    assert simple.id != complex_song.id
    assert len(complex_song.sections) > len(simple.sections)


@pytest.mark.parametrize("complexity", ["simple", "moderate", "complex"])
def test_every_chord_is_consistent_with_its_quality(complexity):
    song = generate_song(SongRequest(mood="dreamy cinematic jazz night", complexity=complexity))

    for section in song.sections:
        assert section.bars == len(section.chords)
        for chord in section.chords:
            assert chord.notes == build_chord_notes(chord.root, chord.quality)
            if chord.bass_note is not None:
                assert chord.bass_note in chord.notes or chord.bass_note == song.key.tonic


def test_simple_happy_song_has_verse_and_chorus_of_four_chords():
    song = generate_song(SongRequest(mood="happy", complexity="simple"))

    assert [section.type for section in song.sections] == ["verse", "chorus"]
    assert [len(section.chords) for section in song.sections] == [4, 4]
    assert song.key.mode == "major"
    assert song.title == "Happy"


def test_sad_mood_without_key_generates_in_minor():
    song = generate_song(SongRequest(mood="sad and lonely", complexity="simple"))

    assert song.key.mode == "minor"
    assert song.analysis.mode == "minor"


def test_repeated_chorus_reuses_first_chorus_chords():
    for mood in ("summer road trip", "late night city lights", "quiet winter morning"):
        song = generate_song(SongRequest(mood=mood, complexity="moderate"))
        choruses = [section for section in song.sections if section.name == "Chorus"]

        assert len(choruses) == 2
        assert choruses[0].chords == choruses[1].chords
        assert choruses[0].id != choruses[1].id


def test_tempo_falls_inside_the_mood_tempo_window():
    for mood in ("happy", "sad", "angry", "peaceful", ""):
        song = generate_song(SongRequest(mood=mood))
        assert song.analysis.tempo_range.min <= song.tempo <= song.analysis.tempo_range.max


def test_tempo_is_the_first_draw_for_simple_songs():
    song = generate_song(SongRequest(mood="calm", key=Key(tonic="G", mode="major"), complexity="simple"))
    rng = SeededRandom(composite_seed("calm", "G", "major", "simple"))
    tempo_range = song.analysis.tempo_range

    assert song.tempo == round(tempo_range.min + rng.next() * (tempo_range.max - tempo_range.min))


def test_supplied_key_is_honored():
    song = generate_song(SongRequest(mood="happy", key=Key(tonic="Eb", mode="minor"), complexity="moderate"))

    assert song.key == Key(tonic="D#", mode="minor")
    assert song.description.startswith("Generated in D# minor.")


def test_ids_are_reproducible_and_section_ids_are_unique():
    request = SongRequest(mood="epic battle", key=Key(tonic="D", mode="minor"), complexity="complex")
    song = generate_song(request)

    assert song.id == f"song-{composite_seed('epic battle', 'Dm', 'complex', None)}"
    assert [section.id for section in song.sections] == [
        f"{song.id}-{index}-{section.type}" for index, section in enumerate(song.sections)
    ]


def test_empty_mood_gets_untitled_song():
    song = generate_song(SongRequest(mood=""))

    assert song.title == "Untitled"
    assert song.generated_by == "algorithmic"
    assert song_title("late night drive home") == "Late Night Drive"


def test_style_hint_enables_harmonic_color():
    plain = generate_song(SongRequest(mood="calm"))
    styled = generate_song(SongRequest(mood="calm", style="jazz"))

    assert plain.analysis.use_sevenths is False
    assert styled.analysis.use_sevenths is True
    assert "jazz" in styled.analysis.keywords
    assert "seventh chords" in styled.description


def test_description_lists_detected_traits_and_features():
    analysis = generate_song(SongRequest(mood="anxious", complexity="simple")).analysis

    description = describe_song(analysis, "simple", Key(tonic="A", mode="minor"))

    assert description.startswith("Generated in A minor.")
    assert "high tension" in description
    assert description.endswith("Complexity: simple.")


def test_incomplete_theory_tables_raise_configuration_error(monkeypatch, caplog):
    monkeypatch.setattr(song_generator, "diatonic_chords", lambda key: [])

    with caplog.at_level(logging.ERROR):
        with pytest.raises(TheoryConfigurationError):
            generate_song(SongRequest(mood="happy"))

    failures = [record for record in caplog.records if getattr(record, "event", "") == "theory_collaborator_failed"]
    assert failures
    assert failures[-1].diatonic_size == 0


def test_generation_logs_start_and_completion(caplog):
    with caplog.at_level(logging.INFO):
        song = generate_song(SongRequest(mood="happy"))

    events = {getattr(record, "event", ""): record for record in caplog.records}
    assert events["song_generation_started"].song_id == song.id
    assert events["song_generation_completed"].section_count == len(song.sections)
    assert events["song_generation_completed"].draws > 0
