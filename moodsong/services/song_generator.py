from __future__ import annotations

import logging

from moodsong.logging_utils import log_event
from moodsong.models import Key, MoodAnalysis, Song, SongRequest
from moodsong.services.mood_interpreter import apply_style_hint, interpret_mood
from moodsong.services.music_theory import diatonic_chords, key_id, parallel_key, scale_notes
from moodsong.services.progression_builder import HarmonicContext
from moodsong.services.seeded_random import SeededRandom, composite_seed
from moodsong.services.song_structure import STRUCTURE_TEMPLATES, build_sections, select_structure

logger = logging.getLogger(__name__)

FALLBACK_ROOTS = ["C", "G", "D", "A", "E", "F"]
TITLE_WORDS = 3


class TheoryConfigurationError(RuntimeError):
    pass


def harmonic_context(key: Key) -> HarmonicContext:
    scale = scale_notes(key)
    diatonic = diatonic_chords(key)
    parallel = diatonic_chords(parallel_key(key))
    if len(scale) < 7 or len(diatonic) < 7 or len(parallel) < 7:
        log_event(
            logger,
            "theory_collaborator_failed",
            level=logging.ERROR,
            key=key_id(key),
            scale_size=len(scale),
            diatonic_size=len(diatonic),
            parallel_size=len(parallel),
        )
        raise TheoryConfigurationError(f"Music theory tables are incomplete for key {key_id(key)}.")
    return HarmonicContext(key=key, scale=list(scale), diatonic=list(diatonic), parallel_diatonic=list(parallel))


def fallback_key(mood: str, analysis: MoodAnalysis) -> Key:
    return Key(tonic=SeededRandom(mood).pick(FALLBACK_ROOTS), mode=analysis.mode)


def song_title(mood: str) -> str:
    words = mood.split()[:TITLE_WORDS]
    if not words:
        return "Untitled"
    return " ".join(word[:1].upper() + word[1:] for word in words)


def describe_song(analysis: MoodAnalysis, complexity: str, key: Key) -> str:
    parts = [f"Generated in {key.tonic} {key.mode}."]

    detected = []
    if analysis.energy != "medium":
        detected.append(f"{analysis.energy} energy")
    if analysis.brightness == "bright":
        detected.append("bright tone")
    elif analysis.brightness == "dark":
        detected.append("dark atmosphere")
    if analysis.tension == "high":
        detected.append("high tension")
    elif analysis.tension == "low":
        detected.append("relaxed feel")
    if detected:
        parts.append(f"Detected: {', '.join(detected)}.")

    features = [
        label
        for enabled, label in (
            (analysis.use_sevenths, "seventh chords"),
            (analysis.use_borrowed_chords, "borrowed chords"),
            (analysis.use_suspensions, "suspended chords"),
            (analysis.use_inversions, "slash chords/inversions"),
            (analysis.pedal_bass_chance > 0, "pedal bass"),
        )
        if enabled
    ]
    if features:
        parts.append(f"Features: {', '.join(features)}.")

    parts.append(f"Complexity: {complexity}.")
    return " ".join(parts)


def generate_song(request: SongRequest) -> Song:
    mood = request.mood
    complexity = request.complexity
    analysis = interpret_mood(mood)
    key = request.key or fallback_key(mood, analysis)
    if request.style:
        analysis = apply_style_hint(analysis, request.style)

    song_id = f"song-{composite_seed(mood, key_id(key), complexity, request.style)}"
    log_event(
        logger,
        "song_generation_started",
        song_id=song_id,
        key=key_id(key),
        complexity=complexity,
        key_supplied=request.key is not None,
    )

    context = harmonic_context(key)
    rng = SeededRandom(composite_seed(mood, key.tonic, key.mode, complexity))
    structure = select_structure(complexity, rng)
    tempo_range = analysis.tempo_range
    tempo = round(tempo_range.min + rng.next() * (tempo_range.max - tempo_range.min))
    sections = build_sections(song_id, STRUCTURE_TEMPLATES[structure], context, analysis, complexity, rng)

    song = Song(
        id=song_id,
        title=song_title(mood),
        description=describe_song(analysis, complexity, key),
        key=key,
        tempo=tempo,
        sections=sections,
        mood=mood,
        analysis=analysis,
    )
    log_event(
        logger,
        "song_generation_completed",
        song_id=song_id,
        structure=structure,
        tempo=tempo,
        section_count=len(sections),
        chord_count=sum(len(section.chords) for section in sections),
        draws=rng.draws,
    )
    return song
