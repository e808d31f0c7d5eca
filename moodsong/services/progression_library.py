from __future__ import annotations

import logging

from moodsong.logging_utils import log_event
from moodsong.models import MoodAnalysis, MoodTag, NamedProgression, QualityHint, SectionType
from moodsong.services.seeded_random import SeededRandom

logger = logging.getLogger(__name__)


def _progression(
    name: str,
    degrees: list[int],
    qualities: QualityHint | list[QualityHint],
    moods: list[MoodTag],
    suitable_for: list[SectionType],
    description: str,
) -> NamedProgression:
    if isinstance(qualities, str):
        qualities = [qualities] * len(degrees)
    return NamedProgression(
        name=name,
        degrees=degrees,
        qualities=qualities,
        moods=moods,
        suitable_for=suitable_for,
        description=description,
    )


NAMED_PROGRESSIONS: tuple[NamedProgression, ...] = (
    # pop and rock
    _progression(
        "Four Chord Song", [1, 5, 6, 4], "diatonic", ["happy", "energetic", "nostalgic", "any"], ["chorus", "verse"],
        "I-V-vi-IV, the progression behind countless pop hits.",
    ),
    _progression(
        "Sensitive Female", [6, 4, 1, 5], "diatonic", ["sad", "nostalgic", "romantic"], ["verse", "chorus"],
        "vi-IV-I-V, a melancholic rotation of the four-chord song.",
    ),
    _progression(
        "50s Progression", [1, 6, 4, 5], "diatonic", ["nostalgic", "romantic", "happy"], ["verse", "chorus"],
        "I-vi-IV-V, the doo-wop and oldies staple.",
    ),
    _progression(
        "Pachelbel Canon", [1, 5, 6, 3, 4, 1, 4, 5], "diatonic", ["romantic", "epic", "nostalgic"], ["verse", "chorus", "bridge"],
        "I-V-vi-iii-IV-I-IV-V, the timeless classical sequence.",
    ),
    _progression(
        "Andalusian Cadence", [1, 7, 6, 5], ["minor", "major", "major", "major"], ["sad", "tense", "epic"], ["verse", "bridge", "intro"],
        "i-bVII-bVI-V, a flamenco descent with a chromatic bass line.",
    ),
    _progression(
        "Pop-Punk", [1, 5, 6, 4], ["major", "major", "minor", "major"], ["energetic", "happy"], ["chorus", "verse"],
        "I-V-vi-IV played with driving energy.",
    ),
    _progression(
        "Royal Road", [4, 5, 3, 6], "diatonic", ["romantic", "nostalgic", "sad"], ["verse", "pre-chorus", "chorus"],
        "IV-V-iii-vi, the yearning J-pop lift.",
    ),
    # jazz
    _progression(
        "Jazz ii-V-I", [2, 5, 1], ["minor7", "dominant7", "major7"], ["chill", "romantic", "any"], ["verse", "bridge", "outro"],
        "ii7-V7-Imaj7, the fundamental jazz cadence.",
    ),
    _progression(
        "Jazz Turnaround", [1, 6, 2, 5], ["major7", "minor7", "minor7", "dominant7"], ["chill", "romantic"], ["verse", "outro", "intro"],
        "Imaj7-vi7-ii7-V7, the classic turnaround.",
    ),
    _progression(
        "Rhythm Changes Bridge", [3, 3, 6, 6, 2, 2, 5, 5], "dominant7", ["energetic", "any"], ["bridge"],
        "III7-VI7-II7-V7, a chain of secondary dominants.",
    ),
    _progression(
        "Circle Progression", [6, 2, 5, 1], "diatonic", ["nostalgic", "romantic", "any"], ["verse", "bridge", "outro"],
        "vi-ii-V-I, falling fifths home to the tonic.",
    ),
    # sad and emotional
    _progression(
        "Emotional Minor", [1, 6, 3, 7], ["minor", "major", "major", "major"], ["sad", "epic", "nostalgic"], ["verse", "chorus"],
        "i-bVI-bIII-bVII, an anthemic natural-minor loop.",
    ),
    _progression(
        "Deceptive Minor", [1, 4, 6, 5], ["minor", "minor", "major", "major"], ["sad", "tense"], ["verse"],
        "i-iv-VI-V, minor with an unexpected resolution.",
    ),
    # rock and alternative
    _progression(
        "Power Ballad", [1, 4, 5, 1], "diatonic", ["epic", "romantic", "energetic"], ["chorus"],
        "I-IV-V-I, simple but powerful.",
    ),
    _progression(
        "Grunge", [1, 4, 6, 5], ["major", "major", "minor", "major"], ["sad", "tense", "energetic"], ["verse", "chorus"],
        "I-IV-vi-V, a 90s alternative staple.",
    ),
    _progression(
        "Modal Rock", [1, 7, 4, 1], "major", ["epic", "chill"], ["verse", "chorus"],
        "I-bVII-IV-I, the Mixolydian rock sound.",
    ),
    # chill and ambient
    _progression(
        "Lo-fi Chill", [2, 5, 1, 6], ["minor7", "dominant7", "major7", "minor7"], ["chill", "sad", "nostalgic"], ["verse", "chorus"],
        "ii7-V7-Imaj7-vi7, smooth and jazzy.",
    ),
    _progression(
        "Dreamy", [1, 3, 4, 4], ["major7", "minor7", "major7", "major7"], ["chill", "romantic", "nostalgic"], ["verse", "intro", "outro"],
        "Imaj7-iii7-IVmaj7, an ethereal floating quality.",
    ),
    # folk
    _progression(
        "Three Chord Trick", [1, 4, 5, 1], "diatonic", ["happy", "energetic", "any"], ["verse", "chorus"],
        "I-IV-V-I, the most basic and effective progression.",
    ),
    _progression(
        "Folk Waltz", [1, 5, 1, 4], "diatonic", ["happy", "nostalgic", "romantic"], ["verse"],
        "I-V-I-IV, simple folk and country movement.",
    ),
    _progression(
        "Gospel", [1, 1, 4, 4, 1, 5, 1, 1], "diatonic", ["happy", "epic", "energetic"], ["verse", "chorus"],
        "I-I-IV-IV-I-V-I-I, classic gospel form.",
    ),
    # blues
    _progression(
        "12-Bar Blues", [1, 1, 1, 1, 4, 4, 1, 1, 5, 4, 1, 5], "dominant7", ["sad", "nostalgic", "any"], ["verse", "chorus"],
        "I7 for four bars, IV7 for two, back home, then V7-IV7-I7-V7.",
    ),
    _progression(
        "Quick Change Blues", [1, 4, 1, 1, 4, 4, 1, 1, 5, 4, 1, 5], "dominant7", ["sad", "energetic", "any"], ["verse", "chorus"],
        "12-bar blues with the quick change to IV7 in bar two.",
    ),
    _progression(
        "Minor Blues", [1, 1, 1, 1, 4, 4, 1, 1, 5, 4, 1, 5],
        ["minor7"] * 8 + ["dominant7", "dominant7", "minor7", "dominant7"],
        ["sad", "tense", "any"], ["verse", "chorus"],
        "i7-iv7-i7 with a dominant turnaround, dark and soulful.",
    ),
    # metal
    _progression(
        "Power Chord Descent", [1, 7, 6, 5], "power", ["epic", "tense", "energetic"], ["verse", "chorus", "intro"],
        "I5-VII5-VI5-V5, a heavy stepwise descent.",
    ),
    _progression(
        "Metal Tritone", [1, 5, 1, 5], ["power", "diminished", "power", "power"], ["tense", "epic"], ["verse", "intro", "bridge"],
        "I5-v°-I5-V5, tritone tension for an ominous sound.",
    ),
    _progression(
        "Djent", [1, 2, 6, 4], "power", ["tense", "epic", "energetic"], ["verse", "bridge"],
        "I5-II5-VI5-IV5, modern metal riffing.",
    ),
    # latin
    _progression(
        "Bossa Nova", [1, 2, 5, 1], ["major7", "minor7", "dominant7", "major7"], ["chill", "romantic", "nostalgic"], ["verse", "chorus"],
        "Imaj7-ii7-V7-Imaj7, smooth Brazilian bossa nova.",
    ),
    _progression(
        "Latin ii-V", [2, 5, 1, 1], ["minor7", "dominant7", "major7", "major7"], ["chill", "romantic", "happy"], ["verse", "chorus"],
        "ii7-V7-Imaj7-Imaj7, the latin jazz foundation.",
    ),
    _progression(
        "Salsa Montuno", [1, 4, 5, 1], ["major", "major", "dominant7", "major"], ["happy", "energetic"], ["verse", "chorus"],
        "I-IV-V7-I, a driving piano montuno.",
    ),
    _progression(
        "Spanish Phrygian", [1, 2, 1, 7], ["minor", "major", "minor", "major"], ["tense", "epic", "sad"], ["verse", "bridge", "intro"],
        "i-bII-i-bVII, flamenco Phrygian tension.",
    ),
    # funk
    _progression(
        "Funk Groove", [1, 4, 1, 5], "dominant7", ["energetic", "happy"], ["verse", "chorus"],
        "I7-IV7-I7-V7, funk with dominant seventh crunch.",
    ),
    _progression(
        "Minor Funk", [1, 1, 4, 1], ["minor7", "minor7", "dominant7", "minor7"], ["energetic", "tense"], ["verse", "chorus"],
        "i7-i7-IV7-i7, a dark minor groove.",
    ),
    _progression(
        "Disco Funk", [1, 4, 5, 4], ["minor7", "dominant7", "minor7", "dominant7"], ["energetic", "happy"], ["verse", "chorus"],
        "i7-IV7-v7-IV7, disco dance floor grooves.",
    ),
    # electronic
    _progression(
        "EDM Anthem", [6, 4, 1, 5], "diatonic", ["epic", "energetic", "happy"], ["chorus", "bridge"],
        "vi-IV-I-V, the festival anthem progression.",
    ),
    _progression(
        "Trance Loop", [1, 5], ["minor", "major"], ["epic", "energetic", "tense"], ["verse", "intro", "bridge"],
        "i-V, a hypnotic two-chord loop.",
    ),
    _progression(
        "Future Bass", [6, 1, 5, 4], ["minor7", "major7", "major", "major7"], ["chill", "epic", "nostalgic"], ["verse", "chorus"],
        "vi7-Imaj7-V-IVmaj7, emotional future bass.",
    ),
    _progression(
        "Dark Techno", [1, 1, 7, 7], ["minor", "minor", "major", "major"], ["tense", "epic"], ["verse", "intro", "bridge"],
        "i-i-bVII-bVII, a minimal dark loop.",
    ),
    _progression(
        "House Piano", [1, 6, 4, 5], ["major7", "minor7", "major7", "dominant7"], ["happy", "energetic", "chill"], ["verse", "chorus"],
        "Imaj7-vi7-IVmaj7-V7, classic house piano stabs.",
    ),
    # transitions
    _progression(
        "Pre-Chorus Lift", [4, 5], "diatonic", ["any"], ["pre-chorus"],
        "IV-V, holding the dominant back until the chorus lands.",
    ),
    _progression(
        "Build-Up", [2, 4, 5], "diatonic", ["energetic", "epic", "tense", "happy"], ["pre-chorus"],
        "ii-IV-V, a rising climb into the chorus.",
    ),
    _progression(
        "Ascending Intro", [1, 2, 3, 4], "diatonic", ["happy", "energetic", "romantic"], ["intro"],
        "I-ii-iii-IV, a stepwise walk up from the tonic.",
    ),
    _progression(
        "Plagal Outro", [4, 1], "diatonic", ["chill", "romantic", "any"], ["outro"],
        "IV-I, the gentle amen cadence.",
    ),
)


def catalog() -> tuple[NamedProgression, ...]:
    return NAMED_PROGRESSIONS


def mood_tags_for(analysis: MoodAnalysis) -> list[MoodTag]:
    tags: list[MoodTag] = []
    if analysis.brightness == "bright" and analysis.energy == "high":
        tags += ["happy", "energetic"]
    if analysis.brightness == "bright" and analysis.energy == "low":
        tags += ["romantic", "chill"]
    if analysis.brightness == "dark" and analysis.energy == "low":
        tags += ["sad", "nostalgic"]
    if analysis.brightness == "dark" and analysis.energy == "high":
        tags += ["epic", "tense"]
    if analysis.tension == "high":
        tags += ["tense", "epic"]
    if analysis.tension == "low":
        tags += ["chill", "romantic"]
    if analysis.mode == "minor":
        tags.append("sad")
    if analysis.mode == "major" and analysis.positivity > 0.3:
        tags.append("happy")
    tags.append("any")
    return list(dict.fromkeys(tags))


def select_named_progression(
    analysis: MoodAnalysis,
    section_type: SectionType,
    length: int,
    rng: SeededRandom,
) -> NamedProgression | None:
    targets = set(mood_tags_for(analysis))
    candidates = [
        progression
        for progression in NAMED_PROGRESSIONS
        if targets.intersection(progression.moods)
        and section_type in progression.suitable_for
        and length - 2 <= len(progression.degrees) <= length + 2
    ]
    relaxed = False
    if not candidates:
        candidates = [progression for progression in NAMED_PROGRESSIONS if section_type in progression.suitable_for]
        relaxed = True
    if not candidates:
        return None

    chosen = rng.pick(candidates)
    log_event(
        logger,
        "named_progression_selected",
        level=logging.DEBUG,
        progression=chosen.name,
        section_type=section_type,
        length=length,
        relaxed=relaxed,
        candidate_count=len(candidates),
    )
    return chosen
