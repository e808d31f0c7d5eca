from __future__ import annotations

import logging
import re
from typing import Any

from moodsong.logging_utils import log_event
from moodsong.models import MoodAnalysis, TempoRange
from moodsong.services.mood_lexicon import (
    INTENSITY_AMPLIFIERS,
    INTENSITY_DIMINISHERS,
    MOOD_KEYWORDS,
    NEGATION_WORDS,
    NEGATIVE_WORDS,
    PHRASE_PATTERNS,
    POSITIVE_WORDS,
    TraitPartial,
)

logger = logging.getLogger(__name__)

WORD_RE = re.compile(r"[a-z0-9']+")
NEGATION_WINDOW = 3
SUBSTRING_MIN_LENGTH = 5

_OPPOSITES = {
    "mode": {"major": "minor", "minor": "major"},
    "brightness": {"bright": "dark", "dark": "bright"},
    "energy": {"high": "low", "low": "high"},
}


def tokenize(text: str) -> list[str]:
    return WORD_RE.findall(text.lower())


def _default_traits() -> dict[str, Any]:
    traits = MoodAnalysis().model_dump()
    traits["tempo_range"] = (traits["tempo_range"]["min"], traits["tempo_range"]["max"])
    return traits


def _invert(partial: TraitPartial) -> TraitPartial:
    inverted = dict(partial)
    for field, opposites in _OPPOSITES.items():
        if field in inverted:
            inverted[field] = opposites.get(inverted[field], inverted[field])
    return inverted


def _scan_keywords(words: list[str], traits: dict[str, Any], matched: list[str]) -> int:
    """Merge lexicon matches into ``traits`` in word order and return the evidence count."""
    evidence = 0
    last_negation = None
    for idx, word in enumerate(words):
        if word in NEGATION_WORDS:
            last_negation = idx
        negated = last_negation is not None and 0 < idx - last_negation <= NEGATION_WINDOW

        if word in MOOD_KEYWORDS:
            partial = MOOD_KEYWORDS[word]
            traits.update(_invert(partial) if negated else partial)
            matched.append(word)
            evidence += 1

        for keyword, partial in MOOD_KEYWORDS.items():
            if len(keyword) < SUBSTRING_MIN_LENGTH or keyword == word or keyword not in word:
                continue
            traits.update(_invert(partial) if negated else partial)
            matched.append(keyword)
            evidence += 1
    return evidence


def _score_sentiment(words: list[str]) -> tuple[float, float]:
    positive = 0.0
    negative = 0.0
    multiplier = 1.0
    for idx, word in enumerate(words):
        if word in INTENSITY_AMPLIFIERS:
            multiplier = 1.5
        elif word in INTENSITY_DIMINISHERS:
            multiplier = 0.5

        negated = idx > 0 and words[idx - 1] in NEGATION_WORDS
        if word in POSITIVE_WORDS:
            if negated:
                negative += multiplier
            else:
                positive += multiplier
            multiplier = 1.0
        if word in NEGATIVE_WORDS:
            if negated:
                positive += multiplier
            else:
                negative += multiplier
            multiplier = 1.0

    total = positive + negative
    positivity = (positive - negative) / total if total > 0 else 0.0
    amplifiers = sum(1 for word in words if word in INTENSITY_AMPLIFIERS)
    intensity = max(0.0, min(1.0, 0.5 + 0.15 * amplifiers))
    return positivity, intensity


def _reweight_functions(traits: dict[str, Any]) -> None:
    if traits["tension"] == "high":
        traits["preferred_functions"] = ["dominant", "subdominant", "tonic"]
    elif traits["tension"] == "low":
        traits["preferred_functions"] = ["tonic", "subdominant", "tonic"]


def _dedupe(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def _to_analysis(traits: dict[str, Any]) -> MoodAnalysis:
    low, high = traits["tempo_range"]
    return MoodAnalysis(**{**traits, "tempo_range": TempoRange(min=low, max=high)})


def interpret_mood(text: str) -> MoodAnalysis:
    lowered = (text or "").lower()
    words = tokenize(lowered)
    traits = _default_traits()
    matched: list[str] = []
    evidence = 0

    for pattern, partial in PHRASE_PATTERNS:
        if pattern.search(lowered):
            traits.update(partial)
            evidence += 2

    evidence += _scan_keywords(words, traits, matched)

    positivity, intensity = _score_sentiment(words)
    traits["positivity"] = positivity
    traits["intensity"] = intensity

    if evidence == 0:
        if positivity > 0.3:
            traits["mode"] = "major"
            traits["brightness"] = "bright"
        elif positivity < -0.3:
            traits["mode"] = "minor"
            traits["brightness"] = "dark"
        if intensity > 0.7:
            traits["energy"] = "high"
            traits["tempo_range"] = (110, 150)
        elif intensity < 0.3:
            traits["energy"] = "low"
            traits["tempo_range"] = (60, 90)

    _reweight_functions(traits)

    if intensity > 0.7:
        low, high = traits["tempo_range"]
        if low < 100:
            traits["tempo_range"] = (low + 20, high + 20)

    traits["keywords"] = _dedupe(matched)
    analysis = _to_analysis(traits)
    log_event(
        logger,
        "mood_interpreted",
        mode=analysis.mode,
        energy=analysis.energy,
        tension=analysis.tension,
        brightness=analysis.brightness,
        evidence=evidence,
        keywords=analysis.keywords,
    )
    return analysis


def apply_style_hint(analysis: MoodAnalysis, style: str | None) -> MoodAnalysis:
    """Re-scan a style hint through the keyword lexicon and merge what it adds."""
    words = tokenize(style or "")
    if not words:
        return analysis

    traits = analysis.model_dump()
    traits["tempo_range"] = (analysis.tempo_range.min, analysis.tempo_range.max)
    style_matches: list[str] = []
    evidence = _scan_keywords(words, traits, style_matches)
    if evidence == 0:
        log_event(logger, "style_hint_applied", style=style, evidence=0)
        return analysis

    _reweight_functions(traits)
    traits["keywords"] = _dedupe([*analysis.keywords, *style_matches])
    updated = _to_analysis(traits)
    log_event(logger, "style_hint_applied", style=style, evidence=evidence, keywords=style_matches)
    return updated
