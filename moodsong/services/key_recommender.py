from __future__ import annotations

import logging

from moodsong.logging_utils import log_event
from moodsong.models import Key, KeyRecommendation
from moodsong.services.mood_interpreter import interpret_mood
from moodsong.services.seeded_random import SeededRandom

logger = logging.getLogger(__name__)

BRIGHT_ROOTS = ["G", "D", "A", "E"]
DARK_MINOR_ROOTS = ["A", "E", "D", "B"]


def _next_root(roots: list[str], root: str) -> str:
    return roots[(roots.index(root) + 1) % len(roots)]


def recommend_key(mood_text: str) -> KeyRecommendation:
    analysis = interpret_mood(mood_text)
    rng = SeededRandom(mood_text or "")
    mode = analysis.mode

    if analysis.brightness == "bright":
        if analysis.energy == "high":
            root = "D" if rng.next() > 0.5 else "A"
            rationale = f"{root} {mode} is a bright, energetic key that suits uplifting moods."
        else:
            root = "G"
            rationale = f"G {mode} is warm and bright without being overly intense."
        confidence = "high"
        alternatives = [Key(tonic=_next_root(BRIGHT_ROOTS, root), mode=mode), Key(tonic="C", mode=mode)]
    elif analysis.brightness == "dark" and mode == "minor":
        if analysis.tension == "high":
            root = "B" if rng.next() > 0.5 else "E"
            rationale = f"{root} minor creates the dramatic tension the mood suggests."
        else:
            root = "A" if rng.next() > 0.5 else "D"
            rationale = f"{root} minor has a natural melancholic quality that matches the mood."
        confidence = "high"
        alternatives = [Key(tonic=_next_root(DARK_MINOR_ROOTS, root), mode="minor"), Key(tonic="C", mode="minor")]
    elif analysis.brightness == "dark":
        root = "F"
        rationale = "F major has a warmer, more introspective quality than brighter major keys."
        confidence = "medium"
        alternatives = [Key(tonic="C", mode="major"), Key(tonic="A", mode="minor")]
    elif mode == "minor":
        root = "A" if rng.next() > 0.5 else "E"
        rationale = f"{root} minor is versatile and widely used, a solid choice for the mood."
        confidence = "medium"
        alternatives = [Key(tonic="D", mode="minor"), Key(tonic="C", mode="major")]
    else:
        root = "C" if rng.next() > 0.5 else "G"
        rationale = f"{root} major is accessible and works well across many styles."
        confidence = "medium"
        alternatives = [Key(tonic="G" if root == "C" else "C", mode="major"), Key(tonic="A", mode="minor")]

    if not analysis.keywords:
        confidence = "low"
        rationale = f"{root} {mode} is a good starting point. Add more mood descriptors for better recommendations."

    recommendation = KeyRecommendation(
        key=Key(tonic=root, mode=mode),
        rationale=rationale,
        confidence=confidence,
        alternative_keys=alternatives[:2],
    )
    log_event(
        logger,
        "key_recommended",
        key=recommendation.key.id,
        confidence=confidence,
        alternatives=[key.id for key in recommendation.alternative_keys],
    )
    return recommendation
