from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from moodsong.logging_utils import log_event
from moodsong.models import Complexity, MoodAnalysis, SectionType, SongSection
from moodsong.services.harmonic_post import apply_inversions, apply_pedal_bass
from moodsong.services.progression_builder import HarmonicContext, generate_progression
from moodsong.services.seeded_random import SeededRandom

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectionTemplate:
    type: SectionType
    name: str
    min_chords: int
    max_chords: int

    def bounds(self) -> tuple[int, int]:
        low = max(1, self.min_chords)
        return low, max(low, self.max_chords)


STRUCTURE_TEMPLATES: dict[str, list[SectionTemplate]] = {
    "simple": [
        SectionTemplate("verse", "Verse", 4, 4),
        SectionTemplate("chorus", "Chorus", 4, 4),
    ],
    "standard": [
        SectionTemplate("verse", "Verse 1", 4, 8),
        SectionTemplate("chorus", "Chorus", 4, 8),
        SectionTemplate("verse", "Verse 2", 4, 8),
        SectionTemplate("chorus", "Chorus", 4, 8),
    ],
    "withBridge": [
        SectionTemplate("verse", "Verse 1", 4, 8),
        SectionTemplate("chorus", "Chorus", 4, 8),
        SectionTemplate("verse", "Verse 2", 4, 6),
        SectionTemplate("chorus", "Chorus", 4, 8),
        SectionTemplate("bridge", "Bridge", 4, 8),
        SectionTemplate("chorus", "Final Chorus", 4, 8),
    ],
    "extended": [
        SectionTemplate("intro", "Intro", 2, 4),
        SectionTemplate("verse", "Verse 1", 4, 8),
        SectionTemplate("pre-chorus", "Pre-Chorus", 2, 4),
        SectionTemplate("chorus", "Chorus", 4, 8),
        SectionTemplate("verse", "Verse 2", 4, 8),
        SectionTemplate("pre-chorus", "Pre-Chorus", 2, 4),
        SectionTemplate("chorus", "Chorus", 4, 8),
        SectionTemplate("bridge", "Bridge", 4, 8),
        SectionTemplate("chorus", "Final Chorus", 6, 12),
        SectionTemplate("outro", "Outro", 2, 4),
    ],
}


def select_structure(complexity: Complexity, rng: SeededRandom) -> str:
    if complexity == "simple":
        return "simple"
    if complexity == "moderate":
        return "standard" if rng.next() > 0.5 else "withBridge"
    return "extended" if rng.next() > 0.3 else "withBridge"


def base_section_name(name: str) -> str:
    return re.sub(r"\s*\d+$", "", name.strip())


def draw_chord_count(template: SectionTemplate, rng: SeededRandom) -> int:
    return rng.between(*template.bounds())


def build_sections(
    song_id: str,
    templates: list[SectionTemplate],
    context: HarmonicContext,
    analysis: MoodAnalysis,
    complexity: Complexity,
    rng: SeededRandom,
) -> list[SongSection]:
    sections: list[SongSection] = []
    for index, template in enumerate(templates):
        count = draw_chord_count(template, rng)
        section_id = f"{song_id}-{index}-{template.type}"

        reusable = next(
            (
                section
                for section in sections
                if template.type == "chorus"
                and section.type == template.type
                and base_section_name(section.name) == base_section_name(template.name)
            ),
            None,
        )
        if reusable is not None:
            chords = list(reusable.chords)
            log_event(logger, "chorus_reused", level=logging.DEBUG, section=template.name, source_section=reusable.id)
        else:
            chords, pattern = generate_progression(context, count, analysis, complexity, template.type, rng)
            chords = apply_inversions(chords, analysis, complexity, rng, context.key)
            chords = apply_pedal_bass(chords, analysis, complexity, context.key, rng)
            log_event(
                logger,
                "section_built",
                level=logging.DEBUG,
                section=template.name,
                chord_count=len(chords),
                progression=pattern.name if pattern else "algorithmic",
            )

        sections.append(SongSection(id=section_id, type=template.type, name=template.name, chords=chords, bars=len(chords)))
    return sections
