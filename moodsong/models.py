from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


CanonicalNote = Literal["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
Mode = Literal["major", "minor"]
Level = Literal["low", "medium", "high"]
Brightness = Literal["dark", "neutral", "bright"]
Complexity = Literal["simple", "moderate", "complex"]
Confidence = Literal["high", "medium", "low"]
SectionType = Literal["intro", "verse", "pre-chorus", "chorus", "bridge", "outro"]
ChordQuality = Literal[
    "major",
    "minor",
    "diminished",
    "augmented",
    "dominant7",
    "major7",
    "minor7",
    "dim7",
    "half-diminished7",
    "sus2",
    "sus4",
    "add9",
    "power",
]
ChordFunction = Literal["tonic", "tonic-substitute", "subdominant", "predominant", "dominant", "borrowed"]
QualityHint = Literal["diatonic", "major", "minor", "diminished", "dominant7", "major7", "minor7", "power"]
MoodTag = Literal["happy", "sad", "epic", "nostalgic", "tense", "romantic", "chill", "energetic", "any"]

VALID_TONICS = {"C", "C#", "Db", "D", "D#", "Eb", "E", "F", "F#", "Gb", "G", "G#", "Ab", "A", "A#", "Bb", "B"}
FLAT_TO_SHARP = {"Db": "C#", "Eb": "D#", "Gb": "F#", "Ab": "G#", "Bb": "A#"}


class Key(BaseModel):
    model_config = ConfigDict(frozen=True)

    tonic: CanonicalNote
    mode: Mode = "major"

    @field_validator("tonic", mode="before")
    @classmethod
    def normalize_tonic(cls, value: str) -> str:
        cleaned = str(value).strip()
        if cleaned:
            cleaned = cleaned[0].upper() + cleaned[1:]
        if cleaned not in VALID_TONICS:
            raise ValueError("Invalid key tonic. Allowed tonics are A-G with optional #/b.")
        return FLAT_TO_SHARP.get(cleaned, cleaned)

    @property
    def id(self) -> str:
        return f"{self.tonic}m" if self.mode == "minor" else self.tonic


class Chord(BaseModel):
    model_config = ConfigDict(frozen=True)

    root: CanonicalNote
    quality: ChordQuality
    name: str
    notes: list[CanonicalNote] = Field(min_length=2)
    roman_numeral: str | None = None
    function: ChordFunction | None = None
    bass_note: CanonicalNote | None = None


class TempoRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: int = Field(ge=20, le=300)
    max: int = Field(ge=20, le=300)

    @model_validator(mode="after")
    def validate_order(self):
        if self.max < self.min:
            raise ValueError("Tempo range max must not be below min.")
        return self


class MoodAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Mode = "major"
    energy: Level = "medium"
    tension: Level = "medium"
    brightness: Brightness = "neutral"
    tempo_range: TempoRange = Field(default_factory=lambda: TempoRange(min=80, max=120))
    use_sevenths: bool = False
    use_borrowed_chords: bool = False
    use_suspensions: bool = False
    use_inversions: bool = False
    pedal_bass_chance: float = Field(default=0, ge=0, le=1)
    preferred_functions: list[ChordFunction] = Field(default_factory=lambda: ["tonic", "subdominant", "dominant"])
    positivity: float = Field(default=0, ge=-1, le=1)
    intensity: float = Field(default=0.5, ge=0, le=1)
    keywords: list[str] = Field(default_factory=list)


class NamedProgression(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    degrees: list[int] = Field(min_length=1)
    qualities: list[QualityHint] = Field(min_length=1)
    moods: list[MoodTag] = Field(min_length=1)
    suitable_for: list[SectionType] = Field(min_length=1)
    description: str

    @model_validator(mode="after")
    def validate_shape(self):
        if len(self.degrees) != len(self.qualities):
            raise ValueError(f"Progression '{self.name}' needs one quality hint per degree.")
        if any(degree < 1 or degree > 7 for degree in self.degrees):
            raise ValueError(f"Progression '{self.name}' uses scale degrees outside 1-7.")
        return self


class SongSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: SectionType
    name: str
    chords: list[Chord] = Field(min_length=1)
    bars: int = Field(ge=1)


class Song(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    key: Key
    tempo: int = Field(ge=20, le=300)
    sections: list[SongSection] = Field(min_length=1)
    mood: str
    generated_by: Literal["algorithmic"] = "algorithmic"
    analysis: MoodAnalysis


class KeyRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: Key
    rationale: str
    confidence: Confidence
    alternative_keys: list[Key] = Field(default_factory=list, max_length=2)


class SongRequest(BaseModel):
    mood: str = Field(max_length=2000)
    key: Key | None = None
    style: str | None = Field(default=None, max_length=200)
    complexity: Complexity = "moderate"


class MoodRequest(BaseModel):
    mood: str = Field(max_length=2000)
    style: str | None = Field(default=None, max_length=200)


class ProgressionCatalogResponse(BaseModel):
    progressions: list[NamedProgression]
