# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Catalog data models for EduPersona.

Languages and tutor personas are static catalog entries: loaded once from
YAML, frozen, and shared read-only by every engine call. A tutor's
personality is plain data; behavior differences come only from the
adaptive-behavior vector, never from subclasses.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LearningStyleAffinity(str, Enum):
    """Dominant learning-style affinity of a culture."""

    VISUAL = "visual"
    AUDITORY = "auditory"
    KINESTHETIC = "kinesthetic"
    MIXED = "mixed"


class Importance(str, Enum):
    """Importance level of oral history in a culture."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class PreservationStatus(str, Enum):
    """Language preservation status."""

    STABLE = "stable"
    ENDANGERED = "endangered"
    CRITICALLY_ENDANGERED = "critically_endangered"


class Personality(str, Enum):
    """Tutor personality archetype."""

    FRIENDLY = "friendly"
    PROFESSIONAL = "professional"
    ENCOURAGING = "encouraging"
    WISE_ELDER = "wise_elder"
    PEER_MENTOR = "peer_mentor"


class VoiceGender(str, Enum):
    """Descriptive voice gender of a tutor."""

    MALE = "male"
    FEMALE = "female"
    NEUTRAL = "neutral"


class VoiceAge(str, Enum):
    """Descriptive voice age band of a tutor."""

    CHILD = "child"
    YOUNG_ADULT = "young_adult"
    ADULT = "adult"
    ELDER = "elder"


class VoiceTone(str, Enum):
    """Descriptive voice tone of a tutor."""

    WARM = "warm"
    ENERGETIC = "energetic"
    CALM = "calm"
    AUTHORITATIVE = "authoritative"


class CulturalContext(BaseModel):
    """Cultural context attached to a language.

    Attributes:
        traditional_greeting: Greeting used to open tutor responses
        learning_style: Dominant learning-style affinity
        storytelling_tradition: Whether the culture has a storytelling tradition
        oral_history_importance: Weight of oral history
        traditions: Tradition labels (e.g., "Vedic", "Tribal")
    """

    model_config = ConfigDict(frozen=True)

    traditional_greeting: str = Field(
        default="Hello",
        description="Greeting used to open tutor responses",
    )
    learning_style: LearningStyleAffinity = Field(
        default=LearningStyleAffinity.MIXED,
        description="Dominant learning-style affinity",
    )
    storytelling_tradition: bool = Field(
        default=False,
        description="Whether the culture has a storytelling tradition",
    )
    oral_history_importance: Importance = Field(
        default=Importance.MEDIUM,
        description="Weight of oral history",
    )
    traditions: tuple[str, ...] = Field(
        default=(),
        description="Tradition labels",
    )


class Language(BaseModel):
    """A supported locale descriptor.

    Attributes:
        code: Language code (e.g., "hi", "or", "sat")
        name: English display name
        native_name: Name in the language itself
        region: Region where the language is spoken
        is_indigenous: Whether this is an indigenous/tribal language
        cultural_context: Cultural context record
        tts_support: Speech synthesis available
        stt_support: Speech recognition available
        family: Language family label
        script: Writing script label
        direction: Text direction
        preservation_status: Preservation status
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(
        ...,
        description="Language code",
        min_length=1,
    )
    name: str = Field(
        ...,
        description="English display name",
        min_length=1,
    )
    native_name: str = Field(
        default="",
        description="Name in the language itself",
    )
    region: str = Field(
        default="Global",
        description="Region where the language is spoken",
    )
    is_indigenous: bool = False
    cultural_context: CulturalContext = Field(default_factory=CulturalContext)
    tts_support: bool = False
    stt_support: bool = False
    family: str = "other"
    script: str = "other"
    direction: str = Field(default="ltr", pattern=r"^(ltr|rtl)$")
    preservation_status: PreservationStatus = PreservationStatus.STABLE

    @classmethod
    def unknown(cls, code: str) -> "Language":
        """Build the degraded placeholder for a code missing from the catalog.

        Args:
            code: The unrecognized language code

        Returns:
            Language named after its code with no capabilities
        """
        return cls(
            code=code,
            name=code,
            native_name=code,
            region="Unknown",
            is_indigenous=False,
            tts_support=False,
            stt_support=False,
        )


class VoiceCharacteristics(BaseModel):
    """Descriptive voice profile. Consumers map it to a TTS voice."""

    model_config = ConfigDict(frozen=True)

    gender: VoiceGender = VoiceGender.NEUTRAL
    age: VoiceAge = VoiceAge.ADULT
    accent: str = "neutral"
    tone: VoiceTone = VoiceTone.WARM


class AdaptiveBehavior(BaseModel):
    """Behavioral tuning of a tutor persona.

    Attributes:
        patience_level: Patience with repeated mistakes (1-10)
        encouragement_frequency: How often to encourage (1-10)
        cultural_references_usage: Density of cultural references (1-10)
        complexity_adaptation: Whether the tutor adapts explanation complexity
    """

    model_config = ConfigDict(frozen=True)

    patience_level: int = Field(default=5, ge=1, le=10)
    encouragement_frequency: int = Field(default=5, ge=1, le=10)
    cultural_references_usage: int = Field(default=5, ge=1, le=10)
    complexity_adaptation: bool = False


class TutorPersona(BaseModel):
    """A virtual tutor catalog entry.

    Attributes:
        id: Unique identifier for the tutor
        name: Display name
        personality: Personality archetype
        language: Language the tutor speaks
        specializations: Subjects the tutor specializes in
        cultural_background: Free-text cultural background label
        voice: Descriptive voice characteristics
        behavior: Adaptive behavior vector
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        description="Unique identifier for the tutor",
        min_length=1,
        pattern=r"^[a-z][a-z0-9_]*$",
    )
    name: str = Field(..., min_length=1)
    personality: Personality = Personality.FRIENDLY
    language: Language
    specializations: tuple[str, ...] = ()
    cultural_background: str = ""
    voice: VoiceCharacteristics = Field(default_factory=VoiceCharacteristics)
    behavior: AdaptiveBehavior = Field(default_factory=AdaptiveBehavior)
