# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Learner input and profile models.

VoiceInteraction and PerformanceRecord are what callers hand in; the
LearnerProfile is what ProfileAnalyzer derives from them and what every
downstream component consumes.
"""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from edupersona.core.catalog.models import Language
from edupersona.core.config.engine import LEARNING_STYLE_DIMENSIONS
from edupersona.utils.datetime import utc_now
from edupersona.utils.mappings import as_dict, read_only


class Emotion(str, Enum):
    """Detected learner emotion for a single utterance."""

    HAPPY = "happy"
    CONFUSED = "confused"
    FRUSTRATED = "frustrated"
    CONFIDENT = "confident"
    NEUTRAL = "neutral"


class Modality(str, Enum):
    """Channel through which an interaction happened."""

    AUDIO = "audio"
    TEXT = "text"
    INTERACTIVE = "interactive"
    VISUAL = "visual"


class StudentInput(BaseModel):
    """What the learner said or typed."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    # Free-form label from the upstream detector; unrecognized labels read as neutral
    emotion: str = Emotion.NEUTRAL.value
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)
    language: str = Field(default="en", min_length=1)


class TutorResponseMeta(BaseModel):
    """What the tutor answered, as recorded in the history."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    cultural_references: tuple[str, ...] = ()
    encouragement_level: int = Field(default=5, ge=0, le=10)
    adaptations_made: tuple[str, ...] = ()


class LearningMetrics(BaseModel):
    """Per-interaction learning signals, each in [0, 1]."""

    model_config = ConfigDict(frozen=True)

    comprehension: float = Field(default=0.5, ge=0.0, le=1.0)
    engagement: float = Field(default=0.5, ge=0.0, le=1.0)
    frustration: float = Field(default=0.0, ge=0.0, le=1.0)
    cultural_resonance: float = Field(default=0.5, ge=0.0, le=1.0)


class VoiceInteraction(BaseModel):
    """One recorded tutor/learner exchange.

    Attributes:
        session_id: Session the exchange belongs to
        timestamp: When the exchange happened
        learner_id: Learner identifier
        tutor_id: Tutor identifier
        student_input: Learner utterance
        tutor_response: Tutor reply metadata
        learning_metrics: Learning signals for the exchange
        modality: Interaction channel
        duration_seconds: Time spent on the exchange
        topic: Optional topic tag
        guardian_present: Whether a parent or guardian took part
        accessibility_signals: Accessibility needs observed in the exchange
    """

    model_config = ConfigDict(frozen=True)

    session_id: str = Field(..., min_length=1)
    timestamp: datetime = Field(default_factory=utc_now)
    learner_id: str = ""
    tutor_id: str = ""
    student_input: StudentInput = Field(default_factory=StudentInput)
    tutor_response: TutorResponseMeta = Field(default_factory=TutorResponseMeta)
    learning_metrics: LearningMetrics = Field(default_factory=LearningMetrics)
    modality: Modality = Modality.AUDIO
    duration_seconds: float = Field(default=0.0, ge=0.0)
    topic: Optional[str] = None
    guardian_present: bool = False
    accessibility_signals: tuple[str, ...] = ()


class PerformanceRecord(BaseModel):
    """A single assessment result for one subject."""

    model_config = ConfigDict(frozen=True)

    subject: str = Field(..., min_length=1)
    score: float = Field(..., ge=0.0, le=100.0, description="Score as a percentage")
    recorded_at: Optional[datetime] = None


class LearningStyleMix(BaseModel):
    """Relative learning-style affinities.

    Weights are non-negative and need not sum to 1.
    """

    model_config = ConfigDict(frozen=True)

    visual: float = Field(default=0.25, ge=0.0)
    auditory: float = Field(default=0.25, ge=0.0)
    kinesthetic: float = Field(default=0.25, ge=0.0)
    reading: float = Field(default=0.25, ge=0.0)

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in LEARNING_STYLE_DIMENSIONS}

    def dominant_style(self, threshold: float = 0.35) -> str:
        """Get the strongest style, or "multimodal" when none stands out.

        Ties resolve in the order visual, auditory, kinesthetic, reading.

        Args:
            threshold: Minimum weight for a style to count as dominant

        Returns:
            Style name or "multimodal"
        """
        weights = self.as_dict()
        best = max(LEARNING_STYLE_DIMENSIONS, key=lambda name: weights[name])
        if weights[best] < threshold:
            return "multimodal"
        return best


class LearnerProfile(BaseModel):
    """Derived learner profile.

    Attributes:
        id: Learner identifier
        preferred_languages: Languages ranked by use, most used first
        learning_style: Learning-style mix
        cultural_background: Cultural background tags
        mastery_levels: Subject to mastery level (1-10)
        strengths: Subjects with a high mean score
        challenges: Subjects with a low mean score
        interests: Topic tags, most frequent first
        motivational_factors: Motivation tags
        attention_span_minutes: Mean session length in minutes
        best_learning_times: Time-of-day buckets, most frequent first
        accessibility_needs: Accessibility need tags
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    preferred_languages: tuple[Language, ...] = ()
    learning_style: LearningStyleMix = Field(default_factory=LearningStyleMix)
    cultural_background: tuple[str, ...] = ()
    mastery_levels: Mapping[str, int] = Field(default_factory=dict, validate_default=True)
    strengths: tuple[str, ...] = ()
    challenges: tuple[str, ...] = ()
    interests: tuple[str, ...] = ()
    motivational_factors: tuple[str, ...] = ()
    attention_span_minutes: float = Field(default=15.0, gt=0)
    best_learning_times: tuple[str, ...] = ()
    accessibility_needs: tuple[str, ...] = ()

    @field_validator("mastery_levels")
    @classmethod
    def _freeze_mastery(cls, value: Mapping[str, int]) -> Mapping[str, int]:
        return read_only(value)

    @field_serializer("mastery_levels")
    def _dump_mastery(self, value: Mapping[str, int]) -> dict[str, int]:
        return as_dict(value)

    @property
    def language_codes(self) -> tuple[str, ...]:
        """Codes of the preferred languages, in rank order."""
        return tuple(language.code for language in self.preferred_languages)
