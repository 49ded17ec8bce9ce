# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Learning path models."""

from pydantic import BaseModel, ConfigDict, Field


class CulturalConnection(BaseModel):
    """Cultural framing of a learning path."""

    model_config = ConfigDict(frozen=True)

    local_example: str
    global_context: str
    historical_note: str


class MultimodalContent(BaseModel):
    """Media pointers for a learning path.

    Attributes:
        audio_narration: Narration audio path
        visual_aids: Image paths
        interactive_elements: Interactive activity tags
        cultural_artifacts: Cultural artifact image paths
    """

    model_config = ConfigDict(frozen=True)

    audio_narration: str
    visual_aids: tuple[str, ...] = ()
    interactive_elements: tuple[str, ...] = ()
    cultural_artifacts: tuple[str, ...] = ()


class AssessmentStrategy(BaseModel):
    """How progress on the path is assessed."""

    model_config = ConfigDict(frozen=True)

    formative: tuple[str, ...] = ()
    summative: tuple[str, ...] = ()
    culturally_responsive: bool = True


class AdaptiveLearningPath(BaseModel):
    """The next step of a learner's path through one subject.

    Attributes:
        id: Deterministic path identifier
        learner_id: Learner the path belongs to
        subject: Subject of the path
        current_module: Module at the learner's current mastery
        next_module: Recommended next module
        difficulty: Difficulty of the next module (1-10)
        estimated_minutes: Estimated completion time
        cultural_connection: Cultural framing
        multimodal_content: Media pointers
        assessment_strategy: Assessment plan
    """

    model_config = ConfigDict(frozen=True)

    id: str
    learner_id: str
    subject: str
    current_module: str
    next_module: str
    difficulty: int = Field(ge=1)
    estimated_minutes: float = Field(ge=0)
    cultural_connection: CulturalConnection
    multimodal_content: MultimodalContent
    assessment_strategy: AssessmentStrategy
