# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Culturally aware tutor reply composition.

The composer builds the text of a tutor's reply from the tutor's
language and background, then annotates it with the cultural references
it contains and an encouragement level tuned to the learner's emotion.
Speech synthesis is the host's job; only text and metadata are produced.
"""

from pydantic import BaseModel, ConfigDict, Field

from edupersona.core.catalog.models import TutorPersona
from edupersona.core.config.engine import EngineConfig
from edupersona.core.profile.models import Emotion
from edupersona.utils.logging import get_logger

logger = get_logger(__name__)

# Keyword found in the reply text -> reference tag
REFERENCE_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("ancestors", "ancestral_wisdom"),
    ("heritage", "cultural_heritage"),
    ("tradition", "traditional_knowledge"),
)


class TutorResponse(BaseModel):
    """A composed tutor reply."""

    model_config = ConfigDict(frozen=True)

    tutor_id: str
    language_code: str
    text: str
    cultural_references: tuple[str, ...] = ()
    encouragement_level: int = Field(ge=0, le=10)
    adaptations_made: tuple[str, ...] = ()


class ResponseComposer:
    """Composes tutor replies in the tutor's cultural voice."""

    def __init__(self, config: EngineConfig):
        self._config = config.response

    def compose(
        self,
        tutor: TutorPersona,
        student_input: str,
        emotion: Emotion | str,
        learning_objective: str,
    ) -> TutorResponse:
        """Compose a reply to the learner.

        Unrecognized emotions are treated as neutral.

        Args:
            tutor: Tutor persona speaking
            student_input: What the learner said
            emotion: Detected learner emotion
            learning_objective: What the reply should teach

        Returns:
            TutorResponse with text and metadata
        """
        emotion = self.resolve_emotion(emotion)
        context = tutor.language.cultural_context

        parts = [f"{context.traditional_greeting}!"]
        if emotion == Emotion.FRUSTRATED:
            if "traditional" in tutor.cultural_background.lower():
                approach = "our ancestors approached learning - with patience and wisdom."
            else:
                approach = "we're exploring together."
            parts.append(
                f"I understand this can be challenging. Let's approach this like {approach}"
            )
        parts.append(f"Let me share how {learning_objective} connects to our rich heritage.")
        if context.storytelling_tradition:
            parts.append("Remember, every great story begins with learning something new!")
        else:
            parts.append("You're doing wonderfully, keep going!")
        text = " ".join(parts)

        response = TutorResponse(
            tutor_id=tutor.id,
            language_code=tutor.language.code,
            text=text,
            cultural_references=self.extract_references(text),
            encouragement_level=self.encouragement_level(tutor, emotion),
            adaptations_made=self._config.adaptations,
        )
        logger.debug(
            "tutor_response_composed",
            tutor_id=tutor.id,
            emotion=emotion.value,
            input_length=len(student_input),
            encouragement_level=response.encouragement_level,
        )
        return response

    @staticmethod
    def extract_references(text: str) -> tuple[str, ...]:
        """Detect cultural reference tags by keyword."""
        lowered = text.lower()
        return tuple(tag for keyword, tag in REFERENCE_KEYWORDS if keyword in lowered)

    @staticmethod
    def resolve_emotion(emotion: Emotion | str) -> Emotion:
        """Map an emotion label to Emotion, falling back to neutral."""
        if isinstance(emotion, Emotion):
            return emotion
        try:
            return Emotion(str(emotion).strip().lower())
        except ValueError:
            logger.debug("unknown_emotion_fallback", emotion=emotion)
            return Emotion.NEUTRAL

    def encouragement_level(self, tutor: TutorPersona, emotion: Emotion | str) -> int:
        """Tutor's encouragement frequency, raised for frustrated learners
        and lowered for confident ones."""
        emotion = self.resolve_emotion(emotion)
        level = tutor.behavior.encouragement_frequency
        if emotion == Emotion.FRUSTRATED:
            level = min(self._config.max_level, level + self._config.frustrated_boost)
        elif emotion == Emotion.CONFIDENT:
            level = max(self._config.confident_floor, level - self._config.confident_drop)
        return level
