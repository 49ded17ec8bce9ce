# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tutor persona selection.

Each catalog tutor is scored against the learner on four independent
criteria (language, subject, culture, learning style). Points per
criterion come from TutorScoringConfig and sum to 100, so a tutor that
matches everything scores exactly 100. The first tutor in catalog order
with the highest score wins.

Usage:
    from edupersona.core.tutoring import TutorSelector

    selector = TutorSelector(config, catalog)
    tutor = selector.select(profile, "mathematics", cultural_preference="Odia")

    # Explain the choice
    for score in selector.rank(profile, "mathematics"):
        print(score.tutor_id, score.total, score.breakdown)
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from edupersona.core.catalog.models import TutorPersona
from edupersona.core.catalog.registry import Catalog
from edupersona.core.config.engine import EngineConfig
from edupersona.core.errors import InvalidInputError, NoTutorAvailableError
from edupersona.core.profile.models import LearnerProfile
from edupersona.utils.logging import get_logger

logger = get_logger(__name__)


class TutorScore(BaseModel):
    """Score of one tutor for one learner and subject.

    Attributes:
        tutor_id: Scored tutor
        language: Points for a shared language
        subject: Points for a matching specialization
        culture: Points for a matching cultural background
        style: Points for learning-style compatibility
    """

    model_config = ConfigDict(frozen=True)

    tutor_id: str
    language: int = Field(default=0, ge=0)
    subject: int = Field(default=0, ge=0)
    culture: int = Field(default=0, ge=0)
    style: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        """Sum of all criterion points."""
        return self.language + self.subject + self.culture + self.style

    @property
    def breakdown(self) -> dict[str, int]:
        """Points per criterion."""
        return {
            "language": self.language,
            "subject": self.subject,
            "culture": self.culture,
            "style": self.style,
        }


class TutorSelector:
    """Scores catalog tutors and picks the best match."""

    def __init__(self, config: EngineConfig, catalog: Catalog):
        """Initialize the selector.

        Args:
            config: Engine configuration (tutor weights and thresholds)
            catalog: Tutor catalog, in tie-break order
        """
        self._scoring = config.tutor
        self._catalog = catalog

    def score(
        self,
        profile: LearnerProfile,
        tutor: TutorPersona,
        subject: str,
        cultural_preference: Optional[str] = None,
    ) -> TutorScore:
        """Score a single tutor.

        Args:
            profile: Learner profile
            tutor: Tutor to score
            subject: Requested subject
            cultural_preference: Optional culture text to match against the
                tutor's background

        Returns:
            TutorScore with per-criterion points
        """
        weights = self._scoring.weights
        language_codes = profile.language_codes

        culture_match = bool(cultural_preference) and (
            cultural_preference.lower() in tutor.cultural_background.lower()
        )
        style_match = (
            profile.learning_style.auditory > self._scoring.auditory_threshold
            or tutor.behavior.complexity_adaptation
        )

        return TutorScore(
            tutor_id=tutor.id,
            language=weights.language if tutor.language.code in language_codes else 0,
            subject=weights.subject if subject in tutor.specializations else 0,
            culture=weights.culture if culture_match else 0,
            style=weights.style if style_match else 0,
        )

    def rank(
        self,
        profile: LearnerProfile,
        subject: str,
        cultural_preference: Optional[str] = None,
    ) -> list[TutorScore]:
        """Score every catalog tutor.

        Returns:
            Scores in catalog order
        """
        return [
            self.score(profile, tutor, subject, cultural_preference)
            for tutor in self._catalog.tutors
        ]

    def select(
        self,
        profile: LearnerProfile,
        subject: str,
        cultural_preference: Optional[str] = None,
    ) -> TutorPersona:
        """Select the best tutor for a learner and subject.

        Args:
            profile: Learner profile
            subject: Requested subject
            cultural_preference: Optional culture text

        Returns:
            The first tutor, in catalog order, with the highest score

        Raises:
            InvalidInputError: If the profile is None
            NoTutorAvailableError: If the catalog is empty or every tutor
                scores zero
        """
        if profile is None:
            raise InvalidInputError("profile is required for tutor selection")

        tutors = self._catalog.tutors
        if not tutors:
            raise NoTutorAvailableError(
                "Tutor catalog is empty",
                details={"learner_id": profile.id, "subject": subject},
            )

        scores = self.rank(profile, subject, cultural_preference)

        best_index = 0
        for index, tutor_score in enumerate(scores):
            # Strict comparison keeps the earliest tutor on ties
            if tutor_score.total > scores[best_index].total:
                best_index = index

        best = scores[best_index]
        if best.total == 0 and self._scoring.require_positive_score:
            raise NoTutorAvailableError(
                "No tutor matches the learner",
                details={"learner_id": profile.id, "subject": subject},
            )

        tutor = tutors[best_index]
        logger.info(
            "tutor_selected",
            learner_id=profile.id,
            subject=subject,
            tutor_id=tutor.id,
            score=best.total,
            breakdown=best.breakdown,
        )
        return tutor
