# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Learner risk prediction.

The risk level is a count of applying factors:

    count >= high_threshold    -> high
    count >= medium_threshold  -> medium
    otherwise                  -> low

Success predictors, cultural considerations, parental engagement and
community support are computed alongside and never affect the level.

Usage:
    from edupersona.core.risk import RiskPredictor

    predictor = RiskPredictor(config)
    assessments = predictor.predict_batch(profiles, histories, performance)
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence

from edupersona.core.config.engine import EngineConfig, EngineConfigError
from edupersona.core.errors import InvalidInputError, MisalignedInputError
from edupersona.core.profile.models import LearnerProfile, PerformanceRecord, VoiceInteraction
from edupersona.core.risk.factors import BaseRiskFactor, build_factors
from edupersona.core.risk.models import InterventionPlan, RiskAssessment, RiskContext, RiskLevel
from edupersona.utils.logging import get_logger
from edupersona.utils.text import slugify

logger = get_logger(__name__)

CULTURAL_CONNECTION_TAG = "cultural_connection"


class RiskPredictor:
    """Classifies learners by dropout risk and recommends interventions."""

    def __init__(self, config: EngineConfig, max_workers: int = 1):
        """Initialize the predictor.

        Args:
            config: Engine configuration
            max_workers: Thread pool size for predict_batch; 1 runs
                sequentially

        Raises:
            EngineConfigError: If an enabled risk factor is not registered
        """
        if max_workers < 1:
            raise InvalidInputError("max_workers must be at least 1")

        self._config = config.risk
        self._max_workers = max_workers
        try:
            self._factors: tuple[BaseRiskFactor, ...] = build_factors(self._config)
        except ValueError as e:
            raise EngineConfigError(str(e)) from e

    @property
    def factor_names(self) -> tuple[str, ...]:
        """Names of the evaluated factors, in evaluation order."""
        return tuple(factor.name for factor in self._factors)

    def predict_batch(
        self,
        profiles: Sequence[LearnerProfile],
        interaction_histories: Sequence[Sequence[VoiceInteraction]],
        performance_data: Sequence[Sequence[PerformanceRecord]],
    ) -> list[RiskAssessment]:
        """Assess a batch of learners.

        The three sequences are index-aligned: entry i of each belongs to
        the same learner.

        Args:
            profiles: Learner profiles
            interaction_histories: One interaction history per learner
            performance_data: One list of performance records per learner

        Returns:
            One RiskAssessment per learner, in input order

        Raises:
            MisalignedInputError: If the sequences differ in length
        """
        lengths = {
            "profiles": len(profiles),
            "interaction_histories": len(interaction_histories),
            "performance_data": len(performance_data),
        }
        if len(set(lengths.values())) != 1:
            raise MisalignedInputError(lengths)

        jobs = list(zip(profiles, interaction_histories, performance_data))

        if self._max_workers > 1 and len(jobs) > 1:
            # map() yields results in submission order
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                assessments = list(executor.map(lambda job: self.predict(*job), jobs))
        else:
            assessments = [self.predict(*job) for job in jobs]

        logger.info(
            "risk_batch_assessed",
            learners=len(assessments),
            high=sum(1 for a in assessments if a.risk_level == RiskLevel.HIGH),
            medium=sum(1 for a in assessments if a.risk_level == RiskLevel.MEDIUM),
            workers=self._max_workers,
        )
        return assessments

    def predict(
        self,
        profile: LearnerProfile,
        history: Optional[Sequence[VoiceInteraction]],
        performance: Optional[Sequence[PerformanceRecord]],
    ) -> RiskAssessment:
        """Assess a single learner.

        Args:
            profile: Learner profile
            history: Learner's interaction history
            performance: Learner's performance records

        Returns:
            RiskAssessment

        Raises:
            InvalidInputError: If any argument is None
        """
        if profile is None or history is None or performance is None:
            raise InvalidInputError("profile, history and performance are required")

        context = RiskContext(
            profile=profile,
            history=tuple(history),
            performance=tuple(performance),
        )
        risk_factors = tuple(factor.name for factor in self._factors if factor.applies(context))
        risk_level = self.classify(len(risk_factors))

        assessment = RiskAssessment(
            learner_id=profile.id,
            risk_level=risk_level,
            risk_factors=risk_factors,
            interventions=self._interventions(risk_level),
            success_predictors=self._success_predictors(context),
            cultural_considerations=tuple(
                f"respect_{slugify(tag)}_values" for tag in profile.cultural_background
            ),
            parental_engagement=self._parental_engagement(context),
            community_support=self._community_support(profile),
        )

        logger.debug(
            "risk_assessed",
            learner_id=profile.id,
            risk_level=risk_level.value,
            risk_factors=list(risk_factors),
        )
        return assessment

    def classify(self, factor_count: int) -> RiskLevel:
        """Map a factor count to a risk level."""
        if factor_count >= self._config.high_threshold:
            return RiskLevel.HIGH
        if factor_count >= self._config.medium_threshold:
            return RiskLevel.MEDIUM
        return RiskLevel.LOW

    def _interventions(self, risk_level: RiskLevel) -> InterventionPlan:
        base = self._config.base_interventions
        immediate = base.immediate
        if risk_level == RiskLevel.HIGH:
            immediate = immediate + self._config.high_escalation
        return InterventionPlan(
            immediate=immediate,
            short_term=base.short_term,
            long_term=base.long_term,
        )

    def _success_predictors(self, context: RiskContext) -> tuple[str, ...]:
        profile = context.profile
        predictors = []

        sessions = {interaction.session_id for interaction in context.history}
        if len(sessions) >= self._config.regular_engagement_sessions:
            predictors.append("regular_engagement")
        if CULTURAL_CONNECTION_TAG in profile.motivational_factors:
            predictors.append("cultural_connection")
        if any(interaction.guardian_present for interaction in context.history):
            predictors.append("family_support")
        if context.history and profile.attention_span_minutes >= self._config.sustained_focus_minutes:
            predictors.append("sustained_focus")
        if profile.strengths:
            predictors.append("academic_strengths")

        # Never empty for a learner with background tags
        if not predictors and profile.cultural_background:
            return self._config.default_success_predictors
        return tuple(predictors)

    def _parental_engagement(self, context: RiskContext) -> float:
        if not context.history:
            return self._config.default_parental_engagement

        sessions: dict[str, bool] = {}
        for interaction in context.history:
            sessions[interaction.session_id] = (
                sessions.get(interaction.session_id, False) or interaction.guardian_present
            )
        return round(sum(sessions.values()) / len(sessions), 2)

    def _community_support(self, profile: LearnerProfile) -> float:
        tags = {tag.lower() for tag in profile.cultural_background}
        matches = [
            support for tag, support in self._config.community_support_tags.items()
            if tag.lower() in tags
        ]
        return max(matches, default=self._config.default_community_support)
