# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Learner profile derivation.

ProfileAnalyzer turns raw interaction and performance history into a
LearnerProfile. Every field is computed by a small rule over the inputs
and the engine configuration, so the same history always produces an
equal profile regardless of when or where it is analyzed.

Usage:
    from edupersona.core.profile import ProfileAnalyzer

    analyzer = ProfileAnalyzer(config, catalog)
    profile = analyzer.analyze("learner-1", interactions, performance)
"""

from collections import Counter, defaultdict
from typing import Optional, Sequence

from edupersona.core.catalog.models import Language
from edupersona.core.catalog.registry import Catalog
from edupersona.core.config.engine import EngineConfig
from edupersona.core.errors import InvalidInputError
from edupersona.core.profile.models import (
    LEARNING_STYLE_DIMENSIONS,
    LearnerProfile,
    LearningStyleMix,
    PerformanceRecord,
    VoiceInteraction,
)
from edupersona.utils.datetime import time_of_day
from edupersona.utils.logging import get_logger

logger = get_logger(__name__)

AUDIO_PRIMARY_NEED = "audio_primary"


def _ranked(values: Sequence[str]) -> list[str]:
    """Distinct values, most frequent first, ties by first appearance."""
    counts = Counter(values)
    first_seen = {value: index for index, value in reversed(list(enumerate(values)))}
    return sorted(counts, key=lambda value: (-counts[value], first_seen[value]))


class ProfileAnalyzer:
    """Derives learner profiles from interaction and performance history."""

    def __init__(self, config: EngineConfig, catalog: Catalog):
        """Initialize the analyzer.

        Args:
            config: Engine configuration
            catalog: Language catalog used to resolve language codes
        """
        self._config = config
        self._profile_config = config.profile
        self._catalog = catalog

    def analyze(
        self,
        learner_id: str,
        interaction_history: Optional[Sequence[VoiceInteraction]],
        performance_records: Optional[Sequence[PerformanceRecord]],
        *,
        cultural_background: Optional[Sequence[str]] = None,
    ) -> LearnerProfile:
        """Build a learner profile.

        Empty history and performance lists are valid and produce the
        configured defaults.

        Args:
            learner_id: Learner identifier
            interaction_history: Recorded interactions, any order
            performance_records: Assessment results, any order
            cultural_background: Caller-supplied background tags. When
                omitted, tags are derived from the preferred languages.

        Returns:
            Derived LearnerProfile

        Raises:
            InvalidInputError: If learner_id is empty or history or
                performance is None
        """
        if not learner_id or not learner_id.strip():
            raise InvalidInputError("learner_id must not be empty")
        if interaction_history is None:
            raise InvalidInputError(
                "interaction_history must be a sequence",
                details={"learner_id": learner_id},
            )
        if performance_records is None:
            raise InvalidInputError(
                "performance_records must be a sequence",
                details={"learner_id": learner_id},
            )

        history = list(interaction_history)
        performance = list(performance_records)

        preferred_languages = self._preferred_languages(history)
        learning_style = self._learning_style(history)
        subject_means = self._subject_means(performance)

        if cultural_background is not None:
            background = tuple(dict.fromkeys(tag for tag in cultural_background if tag))
        else:
            background = self._derived_background(preferred_languages)

        profile = LearnerProfile(
            id=learner_id,
            preferred_languages=preferred_languages,
            learning_style=learning_style,
            cultural_background=background,
            mastery_levels=self._mastery_levels(subject_means),
            strengths=tuple(
                subject for subject, mean in subject_means.items()
                if mean >= self._profile_config.strong_threshold
            ),
            challenges=tuple(
                subject for subject, mean in subject_means.items()
                if mean <= self._profile_config.weak_threshold
            ),
            interests=self._interests(history),
            motivational_factors=self._motivational_factors(history),
            attention_span_minutes=self._attention_span(history),
            best_learning_times=tuple(
                _ranked([time_of_day(interaction.timestamp) for interaction in history])
            ),
            accessibility_needs=self._accessibility_needs(history, learning_style),
        )

        logger.debug(
            "profile_analyzed",
            learner_id=learner_id,
            interactions=len(history),
            subjects=len(subject_means),
            languages=list(profile.language_codes),
        )
        return profile

    def _preferred_languages(self, history: list[VoiceInteraction]) -> tuple[Language, ...]:
        if not history:
            return (self._catalog.default_language,)

        codes = _ranked([interaction.student_input.language for interaction in history])
        return tuple(self._catalog.resolve_language(code) for code in codes)

    def _learning_style(self, history: list[VoiceInteraction]) -> LearningStyleMix:
        if not history:
            return LearningStyleMix(**self._profile_config.default_learning_style)

        counts = {name: 0 for name in LEARNING_STYLE_DIMENSIONS}
        for interaction in history:
            style = self._profile_config.modality_styles.get(interaction.modality.value)
            if style in counts:
                counts[style] += 1

        total = len(history)
        return LearningStyleMix(**{name: count / total for name, count in counts.items()})

    def _attention_span(self, history: list[VoiceInteraction]) -> float:
        if not history:
            return self._profile_config.default_attention_span_minutes

        session_seconds: dict[str, float] = defaultdict(float)
        for interaction in history:
            session_seconds[interaction.session_id] += interaction.duration_seconds

        mean_minutes = sum(session_seconds.values()) / len(session_seconds) / 60.0
        return max(self._profile_config.min_attention_span_minutes, round(mean_minutes, 2))

    @staticmethod
    def _subject_means(performance: list[PerformanceRecord]) -> dict[str, float]:
        scores: dict[str, list[float]] = defaultdict(list)
        for record in performance:
            scores[record.subject].append(record.score)
        return {subject: sum(values) / len(values) for subject, values in scores.items()}

    def _mastery_levels(self, subject_means: dict[str, float]) -> dict[str, int]:
        return {
            # Half-up rounding, so a mean of 85 is level 9
            subject: max(1, int(mean / self._profile_config.mastery_divisor + 0.5))
            for subject, mean in subject_means.items()
        }

    @staticmethod
    def _derived_background(languages: tuple[Language, ...]) -> tuple[str, ...]:
        tags: list[str] = []
        for language in languages:
            if language.region and language.region not in ("Global", "Unknown"):
                tags.append(language.region)
            tags.extend(language.cultural_context.traditions)
        return tuple(dict.fromkeys(tags))

    def _interests(self, history: list[VoiceInteraction]) -> tuple[str, ...]:
        topics = [interaction.topic for interaction in history if interaction.topic]
        return tuple(_ranked(topics)[: self._profile_config.max_interests])

    def _motivational_factors(self, history: list[VoiceInteraction]) -> tuple[str, ...]:
        if not history:
            return ()

        factors = []
        for rule in self._profile_config.motivation_rules:
            if rule.metric == "confidence":
                values = [interaction.student_input.confidence for interaction in history]
            else:
                values = [getattr(interaction.learning_metrics, rule.metric) for interaction in history]
            if sum(values) / len(values) >= rule.minimum:
                factors.append(rule.tag)
        return tuple(dict.fromkeys(factors))

    def _accessibility_needs(
        self,
        history: list[VoiceInteraction],
        learning_style: LearningStyleMix,
    ) -> tuple[str, ...]:
        needs = [signal for interaction in history for signal in interaction.accessibility_signals]
        # Only a measured auditory preference counts, not the default mix
        if history and learning_style.auditory >= self._profile_config.audio_primary_threshold:
            needs.append(AUDIO_PRIMARY_NEED)
        return tuple(dict.fromkeys(needs))
