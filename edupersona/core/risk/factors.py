# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Risk factor predicates.

Each factor is a small named predicate over a RiskContext. Factors are
independent of one another; the predictor evaluates the enabled ones in
configured order and counts how many apply. Adding a factor means adding
a subclass here and registering it in FACTOR_CLASSES.
"""

from abc import ABC, abstractmethod
from collections import defaultdict

from edupersona.core.config.engine import RiskConfig
from edupersona.core.profile.models import PerformanceRecord
from edupersona.core.risk.models import RiskContext
from edupersona.utils.datetime import ensure_utc


class BaseRiskFactor(ABC):
    """Abstract base class for risk factors."""

    def __init__(self, config: RiskConfig) -> None:
        """Initialize the factor.

        Args:
            config: Risk thresholds
        """
        self._config = config

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the factor name reported in assessments."""
        ...

    @abstractmethod
    def applies(self, context: RiskContext) -> bool:
        """Check whether the factor applies to the learner.

        Args:
            context: Learner profile and history

        Returns:
            True if the learner is at risk on this factor
        """
        ...


class LowEngagementFactor(BaseRiskFactor):
    """Too few recorded interactions."""

    @property
    def name(self) -> str:
        return "low_engagement"

    def applies(self, context: RiskContext) -> bool:
        return len(context.history) < self._config.min_interactions


class AcademicStrugglesFactor(BaseRiskFactor):
    """More challenge subjects than strength subjects."""

    @property
    def name(self) -> str:
        return "academic_struggles"

    def applies(self, context: RiskContext) -> bool:
        return len(context.profile.challenges) > len(context.profile.strengths)


class AttentionDifficultiesFactor(BaseRiskFactor):
    """Short mean session length."""

    @property
    def name(self) -> str:
        return "attention_difficulties"

    def applies(self, context: RiskContext) -> bool:
        return context.profile.attention_span_minutes < self._config.min_attention_minutes


class HighFrustrationFactor(BaseRiskFactor):
    """Mean frustration across the history at or above the threshold."""

    @property
    def name(self) -> str:
        return "high_frustration"

    def applies(self, context: RiskContext) -> bool:
        if not context.history:
            return False
        total = sum(interaction.learning_metrics.frustration for interaction in context.history)
        return total / len(context.history) >= self._config.frustration_threshold


class DecliningPerformanceFactor(BaseRiskFactor):
    """Latest score in some subject dropped well below the earliest one.

    Records are ordered by recorded_at when every record of the subject
    carries one, otherwise by input order.
    """

    @property
    def name(self) -> str:
        return "declining_performance"

    def applies(self, context: RiskContext) -> bool:
        by_subject: dict[str, list[PerformanceRecord]] = defaultdict(list)
        for record in context.performance:
            by_subject[record.subject].append(record)

        for records in by_subject.values():
            if len(records) < 2:
                continue
            if all(record.recorded_at is not None for record in records):
                records = sorted(records, key=lambda record: ensure_utc(record.recorded_at))
            if records[0].score - records[-1].score >= self._config.performance_drop_points:
                return True
        return False


FACTOR_CLASSES: dict[str, type[BaseRiskFactor]] = {
    "low_engagement": LowEngagementFactor,
    "academic_struggles": AcademicStrugglesFactor,
    "attention_difficulties": AttentionDifficultiesFactor,
    "high_frustration": HighFrustrationFactor,
    "declining_performance": DecliningPerformanceFactor,
}


def build_factors(config: RiskConfig) -> tuple[BaseRiskFactor, ...]:
    """Instantiate the enabled factors in configured order.

    Args:
        config: Risk configuration

    Returns:
        Factor instances

    Raises:
        ValueError: If an enabled factor name is not registered
    """
    unknown = [name for name in config.enabled_factors if name not in FACTOR_CLASSES]
    if unknown:
        raise ValueError(f"Unknown risk factors: {', '.join(unknown)}")
    return tuple(FACTOR_CLASSES[name](config) for name in config.enabled_factors)
