# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Learner dropout risk prediction.

Risk factors:
- low_engagement: Fewer interactions than the configured minimum
- academic_struggles: More challenge subjects than strengths
- attention_difficulties: Short mean session length
- high_frustration: High mean frustration (disabled by default)
- declining_performance: Falling scores in a subject (disabled by default)
"""

from edupersona.core.risk.factors import (
    FACTOR_CLASSES,
    AcademicStrugglesFactor,
    AttentionDifficultiesFactor,
    BaseRiskFactor,
    DecliningPerformanceFactor,
    HighFrustrationFactor,
    LowEngagementFactor,
    build_factors,
)
from edupersona.core.risk.models import InterventionPlan, RiskAssessment, RiskContext, RiskLevel
from edupersona.core.risk.predictor import RiskPredictor

__all__ = [
    "RiskPredictor",
    "RiskAssessment",
    "RiskLevel",
    "RiskContext",
    "InterventionPlan",
    "BaseRiskFactor",
    "LowEngagementFactor",
    "AcademicStrugglesFactor",
    "AttentionDifficultiesFactor",
    "HighFrustrationFactor",
    "DecliningPerformanceFactor",
    "FACTOR_CLASSES",
    "build_factors",
]
