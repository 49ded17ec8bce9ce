# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Risk assessment models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from edupersona.core.profile.models import LearnerProfile, PerformanceRecord, VoiceInteraction


class RiskLevel(str, Enum):
    """Dropout or disengagement risk level."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class InterventionPlan(BaseModel):
    """Recommended interventions by time horizon."""

    model_config = ConfigDict(frozen=True)

    immediate: tuple[str, ...] = ()
    short_term: tuple[str, ...] = ()
    long_term: tuple[str, ...] = ()


class RiskContext(BaseModel):
    """Everything a risk factor may look at for one learner."""

    model_config = ConfigDict(frozen=True)

    profile: LearnerProfile
    history: tuple[VoiceInteraction, ...] = ()
    performance: tuple[PerformanceRecord, ...] = ()


class RiskAssessment(BaseModel):
    """Risk classification and support plan for one learner.

    Attributes:
        learner_id: Assessed learner
        risk_level: Level derived from the number of risk factors
        risk_factors: Names of the factors that applied, in evaluation order
        interventions: Recommended interventions
        success_predictors: Signals that favour the learner's success
        cultural_considerations: One consideration per background tag
        parental_engagement: Share of sessions with a guardian present
        community_support: Estimated community support
    """

    model_config = ConfigDict(frozen=True)

    learner_id: str
    risk_level: RiskLevel
    risk_factors: tuple[str, ...] = ()
    interventions: InterventionPlan = Field(default_factory=InterventionPlan)
    success_predictors: tuple[str, ...] = ()
    cultural_considerations: tuple[str, ...] = ()
    parental_engagement: float = Field(ge=0.0, le=1.0)
    community_support: float = Field(ge=0.0, le=1.0)
