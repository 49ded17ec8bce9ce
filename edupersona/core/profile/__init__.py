# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Learner history models and profile derivation.

Usage:
    from edupersona.core.profile import ProfileAnalyzer, VoiceInteraction

    profile = ProfileAnalyzer(config, catalog).analyze(
        "learner-1", interactions, performance,
    )
"""

from edupersona.core.profile.analyzer import ProfileAnalyzer
from edupersona.core.profile.models import (
    LEARNING_STYLE_DIMENSIONS,
    Emotion,
    LearnerProfile,
    LearningMetrics,
    LearningStyleMix,
    Modality,
    PerformanceRecord,
    StudentInput,
    TutorResponseMeta,
    VoiceInteraction,
)

__all__ = [
    # Inputs
    "VoiceInteraction",
    "StudentInput",
    "TutorResponseMeta",
    "LearningMetrics",
    "PerformanceRecord",
    "Emotion",
    "Modality",
    # Profile
    "LearnerProfile",
    "LearningStyleMix",
    "LEARNING_STYLE_DIMENSIONS",
    # Analyzer
    "ProfileAnalyzer",
]
