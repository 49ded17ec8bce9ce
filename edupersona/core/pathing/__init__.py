# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Adaptive learning path generation.

Usage:
    from edupersona.core.pathing import PathGenerator

    path = PathGenerator(config, catalog).generate(profile, "mathematics", target_level=5)
    print(path.next_module, path.estimated_minutes)
"""

from edupersona.core.pathing.generator import PATH_NAMESPACE, PathGenerator
from edupersona.core.pathing.models import (
    AdaptiveLearningPath,
    AssessmentStrategy,
    CulturalConnection,
    MultimodalContent,
)

__all__ = [
    "PathGenerator",
    "PATH_NAMESPACE",
    "AdaptiveLearningPath",
    "CulturalConnection",
    "MultimodalContent",
    "AssessmentStrategy",
]
