# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Cultural content selection.

Usage:
    from edupersona.core.content import CulturalContentSelector, load_curated_content

    curated = load_curated_content(settings.content_dir)
    selector = CulturalContentSelector(config, curated)
    descriptor = selector.select("mathematics", "Odia", language, target_age_level=10)
"""

from edupersona.core.content.models import (
    AgeRange,
    ContentBody,
    CulturalContentDescriptor,
    CuratedContent,
    EducationalValue,
)
from edupersona.core.content.selector import (
    ContentLoadError,
    CulturalContentSelector,
    load_curated_content,
)

__all__ = [
    "CulturalContentSelector",
    "CulturalContentDescriptor",
    "ContentBody",
    "EducationalValue",
    "AgeRange",
    "CuratedContent",
    "load_curated_content",
    "ContentLoadError",
]
