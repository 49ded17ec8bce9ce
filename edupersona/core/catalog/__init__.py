# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Static language and tutor persona catalogs.

Catalog entries are loaded from config/catalogs/ once per process and
exposed through the read-only Catalog.

Usage:
    from edupersona.core.catalog import get_catalog

    catalog = get_catalog()
    hindi = catalog.get_language("hi")
    tutor = catalog.get_tutor("guru_odia")

    # Unknown codes degrade instead of failing
    language = catalog.resolve_language("xx")
"""

from edupersona.core.catalog.loader import CatalogLoadError, load_languages, load_tutors
from edupersona.core.catalog.models import (
    AdaptiveBehavior,
    CulturalContext,
    Importance,
    Language,
    LearningStyleAffinity,
    Personality,
    PreservationStatus,
    TutorPersona,
    VoiceAge,
    VoiceCharacteristics,
    VoiceGender,
    VoiceTone,
)
from edupersona.core.catalog.registry import Catalog, get_catalog, reset_catalog

__all__ = [
    # Models
    "Language",
    "CulturalContext",
    "TutorPersona",
    "VoiceCharacteristics",
    "AdaptiveBehavior",
    # Enums
    "Personality",
    "LearningStyleAffinity",
    "Importance",
    "PreservationStatus",
    "VoiceGender",
    "VoiceAge",
    "VoiceTone",
    # Loader
    "load_languages",
    "load_tutors",
    "CatalogLoadError",
    # Registry
    "Catalog",
    "get_catalog",
    "reset_catalog",
]
