# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

Fixtures build small synthetic catalogs and histories so unit tests do
not depend on the shipped YAML files. Tests that exercise the shipped
configuration use the config_dir fixture.
"""

from collections.abc import Generator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from edupersona.core.catalog import (
    AdaptiveBehavior,
    Catalog,
    CulturalContext,
    Language,
    TutorPersona,
    reset_catalog,
)
from edupersona.core.config import EngineConfig, clear_settings_cache
from edupersona.core.config.engine import load_engine_config
from edupersona.core.profile import (
    LearnerProfile,
    LearningMetrics,
    LearningStyleMix,
    Modality,
    PerformanceRecord,
    StudentInput,
    VoiceInteraction,
)

REPO_ROOT = Path(__file__).resolve().parents[1]


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )


# =============================================================================
# Cache Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_caches() -> Generator[None, None, None]:
    """Drop cached settings, engine config and catalog around each test."""
    clear_settings_cache()
    load_engine_config.cache_clear()
    reset_catalog()
    yield
    clear_settings_cache()
    load_engine_config.cache_clear()
    reset_catalog()


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def config_dir() -> Path:
    """Path to the shipped config/ directory."""
    return REPO_ROOT / "config"


@pytest.fixture
def engine_config() -> EngineConfig:
    """Engine configuration with built-in defaults."""
    return EngineConfig()


# =============================================================================
# Catalog Fixtures
# =============================================================================


@pytest.fixture
def english() -> Language:
    return Language(
        code="en",
        name="English",
        native_name="English",
        region="Global",
        tts_support=True,
        stt_support=True,
        cultural_context=CulturalContext(
            traditional_greeting="Hello",
            traditions=("Academic",),
        ),
    )


@pytest.fixture
def hindi() -> Language:
    return Language(
        code="hi",
        name="Hindi",
        native_name="हिन्दी",
        region="India",
        tts_support=True,
        stt_support=True,
        cultural_context=CulturalContext(
            traditional_greeting="Namaste",
            storytelling_tradition=True,
            traditions=("Vedic", "Classical"),
        ),
    )


@pytest.fixture
def santali() -> Language:
    return Language(
        code="sat",
        name="Santali",
        native_name="ᱥᱟᱱᱛᱟᱲᱤ",
        region="Jharkhand, India",
        is_indigenous=True,
        cultural_context=CulturalContext(
            traditional_greeting="Johar",
            storytelling_tradition=True,
            traditions=("Tribal", "Traditional"),
        ),
    )


@pytest.fixture
def tutors(english: Language, hindi: Language, santali: Language) -> tuple[TutorPersona, ...]:
    """Three tutors, in tie-break order."""
    return (
        TutorPersona(
            id="asha_hindi",
            name="Asha",
            language=hindi,
            specializations=("mathematics", "science"),
            cultural_background="Multicultural Global Citizen",
            behavior=AdaptiveBehavior(encouragement_frequency=8, complexity_adaptation=True),
        ),
        TutorPersona(
            id="baha_santali",
            name="Baha",
            language=santali,
            specializations=("music", "environmental_studies"),
            cultural_background="Santal Traditional Storyteller",
            behavior=AdaptiveBehavior(encouragement_frequency=9),
        ),
        TutorPersona(
            id="arjun_english",
            name="Arjun",
            language=english,
            specializations=("mathematics", "physics"),
            cultural_background="Urban Indian Engineer",
            behavior=AdaptiveBehavior(encouragement_frequency=2),
        ),
    )


@pytest.fixture
def catalog(
    english: Language,
    hindi: Language,
    santali: Language,
    tutors: tuple[TutorPersona, ...],
) -> Catalog:
    """Synthetic catalog with three languages and three tutors."""
    return Catalog([english, hindi, santali], tutors, default_language_code="en")


# =============================================================================
# Learner Fixtures
# =============================================================================


@pytest.fixture
def base_time() -> datetime:
    """A Monday morning, 09:00 UTC."""
    return datetime(2025, 3, 3, 9, 0, tzinfo=timezone.utc)


def _make_interaction(
    session_id: str,
    *,
    timestamp: datetime,
    language: str = "hi",
    modality: Modality = Modality.AUDIO,
    duration_seconds: float = 300.0,
    topic: str | None = None,
    engagement: float = 0.5,
    frustration: float = 0.0,
    cultural_resonance: float = 0.5,
    confidence: float = 0.5,
    guardian_present: bool = False,
    accessibility_signals: tuple[str, ...] = (),
) -> VoiceInteraction:
    """Build a VoiceInteraction with sensible defaults."""
    return VoiceInteraction(
        session_id=session_id,
        timestamp=timestamp,
        learner_id="learner-1",
        tutor_id="asha_hindi",
        student_input=StudentInput(text="...", confidence=confidence, language=language),
        learning_metrics=LearningMetrics(
            engagement=engagement,
            frustration=frustration,
            cultural_resonance=cultural_resonance,
        ),
        modality=modality,
        duration_seconds=duration_seconds,
        topic=topic,
        guardian_present=guardian_present,
        accessibility_signals=accessibility_signals,
    )


@pytest.fixture
def history(base_time: datetime) -> list[VoiceInteraction]:
    """Six interactions over three sessions, mostly Hindi audio."""
    return [
        _make_interaction("s1", timestamp=base_time, topic="fractions", guardian_present=True),
        _make_interaction("s1", timestamp=base_time + timedelta(minutes=5), topic="fractions"),
        _make_interaction(
            "s2",
            timestamp=base_time + timedelta(days=1, hours=5),
            modality=Modality.VISUAL,
            topic="geometry",
        ),
        _make_interaction("s2", timestamp=base_time + timedelta(days=1, hours=5, minutes=5), language="sat"),
        _make_interaction(
            "s3",
            timestamp=base_time + timedelta(days=2),
            modality=Modality.TEXT,
            topic="fractions",
        ),
        _make_interaction("s3", timestamp=base_time + timedelta(days=2, minutes=5)),
    ]


@pytest.fixture
def performance() -> list[PerformanceRecord]:
    """Strong in mathematics, weak in history."""
    return [
        PerformanceRecord(subject="mathematics", score=80),
        PerformanceRecord(subject="mathematics", score=90),
        PerformanceRecord(subject="history", score=40),
        PerformanceRecord(subject="science", score=60),
    ]


@pytest.fixture
def profile(hindi: Language) -> LearnerProfile:
    """A hand-built learner profile."""
    return LearnerProfile(
        id="learner-1",
        preferred_languages=(hindi,),
        learning_style=LearningStyleMix(visual=0.2, auditory=0.5, kinesthetic=0.2, reading=0.1),
        cultural_background=("India", "Vedic"),
        mastery_levels={"mathematics": 4},
        strengths=("mathematics",),
        challenges=(),
        attention_span_minutes=20.0,
    )


@pytest.fixture
def interaction_factory():
    """Factory for VoiceInteraction records (see _make_interaction)."""
    return _make_interaction
