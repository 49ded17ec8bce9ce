# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for learner profile derivation."""

from datetime import datetime, timedelta

import pytest

from edupersona.core.catalog import Catalog
from edupersona.core.config import EngineConfig
from edupersona.core.errors import InvalidInputError
from edupersona.core.profile import (
    LearnerProfile,
    LearningStyleMix,
    Modality,
    PerformanceRecord,
    ProfileAnalyzer,
    StudentInput,
    VoiceInteraction,
)


@pytest.fixture
def analyzer(engine_config: EngineConfig, catalog: Catalog) -> ProfileAnalyzer:
    return ProfileAnalyzer(engine_config, catalog)


@pytest.mark.unit
class TestInputValidation:
    """Tests for rejected inputs."""

    def test_empty_learner_id_raises(self, analyzer: ProfileAnalyzer) -> None:
        with pytest.raises(InvalidInputError):
            analyzer.analyze("", [], [])

    def test_blank_learner_id_raises(self, analyzer: ProfileAnalyzer) -> None:
        with pytest.raises(InvalidInputError):
            analyzer.analyze("   ", [], [])

    def test_none_history_raises(self, analyzer: ProfileAnalyzer) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            analyzer.analyze("learner-1", None, [])

        assert exc_info.value.details == {"learner_id": "learner-1"}

    def test_none_performance_raises(self, analyzer: ProfileAnalyzer) -> None:
        with pytest.raises(InvalidInputError):
            analyzer.analyze("learner-1", [], None)


@pytest.mark.unit
class TestEmptyHistory:
    """Tests for the defaults used without any history."""

    def test_defaults(self, analyzer: ProfileAnalyzer) -> None:
        profile = analyzer.analyze("learner-1", [], [])

        assert profile.language_codes == ("en",)
        assert profile.learning_style == LearningStyleMix()
        assert profile.attention_span_minutes == 15.0
        assert profile.mastery_levels == {}
        assert profile.strengths == ()
        assert profile.challenges == ()
        assert profile.interests == ()
        assert profile.motivational_factors == ()
        assert profile.best_learning_times == ()
        assert profile.accessibility_needs == ()

    def test_default_language_background_skips_global_region(
        self, analyzer: ProfileAnalyzer
    ) -> None:
        profile = analyzer.analyze("learner-1", [], [])

        assert profile.cultural_background == ("Academic",)


@pytest.mark.unit
class TestHistoryDerivation:
    """Tests for fields derived from the shared history fixture."""

    def test_learning_style_from_modalities(
        self,
        analyzer: ProfileAnalyzer,
        history: list[VoiceInteraction],
    ) -> None:
        profile = analyzer.analyze("learner-1", history, [])

        assert profile.learning_style.auditory == pytest.approx(4 / 6)
        assert profile.learning_style.visual == pytest.approx(1 / 6)
        assert profile.learning_style.reading == pytest.approx(1 / 6)
        assert profile.learning_style.kinesthetic == 0.0

    def test_learning_style_is_order_independent(
        self,
        analyzer: ProfileAnalyzer,
        history: list[VoiceInteraction],
    ) -> None:
        forward = analyzer.analyze("learner-1", history, [])
        backward = analyzer.analyze("learner-1", list(reversed(history)), [])

        assert forward.learning_style == backward.learning_style

    def test_preferred_languages_ranked_by_frequency(
        self,
        analyzer: ProfileAnalyzer,
        history: list[VoiceInteraction],
    ) -> None:
        profile = analyzer.analyze("learner-1", history, [])

        assert profile.language_codes == ("hi", "sat")

    def test_language_ties_keep_first_seen_order(
        self,
        analyzer: ProfileAnalyzer,
        interaction_factory,
        base_time: datetime,
    ) -> None:
        interactions = [
            interaction_factory("s1", timestamp=base_time, language="sat"),
            interaction_factory("s1", timestamp=base_time, language="hi"),
        ]

        profile = analyzer.analyze("learner-1", interactions, [])

        assert profile.language_codes == ("sat", "hi")

    def test_unknown_language_degrades(
        self,
        analyzer: ProfileAnalyzer,
        interaction_factory,
        base_time: datetime,
    ) -> None:
        interactions = [interaction_factory("s1", timestamp=base_time, language="xx")]

        profile = analyzer.analyze("learner-1", interactions, [])

        language = profile.preferred_languages[0]
        assert language.code == "xx"
        assert language.name == "xx"
        assert language.is_indigenous is False
        assert language.tts_support is False
        assert language.stt_support is False

    def test_attention_span_is_mean_session_minutes(
        self,
        analyzer: ProfileAnalyzer,
        history: list[VoiceInteraction],
    ) -> None:
        profile = analyzer.analyze("learner-1", history, [])

        # Three sessions of 2 x 300 seconds each
        assert profile.attention_span_minutes == 10.0

    def test_attention_span_floored_at_one_minute(
        self,
        analyzer: ProfileAnalyzer,
        interaction_factory,
        base_time: datetime,
    ) -> None:
        interactions = [interaction_factory("s1", timestamp=base_time, duration_seconds=5)]

        profile = analyzer.analyze("learner-1", interactions, [])

        assert profile.attention_span_minutes == 1.0

    def test_best_learning_times(
        self,
        analyzer: ProfileAnalyzer,
        history: list[VoiceInteraction],
    ) -> None:
        profile = analyzer.analyze("learner-1", history, [])

        assert profile.best_learning_times == ("morning", "afternoon")

    def test_interests_ranked_by_frequency(
        self,
        analyzer: ProfileAnalyzer,
        history: list[VoiceInteraction],
    ) -> None:
        profile = analyzer.analyze("learner-1", history, [])

        assert profile.interests == ("fractions", "geometry")

    def test_derived_cultural_background(
        self,
        analyzer: ProfileAnalyzer,
        history: list[VoiceInteraction],
    ) -> None:
        profile = analyzer.analyze("learner-1", history, [])

        assert profile.cultural_background == (
            "India",
            "Vedic",
            "Classical",
            "Jharkhand, India",
            "Tribal",
            "Traditional",
        )

    def test_caller_background_wins(
        self,
        analyzer: ProfileAnalyzer,
        history: list[VoiceInteraction],
    ) -> None:
        profile = analyzer.analyze(
            "learner-1", history, [], cultural_background=["Odia", "Odia", ""]
        )

        assert profile.cultural_background == ("Odia",)

    def test_audio_primary_need(
        self,
        analyzer: ProfileAnalyzer,
        interaction_factory,
        base_time: datetime,
    ) -> None:
        interactions = [
            interaction_factory(
                "s1",
                timestamp=base_time,
                accessibility_signals=("large_text",),
            ),
            interaction_factory(
                "s1",
                timestamp=base_time,
                modality=Modality.TEXT,
                accessibility_signals=("large_text", "captions"),
            ),
        ]

        profile = analyzer.analyze("learner-1", interactions, [])

        assert profile.accessibility_needs == ("large_text", "captions", "audio_primary")

    def test_motivational_factors(
        self,
        analyzer: ProfileAnalyzer,
        interaction_factory,
        base_time: datetime,
    ) -> None:
        interactions = [
            interaction_factory(
                "s1",
                timestamp=base_time + timedelta(minutes=minute),
                engagement=0.9,
                cultural_resonance=0.8,
                confidence=0.4,
                frustration=0.7,
            )
            for minute in range(3)
        ]

        profile = analyzer.analyze("learner-1", interactions, [])

        assert profile.motivational_factors == (
            "intrinsic_curiosity",
            "cultural_connection",
            "needs_encouragement",
        )


@pytest.mark.unit
class TestPerformanceDerivation:
    """Tests for mastery, strengths and challenges."""

    def test_mastery_levels(
        self,
        analyzer: ProfileAnalyzer,
        performance: list[PerformanceRecord],
    ) -> None:
        profile = analyzer.analyze("learner-1", [], performance)

        assert profile.mastery_levels == {"mathematics": 9, "history": 4, "science": 6}

    def test_mastery_level_at_least_one(self, analyzer: ProfileAnalyzer) -> None:
        profile = analyzer.analyze(
            "learner-1", [], [PerformanceRecord(subject="art", score=2)]
        )

        assert profile.mastery_levels == {"art": 1}

    def test_strengths_and_challenges(
        self,
        analyzer: ProfileAnalyzer,
        performance: list[PerformanceRecord],
    ) -> None:
        profile = analyzer.analyze("learner-1", [], performance)

        assert profile.strengths == ("mathematics",)
        assert profile.challenges == ("history",)

    def test_thresholds_are_inclusive(self, analyzer: ProfileAnalyzer) -> None:
        profile = analyzer.analyze(
            "learner-1",
            [],
            [
                PerformanceRecord(subject="music", score=75),
                PerformanceRecord(subject="art", score=50),
            ],
        )

        assert profile.strengths == ("music",)
        assert profile.challenges == ("art",)


@pytest.mark.unit
class TestIdempotence:
    """Tests that analysis is a pure function of its inputs."""

    def test_same_inputs_equal_profiles(
        self,
        analyzer: ProfileAnalyzer,
        history: list[VoiceInteraction],
        performance: list[PerformanceRecord],
    ) -> None:
        first = analyzer.analyze("learner-1", history, performance)
        second = analyzer.analyze("learner-1", history, performance)

        assert first == second


@pytest.mark.unit
class TestImmutability:
    """Tests that derived profiles cannot be changed in place."""

    def test_mastery_levels_are_read_only(
        self,
        analyzer: ProfileAnalyzer,
        performance: list[PerformanceRecord],
    ) -> None:
        profile = analyzer.analyze("learner-1", [], performance)

        with pytest.raises(TypeError):
            profile.mastery_levels["mathematics"] = 1  # type: ignore[index]

        assert profile.mastery_levels["mathematics"] == 9

    def test_source_dict_is_copied(self) -> None:
        levels = {"mathematics": 3}
        profile = LearnerProfile(id="learner-2", mastery_levels=levels)

        levels["mathematics"] = 9

        assert profile.mastery_levels == {"mathematics": 3}

    def test_dump_yields_plain_dict(
        self,
        analyzer: ProfileAnalyzer,
        performance: list[PerformanceRecord],
    ) -> None:
        dumped = analyzer.analyze("learner-1", [], performance).model_dump()

        assert type(dumped["mastery_levels"]) is dict
        assert dumped["mastery_levels"]["history"] == 4


@pytest.mark.unit
class TestEmotionLabels:
    """Tests for free-form emotion labels in the history."""

    def test_unrecognized_emotion_is_accepted(
        self,
        analyzer: ProfileAnalyzer,
        base_time: datetime,
    ) -> None:
        interaction = VoiceInteraction(
            session_id="s1",
            timestamp=base_time,
            student_input=StudentInput(text="wow", emotion="excited", language="hi"),
            duration_seconds=600.0,
        )

        profile = analyzer.analyze("learner-1", [interaction], [])

        assert interaction.student_input.emotion == "excited"
        assert profile.language_codes == ("hi",)
