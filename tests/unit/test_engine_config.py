# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for engine tuning configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from edupersona.core.config import (
    ContentConfig,
    EngineConfig,
    EngineConfigError,
    ProfileConfig,
    RiskConfig,
    TutorScoringConfig,
    TutorWeights,
    load_engine_config,
    parse_engine_config,
    reload_engine_config,
)


@pytest.mark.unit
class TestDefaults:
    """Tests for built-in defaults."""

    def test_documented_defaults(self) -> None:
        config = EngineConfig()

        assert config.default_language_code == "en"
        assert config.tutor.weights.total == 100
        assert config.path.adaptation_factor == 0.8
        assert config.path.min_minutes == 10.0
        assert config.risk.high_threshold == 3
        assert config.risk.medium_threshold == 2
        assert config.content.sdg_alignment == (4, 11, 16)
        assert config.profile.dominance_threshold == 0.35

    def test_config_is_frozen(self) -> None:
        config = EngineConfig()

        with pytest.raises(ValidationError):
            config.default_language_code = "hi"  # type: ignore[misc]


@pytest.mark.unit
class TestValidators:
    """Tests for cross-field validation."""

    def test_weights_must_sum_to_100(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            TutorScoringConfig(weights=TutorWeights(language=50))

        assert "must sum to 100" in str(exc_info.value)

    def test_weak_threshold_below_strong(self) -> None:
        with pytest.raises(ValidationError):
            ProfileConfig(weak_threshold=80, strong_threshold=75)

    def test_medium_below_high(self) -> None:
        with pytest.raises(ValidationError):
            RiskConfig(medium_threshold=3, high_threshold=3)

    def test_age_bounds_ordered(self) -> None:
        with pytest.raises(ValidationError):
            ContentConfig(min_age=12, max_age=10)

    def test_unknown_keys_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EngineConfig.model_validate({"risk": {"hgih_threshold": 4}})

    def test_unknown_default_style_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ProfileConfig(default_learning_style={"visual": 0.5, "tactile": 0.5})

        assert "tactile" in str(exc_info.value)

    def test_unknown_modality_style_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ProfileConfig(modality_styles={"audio": "auditory", "interactive": "tactile"})

        assert "tactile" in str(exc_info.value)


@pytest.mark.unit
class TestReadOnlyMappings:
    """Tests that shared configuration mappings cannot be edited in place."""

    def test_profile_mappings(self) -> None:
        config = ProfileConfig()

        with pytest.raises(TypeError):
            config.modality_styles["audio"] = "visual"  # type: ignore[index]
        with pytest.raises(TypeError):
            config.default_learning_style["visual"] = 1.0  # type: ignore[index]

    def test_path_and_risk_mappings(self) -> None:
        config = EngineConfig()

        with pytest.raises(TypeError):
            config.path.style_interactive_elements["visual"] = ("draw",)  # type: ignore[index]
        with pytest.raises(TypeError):
            config.risk.community_support_tags["urban"] = 0.1  # type: ignore[index]

    def test_loaded_mappings_are_read_only(self, config_dir: Path) -> None:
        config = load_engine_config(str(config_dir))

        with pytest.raises(TypeError):
            config.risk.community_support_tags["traditional"] = 0.1  # type: ignore[index]
        assert config.risk.community_support_tags["traditional"] == 0.8

    def test_dump_yields_plain_dicts(self) -> None:
        dumped = EngineConfig().model_dump()

        assert dumped["risk"]["community_support_tags"] == {"traditional": 0.8}
        assert type(dumped["profile"]["modality_styles"]) is dict
        assert EngineConfig.model_validate(dumped) == EngineConfig()


@pytest.mark.unit
class TestParseEngineConfig:
    """Tests for parse_engine_config."""

    def test_with_engine_key(self) -> None:
        config = parse_engine_config({"engine": {"risk": {"min_interactions": 8}}})

        assert config.risk.min_interactions == 8

    def test_without_engine_key(self) -> None:
        config = parse_engine_config({"path": {"adaptation_factor": 1.2}})

        assert config.path.adaptation_factor == 1.2

    def test_partial_section_keeps_defaults(self) -> None:
        config = parse_engine_config({"risk": {"min_interactions": 8}})

        assert config.risk.high_threshold == 3
        assert config.risk.enabled_factors == (
            "low_engagement",
            "academic_struggles",
            "attention_difficulties",
        )

    def test_invalid_data_raises(self) -> None:
        with pytest.raises(EngineConfigError) as exc_info:
            parse_engine_config({"tutor": {"weights": {"language": 90}}})

        assert "Invalid engine configuration" in str(exc_info.value)


@pytest.mark.unit
class TestLoadEngineConfig:
    """Tests for loading engine.yaml from disk."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        assert load_engine_config(str(tmp_path)) == EngineConfig()

    def test_shipped_config_matches_defaults(self, config_dir: Path) -> None:
        config = load_engine_config(str(config_dir))

        assert config.tutor.weights == TutorWeights()
        assert config.risk == RiskConfig()
        assert config.content.age_band == 2

    def test_local_overrides_are_merged(self, tmp_path: Path) -> None:
        (tmp_path / "engine.yaml").write_text(
            "engine:\n  risk:\n    min_interactions: 4\n    high_threshold: 4\n"
        )
        (tmp_path / "engine.local.yaml").write_text("risk:\n  high_threshold: 5\n")

        config = load_engine_config(str(tmp_path))

        assert config.risk.min_interactions == 4
        assert config.risk.high_threshold == 5

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        (tmp_path / "engine.yaml").write_text("engine: [\n")

        with pytest.raises(EngineConfigError):
            load_engine_config(str(tmp_path))

    def test_cached_until_reload(self, tmp_path: Path) -> None:
        (tmp_path / "engine.yaml").write_text("risk:\n  min_interactions: 4\n")
        first = load_engine_config(str(tmp_path))

        (tmp_path / "engine.yaml").write_text("risk:\n  min_interactions: 6\n")

        assert load_engine_config(str(tmp_path)) is first
        load_engine_config.cache_clear()
        assert load_engine_config(str(tmp_path)).risk.min_interactions == 6

    def test_reload_uses_settings_dir(self, config_dir: Path) -> None:
        assert reload_engine_config() == load_engine_config(str(config_dir))
