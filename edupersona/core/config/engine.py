# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Engine tuning configuration.

Every weight, threshold, template and tag list the engine uses is lifted
into EngineConfig so deployments can retune scoring by editing
config/engine.yaml instead of code. Each field carries the documented
default, so an absent or partial YAML file still yields a complete
configuration. A deployment may layer engine.local.yaml on top; its keys
are deep-merged over engine.yaml.

Usage:
    from edupersona.core.config.engine import get_engine_config

    config = get_engine_config()
    print(config.tutor.weights.language)   # 40
    print(config.path.adaptation_factor)   # 0.8
"""

from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_serializer,
    field_validator,
    model_validator,
)

from edupersona.core.config.settings import get_settings
from edupersona.core.config.yaml_loader import YAMLLoadError, deep_merge, load_yaml
from edupersona.utils.logging import get_logger
from edupersona.utils.mappings import as_dict, read_only

logger = get_logger(__name__)

LOCAL_OVERRIDE_FILE = "engine.local.yaml"

LEARNING_STYLE_DIMENSIONS: tuple[str, ...] = ("visual", "auditory", "kinesthetic", "reading")

Metric = Literal["comprehension", "engagement", "frustration", "cultural_resonance", "confidence"]


class EngineConfigError(Exception):
    """Raised when engine.yaml cannot be parsed into EngineConfig."""


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class MotivationRule(_FrozenModel):
    """Maps a mean interaction metric above a threshold to a motivation tag."""

    tag: str
    metric: Metric
    minimum: float = Field(ge=0.0, le=1.0)


class ProfileConfig(_FrozenModel):
    """Thresholds used when deriving a LearnerProfile from history.

    Attributes:
        default_attention_span_minutes: Attention span for an empty history.
        min_attention_span_minutes: Floor applied to the computed mean.
        strong_threshold: Mean score (percent) at or above which a subject
            is a strength.
        weak_threshold: Mean score (percent) at or below which a subject
            is a challenge.
        mastery_divisor: Score points per mastery level (100 / 10 levels).
        default_learning_style: Style mix for an empty history.
        modality_styles: Interaction modality to learning-style dimension.
        dominance_threshold: Minimum weight for a style to be dominant.
        audio_primary_threshold: Auditory weight that adds "audio_primary"
            to accessibility needs.
        max_interests: Cap on derived interest tags.
        motivation_rules: Metric thresholds producing motivation tags.
    """

    default_attention_span_minutes: float = Field(default=15.0, gt=0)
    min_attention_span_minutes: float = Field(default=1.0, gt=0)
    strong_threshold: float = Field(default=75.0, ge=0.0, le=100.0)
    weak_threshold: float = Field(default=50.0, ge=0.0, le=100.0)
    mastery_divisor: float = Field(default=10.0, gt=0)
    default_learning_style: Mapping[str, float] = Field(
        default_factory=lambda: {
            "visual": 0.25,
            "auditory": 0.25,
            "kinesthetic": 0.25,
            "reading": 0.25,
        },
        validate_default=True,
    )
    modality_styles: Mapping[str, str] = Field(
        default_factory=lambda: {
            "audio": "auditory",
            "text": "reading",
            "interactive": "kinesthetic",
            "visual": "visual",
        },
        validate_default=True,
    )
    dominance_threshold: float = Field(default=0.35, ge=0.0)
    audio_primary_threshold: float = Field(default=0.5, ge=0.0)
    max_interests: int = Field(default=5, ge=0)
    motivation_rules: tuple[MotivationRule, ...] = (
        MotivationRule(tag="intrinsic_curiosity", metric="engagement", minimum=0.7),
        MotivationRule(tag="cultural_connection", metric="cultural_resonance", minimum=0.6),
        MotivationRule(tag="achievement_recognition", metric="confidence", minimum=0.75),
        MotivationRule(tag="needs_encouragement", metric="frustration", minimum=0.6),
    )

    @field_validator("default_learning_style", "modality_styles")
    @classmethod
    def _freeze_mappings(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return read_only(value)

    @field_serializer("default_learning_style", "modality_styles")
    def _dump_mappings(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return as_dict(value)

    @model_validator(mode="after")
    def _check_thresholds(self) -> "ProfileConfig":
        if self.weak_threshold >= self.strong_threshold:
            raise ValueError("weak_threshold must be below strong_threshold")
        return self

    @model_validator(mode="after")
    def _check_styles(self) -> "ProfileConfig":
        unknown = set(self.default_learning_style) - set(LEARNING_STYLE_DIMENSIONS)
        unknown |= set(self.modality_styles.values()) - set(LEARNING_STYLE_DIMENSIONS)
        if unknown:
            raise ValueError(
                f"unknown learning styles {sorted(unknown)}, "
                f"expected one of {list(LEARNING_STYLE_DIMENSIONS)}"
            )
        return self


class TutorWeights(_FrozenModel):
    """Points awarded per matching criterion."""

    language: int = Field(default=40, ge=0)
    subject: int = Field(default=30, ge=0)
    culture: int = Field(default=20, ge=0)
    style: int = Field(default=10, ge=0)

    @property
    def total(self) -> int:
        """Maximum achievable score."""
        return self.language + self.subject + self.culture + self.style


class TutorScoringConfig(_FrozenModel):
    """Tutor selection scoring.

    Attributes:
        weights: Points per criterion; must sum to 100.
        auditory_threshold: Auditory affinity above which any tutor is
            style-compatible.
        require_positive_score: Raise NoTutorAvailableError when every
            tutor scores zero.
    """

    weights: TutorWeights = Field(default_factory=TutorWeights)
    auditory_threshold: float = Field(default=0.3, ge=0.0)
    require_positive_score: bool = True

    @model_validator(mode="after")
    def _check_weight_total(self) -> "TutorScoringConfig":
        if self.weights.total != 100:
            raise ValueError(
                f"tutor weights must sum to 100, got {self.weights.total}"
            )
        return self


class PathTemplates(_FrozenModel):
    """str.format templates for learning-path content.

    Available fields: subject, culture, region, region_slug, language_code.
    The neutral_* templates are used when the learner has no cultural
    background tags.
    """

    local_example: str = "Traditional {culture} practice related to {subject}"
    global_context: str = "How {subject} concepts apply worldwide"
    historical_note: str = "Historical significance in {region}"
    neutral_local_example: str = "Everyday examples of {subject} from around the world"
    neutral_historical_note: str = "How {subject} developed across civilizations"
    audio_narration: str = "/audio/{language_code}/{subject}_intro.mp3"
    visual_aid: str = "/images/{subject}_visual_{index}.jpg"
    cultural_artifact: str = "/cultural/{region_slug}/{subject}_artifact.jpg"
    neutral_artifact: str = "/cultural/global/{subject}_artifact.jpg"


class PathConfig(_FrozenModel):
    """Learning path generation parameters.

    Attributes:
        default_level: Mastery assumed for a subject with no record.
        adaptation_factor: Pacing overhead multiplier for duration.
        min_minutes: Floor on the estimated completion time.
        templates: Content templates.
        base_visual_aids: Number of visual aids for every path.
        dominant_visual_aids: Visual aids when visual style dominates.
        base_interactive_elements: Interactive tags for every path.
        style_interactive_elements: Extra tags for the dominant style.
        formative: Formative assessment tags.
        summative: Summative assessment tags.
        culturally_responsive: Flag carried on every assessment strategy.
    """

    default_level: int = Field(default=1, ge=1)
    adaptation_factor: float = Field(default=0.8, gt=0)
    min_minutes: float = Field(default=10.0, ge=0)
    templates: PathTemplates = Field(default_factory=PathTemplates)
    base_visual_aids: int = Field(default=1, ge=0)
    dominant_visual_aids: int = Field(default=3, ge=0)
    base_interactive_elements: tuple[str, ...] = ("touch_simulation", "voice_quiz")
    style_interactive_elements: Mapping[str, tuple[str, ...]] = Field(
        default_factory=lambda: {
            "kinesthetic": ("hands_on_activity",),
            "auditory": ("call_and_response",),
            "reading": ("guided_reading",),
        },
        validate_default=True,
    )
    formative: tuple[str, ...] = ("voice_quiz", "cultural_storytelling", "peer_discussion")
    summative: tuple[str, ...] = ("project_presentation", "cultural_artifact_creation")
    culturally_responsive: bool = True

    @field_validator("style_interactive_elements")
    @classmethod
    def _freeze_mappings(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return read_only(value)

    @field_serializer("style_interactive_elements")
    def _dump_mappings(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return as_dict(value)


class InterventionPlanConfig(_FrozenModel):
    """Tiered intervention tags shared by every risk level."""

    immediate: tuple[str, ...] = ("personalized_check_in", "motivational_message")
    short_term: tuple[str, ...] = ("tutoring_session", "peer_mentor_assignment")
    long_term: tuple[str, ...] = ("learning_path_adjustment", "family_engagement_program")


class RiskConfig(_FrozenModel):
    """Risk factor thresholds and classification.

    Attributes:
        enabled_factors: Names of factors evaluated, in report order.
        min_interactions: History length below which engagement is low.
        min_attention_minutes: Attention span below which focus is at risk.
        frustration_threshold: Mean frustration for high_frustration.
        performance_drop_points: Score drop for declining_performance.
        high_threshold: Factor count classified high.
        medium_threshold: Factor count classified medium.
        base_interventions: Plan shared by all levels.
        high_escalation: Appended to the immediate tier for high risk.
        default_parental_engagement: Used when there is no history.
        default_community_support: Community support without matching tags.
        community_support_tags: Background tag (case-insensitive) to score.
        regular_engagement_sessions: Sessions needed for regular_engagement.
        sustained_focus_minutes: Attention span for sustained_focus.
        default_success_predictors: Reported when a learner with cultural
            background tags matches no success predictor rule.
    """

    enabled_factors: tuple[str, ...] = (
        "low_engagement",
        "academic_struggles",
        "attention_difficulties",
    )
    min_interactions: int = Field(default=5, ge=0)
    min_attention_minutes: float = Field(default=10.0, ge=0)
    frustration_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    performance_drop_points: float = Field(default=20.0, ge=0.0)
    high_threshold: int = Field(default=3, ge=1)
    medium_threshold: int = Field(default=2, ge=1)
    base_interventions: InterventionPlanConfig = Field(default_factory=InterventionPlanConfig)
    high_escalation: tuple[str, ...] = ("urgent_intervention", "counselor_referral")
    default_parental_engagement: float = Field(default=0.7, ge=0.0, le=1.0)
    default_community_support: float = Field(default=0.6, ge=0.0, le=1.0)
    community_support_tags: Mapping[str, float] = Field(
        default_factory=lambda: {"traditional": 0.8},
        validate_default=True,
    )
    regular_engagement_sessions: int = Field(default=3, ge=1)
    sustained_focus_minutes: float = Field(default=15.0, ge=0)
    default_success_predictors: tuple[str, ...] = (
        "regular_engagement",
        "cultural_connection",
        "family_support",
    )

    @field_validator("community_support_tags")
    @classmethod
    def _freeze_mappings(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return read_only(value)

    @field_serializer("community_support_tags")
    def _dump_mappings(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return as_dict(value)

    @model_validator(mode="after")
    def _check_levels(self) -> "RiskConfig":
        if self.medium_threshold >= self.high_threshold:
            raise ValueError("medium_threshold must be below high_threshold")
        return self


class ContentTemplates(_FrozenModel):
    """str.format templates for generic cultural content.

    Available fields: topic, culture, region, language_code.
    """

    title: str = "Learning {topic} through {culture} Tradition"
    description: str = (
        "Discover {topic} concepts through traditional {culture} stories and practices"
    )
    significance: str = "This connects modern learning with ancestral wisdom"
    modern_relevance: str = (
        "Understanding {topic} helps preserve and adapt traditional knowledge"
    )
    audio_content: str = "/audio/cultural/{culture}/{topic}.mp3"
    visual_content: str = "/images/cultural/{culture}/{topic}_1.jpg"


class ContentConfig(_FrozenModel):
    """Cultural content descriptor parameters.

    Attributes:
        min_age: Lower clamp of the age band.
        max_age: Upper clamp of the age band.
        age_band: Years either side of the target age.
        default_type: Content type of generic descriptors.
        fallback_topic: Used when the topic is blank.
        fallback_culture: Used when the culture is blank.
    """

    min_age: int = Field(default=6, ge=0)
    max_age: int = Field(default=18, ge=0)
    age_band: int = Field(default=2, ge=0)
    default_type: str = "story"
    fallback_topic: str = "general_studies"
    fallback_culture: str = "Global"
    templates: ContentTemplates = Field(default_factory=ContentTemplates)
    interactive_elements: tuple[str, ...] = (
        "virtual_ceremony",
        "craft_simulation",
        "story_retelling",
    )
    skills: tuple[str, ...] = ("critical_thinking", "cultural_awareness", "storytelling")
    values: tuple[str, ...] = ("respect", "tradition", "innovation")
    sdg_alignment: tuple[int, ...] = (4, 11, 16)

    @model_validator(mode="after")
    def _check_age_bounds(self) -> "ContentConfig":
        if self.min_age > self.max_age:
            raise ValueError("min_age must not exceed max_age")
        return self


class ResponseConfig(_FrozenModel):
    """Encouragement tuning for composed tutor responses."""

    frustrated_boost: int = 3
    confident_drop: int = 1
    max_level: int = 10
    confident_floor: int = 3
    adaptations: tuple[str, ...] = ("language_simplification", "cultural_metaphor_added")


class EngineConfig(_FrozenModel):
    """Complete engine tuning, loaded once and shared read-only."""

    default_language_code: str = "en"
    profile: ProfileConfig = Field(default_factory=ProfileConfig)
    tutor: TutorScoringConfig = Field(default_factory=TutorScoringConfig)
    path: PathConfig = Field(default_factory=PathConfig)
    risk: RiskConfig = Field(default_factory=RiskConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    response: ResponseConfig = Field(default_factory=ResponseConfig)


def parse_engine_config(data: dict) -> EngineConfig:
    """Validate raw YAML data into an EngineConfig.

    Args:
        data: Contents of engine.yaml, optionally under an "engine" key.

    Returns:
        EngineConfig instance.

    Raises:
        EngineConfigError: If the data fails validation.
    """
    section = data.get("engine", data)
    try:
        return EngineConfig.model_validate(section)
    except ValidationError as e:
        raise EngineConfigError(f"Invalid engine configuration: {e}") from e


@lru_cache(maxsize=1)
def load_engine_config(config_dir: str | None = None) -> EngineConfig:
    """Load engine configuration from engine.yaml.

    Uses LRU cache to avoid reloading on every access.
    Call reload_engine_config() to pick up edits.

    Args:
        config_dir: Optional config directory override (as string for caching).

    Returns:
        EngineConfig instance. Defaults when engine.yaml is absent.

    Raises:
        EngineConfigError: If engine.yaml is unreadable or invalid.
    """
    dir_path = Path(config_dir) if config_dir else get_settings().config_dir
    path = dir_path / "engine.yaml"
    local_path = dir_path / LOCAL_OVERRIDE_FILE

    try:
        data = load_yaml(path, missing_ok=True)
        overrides = load_yaml(local_path, missing_ok=True)
    except YAMLLoadError as e:
        raise EngineConfigError(str(e)) from e

    if not data:
        logger.warning("engine_config_defaults_used", path=str(path))

    # Local overrides may use the "engine" key or not, like engine.yaml
    if overrides:
        data = deep_merge(
            {"engine": data.get("engine", data)},
            {"engine": overrides.get("engine", overrides)},
        )

    config = parse_engine_config(data)
    logger.info(
        "engine_config_loaded",
        path=str(path),
        local_overrides=bool(overrides),
        risk_factors=list(config.risk.enabled_factors),
    )
    return config


def get_engine_config() -> EngineConfig:
    """Get the cached engine configuration.

    Returns:
        EngineConfig instance.
    """
    return load_engine_config()


def reload_engine_config() -> EngineConfig:
    """Force reload of engine configuration.

    Returns:
        Fresh EngineConfig instance.
    """
    load_engine_config.cache_clear()
    return load_engine_config()
