# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Personalization engine facade.

PersonalizationEngine wires the components together around one engine
configuration and one catalog. The profile is the hub: it is derived
first, and tutor selection, path generation and risk prediction are
independent consumers of it.

Usage:
    from edupersona.core.engine import build_engine

    engine = build_engine()
    result = engine.personalize(
        "learner-1",
        interactions,
        performance,
        subject="mathematics",
        target_level=5,
    )
    print(result.tutor.id, result.path.next_module, result.risk.risk_level)
"""

from pathlib import Path
from typing import Iterable, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from edupersona.core.catalog.models import Language, TutorPersona
from edupersona.core.catalog.registry import Catalog, get_catalog
from edupersona.core.config.engine import EngineConfig, get_engine_config, load_engine_config
from edupersona.core.config.settings import get_settings
from edupersona.core.content.models import CulturalContentDescriptor, CuratedContent
from edupersona.core.content.selector import CulturalContentSelector, load_curated_content
from edupersona.core.pathing.generator import PathGenerator
from edupersona.core.pathing.models import AdaptiveLearningPath
from edupersona.core.profile.analyzer import ProfileAnalyzer
from edupersona.core.profile.models import (
    Emotion,
    LearnerProfile,
    PerformanceRecord,
    VoiceInteraction,
)
from edupersona.core.risk.models import RiskAssessment
from edupersona.core.risk.predictor import RiskPredictor
from edupersona.core.tutoring.responses import ResponseComposer, TutorResponse
from edupersona.core.tutoring.selector import TutorScore, TutorSelector
from edupersona.utils.logging import get_logger

logger = get_logger(__name__)


class PersonalizationResult(BaseModel):
    """Outcome of a full personalization pass for one learner."""

    model_config = ConfigDict(frozen=True)

    profile: LearnerProfile
    tutor: TutorPersona
    path: AdaptiveLearningPath
    risk: RiskAssessment


class PersonalizationEngine:
    """Entry point to profile analysis, tutor selection, path generation,
    risk prediction and cultural content.

    The engine holds no per-learner state. One instance can serve
    concurrent callers.
    """

    def __init__(
        self,
        config: EngineConfig,
        catalog: Catalog,
        curated_content: Optional[Iterable[CuratedContent]] = None,
        risk_max_workers: int = 1,
    ):
        """Initialize the engine.

        Args:
            config: Engine configuration
            catalog: Language and tutor catalog
            curated_content: Curated cultural content entries
            risk_max_workers: Thread pool size for batch risk prediction
        """
        self._config = config
        self._catalog = catalog
        self._analyzer = ProfileAnalyzer(config, catalog)
        self._selector = TutorSelector(config, catalog)
        self._composer = ResponseComposer(config)
        self._path_generator = PathGenerator(config, catalog)
        self._risk_predictor = RiskPredictor(config, max_workers=risk_max_workers)
        self._content_selector = CulturalContentSelector(config, curated_content)

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def analyze_profile(
        self,
        learner_id: str,
        interaction_history: Sequence[VoiceInteraction],
        performance_records: Sequence[PerformanceRecord],
        *,
        cultural_background: Optional[Sequence[str]] = None,
    ) -> LearnerProfile:
        """Derive a learner profile. See ProfileAnalyzer.analyze."""
        return self._analyzer.analyze(
            learner_id,
            interaction_history,
            performance_records,
            cultural_background=cultural_background,
        )

    def select_tutor(
        self,
        profile: LearnerProfile,
        subject: str,
        cultural_preference: Optional[str] = None,
    ) -> TutorPersona:
        """Select the best tutor. See TutorSelector.select."""
        return self._selector.select(profile, subject, cultural_preference)

    def explain_tutor_choice(
        self,
        profile: LearnerProfile,
        subject: str,
        cultural_preference: Optional[str] = None,
    ) -> list[TutorScore]:
        """Score breakdown of every catalog tutor, in catalog order."""
        return self._selector.rank(profile, subject, cultural_preference)

    def generate_path(
        self,
        profile: LearnerProfile,
        subject: str,
        target_level: int,
    ) -> AdaptiveLearningPath:
        """Generate the next learning path step. See PathGenerator.generate."""
        return self._path_generator.generate(profile, subject, target_level)

    def predict_risk(
        self,
        profiles: Sequence[LearnerProfile],
        interaction_histories: Sequence[Sequence[VoiceInteraction]],
        performance_data: Sequence[Sequence[PerformanceRecord]],
    ) -> list[RiskAssessment]:
        """Assess a batch of learners. See RiskPredictor.predict_batch."""
        return self._risk_predictor.predict_batch(profiles, interaction_histories, performance_data)

    def select_content(
        self,
        topic: str,
        culture: str,
        language: Language | str,
        target_age_level: int,
    ) -> CulturalContentDescriptor:
        """Select cultural content.

        Args:
            topic: Topic to teach
            culture: Culture to draw on
            language: Language or language code; unknown codes degrade
            target_age_level: Learner age

        Returns:
            CulturalContentDescriptor
        """
        if isinstance(language, str):
            language = self._catalog.resolve_language(language)
        return self._content_selector.select(topic, culture, language, target_age_level)

    def compose_response(
        self,
        tutor: TutorPersona,
        student_input: str,
        emotion: Emotion | str,
        learning_objective: str,
    ) -> TutorResponse:
        """Compose a tutor reply. See ResponseComposer.compose."""
        return self._composer.compose(tutor, student_input, emotion, learning_objective)

    def personalize(
        self,
        learner_id: str,
        interaction_history: Sequence[VoiceInteraction],
        performance_records: Sequence[PerformanceRecord],
        *,
        subject: str,
        target_level: int,
        cultural_background: Optional[Sequence[str]] = None,
        cultural_preference: Optional[str] = None,
    ) -> PersonalizationResult:
        """Run a full personalization pass for one learner.

        Args:
            learner_id: Learner identifier
            interaction_history: Recorded interactions
            performance_records: Assessment results
            subject: Subject to plan for
            target_level: Mastery level the learner is working towards
            cultural_background: Optional background tags
            cultural_preference: Optional culture to match tutors against

        Returns:
            PersonalizationResult

        Raises:
            InvalidInputError: On malformed input
            UnknownSubjectError: If subject is blank
            NoTutorAvailableError: If no tutor can be offered
        """
        profile = self.analyze_profile(
            learner_id,
            interaction_history,
            performance_records,
            cultural_background=cultural_background,
        )
        tutor = self.select_tutor(profile, subject, cultural_preference)
        path = self.generate_path(profile, subject, target_level)
        risk = self._risk_predictor.predict(profile, interaction_history, performance_records)

        logger.info(
            "learner_personalized",
            learner_id=learner_id,
            subject=subject,
            tutor_id=tutor.id,
            difficulty=path.difficulty,
            risk_level=risk.risk_level.value,
        )
        return PersonalizationResult(profile=profile, tutor=tutor, path=path, risk=risk)


def build_engine(config_dir: str | Path | None = None) -> PersonalizationEngine:
    """Build an engine from the YAML configuration directory.

    Loads engine.yaml, catalogs/ and content/ once. Without a config_dir
    the process-wide cached configuration and catalog are shared.

    Args:
        config_dir: Configuration directory. Defaults to Settings.config_dir.

    Returns:
        PersonalizationEngine

    Raises:
        EngineConfigError: If engine.yaml is invalid
        CatalogLoadError: If a catalog file is missing or invalid
        ContentLoadError: If a curated content file is invalid
    """
    settings = get_settings()
    if config_dir is None:
        base_dir = settings.config_dir
        config = get_engine_config()
        catalog = get_catalog(config.default_language_code)
    else:
        base_dir = Path(config_dir)
        config = load_engine_config(str(base_dir))
        catalog = Catalog.from_directory(base_dir / "catalogs", config.default_language_code)
    curated = load_curated_content(base_dir / "content")

    logger.info(
        "engine_built",
        config_dir=str(base_dir),
        tutors=len(catalog.tutors),
        curated_content=len(curated),
        risk_max_workers=settings.risk_max_workers,
    )
    return PersonalizationEngine(
        config,
        catalog,
        curated_content=curated,
        risk_max_workers=settings.risk_max_workers,
    )
