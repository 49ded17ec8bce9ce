# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Adaptive learning path generation.

A path moves the learner one mastery level up from where they are, capped
at the target level, and frames the next module with cultural examples
and media chosen for the learner's dominant learning style.

Difficulty rule:
    current = mastery_levels.get(subject, default_level)
    difficulty = min(current + 1, target_level)

Duration rule:
    estimated_minutes = max(min_minutes, attention_span * difficulty * adaptation_factor)
"""

import uuid

from edupersona.core.catalog.registry import Catalog
from edupersona.core.config.engine import EngineConfig
from edupersona.core.errors import InvalidInputError, UnknownSubjectError
from edupersona.core.pathing.models import (
    AdaptiveLearningPath,
    AssessmentStrategy,
    CulturalConnection,
    MultimodalContent,
)
from edupersona.core.profile.models import LearnerProfile
from edupersona.utils.logging import get_logger
from edupersona.utils.text import render_template, slugify

logger = get_logger(__name__)

PATH_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "edupersona:learning-path")


class PathGenerator:
    """Generates difficulty-adapted, culturally framed learning paths."""

    def __init__(self, config: EngineConfig, catalog: Catalog):
        """Initialize the generator.

        Args:
            config: Engine configuration
            catalog: Catalog providing the default language
        """
        self._path_config = config.path
        self._dominance_threshold = config.profile.dominance_threshold
        self._catalog = catalog

    def generate(
        self,
        profile: LearnerProfile,
        subject: str,
        target_level: int,
    ) -> AdaptiveLearningPath:
        """Generate the next learning path step.

        Unrecognized subjects are accepted. A learner without cultural
        background tags gets the neutral templates, and a learner without
        preferred languages gets the catalog default language.

        Args:
            profile: Learner profile
            subject: Subject name
            target_level: Mastery level the learner is working towards

        Returns:
            AdaptiveLearningPath

        Raises:
            UnknownSubjectError: If subject is empty or blank
            InvalidInputError: If target_level is below 1
        """
        if not subject or not subject.strip():
            raise UnknownSubjectError(
                "subject must not be empty",
                details={"learner_id": profile.id},
            )
        if target_level < 1:
            raise InvalidInputError(
                "target_level must be at least 1",
                details={"learner_id": profile.id, "target_level": target_level},
            )

        config = self._path_config
        current = profile.mastery_levels.get(subject, config.default_level)
        difficulty = min(current + 1, target_level)
        estimated_minutes = round(
            max(
                config.min_minutes,
                profile.attention_span_minutes * difficulty * config.adaptation_factor,
            ),
            2,
        )

        path = AdaptiveLearningPath(
            id=self.path_id(profile.id, subject, current, difficulty),
            learner_id=profile.id,
            subject=subject,
            current_module=f"{subject}_level_{current}",
            next_module=f"{subject}_level_{difficulty}",
            difficulty=difficulty,
            estimated_minutes=estimated_minutes,
            cultural_connection=self._cultural_connection(profile, subject),
            multimodal_content=self._multimodal_content(profile, subject),
            assessment_strategy=AssessmentStrategy(
                formative=config.formative,
                summative=config.summative,
                culturally_responsive=config.culturally_responsive,
            ),
        )

        logger.info(
            "learning_path_generated",
            learner_id=profile.id,
            subject=subject,
            current_level=current,
            difficulty=difficulty,
            estimated_minutes=estimated_minutes,
        )
        return path

    @staticmethod
    def path_id(learner_id: str, subject: str, current: int, difficulty: int) -> str:
        """Deterministic path id for a learner, subject and level step."""
        name = f"{learner_id}:{subject}:{current}:{difficulty}"
        return f"path_{uuid.uuid5(PATH_NAMESPACE, name)}"

    def _template_fields(self, profile: LearnerProfile, subject: str) -> dict[str, str]:
        if profile.preferred_languages:
            language = profile.preferred_languages[0]
        else:
            language = self._catalog.default_language
        culture = profile.cultural_background[0] if profile.cultural_background else ""
        return {
            "subject": subject,
            "culture": culture,
            "region": language.region,
            "region_slug": slugify(language.region) or "global",
            "language_code": language.code,
        }

    def _cultural_connection(self, profile: LearnerProfile, subject: str) -> CulturalConnection:
        templates = self._path_config.templates
        fields = self._template_fields(profile, subject)

        if not profile.cultural_background:
            logger.debug("neutral_path_templates_used", learner_id=profile.id, subject=subject)
            return CulturalConnection(
                local_example=render_template(templates.neutral_local_example, **fields),
                global_context=render_template(templates.global_context, **fields),
                historical_note=render_template(templates.neutral_historical_note, **fields),
            )

        return CulturalConnection(
            local_example=render_template(templates.local_example, **fields),
            global_context=render_template(templates.global_context, **fields),
            historical_note=render_template(templates.historical_note, **fields),
        )

    def _multimodal_content(self, profile: LearnerProfile, subject: str) -> MultimodalContent:
        config = self._path_config
        templates = config.templates
        fields = self._template_fields(profile, subject)
        dominant = profile.learning_style.dominant_style(self._dominance_threshold)

        visual_count = config.dominant_visual_aids if dominant == "visual" else config.base_visual_aids
        interactive = list(config.base_interactive_elements)
        for element in config.style_interactive_elements.get(dominant, ()):
            if element not in interactive:
                interactive.append(element)

        artifact = templates.cultural_artifact if profile.cultural_background else templates.neutral_artifact

        return MultimodalContent(
            audio_narration=render_template(templates.audio_narration, **fields),
            visual_aids=tuple(
                render_template(templates.visual_aid, index=index, **fields)
                for index in range(1, visual_count + 1)
            ),
            interactive_elements=tuple(interactive),
            cultural_artifacts=(render_template(artifact, **fields),),
        )
