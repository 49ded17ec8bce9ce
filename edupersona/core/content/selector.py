# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Cultural content selection.

Pairs a topic, a culture and a language into a content descriptor.
Curated entries from the YAML files in config/content/ win when they
match the (topic, culture) pair; every other pair is rendered from the
generic templates, so selection never fails for an unknown topic or
culture.
"""

from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from edupersona.core.catalog.models import Language
from edupersona.core.config.engine import EngineConfig
from edupersona.core.config.yaml_loader import YAMLLoadError, load_yaml_directory
from edupersona.core.content.models import (
    AgeRange,
    ContentBody,
    CulturalContentDescriptor,
    CuratedContent,
    EducationalValue,
)
from edupersona.utils.logging import get_logger
from edupersona.utils.text import render_template, slugify

logger = get_logger(__name__)


class ContentLoadError(Exception):
    """Raised when a curated content file fails to load or validate."""


def load_curated_content(content_dir: Path) -> tuple[CuratedContent, ...]:
    """Load curated content entries from every YAML file in a directory.

    Files are read in sorted order and their entries concatenated. A
    missing directory yields no entries.

    Args:
        content_dir: Directory holding curated content files

    Returns:
        Entries in file order

    Raises:
        ContentLoadError: If a file is unreadable or an entry is invalid
    """
    if not content_dir.exists():
        logger.debug("curated_content_missing", path=str(content_dir))
        return ()

    try:
        files = load_yaml_directory(content_dir)
    except YAMLLoadError as e:
        raise ContentLoadError(str(e)) from e

    curated = []
    for stem, data in files.items():
        entries = data.get("entries", [])
        if not isinstance(entries, list):
            raise ContentLoadError(f"'entries' in {stem} must be a list")

        for index, entry in enumerate(entries):
            try:
                curated.append(CuratedContent.model_validate(entry))
            except ValidationError as e:
                raise ContentLoadError(
                    f"Validation failed for content entry #{index} in {stem}: {e}"
                ) from e

    logger.debug("curated_content_loaded", path=str(content_dir), count=len(curated))
    return tuple(curated)


class CulturalContentSelector:
    """Builds cultural content descriptors."""

    def __init__(
        self,
        config: EngineConfig,
        curated: Optional[Iterable[CuratedContent]] = None,
    ):
        """Initialize the selector.

        Args:
            config: Engine configuration
            curated: Curated entries; the first entry wins for a repeated
                (topic, culture) pair
        """
        self._config = config.content
        self._curated: dict[tuple[str, str], CuratedContent] = {}
        for entry in curated or ():
            self._curated.setdefault(entry.key, entry)

    def age_range(self, target_age_level: int) -> AgeRange:
        """Band around the target age, with both ends clamped to the
        configured bounds."""
        low_bound, high_bound = self._config.min_age, self._config.max_age
        band = self._config.age_band
        return AgeRange(
            min=min(high_bound, max(low_bound, target_age_level - band)),
            max=max(low_bound, min(high_bound, target_age_level + band)),
        )

    def select(
        self,
        topic: str,
        culture: str,
        language: Language,
        target_age_level: int,
    ) -> CulturalContentDescriptor:
        """Select content for a topic and culture.

        Args:
            topic: Topic to teach
            culture: Culture to draw on
            language: Content language
            target_age_level: Learner age the content should suit

        Returns:
            CulturalContentDescriptor
        """
        topic = (topic or "").strip() or self._config.fallback_topic
        culture = (culture or "").strip() or self._config.fallback_culture

        entry = self._curated.get((topic.lower(), culture.lower()))
        if entry is not None:
            content_type = entry.content_type
            body = ContentBody(
                title=entry.title,
                description=entry.description,
                significance=entry.significance,
                modern_relevance=entry.modern_relevance,
                audio_content=entry.audio_content,
                visual_content=entry.visual_content,
                interactive_elements=entry.interactive_elements or self._config.interactive_elements,
            )
            skills = entry.skills or self._config.skills
            values = entry.values or self._config.values
        else:
            content_type = self._config.default_type
            body = self._generic_body(topic, culture, language)
            skills = self._config.skills
            values = self._config.values

        descriptor = CulturalContentDescriptor(
            id=f"cultural_{slugify(topic)}_{slugify(culture)}_{language.code}",
            content_type=content_type,
            culture=culture,
            region=language.region,
            language=language,
            content=body,
            educational_value=EducationalValue(
                subjects=(topic,),
                skills=skills,
                values=values,
                sdg_alignment=self._config.sdg_alignment,
            ),
            age_range=self.age_range(target_age_level),
            curated=entry is not None,
        )

        logger.debug(
            "cultural_content_selected",
            topic=topic,
            culture=culture,
            language_code=language.code,
            curated=descriptor.curated,
        )
        return descriptor

    def _generic_body(self, topic: str, culture: str, language: Language) -> ContentBody:
        templates = self._config.templates
        fields = {
            "topic": topic,
            "culture": culture,
            "region": language.region,
            "language_code": language.code,
        }
        return ContentBody(
            title=render_template(templates.title, **fields),
            description=render_template(templates.description, **fields),
            significance=render_template(templates.significance, **fields),
            modern_relevance=render_template(templates.modern_relevance, **fields),
            audio_content=render_template(templates.audio_content, **fields),
            visual_content=(render_template(templates.visual_content, **fields),),
            interactive_elements=self._config.interactive_elements,
        )
