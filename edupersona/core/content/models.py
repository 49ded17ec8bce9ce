# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Cultural content descriptor models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from edupersona.core.catalog.models import Language


class ContentBody(BaseModel):
    """Text and media pointers of a cultural content item."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""
    significance: str = ""
    modern_relevance: str = ""
    audio_content: str = ""
    visual_content: tuple[str, ...] = ()
    interactive_elements: tuple[str, ...] = ()


class EducationalValue(BaseModel):
    """What a content item teaches.

    Attributes:
        subjects: Subjects covered
        skills: Skills practised
        values: Values conveyed
        sdg_alignment: UN Sustainable Development Goal numbers
    """

    model_config = ConfigDict(frozen=True)

    subjects: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()
    values: tuple[str, ...] = ()
    sdg_alignment: tuple[int, ...] = ()


class AgeRange(BaseModel):
    """Inclusive age range a content item suits."""

    model_config = ConfigDict(frozen=True)

    min: int = Field(ge=0)
    max: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "AgeRange":
        if self.min > self.max:
            raise ValueError("age range min must not exceed max")
        return self


class CuratedContent(BaseModel):
    """A hand-written content entry from cultural_content.yaml."""

    model_config = ConfigDict(frozen=True)

    topic: str = Field(..., min_length=1)
    culture: str = Field(..., min_length=1)
    content_type: str = "story"
    title: str = Field(..., min_length=1)
    description: str = ""
    significance: str = ""
    modern_relevance: str = ""
    audio_content: str = ""
    visual_content: tuple[str, ...] = ()
    interactive_elements: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()
    values: tuple[str, ...] = ()

    @property
    def key(self) -> tuple[str, str]:
        """Case-insensitive (topic, culture) lookup key."""
        return (self.topic.lower(), self.culture.lower())


class CulturalContentDescriptor(BaseModel):
    """A topic paired with a culture and language.

    Attributes:
        id: Deterministic descriptor id
        content_type: Content kind (story, tradition, craft, ...)
        culture: Culture the content comes from
        region: Region of the content language
        language: Content language
        content: Text and media pointers
        educational_value: What the content teaches
        age_range: Suitable learner ages
        curated: Whether the content came from a curated entry
    """

    model_config = ConfigDict(frozen=True)

    id: str
    content_type: str
    culture: str
    region: str
    language: Language
    content: ContentBody
    educational_value: EducationalValue
    age_range: AgeRange
    curated: bool = False

    @property
    def language_code(self) -> str:
        return self.language.code
