# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Catalog YAML loader for EduPersona.

Languages are loaded from config/catalogs/languages.yaml and tutors from
config/catalogs/tutors.yaml. Tutors reference their language by code;
the loader resolves the code against the language entries so every
TutorPersona carries its full Language record. File order is preserved,
because tutor order is the selection tie-break.
"""

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from edupersona.core.catalog.models import Language, TutorPersona
from edupersona.core.config.yaml_loader import YAMLLoadError, load_yaml
from edupersona.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogLoadError(Exception):
    """Raised when a catalog file fails to load or validate."""


def _entries(data: dict[str, Any], key: str, path: Path) -> list[dict[str, Any]]:
    entries = data.get(key, [])
    if not isinstance(entries, list):
        raise CatalogLoadError(f"'{key}' in {path} must be a list")
    return entries


def load_languages(path: Path) -> tuple[Language, ...]:
    """Load the language catalog.

    Args:
        path: Path to languages.yaml

    Returns:
        Languages in file order

    Raises:
        CatalogLoadError: If the file is missing, invalid, or repeats a code
    """
    try:
        data = load_yaml(path)
    except YAMLLoadError as e:
        raise CatalogLoadError(str(e)) from e

    languages: list[Language] = []
    seen: set[str] = set()

    for index, entry in enumerate(_entries(data, "languages", path)):
        try:
            language = Language.model_validate(entry)
        except ValidationError as e:
            raise CatalogLoadError(
                f"Validation failed for language #{index} in {path}: {e}"
            ) from e

        if language.code in seen:
            raise CatalogLoadError(f"Duplicate language code '{language.code}' in {path}")
        seen.add(language.code)
        languages.append(language)

    logger.debug("languages_loaded", path=str(path), count=len(languages))
    return tuple(languages)


def load_tutors(path: Path, languages: tuple[Language, ...]) -> tuple[TutorPersona, ...]:
    """Load the tutor catalog, resolving language codes.

    Args:
        path: Path to tutors.yaml
        languages: Already loaded language catalog

    Returns:
        Tutors in file order

    Raises:
        CatalogLoadError: If the file is missing, invalid, repeats an id,
            or references an unknown language code
    """
    try:
        data = load_yaml(path)
    except YAMLLoadError as e:
        raise CatalogLoadError(str(e)) from e

    by_code = {language.code: language for language in languages}
    tutors: list[TutorPersona] = []
    seen: set[str] = set()

    for index, entry in enumerate(_entries(data, "tutors", path)):
        tutor_data = dict(entry)
        language_ref = tutor_data.get("language")

        # Tutors normally reference the language by code
        if isinstance(language_ref, str):
            if language_ref not in by_code:
                raise CatalogLoadError(
                    f"Tutor #{index} in {path} references unknown language '{language_ref}'"
                )
            tutor_data["language"] = by_code[language_ref]

        try:
            tutor = TutorPersona.model_validate(tutor_data)
        except ValidationError as e:
            raise CatalogLoadError(
                f"Validation failed for tutor #{index} in {path}: {e}"
            ) from e

        if tutor.id in seen:
            raise CatalogLoadError(f"Duplicate tutor id '{tutor.id}' in {path}")
        seen.add(tutor.id)
        tutors.append(tutor)

    logger.debug("tutors_loaded", path=str(path), count=len(tutors))
    return tuple(tutors)
