# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Read-only catalog registry.

The Catalog holds languages and tutors as tuples of frozen models. It is
built once (from YAML or from synthetic entries in tests) and never
mutated afterwards, so concurrent engine calls share it without locks.
"""

from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional

from edupersona.core.catalog.loader import load_languages, load_tutors
from edupersona.core.catalog.models import Language, TutorPersona
from edupersona.core.config.engine import get_engine_config
from edupersona.core.config.settings import get_settings
from edupersona.utils.logging import get_logger

logger = get_logger(__name__)


class Catalog:
    """Immutable language and tutor catalog.

    Tutor order is significant: it is the tie-break order used by
    tutor selection.

    Attributes:
        _languages: Languages in catalog order
        _tutors: Tutors in catalog order
        _default_language_code: Code used when a learner has no languages
    """

    __slots__ = ("_languages", "_tutors", "_by_code", "_by_tutor_id", "_default_language_code")

    def __init__(
        self,
        languages: Iterable[Language],
        tutors: Iterable[TutorPersona],
        default_language_code: str = "en",
    ):
        """Initialize the catalog.

        Args:
            languages: Language entries
            tutors: Tutor entries, in tie-break order
            default_language_code: Fallback language code
        """
        self._languages: tuple[Language, ...] = tuple(languages)
        self._tutors: tuple[TutorPersona, ...] = tuple(tutors)
        self._by_code = {language.code: language for language in self._languages}
        self._by_tutor_id = {tutor.id: tutor for tutor in self._tutors}
        self._default_language_code = default_language_code

    @classmethod
    def from_directory(
        cls,
        catalogs_dir: Path,
        default_language_code: str = "en",
    ) -> "Catalog":
        """Load a catalog from languages.yaml and tutors.yaml.

        Args:
            catalogs_dir: Directory containing the catalog files
            default_language_code: Fallback language code

        Returns:
            Loaded Catalog

        Raises:
            CatalogLoadError: If either file fails to load
        """
        languages = load_languages(catalogs_dir / "languages.yaml")
        tutors = load_tutors(catalogs_dir / "tutors.yaml", languages)
        catalog = cls(languages, tutors, default_language_code)
        logger.info(
            "catalog_loaded",
            path=str(catalogs_dir),
            language_count=len(languages),
            tutor_ids=[tutor.id for tutor in tutors],
        )
        return catalog

    @property
    def languages(self) -> tuple[Language, ...]:
        """All languages in catalog order."""
        return self._languages

    @property
    def tutors(self) -> tuple[TutorPersona, ...]:
        """All tutors in catalog (tie-break) order."""
        return self._tutors

    @property
    def default_language(self) -> Language:
        """The fallback language, degraded if it is not catalogued."""
        return self.resolve_language(self._default_language_code)

    def is_supported(self, code: str) -> bool:
        """Check whether a language code is in the catalog."""
        return code in self._by_code

    def get_language(self, code: str) -> Optional[Language]:
        """Get a language by code, or None if not catalogued."""
        return self._by_code.get(code)

    def resolve_language(self, code: str) -> Language:
        """Get a language by code, degrading to a placeholder if unknown.

        Unknown codes are not an error: the learner keeps the language,
        but without cultural context or speech capabilities.

        Args:
            code: Language code

        Returns:
            Catalog entry or Language.unknown(code)
        """
        language = self._by_code.get(code)
        if language is not None:
            return language

        logger.warning("unknown_language_fallback", language_code=code)
        return Language.unknown(code)

    def get_tutor(self, tutor_id: str) -> Optional[TutorPersona]:
        """Get a tutor by id, or None if not catalogued."""
        return self._by_tutor_id.get(tutor_id)

    def indigenous_languages(self) -> list[Language]:
        """List indigenous languages in catalog order."""
        return [language for language in self._languages if language.is_indigenous]

    def languages_by_region(self, region: str) -> list[Language]:
        """List languages whose region mentions the given text.

        Args:
            region: Region text, matched case-insensitively as a substring

        Returns:
            Matching languages in catalog order
        """
        needle = region.lower()
        return [
            language for language in self._languages
            if needle in language.region.lower()
        ]

    def tutors_for_language(self, code: str) -> list[TutorPersona]:
        """List tutors speaking the given language."""
        return [tutor for tutor in self._tutors if tutor.language.code == code]


@lru_cache(maxsize=1)
def _load_default_catalog(catalogs_dir: str, default_language_code: str) -> Catalog:
    return Catalog.from_directory(Path(catalogs_dir), default_language_code)


def get_catalog(default_language_code: Optional[str] = None) -> Catalog:
    """Get the process-wide catalog loaded from the configured directory.

    Args:
        default_language_code: Fallback language code. Defaults to the
            engine configuration's default_language_code.

    Returns:
        The cached Catalog instance
    """
    if default_language_code is None:
        default_language_code = get_engine_config().default_language_code
    return _load_default_catalog(str(get_settings().catalogs_dir), default_language_code)


def reset_catalog() -> None:
    """Drop the cached catalog.

    This is primarily useful for testing.
    """
    _load_default_catalog.cache_clear()
