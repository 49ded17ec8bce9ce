# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""YAML configuration file loader utilities.

Catalogs, engine tuning and curated content packs all live in YAML under
config/. Everything is read with safe_load; a root that is not a mapping
is rejected.
"""

from pathlib import Path
from typing import Any

import yaml


class YAMLLoadError(Exception):
    """Raised when YAML file cannot be loaded or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize YAMLLoadError.

        Args:
            path: Path to the YAML file that failed to load.
            reason: Description of why the file failed to load.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load YAML file '{path}': {reason}")


def load_yaml(path: Path | str, *, missing_ok: bool = False) -> dict[str, Any]:
    """Load a single YAML file and return its contents as a dictionary.

    Args:
        path: Path to the YAML file to load.
        missing_ok: Return an empty dict instead of raising when the
            file does not exist.

    Returns:
        Dictionary containing the parsed YAML contents.
        Empty dict if file is empty (or missing with missing_ok).

    Raises:
        YAMLLoadError: If the file doesn't exist, cannot be read,
            or contains invalid YAML.
    """
    path = Path(path)

    if not path.exists():
        if missing_ok:
            return {}
        raise YAMLLoadError(path, "File does not exist")

    if not path.is_file():
        raise YAMLLoadError(path, "Path is not a file")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise YAMLLoadError(path, f"Cannot read file: {e}") from e

    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise YAMLLoadError(path, f"Invalid YAML syntax: {e}") from e

    if parsed is None:
        return {}

    if not isinstance(parsed, dict):
        raise YAMLLoadError(
            path, f"YAML root must be a mapping, got {type(parsed).__name__}"
        )

    return parsed


def load_yaml_directory(path: Path | str) -> dict[str, dict[str, Any]]:
    """Load every content pack in a directory, keyed by file stem.

    Raises:
        YAMLLoadError: If the path is not a directory, two files share a
            stem, or any file fails to load.
    """
    path = Path(path)

    if not path.exists():
        raise YAMLLoadError(path, "Directory does not exist")

    if not path.is_dir():
        raise YAMLLoadError(path, "Path is not a directory")

    packs: dict[str, dict[str, Any]] = {}
    for pack_file in sorted(
        p for p in path.iterdir() if p.is_file() and p.suffix in (".yaml", ".yml")
    ):
        if pack_file.stem in packs:
            raise YAMLLoadError(pack_file, f"Duplicate pack name '{pack_file.stem}'")
        packs[pack_file.stem] = load_yaml(pack_file)

    return packs


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence.

    Used to layer a deployment's engine.yaml on top of the built-in
    defaults. Neither input dictionary is modified.

    Args:
        base: The base dictionary to merge into.
        override: The dictionary whose values take precedence.

    Returns:
        A new dictionary containing the merged result.

    Example:
        >>> deep_merge({"risk": {"high": 3, "medium": 2}}, {"risk": {"high": 4}})
        {'risk': {'high': 4, 'medium': 2}}
    """
    result: dict[str, Any] = base.copy()

    for key, override_value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(override_value, dict)
        ):
            result[key] = deep_merge(result[key], override_value)
        else:
            result[key] = override_value

    return result
