# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for EduPersona.

This package provides centralized configuration management:
- Settings: Pydantic-based host settings loaded from EDUPERSONA_* variables
- EngineConfig: Scoring weights, thresholds and templates from engine.yaml
- YAML loader: Utilities for loading YAML configuration files

Example:
    >>> from edupersona.core.config import get_engine_config
    >>> config = get_engine_config()
    >>> config.risk.high_threshold
    3
"""

from edupersona.core.config.engine import (
    ContentConfig,
    EngineConfig,
    EngineConfigError,
    InterventionPlanConfig,
    MotivationRule,
    PathConfig,
    PathTemplates,
    ProfileConfig,
    ResponseConfig,
    RiskConfig,
    TutorScoringConfig,
    TutorWeights,
    get_engine_config,
    load_engine_config,
    parse_engine_config,
    reload_engine_config,
)
from edupersona.core.config.settings import Settings, clear_settings_cache, get_settings
from edupersona.core.config.yaml_loader import (
    YAMLLoadError,
    deep_merge,
    load_yaml,
    load_yaml_directory,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Engine tuning
    "EngineConfig",
    "EngineConfigError",
    "ProfileConfig",
    "MotivationRule",
    "TutorScoringConfig",
    "TutorWeights",
    "PathConfig",
    "PathTemplates",
    "RiskConfig",
    "InterventionPlanConfig",
    "ContentConfig",
    "ResponseConfig",
    "get_engine_config",
    "load_engine_config",
    "parse_engine_config",
    "reload_engine_config",
    # YAML utilities
    "load_yaml",
    "load_yaml_directory",
    "deep_merge",
    "YAMLLoadError",
]
