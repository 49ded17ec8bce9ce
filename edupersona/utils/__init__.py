# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers for EduPersona.

This package contains cross-cutting utilities:
- logging: Structured logging with structlog
- datetime: Timezone-aware timestamp handling
- text: Slugs and template rendering
- mappings: Read-only mappings for frozen models
"""

from edupersona.utils.datetime import ensure_utc, time_of_day, utc_now
from edupersona.utils.logging import bind_context, clear_context, get_logger, setup_logging
from edupersona.utils.mappings import as_dict, read_only
from edupersona.utils.text import render_template, slugify

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    # Datetime
    "utc_now",
    "ensure_utc",
    "time_of_day",
    # Text
    "slugify",
    "render_template",
    # Mappings
    "read_only",
    "as_dict",
]
