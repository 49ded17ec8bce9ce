# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Text helpers for template rendering and tag building."""

import re
from typing import Any

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


class _KeepMissing(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def slugify(value: str) -> str:
    """Lowercase a label and join its words with underscores.

    Example:
        >>> slugify("Odisha, India")
        'odisha_india'
    """
    return _NON_ALNUM.sub("_", value.lower()).strip("_")


def render_template(template: str, **fields: Any) -> str:
    """Render a str.format template, leaving unknown placeholders as-is.

    Templates come from engine.yaml, so a placeholder the caller does not
    provide must not break rendering.
    """
    return template.format_map(_KeepMissing(fields))
