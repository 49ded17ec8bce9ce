# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Read-only mapping helpers for frozen models.

Pydantic's frozen=True blocks attribute assignment but not in-place
edits of a dict field. Models that are shared across threads store
their mappings through read_only() and dump them back with as_dict().
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


def read_only(value: Mapping[str, Any]) -> Mapping[str, Any]:
    """Copy a mapping into a read-only view."""
    return MappingProxyType(dict(value))


def as_dict(value: Mapping[str, Any]) -> dict[str, Any]:
    """Plain dict copy of a mapping, for serialization."""
    return dict(value)
