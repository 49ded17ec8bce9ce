# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Exceptions raised by the personalization engine.

This module defines the exception hierarchy for engine operations:
- EngineError: Base exception for all engine errors
- InvalidInputError: Malformed or missing required arguments
- UnknownSubjectError: Empty subject passed to path generation
- NoTutorAvailableError: Empty catalog or no tutor scored above zero
- MisalignedInputError: Batch arrays of different lengths

Falling back to a neutral template or an unknown-language placeholder is
not an error. Those paths are logged and the call returns normally.
"""

from typing import Any


class EngineError(Exception):
    """Base exception for all engine errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize engine error.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation with details if available."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class InvalidInputError(EngineError):
    """A required argument is missing or malformed."""


class UnknownSubjectError(InvalidInputError):
    """Subject is empty or blank.

    Unrecognized but non-empty subjects are accepted and rendered with
    the neutral templates instead.
    """


class NoTutorAvailableError(EngineError):
    """No tutor persona can be offered.

    Raised when the tutor catalog is empty or when every tutor scores
    zero for the learner.
    """


class MisalignedInputError(EngineError):
    """Parallel batch inputs have different lengths.

    Attributes:
        lengths: Mapping of argument name to its length.
    """

    def __init__(self, lengths: dict[str, int]):
        """Initialize misaligned input error.

        Args:
            lengths: Mapping of argument name to its length.
        """
        self.lengths = lengths
        super().__init__(
            "Batch inputs must be index-aligned",
            details={"lengths": lengths},
        )
