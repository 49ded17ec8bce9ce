# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tutor persona selection and reply composition.

Usage:
    from edupersona.core.tutoring import ResponseComposer, TutorSelector

    tutor = TutorSelector(config, catalog).select(profile, "mathematics")
    reply = ResponseComposer(config).compose(
        tutor, "I don't get fractions", "frustrated", "fractions",
    )
"""

from edupersona.core.tutoring.responses import REFERENCE_KEYWORDS, ResponseComposer, TutorResponse
from edupersona.core.tutoring.selector import TutorScore, TutorSelector

__all__ = [
    "TutorSelector",
    "TutorScore",
    "ResponseComposer",
    "TutorResponse",
    "REFERENCE_KEYWORDS",
]
