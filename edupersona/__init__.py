"""EduPersona adaptive personalization engine.

Deterministic, explainable rules engine that builds learner profiles,
selects culturally matched tutor personas, generates adaptive learning
paths and flags learners at risk of disengagement.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
