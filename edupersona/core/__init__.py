# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Core package for EduPersona.

This package contains the decision logic and its shared configuration:
- config: Environment settings, YAML loading and engine tuning
- catalog: Static language and tutor persona catalogs
- profile: Learner profile derivation from interaction history
- tutoring: Tutor persona scoring and response composition
- pathing: Adaptive learning path generation
- risk: Disengagement risk classification
- content: Cultural content descriptor lookup
- engine: PersonalizationEngine facade wiring the components together
"""
