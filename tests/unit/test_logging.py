# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for structured logging setup."""

from collections.abc import Generator

import pytest
import structlog

from edupersona.core.config import Settings
from edupersona.utils.logging import bind_context, clear_context, get_logger, setup_logging


@pytest.fixture(autouse=True)
def _reset_structlog() -> Generator[None, None, None]:
    yield
    clear_context()
    structlog.reset_defaults()


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.mark.parametrize("environment", ["development", "production"])
    def test_logger_usable_after_setup(self, environment: str) -> None:
        setup_logging(Settings(environment=environment, log_level="DEBUG", _env_file=None))

        logger = get_logger("edupersona.tests")
        logger.info("tutor_selected", learner_id="learner-1", tutor_id="guru_odia")

    def test_bind_and_clear_context(self) -> None:
        bind_context(batch_id="nightly")

        assert structlog.contextvars.get_contextvars() == {"batch_id": "nightly"}

        clear_context()

        assert structlog.contextvars.get_contextvars() == {}
