# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for text helpers."""

import pytest

from edupersona.utils.text import render_template, slugify


@pytest.mark.unit
class TestSlugify:
    """Tests for slugify."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("Odisha, India", "odisha_india"),
            ("Santal", "santal"),
            ("  Spain/Americas ", "spain_americas"),
            ("", ""),
        ],
    )
    def test_slugify(self, value: str, expected: str) -> None:
        assert slugify(value) == expected


@pytest.mark.unit
class TestRenderTemplate:
    """Tests for render_template."""

    def test_renders_fields(self) -> None:
        assert render_template("/audio/{language_code}/{subject}_intro.mp3", language_code="or", subject="music") == (
            "/audio/or/music_intro.mp3"
        )

    def test_unknown_placeholder_kept(self) -> None:
        assert render_template("{subject} in {era}", subject="history") == "history in {era}"
