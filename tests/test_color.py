"""
Tests for ColorScheme.
"""

import pytest
from pydantic import ValidationError

from chartclient.color import ColorScheme


class TestColorScheme:
    """Tests for ColorScheme."""

    def test_label_defaults_to_id(self):
        scheme = ColorScheme(id="bnbColors", colors=["#ff5a5f", "#7b0051"])
        assert scheme.label == "bnbColors"
        assert scheme.description == ""

    def test_explicit_label(self):
        scheme = ColorScheme(id="d3", colors=["#1f77b4"], label="D3 Category", description="Classic")
        assert scheme.label == "D3 Category"
        assert scheme.description == "Classic"

    def test_requires_id(self):
        with pytest.raises(ValidationError):
            ColorScheme(colors=["#000"])

    def test_requires_colors(self):
        with pytest.raises(ValidationError):
            ColorScheme(id="empty")
