"""Pytest fixtures for UI tests."""

import os

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def fruit_dicts():
    """Four items; "banana" is disabled."""
    return [
        {"key": "a", "title": "apple"},
        {"key": "b", "title": "banana", "disabled": True},
        {"key": "c", "title": "cherry"},
        {"key": "d", "title": "date"},
    ]
