"""Pytest configuration: project root on sys.path plus shared rule table fixtures."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from terbilang.rules import load_rules  # noqa: E402


@pytest.fixture
def english():
    """The bundled English rule table."""
    return load_rules("en")


@pytest.fixture
def japanese():
    """The bundled Japanese rule table."""
    return load_rules("ja")
