"""
Test fixtures for jeopardy board tests.
"""

import random

import pytest

from jeopardy.clue import Category, Clue

from .fakes import FakeProvider, RecordingView


@pytest.fixture
def view():
    """Recording view."""
    return RecordingView()


@pytest.fixture
def provider():
    """Provider with six categories of five clues."""
    return FakeProvider()


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def sample_clue():
    """A single hidden clue."""
    return Clue(question="This planet is known as the Red Planet", answer="Mars")


@pytest.fixture
def sample_categories():
    """Six categories with five clues each."""
    return [
        Category(
            title=f"Category {c}",
            clues=[Clue(question=f"Q{c}.{i}", answer=f"A{c}.{i}") for i in range(5)],
        )
        for c in range(6)
    ]
