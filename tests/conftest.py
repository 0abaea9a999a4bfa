"""
Root test configuration and fixtures for name-cluster.

Note: sys.path manipulation is handled here so tests run from a plain
checkout without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from grouping.models import Gender, Link, Person  # noqa: E402


@pytest.fixture
def sample_people() -> list[Person]:
    """Two friend circles and one newcomer."""
    return [
        Person(name="Alice", gender=Gender.FEMALE),
        Person(name="Bob", gender=Gender.MALE),
        Person(name="Carol", gender=Gender.FEMALE),
        Person(name="Dave", gender=Gender.MALE),
        Person(name="Erin", gender=Gender.FEMALE),
        Person(name="Frank", gender=Gender.MALE),
        Person(name="Grace", gender=Gender.FEMALE),
    ]


@pytest.fixture
def sample_links() -> list[Link]:
    pairs = [("Alice", "Bob"), ("Bob", "Carol"), ("Dave", "Erin"), ("Erin", "Frank"), ("Frank", "Dave")]
    return [Link(source=source, target=target) for source, target in pairs]
