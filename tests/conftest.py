"""Shared test fixtures."""

import random
from unittest.mock import MagicMock

import pytest

from src.core.pet.mystery import MysteryBoxSystem
from src.core.pet.pet import Pet


@pytest.fixture()
def pet() -> Pet:
    """Fresh pet: every axis 50, NEUTRAL, awake."""
    return Pet.create("TestPet")


@pytest.fixture()
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(42)


@pytest.fixture()
def scripted_rng() -> MagicMock:
    """Random source whose randrange() results are set per test via side_effect."""
    rng = MagicMock(spec=random.Random)
    return rng


@pytest.fixture()
def box_system(scripted_rng: MagicMock) -> MysteryBoxSystem:
    return MysteryBoxSystem(scripted_rng)
