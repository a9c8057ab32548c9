"""Virtual Pet Core"""
__version__ = "0.1.0-alpha"

from src.core.pet import (
    Action,
    HealthDelta,
    HealthState,
    Mood,
    MysteryBox,
    MysteryBoxSystem,
    Pet,
)

__all__ = [
    "Action",
    "HealthDelta",
    "HealthState",
    "Mood",
    "MysteryBox",
    "MysteryBoxSystem",
    "Pet",
]
