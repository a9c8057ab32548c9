"""펫 시뮬레이션 Core 패키지: 공개 API

DB·UI 무관 순수 Python 로직.
"""

from src.core.pet.hints import need_hint
from src.core.pet.models import (
    DEFAULT_LEVEL,
    MAX_LEVEL,
    MIN_LEVEL,
    Action,
    HealthDelta,
    HealthState,
    Mood,
)
from src.core.pet.mood import (
    HIGH_THRESHOLD,
    LOW_THRESHOLD,
    NEGLECT_THRESHOLD,
    OneShotFlags,
    resolve_mood,
)
from src.core.pet.mystery import (
    COMMON_BOX_OUTCOMES,
    RARE_BOX_OUTCOMES,
    BoxOutcome,
    BoxTier,
    MysteryBox,
    MysteryBoxSystem,
)
from src.core.pet.pet import DEFAULT_NAME, Pet
from src.core.pet.strategies import MOOD_EFFECTS, MoodEffect, get_effect, handle_action

__all__ = [
    "Action",
    "Mood",
    "HealthDelta",
    "HealthState",
    "MIN_LEVEL",
    "MAX_LEVEL",
    "DEFAULT_LEVEL",
    "OneShotFlags",
    "resolve_mood",
    "NEGLECT_THRESHOLD",
    "HIGH_THRESHOLD",
    "LOW_THRESHOLD",
    "MoodEffect",
    "MOOD_EFFECTS",
    "get_effect",
    "handle_action",
    "BoxTier",
    "BoxOutcome",
    "MysteryBox",
    "MysteryBoxSystem",
    "COMMON_BOX_OUTCOMES",
    "RARE_BOX_OUTCOMES",
    "Pet",
    "DEFAULT_NAME",
    "need_hint",
]
