"""미스터리 박스

티어 판정 (COMMON 60% / RARE 40%) 후, 티어별 결과 5종 중 균등 추첨.
난수원은 주입 가능. 고정 시드로 결과 재현.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

from src.core.logging import get_logger
from src.core.pet.models import HealthDelta

if TYPE_CHECKING:
    from src.core.pet.pet import Pet

logger = get_logger(__name__)

COMMON_CHANCE = 60  # randrange(100) < 60 → COMMON


class BoxTier(str, Enum):
    COMMON = "common"
    RARE = "rare"


@dataclass(frozen=True)
class BoxOutcome:
    """결과 서술 + 건강 변화량"""

    description: str
    delta: HealthDelta


COMMON_BOX_OUTCOMES: Tuple[BoxOutcome, ...] = (
    BoxOutcome("Found a small snack! (-5 hunger)", HealthDelta(hunger=-5)),
    BoxOutcome("Discovered a minor toy! (+5 social)", HealthDelta(social=5)),
    BoxOutcome("Got a bit dirty... (-5 hygiene)", HealthDelta(hygiene=-5)),
    BoxOutcome("Took a little extra energy (-5 sleep)", HealthDelta(sleep=-5)),
    BoxOutcome(
        "Small treat! (-3 hunger, +3 social)", HealthDelta(hunger=-3, social=3)
    ),
)

RARE_BOX_OUTCOMES: Tuple[BoxOutcome, ...] = (
    BoxOutcome("Found a healthy meal! (-10 hunger)", HealthDelta(hunger=-10)),
    BoxOutcome(
        "Found a fun puzzle! (+10 social, -5 sleep)",
        HealthDelta(social=10, sleep=-5),
    ),
    BoxOutcome("Discovered a shower kit! (+10 hygiene)", HealthDelta(hygiene=10)),
    BoxOutcome("Found a comfy pillow! (+10 sleep)", HealthDelta(sleep=10)),
    BoxOutcome(
        "Oh no! Box contained a stinky surprise! (-10 hygiene, +5 social)",
        HealthDelta(hygiene=-10, social=5),
    ),
)

# 티어별 (이름, 설명, 결과 테이블)
_TIER_TABLE = {
    BoxTier.COMMON: (
        "Common Mystery Box",
        "A common mystery box. Contains minor helpful (or sometimes harmful) surprises.",
        COMMON_BOX_OUTCOMES,
    ),
    BoxTier.RARE: (
        "Uncommon Mystery Box",
        "An uncommon mystery box with more significant effects.",
        RARE_BOX_OUTCOMES,
    ),
}


class MysteryBox:
    """티어 하나의 박스. 열 때마다 결과를 새로 추첨한다."""

    def __init__(self, tier: BoxTier, rng: Optional[random.Random] = None) -> None:
        self._tier = tier
        self._name, self._description, self._outcomes = _TIER_TABLE[tier]
        self._rng = rng if rng is not None else random.Random()

    @property
    def tier(self) -> BoxTier:
        return self._tier

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def outcomes(self) -> Tuple[BoxOutcome, ...]:
        return self._outcomes

    def draw(self) -> BoxOutcome:
        return self._outcomes[self._rng.randrange(len(self._outcomes))]

    def open(self, pet: Pet) -> str:
        """결과 적용 후 서술 반환. 기분 재계산은 호출자 책임."""
        outcome = self.draw()
        pet.apply_health_impact(outcome.delta)
        logger.debug("%s opened for %s: %s", self._name, pet.name, outcome.description)
        return outcome.description

    def __repr__(self) -> str:
        return f"MysteryBox(tier={self._tier.value})"


class MysteryBoxSystem:
    """박스 생성기

    사용 패턴:
        system = MysteryBoxSystem(random.Random(42))
        box = system.generate_random_box()
        message = box.open(pet)
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def roll_tier(self) -> BoxTier:
        roll = self._rng.randrange(100)
        return BoxTier.COMMON if roll < COMMON_CHANCE else BoxTier.RARE

    def generate_random_box(self) -> MysteryBox:
        tier = self.roll_tier()
        logger.debug("Mystery box generated: %s", tier.value)
        return MysteryBox(tier, self._rng)
