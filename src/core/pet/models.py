"""펫 도메인 모델

4축 건강 상태, 기분, 행동 정의.
외부 의존 없는 순수 데이터 클래스.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict

MIN_LEVEL = 0
MAX_LEVEL = 100
DEFAULT_LEVEL = MAX_LEVEL // 2


class Mood(str, Enum):
    """펫 기분 3단계. 활성 행동 효과 테이블을 결정한다."""

    HAPPY = "happy"
    SAD = "sad"
    NEUTRAL = "neutral"


class Action(str, Enum):
    """사용자 행동"""

    FEED = "feed"
    PLAY = "play"
    CLEAN = "clean"
    SLEEP = "sleep"  # 토글: 재우기 / 깨우기


def _clamp(value: int) -> int:
    return max(MIN_LEVEL, min(MAX_LEVEL, value))


@dataclass(frozen=True)
class HealthDelta:
    """축별 변화량. 부호 그대로 더한다."""

    hunger: int = 0
    hygiene: int = 0
    social: int = 0
    sleep: int = 0


@dataclass(frozen=True)
class HealthState:
    """4축 건강 상태 (불변).

    hunger는 높을수록 나쁘고, hygiene/social/sleep은 높을수록 좋다.
    모든 축은 항상 0 ~ 100.
    """

    hunger: int = DEFAULT_LEVEL
    hygiene: int = DEFAULT_LEVEL
    social: int = DEFAULT_LEVEL
    sleep: int = DEFAULT_LEVEL

    def clamped_apply(self, delta: HealthDelta) -> "HealthState":
        """변화량을 더하고 축별로 독립 클램프한 새 상태 반환."""
        return HealthState(
            hunger=_clamp(self.hunger + delta.hunger),
            hygiene=_clamp(self.hygiene + delta.hygiene),
            social=_clamp(self.social + delta.social),
            sleep=_clamp(self.sleep + delta.sleep),
        )

    def is_depleted(self) -> bool:
        """완전 방치 상태 (100, 0, 0, 0) 여부. 네 축 모두 일치해야 한다."""
        return (
            self.hunger == MAX_LEVEL
            and self.hygiene == MIN_LEVEL
            and self.social == MIN_LEVEL
            and self.sleep == MIN_LEVEL
        )

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def __str__(self) -> str:
        return (
            f"Hunger: {self.hunger}, Hygiene: {self.hygiene}, "
            f"Social: {self.social}, Sleep: {self.sleep}"
        )
