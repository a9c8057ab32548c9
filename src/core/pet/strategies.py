"""기분별 행동 효과 테이블

기분이 좋을수록 같은 행동의 효과가 크다.
SAD 테이블만 1회성 위로 플래그를 세팅할 수 있다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict

from src.core.logging import get_logger
from src.core.pet.models import Action, HealthDelta, Mood
from src.core.pet.mood import HIGH_THRESHOLD, LOW_THRESHOLD

if TYPE_CHECKING:
    from src.core.pet.pet import Pet

logger = get_logger(__name__)

PLAY_SLEEP_COST = 5  # 놀이는 기분과 무관하게 sleep -5


@dataclass(frozen=True)
class MoodEffect:
    """기분 하나의 효과 크기. 모든 행동이 같은 크기를 쓴다."""

    magnitude: int
    comforts: bool = False  # 슬플 때 돌봄을 기억하는가

    def delta_for(self, action: Action) -> HealthDelta:
        """행동별 변화량. SLEEP은 잠들 때의 변화량."""
        if action == Action.FEED:
            return HealthDelta(hunger=-self.magnitude)
        if action == Action.PLAY:
            return HealthDelta(social=self.magnitude, sleep=-PLAY_SLEEP_COST)
        if action == Action.CLEAN:
            return HealthDelta(hygiene=self.magnitude)
        return HealthDelta(sleep=self.magnitude)


MOOD_EFFECTS: Dict[Mood, MoodEffect] = {
    Mood.HAPPY: MoodEffect(magnitude=15),
    Mood.NEUTRAL: MoodEffect(magnitude=10),
    Mood.SAD: MoodEffect(magnitude=5, comforts=True),
}


def get_effect(mood: Mood) -> MoodEffect:
    return MOOD_EFFECTS[mood]


def handle_action(action: Action, pet: Pet) -> None:
    """현재 기분의 효과 테이블로 행동 적용.

    위로 플래그는 행동 전 상태로 판정한다.
    잠/깨우기 판정, 수면 중 차단은 Pet.interact 책임.
    """
    effect = get_effect(pet.mood)
    before = pet.health

    if action == Action.SLEEP:
        if pet.asleep:
            # 깨어날 때는 수치 변화 없음
            pet.asleep = False
            return
        pet.asleep = True
        pet.apply_health_impact(effect.delta_for(action))
        return

    pet.apply_health_impact(effect.delta_for(action))

    if not effect.comforts or pet.mood != Mood.SAD:
        return
    if action == Action.FEED and before.hunger > HIGH_THRESHOLD:
        pet.fed_while_sad_and_hungry = True
        logger.debug("%s: fed while sad and hungry", pet.name)
    elif action == Action.PLAY and before.social < LOW_THRESHOLD:
        pet.played_while_sad_and_lonely = True
        logger.debug("%s: played with while sad and lonely", pet.name)
