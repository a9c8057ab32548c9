"""Pet 애그리거트

상태: ALIVE-AWAKE / ALIVE-ASLEEP / DEAD (종단).
모든 변경은 step / interact / apply_health_impact / set_mood 경유.
"""

from __future__ import annotations

from typing import Optional

from src.core.logging import get_logger
from src.core.pet import strategies
from src.core.pet.models import Action, HealthDelta, HealthState, Mood
from src.core.pet.mood import OneShotFlags, resolve_mood

logger = get_logger(__name__)

DEFAULT_NAME = "Buddy"
DECAY_PER_STEP = 5  # HAPPY일 때는 절반 (정수 나눗셈)


def _validate_name(name: str) -> str:
    if not name or not name.strip():
        raise ValueError("Pet name must not be blank")
    return name


class Pet:
    """가상 펫

    사용 패턴:
        pet = Pet.create("Mochi")
        pet.interact(Action.FEED)
        pet.step()
    """

    def __init__(self, name: str = DEFAULT_NAME) -> None:
        self._name = _validate_name(name)
        self._health = HealthState()
        self._mood = Mood.NEUTRAL
        self._alive = True
        self._asleep = False
        self._flags = OneShotFlags()
        self._steps_since_interaction = 0

    @classmethod
    def create(cls, name: Optional[str] = None) -> "Pet":
        """기본 상태 펫 생성. name 미지정 시 DEFAULT_NAME."""
        return cls(DEFAULT_NAME if name is None else name)

    # === 조회 ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def health(self) -> HealthState:
        return self._health

    @property
    def mood(self) -> Mood:
        return self._mood

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def asleep(self) -> bool:
        return self._asleep

    @asleep.setter
    def asleep(self, value: bool) -> None:
        self._asleep = value

    @property
    def steps_since_interaction(self) -> int:
        return self._steps_since_interaction

    @property
    def fed_while_sad_and_hungry(self) -> bool:
        return self._flags.fed_while_sad_and_hungry

    @fed_while_sad_and_hungry.setter
    def fed_while_sad_and_hungry(self, value: bool) -> None:
        self._flags = OneShotFlags(value, self._flags.played_while_sad_and_lonely)

    @property
    def played_while_sad_and_lonely(self) -> bool:
        return self._flags.played_while_sad_and_lonely

    @played_while_sad_and_lonely.setter
    def played_while_sad_and_lonely(self, value: bool) -> None:
        self._flags = OneShotFlags(self._flags.fed_while_sad_and_hungry, value)

    # === 변경 ===

    def rename(self, name: str) -> None:
        self._name = _validate_name(name)

    def step(self) -> None:
        """시간 1단위 경과. 사망 시 기분은 재계산하지 않는다."""
        if not self._alive:
            return
        self._steps_since_interaction += 1

        decay = DECAY_PER_STEP // 2 if self._mood == Mood.HAPPY else DECAY_PER_STEP
        self._health = self._health.clamped_apply(
            HealthDelta(hunger=decay, hygiene=-decay, social=-decay, sleep=-decay)
        )

        if self._health.is_depleted():
            self._alive = False
            logger.info("%s died of neglect", self._name)
            return

        self.update_mood()

    def interact(self, action: Action) -> None:
        """사용자 행동. 사망 / 수면 중 (SLEEP 제외)에는 무시."""
        if not isinstance(action, Action):
            raise TypeError(f"Expected Action, got {type(action).__name__}")
        if not self._alive:
            logger.debug("%s is dead, ignoring %s", self._name, action.value)
            return
        if self._asleep and action != Action.SLEEP:
            logger.debug("%s is asleep, ignoring %s", self._name, action.value)
            return

        strategies.handle_action(action, self)
        self._steps_since_interaction = 0
        self.update_mood()

    def apply_health_impact(
        self,
        delta: Optional[HealthDelta] = None,
        *,
        hunger: int = 0,
        hygiene: int = 0,
        social: int = 0,
        sleep: int = 0,
    ) -> None:
        """건강 변화 적용 (포화 연산). 사망 여부와 무관하게 항상 가능."""
        if delta is None:
            delta = HealthDelta(hunger, hygiene, social, sleep)
        self._health = self._health.clamped_apply(delta)

    def set_mood(self, mood: Mood) -> None:
        """기분 강제 지정 (디버그/테스트용). 건강·생존·수면 상태는 그대로."""
        self._mood = mood

    def update_mood(self) -> None:
        """현재 상태로 기분 재계산, 발동한 위로 플래그 소비."""
        if not self._alive:
            return
        previous = self._mood
        self._mood, self._flags = resolve_mood(
            self._health, self._steps_since_interaction, self._flags
        )
        if self._mood != previous:
            logger.debug(
                "%s mood: %s → %s", self._name, previous.value, self._mood.value
            )

    def __repr__(self) -> str:
        return (
            f"Pet(name={self._name!r}, health=({self._health}), "
            f"mood={self._mood.value}, alive={self._alive}, asleep={self._asleep})"
        )
