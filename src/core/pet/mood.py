"""기분 재계산

상호작용/시간 경과 직후 호출된다.
순수 함수. Pet 객체를 건드리지 않고 (새 기분, 남은 플래그)를 돌려준다.
"""

from dataclasses import dataclass, replace
from typing import Tuple

from src.core.pet.models import HealthState, Mood

NEGLECT_THRESHOLD = 5  # 이 횟수 이상 방치되면 SAD
HIGH_THRESHOLD = 70
LOW_THRESHOLD = 30


@dataclass(frozen=True)
class OneShotFlags:
    """1회성 위로 플래그.

    행동 시작 시점의 상태로 세팅되고, 다음 기분 재계산에서 소비된다.
    """

    fed_while_sad_and_hungry: bool = False
    played_while_sad_and_lonely: bool = False


def is_distressed(health: HealthState) -> bool:
    """한 축이라도 위험 구간이면 True."""
    return (
        health.hunger > HIGH_THRESHOLD
        or health.hygiene < LOW_THRESHOLD
        or health.social < LOW_THRESHOLD
        or health.sleep < LOW_THRESHOLD
    )


def is_thriving(health: HealthState) -> bool:
    """네 축 모두 양호 구간이면 True."""
    return (
        health.hunger < LOW_THRESHOLD
        and health.hygiene > HIGH_THRESHOLD
        and health.social > HIGH_THRESHOLD
        and health.sleep > HIGH_THRESHOLD
    )


def resolve_mood(
    health: HealthState,
    steps_since_interaction: int,
    flags: OneShotFlags,
) -> Tuple[Mood, OneShotFlags]:
    """기분 판정.

    우선순위 (먼저 맞는 것 적용):
    1. 배고프고 슬플 때 먹음 → HAPPY, 해당 플래그 소비
    2. 외롭고 슬플 때 놀아줌 → HAPPY, 해당 플래그 소비
    3. 방치 NEGLECT_THRESHOLD 이상 → SAD
    4. 한 축이라도 위험 → SAD
    5. 네 축 모두 양호 → HAPPY
    6. 그 외 NEUTRAL

    소비되는 플래그는 발동한 하나뿐이다.
    """
    if flags.fed_while_sad_and_hungry:
        return Mood.HAPPY, replace(flags, fed_while_sad_and_hungry=False)
    if flags.played_while_sad_and_lonely:
        return Mood.HAPPY, replace(flags, played_while_sad_and_lonely=False)

    if steps_since_interaction >= NEGLECT_THRESHOLD:
        return Mood.SAD, flags

    if is_distressed(health):
        return Mood.SAD, flags
    if is_thriving(health):
        return Mood.HAPPY, flags
    return Mood.NEUTRAL, flags
