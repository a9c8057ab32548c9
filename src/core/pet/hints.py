"""필요 알림 (말풍선 문구)

가장 급한 욕구 하나만 고른다. 판정 순서: 배고픔 → 위생 → 외로움 → 졸림.
"""

from typing import Optional

from src.core.pet.models import HealthState
from src.core.pet.mood import HIGH_THRESHOLD, LOW_THRESHOLD


def need_hint(health: HealthState) -> Optional[str]:
    if health.hunger > HIGH_THRESHOLD:
        return "I'm starving!"
    if health.hygiene < LOW_THRESHOLD:
        return "I need a bath!"
    if health.social < LOW_THRESHOLD:
        return "I'm feeling lonely..."
    if health.sleep < LOW_THRESHOLD:
        return "*yawn* I'm tired..."
    return None
