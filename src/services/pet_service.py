"""펫 Service: 호출자 요청 ↔ Core 연결

화면 계층이 호출하는 진입점. 시뮬레이션 판정은 전부 Core에 위임하고,
여기서는 활동 로그 문구와 상태 스냅샷만 만든다.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Dict, List, Optional

from src.config import settings
from src.core.pet.hints import need_hint
from src.core.pet.models import Action, Mood
from src.core.pet.mystery import MysteryBox, MysteryBoxSystem
from src.core.pet.pet import Pet

logger = logging.getLogger(__name__)

SLEEPING_TEMPLATE = "{name} is sleeping. Wake them up first!"
DEATH_TEMPLATE = "{name} has passed away due to neglect"
TIME_PASSED_MESSAGE = "Time passed"
BOX_DECLINED_MESSAGE = "You decided not to open the mystery box."

# 행동 결과 문구 (SLEEP은 결과 상태에 따라 별도 처리)
ACTION_TEMPLATES: Dict[Action, str] = {
    Action.FEED: "Fed {name}",
    Action.PLAY: "Played with {name}",
    Action.CLEAN: "Cleaned {name}",
}
FELL_ASLEEP_TEMPLATE = "{name} is now sleeping"
WOKE_UP_TEMPLATE = "{name} woke up"


@dataclass
class ActionResult:
    """요청 처리 결과"""

    success: bool
    action_type: str
    message: str
    data: Optional[dict] = None

    def to_dict(self) -> dict:
        result = {
            "success": self.success,
            "action": self.action_type,
            "message": self.message,
        }
        if self.data:
            result["data"] = self.data
        return result


class PetService:
    """펫 1마리 세션"""

    def __init__(
        self,
        pet: Optional[Pet] = None,
        box_system: Optional[MysteryBoxSystem] = None,
        log_limit: Optional[int] = None,
    ) -> None:
        self._pet = pet or Pet.create(settings.PET_DEFAULT_NAME)
        self._boxes = box_system or MysteryBoxSystem(settings.make_rng())
        self._log: Deque[str] = deque(
            maxlen=log_limit if log_limit is not None else settings.ACTIVITY_LOG_LIMIT
        )
        self._death_reported = False

    @property
    def pet(self) -> Pet:
        return self._pet

    @property
    def activity_log(self) -> List[str]:
        return list(self._log)

    # === 행동 ===

    def perform(self, action: Action) -> ActionResult:
        """사용자 행동 처리"""
        if not isinstance(action, Action):
            raise TypeError(f"Expected Action, got {type(action).__name__}")
        pet = self._pet
        if not pet.alive:
            return self._dead_result(action.value)
        if pet.asleep and action != Action.SLEEP:
            message = SLEEPING_TEMPLATE.format(name=pet.name)
            self._record(message)
            return ActionResult(False, action.value, message)

        pet.interact(action)
        logger.info("Action %s on %s → %s", action.value, pet.name, pet.mood.value)

        if action == Action.SLEEP:
            template = FELL_ASLEEP_TEMPLATE if pet.asleep else WOKE_UP_TEMPLATE
        else:
            template = ACTION_TEMPLATES[action]
        message = template.format(name=pet.name)
        self._record(message)
        self._check_status()
        return ActionResult(True, action.value, message, data=self.snapshot())

    def pass_time(self) -> ActionResult:
        """시간 1단위 경과"""
        if not self._pet.alive:
            return self._dead_result("step")

        self._pet.step()
        logger.info("Step for %s → %s", self._pet.name, self._pet.health)
        self._record(TIME_PASSED_MESSAGE)
        self._check_status()
        return ActionResult(True, "step", TIME_PASSED_MESSAGE, data=self.snapshot())

    def set_mood(self, mood: Mood) -> None:
        """기분 강제 지정 (디버그용)"""
        self._pet.set_mood(mood)
        logger.info("Mood override for %s: %s", self._pet.name, mood.value)

    # === 미스터리 박스 ===

    def offer_mystery_box(self) -> Optional[MysteryBox]:
        """박스 생성. 사망/수면 중에는 None."""
        if not self._pet.alive:
            return None
        if self._pet.asleep:
            self._record(SLEEPING_TEMPLATE.format(name=self._pet.name))
            return None
        box = self._boxes.generate_random_box()
        logger.info("Offered %s to %s", box.name, self._pet.name)
        return box

    def open_mystery_box(self, box: MysteryBox) -> ActionResult:
        """박스 개봉 후 기분 재계산. 사망/수면 중에는 개봉하지 않는다."""
        if not self._pet.alive:
            return self._dead_result("mystery_box")
        if self._pet.asleep:
            message = SLEEPING_TEMPLATE.format(name=self._pet.name)
            self._record(message)
            return ActionResult(False, "mystery_box", message)

        message = box.open(self._pet)
        self._pet.update_mood()
        logger.info("%s opened %s: %s", self._pet.name, box.name, message)
        self._record(message)
        self._check_status()
        return ActionResult(
            True,
            "mystery_box",
            message,
            data={"tier": box.tier.value, **self.snapshot()},
        )

    def decline_mystery_box(self) -> ActionResult:
        self._record(BOX_DECLINED_MESSAGE)
        return ActionResult(True, "mystery_box", BOX_DECLINED_MESSAGE)

    # === 조회 ===

    def snapshot(self) -> Dict[str, Any]:
        """화면 갱신용 상태"""
        pet = self._pet
        return {
            "name": pet.name,
            "health": pet.health.to_dict(),
            "health_text": str(pet.health),
            "mood": pet.mood.value,
            "alive": pet.alive,
            "asleep": pet.asleep,
            "can_interact": pet.alive and not pet.asleep,
            "hint": need_hint(pet.health) if pet.alive else None,
        }

    # === 내부 ===

    def _record(self, message: str) -> None:
        self._log.append(message)

    def _check_status(self) -> None:
        """사망 알림은 1회만 기록"""
        if self._pet.alive or self._death_reported:
            return
        self._death_reported = True
        message = DEATH_TEMPLATE.format(name=self._pet.name)
        self._record(message)
        logger.warning(message)

    def _dead_result(self, action_type: str) -> ActionResult:
        return ActionResult(
            False, action_type, DEATH_TEMPLATE.format(name=self._pet.name)
        )
