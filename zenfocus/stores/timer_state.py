"""
타이머 상태 저장소 (소유자당 하나의 스냅샷)
"""

import logging
from typing import Any

from ..errors import NotFound, ValidationFailed
from ..models.database import TIMER_STATES
from ..models.owner import Owner, owner_user_id
from ..models.timer_state import TRANSITIONS, TimerState
from ..models.validation import to_storage_time, utcnow, validate

logger = logging.getLogger(__name__)


class TimerStateStore:
    """소유자(사용자 또는 게스트)별 타이머 상태 저장소"""

    def __init__(self, backend):
        self._backend = backend

    def get(self, owner: Owner) -> TimerState:
        """저장된 타이머 상태 조회 (없으면 NotFound)"""
        rows, _ = self._backend.select(TIMER_STATES, eq={"owner_key": owner.key}, limit=1)
        if not rows:
            raise NotFound("진행 중인 타이머가 없습니다.")
        return TimerState.model_validate(rows[0]["state"])

    def save(self, owner: Owner, payload: Any) -> TimerState:
        """스냅샷 전체 교체"""
        state = validate(TimerState, payload)
        self._backend.upsert(TIMER_STATES, {
            "owner_key": owner.key,
            "user_id": owner_user_id(owner),
            "state": state.model_dump(mode="json", by_alias=True),
            "updated_at": to_storage_time(utcnow()),
        }, key="owner_key")
        return state

    def clear(self, owner: Owner) -> None:
        """타이머 상태 삭제 (없어도 오류 없음)"""
        removed = self._backend.delete(TIMER_STATES, "owner_key", owner.key)
        if removed:
            logger.debug("타이머 상태 삭제: %s", owner.key)

    def apply(self, owner: Owner, action: str) -> TimerState:
        """저장된 타이머에 상태 전이 적용 후 저장"""
        transition = TRANSITIONS.get(action)
        if transition is None:
            raise ValidationFailed(
                "action: " + ", ".join(TRANSITIONS) + " 중 하나여야 합니다."
            )
        return self.save(owner, transition(self.get(owner)))
