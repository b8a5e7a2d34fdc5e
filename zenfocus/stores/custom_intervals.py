"""
사용자 정의 간격 저장소
"""

import logging
import uuid
from typing import Any, Dict, List

from ..errors import NotFound, ValidationFailed
from ..models.custom_interval import (
    UPDATABLE_FIELDS,
    CustomInterval,
    CustomIntervalFields,
    interval_from_row,
    interval_to_row,
)
from ..models.database import CUSTOM_INTERVALS
from ..models.owner import UserOwner
from ..models.validation import require_uuid, utcnow, validate

logger = logging.getLogger(__name__)


class CustomIntervalStore:
    """사용자 정의 간격 저장소 (본인 간격만 접근 가능)"""

    def __init__(self, backend):
        self._backend = backend

    def list(self, owner: UserOwner) -> List[CustomInterval]:
        """최근 생성 순"""
        rows, _ = self._backend.select(
            CUSTOM_INTERVALS, eq={"user_id": owner.user_id}, order="created_at", desc=True
        )
        return [interval_from_row(r) for r in rows]

    def create(self, owner: UserOwner, payload: Any) -> CustomInterval:
        """새 간격 생성 (isActive=True, usageCount=0)"""
        fields = validate(CustomIntervalFields, payload)
        interval = CustomInterval(
            id=str(uuid.uuid4()),
            user_id=owner.user_id,
            created_at=utcnow(),
            **fields.model_dump(),
        )
        self._backend.insert(CUSTOM_INTERVALS, interval_to_row(interval))
        logger.info("사용자 정의 간격 생성: %s (%d/%d분)", interval.id, interval.work_duration, interval.break_duration)
        return interval

    def get(self, owner: UserOwner, interval_id: str) -> CustomInterval:
        """다른 사용자의 간격은 NotFound"""
        interval_id = require_uuid(interval_id)
        rows, _ = self._backend.select(
            CUSTOM_INTERVALS, eq={"id": interval_id, "user_id": owner.user_id}, limit=1
        )
        if not rows:
            raise NotFound("사용자 정의 간격을 찾을 수 없습니다.")
        return interval_from_row(rows[0])

    def update(self, owner: UserOwner, interval_id: str, payload: Any) -> CustomInterval:
        """생성과 같은 규칙으로 병합된 레코드 전체를 검증"""
        if not isinstance(payload, dict):
            raise ValidationFailed("요청 본문은 JSON 객체여야 합니다.")
        current = self.get(owner, interval_id)

        merged: Dict[str, Any] = current.model_dump(by_alias=True)
        merged.update({k: v for k, v in payload.items() if k in UPDATABLE_FIELDS})
        updated = validate(CustomInterval, merged)

        self._backend.update(CUSTOM_INTERVALS, "id", updated.id, interval_to_row(updated))
        return updated

    def delete(self, owner: UserOwner, interval_id: str) -> None:
        """간격 삭제"""
        interval = self.get(owner, interval_id)
        self._backend.delete(CUSTOM_INTERVALS, "id", interval.id)
        logger.info("사용자 정의 간격 삭제: %s", interval.id)

    def record_use(self, owner: UserOwner, interval_id: str) -> CustomInterval:
        """사용 횟수 1 증가"""
        interval = self.get(owner, interval_id)
        updated = interval.model_copy(update={"usage_count": interval.usage_count + 1})
        self._backend.update(CUSTOM_INTERVALS, "id", updated.id, {"usage_count": updated.usage_count})
        return updated
