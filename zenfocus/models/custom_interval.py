"""
사용자 정의 작업/휴식 간격 모델
"""

from typing import Any, Dict

from pydantic import Field, StrictBool, StrictInt, field_validator

from .common import ApiModel, SessionModeId, UtcDatetime
from .validation import to_storage_time


class CustomIntervalFields(ApiModel):
    """생성/수정 공통 제약 조건"""
    name: str = Field(..., min_length=1, max_length=50)
    work_duration: StrictInt = Field(..., ge=1, le=180)  # 분 단위
    break_duration: StrictInt = Field(..., ge=0, le=60)  # 분 단위
    session_mode: SessionModeId

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name cannot be empty")
        return value


class CustomInterval(CustomIntervalFields):
    id: str
    user_id: str
    is_active: StrictBool = True
    usage_count: StrictInt = Field(0, ge=0)
    created_at: UtcDatetime


UPDATABLE_FIELDS = ("name", "workDuration", "breakDuration", "sessionMode", "isActive")


def interval_to_row(interval: CustomInterval) -> Dict[str, Any]:
    row = interval.model_dump(mode="json")
    row["created_at"] = to_storage_time(interval.created_at)
    return row


def interval_from_row(row: Dict[str, Any]) -> CustomInterval:
    return CustomInterval.model_validate(row)
