"""
집중 세션 데이터 모델
"""

from typing import Any, Dict, List, Optional

from pydantic import Field, StrictBool, StrictInt, model_validator

from .common import AmbientSound, ApiModel, SessionModeId, UtcDatetime
from .validation import to_storage_time


class Session(ApiModel):
    """세션 모델 (저장된 레코드 전체)"""
    id: str
    user_id: Optional[str] = None  # 게스트 세션은 None
    mode: SessionModeId
    start_time: UtcDatetime
    end_time: Optional[UtcDatetime] = None
    planned_duration: StrictInt = Field(..., ge=1)  # 분 단위
    actual_duration: StrictInt = Field(0, ge=0)  # 분 단위
    completed_fully: StrictBool = False
    pause_count: StrictInt = Field(0, ge=0)
    total_pause_time: StrictInt = Field(0, ge=0)  # 분 단위
    ambient_sound: AmbientSound = AmbientSound.SILENCE
    notes: Optional[str] = Field(None, max_length=500)

    @model_validator(mode="after")
    def check_times(self) -> "Session":
        if self.end_time is not None and self.end_time <= self.start_time:
            raise ValueError("endTime must be after startTime")
        if self.total_pause_time > self.actual_duration:
            raise ValueError("totalPauseTime cannot exceed actualDuration")
        return self


class SessionCreate(ApiModel):
    """세션 생성 요청 모델"""
    mode: SessionModeId
    planned_duration: StrictInt = Field(..., ge=1)
    ambient_sound: AmbientSound = AmbientSound.SILENCE
    start_time: Optional[UtcDatetime] = None
    notes: Optional[str] = Field(None, max_length=500)


class SessionUpdate(ApiModel):
    """세션 완료 요청 모델

    완료 정보 다섯 필드는 필수이고 notes만 선택입니다.
    notes를 보내지 않으면 기존 메모를 유지합니다.
    """
    end_time: UtcDatetime
    actual_duration: StrictInt = Field(..., ge=0)
    completed_fully: StrictBool
    pause_count: StrictInt = Field(..., ge=0)
    total_pause_time: StrictInt = Field(..., ge=0)
    notes: Optional[str] = Field(None, max_length=500)


class SessionList(ApiModel):
    """세션 목록 응답 모델"""
    sessions: List[Session]
    total: int
    has_more: bool


class SessionStats(ApiModel):
    """세션 통계 응답 모델"""
    total_sessions: int
    total_focus_time: int  # 분 단위
    average_session_duration: float
    current_streak: int
    longest_streak: int
    completion_rate: float  # 0-100
    mode_breakdown: Dict[str, int]


def session_to_row(session: Session) -> Dict[str, Any]:
    """Supabase 저장용 레코드로 변환"""
    row = session.model_dump(mode="json")
    row["start_time"] = to_storage_time(session.start_time)
    row["end_time"] = to_storage_time(session.end_time) if session.end_time else None
    return row


def session_from_row(row: Dict[str, Any]) -> Session:
    return Session.model_validate(row)
