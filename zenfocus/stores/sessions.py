"""
세션 기록 저장소와 통계 계산
"""

import logging
import uuid
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import Field, StrictInt, field_validator

from ..errors import NotFound, ValidationFailed
from ..models.common import ApiModel, SessionModeId
from ..models.database import SESSIONS
from ..models.owner import Owner, UserOwner, owner_user_id
from ..models.session import (
    Session,
    SessionCreate,
    SessionList,
    SessionStats,
    SessionUpdate,
    session_from_row,
    session_to_row,
)
from ..models.validation import (
    is_iso8601,
    parse_iso8601,
    require_uuid,
    to_storage_time,
    utcnow,
    validate,
)

logger = logging.getLogger(__name__)

PERIODS = {
    "week": timedelta(days=7),
    "month": timedelta(days=30),
    "year": timedelta(days=365),
    "all": None,
}


class SessionFilters(ApiModel):
    """목록 조회 조건"""
    limit: StrictInt = Field(20, ge=1, le=100)
    offset: StrictInt = Field(0, ge=0)
    mode: Optional[SessionModeId] = None
    from_date: Optional[str] = Field(None, alias="from")
    to_date: Optional[str] = Field(None, alias="to")

    @field_validator("from_date", "to_date")
    @classmethod
    def check_iso(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not is_iso8601(value):
            raise ValueError("ISO-8601 날짜 형식이 아닙니다.")
        return value


def _upper_bound(value: str) -> datetime:
    """날짜만 주어진 to 값은 그날 끝까지 포함"""
    parsed = parse_iso8601(value)
    if len(value.strip()) == 10:
        return parsed + timedelta(days=1) - timedelta(microseconds=1)
    return parsed


def compute_streaks(days: Iterable[date], today: date) -> Tuple[int, int]:
    """(현재 연속 일수, 최장 연속 일수)

    현재 연속 기록은 오늘 또는 어제부터 거슬러 셉니다.
    """
    unique = sorted(set(days))
    if not unique:
        return 0, 0

    longest = run = 1
    for prev, cur in zip(unique, unique[1:]):
        run = run + 1 if cur - prev == timedelta(days=1) else 1
        longest = max(longest, run)

    day_set = set(unique)
    cursor = today if today in day_set else today - timedelta(days=1)
    current = 0
    while cursor in day_set:
        current += 1
        cursor -= timedelta(days=1)
    return current, longest


def summarize(sessions: List[Session], all_sessions: List[Session], today: date) -> SessionStats:
    """세션 목록으로 통계 계산 (연속 기록은 전체 기간 기준)"""
    total_sessions = len(sessions)
    total_focus_time = sum(s.actual_duration for s in sessions)
    completed = sum(1 for s in sessions if s.completed_fully)
    current_streak, longest_streak = compute_streaks(
        (s.start_time.date() for s in all_sessions), today
    )

    breakdown = {mode.value: 0 for mode in SessionModeId}
    for s in sessions:
        breakdown[s.mode.value] += 1

    return SessionStats(
        total_sessions=total_sessions,
        total_focus_time=total_focus_time,
        average_session_duration=round(total_focus_time / total_sessions, 1) if total_sessions else 0.0,
        current_streak=current_streak,
        longest_streak=longest_streak,
        completion_rate=round(completed / total_sessions * 100, 1) if total_sessions else 0.0,
        mode_breakdown=breakdown,
    )


class SessionStore:
    """세션 기록 저장소"""

    def __init__(self, backend):
        self._backend = backend

    def list(self, owner: UserOwner, filters: Optional[Dict[str, Any]] = None) -> SessionList:
        """사용자의 세션 목록 (시작 시각 내림차순)

        filters 키: limit, offset, mode, from, to
        """
        f = validate(SessionFilters, {k: v for k, v in (filters or {}).items() if v is not None})

        eq = {"user_id": owner.user_id}
        if f.mode is not None:
            eq["mode"] = f.mode.value
        gte = {"start_time": to_storage_time(parse_iso8601(f.from_date))} if f.from_date else None
        lte = {"start_time": to_storage_time(_upper_bound(f.to_date))} if f.to_date else None

        rows, total = self._backend.select(
            SESSIONS, eq=eq, gte=gte, lte=lte,
            order="start_time", desc=True,
            offset=f.offset, limit=f.limit,
        )
        sessions = [session_from_row(r) for r in rows]
        return SessionList(
            sessions=sessions,
            total=total,
            has_more=f.offset + len(sessions) < total,
        )

    def all_for_user(self, user_id: str, since: Optional[datetime] = None) -> List[Session]:
        """사용자의 전체 세션 (통계와 프로필 계산용)

        Args:
            user_id: 사용자 ID
            since: 이 시각 이후 시작한 세션만 (None이면 전체)
        """
        gte = {"start_time": to_storage_time(since)} if since else None
        rows, _ = self._backend.select(
            SESSIONS, eq={"user_id": user_id}, gte=gte, order="start_time", desc=True
        )
        return [session_from_row(r) for r in rows]

    def create(self, owner: Optional[Owner], payload: Any) -> Session:
        """세션 생성 (게스트 세션은 user_id 없이 저장)"""
        data = validate(SessionCreate, payload)
        session = Session(
            id=str(uuid.uuid4()),
            user_id=owner_user_id(owner) if owner is not None else None,
            mode=data.mode,
            start_time=data.start_time or utcnow(),
            planned_duration=data.planned_duration,
            ambient_sound=data.ambient_sound,
            notes=data.notes,
        )
        self._backend.insert(SESSIONS, session_to_row(session))
        logger.info("세션 시작: %s (%s, %d분)", session.id, session.mode.value, session.planned_duration)
        return session

    def get(self, session_id: str, owner: Optional[Owner] = None) -> Session:
        """세션 조회

        사용자 소유 세션은 본인만 볼 수 있고, 다른 호출자에게는 NotFound를 반환합니다.
        게스트 세션은 누구나 조회할 수 있습니다.
        """
        session_id = require_uuid(session_id, "sessionId")
        rows, _ = self._backend.select(SESSIONS, eq={"id": session_id}, limit=1)
        if not rows:
            raise NotFound("세션을 찾을 수 없습니다.")
        session = session_from_row(rows[0])
        if session.user_id is not None:
            if not isinstance(owner, UserOwner) or owner.user_id != session.user_id:
                raise NotFound("세션을 찾을 수 없습니다.")
        return session

    def update(self, session_id: str, owner: Optional[Owner], payload: Any) -> Session:
        """세션 완료 정보 반영 후 레코드 전체를 다시 검증

        notes는 보낸 경우에만 바뀝니다.
        """
        patch = validate(SessionUpdate, payload)
        current = self.get(session_id, owner)

        merged = current.model_dump(by_alias=True)
        merged.update(patch.model_dump(by_alias=True, exclude_unset=True))
        updated = validate(Session, merged)

        self._backend.update(SESSIONS, "id", updated.id, session_to_row(updated))
        if updated.end_time is not None:
            logger.info(
                "세션 종료: %s (%d/%d분, 완료=%s)",
                updated.id, updated.actual_duration, updated.planned_duration, updated.completed_fully,
            )
        return updated

    def stats(self, owner: UserOwner, period: str = "month", now: Optional[datetime] = None) -> SessionStats:
        """기간별 세션 통계

        Args:
            owner: 로그인 사용자
            period: 'week', 'month', 'year', 'all' 중 하나
            now: 기준 시각 (기본값은 현재 UTC)
        """
        if period not in PERIODS:
            raise ValidationFailed("period: 'week', 'month', 'year', 'all' 중 하나여야 합니다.")
        now = now or utcnow()
        window = PERIODS[period]

        all_sessions = self.all_for_user(owner.user_id)
        if window is None:
            sessions = all_sessions
        else:
            since = now - window
            sessions = [s for s in all_sessions if s.start_time >= since]
        return summarize(sessions, all_sessions, now.date())
