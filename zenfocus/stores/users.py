"""
사용자 프로필 저장소
"""

from typing import Optional

from ..errors import NotFound
from ..models.database import USERS
from ..models.user import User
from ..models.validation import to_storage_time, utcnow
from .sessions import SessionStore, compute_streaks


class UserStore:
    """사용자 프로필 저장소"""

    def __init__(self, backend):
        self._backend = backend

    def _find(self, user_id: str) -> Optional[dict]:
        rows, _ = self._backend.select(USERS, eq={"id": user_id}, limit=1)
        return rows[0] if rows else None

    def touch(self, user_id: str, email: str) -> User:
        """프로필이 없으면 만들고, 있으면 마지막 활동 시각 갱신"""
        now = to_storage_time(utcnow())
        if self._find(user_id) is None:
            self._backend.insert(USERS, {
                "id": user_id,
                "email": email,
                "created_at": now,
                "last_active_at": now,
            })
        else:
            self._backend.update(USERS, "id", user_id, {"last_active_at": now})
        return User.model_validate(self._find(user_id))

    def get(self, user_id: str, sessions: SessionStore) -> User:
        """세션 기록에서 집중 시간과 연속 기록을 계산해 포함"""
        row = self._find(user_id)
        if row is None:
            raise NotFound("사용자를 찾을 수 없습니다.")

        history = sessions.all_for_user(user_id)
        current, longest = compute_streaks((s.start_time.date() for s in history), utcnow().date())
        return User.model_validate({
            **row,
            "total_focus_time": sum(s.actual_duration for s in history),
            "current_streak": current,
            "longest_streak": longest,
        })
