"""
사용자 환경설정 저장소 (사용자당 하나의 레코드)
"""

from typing import Any

from ..models.database import PREFERENCES
from ..models.owner import UserOwner
from ..models.preferences import UserPreferences, default_preferences
from ..models.validation import validate


class PreferencesStore:
    """사용자 환경설정 저장소"""

    def __init__(self, backend):
        self._backend = backend

    def get(self, owner: UserOwner) -> UserPreferences:
        """저장된 설정이 없으면 기본값"""
        rows, _ = self._backend.select(PREFERENCES, eq={"user_id": owner.user_id}, limit=1)
        if not rows:
            return default_preferences()
        return UserPreferences.model_validate(rows[0])

    def update(self, owner: UserOwner, payload: Any) -> UserPreferences:
        """전체 교체 (여섯 필드 모두 필수)"""
        preferences = validate(UserPreferences, payload)
        self._save(owner, preferences)
        return preferences

    def ensure(self, owner: UserOwner) -> UserPreferences:
        """첫 로그인/가입 시 기본 설정 레코드 생성"""
        rows, _ = self._backend.select(PREFERENCES, eq={"user_id": owner.user_id}, limit=1)
        if rows:
            return UserPreferences.model_validate(rows[0])
        preferences = default_preferences()
        self._save(owner, preferences)
        return preferences

    def _save(self, owner: UserOwner, preferences: UserPreferences) -> None:
        row = {"user_id": owner.user_id, **preferences.model_dump(mode="json")}
        self._backend.upsert(PREFERENCES, row, key="user_id")
