"""
사용자 프로필과 환경설정 API 라우트
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from ..dependencies import get_preferences_store, get_session_store, get_user_store, require_user
from ..models.owner import UserOwner
from ..models.preferences import UserPreferences
from ..models.user import User
from ..stores.preferences import PreferencesStore
from ..stores.sessions import SessionStore
from ..stores.users import UserStore

router = APIRouter()


@router.get("/users/me", response_model=User)
def get_me(
    owner: UserOwner = Depends(require_user),
    users: UserStore = Depends(get_user_store),
    sessions: SessionStore = Depends(get_session_store),
):
    return users.get(owner.user_id, sessions)


@router.get("/users/me/preferences", response_model=UserPreferences)
def get_preferences(
    owner: UserOwner = Depends(require_user),
    store: PreferencesStore = Depends(get_preferences_store),
):
    return store.get(owner)


@router.put("/users/me/preferences", response_model=UserPreferences)
def update_preferences(
    payload: Dict[str, Any] = Body(...),
    owner: UserOwner = Depends(require_user),
    store: PreferencesStore = Depends(get_preferences_store),
):
    """환경설정 전체 교체"""
    return store.update(owner, payload)
