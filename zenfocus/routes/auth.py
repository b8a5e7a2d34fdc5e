"""
인증 API 라우트
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from ..dependencies import get_auth, get_preferences_store, get_session_store, get_user_store
from ..models.owner import UserOwner
from ..models.user import AuthResponse, Credentials
from ..models.validation import validate
from ..stores.preferences import PreferencesStore
from ..stores.sessions import SessionStore
from ..stores.users import UserStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _respond(result, users: UserStore, sessions: SessionStore, preferences: PreferencesStore) -> AuthResponse:
    users.touch(result.user_id, result.email)
    owner = UserOwner(result.user_id)
    return AuthResponse(
        token=result.token,
        user=users.get(result.user_id, sessions),
        preferences=preferences.ensure(owner),
    )


@router.post("/auth/register", response_model=AuthResponse, status_code=201)
def register(
    payload: Dict[str, Any] = Body(...),
    auth=Depends(get_auth),
    users: UserStore = Depends(get_user_store),
    sessions: SessionStore = Depends(get_session_store),
    preferences: PreferencesStore = Depends(get_preferences_store),
):
    """회원가입 후 토큰, 프로필, 기본 환경설정 반환"""
    credentials = validate(Credentials, payload)
    result = auth.sign_up(credentials.email, credentials.password)
    logger.info("회원가입 완료: %s", result.user_id)
    return _respond(result, users, sessions, preferences)


@router.post("/auth/login", response_model=AuthResponse)
def login(
    payload: Dict[str, Any] = Body(...),
    auth=Depends(get_auth),
    users: UserStore = Depends(get_user_store),
    sessions: SessionStore = Depends(get_session_store),
    preferences: PreferencesStore = Depends(get_preferences_store),
):
    credentials = validate(Credentials, payload)
    result = auth.sign_in(credentials.email, credentials.password)
    return _respond(result, users, sessions, preferences)
