"""
FastAPI 의존성: 백엔드, 인증 제공자, 요청 소유자

테스트에서는 app.dependency_overrides로 get_backend/get_auth를 교체합니다.
"""

from typing import Optional

from fastapi import Depends, Header

from .auth import MemoryAuth, SupabaseAuth
from .config import get_settings
from .errors import AuthenticationFailed
from .models.database import create_backend
from .models.owner import GuestOwner, Owner, UserOwner
from .stores.custom_intervals import CustomIntervalStore
from .stores.preferences import PreferencesStore
from .stores.sessions import SessionStore
from .stores.timer_state import TimerStateStore
from .stores.users import UserStore

_backend = None
_auth = None


def get_backend():
    """설정된 저장소 백엔드 (최초 호출 시 생성)"""
    global _backend
    if _backend is None:
        _backend = create_backend(get_settings())
    return _backend


def get_auth():
    global _auth
    if _auth is None:
        settings = get_settings()
        if settings.backend == "memory":
            _auth = MemoryAuth(settings.token_ttl_hours)
        else:
            _auth = SupabaseAuth()
    return _auth


def get_session_store(backend=Depends(get_backend)) -> SessionStore:
    return SessionStore(backend)


def get_interval_store(backend=Depends(get_backend)) -> CustomIntervalStore:
    return CustomIntervalStore(backend)


def get_preferences_store(backend=Depends(get_backend)) -> PreferencesStore:
    return PreferencesStore(backend)


def get_timer_store(backend=Depends(get_backend)) -> TimerStateStore:
    return TimerStateStore(backend)


def get_user_store(backend=Depends(get_backend)) -> UserStore:
    return UserStore(backend)


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationFailed("Authorization 헤더 형식이 올바르지 않습니다.")
    return token.strip()


def require_user(
    authorization: Optional[str] = Header(None),
    auth=Depends(get_auth),
) -> UserOwner:
    """로그인 필수 엔드포인트"""
    token = _bearer_token(authorization)
    if token is None:
        raise AuthenticationFailed("인증이 필요합니다.")
    return UserOwner(auth.verify_token(token))


def optional_owner(
    authorization: Optional[str] = Header(None),
    x_guest_id: Optional[str] = Header(None),
    auth=Depends(get_auth),
) -> Owner:
    """토큰이 없으면 게스트, 잘못된 토큰은 401"""
    token = _bearer_token(authorization)
    if token is None:
        return GuestOwner(x_guest_id or "anonymous")
    return UserOwner(auth.verify_token(token))
