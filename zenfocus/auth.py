"""
인증 제공자

Supabase Auth(관리형 사용자 풀)와 같은 인터페이스의 메모리 구현을 제공합니다.
"""

import hashlib
import hmac
import logging
import secrets
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Tuple

from supabase import AuthError, Client

from .errors import (
    ApiError,
    AuthenticationFailed,
    EmailExists,
    InvalidCredentials,
    TokenExpired,
)
from .models.database import get_db

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    user_id: str
    email: str
    token: str


def _map_auth_error(e: AuthError) -> ApiError:
    """Supabase Auth 오류 메시지를 API 오류로 변환"""
    message = str(e).lower()
    if "already registered" in message or "already exists" in message:
        return EmailExists()
    if "invalid login credentials" in message or "user not found" in message:
        return InvalidCredentials()
    if "expired" in message:
        return TokenExpired()
    if "not confirmed" in message:
        return AuthenticationFailed("이메일 인증이 완료되지 않았습니다.", error="USER_NOT_CONFIRMED")
    if "password" in message:
        return ApiError("비밀번호가 보안 요구사항을 충족하지 않습니다.", error="INVALID_PASSWORD", status_code=400)
    return AuthenticationFailed("인증에 실패했습니다.")


class SupabaseAuth:
    """Supabase Auth 기반 인증"""

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def db(self) -> Client:
        return self._client if self._client is not None else get_db()

    def sign_up(self, email: str, password: str) -> AuthResult:
        try:
            response = self.db.auth.sign_up({"email": email, "password": password})
        except AuthError as e:
            raise _map_auth_error(e) from e

        if response.user is None:
            raise AuthenticationFailed("회원가입에 실패했습니다.")
        if response.session is None:
            # 이메일 인증이 필요한 프로젝트는 세션 없이 사용자만 생성됨
            return self.sign_in(email, password)
        return AuthResult(response.user.id, response.user.email or email, response.session.access_token)

    def sign_in(self, email: str, password: str) -> AuthResult:
        try:
            response = self.db.auth.sign_in_with_password({"email": email, "password": password})
        except AuthError as e:
            raise _map_auth_error(e) from e

        if response.user is None or response.session is None:
            raise AuthenticationFailed("인증이 완료되지 않았습니다.")
        return AuthResult(response.user.id, response.user.email or email, response.session.access_token)

    def verify_token(self, token: str) -> str:
        try:
            response = self.db.auth.get_user(token)
        except AuthError as e:
            raise _map_auth_error(e) from e

        if response is None or response.user is None:
            raise AuthenticationFailed("유효하지 않은 토큰입니다.")
        return response.user.id


class MemoryAuth:
    """프로세스 내 인증 (로컬 실행과 테스트용)"""

    def __init__(self, token_ttl_hours: int = 24):
        self._token_ttl = timedelta(hours=token_ttl_hours)
        self._users: Dict[str, Dict[str, str]] = {}
        self._tokens: Dict[str, Tuple[str, datetime]] = {}

    @staticmethod
    def _hash(password: str, salt: str) -> str:
        return hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), 100_000).hex()

    def _issue_token(self, user_id: str) -> str:
        token = secrets.token_urlsafe(32)
        self._tokens[token] = (user_id, datetime.now(timezone.utc) + self._token_ttl)
        return token

    def sign_up(self, email: str, password: str) -> AuthResult:
        if email in self._users:
            raise EmailExists()
        salt = secrets.token_hex(16)
        user_id = str(uuid.uuid4())
        self._users[email] = {"id": user_id, "salt": salt, "hash": self._hash(password, salt)}
        logger.info("사용자 등록: %s", user_id)
        return AuthResult(user_id, email, self._issue_token(user_id))

    def sign_in(self, email: str, password: str) -> AuthResult:
        record = self._users.get(email)
        if record is None:
            raise InvalidCredentials()
        if not hmac.compare_digest(record["hash"], self._hash(password, record["salt"])):
            raise InvalidCredentials()
        return AuthResult(record["id"], email, self._issue_token(record["id"]))

    def verify_token(self, token: str) -> str:
        entry = self._tokens.get(token)
        if entry is None:
            raise AuthenticationFailed("유효하지 않은 토큰입니다.")
        user_id, expires_at = entry
        if datetime.now(timezone.utc) >= expires_at:
            del self._tokens[token]
            raise TokenExpired()
        return user_id

    def expire_token(self, token: str) -> None:
        """토큰 즉시 만료 (로그아웃 및 테스트용)"""
        if token in self._tokens:
            user_id, _ = self._tokens[token]
            self._tokens[token] = (user_id, datetime.now(timezone.utc))
