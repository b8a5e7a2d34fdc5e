"""
사용자 및 인증 요청/응답 모델
"""

from typing import Optional

from pydantic import Field, field_validator

from .common import ApiModel, UtcDatetime
from .preferences import UserPreferences
from .validation import is_email


class User(ApiModel):
    """사용자 프로필 (집중 시간과 연속 기록은 세션 기록에서 계산)"""
    id: str
    email: str
    created_at: UtcDatetime
    last_active_at: Optional[UtcDatetime] = None
    total_focus_time: int = Field(0, ge=0)  # 분 단위
    current_streak: int = Field(0, ge=0)
    longest_streak: int = Field(0, ge=0)


class Credentials(ApiModel):
    """로그인/회원가입 요청 모델"""
    email: str
    password: str = Field(..., min_length=8)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        if not is_email(value):
            raise ValueError("Invalid email format")
        return value.strip().lower()


class AuthResponse(ApiModel):
    token: str
    user: User
    preferences: UserPreferences
