"""
데이터 소유자

로그인 사용자와 게스트를 명시적으로 구분합니다.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class UserOwner:
    user_id: str

    @property
    def key(self) -> str:
        return f"user:{self.user_id}"


@dataclass(frozen=True)
class GuestOwner:
    guest_key: str = "anonymous"

    @property
    def key(self) -> str:
        return f"guest:{self.guest_key}"


Owner = Union[UserOwner, GuestOwner]


def owner_user_id(owner: Owner) -> Optional[str]:
    """저장 시 user_id 컬럼 값 (게스트는 None)"""
    if isinstance(owner, UserOwner):
        return owner.user_id
    return None
