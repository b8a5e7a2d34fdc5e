"""
공통 입력 검증 모듈

열거형 멤버, 숫자 범위, 문자열 길이는 pydantic 모델(Enum, Field의 ge/le/min_length/max_length,
Strict 타입)로 한 번만 선언하고, 형식 검사(UUID, ISO-8601, 이메일, 색상)는 아래 함수로
모델에 연결합니다. 모든 저장소는 validate() 하나로 검사하며 첫 번째 오류에서 바로 중단합니다.
"""

import re
from datetime import date, datetime, time, timezone
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationFailed

M = TypeVar("M", bound=BaseModel)

UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


def is_uuid(value: Any) -> bool:
    return isinstance(value, str) and bool(UUID_PATTERN.match(value))


def is_email(value: Any) -> bool:
    return isinstance(value, str) and bool(EMAIL_PATTERN.match(value))


def is_hex_color(value: Any) -> bool:
    return isinstance(value, str) and bool(HEX_COLOR_PATTERN.match(value))


def parse_iso8601(value: str) -> datetime:
    """ISO-8601 날짜/시각 문자열을 UTC datetime으로 변환

    날짜만 주어지면 해당 날짜 00:00 UTC로 취급합니다.
    시간대가 없는 값은 UTC로 간주합니다.
    """
    if not isinstance(value, str):
        raise ValueError("ISO-8601 문자열이 아닙니다.")
    text = value.strip()
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        parsed = datetime.combine(date.fromisoformat(text), time.min)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def is_iso8601(value: Any) -> bool:
    try:
        parse_iso8601(value)
    except ValueError:
        return False
    return True


def to_storage_time(value: datetime) -> str:
    """저장용 시각 문자열 (UTC, 마이크로초 고정 길이라 문자열 비교로 정렬 가능)"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def describe_error(error: Dict[str, Any]) -> str:
    field = ".".join(str(part) for part in error.get("loc", ()))
    if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
        reason = str(error["ctx"]["error"])
    else:
        reason = error.get("msg", "잘못된 값입니다.")
    return f"{field}: {reason}" if field else reason


def validate(schema: Type[M], payload: Any) -> M:
    """제약 조건 모델로 payload 검증

    실패 시 첫 번째 오류만 담은 ValidationFailed를 발생시킵니다.
    """
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(by_alias=True)
    if not isinstance(payload, dict):
        raise ValidationFailed("요청 본문은 JSON 객체여야 합니다.")
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationFailed(describe_error(e.errors()[0])) from e


def require_uuid(value: str, name: str = "id") -> str:
    if not is_uuid(value):
        raise ValidationFailed(f"{name}: 올바른 UUID 형식이 아닙니다.")
    return value.lower()
