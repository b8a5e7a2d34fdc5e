"""
공통 열거형과 API 기본 모델
"""

from datetime import datetime, timezone
from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

from .validation import is_iso8601, parse_iso8601


class SessionModeId(StrEnum):
    STUDY = "study"
    DEEPWORK = "deepwork"
    YOGA = "yoga"
    ZEN = "zen"


class TimerPhase(StrEnum):
    WORK = "work"
    BREAK = "break"


class AmbientSound(StrEnum):
    RAIN = "rain"
    FOREST = "forest"
    OCEAN = "ocean"
    SILENCE = "silence"


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class ApiModel(BaseModel):
    """API는 camelCase, 내부 코드는 snake_case"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def to_utc_datetime(value: Any) -> datetime:
    """ISO-8601 문자열(또는 datetime)만 UTC datetime으로 변환

    숫자 epoch 값은 허용하지 않습니다. 시간대가 없는 시각은 UTC로 간주합니다.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if not is_iso8601(value):
        raise ValueError("ISO-8601 날짜 형식이 아닙니다.")
    return parse_iso8601(value)


UtcDatetime = Annotated[datetime, BeforeValidator(to_utc_datetime)]
