"""
세션 모드 카탈로그
"""

from typing import Dict, List, Optional

from pydantic import Field, StrictBool, StrictInt, field_validator

from .common import ApiModel, SessionModeId
from .validation import is_hex_color


class SessionMode(ApiModel):
    """세션 모드 모델"""
    id: SessionModeId
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    default_work_duration: StrictInt = Field(..., ge=0)  # 분 단위
    default_break_duration: StrictInt = Field(..., ge=0)  # 분 단위
    color: str
    icon: str = Field(..., min_length=1)
    is_customizable: StrictBool
    max_work_duration: Optional[StrictInt] = Field(None, ge=1)
    max_break_duration: Optional[StrictInt] = Field(None, ge=1)

    @field_validator("color")
    @classmethod
    def check_color(cls, value: str) -> str:
        if not is_hex_color(value):
            raise ValueError("#RRGGBB 형식의 색상이어야 합니다.")
        return value


SESSION_MODES: List[SessionMode] = [
    SessionMode(
        id=SessionModeId.STUDY,
        name="Study",
        description="Focused learning sessions with extended work periods",
        default_work_duration=50,
        default_break_duration=10,
        color="#3B82F6",
        icon="book",
        is_customizable=True,
        max_work_duration=120,
        max_break_duration=30,
    ),
    SessionMode(
        id=SessionModeId.DEEPWORK,
        name="Deep Work",
        description="Extended focus sessions for complex tasks",
        default_work_duration=90,
        default_break_duration=20,
        color="#7C3AED",
        icon="brain",
        is_customizable=True,
        max_work_duration=180,
        max_break_duration=30,
    ),
    SessionMode(
        id=SessionModeId.YOGA,
        name="Yoga",
        description="Mindful movement and breath work sessions",
        default_work_duration=30,
        default_break_duration=5,
        color="#059669",
        icon="lotus",
        is_customizable=False,
    ),
    SessionMode(
        id=SessionModeId.ZEN,
        name="Zen",
        description="Simple meditation and mindfulness practice",
        default_work_duration=15,
        default_break_duration=0,
        color="#DC2626",
        icon="circle",
        is_customizable=False,
    ),
]

_BY_ID: Dict[str, SessionMode] = {mode.id.value: mode for mode in SESSION_MODES}


def get_session_mode(mode_id: str) -> SessionMode:
    return _BY_ID[mode_id]
