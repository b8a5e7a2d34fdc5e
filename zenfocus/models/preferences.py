"""
사용자 환경설정 모델
"""

from pydantic import Field, StrictBool, StrictInt

from .common import AmbientSound, ApiModel, SessionModeId, Theme


class UserPreferences(ApiModel):
    """환경설정 (부분 수정 없이 전체 교체)"""
    theme: Theme
    default_session_mode: SessionModeId
    ambient_sound: AmbientSound
    ambient_volume: StrictInt = Field(..., ge=0, le=100)
    notifications: StrictBool
    auto_start_breaks: StrictBool


def default_preferences() -> UserPreferences:
    return UserPreferences(
        theme=Theme.SYSTEM,
        default_session_mode=SessionModeId.STUDY,
        ambient_sound=AmbientSound.SILENCE,
        ambient_volume=50,
        notifications=True,
        auto_start_breaks=True,
    )
