"""
타이머 상태 모델과 상태 전이 함수

카운트다운 자체는 클라이언트가 담당하고, 서버는 스냅샷만 저장합니다.
전이 함수는 새 TimerState를 반환하며 입력을 변경하지 않습니다.
"""

from pydantic import Field, StrictBool, StrictInt

from .common import ApiModel, SessionModeId, TimerPhase
from .session_mode import get_session_mode


class TimerState(ApiModel):
    """타이머 상태 스냅샷"""
    is_active: StrictBool
    is_paused: StrictBool
    mode: SessionModeId
    phase: TimerPhase
    time_remaining: StrictInt = Field(..., ge=0)  # 초 단위
    total_elapsed: StrictInt = Field(..., ge=0)  # 초 단위
    current_cycle: StrictInt = Field(..., ge=1)


def work_seconds(mode: SessionModeId) -> int:
    return get_session_mode(mode).default_work_duration * 60


def break_seconds(mode: SessionModeId) -> int:
    return get_session_mode(mode).default_break_duration * 60


def create_timer_state(mode: SessionModeId) -> TimerState:
    """해당 모드의 기본 작업 시간으로 새 타이머 생성"""
    return TimerState(
        is_active=False,
        is_paused=False,
        mode=mode,
        phase=TimerPhase.WORK,
        time_remaining=work_seconds(mode),
        total_elapsed=0,
        current_cycle=1,
    )


def start(state: TimerState) -> TimerState:
    if state.is_active and not state.is_paused:
        return state
    return state.model_copy(update={"is_active": True, "is_paused": False})


def pause(state: TimerState) -> TimerState:
    if not state.is_active:
        return state
    return state.model_copy(update={"is_active": False, "is_paused": True})


def resume(state: TimerState) -> TimerState:
    if not state.is_paused:
        return state
    return state.model_copy(update={"is_active": True, "is_paused": False})


def reset(state: TimerState) -> TimerState:
    return create_timer_state(state.mode)


def increment_cycle(state: TimerState) -> TimerState:
    return state.model_copy(update={"current_cycle": state.current_cycle + 1})


def next_phase(state: TimerState) -> TimerState:
    """작업 -> 휴식 -> 작업 순으로 전환

    휴식에서 작업으로 돌아올 때 사이클이 증가합니다.
    기본 휴식 시간이 0인 모드(zen)는 휴식 없이 다음 사이클로 넘어갑니다.
    """
    if state.phase == TimerPhase.WORK and break_seconds(state.mode) > 0:
        return state.model_copy(update={
            "phase": TimerPhase.BREAK,
            "time_remaining": break_seconds(state.mode),
            "is_active": False,
            "is_paused": False,
        })

    advanced = increment_cycle(state)
    return advanced.model_copy(update={
        "phase": TimerPhase.WORK,
        "time_remaining": work_seconds(state.mode),
        "is_active": False,
        "is_paused": False,
    })


TRANSITIONS = {
    "start": start,
    "pause": pause,
    "resume": resume,
    "reset": reset,
    "next-phase": next_phase,
}
