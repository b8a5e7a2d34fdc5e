"""
타이머 상태 API 라우트 (로그인 사용자와 게스트 모두 허용)
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Response

from ..dependencies import get_timer_store, optional_owner
from ..models.owner import Owner
from ..models.timer_state import TimerState
from ..stores.timer_state import TimerStateStore

router = APIRouter()


@router.get("/timer/state", response_model=TimerState)
def get_timer_state(
    owner: Owner = Depends(optional_owner),
    store: TimerStateStore = Depends(get_timer_store),
):
    """현재 타이머 상태 (없으면 404)"""
    return store.get(owner)


@router.post("/timer/state", response_model=TimerState)
def save_timer_state(
    payload: Dict[str, Any] = Body(...),
    owner: Owner = Depends(optional_owner),
    store: TimerStateStore = Depends(get_timer_store),
):
    return store.save(owner, payload)


@router.delete("/timer/state", status_code=204)
def clear_timer_state(
    owner: Owner = Depends(optional_owner),
    store: TimerStateStore = Depends(get_timer_store),
):
    """타이머 상태 삭제 (없어도 204)"""
    store.clear(owner)
    return Response(status_code=204)


@router.post("/timer/state/{action}", response_model=TimerState)
def apply_timer_action(
    action: str,
    owner: Owner = Depends(optional_owner),
    store: TimerStateStore = Depends(get_timer_store),
):
    """start, pause, resume, reset, next-phase"""
    return store.apply(owner, action)
