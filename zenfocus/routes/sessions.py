"""
세션 기록 관련 API 라우트
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query

from ..dependencies import get_session_store, optional_owner, require_user
from ..models.owner import Owner, UserOwner
from ..models.session import Session, SessionList
from ..stores.sessions import SessionStore

router = APIRouter()


@router.get("/sessions", response_model=SessionList)
def list_sessions(
    limit: int = 20,
    offset: int = 0,
    mode: Optional[str] = None,
    from_date: Optional[str] = Query(None, alias="from"),
    to_date: Optional[str] = Query(None, alias="to"),
    owner: UserOwner = Depends(require_user),
    store: SessionStore = Depends(get_session_store),
):
    """사용자의 세션 목록 조회"""
    return store.list(owner, {
        "limit": limit,
        "offset": offset,
        "mode": mode,
        "from": from_date,
        "to": to_date,
    })


@router.post("/sessions", response_model=Session, status_code=201)
def create_session(
    payload: Dict[str, Any] = Body(...),
    owner: Owner = Depends(optional_owner),
    store: SessionStore = Depends(get_session_store),
):
    """세션 시작 (게스트 허용)"""
    return store.create(owner, payload)


@router.get("/sessions/{session_id}", response_model=Session)
def get_session(
    session_id: str,
    owner: Owner = Depends(optional_owner),
    store: SessionStore = Depends(get_session_store),
):
    return store.get(session_id, owner)


@router.put("/sessions/{session_id}", response_model=Session)
def update_session(
    session_id: str,
    payload: Dict[str, Any] = Body(...),
    owner: Owner = Depends(optional_owner),
    store: SessionStore = Depends(get_session_store),
):
    """세션 완료/수정"""
    return store.update(session_id, owner, payload)
