"""
세션 모드 API 라우트
"""

from typing import List

from fastapi import APIRouter

from ..models.session_mode import SESSION_MODES, SessionMode

router = APIRouter()


@router.get("/session-modes", response_model=List[SessionMode])
def list_session_modes():
    """세션 모드 목록 (인증 불필요)"""
    return SESSION_MODES
