"""
통계 관련 API 라우트
"""

from fastapi import APIRouter, Depends

from ..dependencies import get_session_store, require_user
from ..models.owner import UserOwner
from ..models.session import SessionStats
from ..stores.sessions import SessionStore

router = APIRouter()


@router.get("/sessions/stats", response_model=SessionStats)
def get_session_stats(
    period: str = "month",
    owner: UserOwner = Depends(require_user),
    store: SessionStore = Depends(get_session_store),
):
    """사용자 세션 통계 요약

    Args:
        period: 'week', 'month', 'year', 'all' 중 하나 (기본 month)
    """
    return store.stats(owner, period)
