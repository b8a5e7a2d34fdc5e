"""
사용자 정의 간격 API 라우트 (로그인 필수)
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response

from ..dependencies import get_interval_store, require_user
from ..models.custom_interval import CustomInterval
from ..models.owner import UserOwner
from ..stores.custom_intervals import CustomIntervalStore

router = APIRouter()


@router.get("/custom-intervals", response_model=List[CustomInterval])
def list_intervals(
    owner: UserOwner = Depends(require_user),
    store: CustomIntervalStore = Depends(get_interval_store),
):
    return store.list(owner)


@router.post("/custom-intervals", response_model=CustomInterval, status_code=201)
def create_interval(
    payload: Dict[str, Any] = Body(...),
    owner: UserOwner = Depends(require_user),
    store: CustomIntervalStore = Depends(get_interval_store),
):
    return store.create(owner, payload)


@router.put("/custom-intervals/{interval_id}", response_model=CustomInterval)
def update_interval(
    interval_id: str,
    payload: Dict[str, Any] = Body(...),
    owner: UserOwner = Depends(require_user),
    store: CustomIntervalStore = Depends(get_interval_store),
):
    return store.update(owner, interval_id, payload)


@router.delete("/custom-intervals/{interval_id}", status_code=204)
def delete_interval(
    interval_id: str,
    owner: UserOwner = Depends(require_user),
    store: CustomIntervalStore = Depends(get_interval_store),
):
    store.delete(owner, interval_id)
    return Response(status_code=204)


@router.post("/custom-intervals/{interval_id}/use", response_model=CustomInterval)
def use_interval(
    interval_id: str,
    owner: UserOwner = Depends(require_user),
    store: CustomIntervalStore = Depends(get_interval_store),
):
    """간격 사용 기록 (usageCount 증가)"""
    return store.record_use(owner, interval_id)
