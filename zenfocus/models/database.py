"""
데이터 저장소 연동 모듈

Supabase 테이블 백엔드와 같은 인터페이스를 가진 메모리 백엔드를 제공합니다.
저장소(stores)는 둘 중 하나를 주입받아 사용합니다.
"""

import copy
import logging
from typing import Any, Dict, List, Optional, Tuple

from supabase import Client, create_client

from ..config import Settings, get_settings

logger = logging.getLogger(__name__)

# 테이블 이름
USERS = "users"
PREFERENCES = "user_preferences"
SESSIONS = "sessions"
CUSTOM_INTERVALS = "custom_intervals"
TIMER_STATES = "timer_states"

# Supabase 초기화 플래그
_supabase_initialized = False
_supabase_client: Optional[Client] = None


def init_supabase(settings: Optional[Settings] = None):
    """Supabase 초기화"""
    global _supabase_initialized, _supabase_client

    if _supabase_initialized:
        return

    settings = settings or get_settings()
    if not settings.supabase_url or not settings.supabase_key:
        raise ValueError(
            "SUPABASE_URL과 SUPABASE_KEY 환경 변수를 설정해주세요.\n"
            "Supabase 프로젝트 설정에서 URL과 anon key를 확인할 수 있습니다."
        )

    _supabase_client = create_client(settings.supabase_url, settings.supabase_key)
    _supabase_initialized = True
    logger.info("Supabase가 초기화되었습니다.")


def get_db() -> Client:
    """Supabase 클라이언트 인스턴스 반환"""
    if not _supabase_initialized:
        init_supabase()
    return _supabase_client


class SupabaseBackend:
    """Supabase 테이블 백엔드"""

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def db(self) -> Client:
        return self._client if self._client is not None else get_db()

    def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        response = self.db.table(table).insert(row).execute()
        if response.data and len(response.data) > 0:
            return response.data[0]
        raise RuntimeError(f"{table} 저장 실패")

    def upsert(self, table: str, row: Dict[str, Any], key: str) -> Dict[str, Any]:
        response = self.db.table(table).upsert(row, on_conflict=key).execute()
        if response.data and len(response.data) > 0:
            return response.data[0]
        raise RuntimeError(f"{table} 저장 실패")

    def select(
        self,
        table: str,
        eq: Optional[Dict[str, Any]] = None,
        gte: Optional[Dict[str, Any]] = None,
        lte: Optional[Dict[str, Any]] = None,
        order: Optional[str] = None,
        desc: bool = False,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> Tuple[List[Dict[str, Any]], int]:
        """조건에 맞는 레코드와 전체 개수(offset/limit 적용 전) 반환"""
        query = self.db.table(table).select("*", count="exact")

        for column, value in (eq or {}).items():
            query = query.is_(column, "null") if value is None else query.eq(column, value)
        for column, value in (gte or {}).items():
            query = query.gte(column, value)
        for column, value in (lte or {}).items():
            query = query.lte(column, value)

        if order:
            query = query.order(order, desc=desc)
        if limit is not None:
            query = query.range(offset, offset + limit - 1)

        response = query.execute()
        rows = response.data or []
        total = response.count if response.count is not None else len(rows)
        return rows, total

    def update(self, table: str, key: str, value: Any, patch: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        response = self.db.table(table).update(patch).eq(key, value).execute()
        if response.data and len(response.data) > 0:
            return response.data[0]
        return None

    def delete(self, table: str, key: str, value: Any) -> int:
        response = self.db.table(table).delete().eq(key, value).execute()
        return len(response.data or [])


class MemoryBackend:
    """프로세스 내 메모리 백엔드 (로컬 실행과 테스트용)"""

    def __init__(self):
        self._tables: Dict[str, List[Dict[str, Any]]] = {}

    def _rows(self, table: str) -> List[Dict[str, Any]]:
        return self._tables.setdefault(table, [])

    def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        self._rows(table).append(copy.deepcopy(row))
        return copy.deepcopy(row)

    def upsert(self, table: str, row: Dict[str, Any], key: str) -> Dict[str, Any]:
        rows = self._rows(table)
        for i, existing in enumerate(rows):
            if existing.get(key) == row.get(key):
                rows[i] = copy.deepcopy(row)
                return copy.deepcopy(row)
        return self.insert(table, row)

    def select(
        self,
        table: str,
        eq: Optional[Dict[str, Any]] = None,
        gte: Optional[Dict[str, Any]] = None,
        lte: Optional[Dict[str, Any]] = None,
        order: Optional[str] = None,
        desc: bool = False,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> Tuple[List[Dict[str, Any]], int]:
        matched = []
        for row in self._rows(table):
            if any(row.get(c) != v for c, v in (eq or {}).items()):
                continue
            if any(row.get(c) is None or row.get(c) < v for c, v in (gte or {}).items()):
                continue
            if any(row.get(c) is None or row.get(c) > v for c, v in (lte or {}).items()):
                continue
            matched.append(row)

        if order:
            matched.sort(key=lambda r: (r.get(order) is not None, r.get(order) or ""), reverse=desc)

        total = len(matched)
        end = None if limit is None else offset + limit
        return [copy.deepcopy(r) for r in matched[offset:end]], total

    def update(self, table: str, key: str, value: Any, patch: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for row in self._rows(table):
            if row.get(key) == value:
                row.update(copy.deepcopy(patch))
                return copy.deepcopy(row)
        return None

    def delete(self, table: str, key: str, value: Any) -> int:
        rows = self._rows(table)
        kept = [r for r in rows if r.get(key) != value]
        self._tables[table] = kept
        return len(rows) - len(kept)


def create_backend(settings: Settings):
    """설정에 따라 백엔드 생성"""
    if settings.backend == "memory":
        logger.info("메모리 백엔드를 사용합니다.")
        return MemoryBackend()
    init_supabase(settings)
    return SupabaseBackend()
