"""
환경 설정 모듈
.env 파일과 환경 변수에서 서버 설정을 읽어옵니다.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# .env 파일 로드 (여러 위치에서 검색)
_current_file = Path(__file__).resolve()
_possible_paths = [
    _current_file.parent.parent / ".env",  # 저장소 루트
    _current_file.parent / ".env",         # zenfocus/.env
    Path.cwd() / ".env",                   # 현재 작업 디렉토리
]

for _env_path in _possible_paths:
    if _env_path.exists():
        load_dotenv(_env_path)
        break
else:
    load_dotenv()  # 기본 동작


class Settings(BaseModel):
    """서버 설정"""
    backend: str = Field("supabase", pattern="^(supabase|memory)$")
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    token_ttl_hours: int = Field(24, ge=1)
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


def load_settings() -> Settings:
    """환경 변수에서 설정 생성"""
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        backend=os.getenv("ZENFOCUS_BACKEND", "supabase").lower(),
        supabase_url=os.getenv("SUPABASE_URL"),
        supabase_key=os.getenv("SUPABASE_KEY"),
        token_ttl_hours=int(os.getenv("TOKEN_TTL_HOURS", "24")),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """설정 싱글턴 반환"""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def configure_logging(settings: Settings) -> None:
    """루트 로거 설정"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
