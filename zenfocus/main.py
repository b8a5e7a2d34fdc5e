"""
FastAPI 서버 메인 파일
집중 타이머 상태, 세션 기록, 사용자 설정을 Supabase에 저장하고
웹 클라이언트에 API를 제공합니다.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import configure_logging, get_settings
from .dependencies import get_backend
from .errors import ApiError, InvalidJson, ValidationFailed
from .models.validation import describe_error
from .routes import auth, custom_intervals, session_modes, sessions, stats, timer, users

logger = logging.getLogger(__name__)

HTTP_ERROR_CODES = {
    401: "AUTHENTICATION_FAILED",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """서버 시작 시 로깅과 저장소 백엔드 초기화"""
    settings = get_settings()
    configure_logging(settings)
    get_backend()
    logger.info("서버가 시작되었습니다. (backend=%s)", settings.backend)
    yield


app = FastAPI(title="zenFocus API", version=__version__, lifespan=lifespan)

# CORS 설정 (웹 클라이언트에서 접근 가능하도록)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록 (/sessions/stats가 /sessions/{session_id}보다 먼저)
app.include_router(auth.router, prefix="/api", tags=["auth"])
app.include_router(users.router, prefix="/api", tags=["users"])
app.include_router(stats.router, prefix="/api", tags=["stats"])
app.include_router(sessions.router, prefix="/api", tags=["sessions"])
app.include_router(custom_intervals.router, prefix="/api", tags=["custom-intervals"])
app.include_router(session_modes.router, prefix="/api", tags=["session-modes"])
app.include_router(timer.router, prefix="/api", tags=["timer"])


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(e.get("type") == "json_invalid" for e in errors):
        error = InvalidJson()
    else:
        first = dict(errors[0]) if errors else {}
        # ("body", ...), ("query", "limit") 등에서 위치 구분 제거
        loc = tuple(first.get("loc", ()))
        if loc and loc[0] in ("body", "query", "path", "header"):
            first["loc"] = loc[1:]
        error = ValidationFailed(describe_error(first))
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
            "message": str(exc.detail),
        },
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("처리되지 않은 오류: %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": "Internal server error"},
    )


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {"message": "zenFocus API", "status": "running"}


@app.get("/health")
async def health_check():
    """헬스 체크"""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
