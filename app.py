"""
애플리케이션 진입점
백엔드 서버를 실행합니다.

사용법:
    python app.py
    또는
    uvicorn zenfocus.main:app --reload
"""

if __name__ == "__main__":
    import uvicorn
    from zenfocus.config import get_settings

    settings = get_settings()
    uvicorn.run("zenfocus.main:app", host=settings.host, port=settings.port)
