"""
API 오류 정의
모든 오류 응답은 {"error": 코드, "message": 설명} 형식을 따릅니다.
"""

from typing import Optional


class ApiError(Exception):
    """구조화된 오류 응답으로 변환되는 예외"""
    status_code = 500
    error = "INTERNAL_ERROR"

    def __init__(self, message: str, error: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if error is not None:
            self.error = error
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"error": self.error, "message": self.message}


class ValidationFailed(ApiError):
    """입력 검증 실패 (첫 번째 오류만 보고)"""
    status_code = 400
    error = "VALIDATION_ERROR"


class InvalidJson(ApiError):
    status_code = 400
    error = "INVALID_JSON"

    def __init__(self, message: str = "요청 본문이 올바른 JSON이 아닙니다."):
        super().__init__(message)


class EmailExists(ApiError):
    status_code = 400
    error = "EMAIL_EXISTS"

    def __init__(self, message: str = "이미 가입된 이메일입니다."):
        super().__init__(message)


class AuthenticationFailed(ApiError):
    status_code = 401
    error = "AUTHENTICATION_FAILED"


class InvalidCredentials(AuthenticationFailed):
    error = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "이메일 또는 비밀번호가 올바르지 않습니다."):
        super().__init__(message)


class TokenExpired(AuthenticationFailed):
    error = "TOKEN_EXPIRED"

    def __init__(self, message: str = "토큰이 만료되었습니다."):
        super().__init__(message)


class NotFound(ApiError):
    status_code = 404
    error = "NOT_FOUND"
