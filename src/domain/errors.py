"""
Error definitions for the site.

규칙:
- 외부 호출 실패는 로그 후 고정 메시지로 응답 (재시도 없음)
- ImageKit 에러는 "설정 누락" 과 "호출 실패" 두 가지로만 구분
"""

from typing import Any


class SiteError(Exception):
    """
    API 응답으로 그대로 변환되는 에러.

    main.py 의 exception handler 가 {"error": message, "code": code} 로 렌더링.

    Usage:
        raise SiteError(ErrorCodes.INVALID_THEME, "Unknown theme", 400, theme="x")
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        **context: Any,
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {self.message} ({ctx_str})" if ctx_str else f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """응답/로그 직렬화용."""
        return {
            "error": self.message,
            "code": self.code,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === ImageKit ===
    IMAGEKIT_CONFIG_MISSING = "IMAGEKIT_CONFIG_MISSING"
    IMAGEKIT_LIST_FAILED = "IMAGEKIT_LIST_FAILED"
    IMAGEKIT_UPLOAD_FAILED = "IMAGEKIT_UPLOAD_FAILED"
    IMAGEKIT_DELETE_FAILED = "IMAGEKIT_DELETE_FAILED"
    INVALID_UPLOAD = "INVALID_UPLOAD"

    # === Auth ===
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    UNAUTHORIZED = "UNAUTHORIZED"
    TOKEN_INVALID = "TOKEN_INVALID"
    AUTH_NOT_CONFIGURED = "AUTH_NOT_CONFIGURED"

    # === Content / Theme ===
    NOT_FOUND = "NOT_FOUND"
    INVALID_THEME = "INVALID_THEME"
    CONTENT_CORRUPT = "CONTENT_CORRUPT"

