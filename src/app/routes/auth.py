"""
Auth Routes: 관리자 인증 API.

- POST /api/auth/login → 토큰 발급
- POST /api/auth/logout → 항상 성공 (서버 세션 없음)
- GET /api/auth/me → Bearer 토큰의 사용자
- POST /api/auth/refresh → 토큰 갱신
"""

from typing import Any

from fastapi import APIRouter, Body, Header, Request

from src.app.state import get_admin_auth
from src.domain.errors import ErrorCodes, SiteError

api_router = APIRouter()


def _success(data: Any) -> dict[str, Any]:
    return {"success": True, "data": data}


def _bearer_token(authorization: str | None) -> str:
    if not authorization:
        return ""
    scheme, _, token = authorization.partition(" ")
    return token.strip() if scheme.lower() == "bearer" else ""


@api_router.post("/login")
async def login(
    request: Request,
    username: str = Body(""),
    password: str = Body(""),
) -> dict[str, Any]:
    """사용자명/비밀번호 로그인."""
    if not username or not password:
        raise SiteError(
            ErrorCodes.VALIDATION_ERROR,
            "Username and password are required",
            400,
        )
    pair = get_admin_auth(request).login(username, password)
    return _success(pair.to_dict())


@api_router.post("/logout")
async def logout() -> dict[str, Any]:
    """
    로그아웃.

    토큰은 상태 없이 검증되므로 서버에서 무효화할 것이 없다.
    클라이언트가 저장된 토큰을 삭제한다.
    """
    return _success({"message": "Logged out successfully"})


@api_router.get("/me")
async def me(
    request: Request,
    authorization: str | None = Header(None),
) -> dict[str, Any]:
    """현재 관리자 정보."""
    user = get_admin_auth(request).verify_access_token(_bearer_token(authorization))
    return _success(user.to_dict())


@api_router.post("/refresh")
async def refresh(
    request: Request,
    refresh_token: str = Body("", embed=True),
) -> dict[str, Any]:
    """refresh 토큰으로 새 토큰 쌍 발급."""
    if not refresh_token:
        raise SiteError(
            ErrorCodes.VALIDATION_ERROR,
            "Refresh token is required",
            400,
        )
    pair = get_admin_auth(request).refresh(refresh_token)
    return _success(pair.to_dict())
