"""
Theme Routes: 세션별 테마 상태.

- GET /api/theme → 현재 상태
- PUT /api/theme → 테마 설정 ({"theme": "<designer key>" | null})
- POST /api/theme/dark-mode → 다크모드 토글
- POST /api/theme/loading → 로딩 플래그 설정 ({"loading": bool})

세션은 redux_theme_session 쿠키로 식별. 쿠키가 없으면 새로 발급.
"""

from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from src.app.state import get_catalog, get_theme_registry
from src.core.theme import ThemeStore
from src.domain.constants import THEME_SESSION_COOKIE

api_router = APIRouter()


def resolve_store(request: Request) -> tuple[str, ThemeStore]:
    """요청 쿠키의 세션 저장소 (없으면 생성)."""
    return get_theme_registry(request).get(request.cookies.get(THEME_SESSION_COOKIE))


def _state_response(session_id: str, store: ThemeStore) -> JSONResponse:
    response = JSONResponse(store.to_dict())
    response.set_cookie(
        THEME_SESSION_COOKIE,
        session_id,
        httponly=True,
        samesite="lax",
    )
    return response


@api_router.get("")
async def get_theme(request: Request) -> JSONResponse:
    session_id, store = resolve_store(request)
    return _state_response(session_id, store)


@api_router.put("")
async def set_theme(
    request: Request,
    theme: str | None = Body(None, embed=True),
) -> JSONResponse:
    """테마 설정. 알 수 없는 key 는 400 (INVALID_THEME)."""
    session_id, store = resolve_store(request)
    store.set_theme(theme)
    return _state_response(session_id, store)


@api_router.post("/dark-mode")
async def toggle_dark_mode(request: Request) -> JSONResponse:
    session_id, store = resolve_store(request)
    store.toggle_dark_mode()
    return _state_response(session_id, store)


@api_router.post("/loading")
async def set_loading(
    request: Request,
    loading: bool = Body(..., embed=True),
) -> JSONResponse:
    session_id, store = resolve_store(request)
    store.set_loading(loading)
    return _state_response(session_id, store)


@api_router.get("/themes")
async def list_themes(request: Request) -> dict[str, Any]:
    """선택 가능한 테마 key → 디스크립터."""
    catalog = get_catalog(request)
    return {key: theme.to_dict() for key, theme in catalog.theme_map().items()}
