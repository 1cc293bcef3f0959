"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from src.app.routes import auth, contact, content, imagekit, pages, seo, theme
from src.core.auth import AdminAuth
from src.core.config import Settings, load_config
from src.core.content import ContentCatalog
from src.core.imagekit import ImageKitClient
from src.core.logging_config import setup_logging
from src.core.theme import ThemeStoreRegistry
from src.domain.errors import SiteError

logger = logging.getLogger(__name__)

# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정/콘텐츠 로드, ImageKit/인증/테마 저장소 생성
    종료 시: 정리할 리소스 없음 (테마 상태는 메모리에서 사라짐)
    """
    # Startup
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    catalog = ContentCatalog.load(settings.content_path)

    missing = settings.imagekit.missing_vars()
    if missing:
        logger.warning(f"Missing environment variables: {', '.join(missing)}")

    app.state.settings = settings
    app.state.catalog = catalog
    app.state.imagekit = ImageKitClient(settings.imagekit)
    app.state.admin_auth = AdminAuth(settings.admin, settings.secret_key)
    app.state.theme_registry = ThemeStoreRegistry(catalog.theme_map())

    logger.info(f"REDUX site started (base_url={settings.base_url})")

    yield

    # Shutdown
    logger.info("REDUX site shutting down")


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="REDUX Collective",
    description="패션 디자인 콜렉티브 REDUX 포트폴리오 사이트",
    version="0.1.0",
    lifespan=lifespan,
)

_site_config = load_config().get("site", {}) or {}
app.add_middleware(
    CORSMiddleware,
    allow_origins=_site_config.get("cors_origins", ["*"]),
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Static files (CSS, JS)
static_dir = Path(__file__).parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=static_dir), name="static")


@app.exception_handler(SiteError)
async def site_error_handler(request: Request, exc: SiteError) -> JSONResponse:
    """SiteError → {"error": message, "code": code}."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


# =============================================================================
# Routes
# =============================================================================

# 페이지 라우트 (HTML)
app.include_router(pages.router, tags=["Pages"])
app.include_router(seo.router, tags=["SEO"])

# API 라우트
app.include_router(imagekit.api_router, prefix="/api/imagekit", tags=["ImageKit API"])
app.include_router(auth.api_router, prefix="/api/auth", tags=["Auth API"])
app.include_router(contact.api_router, prefix="/api/contact", tags=["Contact API"])
app.include_router(theme.api_router, prefix="/api/theme", tags=["Theme API"])
app.include_router(content.api_router, prefix="/api", tags=["Content API"])


@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
