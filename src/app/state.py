"""
Request → app.state 접근 헬퍼.

lifespan 에서 생성한 객체를 라우트에서 꺼내 쓴다.
테스트에서는 client.app.state.<name> 을 교체해서 주입.
"""

from fastapi import Request

from src.core.auth import AdminAuth
from src.core.config import Settings
from src.core.content import ContentCatalog
from src.core.imagekit import ImageKitClient
from src.core.theme import ThemeStoreRegistry


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog(request: Request) -> ContentCatalog:
    return request.app.state.catalog


def get_imagekit(request: Request) -> ImageKitClient:
    return request.app.state.imagekit


def get_admin_auth(request: Request) -> AdminAuth:
    return request.app.state.admin_auth


def get_theme_registry(request: Request) -> ThemeStoreRegistry:
    return request.app.state.theme_registry
