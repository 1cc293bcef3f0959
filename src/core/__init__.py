"""
Core layer: 사이트 핵심 로직.

프레임워크(FastAPI)에 의존하지 않는 순수 모듈.

역할:
- 설정/콘텐츠 로드, 테마 상태, SEO 생성
- ImageKit 서명/클라이언트, Google Drive URL, 관리자 인증
"""

from .auth import AdminAuth
from .config import Settings, load_config
from .content import ContentCatalog
from .drive import (
    create_video_metadata,
    drive_download,
    drive_preview,
    drive_share,
    drive_thumbnail,
    extract_file_id,
)
from .imagekit import ImageKitClient, ImageKitConfigError, ImageKitError, compute_signature
from .seo import build_robots, build_sitemap, render_robots_txt, render_sitemap_xml
from .theme import ThemeState, ThemeStore, ThemeStoreRegistry

__all__ = [
    # config
    "Settings",
    "load_config",
    # content
    "ContentCatalog",
    # theme
    "ThemeState",
    "ThemeStore",
    "ThemeStoreRegistry",
    # drive
    "drive_thumbnail",
    "drive_preview",
    "drive_download",
    "drive_share",
    "extract_file_id",
    "create_video_metadata",
    # imagekit
    "ImageKitClient",
    "ImageKitError",
    "ImageKitConfigError",
    "compute_signature",
    # seo
    "build_sitemap",
    "render_sitemap_xml",
    "build_robots",
    "render_robots_txt",
    # auth
    "AdminAuth",
]
