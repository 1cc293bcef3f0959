"""
Domain Constants: 사이트 전역 상수.

라우트, SEO 정책, ImageKit 업로드 정책 등 시스템 전반에서 사용되는 값들.
"""

# =============================================================================
# Site (사이트 기본값)
# =============================================================================
# VERCEL_URL 이 없을 때 사용하는 공개 도메인

DEFAULT_SITE_URL = "https://redux-collective.vercel.app"
SITE_NAME = "REDUX"

# =============================================================================
# Sitemap (고정 라우트)
# =============================================================================
# (path, change_frequency, priority) - 순서 유지

SITEMAP_ROUTES: tuple[tuple[str, str, float], ...] = (
    ("", "daily", 1.0),
    ("/designers", "weekly", 0.9),
    ("/exhibitions", "weekly", 0.8),
    ("/about", "monthly", 0.7),
    ("/contact", "yearly", 0.6),
)

# =============================================================================
# Robots
# =============================================================================

ROBOTS_USER_AGENT = "*"
ROBOTS_ALLOW = ("/",)
ROBOTS_DISALLOW = ("/admin/", "/api/")

# =============================================================================
# ImageKit
# =============================================================================
# 서명 유효 시간: 30분 (SDK 기본값과 동일)

IMAGEKIT_API_BASE = "https://api.imagekit.io/v1"
IMAGEKIT_UPLOAD_URL = "https://upload.imagekit.io/api/v1/files/upload"
IMAGEKIT_SIGNATURE_TTL_SECONDS = 60 * 30
IMAGEKIT_DEFAULT_FOLDER = "/redux"
IMAGEKIT_DEFAULT_SORT = "ASC_CREATED"
IMAGEKIT_DEFAULT_LIST_LIMIT = 100

ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/png", "image/webp", "image/gif")
ALLOWED_VIDEO_TYPES = ("video/mp4", "video/webm")
ALLOWED_EXTENSIONS = ("jpg", "jpeg", "png", "webp", "gif", "mp4", "webm")
MAX_IMAGE_SIZE_MB = 50
MAX_VIDEO_SIZE_MB = 100

# =============================================================================
# Google Drive
# =============================================================================

DRIVE_BASE_URL = "https://drive.google.com"
DRIVE_DEFAULT_THUMBNAIL_SIZE = 1200

# =============================================================================
# Theme
# =============================================================================

THEME_SESSION_COOKIE = "redux_theme_session"

# =============================================================================
# Auth
# =============================================================================

ACCESS_TOKEN_TTL_SECONDS = 24 * 60 * 60
REFRESH_TOKEN_TTL_SECONDS = 7 * 24 * 60 * 60
TOKEN_TYPE_ACCESS = "access"
TOKEN_TYPE_REFRESH = "refresh"

# =============================================================================
# Content
# =============================================================================

CONTENT_FILENAME = "content.yaml"
CONFIG_FILENAME = "default.yaml"
PLACEHOLDER_IMAGE = "/images/designer-placeholder.jpg"
