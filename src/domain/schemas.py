"""
Data schemas for the site.

규칙:
- content.yaml 키와 필드명 동일 (snake_case)
- to_dict() 는 API 응답 직렬화용
- 정적 테이블은 로드 후 변경하지 않음
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

# =============================================================================
# Enums
# =============================================================================

class ExhibitionStatus(str, Enum):
    """전시 상태."""
    UPCOMING = "upcoming"
    CURRENT = "current"
    PAST = "past"


class ChangeFrequency(str, Enum):
    """sitemap changefreq 값."""
    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


class SpinnerSize(str, Enum):
    """로딩 스피너 크기."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


# =============================================================================
# Designer / Theme
# =============================================================================

@dataclass(frozen=True)
class DesignerTheme:
    """디자이너별 테마 디스크립터."""
    name: str  # jinsu, eunsol, parang, taehyeon, bomin, gyeongsu
    primary_color: str
    accent_color: str
    font_primary: str = "Space Grotesk"
    font_display: str = "Space Grotesk"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "primary_color": self.primary_color,
            "accent_color": self.accent_color,
            "font_primary": self.font_primary,
            "font_display": self.font_display,
        }


@dataclass
class Designer:
    """
    디자이너 프로필.

    id 는 URL 슬러그 (kim-bomin), key 는 테마 식별자 (kimbomin).
    """
    id: str
    key: str
    name: str
    name_ko: str
    role: str
    theme: DesignerTheme
    bio: str = ""
    description: str = ""
    instagram_handle: str | None = None
    profile_image: str | None = None
    cover_image: str | None = None
    portfolio_images: list[str] = field(default_factory=list)
    fashion_film_id: str | None = None  # Google Drive 파일 ID
    featured: bool = False
    order: int = 0

    @property
    def instagram_url(self) -> str | None:
        if not self.instagram_handle:
            return None
        return f"https://instagram.com/{self.instagram_handle.lstrip('@')}"

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용."""
        return {
            "id": self.id,
            "key": self.key,
            "name": self.name,
            "name_ko": self.name_ko,
            "role": self.role,
            "bio": self.bio,
            "description": self.description,
            "instagram_handle": self.instagram_handle,
            "instagram_url": self.instagram_url,
            "profile_image": self.profile_image,
            "cover_image": self.cover_image,
            "portfolio_images": list(self.portfolio_images),
            "fashion_film_id": self.fashion_film_id,
            "featured": self.featured,
            "order": self.order,
            "theme": self.theme.to_dict(),
        }


# =============================================================================
# Content Schemas
# =============================================================================

@dataclass
class Exhibition:
    """전시 정보."""
    id: str
    title: str
    description: str
    status: ExhibitionStatus
    title_ko: str | None = None
    venue: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    year: int | None = None
    participants: list[str] = field(default_factory=list)  # designer slugs
    images: list[str] = field(default_factory=list)
    featured: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "title_ko": self.title_ko,
            "description": self.description,
            "venue": self.venue,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "year": self.year,
            "participants": list(self.participants),
            "images": list(self.images),
            "status": self.status.value,
            "featured": self.featured,
        }


@dataclass
class AboutCategory:
    """About 하위 카테고리 (collective, fashion-film, ...)."""
    id: str
    title: str
    title_ko: str
    description: str
    summary: str = ""
    cover_image: str | None = None
    images: list[str] = field(default_factory=list)
    video_url: str | None = None
    process_images: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "title_ko": self.title_ko,
            "description": self.description,
            "summary": self.summary,
            "cover_image": self.cover_image,
            "images": list(self.images),
            "video_url": self.video_url,
            "process_images": list(self.process_images),
        }


@dataclass
class Project:
    """프로젝트 (카테고리는 AboutCategory.id)."""
    id: str
    title: str
    category: str
    description: str = ""
    designers: list[str] = field(default_factory=list)
    images: list[str] = field(default_factory=list)
    year: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "description": self.description,
            "designers": list(self.designers),
            "images": list(self.images),
            "year": self.year,
        }


@dataclass
class NavItem:
    """네비게이션 항목."""
    label: str
    href: str
    dropdown: list["NavItem"] = field(default_factory=list)


@dataclass(frozen=True)
class VideoMetadata:
    """Google Drive 비디오 메타데이터."""
    file_id: str
    title: str
    duration: str
    thumbnail: str
    preview: str
    download: str
    share: str

    def to_dict(self) -> dict[str, str]:
        return {
            "file_id": self.file_id,
            "title": self.title,
            "duration": self.duration,
            "thumbnail": self.thumbnail,
            "preview": self.preview,
            "download": self.download,
            "share": self.share,
        }


# =============================================================================
# SEO Schemas
# =============================================================================

@dataclass(frozen=True)
class SitemapEntry:
    """sitemap.xml <url> 항목."""
    url: str
    last_modified: datetime
    change_frequency: ChangeFrequency
    priority: float


@dataclass(frozen=True)
class RobotsRules:
    """robots.txt 규칙."""
    user_agent: str
    allow: tuple[str, ...]
    disallow: tuple[str, ...]
    sitemap: str


# =============================================================================
# ImageKit / Auth Schemas
# =============================================================================

@dataclass(frozen=True)
class AuthenticationParameters:
    """ImageKit 클라이언트 업로드용 인증 파라미터."""
    token: str
    expire: int  # unix seconds
    signature: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "token": self.token,
            "expire": self.expire,
            "signature": self.signature,
        }


@dataclass(frozen=True)
class AdminUser:
    """관리자 계정 (단일 계정)."""
    id: str
    email: str
    name: str
    role: str = "admin"

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role,
        }


@dataclass(frozen=True)
class TokenPair:
    """로그인/갱신 결과."""
    user: AdminUser
    token: str
    refresh_token: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "user": self.user.to_dict(),
            "token": self.token,
            "refresh_token": self.refresh_token,
        }


@dataclass(frozen=True)
class ContactSubmission:
    """문의 폼 제출 내용."""
    name: str
    email: str
    subject: str
    message: str
    submitted_at: str
    ip: str = "unknown"
