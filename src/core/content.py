"""
Content catalog: content.yaml → 정적 테이블.

역할:
- 디자이너 / 전시 / About 카테고리 / 프로젝트 / 네비게이션 로드
- 디자이너 key → 테마 디스크립터 매핑
- 디자이너 key → fashion film Drive 파일 ID 매핑

로드 이후 변경 없음 (요청 간 공유해도 안전).
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from src.core.config import PROJECT_ROOT
from src.domain.constants import CONTENT_FILENAME
from src.domain.errors import ErrorCodes, SiteError
from src.domain.schemas import (
    AboutCategory,
    Designer,
    DesignerTheme,
    Exhibition,
    ExhibitionStatus,
    NavItem,
    Project,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Parsing
# =============================================================================


def _parse_theme(data: dict[str, Any]) -> DesignerTheme:
    return DesignerTheme(
        name=data["name"],
        primary_color=data["primary_color"],
        accent_color=data["accent_color"],
        font_primary=data.get("font_primary", "Space Grotesk"),
        font_display=data.get("font_display", "Space Grotesk"),
    )


def _parse_designer(data: dict[str, Any]) -> Designer:
    return Designer(
        id=data["id"],
        key=data["key"],
        name=data["name"],
        name_ko=data["name_ko"],
        role=data["role"],
        theme=_parse_theme(data["theme"]),
        bio=data.get("bio", ""),
        description=data.get("description", ""),
        instagram_handle=data.get("instagram_handle"),
        profile_image=data.get("profile_image"),
        cover_image=data.get("cover_image"),
        portfolio_images=list(data.get("portfolio_images", [])),
        fashion_film_id=data.get("fashion_film_id"),
        featured=bool(data.get("featured", False)),
        order=int(data.get("order", 0)),
    )


def _parse_exhibition(data: dict[str, Any]) -> Exhibition:
    return Exhibition(
        id=data["id"],
        title=data["title"],
        title_ko=data.get("title_ko"),
        description=data.get("description", ""),
        status=ExhibitionStatus(data.get("status", "upcoming")),
        venue=data.get("venue"),
        start_date=data.get("start_date"),
        end_date=data.get("end_date"),
        year=data.get("year"),
        participants=list(data.get("participants", [])),
        images=list(data.get("images", [])),
        featured=bool(data.get("featured", False)),
    )


def _parse_about(data: dict[str, Any]) -> AboutCategory:
    return AboutCategory(
        id=data["id"],
        title=data["title"],
        title_ko=data.get("title_ko", ""),
        description=data.get("description", ""),
        summary=data.get("summary", ""),
        cover_image=data.get("cover_image"),
        images=list(data.get("images", [])),
        video_url=data.get("video_url"),
        process_images=list(data.get("process_images", [])),
    )


def _parse_project(data: dict[str, Any]) -> Project:
    return Project(
        id=data["id"],
        title=data["title"],
        category=data["category"],
        description=data.get("description", ""),
        designers=list(data.get("designers", [])),
        images=list(data.get("images", [])),
        year=data.get("year"),
    )


def _parse_nav(data: dict[str, Any]) -> NavItem:
    return NavItem(
        label=data["label"],
        href=data["href"],
        dropdown=[_parse_nav(child) for child in data.get("dropdown", [])],
    )


# =============================================================================
# Catalog
# =============================================================================


class ContentCatalog:
    """
    정적 콘텐츠 조회.

    Usage:
        catalog = ContentCatalog.load()
        designer = catalog.get_designer("kim-bomin")
    """

    def __init__(
        self,
        designers: list[Designer],
        exhibitions: list[Exhibition],
        about: list[AboutCategory],
        projects: list[Project],
        navigation: list[NavItem],
    ) -> None:
        self._designers = sorted(designers, key=lambda d: d.order)
        self._exhibitions = exhibitions
        self._about = about
        self._projects = projects
        self._navigation = navigation

        self._designers_by_id = {d.id: d for d in self._designers}
        self._designers_by_key = {d.key: d for d in self._designers}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContentCatalog":
        """
        content.yaml 파싱 결과로 카탈로그 생성.

        Raises:
            SiteError: 필수 키 누락 / 잘못된 값 (CONTENT_CORRUPT)
        """
        try:
            return cls(
                designers=[_parse_designer(d) for d in data.get("designers", [])],
                exhibitions=[_parse_exhibition(e) for e in data.get("exhibitions", [])],
                about=[_parse_about(a) for a in data.get("about", [])],
                projects=[_parse_project(p) for p in data.get("projects", [])],
                navigation=[_parse_nav(n) for n in data.get("navigation", [])],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise SiteError(
                ErrorCodes.CONTENT_CORRUPT,
                "Content file is invalid",
                500,
                cause=str(e),
            ) from e

    @classmethod
    def load(cls, path: Path | None = None) -> "ContentCatalog":
        """content.yaml 로드 (기본: 프로젝트 루트)."""
        if path is None:
            path = PROJECT_ROOT / CONTENT_FILENAME

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        catalog = cls.from_dict(data)
        logger.info(
            f"Content loaded from {path}: "
            f"{len(catalog._designers)} designers, "
            f"{len(catalog._exhibitions)} exhibitions, "
            f"{len(catalog._projects)} projects"
        )
        return catalog

    # -------------------------------------------------------------------------
    # Designers
    # -------------------------------------------------------------------------

    def designers(self, featured_only: bool = False) -> list[Designer]:
        """디자이너 목록 (order 순)."""
        if featured_only:
            return [d for d in self._designers if d.featured]
        return list(self._designers)

    def get_designer(self, designer_id: str) -> Designer | None:
        """슬러그(kim-bomin) 또는 key(kimbomin) 로 조회."""
        return self._designers_by_id.get(designer_id) or self._designers_by_key.get(designer_id)

    def theme_keys(self) -> frozenset[str]:
        return frozenset(self._designers_by_key)

    def theme_map(self) -> dict[str, DesignerTheme]:
        """디자이너 key → 테마 디스크립터."""
        return {d.key: d.theme for d in self._designers}

    def fashion_film_ids(self) -> dict[str, str]:
        """'designer-<key>' → Google Drive 파일 ID."""
        return {
            f"designer-{d.key}": d.fashion_film_id
            for d in self._designers
            if d.fashion_film_id
        }

    # -------------------------------------------------------------------------
    # Exhibitions / About / Projects
    # -------------------------------------------------------------------------

    def exhibitions(self, status: ExhibitionStatus | None = None) -> list[Exhibition]:
        if status is None:
            return list(self._exhibitions)
        return [e for e in self._exhibitions if e.status == status]

    def get_exhibition(self, exhibition_id: str) -> Exhibition | None:
        return next((e for e in self._exhibitions if e.id == exhibition_id), None)

    def about_categories(self) -> list[AboutCategory]:
        return list(self._about)

    def get_about_category(self, category_id: str) -> AboutCategory | None:
        return next((a for a in self._about if a.id == category_id), None)

    def projects(self, category: str | None = None) -> list[Project]:
        """프로젝트 목록. category 가 None 또는 'all' 이면 전체."""
        if category is None or category == "all":
            return list(self._projects)
        return [p for p in self._projects if p.category == category]

    def get_project(self, project_id: str) -> Project | None:
        return next((p for p in self._projects if p.id == project_id), None)

    def project_categories(self) -> list[AboutCategory]:
        """프로젝트가 하나 이상 있는 카테고리만."""
        used = {p.category for p in self._projects}
        return [a for a in self._about if a.id in used]

    def designers_for(self, slugs: list[str]) -> list[Designer]:
        """슬러그 목록 → Designer (없는 슬러그는 무시)."""
        return [self._designers_by_id[s] for s in slugs if s in self._designers_by_id]

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigation(self) -> list[NavItem]:
        """
        네비게이션 항목.

        /designers 항목에 dropdown 이 없으면 디자이너 목록으로 채움.
        """
        items = []
        for item in self._navigation:
            if item.href == "/designers" and not item.dropdown:
                item = NavItem(
                    label=item.label,
                    href=item.href,
                    dropdown=[
                        NavItem(label=d.name, href=f"/designers/{d.id}")
                        for d in self._designers
                    ],
                )
            items.append(item)
        return items
