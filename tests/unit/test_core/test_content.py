"""
test_content.py - 콘텐츠 카탈로그 테스트

DoD:
- content.yaml 로드 (디자이너 6명, order 순)
- 슬러그/key 조회, 필터, 네비게이션 dropdown
- 필수 키 누락 → CONTENT_CORRUPT
"""

from pathlib import Path

import pytest
import yaml

from src.core.content import ContentCatalog
from src.domain.errors import ErrorCodes, SiteError
from src.domain.schemas import ExhibitionStatus

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def minimal_content() -> dict:
    """최소 구성 콘텐츠."""
    return {
        "designers": [
            {
                "id": "second",
                "key": "second",
                "name": "Second",
                "name_ko": "둘",
                "role": "Designer",
                "order": 2,
                "theme": {"name": "b", "primary_color": "#000", "accent_color": "#111"},
            },
            {
                "id": "first",
                "key": "firstkey",
                "name": "First",
                "name_ko": "하나",
                "role": "Designer",
                "order": 1,
                "featured": True,
                "instagram_handle": "first.ig",
                "theme": {"name": "a", "primary_color": "#fff", "accent_color": "#eee"},
            },
        ],
        "navigation": [{"label": "Designers", "href": "/designers"}],
    }


# =============================================================================
# Loading
# =============================================================================


class TestLoad:
    """ContentCatalog.load / from_dict 테스트."""

    def test_loads_project_content(self, catalog: ContentCatalog):
        assert len(catalog.designers()) == 6
        assert len(catalog.exhibitions()) == 2
        assert len(catalog.about_categories()) == 5

    def test_load_from_file(self, tmp_path: Path, minimal_content: dict):
        path = tmp_path / "content.yaml"
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(minimal_content, f, allow_unicode=True)

        catalog = ContentCatalog.load(path)

        assert [d.id for d in catalog.designers()] == ["first", "second"]

    def test_missing_required_key(self, minimal_content: dict):
        del minimal_content["designers"][0]["theme"]

        with pytest.raises(SiteError) as exc_info:
            ContentCatalog.from_dict(minimal_content)

        assert exc_info.value.code == ErrorCodes.CONTENT_CORRUPT
        assert exc_info.value.status_code == 500

    def test_invalid_status(self):
        data = {"exhibitions": [{"id": "x", "title": "X", "status": "someday"}]}

        with pytest.raises(SiteError):
            ContentCatalog.from_dict(data)


# =============================================================================
# Designers
# =============================================================================


class TestDesigners:
    """디자이너 조회 테스트."""

    def test_sorted_by_order(self, catalog: ContentCatalog):
        orders = [d.order for d in catalog.designers()]
        assert orders == sorted(orders)

    def test_featured_only(self, minimal_content: dict):
        catalog = ContentCatalog.from_dict(minimal_content)

        assert [d.id for d in catalog.designers(featured_only=True)] == ["first"]

    @pytest.mark.parametrize("lookup", ["kim-bomin", "kimbomin"])
    def test_get_by_slug_or_key(self, catalog: ContentCatalog, lookup: str):
        designer = catalog.get_designer(lookup)

        assert designer is not None
        assert designer.name == "Kim Bomin"

    def test_get_unknown(self, catalog: ContentCatalog):
        assert catalog.get_designer("nobody") is None

    def test_instagram_url(self, minimal_content: dict):
        catalog = ContentCatalog.from_dict(minimal_content)

        assert catalog.get_designer("first").instagram_url == "https://instagram.com/first.ig"
        assert catalog.get_designer("second").instagram_url is None

    def test_theme_map_keys(self, catalog: ContentCatalog):
        assert set(catalog.theme_map()) == catalog.theme_keys() == {
            "kimbomin",
            "parkparang",
            "leetaehyeon",
            "choieunsol",
            "hwangjinsu",
            "kimgyeongsu",
        }

    def test_fashion_film_ids(self, catalog: ContentCatalog):
        films = catalog.fashion_film_ids()

        assert films["designer-kimbomin"] == "1dU4ypIXASSlVMGzyPvPtlP7v-rZuAg0X"
        assert len(films) == 6

    def test_designers_for_ignores_unknown(self, catalog: ContentCatalog):
        designers = catalog.designers_for(["park-parang", "ghost"])

        assert [d.id for d in designers] == ["park-parang"]


# =============================================================================
# Exhibitions / About / Projects
# =============================================================================


class TestExhibitionsAndProjects:
    """전시 / About / 프로젝트 조회 테스트."""

    def test_filter_exhibitions_by_status(self, catalog: ContentCatalog):
        past = catalog.exhibitions(ExhibitionStatus.PAST)

        assert [e.id for e in past] == ["cine-mode"]

    def test_get_exhibition(self, catalog: ContentCatalog):
        assert catalog.get_exhibition("the-room").status == ExhibitionStatus.UPCOMING
        assert catalog.get_exhibition("missing") is None

    def test_get_about_category(self, catalog: ContentCatalog):
        assert catalog.get_about_category("fashion-film").title == "Fashion Film"
        assert catalog.get_about_category("missing") is None

    @pytest.mark.parametrize("category", [None, "all"])
    def test_all_projects(self, catalog: ContentCatalog, category: str | None):
        assert len(catalog.projects(category)) == 3

    def test_projects_by_category(self, catalog: ContentCatalog):
        assert [p.id for p in catalog.projects("visual-art")] == ["digital-dreams"]
        assert catalog.projects("memory") == []

    def test_project_categories_only_used(self, catalog: ContentCatalog):
        ids = [c.id for c in catalog.project_categories()]

        assert ids == ["fashion-film", "visual-art", "installation"]


# =============================================================================
# Navigation
# =============================================================================


class TestNavigation:
    """navigation 테스트."""

    def test_designers_dropdown_filled(self, catalog: ContentCatalog):
        designers_item = next(i for i in catalog.navigation() if i.href == "/designers")

        assert [c.href for c in designers_item.dropdown][:2] == [
            "/designers/kim-bomin",
            "/designers/park-parang",
        ]
        assert len(designers_item.dropdown) == 6

    def test_other_items_unchanged(self, catalog: ContentCatalog):
        about = catalog.navigation()[0]

        assert about.label == "About"
        assert len(about.dropdown) == 5
