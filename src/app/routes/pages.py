"""
Page Routes: 정적 콘텐츠 페이지 (Jinja2).

- GET / → 홈
- GET /about, /about/{category_id} → About (collective, fashion-film, memory, visual-art, installation)
- GET /designers, /designers/{designer_id} → 디자이너
- GET /exhibitions → 전시
- GET /projects, /projects/{project_id} → 프로젝트 (?category= 필터)
- GET /contact → 문의 폼 (HTMX → POST /api/contact)
"""

from pathlib import Path
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.app.state import get_catalog, get_imagekit, get_theme_registry
from src.core.drive import VIDEO_IFRAME_CONFIG, create_video_metadata
from src.core.theme import ThemeState
from src.domain.constants import SITE_NAME, THEME_SESSION_COOKIE
from src.domain.schemas import SpinnerSize

_templates_dir = Path(__file__).parent.parent / "templates"
jinja_templates = Jinja2Templates(directory=_templates_dir)
jinja_templates.env.globals["video_iframe"] = VIDEO_IFRAME_CONFIG
jinja_templates.env.globals["site_name"] = SITE_NAME
jinja_templates.env.globals["spinner_sizes"] = [s.value for s in SpinnerSize]

router = APIRouter()


def _render(
    request: Request,
    template: str,
    status_code: int = 200,
    **context: Any,
) -> HTMLResponse:
    """
    공통 컨텍스트(네비게이션, 테마, 이미지 URL 헬퍼)를 넣어 렌더링.

    테마는 쿠키 세션이 있을 때만 반영하고, 페이지 조회로 세션을 만들지는 않는다.
    """
    store = get_theme_registry(request).peek(request.cookies.get(THEME_SESSION_COOKIE))
    theme_state = store.snapshot() if store else ThemeState()
    theme = store.theme_descriptor() if store else None

    base_context = {
        "navigation": get_catalog(request).navigation(),
        "theme_state": theme_state,
        "theme": context.pop("theme", None) or theme,
        "image_url": get_imagekit(request).safe_image_url,
    }
    return jinja_templates.TemplateResponse(
        request,
        template,
        {**base_context, **context},
        status_code=status_code,
    )


def _not_found(request: Request, what: str) -> HTMLResponse:
    return _render(request, "404.html", status_code=404, what=what)


# =============================================================================
# Home / About
# =============================================================================

@router.get("/", response_class=HTMLResponse)
async def home_page(request: Request) -> HTMLResponse:
    catalog = get_catalog(request)
    return _render(
        request,
        "home.html",
        designers=catalog.designers(featured_only=True),
        exhibitions=catalog.exhibitions(),
        about_categories=catalog.about_categories(),
    )


@router.get("/about", response_class=HTMLResponse)
async def about_page(request: Request) -> HTMLResponse:
    return _render(
        request,
        "about.html",
        about_categories=get_catalog(request).about_categories(),
    )


@router.get("/about/{category_id}", response_class=HTMLResponse)
async def about_detail_page(request: Request, category_id: str) -> HTMLResponse:
    catalog = get_catalog(request)
    category = catalog.get_about_category(category_id)
    if category is None:
        return _not_found(request, "About")

    films = []
    if category.id == "fashion-film":
        films = [
            (d, create_video_metadata(d.fashion_film_id, f"{d.name} Fashion Film", ""))
            for d in catalog.designers()
            if d.fashion_film_id
        ]
    designers = catalog.designers() if category.id == "collective" else []

    return _render(
        request,
        "about_detail.html",
        category=category,
        films=films,
        designers=designers,
    )


# =============================================================================
# Designers
# =============================================================================

@router.get("/designers", response_class=HTMLResponse)
async def designers_page(request: Request) -> HTMLResponse:
    return _render(request, "designers.html", designers=get_catalog(request).designers())


@router.get("/designers/{designer_id}", response_class=HTMLResponse)
async def designer_detail_page(request: Request, designer_id: str) -> HTMLResponse:
    catalog = get_catalog(request)
    designer = catalog.get_designer(designer_id)
    if designer is None:
        return _not_found(request, "Designer")

    film = None
    if designer.fashion_film_id:
        film = create_video_metadata(designer.fashion_film_id, f"{designer.name} Fashion Film", "")

    return _render(
        request,
        "designer_detail.html",
        designer=designer,
        film=film,
        theme=designer.theme,
        exhibitions=[e for e in catalog.exhibitions() if designer.id in e.participants],
    )


# =============================================================================
# Exhibitions / Projects / Contact
# =============================================================================

@router.get("/exhibitions", response_class=HTMLResponse)
async def exhibitions_page(request: Request) -> HTMLResponse:
    catalog = get_catalog(request)
    return _render(
        request,
        "exhibitions.html",
        exhibitions=[(e, catalog.designers_for(e.participants)) for e in catalog.exhibitions()],
    )


@router.get("/projects", response_class=HTMLResponse)
async def projects_page(request: Request, category: str = "all") -> HTMLResponse:
    catalog = get_catalog(request)
    return _render(
        request,
        "projects.html",
        projects=catalog.projects(category),
        categories=catalog.project_categories(),
        selected_category=category,
    )


@router.get("/projects/{project_id}", response_class=HTMLResponse)
async def project_detail_page(request: Request, project_id: str) -> HTMLResponse:
    catalog = get_catalog(request)
    project = catalog.get_project(project_id)
    if project is None:
        return _not_found(request, "Project")
    return _render(
        request,
        "project_detail.html",
        project=project,
        category=catalog.get_about_category(project.category),
        designers=catalog.designers_for(project.designers),
    )


@router.get("/contact", response_class=HTMLResponse)
async def contact_page(request: Request) -> HTMLResponse:
    return _render(request, "contact.html")
