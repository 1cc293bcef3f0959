"""
Content Routes: 정적 콘텐츠 조회 API.

- GET /api/designers → 디자이너 목록
- GET /api/designers/{designer_id} → 디자이너 상세 (슬러그 또는 key)
- GET /api/exhibitions → 전시 목록 (?status=upcoming|current|past)
- GET /api/projects → 프로젝트 목록 (?category=<about id>|all)
- GET /api/fashion-films → 디자이너별 fashion film 메타데이터
"""

from typing import Any

from fastapi import APIRouter, Request

from src.app.state import get_catalog
from src.core.drive import create_video_metadata
from src.domain.errors import ErrorCodes, SiteError
from src.domain.schemas import ExhibitionStatus

api_router = APIRouter()


@api_router.get("/designers")
async def list_designers(request: Request, featured: bool = False) -> list[dict[str, Any]]:
    catalog = get_catalog(request)
    return [d.to_dict() for d in catalog.designers(featured_only=featured)]


@api_router.get("/designers/{designer_id}")
async def get_designer(request: Request, designer_id: str) -> dict[str, Any]:
    designer = get_catalog(request).get_designer(designer_id)
    if designer is None:
        raise SiteError(ErrorCodes.NOT_FOUND, "Designer not found", 404, designer_id=designer_id)
    return designer.to_dict()


@api_router.get("/exhibitions")
async def list_exhibitions(request: Request, status: str | None = None) -> list[dict[str, Any]]:
    status_filter = None
    if status:
        try:
            status_filter = ExhibitionStatus(status)
        except ValueError:
            raise SiteError(
                ErrorCodes.VALIDATION_ERROR,
                f"Invalid status: {status}",
                400,
            ) from None
    return [e.to_dict() for e in get_catalog(request).exhibitions(status_filter)]


@api_router.get("/projects")
async def list_projects(request: Request, category: str | None = None) -> list[dict[str, Any]]:
    return [p.to_dict() for p in get_catalog(request).projects(category)]


@api_router.get("/fashion-films")
async def list_fashion_films(request: Request) -> list[dict[str, Any]]:
    """Drive 파일 ID 가 있는 디자이너의 fashion film."""
    catalog = get_catalog(request)
    films = []
    for designer in catalog.designers():
        if not designer.fashion_film_id:
            continue
        metadata = create_video_metadata(
            designer.fashion_film_id,
            title=f"{designer.name} Fashion Film",
            duration="",
        )
        films.append({"designer": designer.id, **metadata.to_dict()})
    return films
