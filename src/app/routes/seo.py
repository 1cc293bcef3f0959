"""
SEO Routes: robots.txt / sitemap.xml.

base URL 은 VERCEL_URL 환경변수 기준 (없으면 기본 도메인).
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, Response

from src.app.state import get_settings
from src.core.seo import build_robots, build_sitemap, render_robots_txt, render_sitemap_xml

router = APIRouter()


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots_txt(request: Request) -> PlainTextResponse:
    rules = build_robots(get_settings(request).base_url)
    return PlainTextResponse(render_robots_txt(rules))


@router.get("/sitemap.xml")
async def sitemap_xml(request: Request) -> Response:
    entries = build_sitemap(get_settings(request).base_url)
    return Response(render_sitemap_xml(entries), media_type="application/xml")
