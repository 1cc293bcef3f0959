"""
SEO: sitemap.xml / robots.txt 생성.

고정 라우트 목록(SITEMAP_ROUTES)에서 정적으로 생성한다.
"""

from datetime import UTC, datetime
from xml.sax.saxutils import escape

from src.domain.constants import (
    ROBOTS_ALLOW,
    ROBOTS_DISALLOW,
    ROBOTS_USER_AGENT,
    SITEMAP_ROUTES,
)
from src.domain.schemas import ChangeFrequency, RobotsRules, SitemapEntry

SITEMAP_XMLNS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def build_sitemap(base_url: str, now: datetime | None = None) -> list[SitemapEntry]:
    """
    sitemap 항목 생성.

    Args:
        base_url: 공개 base URL (끝 슬래시 없음)
        now: lastModified 시각 (기본: 현재 UTC)
    """
    if now is None:
        now = datetime.now(UTC)

    return [
        SitemapEntry(
            url=f"{base_url}{path}",
            last_modified=now,
            change_frequency=ChangeFrequency(frequency),
            priority=priority,
        )
        for path, frequency, priority in SITEMAP_ROUTES
    ]


def render_sitemap_xml(entries: list[SitemapEntry]) -> str:
    """SitemapEntry 목록 → sitemap XML 문자열."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<urlset xmlns="{SITEMAP_XMLNS}">',
    ]
    for entry in entries:
        lines.extend([
            "<url>",
            f"<loc>{escape(entry.url)}</loc>",
            f"<lastmod>{entry.last_modified.isoformat()}</lastmod>",
            f"<changefreq>{entry.change_frequency.value}</changefreq>",
            f"<priority>{entry.priority}</priority>",
            "</url>",
        ])
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"


def build_robots(base_url: str) -> RobotsRules:
    """robots 규칙 (/admin/, /api/ 항상 차단)."""
    return RobotsRules(
        user_agent=ROBOTS_USER_AGENT,
        allow=ROBOTS_ALLOW,
        disallow=ROBOTS_DISALLOW,
        sitemap=f"{base_url}/sitemap.xml",
    )


def render_robots_txt(rules: RobotsRules) -> str:
    """RobotsRules → robots.txt 본문."""
    lines = [f"User-Agent: {rules.user_agent}"]
    lines.extend(f"Allow: {path}" for path in rules.allow)
    lines.extend(f"Disallow: {path}" for path in rules.disallow)
    lines.append("")
    lines.append(f"Sitemap: {rules.sitemap}")
    return "\n".join(lines) + "\n"
