"""
FastAPI Routes.

페이지 라우트 (HTML, SEO) + API 라우트 (REST)
"""

from . import auth, contact, content, imagekit, pages, seo, theme

__all__ = ["auth", "contact", "content", "imagekit", "pages", "seo", "theme"]
