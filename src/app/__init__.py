"""
App layer: 웹 서버 (FastAPI + Jinja2 + HTMX).

역할:
- 페이지 렌더링 (홈, About, 디자이너, 전시, 프로젝트, 문의)
- ImageKit 프록시 API, 관리자 인증, 테마 상태 API
- robots.txt / sitemap.xml

주의: 폴더 구분
- src/app/templates/ → Jinja2 HTML (HTMX)
- src/app/static/ → CSS, JS
- content.yaml (루트) → 정적 콘텐츠 데이터
"""
