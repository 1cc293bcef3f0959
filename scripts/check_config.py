#!/usr/bin/env python3
"""
check_config.py - 배포 전 설정 / 콘텐츠 점검

점검 항목:
1. ImageKit 환경변수 (NEXT_PUBLIC_IMAGEKIT_PUBLIC_KEY, NEXT_PUBLIC_IMAGEKIT_URL_ENDPOINT,
   IMAGEKIT_PRIVATE_KEY)
2. 관리자 인증 (SECRET_KEY, ADMIN_PASSWORD_HASH) - 없으면 경고만
3. content.yaml 로드 및 참조 무결성
   - 전시/프로젝트 참여자 슬러그가 디자이너 목록에 있는지
   - 프로젝트 category 가 About 카테고리에 있는지

사용법:
    uv run python scripts/check_config.py
    uv run python scripts/check_config.py --content path/to/content.yaml
"""

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core.config import Settings
from src.core.content import ContentCatalog
from src.domain.errors import SiteError


@dataclass
class CheckReport:
    """점검 결과."""
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def check_settings(settings: Settings, report: CheckReport) -> None:
    for name in settings.imagekit.missing_vars():
        report.errors.append(f"Missing environment variable: {name}")

    if not settings.secret_key:
        report.warnings.append("SECRET_KEY is not set (admin login disabled)")
    if not settings.admin.password_hash:
        report.warnings.append("ADMIN_PASSWORD_HASH is not set (admin login disabled)")


def check_content(catalog: ContentCatalog, report: CheckReport) -> None:
    designer_ids = {d.id for d in catalog.designers()}
    about_ids = {a.id for a in catalog.about_categories()}

    for exhibition in catalog.exhibitions():
        for slug in exhibition.participants:
            if slug not in designer_ids:
                report.errors.append(
                    f"Exhibition {exhibition.id}: unknown participant {slug}"
                )

    for project in catalog.projects():
        if project.category not in about_ids:
            report.errors.append(f"Project {project.id}: unknown category {project.category}")
        for slug in project.designers:
            if slug not in designer_ids:
                report.errors.append(f"Project {project.id}: unknown designer {slug}")

    for designer in catalog.designers():
        if not designer.fashion_film_id:
            report.warnings.append(f"Designer {designer.id}: no fashion film")


def run_checks(settings: Settings, content_path: Path | None = None) -> CheckReport:
    report = CheckReport()
    check_settings(settings, report)

    try:
        catalog = ContentCatalog.load(content_path or settings.content_path)
    except (OSError, SiteError) as e:
        report.errors.append(f"Content could not be loaded: {e}")
        return report

    check_content(catalog, report)
    return report


def main() -> int:
    parser = argparse.ArgumentParser(
        description="배포 전 설정 / 콘텐츠 점검",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--content",
        type=str,
        help="content.yaml 경로 (기본: default.yaml 의 site.content_path)",
    )
    args = parser.parse_args()

    load_dotenv()
    report = run_checks(
        Settings.from_env(),
        Path(args.content) if args.content else None,
    )

    for warning in report.warnings:
        print(f"⚠️ {warning}")
    for error in report.errors:
        print(f"❌ {error}")

    if report.ok:
        print("✅ All checks passed")
        return 0
    print(f"\n{len(report.errors)} error(s) found")
    return 1


if __name__ == "__main__":
    sys.exit(main())
