"""
Configuration: default.yaml + 환경변수.

우선순위: 환경변수 > default.yaml > 코드 기본값

환경변수:
- IMAGEKIT_PRIVATE_KEY (서버 전용)
- NEXT_PUBLIC_IMAGEKIT_PUBLIC_KEY
- NEXT_PUBLIC_IMAGEKIT_URL_ENDPOINT
- VERCEL_URL (배포 호스트, 스킴 없음)
- SECRET_KEY, ADMIN_USERNAME, ADMIN_PASSWORD_HASH (관리자 인증)
- LOG_LEVEL
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import CONFIG_FILENAME, DEFAULT_SITE_URL

PROJECT_ROOT = Path(__file__).parent.parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """설정 파일 로드. 파일이 없으면 빈 dict."""
    if config_path is None:
        config_path = PROJECT_ROOT / CONFIG_FILENAME

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[str, Any] | None = yaml.safe_load(f)
        return data or {}


@dataclass(frozen=True)
class ImageKitSettings:
    """ImageKit 접속 정보."""
    public_key: str | None = None
    private_key: str | None = None
    url_endpoint: str | None = None

    @property
    def has_keys(self) -> bool:
        """인증 서명에 필요한 두 키가 모두 있는지."""
        return bool(self.public_key and self.private_key)

    def missing_vars(self) -> list[str]:
        missing = []
        if not self.public_key:
            missing.append("NEXT_PUBLIC_IMAGEKIT_PUBLIC_KEY")
        if not self.url_endpoint:
            missing.append("NEXT_PUBLIC_IMAGEKIT_URL_ENDPOINT")
        if not self.private_key:
            missing.append("IMAGEKIT_PRIVATE_KEY")
        return missing


@dataclass(frozen=True)
class AdminSettings:
    """단일 관리자 계정 설정."""
    username: str = "admin"
    password_hash: str | None = None
    email: str = "admin@redux66.com"
    name: str = "Admin"


@dataclass(frozen=True)
class Settings:
    """애플리케이션 설정 (불변)."""
    imagekit: ImageKitSettings = field(default_factory=ImageKitSettings)
    admin: AdminSettings = field(default_factory=AdminSettings)
    vercel_url: str | None = None
    default_site_url: str = DEFAULT_SITE_URL
    secret_key: str | None = None
    log_level: str = "INFO"
    content_path: Path | None = None

    @property
    def base_url(self) -> str:
        """공개 base URL (끝 슬래시 없음)."""
        if self.vercel_url:
            return f"https://{self.vercel_url}"
        return self.default_site_url.rstrip("/")

    @classmethod
    def from_env(
        cls,
        config: dict[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "Settings":
        """
        default.yaml 내용 위에 환경변수를 덮어써서 Settings 생성.

        Args:
            config: load_config() 결과 (None이면 파일에서 로드)
            environ: 환경변수 매핑 (None이면 os.environ)
        """
        if config is None:
            config = load_config()
        env = os.environ if environ is None else environ

        site_cfg = config.get("site", {}) or {}
        ik_cfg = config.get("imagekit", {}) or {}
        admin_cfg = config.get("admin", {}) or {}
        log_cfg = config.get("logging", {}) or {}

        imagekit = ImageKitSettings(
            public_key=env.get("NEXT_PUBLIC_IMAGEKIT_PUBLIC_KEY") or None,
            private_key=env.get("IMAGEKIT_PRIVATE_KEY") or None,
            url_endpoint=(
                env.get("NEXT_PUBLIC_IMAGEKIT_URL_ENDPOINT") or ik_cfg.get("url_endpoint")
            ),
        )
        admin = AdminSettings(
            username=env.get("ADMIN_USERNAME") or admin_cfg.get("username", "admin"),
            password_hash=env.get("ADMIN_PASSWORD_HASH") or None,
            email=admin_cfg.get("email", "admin@redux66.com"),
            name=admin_cfg.get("name", "Admin"),
        )

        content_path = site_cfg.get("content_path")

        return cls(
            imagekit=imagekit,
            admin=admin,
            vercel_url=env.get("VERCEL_URL") or None,
            default_site_url=site_cfg.get("default_url", DEFAULT_SITE_URL),
            secret_key=env.get("SECRET_KEY") or None,
            log_level=env.get("LOG_LEVEL") or log_cfg.get("level", "INFO"),
            content_path=PROJECT_ROOT / content_path if content_path else None,
        )
