"""
Pytest fixtures for the REDUX site tests.

구성:
- 경로 / 설정 fixture
- 환경변수 fixture (ImageKit 키, 관리자 인증)
- 콘텐츠 카탈로그 fixture
"""

from pathlib import Path

import pytest
import yaml
from werkzeug.security import generate_password_hash

from src.core.config import AdminSettings, ImageKitSettings
from src.core.content import ContentCatalog

# =============================================================================
# 상수
# =============================================================================

TEST_PUBLIC_KEY = "public_test_key"
TEST_PRIVATE_KEY = "private_test_key"
TEST_URL_ENDPOINT = "https://ik.imagekit.io/redux"
TEST_SECRET_KEY = "test-secret-key"
TEST_ADMIN_USERNAME = "admin"
TEST_ADMIN_PASSWORD = "redux-password"

ENV_VARS = (
    "NEXT_PUBLIC_IMAGEKIT_PUBLIC_KEY",
    "IMAGEKIT_PRIVATE_KEY",
    "NEXT_PUBLIC_IMAGEKIT_URL_ENDPOINT",
    "VERCEL_URL",
    "SECRET_KEY",
    "ADMIN_USERNAME",
    "ADMIN_PASSWORD_HASH",
    "LOG_LEVEL",
)

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def content_path(project_root: Path) -> Path:
    """content.yaml 경로."""
    return project_root / "content.yaml"


@pytest.fixture
def default_config(project_root: Path) -> dict:
    """기본 설정 로드."""
    with open(project_root / "default.yaml", encoding="utf-8") as f:
        return yaml.safe_load(f)


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """사이트 관련 환경변수를 모두 제거."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def admin_password() -> str:
    """관리자 평문 비밀번호."""
    return TEST_ADMIN_PASSWORD


@pytest.fixture
def admin_password_hash(admin_password: str) -> str:
    """관리자 비밀번호의 werkzeug 해시."""
    return generate_password_hash(admin_password)


@pytest.fixture
def site_env(clean_env: pytest.MonkeyPatch, admin_password_hash: str) -> pytest.MonkeyPatch:
    """모든 키가 설정된 환경."""
    clean_env.setenv("NEXT_PUBLIC_IMAGEKIT_PUBLIC_KEY", TEST_PUBLIC_KEY)
    clean_env.setenv("IMAGEKIT_PRIVATE_KEY", TEST_PRIVATE_KEY)
    clean_env.setenv("NEXT_PUBLIC_IMAGEKIT_URL_ENDPOINT", TEST_URL_ENDPOINT)
    clean_env.setenv("SECRET_KEY", TEST_SECRET_KEY)
    clean_env.setenv("ADMIN_PASSWORD_HASH", admin_password_hash)
    return clean_env


@pytest.fixture
def imagekit_settings() -> ImageKitSettings:
    """키가 모두 있는 ImageKit 설정."""
    return ImageKitSettings(
        public_key=TEST_PUBLIC_KEY,
        private_key=TEST_PRIVATE_KEY,
        url_endpoint=TEST_URL_ENDPOINT,
    )


@pytest.fixture
def admin_settings(admin_password_hash: str) -> AdminSettings:
    """비밀번호 해시가 설정된 관리자."""
    return AdminSettings(
        username=TEST_ADMIN_USERNAME,
        password_hash=admin_password_hash,
    )


# =============================================================================
# Content Fixtures
# =============================================================================


@pytest.fixture
def catalog(content_path: Path) -> ContentCatalog:
    """실제 content.yaml 카탈로그."""
    return ContentCatalog.load(content_path)
