"""
E2E 테스트용 TestClient 설정.

lifespan 이 환경변수로 Settings 를 만들기 때문에
환경 fixture 를 먼저 적용한 뒤 TestClient 를 연다.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.app.main import app


@pytest.fixture
def client(site_env: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """모든 키가 설정된 FastAPI TestClient."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def bare_client(clean_env: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """환경변수가 하나도 없는 TestClient."""
    with TestClient(app) as client:
        yield client
