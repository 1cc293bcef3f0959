"""
ImageKit client.

역할:
- 클라이언트 업로드용 인증 파라미터 (token, expire, signature) 생성
- 파일 목록 / 업로드 / 삭제 (ImageKit REST API 패스스루)
- 전송 URL 빌더 (tr:w-..,h-..,q-..,f-..)

정책:
- 재시도 없음. 실패는 ImageKitError 로 올리고 라우트에서 500 처리
- 에러 구분은 "설정 누락"(ImageKitConfigError) 과 "호출 실패"(ImageKitError) 뿐
"""

import hashlib
import hmac
import logging
import re
import time
import uuid
from pathlib import PurePosixPath
from typing import Any

import httpx

from src.core.config import ImageKitSettings
from src.domain.constants import (
    ALLOWED_EXTENSIONS,
    ALLOWED_IMAGE_TYPES,
    ALLOWED_VIDEO_TYPES,
    IMAGEKIT_API_BASE,
    IMAGEKIT_DEFAULT_FOLDER,
    IMAGEKIT_DEFAULT_LIST_LIMIT,
    IMAGEKIT_DEFAULT_SORT,
    IMAGEKIT_SIGNATURE_TTL_SECONDS,
    IMAGEKIT_UPLOAD_URL,
    MAX_IMAGE_SIZE_MB,
    MAX_VIDEO_SIZE_MB,
    PLACEHOLDER_IMAGE,
)
from src.domain.errors import ErrorCodes
from src.domain.schemas import AuthenticationParameters

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class ImageKitError(Exception):
    """ImageKit 호출 실패."""

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")


class ImageKitConfigError(ImageKitError):
    """필수 키/엔드포인트 누락."""
    pass


# =============================================================================
# Signature
# =============================================================================


def compute_signature(private_key: str, token: str, expire: int) -> str:
    """HMAC-SHA1(private_key, token + expire) hex digest."""
    message = f"{token}{expire}".encode()
    return hmac.new(private_key.encode(), message, hashlib.sha1).hexdigest()


# =============================================================================
# Upload Validation
# =============================================================================


def sanitize_filename(filename: str, timestamp_ms: int | None = None) -> str:
    """
    업로드 파일명 정규화.

    - 확장자 제외 부분: 영숫자/-/_ 이외 문자 → '-', 연속 '-' 축약, 소문자
    - 중복 방지용 밀리초 타임스탬프 추가

    예: "My Photo (1).JPG" → "my-photo-1-1700000000000.JPG"
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)

    stem, dot, extension = filename.rpartition(".")
    if not dot:
        stem, extension = filename, ""

    sanitized = re.sub(r"[^a-zA-Z0-9_-]", "-", stem)
    sanitized = re.sub(r"-+", "-", sanitized).strip("-").lower() or "file"

    suffix = f".{extension}" if extension else ""
    return f"{sanitized}-{timestamp_ms}{suffix}"


def validate_upload(file_name: str, content_type: str, size: int) -> None:
    """
    업로드 가능 여부 검사.

    Raises:
        ImageKitError: 허용되지 않은 확장자/타입 또는 용량 초과 (INVALID_UPLOAD)
    """
    extension = PurePosixPath(file_name).suffix.lstrip(".").lower()
    if extension not in ALLOWED_EXTENSIONS:
        raise ImageKitError(
            ErrorCodes.INVALID_UPLOAD,
            f"File type .{extension} is not allowed. "
            f"Allowed types: {', '.join(ALLOWED_EXTENSIONS)}",
        )

    size_mb = size / 1024 / 1024
    if content_type in ALLOWED_IMAGE_TYPES:
        if size_mb > MAX_IMAGE_SIZE_MB:
            raise ImageKitError(
                ErrorCodes.INVALID_UPLOAD,
                f"Image size exceeds {MAX_IMAGE_SIZE_MB}MB limit. "
                f"Current size: {size_mb:.2f}MB",
            )
    elif content_type in ALLOWED_VIDEO_TYPES:
        if size_mb > MAX_VIDEO_SIZE_MB:
            raise ImageKitError(
                ErrorCodes.INVALID_UPLOAD,
                f"Video size exceeds {MAX_VIDEO_SIZE_MB}MB limit. "
                f"Current size: {size_mb:.2f}MB",
            )
    else:
        raise ImageKitError(
            ErrorCodes.INVALID_UPLOAD,
            f"File type {content_type} is not supported",
        )


# =============================================================================
# Client
# =============================================================================


class ImageKitClient:
    """
    ImageKit REST API client.

    Usage:
        client = ImageKitClient(settings.imagekit)
        params = client.get_authentication_parameters()
        files = await client.list_files("/redux/main/", limit=20)
    """

    def __init__(
        self,
        settings: ImageKitSettings,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            settings: 키/엔드포인트
            timeout: HTTP 타임아웃 (초)
            transport: 테스트용 httpx transport (MockTransport 등)
        """
        self.settings = settings
        self.timeout = timeout
        self._transport = transport

    # -------------------------------------------------------------------------
    # Auth
    # -------------------------------------------------------------------------

    def get_authentication_parameters(
        self,
        token: str | None = None,
        expire: int | None = None,
    ) -> AuthenticationParameters:
        """
        클라이언트 업로드 인증 파라미터 생성.

        Args:
            token: 일회용 토큰 (기본: uuid4)
            expire: 만료 시각 unix seconds (기본: 현재 + 30분)

        Raises:
            ImageKitConfigError: public/private 키 중 하나라도 없을 때
        """
        if not self.settings.has_keys:
            raise ImageKitConfigError(
                ErrorCodes.IMAGEKIT_CONFIG_MISSING,
                "ImageKit public/private key is not configured",
            )

        token = token or str(uuid.uuid4())
        if expire is None:
            expire = int(time.time()) + IMAGEKIT_SIGNATURE_TTL_SECONDS
        signature = compute_signature(self.settings.private_key or "", token, expire)

        return AuthenticationParameters(token=token, expire=expire, signature=signature)

    # -------------------------------------------------------------------------
    # REST API
    # -------------------------------------------------------------------------

    def _http_client(self) -> httpx.AsyncClient:
        if not self.settings.private_key:
            raise ImageKitConfigError(
                ErrorCodes.IMAGEKIT_CONFIG_MISSING,
                "IMAGEKIT_PRIVATE_KEY is not configured",
            )
        return httpx.AsyncClient(
            auth=(self.settings.private_key, ""),
            timeout=self.timeout,
            transport=self._transport,
        )

    async def list_files(
        self,
        path: str = "/",
        limit: int = IMAGEKIT_DEFAULT_LIST_LIMIT,
        skip: int = 0,
        sort: str = IMAGEKIT_DEFAULT_SORT,
    ) -> list[dict[str, Any]]:
        """폴더의 파일 목록."""
        params: dict[str, str | int] = {
            "path": path,
            "limit": limit,
            "skip": skip,
            "sort": sort,
        }
        async with self._http_client() as client:
            try:
                response = await client.get(f"{IMAGEKIT_API_BASE}/files", params=params)
                response.raise_for_status()
                data: list[dict[str, Any]] = response.json()
            except (httpx.HTTPError, ValueError) as e:
                raise ImageKitError(
                    ErrorCodes.IMAGEKIT_LIST_FAILED,
                    f"List files failed: {e}",
                    path=path,
                ) from e

        return data

    async def upload(
        self,
        file: bytes | str,
        file_name: str,
        folder: str = IMAGEKIT_DEFAULT_FOLDER,
    ) -> dict[str, Any]:
        """
        파일 업로드.

        Args:
            file: 바이너리, base64 문자열 또는 원격 URL
            file_name: 저장 파일명
            folder: 업로드 폴더
        """
        content = file.encode() if isinstance(file, str) else file
        form = {"fileName": file_name, "folder": folder}
        # 문자열(base64/URL)은 파일명 없는 필드로 전송
        part_name = file_name if isinstance(file, bytes) else None

        async with self._http_client() as client:
            try:
                response = await client.post(
                    IMAGEKIT_UPLOAD_URL,
                    data=form,
                    files={"file": (part_name, content)},
                )
                response.raise_for_status()
                data: dict[str, Any] = response.json()
            except (httpx.HTTPError, ValueError) as e:
                raise ImageKitError(
                    ErrorCodes.IMAGEKIT_UPLOAD_FAILED,
                    f"Upload failed: {e}",
                    file_name=file_name,
                    folder=folder,
                ) from e

        logger.info(f"Uploaded {file_name} to {folder} (fileId={data.get('fileId')})")
        return data

    async def delete_file(self, file_id: str) -> None:
        """fileId 로 삭제."""
        async with self._http_client() as client:
            try:
                response = await client.delete(f"{IMAGEKIT_API_BASE}/files/{file_id}")
                response.raise_for_status()
            except httpx.HTTPError as e:
                raise ImageKitError(
                    ErrorCodes.IMAGEKIT_DELETE_FAILED,
                    f"Delete failed: {e}",
                    file_id=file_id,
                ) from e
        logger.info(f"Deleted ImageKit file {file_id}")

    async def delete_by_url(self, url: str) -> bool:
        """
        URL 경로로 파일을 찾아 삭제.

        Returns:
            삭제했으면 True, 일치하는 파일이 없으면 False
        """
        try:
            path = httpx.URL(url).path
        except httpx.InvalidURL as e:
            raise ImageKitError(
                ErrorCodes.IMAGEKIT_DELETE_FAILED,
                f"Invalid file url: {e}",
                url=url,
            ) from e

        files = await self.list_files(path=path)
        if not files:
            return False

        try:
            file_id = files[0]["fileId"]
        except (KeyError, IndexError, TypeError) as e:
            raise ImageKitError(
                ErrorCodes.IMAGEKIT_DELETE_FAILED,
                f"Unexpected list response for {path}",
                url=url,
            ) from e

        await self.delete_file(file_id)
        return True

    # -------------------------------------------------------------------------
    # URL Builder
    # -------------------------------------------------------------------------

    def url(
        self,
        path: str,
        width: int | None = None,
        height: int | None = None,
        quality: int | None = None,
        format: str | None = None,
    ) -> str:
        """
        전송 URL 생성.

        - 엔드포인트 미설정 → path 그대로
        - 이미 절대 URL → 그대로
        """
        endpoint = self.settings.url_endpoint
        if not endpoint:
            return path
        if path.startswith(("http://", "https://")):
            return path

        transforms = []
        if width:
            transforms.append(f"w-{width}")
        if height:
            transforms.append(f"h-{height}")
        if quality:
            transforms.append(f"q-{quality}")
        if format:
            transforms.append(f"f-{format}")

        clean_path = path if path.startswith("/") else f"/{path}"
        base = endpoint.rstrip("/")
        if not transforms:
            return f"{base}{clean_path}"
        return f"{base}/tr:{','.join(transforms)}{clean_path}"

    def safe_image_url(self, src: str | None) -> str:
        """
        템플릿용 이미지 URL.

        - 비어 있으면 placeholder
        - 절대 URL / data URL / 사이트 절대경로는 그대로
        - 그 외 상대경로는 ImageKit 엔드포인트 기준 (없으면 /images/ 아래)
        """
        if not src:
            return PLACEHOLDER_IMAGE
        if src.startswith(("http", "data:", "/")):
            return src
        if self.settings.url_endpoint:
            return self.url(src)
        return f"/images/{src}"
