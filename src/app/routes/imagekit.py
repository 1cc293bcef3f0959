"""
ImageKit Routes: ImageKit 패스스루 API.

- GET /api/imagekit/auth → 업로드 인증 파라미터 {token, expire, signature}
- GET /api/imagekit/list → 폴더 파일 목록
- POST /api/imagekit/upload → 업로드
- DELETE /api/imagekit/delete → 삭제 (fileId 또는 url)

실패 시 로그 후 고정 메시지로 500. 재시도 없음.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from src.app.state import get_imagekit
from src.core.imagekit import ImageKitError, sanitize_filename, validate_upload
from src.domain.constants import (
    IMAGEKIT_DEFAULT_FOLDER,
    IMAGEKIT_DEFAULT_LIST_LIMIT,
    IMAGEKIT_DEFAULT_SORT,
)

logger = logging.getLogger(__name__)

api_router = APIRouter()


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


@api_router.get("/auth")
async def imagekit_auth(request: Request) -> JSONResponse:
    """클라이언트 업로드용 인증 파라미터. 캐시 금지."""
    client = get_imagekit(request)
    try:
        params = client.get_authentication_parameters()
    except ImageKitError as e:
        logger.error(f"ImageKit auth error: {e}")
        return _error("Authentication failed", 500)

    return JSONResponse(
        params.to_dict(),
        headers={"Cache-Control": "no-store"},
    )


@api_router.get("/list")
async def imagekit_list(
    request: Request,
    folder: str = "/",
    limit: int = IMAGEKIT_DEFAULT_LIST_LIMIT,
    skip: int = 0,
) -> Any:
    """폴더 파일 목록 (생성일 오름차순)."""
    client = get_imagekit(request)
    try:
        return await client.list_files(
            path=folder,
            limit=limit,
            skip=skip,
            sort=IMAGEKIT_DEFAULT_SORT,
        )
    except ImageKitError as e:
        logger.error(f"List files error: {e}")
        return _error("Failed to list files", 500)


@api_router.post("/upload")
async def imagekit_upload(
    request: Request,
    file: str | None = Body(None),
    file_name: str | None = Body(None, alias="fileName"),
    folder: str | None = Body(None),
) -> Any:
    """
    업로드.

    Body (JSON):
        file: data URL, base64 문자열 또는 원격 URL
        fileName: 원본 파일명 (정규화 + 타임스탬프 부여 후 저장)
        folder: 업로드 폴더 (기본 /redux)

    data URL 이면 MIME 타입과 크기를 업로드 전에 검사한다.
    """
    if not file or not file_name:
        return _error("File and fileName are required", 400)

    if file.startswith("data:"):
        header, _, payload = file.partition(",")
        content_type = header[len("data:"):].split(";")[0]
        try:
            validate_upload(file_name, content_type, len(payload) * 3 // 4)
        except ImageKitError as e:
            return _error(e.message, 400)

    client = get_imagekit(request)
    try:
        return await client.upload(
            file,
            sanitize_filename(file_name),
            folder or IMAGEKIT_DEFAULT_FOLDER,
        )
    except ImageKitError as e:
        logger.error(f"ImageKit upload error: {e}")
        return _error("Failed to upload image", 500)


@api_router.delete("/delete")
async def imagekit_delete(
    request: Request,
    file_id: str | None = Body(None, alias="fileId"),
    url: str | None = Body(None),
) -> Any:
    """
    삭제.

    fileId 우선, 없으면 url 경로로 파일을 찾아 삭제.
    """
    if not file_id and not url:
        return _error("No fileId or url provided", 400)

    client = get_imagekit(request)
    try:
        if file_id:
            await client.delete_file(file_id)
            return {"success": True}

        if url and await client.delete_by_url(url):
            return {"success": True}
    except ImageKitError as e:
        logger.error(f"Delete error: {e}")
        return _error("Delete failed", 500)

    return _error("File not found", 404)
