"""
Google Drive 비디오 URL 빌더.

파일 ID 하나로 썸네일 / 미리보기 / 다운로드 / 공유 URL 을 만든다.
"""

import re
from typing import Any

from src.domain.constants import DRIVE_BASE_URL, DRIVE_DEFAULT_THUMBNAIL_SIZE
from src.domain.schemas import VideoMetadata

_FILE_ID_PATTERN = re.compile(
    r"(?:drive\.google\.com/file/d/|drive\.google\.com/open\?id=)([a-zA-Z0-9_-]+)"
)

# 비디오 embed 용 iframe 속성
VIDEO_IFRAME_CONFIG: dict[str, Any] = {
    "allow": (
        "accelerometer; autoplay; clipboard-write; encrypted-media; "
        "gyroscope; picture-in-picture"
    ),
    "allowfullscreen": True,
    "frameborder": 0,
    "style": "border: none",
}


def drive_thumbnail(file_id: str, size: int = DRIVE_DEFAULT_THUMBNAIL_SIZE) -> str:
    """썸네일 URL (size: 가로 픽셀)."""
    return f"{DRIVE_BASE_URL}/thumbnail?id={file_id}&sz=w{size}"


def drive_preview(file_id: str) -> str:
    """iframe 미리보기 URL."""
    return f"{DRIVE_BASE_URL}/file/d/{file_id}/preview"


def drive_download(file_id: str) -> str:
    """직접 다운로드 URL."""
    return f"{DRIVE_BASE_URL}/uc?export=download&id={file_id}"


def drive_share(file_id: str) -> str:
    """공유 URL."""
    return f"{DRIVE_BASE_URL}/file/d/{file_id}/view"


def extract_file_id(url: str) -> str | None:
    """
    Drive URL 에서 파일 ID 추출.

    지원 형식:
    - https://drive.google.com/file/d/<id>/view
    - https://drive.google.com/open?id=<id>

    Returns:
        파일 ID, 매칭 실패 시 None
    """
    match = _FILE_ID_PATTERN.search(url)
    return match.group(1) if match else None


def create_video_metadata(file_id: str, title: str, duration: str) -> VideoMetadata:
    """파일 ID 로 VideoMetadata 생성."""
    return VideoMetadata(
        file_id=file_id,
        title=title,
        duration=duration,
        thumbnail=drive_thumbnail(file_id),
        preview=drive_preview(file_id),
        download=drive_download(file_id),
        share=drive_share(file_id),
    )
