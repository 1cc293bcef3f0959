"""
test_drive.py - Google Drive URL 빌더 테스트
"""

import pytest

from src.core.drive import (
    VIDEO_IFRAME_CONFIG,
    create_video_metadata,
    drive_download,
    drive_preview,
    drive_share,
    drive_thumbnail,
    extract_file_id,
)

FILE_ID = "1dU4ypIXASSlVMGzyPvPtlP7v-rZuAg0X"


class TestUrlBuilders:
    """URL 형식 테스트."""

    def test_thumbnail_default_size(self):
        assert drive_thumbnail(FILE_ID) == (
            f"https://drive.google.com/thumbnail?id={FILE_ID}&sz=w1200"
        )

    def test_thumbnail_custom_size(self):
        assert drive_thumbnail("abc", 400) == "https://drive.google.com/thumbnail?id=abc&sz=w400"

    def test_preview(self):
        assert drive_preview("abc") == "https://drive.google.com/file/d/abc/preview"

    def test_download(self):
        assert drive_download("abc") == "https://drive.google.com/uc?export=download&id=abc"

    def test_share(self):
        assert drive_share("abc") == "https://drive.google.com/file/d/abc/view"


class TestExtractFileId:
    """extract_file_id 테스트."""

    @pytest.mark.parametrize(
        "url",
        [
            f"https://drive.google.com/file/d/{FILE_ID}/view",
            f"https://drive.google.com/file/d/{FILE_ID}/view?usp=sharing",
            f"https://drive.google.com/open?id={FILE_ID}",
        ],
    )
    def test_supported_formats(self, url: str):
        assert extract_file_id(url) == FILE_ID

    def test_share_url_round_trip(self):
        """drive_share 결과에서 같은 ID 추출."""
        assert extract_file_id(drive_share(FILE_ID)) == FILE_ID

    @pytest.mark.parametrize(
        "url",
        ["https://example.com/video.mp4", "", "https://drive.google.com/drive/folders/"],
    )
    def test_unsupported_returns_none(self, url: str):
        assert extract_file_id(url) is None


class TestVideoMetadata:
    """create_video_metadata 테스트."""

    def test_all_urls_populated(self):
        metadata = create_video_metadata("abc", "Fashion Film", "3:20")

        assert metadata.file_id == "abc"
        assert metadata.title == "Fashion Film"
        assert metadata.duration == "3:20"
        assert metadata.thumbnail == drive_thumbnail("abc")
        assert metadata.preview == drive_preview("abc")
        assert metadata.download == drive_download("abc")
        assert metadata.share == drive_share("abc")

    def test_iframe_config(self):
        assert VIDEO_IFRAME_CONFIG["allowfullscreen"] is True
        assert "autoplay" in VIDEO_IFRAME_CONFIG["allow"]
