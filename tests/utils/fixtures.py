"""
Common test fixtures for the file barrier.

This module provides reusable upload doubles and policy strings used across
unit and integration tests.
"""

from typing import Optional

ALLOWED_EXTENSIONS = "txt,pdf,doc,docx,docm,xls,xlsx,csv,png,jpg,jpeg,mp4,m4a,m4p,m4b,m4r,m4v,m3u8,m3u,avi,wmv,webm,ogg,mov,wav,mp3,zip"

ALLOWED_CONTENT_TYPES_WITHOUT_ZIP = ",".join(
    [
        "text/plain",
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/vnd.ms-word.document.macroEnabled.12",
        "application/vnd.ms-excel",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "text/csv",
        "image/png",
        "image/jpeg",
        "image/jpeg",
        "video/mp4",
        "audio/m4a",
        "audio/x-m4a",
        "audio/mp3",
        "audio/m4p",
        "audio/m4b",
        "audio/x-m4r",
        "video/x-m4v",
        "audio/x-mpegurl",
        "audio/mpegurl",
        "video/x-msvideo",
        "video/x-ms-wmv",
        "video/avi",
        "video/webm",
        "video/x-msvideo",
        "audio/ogg",
        "video/quicktime",
        "audio/wav",
        "audio/mpeg",
    ]
)

ALLOWED_CONTENT_TYPES = ALLOWED_CONTENT_TYPES_WITHOUT_ZIP + ",application/x-zip-compressed"


class MockFileUpload:
    """Mock file upload data model that mimics FastAPI UploadFile."""

    def __init__(self, filename: Optional[str], content: bytes, content_type: Optional[str], size: Optional[int] = None):
        self.filename = filename
        self.content = content
        self.content_type = content_type
        self.size = len(content) if size is None else size
        self._position = 0

    async def read(self) -> bytes:
        """Read file content."""
        return self.content

    async def seek(self, position: int) -> None:
        """Seek to position in file."""
        self._position = position


def make_upload(
    filename: Optional[str] = "test.txt",
    content_type: Optional[str] = "text/plain",
    size: Optional[int] = 1,
) -> MockFileUpload:
    """Build an upload whose declared size is independent of its content."""
    upload = MockFileUpload(filename=filename, content=b"x", content_type=content_type)
    upload.size = size
    return upload
