"""FastAPI integration for upload endpoints."""

from .dependencies import check_upload, require_allowed_file

__all__ = [
    "check_upload",
    "require_allowed_file",
]
