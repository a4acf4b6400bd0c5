"""Upload admission checks: extension, content-type and size policies for uploaded files."""

from file_barrier.models.errors import (
    ContentTypeMismatchError,
    ErrorKind,
    FileBarrierError,
    FileSizeExceededError,
    InvalidContentTypeError,
    InvalidExtensionError,
    MissingArgumentError,
    PolicyViolationError,
)
from file_barrier.models.validation import CheckLayer, FilePolicy, UploadedFile, ValidationOutcome
from file_barrier.validation.mime_types import get_mime_type
from file_barrier.validation.validators import FileBarrier, is_allowed, is_file_allowed

__version__ = "1.0.0"

__all__ = [
    "CheckLayer",
    "ContentTypeMismatchError",
    "ErrorKind",
    "FileBarrier",
    "FileBarrierError",
    "FilePolicy",
    "FileSizeExceededError",
    "InvalidContentTypeError",
    "InvalidExtensionError",
    "MissingArgumentError",
    "PolicyViolationError",
    "UploadedFile",
    "ValidationOutcome",
    "get_mime_type",
    "is_allowed",
    "is_file_allowed",
]
