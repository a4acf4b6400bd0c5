"""Error models and exception hierarchy for the file barrier."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Type


class ErrorKind(Enum):
    """Classification of why a file was rejected."""
    INVALID_EXTENSION = "invalid_extension"
    CONTENT_TYPE_EXTENSION_MISMATCH = "content_type_extension_mismatch"
    INVALID_CONTENT_TYPE = "invalid_content_type"
    FILE_SIZE_EXCEEDED = "file_size_exceeded"
    UNKNOWN = "unknown"


# --- File Barrier Exception Hierarchy ---

class FileBarrierError(Exception):
    """Base exception for file barrier errors."""
    pass


class PolicyViolationError(FileBarrierError):
    """A file was evaluated against a policy and rejected."""

    error_kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str, error_kind: Optional[ErrorKind] = None):
        super().__init__(message)
        if error_kind is not None:
            self.error_kind = error_kind

    @property
    def message(self) -> str:
        return str(self)


class InvalidExtensionError(PolicyViolationError):
    """File extension is not in the allowed extensions."""
    error_kind = ErrorKind.INVALID_EXTENSION


class ContentTypeMismatchError(PolicyViolationError):
    """Declared content-type does not match the one implied by the extension."""
    error_kind = ErrorKind.CONTENT_TYPE_EXTENSION_MISMATCH


class InvalidContentTypeError(PolicyViolationError):
    """Content-type is not in the allowed content types."""
    error_kind = ErrorKind.INVALID_CONTENT_TYPE


class FileSizeExceededError(PolicyViolationError):
    """File exceeds the maximum allowed size."""
    error_kind = ErrorKind.FILE_SIZE_EXCEEDED


class MissingArgumentError(FileBarrierError, ValueError):
    """A required argument for the selected layers was not supplied."""

    def __init__(self, param_name: str, message: Optional[str] = None):
        super().__init__(message or f"Value cannot be null or blank. (Parameter '{param_name}')")
        self.param_name = param_name


class ConfigurationError(FileBarrierError):
    """Configuration and environment errors."""
    pass


_POLICY_ERRORS: Dict[ErrorKind, Type[PolicyViolationError]] = {
    ErrorKind.INVALID_EXTENSION: InvalidExtensionError,
    ErrorKind.CONTENT_TYPE_EXTENSION_MISMATCH: ContentTypeMismatchError,
    ErrorKind.INVALID_CONTENT_TYPE: InvalidContentTypeError,
    ErrorKind.FILE_SIZE_EXCEEDED: FileSizeExceededError,
}


def policy_error_for(error_kind: ErrorKind, message: str) -> PolicyViolationError:
    """
    Build the policy violation exception matching an error kind.

    Args:
        error_kind: Classification of the rejection
        message: Human-readable rejection message

    Returns:
        PolicyViolationError: Subclass instance for known kinds, base class otherwise
    """
    error_class: Type[PolicyViolationError] = _POLICY_ERRORS.get(error_kind, PolicyViolationError)
    return error_class(message, error_kind)


# --- Error Handling Enums ---

class ErrorSeverity(Enum):
    """Enumeration for error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Enumeration for error categories."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    SYSTEM = "system"


@dataclass
class ErrorResult:
    """Complete error processing result with user-friendly messages."""
    error_id: str
    error_code: str
    severity: ErrorSeverity
    category: ErrorCategory
    technical_message: str
    user_message: str
    status_code: int
    error_kind: Optional[ErrorKind] = None
    suggested_actions: List[str] = field(default_factory=list)
