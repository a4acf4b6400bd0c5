"""Validation models and enums for upload admission checks."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Protocol, Tuple, Union

from file_barrier.models.errors import ErrorKind


class CheckLayer(Enum):
    """The check-points a file can be sent through."""
    CHECK_EXTENSIONS = "extensions"
    CHECK_CONTENT_TYPE_TO_EXTENSION = "content_type_to_extension"
    CHECK_CONTENT_TYPE = "content_type"
    CHECK_FILE_SIZE = "file_size"
    ALL_LAYERS = "all"  # Wildcard, selects every other layer

    @classmethod
    def parse(cls, value: Union["CheckLayer", str]) -> "CheckLayer":
        """
        Resolve a layer from a member, a member name or a member value.

        Args:
            value: Layer, or its name/value in any case

        Returns:
            CheckLayer: Matching layer

        Raises:
            ValueError: If the value names no layer
        """
        if isinstance(value, cls):
            return value

        normalized = str(value).strip().lower()
        for layer in cls:
            if normalized in (layer.value, layer.name.lower()):
                return layer

        raise ValueError(f"Unknown check layer: {value!r}")


class FileDescriptor(Protocol):
    """What the barrier needs to know about an upload. FastAPI's UploadFile satisfies it."""
    filename: Optional[str]
    content_type: Optional[str]
    size: Optional[int]


@dataclass
class UploadedFile:
    """Plain file descriptor for hosts that do not hand over an UploadFile."""
    filename: Optional[str] = None
    content_type: Optional[str] = None
    size: Optional[int] = None


@dataclass
class FilePolicy:
    """Admission policy a file is evaluated against."""
    allowed_extensions: Optional[str] = None  # Comma separated, e.g. "txt,pdf,docx"
    allowed_content_types: Optional[str] = None  # Comma separated, e.g. "text/plain,application/pdf"
    max_single_file_size: Optional[int] = None  # Bytes
    layers: Tuple[CheckLayer, ...] = (CheckLayer.ALL_LAYERS,)

    def __post_init__(self):
        # Names from callers become members here; unknown names raise ValueError
        self.layers = normalize_layers(self.layers)


@dataclass
class ValidationRequest:
    """Everything a single evaluation looks at."""
    file_name: Optional[str]
    content_type: Optional[str]
    size: Optional[int]
    allowed_extensions: Optional[str]
    allowed_content_types: Optional[str]
    max_single_file_size: Optional[int]
    layers: Tuple[CheckLayer, ...] = field(default_factory=tuple)

    @classmethod
    def build(cls, file: Optional[FileDescriptor], policy: FilePolicy) -> "ValidationRequest":
        """Flatten a file descriptor and a policy into one request."""
        return cls(
            file_name=getattr(file, "filename", None),
            content_type=getattr(file, "content_type", None),
            size=getattr(file, "size", None),
            allowed_extensions=policy.allowed_extensions,
            allowed_content_types=policy.allowed_content_types,
            max_single_file_size=policy.max_single_file_size,
            layers=tuple(policy.layers or ()),
        )


@dataclass
class ValidationOutcome:
    """Result of evaluating a file: allowed, or rejected with a reason."""
    is_allowed: bool = True
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None

    @classmethod
    def reject(cls, error_kind: ErrorKind, error_message: str) -> "ValidationOutcome":
        outcome = cls()
        outcome.set_is_allowed(False, error_kind)
        outcome.set_error_message(error_message)
        return outcome

    def set_is_allowed(self, is_allowed: bool, error_kind: Optional[ErrorKind]) -> None:
        self.is_allowed = is_allowed
        self.error_kind = error_kind

    def set_error_message(self, error_message: Optional[str]) -> None:
        self.error_message = error_message

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON error bodies and logs."""
        return {
            "is_allowed": self.is_allowed,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "error_message": self.error_message,
        }


LayerSpec = Union[CheckLayer, str, Iterable[Union[CheckLayer, str]], None]


def normalize_layers(layers: LayerSpec) -> Tuple[CheckLayer, ...]:
    """Parse layer names from configuration or callers into CheckLayer values."""
    if not layers:
        return ()
    if isinstance(layers, (CheckLayer, str)):
        # A single layer, not a sequence of characters
        return (CheckLayer.parse(layers),)
    return tuple(CheckLayer.parse(layer) for layer in layers)
