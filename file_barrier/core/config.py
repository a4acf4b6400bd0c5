"""Core configuration and logging setup."""

import logging
import os
from typing import Optional, Tuple

from dotenv import load_dotenv

from file_barrier.models.errors import ConfigurationError
from file_barrier.models.validation import CheckLayer, FilePolicy, normalize_layers
from file_barrier.validation.validators import FileBarrier

# Load environment variables
load_dotenv()

# File policy configuration constants
DEFAULT_ALLOWED_EXTENSIONS = "txt,pdf,doc,docx,xls,xlsx,csv,png,jpg,jpeg,gif,webp,mp3,mp4,wav,zip"
DEFAULT_ALLOWED_CONTENT_TYPES = ",".join(
    [
        "text/plain",
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/vnd.ms-excel",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "text/csv",
        "image/png",
        "image/jpeg",
        "image/gif",
        "image/webp",
        "audio/mpeg",
        "video/mp4",
        "audio/wav",
        "application/zip",
        "application/x-zip-compressed",
    ]
)
DEFAULT_MAX_FILE_SIZE = 50 * 1024 * 1024  # 50MB default
DEFAULT_LAYERS = "all"
DEFAULT_LOG_LEVEL = "INFO"


class BarrierConfig:
    """File barrier configuration settings."""

    def __init__(self):
        self.allowed_extensions = os.getenv("FILE_BARRIER_ALLOWED_EXTENSIONS", DEFAULT_ALLOWED_EXTENSIONS)
        self.allowed_content_types = os.getenv("FILE_BARRIER_ALLOWED_CONTENT_TYPES", DEFAULT_ALLOWED_CONTENT_TYPES)
        self.max_file_size = self._parse_size(os.getenv("FILE_BARRIER_MAX_FILE_SIZE", str(DEFAULT_MAX_FILE_SIZE)))
        self.layers = self._parse_layers(os.getenv("FILE_BARRIER_LAYERS", DEFAULT_LAYERS))
        self.log_level = os.getenv("FILE_BARRIER_LOG_LEVEL", DEFAULT_LOG_LEVEL)

    def _parse_size(self, size_str: str) -> Optional[int]:
        """Parse the size limit; an empty value disables the limit."""
        if not size_str.strip():
            return None
        try:
            size = int(size_str)
        except ValueError:
            raise ConfigurationError(f"FILE_BARRIER_MAX_FILE_SIZE must be an integer, got {size_str!r}")
        if size < 0:
            raise ConfigurationError(f"FILE_BARRIER_MAX_FILE_SIZE must not be negative, got {size}")
        return size

    def _parse_layers(self, layers_str: str) -> Tuple[CheckLayer, ...]:
        """Parse comma-separated check layers from environment variable."""
        names = [name.strip() for name in layers_str.split(",") if name.strip()]
        if not names:
            raise ConfigurationError("FILE_BARRIER_LAYERS must name at least one check layer")
        try:
            return normalize_layers(names)
        except ValueError as e:
            raise ConfigurationError(f"Invalid FILE_BARRIER_LAYERS: {e}")

    def get_file_policy(self) -> FilePolicy:
        """Get the file admission policy."""
        return FilePolicy(
            allowed_extensions=self.allowed_extensions,
            allowed_content_types=self.allowed_content_types,
            max_single_file_size=self.max_file_size,
            layers=self.layers,
        )


def create_file_barrier(config: Optional[BarrierConfig] = None) -> FileBarrier:
    """Create file barrier instance with configuration."""
    config = config or get_config()
    return FileBarrier(config.get_file_policy())


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure logging for hosts that do not configure it themselves."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def get_config() -> BarrierConfig:
    """Get a configuration instance built from the current environment."""
    return BarrierConfig()
