"""Core configuration and utilities."""

from .config import BarrierConfig, create_file_barrier, get_config, setup_logging

__all__ = [
    "BarrierConfig",
    "create_file_barrier",
    "get_config",
    "setup_logging",
]
