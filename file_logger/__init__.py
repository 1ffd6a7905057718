"""Buffered, size-capped text logger for host applications."""

from file_logger.config import Config, load_config, load_yaml_config
from file_logger.logger import (
    MAX_FILE_SIZE,
    MAX_MESSAGES,
    FileLogger,
    get_cache_logger,
    get_logger,
)

__all__ = [
    "Config",
    "FileLogger",
    "MAX_FILE_SIZE",
    "MAX_MESSAGES",
    "get_cache_logger",
    "get_logger",
    "load_config",
    "load_yaml_config",
]
