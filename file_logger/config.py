"""Configuration module — frozen dataclass from environment variables and optional YAML."""

import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    cache_dir: str | None = None
    log_filename: str = "errors.log"
    max_messages: int = 30
    max_file_size_bytes: int = 8 * 1024 * 512  # 4 MB

    def __post_init__(self):
        if self.max_messages <= 0:
            raise ValueError(f"max_messages must be positive, got {self.max_messages}")
        if self.max_file_size_bytes <= 0:
            raise ValueError(
                f"max_file_size_bytes must be positive, got {self.max_file_size_bytes}"
            )


def load_yaml_config(path: str | None) -> dict:
    """Read logger settings from a YAML mapping.

    A missing path or file yields {}. A document that is not a mapping
    (a list, a bare scalar) raises ValueError.
    """
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.warning("Logger config %s not found, using env and defaults", path)
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Logger config {path} must be a mapping, got {type(data).__name__}"
        )
    logger.info("Loaded logger settings from %s: %s", path, ", ".join(str(k) for k in data))
    return data


def load_config(yaml_data: dict | None = None) -> Config:
    """Build Config from env vars, falling back to YAML data, then defaults."""
    yaml_data = yaml_data or {}

    def _get(env_key, yaml_key, default):
        value = os.environ.get(env_key)
        if value is not None:
            return value
        return yaml_data.get(yaml_key, default)

    return Config(
        cache_dir=_get("LOG_CACHE_DIR", "cache_dir", Config.cache_dir) or None,
        log_filename=_get("LOG_FILENAME", "log_filename", Config.log_filename),
        max_messages=int(_get("MAX_MESSAGES", "max_messages", Config.max_messages)),
        max_file_size_bytes=int(
            _get("MAX_FILE_SIZE_BYTES", "max_file_size_bytes", Config.max_file_size_bytes)
        ),
    )
