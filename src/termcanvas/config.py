"""Process-wide configuration with environment overrides.

Defaults can be overridden with ``TERMCANVAS_*`` environment variables.
Invalid values are logged and ignored.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ENV_DEFAULT_WIDTH = "TERMCANVAS_DEFAULT_WIDTH"
ENV_DEFAULT_HEIGHT = "TERMCANVAS_DEFAULT_HEIGHT"
ENV_POOL_MAX_SIZE = "TERMCANVAS_POOL_MAX_SIZE"


@dataclass
class Config:
    """Compositor configuration."""

    # Used when a Buffer is created with non-positive dimensions
    default_width: int = 80
    default_height: int = 24
    # Upper bound on idle objects kept by each pool
    pool_max_size: int = 64

    @classmethod
    def from_env(cls) -> Config:
        defaults = cls()
        return cls(
            default_width=_env_int(ENV_DEFAULT_WIDTH, defaults.default_width),
            default_height=_env_int(ENV_DEFAULT_HEIGHT, defaults.default_height),
            pool_max_size=_env_int(ENV_POOL_MAX_SIZE, defaults.pool_max_size),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", name, raw)
        return default
    return value


_global_config: Config | None = None


def get_config() -> Config:
    global _global_config
    if _global_config is None:
        _global_config = Config.from_env()
    return _global_config


def set_config(config: Config | None) -> None:
    """Replace the process-wide config. ``None`` reloads from the environment on next use."""
    global _global_config
    _global_config = config
