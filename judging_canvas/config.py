"""judging-canvas configuration -- log level and format, read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class CanvasConfig:
    """Top-level runtime configuration for the jcanvas command."""

    log_level: str = field(
        default_factory=lambda: os.environ.get("JCANVAS_LOG_LEVEL", "WARNING")
    )
    log_format: str = field(
        default_factory=lambda: os.environ.get("JCANVAS_LOG_FORMAT", DEFAULT_LOG_FORMAT)
    )

    def effective_level(self, verbose: bool = False) -> int:
        """Resolve the numeric log level. ``verbose`` always wins with DEBUG.

        Raises:
            ValueError: If ``log_level`` is not a known level name.
        """
        if verbose:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level.strip().upper())
        if not isinstance(level, int):
            raise ValueError(
                f"Invalid log level '{self.log_level}'. "
                f"Expected one of DEBUG, INFO, WARNING, ERROR, CRITICAL."
            )
        return level

    def configure_logging(self, verbose: bool = False) -> None:
        """Configure the root logger for command-line use."""
        logging.basicConfig(
            level=self.effective_level(verbose),
            format=self.log_format,
            datefmt=DEFAULT_DATE_FORMAT,
            force=True,
        )


# Singleton for convenience
_config: CanvasConfig | None = None


def get_config() -> CanvasConfig:
    """Get or create the global configuration."""
    global _config
    if _config is None:
        _config = CanvasConfig()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
