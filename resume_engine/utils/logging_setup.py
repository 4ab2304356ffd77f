"""
Logging setup for command-line use of the engine.
"""

import logging
import sys
from typing import Optional

from .config import Config


def configure_logging(config: Config, level: Optional[str] = None) -> None:
    """
    Install a single stream handler on the root logger.

    Args:
        config: Supplies the "logging.level" and "logging.format" settings
        level: Level name that overrides the configured one
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        config.get("logging.format", "%(levelname)s %(name)s: %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
    root.setLevel((level or config.get_log_level()).upper())
