# -*- coding: utf-8 -*-
"""
Shared configuration for maxdefense: logging setup and run defaults.
"""

from __future__ import annotations
import logging
from typing import Optional

# Logging configuration
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

# Run defaults (mirrors the classic armor.csv experiment)
DEFAULT_BUDGET = 500
DEFAULT_MAX_ITEMS = 70
DEFAULT_MIN_DEFENSE = 1.0

# Tables/lists larger than this in either dimension are not rendered
MAX_PRINTABLE_DIM = 250


def configure_logging(level: Optional[str] = None) -> None:
    """Apply LOGGING_CONFIG to the root logger. Scripts call this once at startup."""
    config = dict(LOGGING_CONFIG)
    if level is not None:
        config["level"] = level
    logging.basicConfig(**config)
