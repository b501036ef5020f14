"""
Centralized logging for the xmrg package.

Usage:
    from xmrg.log import get_logger
    logger = get_logger(__name__)

The level comes from XMRG_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR, CRITICAL).
"""

from __future__ import annotations

import logging
from typing import Optional

from xmrg.config import LOG_LEVEL

_ROOT = "xmrg"

_LEVEL_NAMES = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def resolve_level(value: Optional[str]) -> int:
    if not value:
        return logging.INFO
    return _LEVEL_NAMES.get(value.strip().upper(), logging.INFO)


def _configure_root_once() -> None:
    root = logging.getLogger(_ROOT)
    if root.handlers:
        return
    level = resolve_level(LOG_LEVEL)
    root.setLevel(level)
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt="%(levelname)s | %(name)s | %(message)s"))
    root.addHandler(handler)
    root.propagate = False


def set_level(value: str) -> None:
    """Change the package log level at runtime (used by the CLI)."""
    _configure_root_once()
    level = resolve_level(value)
    root = logging.getLogger(_ROOT)
    root.setLevel(level)
    for h in root.handlers:
        h.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a child of the package logger, configuring it on first use."""
    _configure_root_once()
    pkg_logger = logging.getLogger(_ROOT)
    if not name or name == _ROOT:
        return pkg_logger
    if name.startswith(_ROOT + "."):
        name = name[len(_ROOT) + 1:]
    return pkg_logger.getChild(name)
