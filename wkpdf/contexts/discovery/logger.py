"""
Discovery context logger.

Provides logging interface for discovery context with automatic [locate] prefix.
All discovery modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

from wkpdf.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[locate]"


def setup_discovery_logger(log_dir: Path) -> Path:
    """Setup logger for discovery context (used by the `locate` CLI command)."""
    return _setup_logger(context_name="locate", log_dir=log_dir)


def _log_info(message: str) -> None:
    """Log info message with [locate] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [locate] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
