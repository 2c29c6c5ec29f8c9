"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers live in contexts/{context}/logger.py.
Library code only emits messages; sinks are configured by entry points (CLI).
"""

import sys
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)

# Command-line flags whose values are masked in provenance output
SECRET_FLAGS = {"--password"}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
    level_colors: Optional[Dict[str, str]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Configure loguru for a context with provenance tracking.

    Sets up dual output (file + console) and logs execution provenance
    (script, command, working directory, Python version, etc.).

    Console output goes to stderr so that rendered bytes written to stdout
    are never interleaved with log lines.

    Args:
        context_name: Context identifier (e.g., "render", "locate")
        log_dir: Directory for this logging session
        extra_provenance: Additional key-value pairs for provenance header
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})
        console_level: Minimum level shown on the console

    Returns:
        Path to log file

    Example:
        from wkpdf.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="render",
            log_dir=Path("outs/logs/render_20251114_123456"),
            extra_provenance={"wkhtmltopdf": "/usr/bin/wkhtmltopdf"}
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    # Remove default logger
    logger.remove()

    colors = {**LEVEL_COLORS, **(level_colors or {})}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    # File handler captures everything
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[Dict[str, object]] = None) -> None:
    """
    Log execution provenance to current logger.

    Logs standard context (script, command, working directory, Python version)
    plus any additional context provided.

    Args:
        extra_context: Additional key-value pairs to log
    """
    logger.info("=" * 80)
    logger.info(f"Script: {sys.argv[0]}")
    logger.info(f"Command: {' '.join(redact_argv(sys.argv))}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.info(f"{key}: {value}")

    logger.info("=" * 80)


def redact_argv(argv: List[str]) -> List[str]:
    """Mask values following secret flags (both "--flag value" and "--flag=value")."""
    redacted = []
    mask_next = False
    for arg in argv:
        if mask_next:
            redacted.append("***")
            mask_next = False
        elif arg in SECRET_FLAGS:
            redacted.append(arg)
            mask_next = True
        elif "=" in arg and arg.partition("=")[0] in SECRET_FLAGS:
            redacted.append(f"{arg.partition('=')[0]}=***")
        else:
            redacted.append(arg)
    return redacted
