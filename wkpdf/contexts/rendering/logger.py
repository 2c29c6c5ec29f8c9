"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from loguru import logger

from wkpdf.utils.logger import setup_logger as _setup_logger

if TYPE_CHECKING:
    from wkpdf.contexts.rendering.generator import RenderResult

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, executable: Optional[Path] = None) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        executable: wkhtmltopdf path recorded in the provenance header

    Returns:
        Path to log file
    """
    extra = {"wkhtmltopdf": executable} if executable else None
    return _setup_logger(context_name="render", log_dir=log_dir, extra_provenance=extra)


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(url: str, destination: str, command_line: str) -> None:
    """Log start of a render with context."""
    _log_info(f"Rendering: {url}")
    _log_debug(f"  Destination: {'stdout' if destination == '-' else destination}")
    _log_debug(f"  Command: {command_line}")


def log_render_result(
    url: str,
    result: "RenderResult",
    verbose: bool = False,
) -> None:
    """
    Log render result with diagnostics.

    Args:
        url: Rendered URL
        result: RenderResult from PdfGenerator
        verbose: Dump wkhtmltopdf stderr even on success (default: False)
    """
    if result.success:
        size = f"{len(result.pdf_bytes)} bytes" if result.pdf_bytes is not None else "file"
        _log_success(f"{url}: {size} ({result.elapsed_time:.2f}s)")
        if result.output_path:
            _log_debug(f"  PDF: {result.output_path}")
        if result.returncode:
            _log_warning(f"wkhtmltopdf exited with status {result.returncode} despite producing output")
    else:
        _log_error(f"Render failed: {url} ({result.elapsed_time:.2f}s)")
        _log_error(f"  {type(result.error).__name__}: {str(result.error) or '<no diagnostic output>'}")

    # opt(raw=True) keeps multi-line stderr free of per-line timestamp/level
    if (verbose or not result.success) and result.stderr:
        logger.opt(raw=True).debug(
            f"\n{'=' * 80}\nWKHTMLTOPDF STDERR:\n{'=' * 80}\n{result.stderr}\n"
        )


def format_stderr_lines(stderr: str, limit: int = 5) -> List[str]:
    """First non-empty stderr lines, for compact error summaries."""
    lines = [line.strip() for line in stderr.splitlines() if line.strip()]
    if len(lines) > limit:
        return lines[:limit] + [f"... and {len(lines) - limit} more lines"]
    return lines
