"""
Discovery Context

Responsibilities:
- Locates the wkhtmltopdf executable on the host filesystem
- Reports every probed location when nothing is found

Owns: Executable search order
Never: Launches processes or caches results (PdfGenerator memoizes)
"""

from wkpdf.contexts.discovery.locator import (
    DEFAULT_EXECUTABLE_NAME,
    application_dir,
    iter_candidate_paths,
    locate_executable,
)

__all__ = [
    "DEFAULT_EXECUTABLE_NAME",
    "application_dir",
    "iter_candidate_paths",
    "locate_executable",
]
