"""
Rendering Context

Responsibilities:
- Runs wkhtmltopdf with an argument vector and captures its output
- Decides success from captured stdout/stderr
- Exposes the PdfGenerator facade (render to bytes, render to file)

Owns: Process execution, executable path memoization, render results
Never: Produces PDF content itself (wkhtmltopdf does)
"""

from wkpdf.contexts.rendering.generator import PdfGenerator, RenderResult
from wkpdf.contexts.rendering.runner import ProcessOutput, format_command_line, run_wkhtmltopdf
from wkpdf.exceptions import ExecutableNotFoundError, RenderFailedError, WkPdfError

__all__ = [
    "PdfGenerator",
    "RenderResult",
    "ProcessOutput",
    "run_wkhtmltopdf",
    "format_command_line",
    "WkPdfError",
    "ExecutableNotFoundError",
    "RenderFailedError",
]
