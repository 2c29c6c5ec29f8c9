"""
WKPDF - a thin Python wrapper around the wkhtmltopdf executable

Renders a URL to PDF by invoking wkhtmltopdf as a subprocess and capturing
its output.

Architecture:
- Configuration Context: render options, switch encoding, named presets
- Discovery Context: locating the wkhtmltopdf executable on the host
- Rendering Context: process execution and the PdfGenerator facade
"""

from wkpdf.contexts.configuration import PageOrientation, RenderOptions
from wkpdf.contexts.rendering import (
    ExecutableNotFoundError,
    PdfGenerator,
    RenderFailedError,
    RenderResult,
    WkPdfError,
)

__version__ = "0.1.0"

__all__ = [
    "PageOrientation",
    "RenderOptions",
    "PdfGenerator",
    "RenderResult",
    "WkPdfError",
    "ExecutableNotFoundError",
    "RenderFailedError",
]
