"""
Shared utilities for WKPDF.

Common functionality used across contexts:
- Logger setup with provenance
- Timestamps for log directories
- PDF inspection
"""

from wkpdf.utils.pdf_processing import page_count
from wkpdf.utils.timestamp import now

__all__ = ["page_count", "now"]
