"""PDF inspection helpers for rendered output."""

from io import BytesIO
from pathlib import Path
from typing import Optional, Union

from PyPDF2 import PdfReader


def page_count(source: Union[Path, str, bytes]) -> Optional[int]:
    """Get page count from a PDF file or in-memory PDF bytes, or None if unreadable."""
    try:
        if isinstance(source, bytes):
            reader = PdfReader(BytesIO(source))
        else:
            reader = PdfReader(str(source))
        return len(reader.pages)
    except Exception:
        return None
