"""
Render options for wkhtmltopdf.

Each field maps to one wkhtmltopdf switch. Only fields that differ from their
default are passed to the executable (see switches.py).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PageOrientation(str, Enum):
    """Page orientation, valued by the symbolic name wkhtmltopdf expects."""

    PORTRAIT = "Portrait"
    LANDSCAPE = "Landscape"


@dataclass(frozen=True)
class RenderOptions:
    """
    Settings mapped to wkhtmltopdf switches.

    Pure data: no validation is performed here. Out-of-range values such as
    negative margins are forwarded verbatim and left to wkhtmltopdf to reject.
    Use dataclasses.replace() to derive a variant.

    Attributes:
        username: HTTP authentication username (--username)
        password: HTTP authentication password (--password)
        bottom_margin: Bottom margin in mm (-B)
        left_margin: Left margin in mm (-L)
        right_margin: Right margin in mm (-R)
        top_margin: Top margin in mm (-T)
        orientation: Page orientation (--orientation)
        use_print_media_type: Use the print media type instead of screen
            (--print-media-type / --no-print-media-type)
        disable_smart_shrinking: Disable the intelligent shrinking strategy
            (--disable-smart-shrinking / --enable-smart-shrinking)
        javascript_delay_ms: Wait for javascript to finish, in ms (--javascript-delay)
    """

    username: Optional[str] = None
    password: Optional[str] = None
    bottom_margin: int = 10
    left_margin: int = 10
    right_margin: int = 10
    top_margin: int = 10
    orientation: PageOrientation = PageOrientation.PORTRAIT
    use_print_media_type: bool = False
    disable_smart_shrinking: bool = False
    javascript_delay_ms: int = 200


# Reference instance for default suppression, compared by value
DEFAULT_OPTIONS = RenderOptions()
