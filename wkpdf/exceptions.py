"""Exceptions shared across WKPDF contexts."""

from typing import List, Optional


class WkPdfError(Exception):
    """Base class for errors raised while producing a PDF."""


class ExecutableNotFoundError(WkPdfError, FileNotFoundError):
    """
    Exception raised when no wkhtmltopdf executable could be located.

    This is a configuration error: the caller must supply the executable path
    explicitly. Retrying without changing configuration will not help.

    Attributes:
        searched: Candidate paths that were probed, in search order
    """

    def __init__(self, message: str, searched: Optional[List[str]] = None):
        self.message = message
        self.searched = list(searched or [])
        super().__init__(message)


class RenderFailedError(WkPdfError):
    """
    Exception raised when wkhtmltopdf produced no output.

    The message is the text wkhtmltopdf wrote to stderr, which may be empty.

    Attributes:
        stderr: Captured standard error text
        returncode: Process exit status (None if the process never started)
        command: Argument vector used to launch the process
    """

    def __init__(
        self,
        stderr: str,
        returncode: Optional[int] = None,
        command: Optional[List[str]] = None,
    ):
        self.stderr = stderr
        self.returncode = returncode
        self.command = list(command or [])
        super().__init__(stderr)
