"""
PDF Generator

Facade composing executable discovery, switch encoding and process execution.

    >>> generator = PdfGenerator()
    >>> result = generator.render_to_bytes(
    ...     "https://example.com/", RenderOptions(orientation=PageOrientation.LANDSCAPE)
    ... )
    >>> if result.success:
    ...     Path("example.pdf").write_bytes(result.pdf_bytes)

Both render methods return a RenderResult instead of raising: expected
failures (ExecutableNotFoundError, RenderFailedError) are carried in
RenderResult.error so callers can branch on the error type.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from wkpdf.contexts.configuration import RenderOptions, switch_arguments
from wkpdf.contexts.discovery import locate_executable
from wkpdf.contexts.rendering.logger import _log_error, log_render_result, log_render_start
from wkpdf.contexts.rendering.runner import format_command_line, run_wkhtmltopdf
from wkpdf.exceptions import ExecutableNotFoundError, RenderFailedError, WkPdfError

QUIET_FLAG = "-q"

# wkhtmltopdf destination meaning "write the PDF to standard output"
STDOUT_DESTINATION = "-"


@dataclass
class RenderResult:
    """
    Result of a wkhtmltopdf render.

    Attributes:
        success: Whether the render produced output
        pdf_bytes: Captured PDF (render_to_bytes only, None on failure)
        output_path: Written PDF path (render_to_file only, None on failure)
        error: ExecutableNotFoundError or RenderFailedError when success is False
        stderr: Diagnostic text written by wkhtmltopdf
        returncode: wkhtmltopdf exit status (informational, None if never run)
        command: Argument vector used to launch wkhtmltopdf
        elapsed_time: Wall-clock duration in seconds
    """

    success: bool
    pdf_bytes: Optional[bytes] = None
    output_path: Optional[Path] = None
    error: Optional[WkPdfError] = None
    stderr: str = ""
    returncode: Optional[int] = None
    command: List[str] = field(default_factory=list)
    elapsed_time: float = 0.0

    def unwrap(self) -> Union[bytes, Path]:
        """Return the PDF bytes (or written path), raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        if self.output_path is not None:
            return self.output_path
        return self.pdf_bytes


class PdfGenerator:
    """
    Wrapper for the wkhtmltopdf executable.

    The executable path is resolved lazily on first use and memoized for the
    lifetime of the instance. An explicit path always wins and is used as
    given, without an existence check. Setting executable_path to None clears
    it, so the next render searches again.

    Instances hold no per-call state; concurrent renders on one instance each
    run their own process. A concurrent first use may search twice, which
    yields the same path.

    Args:
        executable_path: Explicit wkhtmltopdf path (default: discover)
        verbose: Log wkhtmltopdf stderr even when the render succeeds
    """

    def __init__(
        self,
        executable_path: Optional[Union[Path, str]] = None,
        verbose: bool = False,
    ):
        self._executable_path: Optional[Path] = (
            Path(executable_path) if executable_path else None
        )
        self.verbose = verbose

    @property
    def executable_path(self) -> Path:
        """wkhtmltopdf path: the explicit override, else the memoized search result."""
        if self._executable_path is None:
            self._executable_path = locate_executable()
        return self._executable_path

    @executable_path.setter
    def executable_path(self, value: Optional[Union[Path, str]]) -> None:
        self._executable_path = Path(value) if value else None

    @staticmethod
    def build_command(
        url: str,
        destination: Union[Path, str] = STDOUT_DESTINATION,
        options: Optional[RenderOptions] = None,
    ) -> List[str]:
        """
        Build the wkhtmltopdf arguments (without the executable).

        Layout: -q [switches...] <url> <destination>
        """
        return [QUIET_FLAG, *switch_arguments(options), url, str(destination)]

    def render_to_bytes(self, url: str, options: Optional[RenderOptions] = None) -> RenderResult:
        """
        Render a URL to PDF bytes.

        Args:
            url: Page URL (or local file path) to render; wkhtmltopdf runs in
                its own directory, so pass local files as absolute paths
            options: Render options (default: all defaults)

        Returns:
            RenderResult with pdf_bytes on success
        """
        return self._render(url, STDOUT_DESTINATION, options)

    def render_to_file(
        self,
        url: str,
        output_path: Union[Path, str],
        options: Optional[RenderOptions] = None,
    ) -> RenderResult:
        """
        Render a URL to a PDF file written directly by wkhtmltopdf.

        Unlike render_to_bytes, success is decided by the exit status: stdout
        is always empty here and wkhtmltopdf warns on stderr even when it
        succeeds. The output file is never opened or checked here.

        wkhtmltopdf runs in its own directory, so a relative output_path is
        made absolute against the caller's working directory first.

        Args:
            url: Page URL (or local file path) to render
            output_path: Destination PDF path
            options: Render options (default: all defaults)

        Returns:
            RenderResult with output_path on success
        """
        return self._render(url, Path(output_path).absolute(), options)

    def _render(
        self,
        url: str,
        destination: Union[Path, str],
        options: Optional[RenderOptions],
    ) -> RenderResult:
        to_stdout = destination == STDOUT_DESTINATION
        start_time = time.time()

        try:
            executable = self.executable_path
        except ExecutableNotFoundError as e:
            _log_error(str(e))
            return RenderResult(success=False, error=e, elapsed_time=time.time() - start_time)

        arguments = self.build_command(url, destination, options)
        log_render_start(url, str(destination), format_command_line([str(executable), *arguments]))

        try:
            output = run_wkhtmltopdf(executable, arguments, expect_stdout=to_stdout)
        except RenderFailedError as e:
            result = RenderResult(
                success=False,
                error=e,
                stderr=e.stderr,
                returncode=e.returncode,
                command=e.command,
                elapsed_time=time.time() - start_time,
            )
        else:
            result = RenderResult(
                success=True,
                pdf_bytes=output.stdout if to_stdout else None,
                output_path=None if to_stdout else Path(destination),
                stderr=output.stderr,
                returncode=output.returncode,
                command=output.command,
                elapsed_time=time.time() - start_time,
            )

        log_render_result(url, result, verbose=self.verbose)
        return result
