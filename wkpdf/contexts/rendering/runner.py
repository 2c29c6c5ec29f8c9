"""
wkhtmltopdf Process Runner

Launches wkhtmltopdf with an argument vector (no shell), captures stdout as
bytes and stderr as text, and decides success from the captured streams.
When the PDF goes to stdout, the exit status is recorded but never used to
decide success.

No timeout is enforced: a hung wkhtmltopdf blocks the caller until it exits.
"""

import os
import shlex
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Union

from wkpdf.contexts.rendering.logger import _log_debug
from wkpdf.exceptions import RenderFailedError

# Suppress the console window wkhtmltopdf would otherwise open on Windows
CREATION_FLAGS = getattr(subprocess, "CREATE_NO_WINDOW", 0)

# Switches whose values must not appear in logs
SECRET_SWITCHES = {"--password"}


@dataclass
class ProcessOutput:
    """
    Captured output of a completed wkhtmltopdf run.

    Attributes:
        stdout: Raw standard output (the PDF when writing to stdout)
        stderr: Standard error decoded as UTF-8 (invalid bytes replaced)
        returncode: Process exit status (decides success only for file destinations)
        command: Argument vector used to launch the process
    """

    stdout: bytes
    stderr: str
    returncode: int
    command: List[str] = field(default_factory=list)


def format_command_line(command: Sequence[str], redact: bool = True) -> str:
    """
    Render an argument vector as a single shell-style line for display.

    Args:
        command: Argument vector
        redact: Replace secret switch values (e.g., --password) with ***

    Returns:
        Quoted command line, for logs only (never executed)
    """
    shown = []
    mask_next = False
    for arg in command:
        shown.append("***" if mask_next else str(arg))
        mask_next = redact and arg in SECRET_SWITCHES
    return shlex.join(shown)


def run_wkhtmltopdf(
    executable: Union[Path, str],
    arguments: Sequence[str],
    expect_stdout: bool = True,
) -> ProcessOutput:
    """
    Run wkhtmltopdf and capture its output.

    The process runs in the executable's own directory with stdin, stdout and
    stderr piped. Both output streams are drained concurrently before the
    process is reaped, so a full stderr pipe cannot deadlock the run.

    Success rules:
        expect_stdout=True: stdout must be non-empty; stderr and exit status
            are ignored. Empty stdout fails with the stderr text as message
            (possibly an empty message).
        expect_stdout=False: wkhtmltopdf writes the output file itself and
            stdout stays empty, so the exit status decides; a non-zero status
            fails with the stderr text as message.

    Args:
        executable: Path to wkhtmltopdf, used as given
        arguments: Arguments after the executable
        expect_stdout: Whether the PDF is expected on stdout

    Returns:
        ProcessOutput with the captured streams

    Raises:
        RenderFailedError: If the process could not be started or produced no output
    """
    exe_path = Path(executable)
    # Relative executables are resolved before changing cwd
    if exe_path.parent != Path("."):
        working_dir = exe_path.parent
        program = os.path.abspath(exe_path)
    else:
        working_dir = None
        program = str(exe_path)

    command = [program, *[str(arg) for arg in arguments]]
    _log_debug(f"Launching: {format_command_line(command)}")
    if working_dir is not None:
        _log_debug(f"  Working directory: {working_dir}")

    try:
        result = subprocess.run(
            command,
            cwd=working_dir,
            stdin=subprocess.PIPE,
            capture_output=True,
            creationflags=CREATION_FLAGS,
        )
    except OSError as e:
        raise RenderFailedError(f"Failed to start {exe_path}: {e}", command=command) from e

    stderr = result.stderr.decode("utf-8", errors="replace")
    _log_debug(
        f"Exited with status {result.returncode}: "
        f"{len(result.stdout)} bytes stdout, {len(stderr)} chars stderr"
    )

    if expect_stdout:
        failed = len(result.stdout) == 0
    else:
        failed = result.returncode != 0

    if failed:
        raise RenderFailedError(stderr, returncode=result.returncode, command=command)

    return ProcessOutput(
        stdout=result.stdout,
        stderr=stderr,
        returncode=result.returncode,
        command=command,
    )
