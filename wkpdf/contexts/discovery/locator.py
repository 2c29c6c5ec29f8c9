"""
Executable Locator

Best-effort search for the wkhtmltopdf executable in the places it is
usually installed. The first existing candidate wins; candidates are
generated lazily so nothing after a hit is probed.

Search order:
    1. <application dir>/<exe>
    2. <application dir>/wkhtmltopdf/<exe>
    3. $ProgramW6432/wkhtmltopdf/bin/<exe>
    4. $ProgramFiles(x86)/wkhtmltopdf/bin/<exe>
    5. Program Files/wkhtmltopdf/bin/<exe>          (Windows only)
    6. Program Files (x86)/wkhtmltopdf/bin/<exe>    (Windows only)
    7. <exe> on the system PATH

An explicit executable path set on PdfGenerator bypasses this search.
"""

import os
import shutil
import sys
from pathlib import Path
from typing import Iterator

from wkpdf.contexts.discovery.logger import _log_debug, _log_info
from wkpdf.exceptions import ExecutableNotFoundError

TOOL_NAME = "wkhtmltopdf"
DEFAULT_EXECUTABLE_NAME = f"{TOOL_NAME}.exe" if os.name == "nt" else TOOL_NAME

# Environment variables naming machine-wide program directories (64-bit, then 32-bit)
PROGRAM_FILES_64_ENV = "ProgramW6432"
PROGRAM_FILES_32_ENV = "ProgramFiles(x86)"

PROGRAM_FILES_DIR = r"C:\Program Files"
PROGRAM_FILES_X86_DIR = r"C:\Program Files (x86)"


def application_dir() -> Path:
    """Directory of the running program (frozen binary, else main script, else cwd)."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent

    main_script = sys.argv[0] if sys.argv else ""
    if main_script:
        return Path(main_script).resolve().parent

    return Path.cwd()


def _installed_path(program_dir: str, exe_name: str) -> Path:
    """Conventional installer layout: <program dir>/wkhtmltopdf/bin/<exe>."""
    return Path(program_dir) / TOOL_NAME / "bin" / exe_name


def iter_candidate_paths(exe_name: str = DEFAULT_EXECUTABLE_NAME) -> Iterator[Path]:
    """
    Yield candidate executable paths in search order.

    Environment variables are read at iteration time, so changes made after
    import are honored.
    """
    app_dir = application_dir()
    yield app_dir / exe_name
    yield app_dir / TOOL_NAME / exe_name

    for env_var in (PROGRAM_FILES_64_ENV, PROGRAM_FILES_32_ENV):
        program_dir = os.environ.get(env_var)
        if program_dir:
            yield _installed_path(program_dir, exe_name)

    if os.name == "nt":
        yield _installed_path(os.environ.get("ProgramFiles") or PROGRAM_FILES_DIR, exe_name)
        yield _installed_path(PROGRAM_FILES_X86_DIR, exe_name)

    on_path = shutil.which(exe_name)
    if on_path:
        yield Path(on_path)


def _is_candidate(path: Path) -> bool:
    """Accept a candidate only if it exists as a regular file."""
    return path.is_file()


def locate_executable(exe_name: str = DEFAULT_EXECUTABLE_NAME) -> Path:
    """
    Find the wkhtmltopdf executable.

    Args:
        exe_name: Executable file name (default: platform-specific wkhtmltopdf name)

    Returns:
        Absolute path to the first existing candidate

    Raises:
        ExecutableNotFoundError: If no candidate exists
    """
    searched = []
    for candidate in iter_candidate_paths(exe_name):
        searched.append(str(candidate))
        _log_debug(f"Probing {candidate}")
        if _is_candidate(candidate):
            resolved = candidate.resolve()
            _log_info(f"Found {TOOL_NAME}: {resolved}")
            return resolved

    raise ExecutableNotFoundError(
        f"Unable to locate {TOOL_NAME} executable. "
        "Please specify the full path to the executable explicitly.",
        searched=searched,
    )
