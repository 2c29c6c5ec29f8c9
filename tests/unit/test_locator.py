"""Unit tests for the wkhtmltopdf executable locator."""

from pathlib import Path

import pytest

from wkpdf.contexts.discovery import locator
from wkpdf.contexts.discovery.locator import (
    DEFAULT_EXECUTABLE_NAME,
    iter_candidate_paths,
    locate_executable,
)
from wkpdf.exceptions import ExecutableNotFoundError

EXE = DEFAULT_EXECUTABLE_NAME


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


@pytest.fixture
def isolated_host(tmp_path, monkeypatch):
    """Point every search location into tmp_path and hide the real PATH."""
    app_dir = tmp_path / "app"
    app_dir.mkdir()
    monkeypatch.setattr(locator, "application_dir", lambda: app_dir)
    monkeypatch.delenv(locator.PROGRAM_FILES_64_ENV, raising=False)
    monkeypatch.delenv(locator.PROGRAM_FILES_32_ENV, raising=False)
    monkeypatch.setattr(locator.shutil, "which", lambda name: None)
    return tmp_path


@pytest.fixture
def checked_paths(monkeypatch):
    """Record every path the locator checks; fail if the PATH lookup runs."""
    checked = []
    original = locator._is_candidate

    def recording_check(path):
        checked.append(path)
        return original(path)

    def which_must_not_run(name):
        pytest.fail("PATH lookup should not run after a hit")

    monkeypatch.setattr(locator, "_is_candidate", recording_check)
    monkeypatch.setattr(locator.shutil, "which", which_must_not_run)
    return checked


@pytest.mark.unit
def test_found_next_to_application(isolated_host, checked_paths):
    exe = _touch(isolated_host / "app" / EXE)

    assert locate_executable() == exe.resolve()
    # The first hit ends the search
    assert checked_paths == [isolated_host / "app" / EXE]


@pytest.mark.unit
def test_found_in_application_subdirectory(isolated_host, checked_paths, monkeypatch):
    exe = _touch(isolated_host / "app" / "wkhtmltopdf" / EXE)
    # A later candidate also exists but must not win
    pf64 = isolated_host / "pf64"
    _touch(pf64 / "wkhtmltopdf" / "bin" / EXE)
    monkeypatch.setenv(locator.PROGRAM_FILES_64_ENV, str(pf64))

    assert locate_executable() == exe.resolve()
    assert checked_paths == [isolated_host / "app" / EXE, isolated_host / "app" / "wkhtmltopdf" / EXE]


@pytest.mark.unit
def test_program_files_64_stops_search(isolated_host, checked_paths, monkeypatch):
    """A hit under ProgramW6432 is returned and nothing after it is checked."""
    pf64 = isolated_host / "pf64"
    pf32 = isolated_host / "pf32"
    exe = _touch(pf64 / "wkhtmltopdf" / "bin" / EXE)
    _touch(pf32 / "wkhtmltopdf" / "bin" / EXE)
    monkeypatch.setenv(locator.PROGRAM_FILES_64_ENV, str(pf64))
    monkeypatch.setenv(locator.PROGRAM_FILES_32_ENV, str(pf32))

    assert locate_executable() == exe.resolve()
    assert checked_paths == [
        isolated_host / "app" / EXE,
        isolated_host / "app" / "wkhtmltopdf" / EXE,
        pf64 / "wkhtmltopdf" / "bin" / EXE,
    ]


@pytest.mark.unit
def test_program_files_32_used_when_64_missing(isolated_host, monkeypatch):
    pf32 = isolated_host / "pf32"
    exe = _touch(pf32 / "wkhtmltopdf" / "bin" / EXE)
    monkeypatch.setenv(locator.PROGRAM_FILES_64_ENV, str(isolated_host / "pf64"))
    monkeypatch.setenv(locator.PROGRAM_FILES_32_ENV, str(pf32))

    assert locate_executable() == exe.resolve()


@pytest.mark.unit
def test_empty_environment_variables_are_skipped(isolated_host, monkeypatch):
    monkeypatch.setenv(locator.PROGRAM_FILES_64_ENV, "")

    candidates = list(iter_candidate_paths())

    assert candidates[:2] == [isolated_host / "app" / EXE, isolated_host / "app" / "wkhtmltopdf" / EXE]
    # An empty value would otherwise produce a cwd-relative wkhtmltopdf/bin/<exe>
    assert Path("wkhtmltopdf") / "bin" / EXE not in candidates


@pytest.mark.unit
def test_found_on_path(isolated_host, monkeypatch):
    exe = _touch(isolated_host / "usr" / "bin" / EXE)
    monkeypatch.setattr(locator.shutil, "which", lambda name: str(exe))

    assert locate_executable() == exe.resolve()


@pytest.mark.unit
def test_directory_is_not_an_executable(isolated_host):
    (isolated_host / "app" / EXE).mkdir()

    with pytest.raises(ExecutableNotFoundError):
        locate_executable()


@pytest.mark.unit
def test_not_found_lists_searched_locations(isolated_host, monkeypatch):
    monkeypatch.setenv(locator.PROGRAM_FILES_64_ENV, str(isolated_host / "pf64"))

    with pytest.raises(ExecutableNotFoundError) as exc_info:
        locate_executable()

    error = exc_info.value
    assert "Unable to locate wkhtmltopdf executable" in str(error)
    assert "explicitly" in str(error)
    assert error.searched[0] == str(isolated_host / "app" / EXE)
    assert str(isolated_host / "pf64" / "wkhtmltopdf" / "bin" / EXE) in error.searched


@pytest.mark.unit
def test_not_found_is_a_file_not_found_error(isolated_host):
    with pytest.raises(FileNotFoundError):
        locate_executable()


@pytest.mark.unit
def test_custom_executable_name(isolated_host):
    exe = _touch(isolated_host / "app" / "wkhtmltopdf-0.12")
    assert locate_executable("wkhtmltopdf-0.12") == exe.resolve()
