"""Pytest fixtures and configuration."""

import json
import stat
import sys
from pathlib import Path

import pytest
from loguru import logger

# Add scripts directory to path for CLI imports
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

FAKE_WKHTMLTOPDF = """#!{python}
import json
import os
import sys

with open({record!r}, "w") as f:
    json.dump({{"argv": sys.argv[1:], "cwd": os.getcwd()}}, f)

destination = sys.argv[-1]
payload = {payload!r}
if destination == "-":
    sys.stdout.buffer.write(payload)
elif payload:
    with open(destination, "wb") as f:
        f.write(payload)

sys.stderr.write({stderr!r})
sys.exit({exit_code})
"""


class FakeWkhtmltopdf:
    """Handle to a generated fake executable and the invocation it recorded."""

    def __init__(self, path: Path, record_path: Path):
        self.path = path
        self.record_path = record_path

    @property
    def invocation(self) -> dict:
        return json.loads(self.record_path.read_text())


@pytest.fixture
def fake_wkhtmltopdf(tmp_path):
    """
    Factory for a fake wkhtmltopdf script.

    The script writes `payload` to stdout (destination '-') or to the
    destination file, writes `stderr`, exits with `exit_code`, and records
    its argv and working directory.
    """

    def _make(payload: bytes = b"", stderr: str = "", exit_code: int = 0, name: str = "wkhtmltopdf"):
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        exe = bin_dir / name
        record = tmp_path / f"{name}.invocation.json"
        exe.write_text(
            FAKE_WKHTMLTOPDF.format(
                python=sys.executable,
                record=str(record),
                payload=payload,
                stderr=stderr,
                exit_code=exit_code,
            )
        )
        exe.chmod(exe.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return FakeWkhtmltopdf(exe, record)

    return _make


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by setup_logger() so tests don't leak file handles."""
    yield
    logger.remove()
