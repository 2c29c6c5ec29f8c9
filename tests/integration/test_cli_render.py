"""
Integration tests for the `render` CLI command with a fake wkhtmltopdf.
"""

import os

import pytest
from typer.testing import CliRunner

import render_pdf

skip_on_windows = pytest.mark.skipif(os.name == "nt", reason="requires POSIX shebang scripts")

pytestmark = [pytest.mark.integration, skip_on_windows]

runner = CliRunner()


@pytest.fixture(autouse=True)
def logs_in_tmp(tmp_path, monkeypatch):
    monkeypatch.setattr(render_pdf, "LOGS_PATH", tmp_path / "logs")


def test_render_to_file(fake_wkhtmltopdf, tmp_path):
    fake = fake_wkhtmltopdf(payload=b"%PDF-1.4 cli")
    destination = tmp_path / "out.pdf"

    result = runner.invoke(
        render_pdf.app,
        ["render", "https://example.com/", str(destination), "--exe", str(fake.path), "--top", "0"],
    )

    assert result.exit_code == 0, result.output
    assert destination.read_bytes() == b"%PDF-1.4 cli"
    assert fake.invocation["argv"] == ["-q", "-T", "0", "https://example.com/", str(destination)]
    assert "Render succeeded" in result.output
    # Not a real PDF, so the page count can't be read
    assert "Pages: unknown" in result.output
    assert list((tmp_path / "logs").glob("render_*/render.log"))


def test_render_failure_exit_code(fake_wkhtmltopdf, tmp_path):
    fake = fake_wkhtmltopdf(payload=b"", stderr="Error: Failed to load page\nExit with code 1", exit_code=1)

    result = runner.invoke(
        render_pdf.app,
        ["render", "https://bad.invalid/", str(tmp_path / "out.pdf"), "--exe", str(fake.path)],
    )

    assert result.exit_code == 1
    assert "RenderFailedError" in result.output
    assert "Failed to load page" in result.output


def test_render_with_preset(fake_wkhtmltopdf, tmp_path):
    fake = fake_wkhtmltopdf(payload=b"%PDF")

    result = runner.invoke(
        render_pdf.app,
        [
            "render",
            "page.html",
            str(tmp_path / "out.pdf"),
            "--exe",
            str(fake.path),
            "--preset",
            "layout_landscape",
            "--preset",
            "scripts_none",
        ],
    )

    assert result.exit_code == 0, result.output
    assert fake.invocation["argv"][1:5] == ["--orientation", "Landscape", "--javascript-delay", "0"]


def test_relative_paths_resolve_against_working_directory(fake_wkhtmltopdf, tmp_path, monkeypatch):
    fake = fake_wkhtmltopdf(payload=b"%PDF-1.4 cli")
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    work_dir = work_dir.resolve()
    (work_dir / "page.html").write_text("<html><body>hi</body></html>")
    monkeypatch.chdir(work_dir)

    result = runner.invoke(render_pdf.app, ["render", "page.html", "out.pdf", "--exe", str(fake.path)])

    assert result.exit_code == 0, result.output
    assert (work_dir / "out.pdf").read_bytes() == b"%PDF-1.4 cli"
    assert fake.invocation["argv"] == ["-q", str(work_dir / "page.html"), str(work_dir / "out.pdf")]
    assert f"PDF: {work_dir / 'out.pdf'}" in result.output
