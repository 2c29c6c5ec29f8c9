#!/usr/bin/env python3
"""
PDF Rendering CLI

Renders web pages to PDF with wkhtmltopdf using the rendering context.

Commands:
    render   - Render a URL to a PDF file (or to stdout with '-')
    locate   - Show which wkhtmltopdf executable would be used
    switches - Show the wkhtmltopdf switches for the given options (dry run)

Examples:\n

    render_pdf.py render https://example.com/ example.pdf             # Default options

    render_pdf.py render https://example.com/ out.pdf -p margins_none # Apply a preset

    render_pdf.py render page.html - --landscape > page.pdf           # PDF to stdout

    render_pdf.py locate                                               # Find wkhtmltopdf

    render_pdf.py switches --top 0 --print-media-type                  # Preview switches
"""

import os
import sys
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from wkpdf.contexts.configuration import (
    RenderOptions,
    apply_presets,
    build_switches,
    options_from_dict,
)
from wkpdf.contexts.discovery.logger import setup_discovery_logger
from wkpdf.contexts.rendering import PdfGenerator, format_command_line
from wkpdf.contexts.rendering.logger import format_stderr_lines, setup_rendering_logger
from wkpdf.exceptions import ExecutableNotFoundError
from wkpdf.utils import now, page_count

load_dotenv()
WKHTMLTOPDF_PATH = os.getenv("WKHTMLTOPDF_PATH")
LOGS_PATH = Path(os.getenv("WKPDF_LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Render web pages to PDF with wkhtmltopdf",
    add_completion=False,
    invoke_without_command=True,
)

# Shared option declarations for `render` and `switches`
PresetOption = Annotated[
    Optional[List[str]],
    typer.Option("--preset", "-p", help="Named preset to apply (repeatable, later wins)"),
]
LandscapeOption = Annotated[
    Optional[bool],
    typer.Option("--landscape/--portrait", help="Page orientation"),
]
MarginOption = Annotated[Optional[int], typer.Option(help="Margin in mm")]
PrintMediaOption = Annotated[
    Optional[bool],
    typer.Option("--print-media-type/--no-print-media-type", help="Use print media type"),
]
SmartShrinkingOption = Annotated[
    Optional[bool],
    typer.Option(
        "--disable-smart-shrinking/--enable-smart-shrinking",
        help="Disable wkhtmltopdf smart shrinking",
    ),
]
JavascriptDelayOption = Annotated[
    Optional[int],
    typer.Option("--javascript-delay", help="Wait for javascript to finish (ms)"),
]
UsernameOption = Annotated[Optional[str], typer.Option(help="HTTP authentication username")]
PasswordOption = Annotated[Optional[str], typer.Option(help="HTTP authentication password")]
ExeOption = Annotated[
    Optional[Path],
    typer.Option("--exe", help="wkhtmltopdf executable (default: WKHTMLTOPDF_PATH or search)"),
]


def build_options(
    presets: Optional[List[str]] = None,
    landscape: Optional[bool] = None,
    top: Optional[int] = None,
    bottom: Optional[int] = None,
    left: Optional[int] = None,
    right: Optional[int] = None,
    print_media_type: Optional[bool] = None,
    disable_smart_shrinking: Optional[bool] = None,
    javascript_delay: Optional[int] = None,
    username: Optional[str] = None,
    password: Optional[str] = None,
) -> RenderOptions:
    """Apply presets first, then any explicitly given flag on top."""
    options = apply_presets(RenderOptions(), presets or [])

    overrides = {
        "orientation": None if landscape is None else ("Landscape" if landscape else "Portrait"),
        "top_margin": top,
        "bottom_margin": bottom,
        "left_margin": left,
        "right_margin": right,
        "use_print_media_type": print_media_type,
        "disable_smart_shrinking": disable_smart_shrinking,
        "javascript_delay_ms": javascript_delay,
        "username": username,
        "password": password,
    }
    given = {key: value for key, value in overrides.items() if value is not None}
    return options_from_dict(given, base=options)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    url: Annotated[str, typer.Argument(help="URL or local HTML file to render")],
    output: Annotated[str, typer.Argument(help="Output PDF path, or '-' for stdout")],
    presets: PresetOption = None,
    landscape: LandscapeOption = None,
    top: MarginOption = None,
    bottom: MarginOption = None,
    left: MarginOption = None,
    right: MarginOption = None,
    print_media_type: PrintMediaOption = None,
    disable_smart_shrinking: SmartShrinkingOption = None,
    javascript_delay: JavascriptDelayOption = None,
    username: UsernameOption = None,
    password: PasswordOption = None,
    exe: ExeOption = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log wkhtmltopdf stderr even on success"),
    ] = False,
):
    """
    Render a URL to PDF.

    Examples:\n

        $ render_pdf.py render https://example.com/ example.pdf

        $ render_pdf.py render https://example.com/ out.pdf -p layout_landscape -p margins_none

        $ render_pdf.py render https://example.com/ - > example.pdf
    """
    try:
        options = build_options(
            presets=presets,
            landscape=landscape,
            top=top,
            bottom=bottom,
            left=left,
            right=right,
            print_media_type=print_media_type,
            disable_smart_shrinking=disable_smart_shrinking,
            javascript_delay=javascript_delay,
            username=username,
            password=password,
        )
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    generator = PdfGenerator(executable_path=exe or WKHTMLTOPDF_PATH, verbose=verbose)

    log_dir = LOGS_PATH / f"render_{now()}"
    setup_rendering_logger(log_dir, executable=exe or WKHTMLTOPDF_PATH)

    # wkhtmltopdf runs in its own directory; anchor local files to ours
    if Path(url).is_file():
        url = str(Path(url).resolve())

    to_stdout = output == "-"
    typer.secho(f"\nRendering: {url}", fg=typer.colors.BLUE, bold=True, err=True)

    if to_stdout:
        result = generator.render_to_bytes(url, options)
    else:
        result = generator.render_to_file(url, output, options)

    typer.echo("", err=True)
    if result.success:
        typer.secho("✓ Render succeeded", fg=typer.colors.GREEN, bold=True, err=True)
        if to_stdout:
            sys.stdout.buffer.write(result.pdf_bytes)
            sys.stdout.buffer.flush()
            pages = page_count(result.pdf_bytes)
            typer.echo(f"  Size: {len(result.pdf_bytes)} bytes", err=True)
        else:
            pages = page_count(result.output_path)
            typer.echo(f"  PDF: {result.output_path}", err=True)
        typer.echo(f"  Pages: {pages if pages is not None else 'unknown'}", err=True)
    else:
        typer.secho(
            f"✗ Render failed: {type(result.error).__name__}", fg=typer.colors.RED, bold=True, err=True
        )
        if isinstance(result.error, ExecutableNotFoundError):
            typer.secho(f"  {result.error}", fg=typer.colors.RED, err=True)
            typer.echo("  Set WKHTMLTOPDF_PATH or pass --exe.", err=True)
        else:
            for line in format_stderr_lines(result.stderr) or ["<no diagnostic output>"]:
                typer.secho(f"  - {line}", fg=typer.colors.RED, err=True)

    typer.echo(f"  Log: {log_dir / 'render.log'}", err=True)
    typer.echo("", err=True)

    raise typer.Exit(code=0 if result.success else 1)


@app.command("locate")
def locate_command(exe: ExeOption = None):
    """
    Show the wkhtmltopdf executable that would be used.

    An explicit --exe (or WKHTMLTOPDF_PATH) is reported as-is, without a search.
    """
    setup_discovery_logger(LOGS_PATH / f"locate_{now()}")
    generator = PdfGenerator(executable_path=exe or WKHTMLTOPDF_PATH)

    try:
        executable = generator.executable_path
    except ExecutableNotFoundError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True, err=True)
        typer.echo("\nSearched:", err=True)
        for candidate in e.searched:
            typer.echo(f"  - {candidate}", err=True)
        raise typer.Exit(code=1)

    typer.echo(str(executable))
    raise typer.Exit(code=0)


@app.command("switches")
def switches_command(
    presets: PresetOption = None,
    landscape: LandscapeOption = None,
    top: MarginOption = None,
    bottom: MarginOption = None,
    left: MarginOption = None,
    right: MarginOption = None,
    print_media_type: PrintMediaOption = None,
    disable_smart_shrinking: SmartShrinkingOption = None,
    javascript_delay: JavascriptDelayOption = None,
    username: UsernameOption = None,
    password: PasswordOption = None,
    url: Annotated[str, typer.Option(help="URL shown in the command preview")] = "<url>",
):
    """
    Show the switches wkhtmltopdf would receive, without running it.

    Only options that differ from wkhtmltopdf defaults produce switches.

    Examples:\n

        $ render_pdf.py switches --landscape --top 0

        $ render_pdf.py switches -p margins_wide -p scripts_slow
    """
    try:
        options = build_options(
            presets=presets,
            landscape=landscape,
            top=top,
            bottom=bottom,
            left=left,
            right=right,
            print_media_type=print_media_type,
            disable_smart_shrinking=disable_smart_shrinking,
            javascript_delay=javascript_delay,
            username=username,
            password=password,
        )
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    switches = build_switches(options)
    if not switches:
        typer.echo("(all defaults - no switches)")
    for switch in switches:
        if switch.startswith("--password "):
            switch = '--password "***"'
        typer.echo(switch)

    command = ["wkhtmltopdf", *PdfGenerator.build_command(url, options=options)]
    typer.echo(f"\n{format_command_line(command)}")


if __name__ == "__main__":
    app()
