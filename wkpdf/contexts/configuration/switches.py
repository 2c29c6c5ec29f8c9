"""
Switch encoding for wkhtmltopdf.

Translates RenderOptions into wkhtmltopdf command-line switches, emitting a
switch only for fields that differ from DEFAULT_OPTIONS. Fields are compared
explicitly, one by one, so the switch order always follows the field order
of RenderOptions.

Two renderings of the same switches are provided:
    build_switches: display tokens, one per switch (e.g. '-B 5', '--username "bob"')
    switch_arguments: flat argument vector for process creation (e.g. '-B', '5')
"""

from typing import List, Optional, Tuple

from wkpdf.contexts.configuration.options import DEFAULT_OPTIONS, PageOrientation, RenderOptions

# (flag, value, quoted) - value is None for valueless switches
Switch = Tuple[str, Optional[str], bool]


def _encode(options: Optional[RenderOptions]) -> List[Switch]:
    """Collect the non-default switches of options in field order."""
    if options is None:
        return []

    defaults = DEFAULT_OPTIONS
    switches: List[Switch] = []

    if options.username != defaults.username:
        switches.append(("--username", str(options.username), True))

    if options.password != defaults.password:
        switches.append(("--password", str(options.password), True))

    if options.bottom_margin != defaults.bottom_margin:
        switches.append(("-B", str(int(options.bottom_margin)), False))

    if options.left_margin != defaults.left_margin:
        switches.append(("-L", str(int(options.left_margin)), False))

    if options.right_margin != defaults.right_margin:
        switches.append(("-R", str(int(options.right_margin)), False))

    if options.top_margin != defaults.top_margin:
        switches.append(("-T", str(int(options.top_margin)), False))

    if options.orientation != defaults.orientation:
        switches.append(("--orientation", PageOrientation(options.orientation).value, False))

    if options.use_print_media_type != defaults.use_print_media_type:
        flag = "--print-media-type" if options.use_print_media_type else "--no-print-media-type"
        switches.append((flag, None, False))

    if options.disable_smart_shrinking != defaults.disable_smart_shrinking:
        flag = (
            "--disable-smart-shrinking"
            if options.disable_smart_shrinking
            else "--enable-smart-shrinking"
        )
        switches.append((flag, None, False))

    if options.javascript_delay_ms != defaults.javascript_delay_ms:
        switches.append(("--javascript-delay", str(int(options.javascript_delay_ms)), False))

    return switches


def build_switches(options: Optional[RenderOptions]) -> List[str]:
    """
    Encode options as wkhtmltopdf switch tokens.

    Text values are wrapped in double quotes without escaping embedded quotes.

    Args:
        options: Render options (None means all defaults)

    Returns:
        One token per non-default field, in field order. Empty if all defaults.

    Example:
        >>> build_switches(RenderOptions(bottom_margin=5, orientation=PageOrientation.LANDSCAPE))
        ['-B 5', '--orientation Landscape']
    """
    tokens = []
    for flag, value, quoted in _encode(options):
        if value is None:
            tokens.append(flag)
        elif quoted:
            tokens.append(f'{flag} "{value}"')
        else:
            tokens.append(f"{flag} {value}")
    return tokens


def switch_arguments(options: Optional[RenderOptions]) -> List[str]:
    """
    Encode options as a flat argument vector for subprocess.

    Same switches and order as build_switches(), but each flag and value is a
    separate argument and text values are passed unquoted (no shell involved).
    """
    arguments = []
    for flag, value, _ in _encode(options):
        arguments.append(flag)
        if value is not None:
            arguments.append(value)
    return arguments
