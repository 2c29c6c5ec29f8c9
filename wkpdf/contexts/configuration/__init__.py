"""
Configuration Context

Responsibilities:
- Defines render options and their defaults
- Encodes options into wkhtmltopdf switches (default suppression, fixed order)
- Resolves named presets from YAML

Owns: RenderOptions, switch encoding, presets
Never: Touches the filesystem or spawns processes (presets only read their YAML)
"""

from wkpdf.contexts.configuration.options import DEFAULT_OPTIONS, PageOrientation, RenderOptions
from wkpdf.contexts.configuration.presets import (
    apply_presets,
    load_render_presets,
    options_from_dict,
)
from wkpdf.contexts.configuration.switches import build_switches, switch_arguments

__all__ = [
    # Options model
    "RenderOptions",
    "PageOrientation",
    "DEFAULT_OPTIONS",
    # Switch encoding
    "build_switches",
    "switch_arguments",
    # Presets
    "load_render_presets",
    "apply_presets",
    "options_from_dict",
]
