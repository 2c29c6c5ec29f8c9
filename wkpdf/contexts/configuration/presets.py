"""
Render Preset Resolution

Applies named configuration presets to RenderOptions. Presets are composable
and can override each other, allowing flexible combination of margins,
layout and script timing.

Examples:
    # Apply multiple presets (later overrides earlier)
    >>> apply_presets(RenderOptions(), ["margins_none", "layout_landscape"])

    # Mix base preset with override
    >>> apply_presets(options, ["margins_wide", "margins_narrow", "scripts_slow"])
"""

import os
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from wkpdf.contexts.configuration.options import PageOrientation, RenderOptions

load_dotenv()
DEFAULT_PRESETS_PATH = Path(__file__).resolve().parents[2] / "configs" / "render_presets.yaml"
RENDER_PRESETS_PATH = Path(os.getenv("WKPDF_PRESETS_PATH") or DEFAULT_PRESETS_PATH)

OPTION_FIELDS = [f.name for f in fields(RenderOptions)]


def load_render_presets(config_path: Optional[Path] = None) -> Dict[str, Dict[str, Any]]:
    """
    Load render_presets.yaml config file and flatten to single-level dict.

    Collapses nested structure: margins.none -> margins_none

    Args:
        config_path: Optional path to config file (defaults to WKPDF_PRESETS_PATH env variable)

    Returns:
        Flattened dict mapping preset names to option overrides
        Example: {"margins_none": {"top_margin": 0, ...}, "layout_landscape": {...}}
    """
    if config_path is None:
        config_path = RENDER_PRESETS_PATH

    nested = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    flattened = {}
    for category, presets in nested.items():
        for name, config in presets.items():
            flattened[f"{category}_{name}"] = config

    return flattened


def options_from_dict(data: Mapping[str, Any], base: Optional[RenderOptions] = None) -> RenderOptions:
    """
    Build RenderOptions from a mapping of field names to values.

    Args:
        data: Field overrides (e.g., {"orientation": "Landscape", "top_margin": 0})
        base: Options to start from (default: all defaults)

    Returns:
        New RenderOptions with the overrides applied

    Raises:
        ValueError: If a key is not a RenderOptions field or orientation is unknown
    """
    unknown = [key for key in data if key not in OPTION_FIELDS]
    if unknown:
        raise ValueError(f"Unknown render option(s): {unknown}. Valid options: {OPTION_FIELDS}")

    overrides = dict(data)
    if "orientation" in overrides:
        overrides["orientation"] = PageOrientation(overrides["orientation"])

    return replace(base or RenderOptions(), **overrides)


def apply_presets(
    options: Optional[RenderOptions],
    preset_names: List[str],
    config_path: Optional[Path] = None,
) -> RenderOptions:
    """
    Apply named presets to render options.

    Presets are applied in order, with later presets overriding earlier ones.

    Args:
        options: Starting options (None means all defaults)
        preset_names: Preset names to apply (e.g., ["margins_none", "layout_landscape"])
        config_path: Optional path to render_presets.yaml (defaults to WKPDF_PRESETS_PATH)

    Returns:
        New RenderOptions with presets applied

    Raises:
        ValueError: If a preset is not found or contains an unknown option
    """
    presets_dict = load_render_presets(config_path)

    result = options or RenderOptions()
    for preset_name in preset_names:
        if preset_name not in presets_dict:
            available = list(presets_dict.keys())
            raise ValueError(f"Preset '{preset_name}' not found. Available presets: {available}")

        result = options_from_dict(presets_dict[preset_name], base=result)

    return result
