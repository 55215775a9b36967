"""TriCheck - geometría de paths para un checkbox tri-estado.

API pública mínima: `PathConfig` + `path_for_box_outline` / `path_for_state`.
"""

from __future__ import annotations

from tricheck.core.models import BoxType, CheckState, CheckmarkProperties, MarkType, PathConfig, RatioPair
from tricheck.core.version import APP_VERSION
from tricheck.paths.path import Path
from tricheck.paths.presets import CheckboxPathPresets, path_for_box_outline, path_for_state

__version__ = APP_VERSION

__all__ = [
    "BoxType",
    "CheckState",
    "CheckmarkProperties",
    "CheckboxPathPresets",
    "MarkType",
    "Path",
    "PathConfig",
    "RatioPair",
    "path_for_box_outline",
    "path_for_state",
]
