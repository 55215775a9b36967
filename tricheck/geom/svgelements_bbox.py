"""svgelements adapter for the bounding box of a generated path.

Used by the CLI report and by tests as an independent check of the
geometry: the path is serialized to an SVG `d` attribute and measured by
`svgelements`, which evaluates arc extremes on its own.
"""

from __future__ import annotations

from typing import Optional, Tuple

from svgelements import Path as SvgPath

from tricheck.paths.path import Path
from tricheck.render.exporter import path_to_svg_d

BBox = Tuple[float, float, float, float]


def compute_path_bbox(path: Path, *, precision: int = 6) -> Optional[BBox]:
    """Return (x0, y0, x1, y1) of `path`, or None for an empty path."""
    if path.is_empty:
        return None
    sp = SvgPath(path_to_svg_d(path, precision))
    b = sp.bbox()
    if b is None:
        return None
    return (float(b[0]), float(b[1]), float(b[2]), float(b[3]))
