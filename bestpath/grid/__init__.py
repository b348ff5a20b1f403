"""Grid-side planning stages: normalization, filling and coordinate bookkeeping."""

from .transform import CoordinateMap, CoordinateTransform
from .normalizer import NormalizedGrid, coerce_known_cells, normalize_known_cells
from .filler import (
    NEIGHBOR_OFFSETS,
    FillReport,
    estimate_from_neighbors,
    fill_unknown_cells,
    iter_fill_order,
)
from .render import DEFAULT_TERRAIN_SYMBOLS, render_matrix

__all__ = [
    "CoordinateMap",
    "CoordinateTransform",
    "NormalizedGrid",
    "coerce_known_cells",
    "normalize_known_cells",
    "NEIGHBOR_OFFSETS",
    "FillReport",
    "estimate_from_neighbors",
    "fill_unknown_cells",
    "iter_fill_order",
    "DEFAULT_TERRAIN_SYMBOLS",
    "render_matrix",
]
