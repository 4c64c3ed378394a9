import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .viewport import Viewport


@dataclass(frozen=True)
class GridLayout:
    spacing: float
    vertical: Tuple[float, ...]  # world x of each vertical line
    horizontal: Tuple[float, ...]  # world y of each horizontal line
    show_x_axis: bool  # world y = 0 is inside the window
    show_y_axis: bool  # world x = 0 is inside the window


def grid_spacing(viewport: Viewport) -> float:
    """Power of ten giving roughly ten to a hundred lines across the x range."""
    return 10.0 ** math.floor(math.log10(viewport.width / 10))


def grid_lines(lo: float, hi: float, spacing: float) -> Tuple[float, ...]:
    """Every multiple of ``spacing`` inside ``[lo, hi]``."""
    first = math.ceil(lo / spacing)
    last = math.floor(hi / spacing)
    if last < first:
        return ()
    # Far from the origin the indices exceed int64
    return tuple(float(v) for v in np.arange(float(first), float(last) + 1) * spacing)


def compute_grid(viewport: Viewport) -> GridLayout:
    """Grid for ``viewport``. Both axes share the x spacing, so a window much
    taller than it is wide yields many horizontal lines (see ``MAX_ASPECT``
    in ``graphcalc.config``)."""
    spacing = grid_spacing(viewport)
    return GridLayout(
        spacing=spacing,
        vertical=grid_lines(viewport.x_min, viewport.x_max, spacing),
        horizontal=grid_lines(viewport.y_min, viewport.y_max, spacing),
        show_x_axis=viewport.y_min <= 0 <= viewport.y_max,
        show_y_axis=viewport.x_min <= 0 <= viewport.x_max,
    )
