"""Sweep a function across the viewport and split it into drawable runs.

A sample is dropped (and the current run closed) when the evaluator fails,
returns a non-finite value, or the point lands above or below the surface.
Dropping off-screen samples is what keeps poles such as ``tan(x)`` or
``1/x`` from being joined by a near-vertical line; it will also break a
curve that merely leaves the window and comes back, which is accepted.
"""

import logging
from typing import List

import numpy as np

from .evaluator import ExpressionEvaluator, evaluate_at
from .viewport import CoordinateTransform, ScreenPoint

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

Segment = List[ScreenPoint]


def sample_xs(transform: CoordinateTransform) -> np.ndarray:
    """One world x per pixel column, both window edges included (W + 1 values)."""
    v = transform.viewport
    step = v.width / transform.width
    return v.x_min + np.arange(transform.width + 1) * step


def sample_function(expression: str, transform: CoordinateTransform,
                    evaluator: ExpressionEvaluator) -> List[Segment]:
    segments: List[Segment] = []
    current: Segment = []

    for x in sample_xs(transform):
        x = float(x)
        y = evaluate_at(evaluator, expression, x)
        if y is not None:
            point = transform.world_to_screen(x, y)
            if transform.on_screen_y(point.y):
                current.append(point)
                continue

        # Gap: failure, non-finite or off-screen
        if current:
            segments.append(current)
            current = []

    if current:
        segments.append(current)

    logger.debug("sampled %r: %d segment(s), %d point(s)",
                 expression, len(segments), sum(len(s) for s in segments))
    return segments
