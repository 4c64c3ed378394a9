"""Frame building and painting.

``build_frame`` is a pure function of the viewport and the function list; the
result is a flat, back-to-front list of draw commands that any surface with
``fill_rect`` and ``stroke_path`` can paint.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple, Union

from .config import PlotterConfig
from .evaluator import ExpressionEvaluator
from .functions import FunctionEntry
from .grid import compute_grid
from .sampler import sample_function
from .viewport import CoordinateTransform, Viewport

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class FillRect:
    x: float
    y: float
    width: float
    height: float
    color: str


@dataclass(frozen=True)
class StrokePath:
    points: Tuple[Tuple[float, float], ...]
    color: str
    width: float


DrawCommand = Union[FillRect, StrokePath]


class Surface(Protocol):
    def clear(self) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None: ...

    def stroke_path(self, points: Sequence[Tuple[float, float]], color: str, width: float) -> None: ...


def _grid_commands(transform: CoordinateTransform, cfg: PlotterConfig) -> List[DrawCommand]:
    grid = compute_grid(transform.viewport)
    w, h = cfg.width, cfg.height
    commands: List[DrawCommand] = []

    for x in grid.vertical:
        px = transform.world_to_screen(x, 0).x
        commands.append(StrokePath(((px, 0), (px, h)), cfg.grid_color, cfg.grid_thickness))

    for y in grid.horizontal:
        py = transform.world_to_screen(0, y).y
        commands.append(StrokePath(((0, py), (w, py)), cfg.grid_color, cfg.grid_thickness))

    # Axes go over the grid
    origin = transform.world_to_screen(0, 0)
    if grid.show_x_axis:
        commands.append(StrokePath(((0, origin.y), (w, origin.y)), cfg.axis_color, cfg.axis_thickness))
    if grid.show_y_axis:
        commands.append(StrokePath(((origin.x, 0), (origin.x, h)), cfg.axis_color, cfg.axis_thickness))

    logger.debug("grid spacing=%g lines=%d+%d", grid.spacing, len(grid.vertical), len(grid.horizontal))
    return commands


def build_frame(viewport: Viewport, functions: Iterable[FunctionEntry], evaluator: ExpressionEvaluator,
                config: PlotterConfig = PlotterConfig()) -> List[DrawCommand]:
    transform = CoordinateTransform(viewport, config.width, config.height)

    commands: List[DrawCommand] = [FillRect(0, 0, config.width, config.height, config.background)]
    commands.extend(_grid_commands(transform, config))

    for func in functions:
        if not func.visible:
            continue
        for segment in sample_function(func.expression, transform, evaluator):
            commands.append(StrokePath(tuple(segment), func.color, config.curve_thickness))

    return commands


def paint(commands: Iterable[DrawCommand], surface: Optional[Surface]) -> bool:
    """Replay ``commands`` onto ``surface``. Returns False when there is nothing to paint on."""
    if surface is None:
        logger.debug("no drawing surface attached, skipping paint")
        return False

    surface.clear()
    for cmd in commands:
        if isinstance(cmd, FillRect):
            surface.fill_rect(cmd.x, cmd.y, cmd.width, cmd.height, cmd.color)
        else:
            surface.stroke_path(cmd.points, cmd.color, cmd.width)
    return True
