"""Pointer-driven pan, zoom and hover.

The controller is a small state machine (``idle`` / ``dragging``) that is
only ever changed through the named event methods below. Each method returns
True when the viewport changed, i.e. when the caller has to repaint.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional

from .config import PlotterConfig
from .errors import InvalidViewportError
from .evaluator import ExpressionEvaluator, evaluate_at
from .functions import FunctionEntry, visible_functions
from .viewport import CoordinateTransform, ScreenPoint, Viewport, WorldPoint

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class Mode(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass
class Tooltip:
    screen_x: float = 0.0
    screen_y: float = 0.0
    visible: bool = False
    lines: List[str] = field(default_factory=list)


@dataclass
class WheelEvent:
    x: float
    y: float
    delta: float  # > 0 scrolls away from the user (zoom out), < 0 towards (zoom in)
    default_prevented: bool = False

    def prevent_default(self):
        self.default_prevented = True


@dataclass
class InteractionState:
    viewport: Viewport
    mode: Mode = Mode.IDLE
    last_pointer: ScreenPoint = ScreenPoint(0.0, 0.0)
    tooltip: Tooltip = field(default_factory=Tooltip)

    @property
    def dragging(self) -> bool:
        return self.mode is Mode.DRAGGING


def format_value(value: float, decimals: int = 3) -> str:
    # Adding 0.0 turns -0.0 into 0.0
    return f"{value + 0.0:.{decimals}f}"


def hover_lines(world: WorldPoint, functions: Iterable[FunctionEntry], evaluator: ExpressionEvaluator,
                decimals: int = 3) -> List[str]:
    lines = [f"x = {format_value(world.x, decimals)}", f"y = {format_value(world.y, decimals)}"]
    for func in visible_functions(functions):
        y = evaluate_at(evaluator, func.expression, world.x)
        lines.append("undefined" if y is None else f"f(x) = {format_value(y, decimals)}")
    return lines


class InteractionController:
    def __init__(self, evaluator: ExpressionEvaluator, config: PlotterConfig = PlotterConfig(),
                 viewport: Optional[Viewport] = None):
        self.cfg = config
        self.evaluator = evaluator
        self.state = InteractionState(viewport=viewport or Viewport.from_window(config.default_window))

    # --- Derived views of the state ---
    @property
    def viewport(self) -> Viewport:
        return self.state.viewport

    @property
    def tooltip(self) -> Tooltip:
        return self.state.tooltip

    @property
    def transform(self) -> CoordinateTransform:
        return CoordinateTransform(self.state.viewport, self.cfg.width, self.cfg.height)

    def _commit(self, make_viewport: Callable[[], Viewport]) -> bool:
        try:
            new_viewport = make_viewport()
        except InvalidViewportError as e:
            logger.warning("rejected viewport update: %s", e)
            return False
        changed = new_viewport != self.state.viewport
        self.state.viewport = new_viewport
        return changed

    # --- Events ---
    def pointer_down(self, x: float, y: float) -> bool:
        self.state.mode = Mode.DRAGGING
        self.state.last_pointer = ScreenPoint(x, y)
        self.state.tooltip.visible = False
        return False

    def pointer_move(self, x: float, y: float, functions: Iterable[FunctionEntry] = ()) -> bool:
        if self.state.dragging:
            return self._pan_to(x, y)
        self._hover(x, y, functions)
        return False

    def pointer_up(self, x: Optional[float] = None, y: Optional[float] = None) -> bool:
        self.state.mode = Mode.IDLE
        return False

    def pointer_leave(self) -> bool:
        self.state.mode = Mode.IDLE
        self.state.tooltip.visible = False
        return False

    def wheel(self, event: WheelEvent) -> bool:
        event.prevent_default()
        if event.delta > 0:
            factor = self.cfg.zoom_out_factor
        elif event.delta < 0:
            factor = self.cfg.zoom_in_factor
        else:
            return False

        anchor = self.transform.screen_to_world(event.x, event.y)
        return self._commit(lambda: self.state.viewport.scaled_about(anchor, factor))

    def reset_view(self) -> bool:
        return self._commit(lambda: Viewport.from_window(self.cfg.default_window))

    # --- Helpers ---
    def _pan_to(self, x: float, y: float) -> bool:
        last = self.state.last_pointer
        t = self.transform
        world_dx = (x - last.x) * t.world_per_pixel_x
        world_dy = (y - last.y) * t.world_per_pixel_y
        self.state.last_pointer = ScreenPoint(x, y)
        # Screen y points down, so dragging down moves the window up
        return self._commit(lambda: self.state.viewport.translated(-world_dx, world_dy))

    def _hover(self, x: float, y: float, functions: Iterable[FunctionEntry]):
        world = self.transform.screen_to_world(x, y)
        functions = list(functions)
        self.state.tooltip = Tooltip(
            screen_x=x,
            screen_y=y,
            visible=bool(visible_functions(functions)),
            lines=hover_lines(world, functions, self.evaluator, self.cfg.tooltip_decimals),
        )
